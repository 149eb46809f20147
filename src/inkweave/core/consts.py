"""Marker characters and reserved names of the story markup."""
from typing import FrozenSet

CHOICE_MARKER = "*"
STICKY_CHOICE_MARKER = "+"
GATHER_MARKER = "-"
DIVERT_MARKER = "->"
TAG_MARKER = "#"
GLUE_MARKER = "<>"
GLUE_MARKERS = (GLUE_MARKER, "~~")
KNOT_MARKER = "="

DONE_KNOT = "DONE"
END_KNOT = "END"
TERMINAL_KNOTS: FrozenSet[str] = frozenset({DONE_KNOT, END_KNOT})

ROOT_KNOT_NAME = "$ROOT$"

DEFAULT_MAX_DIVERT_DEPTH = 1000

__all__ = [
    "CHOICE_MARKER",
    "STICKY_CHOICE_MARKER",
    "GATHER_MARKER",
    "DIVERT_MARKER",
    "TAG_MARKER",
    "GLUE_MARKER",
    "GLUE_MARKERS",
    "KNOT_MARKER",
    "DONE_KNOT",
    "END_KNOT",
    "TERMINAL_KNOTS",
    "ROOT_KNOT_NAME",
    "DEFAULT_MAX_DIVERT_DEPTH",
]
