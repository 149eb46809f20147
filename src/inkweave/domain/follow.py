"""Outcomes of following a knot."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Union

from inkweave.domain.line import Choice, LineData

LineDataBuffer = List[LineData]


@dataclass(frozen=True, slots=True)
class NextDone:
    """The knot ran out of content."""


@dataclass(frozen=True, slots=True)
class NextDivert:
    """A divert line was read; the story should continue in ``target``."""

    target: str


@dataclass(frozen=True, slots=True)
class NextChoiceSet:
    """A choice set was reached; ``choices`` are the surviving options in order."""

    choices: List[Choice] = field(default_factory=list)


Next = Union[NextDone, NextDivert, NextChoiceSet]
