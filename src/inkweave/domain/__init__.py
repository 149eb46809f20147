"""Domain records: lines, choices, knot node trees and follow outcomes."""

from .follow import LineDataBuffer, Next, NextChoiceSet, NextDivert, NextDone
from .line import (
    REGULAR,
    Choice,
    Divert,
    LineData,
    LineKind,
    ParsedChoice,
    ParsedGather,
    ParsedLine,
    ParsedPlain,
    Regular,
)
from .nodes import ChoiceBranch, ChoiceSetNode, GatherNode, LineNode, Node, iter_lines

__all__ = [
    "LineDataBuffer",
    "Next",
    "NextChoiceSet",
    "NextDivert",
    "NextDone",
    "REGULAR",
    "Choice",
    "Divert",
    "LineData",
    "LineKind",
    "ParsedChoice",
    "ParsedGather",
    "ParsedLine",
    "ParsedPlain",
    "Regular",
    "ChoiceBranch",
    "ChoiceSetNode",
    "GatherNode",
    "LineNode",
    "Node",
    "iter_lines",
]
