"""Service-layer exceptions raised while walking a story."""
from __future__ import annotations

from typing import Sequence


class FollowError(Exception):
    """Base exception for traversal failures."""


class UnknownKnotError(FollowError):
    """Raised when a divert or move names a knot the story does not define."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Story has no knot named '{name}'.")
        self.name = name


class NotAwaitingChoiceError(FollowError):
    """Raised when a choice is made while no choice set is pending."""

    def __init__(self, knot: str) -> None:
        super().__init__(f"Knot '{knot}' is not waiting for a choice.")
        self.knot = knot


class ChoiceIndexError(FollowError, IndexError):
    """Raised when a choice index does not select a presented choice."""

    def __init__(self, index: int, count: int, knot: str) -> None:
        super().__init__(
            f"Choice index {index} is invalid for knot '{knot}' ({count} choices presented)."
        )
        self.index = index
        self.count = count
        self.knot = knot


class ExhaustedChoicesError(FollowError):
    """Raised when every choice of a reached choice set has been used up."""

    def __init__(self, knot: str) -> None:
        super().__init__(
            f"Knot '{knot}' reached a choice set with no remaining choices."
        )
        self.knot = knot


class DivertLoopError(FollowError):
    """Raised when a single step follows more diverts than allowed."""

    def __init__(self, chain: Sequence[str], limit: int) -> None:
        tail = " -> ".join(chain[-8:])
        super().__init__(f"Divert chain exceeded {limit} jumps without reaching a choice (... {tail}).")
        self.chain = list(chain)
        self.limit = limit
