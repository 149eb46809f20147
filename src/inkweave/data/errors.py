"""Custom exceptions for reading story text."""
from __future__ import annotations

from enum import Enum
from typing import Sequence

from inkweave.core.consts import CHOICE_MARKER, KNOT_MARKER, STICKY_CHOICE_MARKER


class ParseError(Exception):
    """Base exception for story text that cannot be turned into a story."""


class EmptyStoryError(ParseError):
    """Raised when the input holds no story content at all."""

    def __init__(self) -> None:
        super().__init__("Tried to read a story from an empty file or string.")


class StoryLoadError(ParseError):
    """Raised when a story file is missing or unreadable."""


class KnotError(ParseError):
    """Base exception for malformed knots."""


class KnotNameErrorKind(str, Enum):
    CONTAINS_WHITESPACE = "contains_whitespace"
    COULD_NOT_READ = "could_not_read"
    EMPTY = "empty"
    RESERVED = "reserved"


_KNOT_NAME_REASONS = {
    KnotNameErrorKind.CONTAINS_WHITESPACE: "name contains whitespace characters",
    KnotNameErrorKind.COULD_NOT_READ: f"line does not start with '{KNOT_MARKER}'",
    KnotNameErrorKind.EMPTY: "name is empty",
    KnotNameErrorKind.RESERVED: "name is reserved for ending the story",
}


class KnotNameError(KnotError):
    """Raised when a knot header does not hold a usable name."""

    def __init__(self, line: str, kind: KnotNameErrorKind) -> None:
        super().__init__(
            f"Could not parse a knot: could not read knot name: "
            f"{_KNOT_NAME_REASONS[kind]} (line: {line})"
        )
        self.line = line
        self.kind = kind


class EmptyKnotError(KnotError):
    """Raised when a knot header is not followed by any content."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not parse a knot: knot '{name}' has no content.")
        self.name = name


class DuplicateKnotError(KnotError):
    """Raised when two knots share a name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Could not parse a knot: knot '{name}' is defined more than once.")
        self.name = name


class LineError(ParseError):
    """Base exception for a single line that cannot be parsed."""

    reason = "line could not be parsed"

    def __init__(self, line: str, detail: str | None = None) -> None:
        message = f"Invalid line: {detail or self.reason} (line: {line})"
        super().__init__(message)
        self.line = line


class NoDisplayTextError(LineError):
    reason = (
        f"line has choice markers ({CHOICE_MARKER}, {STICKY_CHOICE_MARKER}) but is empty"
    )


class MultipleChoiceTypeError(LineError):
    reason = "line has multiple types of choice markers"


class UnmatchedBracketsError(LineError):
    reason = "line has unmatched brackets"


class InvalidDivertError(LineError):
    """Raised when a divert does not name a usable knot."""

    def __init__(self, line: str, target: str) -> None:
        super().__init__(line, f"could not read a knot name from divert '{target}'")
        self.target = target


class StoryGraphError(ParseError):
    """Raised by strict reading when static validation reports errors.

    ``issues`` are the validator's issue records, ``messages`` their rendered form.
    """

    def __init__(self, issues: Sequence[object], messages: Sequence[str]) -> None:
        details = "\n".join(messages)
        super().__init__(f"Story graph validation failed:\n{details}")
        self.issues = list(issues)
