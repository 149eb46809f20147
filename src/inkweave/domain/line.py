"""Line records produced by the parsers and consumed by traversal."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union


@dataclass(frozen=True, slots=True)
class Regular:
    """Line that simply moves the story on."""


@dataclass(frozen=True, slots=True)
class Divert:
    """Line that jumps to the start of the knot named ``target``.

    ``ignored`` holds any further ``->`` targets written on the same line. Only the
    first target is followed; the rest are kept so validation can report them.
    """

    target: str
    ignored: Tuple[str, ...] = field(default=(), compare=False)


LineKind = Union[Regular, Divert]

REGULAR = Regular()


@dataclass(frozen=True, slots=True)
class LineData:
    """A single parsed line of story text.

    ``glue_start`` marks that the line fuses onto the previously emitted line and
    ``glue_end`` that the next emitted line fuses onto this one. A divert always
    acts as right glue, so divert lines have ``glue_end`` set.
    """

    text: str = ""
    kind: LineKind = REGULAR
    tags: List[str] = field(default_factory=list)
    glue_start: bool = False
    glue_end: bool = False

    @property
    def divert_target(self) -> str | None:
        if isinstance(self.kind, Divert):
            return self.kind.target
        return None

    @property
    def is_divert(self) -> bool:
        return isinstance(self.kind, Divert)

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(slots=True)
class Choice:
    """One option of a choice set.

    ``displayed`` is what the reader is offered, ``line`` is what enters the story
    once the option is taken (it may be empty). Non-sticky choices disappear from
    later presentations once ``num_visited`` is above zero.
    """

    displayed: LineData
    line: LineData
    num_visited: int = 0
    is_sticky: bool = False

    @property
    def is_available(self) -> bool:
        return self.is_sticky or self.num_visited == 0


@dataclass(frozen=True, slots=True)
class ParsedChoice:
    level: int
    choice: Choice


@dataclass(frozen=True, slots=True)
class ParsedGather:
    level: int
    line: LineData


@dataclass(frozen=True, slots=True)
class ParsedPlain:
    line: LineData


ParsedLine = Union[ParsedChoice, ParsedGather, ParsedPlain]
