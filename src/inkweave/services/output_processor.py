"""Conversion of followed lines into the lines handed to the caller."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from inkweave.domain.line import Choice, LineData

LINE_TERMINATOR = "\n"


@dataclass(slots=True)
class Line:
    """Single line of text in a story, ready to display."""

    text: str
    tags: List[str] = field(default_factory=list)


LineBuffer = List[Line]


def process_buffer(
    into: LineBuffer,
    lines: Iterable[LineData],
    *,
    pending_tags: Sequence[str] = (),
) -> List[str]:
    """Merge glued lines and append the result to ``into``.

    A line starts a new output line unless the previous line has ``glue_end`` or
    it has ``glue_start`` itself, in which case its text and tags are appended to
    the current output line. Every finished output line ends with a newline.
    Blank lines (bare diverts, empty choice lines, tag-only lines) contribute no
    text; their tags move onto the next output line, or onto the last line of
    ``into`` when nothing follows.

    Returns the tags that found no line at all (nothing was produced and ``into``
    is empty). Passing them back as ``pending_tags`` puts them on the first line
    of the next call.
    """
    current: Line | None = None
    glue_next = False
    carried_tags: List[str] = list(pending_tags)
    produced: LineBuffer = []

    for line in lines:
        if line.is_blank:
            carried_tags.extend(line.tags)
            if not line.is_divert and (line.glue_start or line.glue_end):
                glue_next = True
            continue
        if current is not None and (glue_next or line.glue_start):
            current.text += line.text
            current.tags.extend(carried_tags)
            current.tags.extend(line.tags)
        else:
            if current is not None:
                produced.append(_finish(current))
            current = Line(text=line.text, tags=carried_tags + list(line.tags))
        carried_tags = []
        glue_next = line.glue_end

    if current is not None:
        current.tags.extend(carried_tags)
        produced.append(_finish(current))
        carried_tags = []
    elif carried_tags and into:
        into[-1].tags.extend(carried_tags)
        carried_tags = []
    into.extend(produced)
    return carried_tags


def _finish(line: Line) -> Line:
    line.text = line.text.rstrip(" ") + LINE_TERMINATOR
    return line


def prepare_choices_for_user(choices: Sequence[Choice]) -> List[Line]:
    """Return presentable lines for ``choices``, keeping their order."""
    return [
        Line(text=choice.displayed.text.strip(), tags=list(choice.displayed.tags))
        for choice in choices
    ]
