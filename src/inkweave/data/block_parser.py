"""Classification of raw lines into choices, gathers and plain lines."""
from __future__ import annotations

from typing import Tuple

from inkweave.core.consts import (
    CHOICE_MARKER,
    DIVERT_MARKER,
    GATHER_MARKER,
    STICKY_CHOICE_MARKER,
    TAG_MARKER,
)
from inkweave.data.errors import MultipleChoiceTypeError, NoDisplayTextError, UnmatchedBracketsError
from inkweave.data.line_parser import parse_line_data
from inkweave.domain.line import Choice, ParsedChoice, ParsedGather, ParsedLine, ParsedPlain


def parse_block_line(line: str) -> ParsedLine:
    """Classify ``line`` as a choice, a gather or a plain line.

    Choices are tried first, then gathers; anything else is a plain line. A line
    that opens with a divert is never a gather.
    """
    parsed = parse_choice(line)
    if parsed is not None:
        return parsed
    parsed = parse_gather(line)
    if parsed is not None:
        return parsed
    return ParsedPlain(line=parse_line_data(line))


def parse_choice(line: str) -> ParsedChoice | None:
    """Return a ParsedChoice, or None when the line has no choice markers."""
    is_sticky = False
    split = split_markers(line, CHOICE_MARKER)
    if split is None:
        split = split_markers(line, STICKY_CHOICE_MARKER)
        is_sticky = True
    if split is None:
        return None

    level, text = split
    if text.startswith((CHOICE_MARKER, STICKY_CHOICE_MARKER)):
        raise MultipleChoiceTypeError(line)
    if not text:
        raise NoDisplayTextError(line)

    displayed_text, line_text = split_choice_brackets(text, raw_line=line)
    displayed = parse_line_data(displayed_text)
    if displayed.is_blank and not displayed.is_divert:
        raise NoDisplayTextError(line)
    chosen = displayed if line_text == displayed_text else parse_line_data(line_text)
    choice = Choice(displayed=displayed, line=chosen, num_visited=0, is_sticky=is_sticky)
    return ParsedChoice(level=level, choice=choice)


def parse_gather(line: str) -> ParsedGather | None:
    """Return a ParsedGather, or None when the line has no gather markers.

    A line opening with a divert is never a gather, whatever markers follow it.
    """
    if line.lstrip().startswith(DIVERT_MARKER):
        return None
    split = split_markers(line, GATHER_MARKER)
    if split is None:
        return None
    level, text = split
    return ParsedGather(level=level, line=parse_line_data(text))


def split_markers(line: str, marker: str) -> Tuple[int, str] | None:
    """Split a leading run of ``marker`` (whitespace allowed between) from the text.

    Returns the marker count and the remaining text, or None if the line does not
    start with the marker. A divert marker ends the run, so ``- -> knot`` is a
    level 1 gather that diverts.
    """
    if not line.lstrip().startswith(marker) or line.lstrip().startswith(DIVERT_MARKER):
        return None
    split_at = len(line)
    for index, char in enumerate(line):
        if line.startswith(DIVERT_MARKER, index) or (char != marker and not char.isspace()):
            split_at = index
            break
    return line[:split_at].count(marker), line[split_at:]


def split_choice_brackets(text: str, *, raw_line: str) -> Tuple[str, str]:
    """Split ``head[inside]tail`` into the displayed and the chosen text.

    The displayed text is ``head + inside`` and the chosen text ``head + tail``.
    Tags written after the brackets are kept on both.
    """
    tag_index = text.find(TAG_MARKER)
    body, tags = (text, "") if tag_index == -1 else (text[:tag_index], text[tag_index:])
    opening = body.count("[")
    closing = body.count("]")
    if opening == 0 and closing == 0:
        return text, text
    if opening != 1 or closing != 1:
        raise UnmatchedBracketsError(raw_line)
    start = body.index("[")
    end = body.index("]")
    if end < start:
        raise UnmatchedBracketsError(raw_line)
    head, inside, tail = body[:start], body[start + 1 : end], body[end + 1 :]
    return head + inside + tags, head + tail + tags
