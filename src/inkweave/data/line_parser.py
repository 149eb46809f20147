"""Parsing of a single line of story text into a LineData record."""
from __future__ import annotations

from typing import List, Tuple

from inkweave.core.consts import DIVERT_MARKER, GLUE_MARKERS, TAG_MARKER
from inkweave.core.logging import get_logger
from inkweave.data.errors import InvalidDivertError
from inkweave.domain.line import REGULAR, Divert, LineData, LineKind

logger = get_logger(__name__)


def parse_line_data(line: str) -> LineData:
    """Parse one raw line into a LineData.

    Whitespace runs collapse to single spaces, trailing tags and a divert are split
    off, then glue markers at either end are stripped. An empty string is a valid,
    empty line.
    """
    text = collapse_whitespace(line)
    text, tags = split_tags(text)
    text, kind = split_divert(text, raw_line=line)
    text = text.strip()
    text, glue_start, glue_end = split_glue(text, has_divert=isinstance(kind, Divert))
    return LineData(
        text=text,
        kind=kind,
        tags=tags,
        glue_start=glue_start,
        glue_end=glue_end,
    )


def collapse_whitespace(line: str) -> str:
    return " ".join(line.split())


def split_tags(text: str) -> Tuple[str, List[str]]:
    """Split every tag off ``text``; tags run from the first tag marker onward."""
    index = text.find(TAG_MARKER)
    if index == -1:
        return text, []
    tag_part = text[index:].strip(TAG_MARKER)
    tags = [tag.strip() for tag in tag_part.split(TAG_MARKER)]
    return text[:index], [tag for tag in tags if tag]


def split_divert(text: str, *, raw_line: str) -> Tuple[str, LineKind]:
    """Split a divert off ``text``. Only the first target is followed."""
    index = text.find(DIVERT_MARKER)
    if index == -1:
        return text, REGULAR
    targets = [target.strip() for target in text[index + len(DIVERT_MARKER) :].split(DIVERT_MARKER)]
    for target in targets:
        if not target or any(char.isspace() for char in target):
            raise InvalidDivertError(raw_line, target)
    first, ignored = targets[0], tuple(targets[1:])
    if ignored:
        logger.warning(
            "Only the first divert target is followed; ignoring %s (line: %s)",
            ", ".join(ignored),
            raw_line.strip(),
        )
    return text[:index], Divert(target=first, ignored=ignored)


def split_glue(text: str, *, has_divert: bool) -> Tuple[str, bool, bool]:
    """Strip glue markers from either end, keeping the whitespace they enclose.

    A divert always acts as right glue; without an explicit right glue marker a
    single space is added so the diverted-to text does not run into this line.
    """
    glue_start = False
    glue_end = False
    stripped = True
    while stripped:
        stripped = False
        for marker in GLUE_MARKERS:
            if text.startswith(marker):
                text = text[len(marker) :]
                glue_start = stripped = True
    stripped = True
    while stripped:
        stripped = False
        for marker in GLUE_MARKERS:
            if text.endswith(marker):
                text = text[: -len(marker)]
                glue_end = stripped = True
    if has_divert and not glue_end:
        text += " "
    return text, glue_start, glue_end or has_divert
