"""Splitting story documents into named knots."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple

from inkweave.core.consts import KNOT_MARKER, ROOT_KNOT_NAME, TERMINAL_KNOTS
from inkweave.core.logging import get_logger
from inkweave.data.block_parser import parse_block_line
from inkweave.data.errors import (
    DuplicateKnotError,
    EmptyKnotError,
    EmptyStoryError,
    KnotNameError,
    KnotNameErrorKind,
    StoryLoadError,
)
from inkweave.data.knot_builder import build_knot_tree
from inkweave.domain.nodes import Node

logger = get_logger(__name__)

KnotTrees = Dict[str, List[Node]]


def read_knot_trees(text: str) -> Tuple[str, KnotTrees]:
    """Parse a whole document into ``(root_name, {knot name: node tree})``.

    Content before the first knot header becomes the root knot. When a document
    opens with a header, the first declared knot is the root instead.
    """
    sections = split_knot_sections(text)
    if not sections:
        raise EmptyStoryError()

    trees: KnotTrees = {}
    for name, lines in sections:
        trees[name] = build_knot_tree(parse_block_line(line) for line in lines)
    root_name = sections[0][0]
    logger.debug("Read %d knot(s); root knot is '%s'", len(trees), root_name)
    return root_name, trees


def split_knot_sections(text: str) -> List[Tuple[str, List[str]]]:
    """Group non-blank lines under their knot headers, in document order."""
    sections: List[Tuple[str, List[str]]] = []
    seen: set[str] = set()
    name = ROOT_KNOT_NAME
    lines: List[str] = []
    has_header = False

    def close_section() -> None:
        if name == ROOT_KNOT_NAME and not has_header:
            if lines:
                sections.append((name, lines))
                seen.add(name)
            return
        if not lines:
            raise EmptyKnotError(name)
        sections.append((name, lines))

    for raw_line in text.splitlines():
        if not raw_line.strip():
            continue
        if is_knot_header(raw_line):
            close_section()
            name = parse_knot_name(raw_line)
            if name in seen:
                raise DuplicateKnotError(name)
            seen.add(name)
            lines = []
            has_header = True
            continue
        lines.append(raw_line)
    close_section()
    return sections


def is_knot_header(line: str) -> bool:
    return line.lstrip().startswith(KNOT_MARKER)


def parse_knot_name(line: str) -> str:
    """Read the knot name from a header such as ``=name``, ``== name`` or ``=== name ===``.

    Runs of markers and whitespace around the name are accepted on both sides, so
    ink's ``== name ==`` style reads the same as the bare ``=name`` form.
    """
    stripped = line.strip()
    if not stripped.startswith(KNOT_MARKER):
        raise KnotNameError(line, KnotNameErrorKind.COULD_NOT_READ)
    name = stripped.strip(KNOT_MARKER).strip()
    if not name:
        raise KnotNameError(line, KnotNameErrorKind.EMPTY)
    if any(char.isspace() for char in name):
        raise KnotNameError(line, KnotNameErrorKind.CONTAINS_WHITESPACE)
    if name in TERMINAL_KNOTS:
        raise KnotNameError(line, KnotNameErrorKind.RESERVED)
    return name


def load_story_text(path: Path | str) -> str:
    """Read a story file and raise StoryLoadError on failure."""
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise StoryLoadError(f"Story file not found: {file_path}") from exc
    except UnicodeDecodeError as exc:
        raise StoryLoadError(f"Story file is not valid UTF-8: {file_path}") from exc
    except OSError as exc:
        raise StoryLoadError(f"Unable to read story file: {file_path}") from exc
