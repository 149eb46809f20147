"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
import textwrap
from typing import Sequence

from inkweave.services import Issue, Line, format_issue

_TEXT_WIDTH = 78


def debug_enabled() -> bool:
    """Return True only when INKWEAVE_DEBUG is explicitly set to '1'."""
    return os.getenv("INKWEAVE_DEBUG") == "1"


def wrap_text(text: str, width: int = _TEXT_WIDTH, *, prefix: str = "") -> list[str]:
    """
    Wrap text on word boundaries, indenting continuation lines under ``prefix``.

    Args:
        text: The text to wrap
        width: Maximum width per line, prefix included
        prefix: Leading text for the first line, e.g. a choice number

    Returns:
        List of wrapped lines
    """
    if not text:
        return [prefix.rstrip()] if prefix else [""]
    return textwrap.wrap(
        text,
        width=max(width, len(prefix) + 1),
        initial_indent=prefix,
        subsequent_indent=" " * len(prefix),
        break_long_words=False,
        break_on_hyphens=False,
    ) or [prefix.rstrip()]


def format_tags(tags: Sequence[str]) -> str:
    return " ".join(f"#{tag}" for tag in tags)


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_lines(lines: Sequence[Line], *, show_tags: bool = False, step: bool = False) -> None:
    """Print story lines; in step mode wait for Enter after each one."""
    for line in lines:
        text = line.text.rstrip("\n")
        for wrapped in wrap_text(text):
            print(wrapped)
        if (show_tags or debug_enabled()) and line.tags:
            print(f"  {format_tags(line.tags)}")
        if step:
            input()


def render_choices(choices: Sequence[Line], *, show_tags: bool = False) -> None:
    """Display numbered story choices."""
    if not choices:
        return
    render_heading("Choices")
    for idx, choice in enumerate(choices, start=1):
        text = choice.text
        if (show_tags or debug_enabled()) and choice.tags:
            text = f"{text} {format_tags(choice.tags)}"
        for wrapped in wrap_text(text, prefix=f"{idx}. "):
            print(wrapped)


def render_issues(issues: Sequence[Issue]) -> None:
    for issue in issues:
        print(format_issue(issue))
