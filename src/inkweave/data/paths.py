"""Helpers for locating bundled story files."""
from __future__ import annotations

from pathlib import Path

SAMPLE_STORY_FILENAME = "lidenbrock.ink"


def get_repo_root() -> Path:
    """Return the repository root."""
    return Path(__file__).resolve().parents[3]


def get_stories_path(base_path: Path | str | None = None) -> Path:
    """Return the directory holding bundled ``.ink`` stories."""
    if base_path is not None:
        return Path(base_path)
    return get_repo_root() / "data" / "stories"


def get_sample_story_path(base_path: Path | str | None = None) -> Path:
    return get_stories_path(base_path) / SAMPLE_STORY_FILENAME
