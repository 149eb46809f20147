"""Branching-narrative engine for ink-style story markup.

Typical use::

    story = read_story_from_string(text)
    lines = []
    action = story.start(lines)
    while not action.is_done:
        action = story.resume_with_choice(0, lines)
"""

from .data.errors import ParseError
from .services import (
    FollowError,
    Line,
    Story,
    StoryAction,
    StoryChoice,
    StoryDone,
    read_story_from_file,
    read_story_from_string,
    validate_story_graph,
)

__all__ = [
    "FollowError",
    "Line",
    "ParseError",
    "Story",
    "StoryAction",
    "StoryChoice",
    "StoryDone",
    "read_story_from_file",
    "read_story_from_string",
    "validate_story_graph",
]
