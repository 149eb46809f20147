"""Service layer exports."""

from .errors import (
    ChoiceIndexError,
    DivertLoopError,
    ExhaustedChoicesError,
    FollowError,
    NotAwaitingChoiceError,
    UnknownKnotError,
)
from .knot import Knot
from .output_processor import Line, LineBuffer, prepare_choices_for_user, process_buffer
from .story import (
    Story,
    StoryAction,
    StoryChoice,
    StoryDone,
    read_story_from_file,
    read_story_from_string,
)
from .story_graph_validator import Issue, format_issue, validate_story_graph

__all__ = [
    "ChoiceIndexError",
    "DivertLoopError",
    "ExhaustedChoicesError",
    "FollowError",
    "NotAwaitingChoiceError",
    "UnknownKnotError",
    "Knot",
    "Line",
    "LineBuffer",
    "prepare_choices_for_user",
    "process_buffer",
    "Story",
    "StoryAction",
    "StoryChoice",
    "StoryDone",
    "read_story_from_file",
    "read_story_from_string",
    "Issue",
    "format_issue",
    "validate_story_graph",
]
