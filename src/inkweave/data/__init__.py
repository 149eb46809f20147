"""Data layer: parsing story text into knot trees."""

from .errors import (
    DuplicateKnotError,
    EmptyKnotError,
    EmptyStoryError,
    InvalidDivertError,
    KnotError,
    KnotNameError,
    KnotNameErrorKind,
    LineError,
    MultipleChoiceTypeError,
    NoDisplayTextError,
    ParseError,
    StoryGraphError,
    StoryLoadError,
    UnmatchedBracketsError,
)
from .block_parser import parse_block_line
from .line_parser import parse_line_data
from .knot_builder import build_knot_tree
from .paths import get_repo_root, get_sample_story_path, get_stories_path
from .story_reader import load_story_text, parse_knot_name, read_knot_trees

__all__ = [
    "DuplicateKnotError",
    "EmptyKnotError",
    "EmptyStoryError",
    "InvalidDivertError",
    "KnotError",
    "KnotNameError",
    "KnotNameErrorKind",
    "LineError",
    "MultipleChoiceTypeError",
    "NoDisplayTextError",
    "ParseError",
    "StoryGraphError",
    "StoryLoadError",
    "UnmatchedBracketsError",
    "parse_block_line",
    "parse_line_data",
    "build_knot_tree",
    "get_repo_root",
    "get_sample_story_path",
    "get_stories_path",
    "load_story_text",
    "parse_knot_name",
    "read_knot_trees",
]
