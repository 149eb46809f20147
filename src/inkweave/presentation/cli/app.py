"""Console tool for checking and playing story files."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import List, Sequence

from inkweave.core.logging import get_logger, setup_logging
from inkweave.data import ParseError, get_sample_story_path
from inkweave.presentation.cli.config import CliConfig, load_config, resolve_log_level
from inkweave.presentation.cli.render import (
    debug_enabled,
    render_choices,
    render_heading,
    render_issues,
    render_lines,
)
from inkweave.services import (
    FollowError,
    Line,
    Story,
    read_story_from_file,
    validate_story_graph,
)

logger = get_logger(__name__)

_QUIT_INPUTS = {"q", "quit"}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit code."""
    args = _build_parser().parse_args(argv)
    config = load_config()
    setup_logging(resolve_log_level(config))
    if args.command == "check":
        return run_check(Path(args.path))
    path = Path(args.path) if args.path else get_sample_story_path()
    return run_play(path, config)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="inkweave", description="Check or play ink-style story files.")
    subcommands = parser.add_subparsers(dest="command", required=True)
    check = subcommands.add_parser("check", help="Parse a story and report graph issues.")
    check.add_argument("path", help="Path to the story file.")
    play = subcommands.add_parser("play", help="Play a story interactively.")
    play.add_argument("path", nargs="?", help="Path to the story file (defaults to the bundled sample).")
    return parser


def run_check(path: Path) -> int:
    """Parse and validate a story file, printing every issue found."""
    story = _load_story(path)
    if story is None:
        return 1
    issues = validate_story_graph(story)
    render_issues(issues)
    errors = [issue for issue in issues if issue.severity == "ERROR"]
    warnings = [issue for issue in issues if issue.severity == "WARN"]
    print(
        f"Checked {path}: knots={len(story.knot_names)} "
        f"errors={len(errors)} warnings={len(warnings)}"
    )
    return 1 if errors else 0


def run_play(path: Path, config: CliConfig) -> int:
    """Play a story until it ends or the reader quits."""
    story = _load_story(path)
    if story is None:
        return 1
    show_tags = bool(config.get("show_tags"))
    step = config.get("text_display_mode") == "step"
    lines: List[Line] = []
    try:
        action = story.start(lines)
        shown = _show_new_lines(story, lines, 0, show_tags=show_tags, step=step)
        while not action.is_done:
            choices = action.get_choices() or []
            render_choices(choices, show_tags=show_tags)
            choice_index = _prompt_choice(len(choices))
            if choice_index is None:
                print("Goodbye!")
                return 0
            print()
            action = story.resume_with_choice(choice_index, lines)
            shown = _show_new_lines(story, lines, shown, show_tags=show_tags, step=step)
    except FollowError as exc:
        logger.debug("Story stopped in knot %s", story.current_knot, exc_info=True)
        print(f"Story stopped: {exc}")
        return 1
    render_heading("The End")
    return 0


def _load_story(path: Path) -> Story | None:
    try:
        return read_story_from_file(path)
    except ParseError as exc:
        print(f"Could not read story: {exc}")
        return None


def _show_new_lines(story: Story, lines: List[Line], shown: int, *, show_tags: bool, step: bool) -> int:
    if debug_enabled():
        print(f"[{story.current_knot}]")
    render_lines(lines[shown:], show_tags=show_tags, step=step)
    return len(lines)


def _prompt_choice(choice_count: int) -> int | None:
    while True:
        raw = input("Select an option (q to quit): ").strip()
        if raw.lower() in _QUIT_INPUTS:
            return None
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")
