"""Story controller: knot switching, choice resumption and output."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Tuple

from inkweave.core.consts import DEFAULT_MAX_DIVERT_DEPTH, TERMINAL_KNOTS
from inkweave.core.logging import get_logger
from inkweave.data.errors import StoryGraphError
from inkweave.data.story_reader import load_story_text, read_knot_trees
from inkweave.domain.follow import LineDataBuffer, Next, NextChoiceSet, NextDivert, NextDone
from inkweave.services.errors import DivertLoopError, UnknownKnotError
from inkweave.services.knot import Knot
from inkweave.services.output_processor import Line, LineBuffer, prepare_choices_for_user, process_buffer
from inkweave.services.story_graph_validator import format_issue, validate_story_graph

logger = get_logger(__name__)


@dataclass(slots=True)
class StoryAction:
    """Base class for the result of a story step."""

    @property
    def is_done(self) -> bool:
        return False

    def get_choices(self) -> List[Line] | None:
        return None


@dataclass(slots=True)
class StoryDone(StoryAction):
    """The story reached an end."""

    @property
    def is_done(self) -> bool:
        return True


@dataclass(slots=True)
class StoryChoice(StoryAction):
    """A choice set was reached; tags written on the choices are kept."""

    choices: List[Line] = field(default_factory=list)

    def get_choices(self) -> List[Line] | None:
        return list(self.choices)


_KnotStep = Callable[[Knot, LineDataBuffer], Next]


class Story:
    """Story made of knots, walked one step at a time.

    The story owns every knot and the name of the knot currently being read.
    ``start`` and ``resume_with_choice`` append the produced lines to the caller's
    buffer without clearing it, and return either StoryDone or StoryChoice.

    A step is committed only when it completes. If it raises a FollowError partway
    through a divert chain, the current knot stays where the step began and the
    lines read during the step are not appended to the buffer. Choice visit counts
    and knot cursors touched before the error are not rolled back.

    Tags that precede any text (e.g. a tag-only first line) are held back and put
    on the first line produced by a later step.
    """

    def __init__(
        self,
        knots: Mapping[str, Knot],
        root: str,
        *,
        max_divert_depth: int = DEFAULT_MAX_DIVERT_DEPTH,
    ) -> None:
        if root not in knots:
            raise UnknownKnotError(root)
        if max_divert_depth < 1:
            raise ValueError("max_divert_depth must be at least 1.")
        self._knots: Dict[str, Knot] = dict(knots)
        self._root = root
        self._current = root
        self._max_divert_depth = max_divert_depth
        self._pending_tags: List[str] = []

    @property
    def root(self) -> str:
        return self._root

    @property
    def current_knot(self) -> str:
        return self._current

    @property
    def knot_names(self) -> List[str]:
        return list(self._knots.keys())

    @property
    def knots(self) -> Mapping[str, Knot]:
        return dict(self._knots)

    def get_knot(self, name: str) -> Knot:
        try:
            return self._knots[name]
        except KeyError as exc:
            raise UnknownKnotError(name) from exc

    def move_to(self, name: str) -> None:
        """Make ``name`` the current knot; the next ``start`` reads it from the top."""
        knot = self.get_knot(name)
        knot.reset()
        self._current = name

    def start(self, line_buffer: LineBuffer) -> StoryAction:
        """Read the current knot from its first line until an end or a choice."""
        self.get_knot(self._current).reset()
        self._pending_tags = []
        return self._step(lambda knot, buffer: knot.follow(buffer), line_buffer)

    def resume_with_choice(self, index: int, line_buffer: LineBuffer) -> StoryAction:
        """Take the presented choice at ``index`` (0-based) and read on."""
        return self._step(lambda knot, buffer: knot.follow_with_choice(index, buffer), line_buffer)

    def _step(self, step: _KnotStep, line_buffer: LineBuffer) -> StoryAction:
        internal: LineDataBuffer = []
        result, current = self._follow(step, internal)
        self._current = current
        self._pending_tags = process_buffer(line_buffer, internal, pending_tags=self._pending_tags)
        if isinstance(result, NextChoiceSet):
            return StoryChoice(choices=prepare_choices_for_user(result.choices))
        logger.debug("Story finished in knot '%s'", self._current)
        return StoryDone()

    def _follow(self, step: _KnotStep, buffer: LineDataBuffer) -> Tuple[Next, str]:
        current = self._current
        result = step(self.get_knot(current), buffer)
        chain: List[str] = [current]
        while isinstance(result, NextDivert):
            target = result.target
            if target in TERMINAL_KNOTS:
                return NextDone(), current
            if len(chain) > self._max_divert_depth:
                raise DivertLoopError(chain + [target], self._max_divert_depth)
            knot = self.get_knot(target)
            logger.debug("Divert '%s' -> '%s'", current, target)
            current = target
            chain.append(target)
            knot.reset()
            result = knot.follow(buffer)
        return result, current


def read_story_from_string(
    text: str,
    *,
    strict: bool = False,
    max_divert_depth: int = DEFAULT_MAX_DIVERT_DEPTH,
) -> Story:
    """Parse ``text`` into a Story.

    With ``strict`` the static graph validator runs as well and any ERROR issue
    raises StoryGraphError instead of returning a story.
    """
    root, trees = read_knot_trees(text)
    knots = {name: Knot(name, tree) for name, tree in trees.items()}
    story = Story(knots, root, max_divert_depth=max_divert_depth)
    if strict:
        errors = [issue for issue in validate_story_graph(story) if issue.severity == "ERROR"]
        if errors:
            raise StoryGraphError(errors, [format_issue(issue) for issue in errors])
    return story


def read_story_from_file(
    path: Path | str,
    *,
    strict: bool = False,
    max_divert_depth: int = DEFAULT_MAX_DIVERT_DEPTH,
) -> Story:
    """Read a UTF-8 story file; see read_story_from_string."""
    return read_story_from_string(
        load_story_text(path), strict=strict, max_divert_depth=max_divert_depth
    )
