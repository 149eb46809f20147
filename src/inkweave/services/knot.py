"""Traversal of a single knot's node tree."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from inkweave.core.logging import get_logger
from inkweave.domain.follow import LineDataBuffer, Next, NextChoiceSet, NextDivert, NextDone
from inkweave.domain.line import Choice, LineData
from inkweave.domain.nodes import ChoiceSetNode, GatherNode, Node
from inkweave.services.errors import (
    ChoiceIndexError,
    ExhaustedChoicesError,
    NotAwaitingChoiceError,
)

logger = get_logger(__name__)


@dataclass(slots=True)
class _Frame:
    nodes: List[Node]
    index: int = 0


class Knot:
    """Named section of a story together with its read cursor.

    The cursor is a stack of frames, one per node list being read. When a choice set
    is reached the cursor stays on it until a choice is made.
    """

    def __init__(self, name: str, root: List[Node]) -> None:
        self.name = name
        self._root = root
        self._frames: List[_Frame] = [_Frame(root)]
        self._pending: ChoiceSetNode | None = None

    @property
    def root(self) -> List[Node]:
        return self._root

    @property
    def awaiting_choice(self) -> bool:
        return self._pending is not None

    def reset(self) -> None:
        """Move the cursor back to the first node. Visit counts are kept."""
        self._frames = [_Frame(self._root)]
        self._pending = None

    def follow(self, buffer: LineDataBuffer) -> Next:
        """Read lines into ``buffer`` until a divert, a choice set or the end."""
        if self._pending is not None:
            return NextChoiceSet(choices=self._present(self._pending))
        while self._frames:
            frame = self._frames[-1]
            if frame.index >= len(frame.nodes):
                self._frames.pop()
                continue
            node = frame.nodes[frame.index]
            if isinstance(node, ChoiceSetNode):
                choices = self._present(node)
                self._pending = node
                return NextChoiceSet(choices=choices)
            frame.index += 1
            if isinstance(node, GatherNode) and _is_empty(node.line):
                continue
            buffer.append(node.line)
            target = node.line.divert_target
            if target is not None:
                return NextDivert(target=target)
        return NextDone()

    def follow_with_choice(self, index: int, buffer: LineDataBuffer) -> Next:
        """Take the choice at ``index`` among the presented ones and keep reading."""
        if self._pending is None:
            raise NotAwaitingChoiceError(self.name)
        branches = self._pending.available_branches()
        if not 0 <= index < len(branches):
            raise ChoiceIndexError(index, len(branches), self.name)

        branch = branches[index]
        branch.choice.num_visited += 1
        logger.debug(
            "Knot '%s': took choice %d '%s' (visits=%d)",
            self.name,
            index,
            branch.choice.displayed.text,
            branch.choice.num_visited,
        )
        self._pending = None
        self._frames[-1].index += 1
        self._frames.append(_Frame(branch.body))

        line = branch.choice.line
        if not _is_empty(line):
            buffer.append(line)
        if line.divert_target is not None:
            return NextDivert(target=line.divert_target)
        return self.follow(buffer)

    def _present(self, node: ChoiceSetNode) -> List[Choice]:
        choices = [branch.choice for branch in node.available_branches()]
        if not choices:
            raise ExhaustedChoicesError(self.name)
        return choices


def _is_empty(line: LineData) -> bool:
    return not line.text and not line.tags and not line.is_divert
