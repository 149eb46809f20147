"""Node tree that a knot body is built into."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple, Union

from inkweave.domain.line import Choice, LineData


@dataclass(slots=True)
class LineNode:
    line: LineData


@dataclass(slots=True)
class GatherNode:
    """Join point for the choice branches opened above it."""

    level: int
    line: LineData


@dataclass(slots=True)
class ChoiceBranch:
    """A choice together with the content nested under it."""

    choice: Choice
    body: List["Node"] = field(default_factory=list)


@dataclass(slots=True)
class ChoiceSetNode:
    """Run of adjacent choices at one nesting level, presented together."""

    level: int
    branches: List[ChoiceBranch] = field(default_factory=list)

    def available_branches(self) -> List[ChoiceBranch]:
        """Return branches still presentable, in declaration order."""
        return [branch for branch in self.branches if branch.choice.is_available]


Node = Union[LineNode, GatherNode, ChoiceSetNode]


def iter_lines(nodes: List[Node], path: str = "") -> Iterator[Tuple[str, LineData]]:
    """Yield every line in the tree with a readable path.

    Each node list is walked in order before the choice bodies nested in it.

    Choice lines are yielded for both their displayed and their chosen form.
    """
    stack: List[Tuple[List[Node], str]] = [(nodes, path)]
    while stack:
        current, prefix = stack.pop()
        pending: List[Tuple[List[Node], str]] = []
        for index, node in enumerate(current):
            node_path = f"{prefix}[{index}]"
            if isinstance(node, ChoiceSetNode):
                for branch_index, branch in enumerate(node.branches):
                    branch_path = f"{node_path}.choices[{branch_index}]"
                    yield f"{branch_path}.displayed", branch.choice.displayed
                    yield f"{branch_path}.line", branch.choice.line
                    pending.append((branch.body, f"{branch_path}.body"))
            else:
                yield node_path, node.line
        stack.extend(reversed(pending))
