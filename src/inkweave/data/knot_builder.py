"""Assembly of a knot's parsed lines into its node tree."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from inkweave.domain.line import ParsedChoice, ParsedGather, ParsedLine
from inkweave.domain.nodes import ChoiceBranch, ChoiceSetNode, GatherNode, LineNode, Node

_OpenContext = Tuple[int, List[Node]]


def build_knot_tree(parsed_lines: Iterable[ParsedLine]) -> List[Node]:
    """Build the node tree for one knot body.

    Open contexts are kept on a stack keyed by nesting level; the knot root sits at
    level 0 and is never closed. A choice at level L closes contexts at level L or
    deeper, then joins the choice set at the end of the enclosing context (or starts
    one) and opens its own body. A gather at level L closes the same contexts and is
    appended to the enclosing one, so later content follows it.
    """
    root: List[Node] = []
    contexts: List[_OpenContext] = [(0, root)]
    for parsed in parsed_lines:
        if isinstance(parsed, ParsedChoice):
            _close_contexts(contexts, parsed.level)
            nodes = contexts[-1][1]
            choice_set = _open_choice_set(nodes, parsed.level)
            branch = ChoiceBranch(choice=parsed.choice)
            choice_set.branches.append(branch)
            contexts.append((parsed.level, branch.body))
        elif isinstance(parsed, ParsedGather):
            _close_contexts(contexts, parsed.level)
            contexts[-1][1].append(GatherNode(level=parsed.level, line=parsed.line))
        else:
            contexts[-1][1].append(LineNode(line=parsed.line))
    return root


def _close_contexts(contexts: List[_OpenContext], level: int) -> None:
    while len(contexts) > 1 and contexts[-1][0] >= level:
        contexts.pop()


def _open_choice_set(nodes: List[Node], level: int) -> ChoiceSetNode:
    if nodes:
        last = nodes[-1]
        if isinstance(last, ChoiceSetNode) and last.level == level:
            return last
    choice_set = ChoiceSetNode(level=level)
    nodes.append(choice_set)
    return choice_set
