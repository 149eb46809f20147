"""Static story graph validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, MutableMapping, Sequence

from inkweave.core.consts import TERMINAL_KNOTS
from inkweave.domain.line import Divert
from inkweave.domain.nodes import ChoiceSetNode, iter_lines
from inkweave.services.knot import Knot


Severity = str


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


@dataclass(frozen=True, slots=True)
class DivertRef:
    knot: str
    target: str
    ignored: tuple[str, ...]
    path: str


@dataclass(frozen=True, slots=True)
class KnotInfo:
    name: str
    diverts: list[DivertRef]
    auto_divert: str | None


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def validate_story_graph(
    story: object,
    entry_roots: Sequence[str] | None = None,
    *,
    error_on_divert_cycle: bool = True,
) -> list[Issue]:
    """Validate a Story (or a mapping of knot name to Knot).

    ``entry_roots`` defaults to the story's root knot; a plain mapping has no root
    so reachability is only checked against the given roots.
    """
    knots, default_root = _coerce_knots(story)
    roots = list(entry_roots) if entry_roots is not None else ([default_root] if default_root else [])
    issues: list[Issue] = []

    knot_infos = {name: _build_knot_info(name, knot) for name, knot in knots.items()}
    knot_names = set(knot_infos.keys())

    for root in roots:
        if root not in knot_names:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_ENTRY_ROOT",
                    message="Entry root references missing knot.",
                    context={"referenced_id": root},
                )
            )

    for knot_info in knot_infos.values():
        _validate_divert_references(knot_info, knot_names, issues)

    if roots:
        _validate_reachability(knot_infos, roots, issues)
    _validate_divert_cycles(knot_infos, issues, error_on_divert_cycle=error_on_divert_cycle)
    return issues


def _coerce_knots(story: object) -> tuple[dict[str, Knot], str | None]:
    if isinstance(story, Mapping):
        return dict(story), None
    knots = getattr(story, "knots", None)
    if not isinstance(knots, Mapping):
        raise TypeError("validate_story_graph expects a Story or a mapping of knots.")
    return dict(knots), getattr(story, "root", None)


def _build_knot_info(name: str, knot: Knot) -> KnotInfo:
    diverts: list[DivertRef] = []
    for path, line in iter_lines(knot.root, "root"):
        if not isinstance(line.kind, Divert) or path.endswith(".displayed"):
            continue
        diverts.append(
            DivertRef(knot=name, target=line.kind.target, ignored=line.kind.ignored, path=path)
        )
    return KnotInfo(name=name, diverts=diverts, auto_divert=_find_auto_divert(knot))


def _find_auto_divert(knot: Knot) -> str | None:
    """Return the divert read from the top of the knot before any choice set."""
    for node in knot.root:
        if isinstance(node, ChoiceSetNode):
            return None
        target = node.line.divert_target
        if target is not None:
            return target
    return None


def _validate_divert_references(
    knot_info: KnotInfo, knot_names: set[str], issues: list[Issue]
) -> None:
    for divert in knot_info.diverts:
        if divert.target not in knot_names and divert.target not in TERMINAL_KNOTS:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MISSING_KNOT_REF",
                    message="Divert references missing knot.",
                    context={
                        "knot": knot_info.name,
                        "field_path": divert.path,
                        "referenced_id": divert.target,
                    },
                )
            )
        for ignored in divert.ignored:
            issues.append(
                Issue(
                    severity="WARN",
                    code="IGNORED_DIVERT_TARGET",
                    message="Only the first divert target is followed; this one is unreachable.",
                    context={
                        "knot": knot_info.name,
                        "field_path": divert.path,
                        "referenced_id": ignored,
                    },
                )
            )


def _validate_reachability(
    knot_infos: Mapping[str, KnotInfo],
    roots: Sequence[str],
    issues: list[Issue],
) -> None:
    knot_names = set(knot_infos.keys())
    reachable: set[str] = set()
    stack: list[str] = [root for root in roots if root in knot_names]
    while stack:
        name = stack.pop()
        if name in reachable:
            continue
        reachable.add(name)
        for divert in knot_infos[name].diverts:
            if divert.target in knot_names:
                stack.append(divert.target)
    for name in sorted(knot_names - reachable):
        issues.append(
            Issue(
                severity="WARN",
                code="UNREACHABLE_KNOT",
                message="Knot is unreachable from story roots.",
                context={"knot": name},
            )
        )


def _validate_divert_cycles(
    knot_infos: Mapping[str, KnotInfo],
    issues: list[Issue],
    *,
    error_on_divert_cycle: bool,
) -> None:
    adjacency: MutableMapping[str, str] = {}
    for name, knot_info in knot_infos.items():
        if knot_info.auto_divert in knot_infos:
            adjacency[name] = knot_info.auto_divert

    visited: set[str] = set()
    cycles: list[list[str]] = []
    for start in sorted(adjacency):
        if start in visited:
            continue
        path: List[str] = []
        on_path: set[str] = set()
        current: str | None = start
        while current is not None and current not in visited:
            visited.add(current)
            path.append(current)
            on_path.add(current)
            current = adjacency.get(current)
        if current is not None and current in on_path:
            cycles.append(path[path.index(current) :])

    if not cycles:
        return
    severity = "ERROR" if error_on_divert_cycle else "WARN"
    for cycle in cycles:
        cycle_path = " -> ".join(cycle + [cycle[0]])
        issues.append(
            Issue(
                severity=severity,
                code="DIVERT_CYCLE",
                message="Knots divert to each other before reaching any choice.",
                context={"cycle": cycle_path},
            )
        )
