import pytest

from inkweave.core.consts import ROOT_KNOT_NAME
from inkweave.data.paths import get_sample_story_path
from inkweave.services.story import read_story_from_file, read_story_from_string
from inkweave.services.story_graph_validator import Issue, format_issue, validate_story_graph


def _codes(issues: list[Issue]) -> list[str]:
    return [issue.code for issue in issues]


def test_sample_story_graph_has_no_errors() -> None:
    story = read_story_from_file(get_sample_story_path())
    issues = validate_story_graph(story)

    errors = [issue for issue in issues if issue.severity == "ERROR"]
    warnings = [issue for issue in issues if issue.severity == "WARN"]
    if errors or warnings:
        details = "\n".join(format_issue(issue) for issue in errors + warnings)
        pytest.fail(f"Sample story graph issues:\n{details}")


def test_missing_knot_reference_is_an_error() -> None:
    story = read_story_from_string("Intro.\n* Go -> nowhere\n")

    issues = validate_story_graph(story)

    assert _codes(issues) == ["MISSING_KNOT_REF"]
    issue = issues[0]
    assert issue.severity == "ERROR"
    assert issue.context == {
        "knot": ROOT_KNOT_NAME,
        "field_path": "root[1].choices[0].line",
        "referenced_id": "nowhere",
    }


def test_terminal_targets_are_always_valid() -> None:
    story = read_story_from_string("* Stop -> END\n* Pause -> DONE\n")

    assert validate_story_graph(story) == []


def test_unreachable_knot_is_a_warning() -> None:
    story = read_story_from_string("Intro.\n== orphan\nNobody comes here.\n")

    issues = validate_story_graph(story)

    assert _codes(issues) == ["UNREACHABLE_KNOT"]
    assert issues[0].severity == "WARN"
    assert issues[0].context == {"knot": "orphan"}


def test_ignored_divert_target_is_a_warning() -> None:
    story = read_story_from_string("Intro. -> next -> other\n== next\nText.\n== other\nMore.\n")

    issues = validate_story_graph(story)

    assert sorted(_codes(issues)) == ["IGNORED_DIVERT_TARGET", "UNREACHABLE_KNOT"]
    ignored = next(issue for issue in issues if issue.code == "IGNORED_DIVERT_TARGET")
    assert ignored.context["referenced_id"] == "other"


def test_divert_cycle_without_choices_is_an_error() -> None:
    story = read_story_from_string("== a\nA. -> b\n== b\nB. -> a\n")

    issues = validate_story_graph(story)

    assert _codes(issues) == ["DIVERT_CYCLE"]
    assert issues[0].severity == "ERROR"
    assert issues[0].context == {"cycle": "a -> b -> a"}


def test_divert_cycle_can_be_downgraded_to_a_warning() -> None:
    story = read_story_from_string("== a\n-> a\n")

    issues = validate_story_graph(story, error_on_divert_cycle=False)

    assert [(issue.severity, issue.code) for issue in issues] == [("WARN", "DIVERT_CYCLE")]


def test_loop_through_a_choice_is_not_a_cycle() -> None:
    story = read_story_from_string("== a\n* Go on -> b\n== b\n+ Back -> a\n")

    assert validate_story_graph(story) == []


def test_missing_entry_root_is_reported() -> None:
    story = read_story_from_string("Text.\n")

    issues = validate_story_graph(story, entry_roots=[ROOT_KNOT_NAME, "prologue"])

    assert _codes(issues) == ["MISSING_ENTRY_ROOT"]
    assert issues[0].context == {"referenced_id": "prologue"}


def test_mapping_of_knots_is_accepted() -> None:
    story = read_story_from_string("Text.\n-> next\n== next\nMore.\n== spare\nUnused.\n")

    without_roots = validate_story_graph(story.knots)
    with_roots = validate_story_graph(story.knots, entry_roots=[ROOT_KNOT_NAME])

    assert without_roots == []
    assert _codes(with_roots) == ["UNREACHABLE_KNOT"]


def test_unsupported_input_raises_type_error() -> None:
    with pytest.raises(TypeError):
        validate_story_graph(["not", "a", "story"])


def test_format_issue() -> None:
    issue = Issue(
        severity="ERROR",
        code="MISSING_KNOT_REF",
        message="Divert references missing knot.",
        context={"knot": "a", "referenced_id": "b"},
    )

    assert format_issue(issue) == "[ERROR] MISSING_KNOT_REF: Divert references missing knot. (knot=a referenced_id=b)"


def test_format_issue_without_context() -> None:
    issue = Issue(severity="WARN", code="X", message="Something.", context={})

    assert format_issue(issue) == "[WARN] X: Something."
