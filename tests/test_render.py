"""Tests for CLI rendering utilities."""
import pytest

from inkweave.presentation.cli.render import (
    debug_enabled,
    render_choices,
    render_lines,
    wrap_text,
)
from inkweave.services import Line


def test_wrap_text_short_text() -> None:
    """Short text should not be wrapped."""
    assert wrap_text("Hello world", width=50) == ["Hello world"]


def test_wrap_text_long_text_wraps() -> None:
    """Long text should wrap at word boundaries."""
    text = "This is a very long line that definitely needs to be wrapped because it exceeds the width"
    result = wrap_text(text, width=40)

    assert len(result) > 1
    for line in result:
        assert len(line) <= 40
    assert " ".join(line.strip() for line in result) == text


def test_wrap_text_prefix_indents_continuation_lines() -> None:
    text = "A choice with a long description that will not fit on a single line"
    result = wrap_text(text, width=30, prefix="1. ")

    assert result[0].startswith("1. ")
    for line in result[1:]:
        assert line.startswith("   ")
        assert not line.startswith("    ")


def test_wrap_text_empty() -> None:
    assert wrap_text("") == [""]
    assert wrap_text("", prefix="1. ") == ["1."]


def test_debug_enabled_requires_explicit_one(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("INKWEAVE_DEBUG", "true")
    assert not debug_enabled()
    monkeypatch.setenv("INKWEAVE_DEBUG", "1")
    assert debug_enabled()


def test_render_lines_hides_tags_by_default(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("INKWEAVE_DEBUG", raising=False)

    render_lines([Line(text="It was dark.\n", tags=["mood: tense"])])

    assert capsys.readouterr().out == "It was dark.\n"


def test_render_lines_shows_tags_when_asked(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("INKWEAVE_DEBUG", raising=False)

    render_lines([Line(text="It was dark.\n", tags=["mood: tense"])], show_tags=True)

    assert capsys.readouterr().out == "It was dark.\n  #mood: tense\n"


def test_render_lines_step_mode_waits_for_enter(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    prompts: list[str] = []
    monkeypatch.setattr("builtins.input", lambda *args: prompts.append("enter") or "")

    render_lines([Line(text="One.\n"), Line(text="Two.\n")], step=True)

    assert prompts == ["enter", "enter"]
    assert capsys.readouterr().out == "One.\nTwo.\n"


def test_render_choices_numbers_from_one(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("INKWEAVE_DEBUG", raising=False)

    render_choices([Line(text="Left"), Line(text="Right", tags=["risky"])])

    out = capsys.readouterr().out
    assert "=== Choices ===" in out
    assert "1. Left\n" in out
    assert "2. Right\n" in out
    assert "#risky" not in out


def test_render_choices_nothing_for_empty(capsys: pytest.CaptureFixture[str]) -> None:
    render_choices([])

    assert capsys.readouterr().out == ""
