import logging

import pytest

from inkweave.data.errors import InvalidDivertError, LineError
from inkweave.data.line_parser import parse_line_data, split_tags
from inkweave.domain.line import REGULAR, Divert, LineData


def test_plain_line_is_regular_without_glue() -> None:
    line = parse_line_data("Hello, world!")

    assert line.text == "Hello, world!"
    assert line.kind == REGULAR
    assert line.tags == []
    assert not line.glue_start
    assert not line.glue_end


def test_surrounding_whitespace_is_trimmed() -> None:
    assert parse_line_data("   Hello, world!   ").text == "Hello, world!"


def test_inner_whitespace_collapses_to_single_spaces() -> None:
    assert parse_line_data("Hello,      World!\t  again").text == "Hello, World! again"


def test_empty_line_is_valid() -> None:
    assert parse_line_data("") == LineData()


def test_left_glue_keeps_leading_space() -> None:
    line = parse_line_data("<>    Hello, world!")

    assert line.text == " Hello, world!"
    assert line.glue_start
    assert not line.glue_end


def test_tilde_glue_marker_is_accepted() -> None:
    left = parse_line_data("~~  Hello")
    right = parse_line_data("Hello  ~~")

    assert left.text == " Hello"
    assert left.glue_start
    assert right.text == "Hello "
    assert right.glue_end


def test_right_glue_keeps_trailing_space() -> None:
    line = parse_line_data("Hello, world!    <>")

    assert line.text == "Hello, world! "
    assert line.glue_end
    assert not line.glue_start


def test_bare_divert_is_a_blank_glued_line() -> None:
    line = parse_line_data("-> knot_name")

    assert line.kind == Divert("knot_name")
    assert line.divert_target == "knot_name"
    assert line.is_blank
    assert line.glue_end


def test_embedded_divert_acts_as_right_glue() -> None:
    line = parse_line_data("Hello, world!->knot_name")

    assert line.kind == Divert("knot_name")
    assert line.text == "Hello, world! "
    assert line.glue_end


def test_divert_after_explicit_glue_adds_no_extra_space() -> None:
    line = parse_line_data("Hello <> -> knot")

    assert line.text == "Hello "
    assert line.glue_end


def test_tags_are_split_off_in_order() -> None:
    line = parse_line_data("Hello, world!#blue colour#transparent#italic text")

    assert line.text == "Hello, world!"
    assert line.tags == ["blue colour", "transparent", "italic text"]


def test_tags_are_trimmed() -> None:
    line = parse_line_data("Line # one # two ")

    assert line.text == "Line"
    assert line.tags == ["one", "two"]


def test_tags_after_a_divert_are_kept() -> None:
    line = parse_line_data("Hello -> knot # tag")

    assert line.kind == Divert("knot")
    assert line.tags == ["tag"]


def test_tag_only_line_is_blank() -> None:
    line = parse_line_data("# mood: tense")

    assert line.is_blank
    assert line.tags == ["mood: tense"]


def test_split_tags_drops_empty_tags() -> None:
    assert split_tags("Text ## a #") == ("Text ", ["a"])


def test_only_first_divert_target_is_followed(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        line = parse_line_data("-> first -> second")

    assert line.kind == Divert("first")
    assert line.kind.ignored == ("second",)
    assert "second" in caplog.text


@pytest.mark.parametrize("raw", ["Hello ->", "-> two words", "-> ok ->"])
def test_invalid_divert_target_raises(raw: str) -> None:
    with pytest.raises(InvalidDivertError) as excinfo:
        parse_line_data(raw)

    assert isinstance(excinfo.value, LineError)
    assert raw in str(excinfo.value)
