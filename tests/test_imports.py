def test_import_inkweave_package() -> None:
    import importlib

    module = importlib.import_module("inkweave")
    assert module is not None


def test_public_api_reads_a_story() -> None:
    from inkweave import Line, StoryDone, read_story_from_string

    story = read_story_from_string("Hello there.")
    lines: list[Line] = []
    action = story.start(lines)

    assert isinstance(action, StoryDone)
    assert [line.text for line in lines] == ["Hello there.\n"]


def test_get_logger_uses_module_name() -> None:
    from inkweave.core.logging import get_logger

    logger = get_logger("inkweave.tests")
    assert logger.name == "inkweave.tests"
