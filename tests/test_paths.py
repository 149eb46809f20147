from pathlib import Path

from inkweave.data import paths


def test_get_stories_path_base_path(tmp_path: Path) -> None:
    assert paths.get_stories_path(tmp_path) == tmp_path


def test_get_stories_path_source_repo_exists() -> None:
    stories_path = paths.get_stories_path()
    assert stories_path.name == "stories"
    assert stories_path.exists()


def test_sample_story_is_bundled() -> None:
    sample = paths.get_sample_story_path()
    assert sample.name == paths.SAMPLE_STORY_FILENAME
    assert sample.is_file()


def test_sample_story_path_follows_base_path(tmp_path: Path) -> None:
    assert paths.get_sample_story_path(tmp_path) == tmp_path / "lidenbrock.ink"
