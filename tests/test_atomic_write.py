from pathlib import Path

import pytest

from src.utils.files import atomic_write


def test_atomic_write_replaces_target(tmp_path: Path) -> None:
    target = tmp_path / "feeds" / "radiorus-57083.rss"

    with atomic_write(target) as handle:
        handle.write("<rss/>")

    assert target.read_text(encoding="utf-8") == "<rss/>"
    assert list(target.parent.iterdir()) == [target]


def test_atomic_write_keeps_previous_file_on_error(tmp_path: Path) -> None:
    target = tmp_path / "radiorus-57083.rss"
    target.write_text("old", encoding="utf-8")

    with pytest.raises(RuntimeError):
        with atomic_write(target) as handle:
            handle.write("half")
            raise RuntimeError("boom")

    assert target.read_text(encoding="utf-8") == "old"
    assert list(tmp_path.iterdir()) == [target]
