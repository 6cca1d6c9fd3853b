import shutil
from pathlib import Path

from sheepit.paths import expand_path, temp_directory


def test_expanded_path(monkeypatch, tmp_path):
    home = str(tmp_path)
    monkeypatch.setenv("HOME", home)
    monkeypatch.setenv("USERPROFILE", home)
    assert expand_path("~/foo") == Path(f"{home}/foo")


def test_expand_path_without_tilde_is_unchanged():
    assert expand_path("/some/dir") == Path("/some/dir")


def test_temp_directory_creates_fresh_directory():
    first = temp_directory()
    second = temp_directory()
    try:
        assert first.is_dir()
        assert first.name.startswith("sheepit")
        assert first != second
        assert list(first.iterdir()) == []
    finally:
        shutil.rmtree(first)
        shutil.rmtree(second)