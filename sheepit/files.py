"""Small file helpers that report failures as SheepError."""

from __future__ import annotations

from pathlib import Path

from sheepit.errors import SheepError


def file_exists(path: str | Path) -> bool:
    """Whether ``path`` exists."""
    return Path(path).exists()


def read_to_string(path: str | Path) -> str:
    """The whole UTF-8 text of the file at ``path``."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as error:
        raise SheepError(error, kind="io") from error


def write_string_to_file(path: str | Path, text: str) -> None:
    """Write ``text`` over the start of an existing file, without truncating it."""
    try:
        with open(path, "r+b") as handle:
            handle.write(text.encode("utf-8"))
    except OSError as error:
        raise SheepError(error, kind="io") from error