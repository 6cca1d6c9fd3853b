"""Path helpers: home expansion and scratch directories."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from sheepit.errors import SheepError


def expand_path(path: str | os.PathLike[str]) -> Path:
    """``path`` with a leading ``~`` replaced by the home directory."""
    return Path(os.path.expanduser(os.fspath(path)))


def temp_directory() -> Path:
    """Create a new directory named ``sheepit...`` that is left in place."""
    try:
        return Path(tempfile.mkdtemp(prefix="sheepit"))
    except OSError as error:
        raise SheepError(error, kind="io") from error