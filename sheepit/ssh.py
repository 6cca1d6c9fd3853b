"""Locating the SSH private key used to talk to remotes."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

from sheepit.errors import SheepError

KEY_PATH_ENV = "SHEEPIT_SSH_KEY_PATH"


def find_best_key_name(file_names: Iterable[str]) -> str:
    """The first name that looks like a private key (``id_*`` but not ``*.pub``)."""
    for name in file_names:
        if name.startswith("id_") and not name.endswith(".pub"):
            return name
    raise SheepError("failed to find ssh key")


def ssh_file_names(ssh_dir: str | Path) -> list[str]:
    """The names of the entries in ``ssh_dir``, sorted."""
    try:
        return sorted(entry.name for entry in Path(ssh_dir).iterdir())
    except OSError as error:
        raise SheepError(error, kind="io") from error


def ssh_key_path() -> str:
    """The key path from the environment, or the best key found in ``~/.ssh``."""
    from_env = os.environ.get(KEY_PATH_ENV)
    if from_env is not None:
        return os.path.expanduser(from_env)
    ssh_dir = Path(os.path.expanduser("~/.ssh"))
    return str(ssh_dir / find_best_key_name(ssh_file_names(ssh_dir)))