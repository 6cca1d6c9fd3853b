"""Git reference names and the local paths that remote repositories clone to."""

from __future__ import annotations

import re
from pathlib import Path
from urllib.parse import urlsplit

from sheepit.errors import SheepError

_SCP_RE = re.compile(r"^(?:[^@/:\s]+@)?[^/:\s]+:(?P<path>\S*)$")


def branch_ref_name(branch_name: str) -> str:
    """The full reference name of a branch."""
    return f"refs/heads/{branch_name}"


def tag_ref_name(tag: str) -> str:
    """The full reference name of a tag."""
    return f"refs/tags/{tag}"


def _url_path(repo_url: str) -> str:
    url = repo_url.strip()
    if "://" in url:
        parts = urlsplit(url)
        if not parts.scheme:
            raise SheepError(f"invalid git url {repo_url!r}", kind="git url parse")
        return parts.path
    match = _SCP_RE.match(url)
    if match:
        return match["path"]
    if "/" in url:
        return url
    raise SheepError(f"invalid git url {repo_url!r}", kind="git url parse")


def repo_name(repo_url: str) -> str:
    """The repository name in a git URL, without a ``.git`` suffix."""
    path = _url_path(repo_url).rstrip("/")
    name = path.rsplit("/", 1)[-1].removesuffix(".git")
    if not name:
        raise SheepError("no repo name found in git url")
    return name


def repo_path(repo_url: str, directory: str | Path) -> Path:
    """The path inside ``directory`` that the repository at ``repo_url`` clones to."""
    return Path(directory) / repo_name(repo_url)