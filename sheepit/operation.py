"""Operations that decide which version a project moves to."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Protocol

from sheepit.token import VERSION, token_trimmer
from sheepit.version import (
    Version,
    VersionUpdate,
    major_version,
    minor_version,
    patch_version,
)
from sheepit.version_list import version_list_from_tags

DEFAULT_VERSION = Version(0, 0, 1)


class _HasCurrentVersion(Protocol):
    def current_version(self) -> Version: ...


@dataclass(frozen=True)
class ProjectVersion:
    """The version a project is at, worked out from its tags and tag pattern."""

    tags: tuple[str, ...] = ()
    tag_pattern: str = VERSION

    def __init__(self, tags: Iterable[str] = (), tag_pattern: str = VERSION) -> None:
        object.__setattr__(self, "tags", tuple(tags))
        object.__setattr__(self, "tag_pattern", tag_pattern)

    def current_version(self) -> Version:
        """The highest version among the tags, or 0.0.1 when there is none."""
        trimmer = token_trimmer(self.tag_pattern, VERSION)
        latest = version_list_from_tags(self.tags, trimmer).latest_version()
        return latest if latest is not None else DEFAULT_VERSION


class BumpMode(enum.Enum):
    """Which part of the version a bump increments."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


_BUMPS = {
    BumpMode.MAJOR: major_version,
    BumpMode.MINOR: minor_version,
    BumpMode.PATCH: patch_version,
}


@dataclass(frozen=True)
class BumpVersion:
    """Move the project from its current version to the next one of a kind."""

    mode: BumpMode

    def version_update(self, project_version: _HasCurrentVersion) -> VersionUpdate:
        """The update from the project's current version to its bumped version."""
        current = project_version.current_version()
        return VersionUpdate(current_version=current, next_version=_BUMPS[self.mode](current))


@dataclass(frozen=True)
class SetVersion:
    """Move the project to a given version, optionally from a given version."""

    next_version: Version
    current_version: Version | None = field(default=None)

    def version_update(self, project_version: _HasCurrentVersion) -> VersionUpdate:
        """The update to ``next_version``, from the given or the project's current version."""
        current = (
            self.current_version
            if self.current_version is not None
            else project_version.current_version()
        )
        return VersionUpdate(current_version=current, next_version=self.next_version)