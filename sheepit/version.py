"""Semantic versions: lenient parsing, ordering and bumping."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass

_VERSION_RE = re.compile(
    r"""
    ^[vV]?
    (?P<major>\d+)
    (?:\.(?P<minor>\d+)
        (?:\.(?P<patch>\d+)(?P<extra>(?:\.\d+)*))?
    )?
    (?:[-.](?P<pre>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    (?:\+(?P<build>[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*))?
    $
    """,
    re.VERBOSE,
)


def _identifier_key(identifier: str) -> tuple[int, int | str]:
    if identifier.isdigit():
        return (0, int(identifier))
    return (1, identifier)


@functools.total_ordering
@dataclass(frozen=True)
class Version:
    """A semantic version with optional pre-release and build identifiers."""

    major: int
    minor: int
    patch: int
    pre: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    def _sort_key(self) -> tuple:
        pre_key = (1,) if not self.pre else (0, tuple(map(_identifier_key, self.pre)))
        build_key = tuple(map(_identifier_key, self.build))
        return (self.major, self.minor, self.patch, pre_key, build_key)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += "-" + ".".join(self.pre)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


@dataclass(frozen=True)
class VersionUpdate:
    """The version a project is at and the version it moves to."""

    current_version: Version
    next_version: Version


def parse_version(text: str) -> Version:
    """Parse a version leniently: a leading ``v`` and missing parts are allowed.

    Raises ValueError if ``text`` is not a version.
    """
    match = _VERSION_RE.match(text.strip())
    if match is None:
        raise ValueError(f"not a version: {text!r}")
    extra = tuple(part for part in match["extra"].split(".") if part) if match["extra"] else ()
    pre = tuple(match["pre"].split(".")) if match["pre"] else ()
    build = tuple(match["build"].split(".")) if match["build"] else ()
    return Version(
        major=int(match["major"]),
        minor=int(match["minor"] or 0),
        patch=int(match["patch"] or 0),
        pre=pre,
        build=extra + build,
    )


def major_version(version: Version) -> Version:
    """The next major version."""
    return Version(version.major + 1, 0, 0)


def minor_version(version: Version) -> Version:
    """The next minor version."""
    return Version(version.major, version.minor + 1, 0)


def patch_version(version: Version) -> Version:
    """The next patch version."""
    return Version(version.major, version.minor, version.patch + 1)