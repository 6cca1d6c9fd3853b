"""Versions gathered from a repository's tags."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from sheepit.token import TokenTrimmer
from sheepit.version import Version, parse_version


@dataclass(frozen=True)
class VersionList:
    """Versions in ascending order."""

    versions: tuple[Version, ...] = ()

    def __iter__(self) -> Iterator[Version]:
        return iter(self.versions)

    def __len__(self) -> int:
        return len(self.versions)

    def latest_version(self) -> Version | None:
        """The highest version, or None if there are none."""
        return self.versions[-1] if self.versions else None


def _parse_or_none(text: str) -> Version | None:
    try:
        return parse_version(text)
    except ValueError:
        return None


def version_list_from_tags(
    tag_names: Iterable[str], token_trimmer: TokenTrimmer | None = None
) -> VersionList:
    """Build a sorted version list from tag names, skipping tags that are not versions."""
    names = (token_trimmer.trim_text(name) for name in tag_names) if token_trimmer else tag_names
    versions = (_parse_or_none(name) for name in names)
    return VersionList(tuple(sorted(v for v in versions if v is not None)))