"""Find-and-replace transforms applied to project files on a version change."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

from sheepit.config import TransformConfig
from sheepit.files import read_to_string, write_string_to_file
from sheepit.token import VERSION
from sheepit.version import VersionUpdate

Reader = Callable[[Path], str]
Writer = Callable[[Path, str], None]


@dataclass(frozen=True)
class FileTransformer:
    """Applies one transform to one file inside the project."""

    config: TransformConfig
    project_path: Path
    reader: Reader = read_to_string
    writer: Writer = write_string_to_file

    def transform(self, version_update: VersionUpdate) -> str:
        """Replace the first match in the file and return its relative path."""
        relative_path = self.config.path
        path = Path(self.project_path) / relative_path
        text = self.reader(path)
        transformed = text.replace(
            self._find_string(version_update), self._replace_string(version_update), 1
        )
        self.writer(path, transformed)
        return relative_path

    def _find_string(self, version_update: VersionUpdate) -> str:
        find = self.config.find if self.config.find is not None else self.config.replace
        return find.replace(VERSION, str(version_update.current_version), 1)

    def _replace_string(self, version_update: VersionUpdate) -> str:
        return self.config.replace.replace(VERSION, str(version_update.next_version), 1)


@dataclass(frozen=True)
class ProjectTransformer:
    """Applies a list of transforms to the files of one project."""

    project_path: Path
    reader: Reader = read_to_string
    writer: Writer = write_string_to_file

    def transform(
        self, configs: Iterable[TransformConfig], version_update: VersionUpdate
    ) -> list[str]:
        """Apply every transform in order; return the distinct paths touched, sorted."""
        paths = {
            FileTransformer(config, Path(self.project_path), self.reader, self.writer)
            .transform(version_update)
            for config in configs
        }
        return sorted(paths)