"""Project configuration read from ``sheepit.toml`` or ``.sheepit.toml``."""

from __future__ import annotations

import tomllib
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sheepit.errors import SheepError
from sheepit.files import file_exists as _file_exists
from sheepit.files import read_to_string

CONFIG_NAMES = ("sheepit.toml", ".sheepit.toml")

_PARSE_KIND = "config parse"
_MISSING = object()


@dataclass(frozen=True)
class RepoConfig:
    """How the repository itself is branched, committed, tagged and pushed."""

    branch_pattern: str = "release/{version}"
    commit_message: str = "preparing release {version}"
    default_branch: str = "main"
    enable_branch: bool = False
    enable_commit: bool = False
    enable_push: bool = True
    enable_tag: bool = True
    tag_pattern: str = "{version}"


@dataclass(frozen=True)
class TransformConfig:
    """A find-and-replace applied to one file of the project."""

    path: str
    replace: str
    find: str | None = None


@dataclass(frozen=True)
class SubprojectConfig:
    """A repository that is released along with this one."""

    repo_url: str


@dataclass(frozen=True)
class Config:
    """The whole project configuration."""

    repository: RepoConfig = field(default_factory=RepoConfig)
    subprojects: tuple[SubprojectConfig, ...] = ()
    transforms: tuple[TransformConfig, ...] = ()


def _field(table: dict[str, Any], key: str, expected: type, where: str,
           default: Any = _MISSING) -> Any:
    if key not in table:
        if default is _MISSING:
            raise SheepError(f"missing field `{key}` in {where}", kind=_PARSE_KIND)
        return default
    value = table[key]
    if not isinstance(value, expected):
        raise SheepError(
            f"invalid type for `{key}` in {where}: expected {expected.__name__}",
            kind=_PARSE_KIND,
        )
    return value


def _table(value: Any, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SheepError(f"invalid type for {where}: expected a table", kind=_PARSE_KIND)
    return value


def _array_of_tables(data: dict[str, Any], key: str) -> list[dict[str, Any]]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise SheepError(f"invalid type for `{key}`: expected an array", kind=_PARSE_KIND)
    return [_table(item, key) for item in value]


def _repo_config(table: dict[str, Any]) -> RepoConfig:
    defaults = RepoConfig()
    where = "repository"
    return RepoConfig(
        branch_pattern=_field(table, "branch_pattern", str, where, defaults.branch_pattern),
        commit_message=_field(table, "commit_message", str, where, defaults.commit_message),
        default_branch=_field(table, "default_branch", str, where, defaults.default_branch),
        enable_branch=_field(table, "enable_branch", bool, where, defaults.enable_branch),
        enable_commit=_field(table, "enable_commit", bool, where, defaults.enable_commit),
        enable_push=_field(table, "enable_push", bool, where, defaults.enable_push),
        enable_tag=_field(table, "enable_tag", bool, where, defaults.enable_tag),
        tag_pattern=_field(table, "tag_pattern", str, where, defaults.tag_pattern),
    )


def _transform_config(table: dict[str, Any]) -> TransformConfig:
    where = "transforms"
    return TransformConfig(
        path=_field(table, "path", str, where),
        replace=_field(table, "replace", str, where),
        find=_field(table, "find", str, where, None),
    )


def _subproject_config(table: dict[str, Any]) -> SubprojectConfig:
    return SubprojectConfig(repo_url=_field(table, "repo_url", str, "subprojects"))


def config_from_toml(text: str) -> Config:
    """Parse configuration from TOML text, filling in defaults for what is absent."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as error:
        raise SheepError(error, kind=_PARSE_KIND) from error
    repository = _repo_config(_table(data.get("repository", {}), "repository"))
    subprojects = tuple(map(_subproject_config, _array_of_tables(data, "subprojects")))
    transforms = tuple(map(_transform_config, _array_of_tables(data, "transforms")))
    return Config(repository=repository, subprojects=subprojects, transforms=transforms)


def config_paths(repo_path: str | Path) -> list[Path]:
    """The places a configuration file may live, in order of preference."""
    base = Path(repo_path)
    return [base / name for name in CONFIG_NAMES]


def find_config(
    repo_path: str | Path, file_exists: Callable[[Path], bool] = _file_exists
) -> Path | None:
    """The first configuration file that exists, or None."""
    return next((path for path in config_paths(repo_path) if file_exists(path)), None)


def open_config(repo_path: str | Path) -> Config:
    """The project's configuration, or the defaults when no readable file is found."""
    path = find_config(repo_path)
    if path is None:
        return Config()
    try:
        text = read_to_string(path)
    except SheepError:
        return Config()
    return config_from_toml(text)