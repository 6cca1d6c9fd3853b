# sheepit

Building blocks for cutting releases of git projects that follow semantic
versioning. The package works out a project's current version from its tag
names, computes the next version, and rewrites version strings in the
project's files. Settings come from a `sheepit.toml` file in the repository.

## Installation

```
pip install .
```

Install with the test extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Configuration

Put a `sheepit.toml` (or `.sheepit.toml`) at the root of the repository.
`sheepit.toml` is preferred when both exist. Every key is optional; the values
below are the defaults.

```toml
[repository]
branch_pattern = "release/{version}"
commit_message = "preparing release {version}"
default_branch = "main"
enable_branch = false
enable_commit = false
enable_tag = true
enable_push = true
tag_pattern = "{version}"
```

Subprojects and transforms are arrays of tables:

```toml
[[subprojects]]
repo_url = "https://example.com/example/other.git"

[[transforms]]
path = "Cargo.toml"
find = 'version = "{version}"'
replace = 'version = "{version}"'
```

In a transform, the first `{version}` in `find` stands for the current version
and the first `{version}` in `replace` for the next one. With no `find`,
`replace` is used for both. Only the first match in the file is replaced.

`sheepit.config.open_config(repo_path)` returns a `Config` (with `repository`,
`subprojects` and `transforms`), falling back to the defaults when no readable
file is found. `config_from_toml(text)` parses text directly. Malformed TOML,
missing required keys and wrongly typed values raise `SheepError`.

## Usage

```python
from sheepit.config import open_config
from sheepit.operation import BumpMode, BumpVersion, ProjectVersion
from sheepit.transform import ProjectTransformer

config = open_config("path/to/repo")
project_version = ProjectVersion(
    tags=["1.0.0", "1.1.0", "not-a-version"],
    tag_pattern=config.repository.tag_pattern,
)
update = BumpVersion(BumpMode.MINOR).version_update(project_version)
# update.current_version == 1.1.0, update.next_version == 1.2.0

changed = ProjectTransformer("path/to/repo").transform(config.transforms, update)
# changed: the distinct relative paths that were rewritten, sorted
```

`ProjectVersion.current_version()` trims the tag pattern's prefix and suffix
from each tag, ignores tags that are not versions, and returns the highest
one, or `0.0.1` when there is none. `SetVersion(next_version, current_version=None)`
moves to a fixed version instead of bumping.

Modules:

- `sheepit.version`: `Version`, `VersionUpdate`, `parse_version` (lenient: a
  leading `v` and missing minor or patch parts are accepted), `major_version`,
  `minor_version`, `patch_version`.
- `sheepit.version_list`: `version_list_from_tags` and
  `VersionList.latest_version`.
- `sheepit.token`: `token_trimmer` and `TokenTrimmer.trim_text`.
- `sheepit.operation`: `BumpMode`, `BumpVersion`, `SetVersion`, `ProjectVersion`.
- `sheepit.transform`: `FileTransformer`, `ProjectTransformer`; both accept a
  custom reader and writer.
- `sheepit.config`: `Config`, `RepoConfig`, `TransformConfig`,
  `SubprojectConfig`, `config_from_toml`, `config_paths`, `find_config`,
  `open_config`.
- `sheepit.refs`: `branch_ref_name`, `tag_ref_name`, `repo_name`, `repo_path`
  (the directory a repository URL would be cloned into).
- `sheepit.ssh`: `find_best_key_name`, `ssh_file_names`, `ssh_key_path` (from
  `SHEEPIT_SSH_KEY_PATH`, or the first `id_*` private key in `~/.ssh`).
- `sheepit.files`: `file_exists`, `read_to_string`, `write_string_to_file`
  (writes over the start of an existing file without truncating it).
- `sheepit.paths`: `expand_path`, `temp_directory`.

Errors are raised as `sheepit.errors.SheepError`.

## What it does not do

The package does not touch git itself. It does not read tags from a
repository, create branches, commits or tags, push to remotes, or clone
subprojects; the caller supplies tag names and carries out those steps. The
`branch_pattern`, `commit_message`, `enable_*` and `subprojects` settings are
parsed and returned but nothing in the package acts on them. There is no
command-line program.