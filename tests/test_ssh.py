import pytest

from sheepit.errors import SheepError
from sheepit.ssh import KEY_PATH_ENV, find_best_key_name, ssh_file_names, ssh_key_path


def test_find_best_key_name_empty_names():
    with pytest.raises(SheepError) as info:
        find_best_key_name([])
    assert info.value == SheepError("failed to find ssh key")


def test_find_best_key_name_typical_ssh():
    names = ["config", "id_rsa", "id_rsa.pub", "known_hosts"]
    assert find_best_key_name(names) == "id_rsa"


def test_find_best_key_name_only_public_keys():
    with pytest.raises(SheepError):
        find_best_key_name(["id_rsa.pub", "config"])


def test_ssh_file_names_lists_directory(tmp_path):
    for name in ["known_hosts", "id_rsa", "config"]:
        (tmp_path / name).write_text("")
    assert ssh_file_names(tmp_path) == ["config", "id_rsa", "known_hosts"]


def test_ssh_file_names_missing_directory(tmp_path):
    with pytest.raises(SheepError) as info:
        ssh_file_names(tmp_path / "missing")
    assert "io error" in info.value.message


def test_ssh_key_path_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.setenv(KEY_PATH_ENV, "~/keys/id_custom")
    assert ssh_key_path() == str(tmp_path / "keys" / "id_custom")


def test_ssh_key_path_from_home(monkeypatch, tmp_path):
    ssh_dir = tmp_path / ".ssh"
    ssh_dir.mkdir()
    for name in ["config", "id_ed25519", "id_ed25519.pub"]:
        (ssh_dir / name).write_text("")
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv(KEY_PATH_ENV, raising=False)
    assert ssh_key_path() == str(ssh_dir / "id_ed25519")