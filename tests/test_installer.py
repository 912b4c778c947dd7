"""Tests for locating and installing statusline.sh."""

import stat
import sys

import pytest

from config_store import PersistenceError
from installer import (
    SCRIPT_ENV_VAR,
    find_script_source,
    get_script_install_path,
    install_statusline_script,
)


@pytest.fixture
def script(tmp_path):
    path = tmp_path / "src" / "statusline.sh"
    path.parent.mkdir()
    path.write_text("#!/bin/sh\necho status\n")
    return path


class TestFindScriptSource:

    def test_env_var(self, script, monkeypatch):
        monkeypatch.setenv(SCRIPT_ENV_VAR, str(script))
        assert find_script_source() == script

    def test_env_var_missing_file(self, tmp_path, monkeypatch):
        """A bad $STATUSLINE_SCRIPT is not silently replaced by another copy."""
        monkeypatch.setenv(SCRIPT_ENV_VAR, str(tmp_path / "nope.sh"))
        monkeypatch.chdir(tmp_path)
        (tmp_path / "statusline.sh").write_text("")
        assert find_script_source() is None

    def test_current_directory(self, script, monkeypatch):
        monkeypatch.chdir(script.parent)
        assert find_script_source() == script.parent / "statusline.sh"

    def test_next_to_program(self, script, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        bin_dir = script.parent / "bin"
        bin_dir.mkdir()
        monkeypatch.setattr(sys, "argv", [str(bin_dir / "statusline-config")])
        assert find_script_source() == script.resolve()

    def test_not_found(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "a" / "b" / "c" / "prog")])
        assert find_script_source() is None


class TestInstall:

    def test_default_destination(self, isolated_home):
        assert get_script_install_path() == isolated_home / ".claude" / "statusline.sh"

    def test_copies_and_marks_executable(self, script, tmp_path):
        dest = tmp_path / "out" / "statusline.sh"
        assert install_statusline_script(script, dest) == dest
        assert dest.read_text() == script.read_text()
        assert dest.stat().st_mode & 0o777 == 0o755
        assert dest.stat().st_mode & stat.S_IXUSR

    def test_default_destination_used(self, script, isolated_home):
        dest = install_statusline_script(script)
        assert dest == isolated_home / ".claude" / "statusline.sh"
        assert dest.exists()

    def test_overwrites(self, script, tmp_path):
        dest = tmp_path / "statusline.sh"
        dest.write_text("old")
        install_statusline_script(script, dest)
        assert dest.read_text() == script.read_text()

    def test_missing_source(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, "argv", [str(tmp_path / "a" / "b" / "c" / "prog")])
        with pytest.raises(PersistenceError, match="not found"):
            install_statusline_script(dest=tmp_path / "out.sh")

    def test_explicit_source_missing(self, tmp_path):
        with pytest.raises(PersistenceError):
            install_statusline_script(tmp_path / "gone.sh", tmp_path / "out.sh")

    def test_unwritable_destination(self, script, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        with pytest.raises(PersistenceError, match="Cannot install"):
            install_statusline_script(script, blocker / "statusline.sh")
