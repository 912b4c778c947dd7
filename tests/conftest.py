"""Shared fixtures for statusline-config tests."""

from pathlib import Path

import pytest

from config_store import ConfigStore
from controller import NavigationCoordinator
from model import Choice, default_config
from sounds import NO_SOUND

SYSTEM_GLASS = "/System/Library/Sounds/Glass.aiff"
CUSTOM_DING = "/home/user/.claude/sounds/ding.mp3"


def key_character(key: str) -> str | None:
    """Character Textual reports for a key name."""
    if key == "space":
        return " "
    if len(key) == 1:
        return key
    return None


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    """Keep HOME, log files and script lookups inside tmp_path."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "state"))
    monkeypatch.delenv("STATUSLINE_SCRIPT", raising=False)
    return home


@pytest.fixture
def config():
    """Config holding the built-in defaults."""
    return default_config()


@pytest.fixture
def store(tmp_path):
    """ConfigStore writing into a temporary .claude directory."""
    return ConfigStore(tmp_path / ".claude" / ".statusline.config")


class RecordingInstaller:
    """Stands in for install_statusline_script and records calls."""

    def __init__(self, dest: Path):
        self.dest = dest
        self.calls = 0

    def __call__(self) -> Path:
        self.calls += 1
        return self.dest


@pytest.fixture
def installer(tmp_path):
    return RecordingInstaller(tmp_path / ".claude" / "statusline.sh")


@pytest.fixture
def sound_options():
    return [
        NO_SOUND,
        Choice("Glass (System)", SYSTEM_GLASS),
        Choice("ding (Custom)", CUSTOM_DING),
    ]


@pytest.fixture
def played():
    """Paths passed to the sound player."""
    return []


@pytest.fixture
def coordinator(config, store, installer, sound_options, played):
    """Coordinator wired to temporary storage and fake sound/installer hooks."""
    return NavigationCoordinator(
        config,
        store,
        installer=installer,
        sound_source=lambda: list(sound_options),
        sound_player=played.append,
    )


@pytest.fixture
def press():
    """Send key names to a controller or coordinator; returns the last result."""

    def _press(target, *keys):
        result = None
        for key in keys:
            result = target.handle_key(key, key_character(key))
        return result

    return _press


@pytest.fixture
def type_text():
    """Type each character of a string into a controller or coordinator."""

    def _type(target, text):
        for ch in text:
            target.handle_key("space" if ch == " " else ch, ch)

    return _type
