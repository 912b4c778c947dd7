"""Notification sound discovery and preview playback."""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
from pathlib import Path

from model.choices import Choice

log = logging.getLogger(__name__)

NO_SOUND = Choice("(None)", "")

SYSTEM_SOUNDS_DIR = Path("/System/Library/Sounds")
USER_SOUND_EXTENSIONS = (".aiff", ".mp3", ".wav", ".m4a")


def get_user_sounds_dir() -> Path:
    return Path.home() / ".claude" / "sounds"


def _scan(directory: Path, extensions: tuple[str, ...], tag: str) -> list[Choice]:
    if not directory.is_dir():
        return []
    try:
        entries = sorted(directory.iterdir())
    except OSError as e:
        log.warning(f"Cannot list sounds in {directory}: {e}")
        return []
    return [
        Choice(f"{entry.stem} ({tag})", str(entry))
        for entry in entries
        if entry.is_file() and entry.suffix.lower() in extensions
    ]


def list_available_sounds(
    system_dir: Path | None = None,
    user_dir: Path | None = None,
) -> list[Choice]:
    """Sound options: (None), then system sounds, then the user's own.

    System sounds are only looked for on macOS unless a directory is given.
    """
    options = [NO_SOUND]
    if system_dir is None and sys.platform == "darwin":
        system_dir = SYSTEM_SOUNDS_DIR
    if system_dir is not None:
        options += _scan(system_dir, (".aiff",), "System")
    options += _scan(user_dir if user_dir is not None else get_user_sounds_dir(),
                     USER_SOUND_EXTENSIONS, "Custom")
    return options


def get_player_command(path: str) -> list[str] | None:
    """Command that plays a sound file, or None when no player is available."""
    if sys.platform == "darwin":
        return ["afplay", path]
    player = shutil.which("paplay")
    if player:
        return [player, path]
    return None


def play_preview(path: str) -> None:
    """Start playing a sound and return immediately."""
    if not path:
        return
    cmd = get_player_command(path)
    if cmd is None:
        log.info(f"No sound player available to preview {path}")
        return
    try:
        subprocess.Popen(
            cmd,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )
    except OSError as e:
        log.warning(f"Sound preview failed for {path}: {e}")
