"""Installation of the statusline runtime script."""

from __future__ import annotations

import logging
import os
import shutil
import sys
from pathlib import Path

from config_store import PersistenceError
from constants import SCRIPT_FILE_NAME

log = logging.getLogger(__name__)

SCRIPT_ENV_VAR = "STATUSLINE_SCRIPT"


def get_script_install_path() -> Path:
    """Where statusline.sh is installed."""
    return Path.home() / ".claude" / SCRIPT_FILE_NAME


def find_script_source() -> Path | None:
    """Locate statusline.sh: $STATUSLINE_SCRIPT, then next to the program.

    Returns:
        Path to the script, or None if no candidate exists
    """
    env_path = os.environ.get(SCRIPT_ENV_VAR)
    if env_path:
        return Path(env_path) if Path(env_path).is_file() else None

    program_dir = Path(sys.argv[0]).resolve().parent
    candidates = [
        Path.cwd() / SCRIPT_FILE_NAME,
        program_dir / SCRIPT_FILE_NAME,
        program_dir.parent / SCRIPT_FILE_NAME,
        program_dir.parent.parent / SCRIPT_FILE_NAME,
    ]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def install_statusline_script(source: Path | None = None, dest: Path | None = None) -> Path:
    """Copy statusline.sh into place with executable permissions.

    Args:
        source: Script to install (located with find_script_source() when None)
        dest: Install location (get_script_install_path() when None)

    Returns:
        The installed path

    Raises:
        PersistenceError: No script was found or the copy failed.
    """
    source = source if source is not None else find_script_source()
    if source is None or not source.is_file():
        raise PersistenceError(
            f"{SCRIPT_FILE_NAME} not found (set {SCRIPT_ENV_VAR} or use --script)"
        )
    dest = dest if dest is not None else get_script_install_path()
    try:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, dest)
        dest.chmod(0o755)
    except OSError as e:
        raise PersistenceError(f"Cannot install {dest}: {e}") from e
    log.info(f"Installed {source} to {dest}")
    return dest

