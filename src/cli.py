"""Command-line interface for statusline-config."""

import argparse
import sys
from pathlib import Path

from config_store import ConfigStore, PersistenceError, get_config_path
from constants import APP_NAME, APP_VERSION
from installer import install_statusline_script
from model import default_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Interactive editor for the Claude statusline configuration.",
    )
    parser.add_argument(
        "--version", action="version", version=f"{APP_NAME} {APP_VERSION}"
    )
    parser.add_argument(
        "--config", type=Path, metavar="PATH",
        help=f"config file to edit (default: {get_config_path()})",
    )
    parser.add_argument(
        "--defaults", action="store_true",
        help="start from built-in defaults instead of the stored file",
    )
    parser.add_argument(
        "--print-path", action="store_true",
        help="print the config file path and exit",
    )
    parser.add_argument(
        "--install-script", action="store_true",
        help="install statusline.sh to ~/.claude/ and exit",
    )
    parser.add_argument(
        "--script", type=Path, metavar="PATH",
        help="statusline.sh to install (default: $STATUSLINE_SCRIPT or next to the program)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    path = args.config.expanduser() if args.config else get_config_path()

    if args.print_path:
        print(path)
        return 0

    if args.install_script:
        try:
            dest = install_statusline_script(args.script)
        except PersistenceError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        print(f"Installed {dest}")
        return 0

    store = ConfigStore(path)
    if args.defaults:
        config = default_config()
    else:
        try:
            config = store.load()
        except PersistenceError as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            return 1

    # Deferred: importing app configures logging and loads Textual
    from app import StatuslineConfigApp
    from controller import NavigationCoordinator
    from sounds import list_available_sounds, play_preview

    coordinator = NavigationCoordinator(
        config,
        store,
        installer=lambda: install_statusline_script(args.script),
        sound_source=list_available_sounds,
        sound_player=play_preview,
    )
    StatuslineConfigApp(coordinator).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
