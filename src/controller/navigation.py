"""NavigationCoordinator: routes keys to screens and owns session state.

The coordinator never reads or writes field values itself. It forwards each
key to the active controller, and from the KeyResult decides whether the
config became dirty, whether to return to the menu, or whether to run one of
the menu's save actions. Saving and the quit confirmation live here.
"""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Callable

from config_store import ConfigStore, PersistenceError
from controller.base import KeyResult, ScreenController
from controller.display import DisplayController
from controller.icons import IconsController
from controller.mascot import MascotController
from controller.menu import MenuController
from controller.notifications import NotificationsController
from controller.sections import SectionsController
from installer import install_statusline_script
from model.choices import Choice
from model.statusline_config import StatuslineConfig

log = logging.getLogger(__name__)


class Screen(str, Enum):
    MENU = "menu"
    SECTIONS = "sections"
    ICONS = "icons"
    MASCOT = "mascot"
    DISPLAY = "display"
    NOTIFICATIONS = "notifications"


SCREEN_CONTROLLERS: dict[Screen, type[ScreenController]] = {
    Screen.SECTIONS: SectionsController,
    Screen.ICONS: IconsController,
    Screen.MASCOT: MascotController,
    Screen.DISPLAY: DisplayController,
    Screen.NOTIFICATIONS: NotificationsController,
}

CONFIRM_SAVE_KEYS = ("s", "S")
CONFIRM_DISCARD_KEYS = ("y", "Y")
CONFIRM_CANCEL_KEYS = ("n", "N", "escape")


class NavigationCoordinator:
    """Top-level editor state: active screen, dirty flag, messages, quitting."""

    def __init__(
        self,
        config: StatuslineConfig,
        store: ConfigStore,
        installer: Callable[[], Path] | None = install_statusline_script,
        sound_source: Callable[[], list[Choice]] | None = None,
        sound_player: Callable[[str], None] | None = None,
    ):
        """Create the coordinator.

        Args:
            config: The config edited for the whole session
            store: Persistence for save/revert
            installer: Installs the runtime script for "Save & Apply"
            sound_source: Lists notification sounds for the sound picker
            sound_player: Plays a sound preview
        """
        self.config = config
        self.store = store
        self.installer = installer
        self.screen = Screen.MENU
        self.dirty = False
        self.message: str | None = None
        self.error: str | None = None
        self.confirming_quit = False
        self.should_quit = False

        choice_sources = {"sounds": sound_source} if sound_source else {}
        self.menu = MenuController()
        self.controllers: dict[Screen, ScreenController] = {
            screen: cls(config, choice_sources=choice_sources, preview_sound=sound_player)
            for screen, cls in SCREEN_CONTROLLERS.items()
        }

    @property
    def active(self) -> ScreenController | MenuController:
        if self.screen == Screen.MENU:
            return self.menu
        return self.controllers[self.screen]

    def switch_to(self, screen: Screen) -> None:
        log.debug(f"Screen {self.screen.value} -> {screen.value}")
        self.screen = screen

    # =========================================================================
    # Key routing
    # =========================================================================

    def handle_key(self, key: str, character: str | None = None) -> None:
        """Process one key press."""
        if self.confirming_quit:
            self._handle_confirm_key(key)
            return

        if key == "ctrl+c":
            self.request_quit()
            return
        if key == "ctrl+s":
            self.request_save()
            return
        if key == "ctrl+r":
            self.revert()
            return

        result = self.active.handle_key(key, character)
        self._apply(result)

    def _apply(self, result: KeyResult) -> None:
        if result.changed:
            self.dirty = True
            self.message = None
        if result.message:
            self.message = result.message
        if result.leave:
            self.switch_to(Screen.MENU)
        if result.target:
            self._run_menu_target(result.target)

    def _run_menu_target(self, target: str) -> None:
        if target == "quit":
            self.request_quit()
        elif target == "save_apply":
            if self.request_save(install=True):
                self.should_quit = True
        elif target == "save_only":
            if self.request_save():
                self.should_quit = True
        else:
            self.switch_to(Screen(target))

    # =========================================================================
    # Save / revert / quit
    # =========================================================================

    def request_save(self, install: bool = False) -> bool:
        """Save the config (and install the script); True on success.

        On failure the error is shown and the config stays dirty.
        """
        try:
            self.store.save(self.config)
        except PersistenceError as e:
            return self._fail(f"Save failed: {e}")
        if install and self.installer is not None:
            try:
                installed = self.installer()
            except PersistenceError as e:
                return self._fail(f"Install failed: {e}")
        self.dirty = False
        self.error = None
        if install and self.installer is not None:
            self.message = f"Saved and installed {installed}"
        else:
            self.message = f"Saved to {self.store.path}"
        return True

    def _fail(self, error: str) -> bool:
        log.error(error)
        self.error = error
        self.message = None
        return False

    def revert(self) -> None:
        """Discard session edits by reloading the stored file."""
        try:
            config = self.store.load()
        except PersistenceError as e:
            self._fail(f"Revert failed: {e}")
            return
        self.replace_config(config)
        self.dirty = False
        self.error = None
        self.message = "Reverted to saved config"

    def replace_config(self, config: StatuslineConfig) -> None:
        """Point every controller at a new config object."""
        self.config = config
        for controller in self.controllers.values():
            controller.attach(config)

    def request_quit(self) -> None:
        if self.dirty:
            self.confirming_quit = True
        else:
            self.should_quit = True

    def _handle_confirm_key(self, key: str) -> None:
        if key in CONFIRM_DISCARD_KEYS:
            log.info("Quitting without saving")
            self.confirming_quit = False
            self.should_quit = True
        elif key in CONFIRM_CANCEL_KEYS:
            self.confirming_quit = False
        elif key in CONFIRM_SAVE_KEYS:
            self.confirming_quit = False
            if self.request_save(install=True):
                self.should_quit = True
