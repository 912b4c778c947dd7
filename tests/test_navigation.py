"""Tests for NavigationCoordinator: routing, dirty tracking, save and quit."""

import json

from config_store import PersistenceError
from controller import Screen
from controller.menu import MENU_ITEMS, MenuController


class FailingInstaller:
    def __call__(self):
        raise PersistenceError("statusline.sh not found")


def open_screen(coordinator, press, index):
    """Move the menu cursor to index and press enter."""
    coordinator.menu.selected = index
    press(coordinator, "enter")


class TestMenu:
    """Main menu cursor and targets."""

    def test_items(self):
        labels = [item.label for item in MENU_ITEMS if not item.is_separator]
        assert labels == [
            "Sections",
            "Icons & Emojis",
            "Mascot Settings",
            "Display Options",
            "Notifications",
            "Save & Apply",
            "Save Config Only",
        ]

    def test_cursor_skips_separator(self, press):
        menu = MenuController()
        menu.selected = 4
        press(menu, "down")
        assert menu.current.label == "Save & Apply"
        press(menu, "up")
        assert menu.current.label == "Notifications"

    def test_cursor_wraps(self, press):
        menu = MenuController()
        press(menu, "up")
        assert menu.current.label == "Save Config Only"
        press(menu, "down")
        assert menu.current.label == "Sections"

    def test_escape_asks_to_quit(self, press):
        assert press(MenuController(), "escape").target == "quit"


class TestRouting:
    """Screen switching."""

    def test_starts_on_menu(self, coordinator):
        assert coordinator.screen == Screen.MENU
        assert coordinator.active is coordinator.menu

    def test_open_each_screen(self, coordinator, press):
        for index, screen in enumerate(
            [Screen.SECTIONS, Screen.ICONS, Screen.MASCOT, Screen.DISPLAY, Screen.NOTIFICATIONS]
        ):
            open_screen(coordinator, press, index)
            assert coordinator.screen == screen
            press(coordinator, "escape")
            assert coordinator.screen == Screen.MENU

    def test_screen_keeps_cursor(self, coordinator, press):
        """Returning to a screen finds the cursor where it was left."""
        open_screen(coordinator, press, 0)
        press(coordinator, "down", "down", "escape")
        open_screen(coordinator, press, 0)
        assert coordinator.active.selected == 2

    def test_escape_in_category_stays_on_screen(self, coordinator, press):
        open_screen(coordinator, press, 2)
        press(coordinator, "enter", "escape")
        assert coordinator.screen == Screen.MASCOT
        press(coordinator, "escape")
        assert coordinator.screen == Screen.MENU

    def test_escape_in_editor_stays_on_screen(self, coordinator, press):
        open_screen(coordinator, press, 1)
        press(coordinator, "enter", "escape")
        assert coordinator.screen == Screen.ICONS

    def test_controllers_share_config(self, coordinator):
        for controller in coordinator.controllers.values():
            assert controller.config is coordinator.config


class TestDirtyTracking:
    """The dirty flag follows successful edits only."""

    def test_clean_at_start(self, coordinator):
        assert not coordinator.dirty

    def test_toggle_marks_dirty(self, coordinator, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space")
        assert coordinator.dirty

    def test_toggle_back_stays_dirty(self, coordinator, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "space")
        assert coordinator.dirty

    def test_navigation_not_dirty(self, coordinator, press):
        open_screen(coordinator, press, 2)
        press(coordinator, "down", "enter", "down", "up", "escape", "escape")
        assert not coordinator.dirty

    def test_cancelled_edit_not_dirty(self, coordinator, press, type_text):
        open_screen(coordinator, press, 3)
        press(coordinator, "enter")
        type_text(coordinator, "xyz")
        press(coordinator, "escape")
        assert not coordinator.dirty
        assert coordinator.config.display.separator == " • "

    def test_invalid_edit_not_dirty(self, coordinator, press, type_text):
        open_screen(coordinator, press, 3)
        press(coordinator, "down", "enter", "ctrl+u")
        type_text(coordinator, "abc")
        press(coordinator, "enter")
        assert not coordinator.dirty
        assert coordinator.message

    def test_committed_edit_dirty(self, coordinator, press, type_text):
        open_screen(coordinator, press, 3)
        press(coordinator, "down", "enter", "ctrl+u")
        type_text(coordinator, "30")
        press(coordinator, "enter")
        assert coordinator.dirty
        assert coordinator.config.thresholds.directory_max_length == 30

    def test_add_frame_dirty(self, coordinator, press):
        open_screen(coordinator, press, 2)
        press(coordinator, "enter", "a")
        assert coordinator.dirty

    def test_refused_remove_not_dirty(self, coordinator, press):
        coordinator.config.icons.moons = ["🌕"]
        open_screen(coordinator, press, 1)
        press(coordinator, "up", "d")
        assert not coordinator.dirty


class TestSave:
    """ctrl+s and the menu's save actions."""

    def test_ctrl_s_saves(self, coordinator, store, installer, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+s")
        assert not coordinator.dirty
        assert store.path.exists()
        assert json.loads(store.path.read_text())["enabled_sections"]["waiting_indicator"] is False
        assert installer.calls == 0
        assert str(store.path) in coordinator.message
        assert not coordinator.should_quit

    def test_ctrl_s_while_editing_saves_committed_values(self, coordinator, store, press, type_text):
        """The open edit buffer is not part of the save."""
        open_screen(coordinator, press, 3)
        press(coordinator, "enter", "ctrl+u")
        type_text(coordinator, "||")
        press(coordinator, "ctrl+s")
        assert json.loads(store.path.read_text())["display"]["separator"] == " • "
        assert coordinator.active.state == "editing"

    def test_save_only_quits(self, coordinator, store, installer, press):
        open_screen(coordinator, press, 7)
        assert store.path.exists()
        assert installer.calls == 0
        assert coordinator.should_quit

    def test_save_and_apply_installs(self, coordinator, store, installer, press):
        open_screen(coordinator, press, 6)
        assert store.path.exists()
        assert installer.calls == 1
        assert coordinator.should_quit
        assert "installed" in coordinator.message

    def test_install_failure_keeps_running(self, config, store, press):
        from controller import NavigationCoordinator

        coordinator = NavigationCoordinator(config, store, installer=FailingInstaller())
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "escape")
        open_screen(coordinator, press, 6)
        assert not coordinator.should_quit
        assert coordinator.dirty
        assert "statusline.sh not found" in coordinator.error

    def test_install_failure_reported_as_install(self, config, store, press):
        """The config file is written even when installing the script fails."""
        from controller import NavigationCoordinator

        coordinator = NavigationCoordinator(config, store, installer=FailingInstaller())
        assert coordinator.request_save(install=True) is False
        assert store.path.exists()
        assert coordinator.error.startswith("Install failed")

    def test_write_failure_reported(self, coordinator, store, tmp_path, press):
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store.path = blocker / "config.json"
        coordinator.dirty = True
        press(coordinator, "ctrl+s")
        assert coordinator.dirty
        assert coordinator.error.startswith("Save failed")

    def test_error_cleared_by_successful_save(self, coordinator, store, tmp_path, press):
        good_path = store.path
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store.path = blocker / "config.json"
        press(coordinator, "ctrl+s")
        store.path = good_path
        press(coordinator, "ctrl+s")
        assert coordinator.error is None


class TestRevert:
    """ctrl+r reloads the stored file."""

    def test_revert_to_saved(self, coordinator, store, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+s", "down", "space")
        assert coordinator.config.enabled_sections.git is False
        press(coordinator, "ctrl+r")
        assert not coordinator.dirty
        assert coordinator.config.enabled_sections.git is True
        assert coordinator.config.enabled_sections.waiting_indicator is False

    def test_revert_without_file_gives_defaults(self, coordinator, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+r")
        assert coordinator.config.enabled_sections.waiting_indicator is True

    def test_controllers_follow_reverted_config(self, coordinator, press):
        """Edits after a revert reach the reloaded config."""
        open_screen(coordinator, press, 0)
        press(coordinator, "ctrl+r", "space")
        assert coordinator.controllers[Screen.SECTIONS].config is coordinator.config
        assert coordinator.config.enabled_sections.waiting_indicator is False

    def test_revert_bad_file(self, coordinator, store, press):
        store.path.parent.mkdir(parents=True)
        store.path.write_text("{broken")
        original = coordinator.config
        press(coordinator, "ctrl+r")
        assert coordinator.config is original
        assert coordinator.error.startswith("Revert failed")

    def test_revert_file_not_utf8(self, coordinator, store, press):
        """A file that is not UTF-8 is reported, and the app keeps running."""
        store.path.parent.mkdir(parents=True)
        store.path.write_bytes(b"\xff{}")
        original = coordinator.config
        press(coordinator, "ctrl+r")
        assert coordinator.config is original
        assert coordinator.error.startswith("Revert failed")
        assert not coordinator.should_quit


class TestQuit:
    """Quitting with and without unsaved changes."""

    def test_quit_when_clean(self, coordinator, press):
        press(coordinator, "q")
        assert coordinator.should_quit

    def test_ctrl_c_when_clean(self, coordinator, press):
        open_screen(coordinator, press, 2)
        press(coordinator, "ctrl+c")
        assert coordinator.should_quit

    def test_quit_when_dirty_asks(self, coordinator, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "escape", "escape")
        assert coordinator.confirming_quit
        assert not coordinator.should_quit

    def test_confirm_discard(self, coordinator, store, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+c", "y")
        assert coordinator.should_quit
        assert not store.path.exists()

    def test_confirm_cancel(self, coordinator, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+c", "n")
        assert not coordinator.confirming_quit
        assert not coordinator.should_quit
        assert coordinator.screen == Screen.SECTIONS

    def test_confirm_escape_cancels(self, coordinator, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+c", "escape")
        assert not coordinator.confirming_quit

    def test_confirm_save(self, coordinator, store, installer, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+c", "s")
        assert coordinator.should_quit
        assert store.path.exists()
        assert installer.calls == 1

    def test_confirm_swallows_other_keys(self, coordinator, press):
        open_screen(coordinator, press, 0)
        press(coordinator, "space", "ctrl+c", "down", "space")
        assert coordinator.confirming_quit
        assert coordinator.active.selected == 0
        assert coordinator.config.enabled_sections.waiting_indicator is False

    def test_confirm_save_failure_stays(self, config, store, press):
        from controller import NavigationCoordinator

        coordinator = NavigationCoordinator(config, store, installer=FailingInstaller())
        coordinator.dirty = True
        press(coordinator, "ctrl+c", "s")
        assert not coordinator.should_quit
        assert not coordinator.confirming_quit
        assert coordinator.error


class TestCursorRoundTrip:
    """Up then down (and down then up) returns to the starting row."""

    def test_every_screen(self, coordinator, press):
        for screen in (Screen.SECTIONS, Screen.ICONS, Screen.MASCOT, Screen.DISPLAY, Screen.NOTIFICATIONS):
            controller = coordinator.controllers[screen]
            for start in range(controller.level_length()):
                controller.cursor = start
                press(controller, "up", "down")
                assert controller.cursor == start
                press(controller, "down", "up")
                assert controller.cursor == start

    def test_inside_categories(self, coordinator, press):
        for screen in (Screen.MASCOT, Screen.NOTIFICATIONS):
            controller = coordinator.controllers[screen]
            for index in range(len(controller.categories)):
                controller.selected = index
                controller.enter_category()
                for start in range(controller.level_length()):
                    controller.cursor = start
                    press(controller, "k", "j")
                    assert controller.sub_selected == start
                controller.leave_category()
