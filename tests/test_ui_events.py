"""Tests for key handling in the running app.

These drive StatuslineConfigApp through Textual's pilot and check that key
events reach the coordinator, including the priority bindings that must work
while an edit session has the keyboard.
"""

import pytest
from textual.widgets import Static

from app import StatuslineConfigApp
from controller import Screen
import ui.ids as ids
from ui.ids import css


class TestKeyRouting:
    """Keys reach the coordinator."""

    @pytest.mark.asyncio
    async def test_open_and_leave_screen(self, coordinator):
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("down", "enter")
            assert coordinator.screen == Screen.ICONS
            await pilot.press("escape")
            assert coordinator.screen == Screen.MENU

    @pytest.mark.asyncio
    async def test_toggle_marks_dirty(self, coordinator):
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("enter", "space")
            await pilot.pause()
            assert coordinator.dirty
            assert coordinator.config.enabled_sections.waiting_indicator is False

    @pytest.mark.asyncio
    async def test_typing_into_editor(self, coordinator):
        """Printable keys are inserted into the edit buffer."""
        coordinator.switch_to(Screen.DISPLAY)
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("enter", "ctrl+u", "space", "q", "space", "enter")
            assert coordinator.config.display.separator == " q "
            assert coordinator.screen == Screen.DISPLAY

    @pytest.mark.asyncio
    async def test_confirm_class_while_confirming(self, coordinator):
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("enter", "space", "escape", "escape")
            assert coordinator.confirming_quit
            assert app.query_one(css(ids.CONTENT_BOX), Static).has_class("confirm")
            assert app.query_one(css(ids.PREVIEW), Static).has_class("hidden")
            await pilot.press("n")
            assert not app.query_one(css(ids.CONTENT_BOX), Static).has_class("confirm")


class TestGlobalKeys:
    """ctrl+s / ctrl+r / ctrl+c go straight to the coordinator."""

    @pytest.mark.asyncio
    async def test_ctrl_s_while_editing(self, coordinator, store):
        coordinator.switch_to(Screen.ICONS)
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("enter", "ctrl+s")
            assert store.path.exists()
            assert coordinator.active.state == "editing"

    @pytest.mark.asyncio
    async def test_ctrl_r_reverts(self, coordinator):
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("enter", "space", "ctrl+r")
            assert not coordinator.dirty
            assert coordinator.config.enabled_sections.waiting_indicator is True

    @pytest.mark.asyncio
    async def test_ctrl_c_exits_when_clean(self, coordinator):
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("ctrl+c")
            await pilot.pause()
            assert coordinator.should_quit
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_ctrl_c_asks_when_dirty(self, coordinator):
        app = StatuslineConfigApp(coordinator)
        async with app.run_test() as pilot:
            await pilot.press("enter", "space", "ctrl+c")
            assert coordinator.confirming_quit
            assert not coordinator.should_quit
            await pilot.press("y")
            await pilot.pause()
            assert coordinator.should_quit
