"""Main menu: the screens and the save actions."""

from __future__ import annotations

from dataclasses import dataclass

from controller.base import BACK_KEYS, DOWN_KEYS, UP_KEYS, KeyResult


@dataclass(frozen=True)
class MenuItem:
    label: str = ""
    description: str = ""
    target: str | None = None
    is_separator: bool = False


SEPARATOR = MenuItem(is_separator=True)

MENU_ITEMS = [
    MenuItem("Sections", "Toggle which sections are displayed", "sections"),
    MenuItem("Icons & Emojis", "Customize icons and emojis", "icons"),
    MenuItem("Mascot Settings", "Configure mascot moods and triggers", "mascot"),
    MenuItem("Display Options", "Separator and formatting settings", "display"),
    MenuItem("Notifications", "Configure alerts, sounds, and notification triggers", "notifications"),
    SEPARATOR,
    MenuItem("Save & Apply", "Save config and install statusline to ~/.claude/", "save_apply"),
    MenuItem("Save Config Only", "Save config without installing globally", "save_only"),
]


class MenuController:
    """Cursor over MENU_ITEMS; separators are never selected."""

    title = "Statusline Configuration"

    def __init__(self, items: list[MenuItem] | None = None) -> None:
        self.items = items if items is not None else list(MENU_ITEMS)
        self.selected = 0

    @property
    def current(self) -> MenuItem:
        return self.items[self.selected]

    def _step(self, delta: int) -> None:
        # At least one item is never a separator, so this terminates
        while True:
            self.selected = (self.selected + delta) % len(self.items)
            if not self.items[self.selected].is_separator:
                return

    def up(self) -> None:
        self._step(-1)

    def down(self) -> None:
        self._step(1)

    def handle_key(self, key: str, character: str | None = None) -> KeyResult:
        if key in UP_KEYS:
            self.up()
            return KeyResult(handled=True)
        if key in DOWN_KEYS:
            self.down()
            return KeyResult(handled=True)
        if key == "enter":
            return KeyResult(handled=True, target=self.current.target)
        if key in BACK_KEYS:
            return KeyResult(handled=True, target="quit")
        return KeyResult()
