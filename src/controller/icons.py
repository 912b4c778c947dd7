"""Icons screen: git and directory icons, then one row per moon phase."""

from __future__ import annotations

import logging

from constants import NEW_FRAME_EMOJI
from controller.base import ADD_KEYS, DELETE_KEYS, FieldListController, KeyResult
from model.field_binding import FieldBinding
from model.sections_config import Icons

log = logging.getLogger(__name__)

SCALAR_ICONS = ("git_clean", "git_dirty", "directory")


class IconsController(FieldListController):
    title = "Icons & Emojis"

    def _build(self) -> None:
        fields = Icons.get_ui_fields()
        self.moons = FieldBinding(self.config, ("icons", "moons"), fields["moons"])
        self._rebuild_items()

    def _rebuild_items(self) -> None:
        fields = Icons.get_ui_fields()
        self.items = [
            FieldBinding(self.config, ("icons", name), fields[name])
            for name in SCALAR_ICONS
        ]
        self.items += [
            self.moons.element(i, label=f"Moon Phase {i + 1}")
            for i in range(self.moons.length())
        ]

    @property
    def moon_offset(self) -> int:
        return len(SCALAR_ICONS)

    def handle_browse_key(self, key: str) -> KeyResult:
        if key in ADD_KEYS:
            self.moons.append(NEW_FRAME_EMOJI)
            self._rebuild_items()
            self.selected = len(self.items) - 1
            return KeyResult(handled=True, changed=True)
        if key in DELETE_KEYS and self.selected >= self.moon_offset:
            if not self.moons.remove_at(self.selected - self.moon_offset):
                log.info("Refused to remove the last moon phase")
                return KeyResult(handled=True)
            self._rebuild_items()
            if self.selected >= len(self.items):
                self.selected = len(self.items) - 1
            return KeyResult(handled=True, changed=True)
        return super().handle_browse_key(key)
