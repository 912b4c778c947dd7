"""Sections screen: which statusline segments are shown."""

from __future__ import annotations

from controller.base import BACK_KEYS, EDIT_KEYS, TOGGLE_KEYS, FieldListController, KeyResult
from model.field_binding import FieldBinding
from model.sections_config import EnabledSections


class SectionsController(FieldListController):
    title = "Sections"

    def _build(self) -> None:
        self.items = [
            FieldBinding(self.config, ("enabled_sections", name), field)
            for name, field in EnabledSections.get_ui_fields().items()
        ]

    def handle_browse_key(self, key: str) -> KeyResult:
        if key in BACK_KEYS:
            return KeyResult(handled=True, leave=True)
        if key in EDIT_KEYS + TOGGLE_KEYS:
            self.current.toggle()
            return KeyResult(handled=True, changed=True)
        return KeyResult()
