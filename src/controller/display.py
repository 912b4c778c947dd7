"""Display screen: separator, length limits, waiting indicator, colors."""

from __future__ import annotations

from controller.base import FieldListController
from model.field_binding import FieldBinding
from model.sections_config import Colors, Display, Thresholds, WaitingIndicator

THRESHOLD_FIELDS = ("directory_max_length", "directory_truncate_to", "token_k_format")
WAITING_FIELDS = ("icon", "text", "blink")


class DisplayController(FieldListController):
    title = "Display Options"

    def _build(self) -> None:
        config = self.config
        thresholds = Thresholds.get_ui_fields()
        waiting = WaitingIndicator.get_ui_fields()
        self.items = [
            FieldBinding(config, ("display", "separator"), Display.separator),
        ]
        self.items += [
            FieldBinding(config, ("thresholds", name), thresholds[name])
            for name in THRESHOLD_FIELDS
        ]
        self.items += [
            FieldBinding(config, ("waiting_indicator", name), waiting[name])
            for name in WAITING_FIELDS
        ]
        self.items += [
            FieldBinding(config, ("colors", name), field)
            for name, field in Colors.get_ui_fields().items()
        ]
