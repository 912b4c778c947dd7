"""Notifications screen: one category per alert channel.

A channel's sub-items are its section's declared fields, in declaration
order, so DesktopNotification's sound settings appear after the basic
trigger fields it inherits.
"""

from __future__ import annotations

from controller.base import PREVIEW_KEYS, KeyResult
from controller.category import Category, CategoryScreenController
from model.field_binding import FieldBinding
from model.notification_config import Notifications

# Display order on screen (desktop first)
CHANNELS = ("desktop", "terminal_bell", "blinking_text", "terminal_title", "tmux")


class NotificationsController(CategoryScreenController):
    title = "Notifications"

    def _build(self) -> None:
        channels = Notifications.get_ui_fields()
        self.categories = []
        for key in CHANNELS:
            channel = channels[key]
            path = ("notifications", key)
            prefix = [
                FieldBinding(self.config, path + (name,), field)
                for name, field in channel.type_.get_ui_fields().items()
            ]
            self.categories.append(Category(
                key=key,
                label=channel.label,
                description=channel.explanation,
                enabled=prefix[0],
                prefix=prefix,
            ))

    def handle_browse_key(self, key: str) -> KeyResult:
        binding = self.current_sub
        if key in PREVIEW_KEYS and binding is not None and binding.field.choices == "sounds":
            if binding.value and self.preview_sound:
                self.preview_sound(binding.value)
            return KeyResult(handled=True)
        return super().handle_browse_key(key)
