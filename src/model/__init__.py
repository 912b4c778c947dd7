"""Model classes for statusline-config."""

from model.ui_field import ConfigBase, UIField
from model.choices import COLOR_OPTIONS, VOLUME_OPTIONS, Choice
from model.field_binding import FieldBinding, FieldValidationError
from model.sections_config import (
    Colors,
    Display,
    EnabledSections,
    Icons,
    Thresholds,
    WaitingIndicator,
)
from model.mascot_config import Mascot, MascotState, TimeBasedMood
from model.notification_config import (
    DesktopNotification,
    NotificationConfig,
    Notifications,
    TerminalTitleConfig,
    TmuxNotification,
)
from model.statusline_config import StatuslineConfig, default_config

__all__ = [
    "ConfigBase",
    "UIField",
    "Choice",
    "COLOR_OPTIONS",
    "VOLUME_OPTIONS",
    "FieldBinding",
    "FieldValidationError",
    "Colors",
    "Display",
    "EnabledSections",
    "Icons",
    "Thresholds",
    "WaitingIndicator",
    "Mascot",
    "MascotState",
    "TimeBasedMood",
    "DesktopNotification",
    "NotificationConfig",
    "Notifications",
    "TerminalTitleConfig",
    "TmuxNotification",
    "StatuslineConfig",
    "default_config",
]
