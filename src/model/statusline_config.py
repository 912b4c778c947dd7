"""Statusline configuration model: the root of the settings tree."""

from __future__ import annotations

from dataclasses import dataclass, field

from constants import CONFIG_SCHEMA_VERSION
from model.mascot_config import Mascot
from model.notification_config import Notifications
from model.sections_config import (
    Colors,
    Display,
    EnabledSections,
    Icons,
    Thresholds,
    WaitingIndicator,
)


@dataclass
class StatuslineConfig:
    """Complete statusline configuration.

    Field names are the stable keys of the stored JSON document; labels shown
    in the editor live on the UIField declarations of each section.
    """

    version: str = CONFIG_SCHEMA_VERSION
    enabled_sections: EnabledSections = field(default_factory=EnabledSections)
    colors: Colors = field(default_factory=Colors)
    icons: Icons = field(default_factory=Icons)
    mascot: Mascot = field(default_factory=Mascot)
    thresholds: Thresholds = field(default_factory=Thresholds)
    display: Display = field(default_factory=Display)
    waiting_indicator: WaitingIndicator = field(default_factory=WaitingIndicator)
    notifications: Notifications = field(default_factory=Notifications)


def default_config() -> StatuslineConfig:
    """A config holding the built-in defaults."""
    return StatuslineConfig()
