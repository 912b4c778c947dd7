"""Enumerated options for fields whose value is picked from a list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Choice:
    """One selectable option: what the user sees and what gets stored."""

    name: str
    value: Any


VOLUME_OPTIONS = [
    Choice("Normal", 1.0),
    Choice("Loud", 2.0),
    Choice("Max", 4.0),
]

# Color names understood by statusline.sh
COLOR_OPTIONS = [
    Choice(name, name)
    for name in (
        "default",
        "black",
        "red",
        "green",
        "yellow",
        "blue",
        "magenta",
        "cyan",
        "white",
        "bright_black",
        "bright_red",
        "bright_green",
        "bright_yellow",
        "bright_blue",
        "bright_magenta",
        "bright_cyan",
        "bright_white",
    )
]


def index_of_value(options: list[Choice], value: Any) -> int:
    """Position of the option holding value, or 0 when none matches."""
    for i, option in enumerate(options):
        if option.value == value:
            return i
    return 0


def name_for_value(options: list[Choice], value: Any) -> str | None:
    """Display name of the option holding value, or None."""
    for option in options:
        if option.value == value:
            return option.name
    return None
