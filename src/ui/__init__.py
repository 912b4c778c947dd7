"""UI module: theme, rendering functions, widget IDs and styles."""

from ui.theme import DEFAULT_THEME, Theme
from ui.preview import build_preview, render_preview
from ui.render import (
    render_confirm,
    render_header,
    render_help,
    render_screen,
    render_status,
)
from ui import ids

__all__ = [
    "DEFAULT_THEME",
    "Theme",
    "build_preview",
    "render_confirm",
    "render_header",
    "render_help",
    "render_preview",
    "render_screen",
    "render_status",
    "ids",
]
