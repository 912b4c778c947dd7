"""Rendering: NavigationCoordinator state to Rich markup strings.

Every function here is pure. The Textual app drops the results into Static
widgets; tests call them directly. User-supplied text always goes through
rich.markup.escape so brackets in icons or separators stay literal.
"""

from __future__ import annotations

from rich.markup import escape

from constants import APP_VERSION
from controller.base import FieldListController, ScreenController
from controller.category import CategoryScreenController
from controller.edit_session import ChoicePicker
from controller.menu import MenuController
from controller.navigation import NavigationCoordinator, Screen
from model.field_binding import CHECKED, UNCHECKED, FieldBinding
from ui.preview import render_preview
from ui.theme import DEFAULT_THEME, Theme

__all__ = [
    "render_confirm",
    "render_header",
    "render_help",
    "render_preview",
    "render_screen",
    "render_status",
]

EDIT_CURSOR = "▏"
HELP_SEPARATOR = "  │  "
SPARKLES = "✦ ✧ ⋆ ✶ · "

TITLE_WIDE = "☾  S T A T U S L I N E   C O N F I G  ☽"
TITLE_NARROW = "☾ statusline config ☽"


# =============================================================================
# Header and status
# =============================================================================


def render_header(width: int, theme: Theme = DEFAULT_THEME) -> str:
    """Banner sized to the terminal width."""
    title = TITLE_WIDE if width >= 50 else TITLE_NARROW
    span = max(len(title), 10)
    sparkles = (SPARKLES * (span // len(SPARKLES) + 1))[:span]
    lines = [
        f"[{theme.gradient[0]}]{sparkles}[/]",
        f"[bold {theme.gradient[2]}]{title}[/]",
        f"[{theme.gradient[-1]}]{sparkles}[/]",
        theme.style("subtitle", f"Claude Statusline Configuration Tool  v{APP_VERSION}", italic=True),
    ]
    return "\n".join(lines)


def render_status(coordinator: NavigationCoordinator, theme: Theme = DEFAULT_THEME) -> str:
    """One line: error, last message, or the dirty indicator."""
    if coordinator.error:
        return theme.style("error", f"Error: {escape(coordinator.error)}", bold=True)
    if coordinator.message:
        return theme.style("saved", escape(coordinator.message))
    if coordinator.dirty:
        return theme.style("dirty", "● Unsaved Changes", bold=True)
    return theme.style("saved", "✓ Saved")


# =============================================================================
# Screens
# =============================================================================


def render_screen(coordinator: NavigationCoordinator, theme: Theme = DEFAULT_THEME) -> str:
    """Main content area for the current state."""
    if coordinator.confirming_quit:
        return render_confirm(theme)
    if coordinator.screen == Screen.MENU:
        return render_menu(coordinator.menu, theme)
    controller = coordinator.active
    if isinstance(controller, CategoryScreenController):
        return render_categories(controller, theme)
    return render_fields(controller, theme)


def render_confirm(theme: Theme = DEFAULT_THEME) -> str:
    lines = [
        theme.style("dirty", "⚠ Unsaved Changes", bold=True),
        "",
        "What would you like to do?",
        "",
        f"{theme.style('selected', escape('[s]'))} Save & apply globally",
        f"{theme.style('error', escape('[y]'))} Quit without saving",
        f"{theme.style('muted', escape('[n]'))} Cancel",
    ]
    return "\n".join(lines)


def render_menu(menu: MenuController, theme: Theme = DEFAULT_THEME) -> str:
    lines = []
    for i, item in enumerate(menu.items):
        if item.is_separator:
            lines.append(theme.style("separator", "  " + "─" * 30))
            continue
        if i == menu.selected:
            lines.append(theme.style("selected", f"  > {escape(item.label)}", bold=True))
            if item.description:
                lines.append(theme.style("muted", f"      {escape(item.description)}", italic=True))
        else:
            lines.append(theme.style("normal", f"    {escape(item.label)}"))
    return "\n".join(lines)


def render_fields(controller: FieldListController, theme: Theme = DEFAULT_THEME) -> str:
    """A flat screen: one row per binding."""
    lines = [theme.style("title", escape(controller.title), bold=True), ""]
    for i, binding in enumerate(controller.items):
        lines += _binding_lines(controller, binding, i == controller.selected, theme)
    return "\n".join(lines)


def render_categories(controller: CategoryScreenController, theme: Theme = DEFAULT_THEME) -> str:
    """A nested screen: the category list, or one category's sub-items."""
    lines = [theme.style("title", escape(controller.title), bold=True), ""]
    if not controller.in_category:
        for i, category in enumerate(controller.categories):
            box = CHECKED if category.enabled.value else UNCHECKED
            text = f"{escape(box)} {escape(category.label)}"
            if i == controller.selected:
                lines.append(theme.style("selected", f"  > {text}", bold=True))
                lines.append(theme.style("muted", f"      {escape(category.description)}", italic=True))
            else:
                lines.append(theme.style("normal", f"    {text}"))
        return "\n".join(lines)

    category = controller.current
    lines.append(theme.style("title", f"{escape(category.label)} Settings", bold=True))
    for i in range(category.layout.count):
        binding = category.sub_binding(i)
        lines += _binding_lines(controller, binding, i == controller.sub_selected, theme)
    return "\n".join(lines)


def _binding_lines(
    controller: ScreenController,
    binding: FieldBinding,
    active: bool,
    theme: Theme,
) -> list[str]:
    marker = "> " if active else "  "
    label_role = "selected" if active else "normal"
    if binding.kind == "bool":
        text = f"  {marker}{escape(binding.display())} {escape(binding.label)}"
        lines = [theme.style(label_role, text, bold=active)]
    else:
        label = theme.style(label_role, f"  {marker}{escape(binding.label)}", bold=active)
        lines = [f"{label}: {_value_markup(controller, binding, active, theme)}"]

    if not active:
        return lines
    if controller.session is not None and controller.session.error:
        lines.append(theme.style("error", f"      {escape(controller.session.error)}"))
    if controller.picker is not None:
        lines += _picker_lines(controller.picker, theme)
    elif binding.explanation:
        lines.append(theme.style("muted", f"      {escape(binding.explanation)}", italic=True))
    return lines


def _value_markup(
    controller: ScreenController,
    binding: FieldBinding,
    active: bool,
    theme: Theme,
) -> str:
    if active and controller.session is not None:
        return theme.style("editing", escape(controller.session.buffer) + EDIT_CURSOR, bold=True)
    return theme.style("value", escape(controller.display_value(binding)))


def _picker_lines(picker: ChoicePicker, theme: Theme) -> list[str]:
    lines = []
    for i, option in enumerate(picker.options):
        if i == picker.selected:
            lines.append(theme.style("selected", f"      > {escape(option.name)}", bold=True))
        else:
            lines.append(theme.style("normal", f"        {escape(option.name)}"))
    return lines


# =============================================================================
# Help bar
# =============================================================================


def _key(theme: Theme, key: str, action: str) -> str:
    return f"{theme.style('key', escape(key), bold=True)} {action}"


def render_help(coordinator: NavigationCoordinator, theme: Theme = DEFAULT_THEME) -> str:
    """Key hints for the current state."""
    if coordinator.confirming_quit:
        parts = [
            _key(theme, "s", "save & quit"),
            _key(theme, "y", "quit without saving"),
            _key(theme, "n", "cancel"),
        ]
        return HELP_SEPARATOR.join(parts)

    controller = coordinator.active
    if isinstance(controller, ScreenController):
        if controller.session is not None:
            parts = [
                _key(theme, "enter", "save"),
                _key(theme, "esc", "cancel"),
                _key(theme, "ctrl+u", "clear"),
            ]
            return HELP_SEPARATOR.join(parts)
        if controller.picker is not None:
            parts = [
                _key(theme, "↑↓", "choose"),
                _key(theme, "enter", "select"),
                _key(theme, "esc", "cancel"),
            ]
            if controller.picker.binding.field.choices == "sounds":
                parts.append(_key(theme, "p", "preview"))
            return HELP_SEPARATOR.join(parts)

    parts = []
    if coordinator.screen != Screen.MENU:
        parts.append(_key(theme, "esc", "back"))
    parts += [_key(theme, "↑↓/jk", "navigate"), _key(theme, "enter", "select")]
    if coordinator.screen in (Screen.SECTIONS, Screen.MASCOT, Screen.NOTIFICATIONS):
        parts.append(_key(theme, "space", "toggle"))
    if coordinator.screen == Screen.ICONS or (
        isinstance(controller, CategoryScreenController)
        and controller.in_category
        and controller.current.items is not None
    ):
        parts.append(_key(theme, "a/d", "add/delete"))
    parts += [
        _key(theme, "ctrl+s", "save"),
        _key(theme, "ctrl+r", "revert"),
        _key(theme, "q", "quit"),
    ]
    return HELP_SEPARATOR.join(parts)
