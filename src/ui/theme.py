"""Color theme shared by every render function."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Theme:
    """Rich color names/hex values for each visual role."""

    title: str = "#7C3AED"
    selected: str = "#10B981"
    normal: str = "#9CA3AF"
    value: str = "#F59E0B"
    muted: str = "#6B7280"
    separator: str = "#4B5563"
    editing: str = "#3B82F6"
    error: str = "#EF4444"
    dirty: str = "#F59E0B"
    saved: str = "#10B981"
    key: str = "#0EA5E9"
    subtitle: str = "#64748B"
    preview: str = "#FFFFFF"
    gradient: tuple[str, ...] = field(default=(
        "#9333EA",
        "#7C3AED",
        "#6366F1",
        "#3B82F6",
        "#0EA5E9",
        "#06B6D4",
    ))

    def style(self, role: str, text: str, bold: bool = False, italic: bool = False) -> str:
        """Wrap already-escaped text in markup for a role's color."""
        tags = [getattr(self, role)]
        if bold:
            tags.insert(0, "bold")
        if italic:
            tags.insert(0, "italic")
        tag = " ".join(tags)
        return f"[{tag}]{text}[/]"


DEFAULT_THEME = Theme()
