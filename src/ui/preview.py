"""Sample statusline built from the current config."""

from __future__ import annotations

from rich.markup import escape

from model.statusline_config import StatuslineConfig
from ui.theme import Theme

FALLBACK_SEPARATOR = " | "
FALLBACK_MOONS = "🌑🌘🌗"
FALLBACK_MASCOT = "🎧 in the zone"


def build_preview(config: StatuslineConfig) -> str:
    """Plain preview text using sample values for each enabled section."""
    sections = config.enabled_sections
    icons = config.icons
    parts = []

    if sections.git:
        parts.append(f"{icons.git_clean} main")
    if sections.directory:
        parts.append(f"{icons.directory} project")
    if sections.model:
        parts.append("Sonnet")

    usage = []
    if sections.token_count:
        usage.append("12k")
    if sections.percentage:
        usage.append("(45%)")
    if sections.context_moons:
        moons = "".join(icons.moons[:3]) if len(icons.moons) >= 3 else FALLBACK_MOONS
        parts.append(" ".join([moons] + usage))
    elif usage:
        parts.append(" ".join(usage))

    if sections.mascot:
        afternoon = config.mascot.time_based.afternoon
        if config.mascot.time_based.enabled and afternoon:
            parts.append(afternoon[0])
        else:
            parts.append(FALLBACK_MASCOT)

    separator = config.display.separator or FALLBACK_SEPARATOR
    return separator.join(parts)


def render_preview(config: StatuslineConfig, theme: Theme) -> str:
    label = theme.style("muted", "Preview:", italic=True)
    return f"{label}\n {theme.style('preview', escape(build_preview(config)))}"
