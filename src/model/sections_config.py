"""Statusline sections, icons, colors, thresholds and display settings."""

from constants import (
    DIRECTORY_LENGTH_MAX,
    DIRECTORY_LENGTH_MIN,
    TOKEN_K_FORMAT_MAX,
    TOKEN_K_FORMAT_MIN,
)
from model.ui_field import ConfigBase, UIField


class EnabledSections(ConfigBase):
    """Which statusline segments are shown."""

    waiting_indicator = UIField(
        bool, True,
        "Waiting Indicator", "Show alert when Claude needs your input",
    )
    git = UIField(
        bool, True,
        "Git Branch", "Show current git branch and status",
    )
    directory = UIField(
        bool, True,
        "Directory", "Show current directory name",
    )
    model = UIField(
        bool, True,
        "Model Name", "Show Claude model in use",
    )
    context_moons = UIField(
        bool, True,
        "Context Moons", "Visual moon phases for context usage",
    )
    token_count = UIField(
        bool, True,
        "Token Count", "Show token count (e.g., 12k)",
    )
    percentage = UIField(
        bool, True,
        "Percentage", "Show context usage percentage",
    )
    mascot = UIField(
        bool, True,
        "Mascot", "Show reactive mascot emoji",
    )


class Colors(ConfigBase):
    """ANSI color names used by the statusline script."""

    directory = UIField(
        str, "bright_blue",
        "Directory Color", "Color of the directory segment",
        choices="colors",
    )
    git_clean = UIField(
        str, "bright_green",
        "Git Clean Color", "Color of the branch when the tree is clean",
        choices="colors",
    )
    git_dirty = UIField(
        str, "bright_red",
        "Git Dirty Color", "Color of the branch with uncommitted changes",
        choices="colors",
    )
    model = UIField(
        str, "bright_cyan",
        "Model Color", "Color of the model name",
        choices="colors",
    )
    text = UIField(
        str, "default",
        "Text Color", "Color of everything else",
        choices="colors",
    )


class Icons(ConfigBase):
    """Emoji used by the git, directory and context segments."""

    git_clean = UIField(
        str, "✅",
        "Git Clean", "Icon when git status is clean",
    )
    git_dirty = UIField(
        str, "⚠️",
        "Git Dirty", "Icon when there are uncommitted changes",
    )
    directory = UIField(
        str, "🗂️",
        "Directory", "Icon for directory name",
    )
    moons = UIField(
        list, None,
        "Moon Phases", "Context usage icons, emptiest first",
        min_items=1,
        default_factory=lambda: ["🌑", "🌘", "🌗", "🌖", "🌕"],
    )


class Thresholds(ConfigBase):
    """Numeric limits used when formatting segments."""

    moon_phases = UIField(
        list, None,
        "Moon Phase Boundaries", "Context percentages where the moon advances",
        item_type=int,
        default_factory=lambda: [20, 40, 60, 80],
    )
    directory_max_length = UIField(
        int, 15,
        "Directory Max Length", "Maximum directory name length",
        minimum=DIRECTORY_LENGTH_MIN, maximum=DIRECTORY_LENGTH_MAX,
    )
    directory_truncate_to = UIField(
        int, 12,
        "Directory Truncate To", "Length to truncate directory to",
        minimum=DIRECTORY_LENGTH_MIN, maximum=DIRECTORY_LENGTH_MAX,
    )
    token_k_format = UIField(
        int, 1000,
        "Token K Format", "Threshold for showing as 'k' format",
        minimum=TOKEN_K_FORMAT_MIN, maximum=TOKEN_K_FORMAT_MAX,
    )


class Display(ConfigBase):
    """Display formatting."""

    separator = UIField(
        str, " • ",
        "Separator", "Text between sections",
    )


class WaitingIndicator(ConfigBase):
    """Shown when Claude is waiting for user input."""

    enabled = UIField(
        bool, True,
        "Waiting Indicator", "Show the indicator while Claude waits",
    )
    icon = UIField(
        str, "🔔",
        "Waiting Icon", "Icon shown while waiting",
    )
    text = UIField(
        str, "WAITING",
        "Waiting Text", "Label shown while waiting",
    )
    blink = UIField(
        bool, True,
        "Blink Waiting Text", "Blink the indicator while waiting",
    )
