"""Mascot mood settings."""

from constants import PERCENT_MAX, PERCENT_MIN, SPEED_MAX_MS, SPEED_MIN_MS
from model.ui_field import ConfigBase, UIField


def _frames(*emojis: str):
    return lambda: list(emojis)


class MascotState(ConfigBase):
    """One trigger-based mascot mood."""

    enabled = UIField(
        bool, True,
        "Enabled", "Show this mood when its trigger fires",
    )
    threshold = UIField(
        int, 0,
        "Threshold", "Trigger level for this mood",
        minimum=PERCENT_MIN, maximum=PERCENT_MAX,
    )
    emojis = UIField(
        list, None,
        "Emojis", "Emoji shown for this mood",
        min_items=1, default_factory=list,
    )
    animate = UIField(
        bool, True,
        "Animate", "Cycle through the emojis as animation frames",
    )
    speed = UIField(
        int, 500,
        "Speed", "Animation frame interval",
        minimum=SPEED_MIN_MS, maximum=SPEED_MAX_MS, unit="ms",
    )


class TimeBasedMood(ConfigBase):
    """Time-of-day moods sharing one enabled/animate/speed setting."""

    enabled = UIField(
        bool, True,
        "Enabled", "Show time-of-day moods",
    )
    night = UIField(
        list, None,
        "Night", "12am-6am",
        min_items=1, default_factory=_frames("🦉", "💤", "🌙", "💤"),
    )
    morning = UIField(
        list, None,
        "Morning", "6am-12pm",
        min_items=1, default_factory=_frames("☀️", "🌅", "☕", "🌅"),
    )
    afternoon = UIField(
        list, None,
        "Afternoon", "12pm-6pm",
        min_items=1, default_factory=_frames("💻", "⌨️", "🖱️", "⌨️"),
    )
    evening = UIField(
        list, None,
        "Evening", "6pm-12am",
        min_items=1, default_factory=_frames("🌆", "🌇", "🌃", "🌇"),
    )
    animate = UIField(
        bool, True,
        "Animate", "Cycle through the emojis as animation frames",
    )
    speed = UIField(
        int, 600,
        "Speed", "Animation frame interval",
        minimum=SPEED_MIN_MS, maximum=SPEED_MAX_MS, unit="ms",
    )


class Mascot(ConfigBase):
    """All mascot moods."""

    context_panic = UIField(
        MascotState, None,
        "Context Panic Mode", "When context usage exceeds threshold",
        default_factory=lambda: MascotState(
            enabled=True, threshold=90,
            emojis=["😰", "😱", "🆘", "😱"], animate=True, speed=300,
        ),
    )
    productive = UIField(
        MascotState, None,
        "Productive Mode", "When many lines have been added",
        default_factory=lambda: MascotState(
            enabled=True, threshold=100,
            emojis=["🔨", "⚒️", "🛠️", "⚒️"], animate=True, speed=400,
        ),
    )
    deletion = UIField(
        MascotState, None,
        "Deletion Mode", "When more lines removed than added",
        default_factory=lambda: MascotState(
            enabled=True, threshold=30,
            emojis=["🧹", "✨", "🗑️", "✨"], animate=True, speed=350,
        ),
    )
    time_based = UIField(
        TimeBasedMood, None,
        "Time-of-day Moods", "Moods that follow the clock",
        default_factory=TimeBasedMood,
    )
