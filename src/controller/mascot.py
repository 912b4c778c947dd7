"""Mascot screen: trigger moods and time-of-day moods.

Each category is declared by its capabilities; the sub-item layout follows:

    Enabled, [Threshold], [Animate, Speed], emoji frames...

Trigger moods have a threshold, time-of-day moods do not and share the
enabled/animate/speed settings of mascot.time_based.
"""

from __future__ import annotations

from dataclasses import dataclass

from constants import LINE_COUNT_MAX, NEW_FRAME_EMOJI, PERCENT_MAX, PERCENT_MIN
from controller.category import Category, CategoryScreenController
from model.field_binding import FieldBinding
from model.mascot_config import MascotState, TimeBasedMood


@dataclass(frozen=True)
class Mood:
    key: str
    label: str
    description: str
    section: tuple[str, ...]  # path of the section holding enabled/animate/speed
    emojis: str  # attribute of the section holding the frames
    has_threshold: bool = True
    has_animation: bool = True
    threshold_range: tuple[int, int] = (PERCENT_MIN, PERCENT_MAX)
    threshold_unit: str = ""


MOODS = [
    Mood(
        "context_panic", "Context Panic Mode", "When context usage exceeds threshold",
        ("mascot", "context_panic"), "emojis", threshold_unit="%",
    ),
    Mood(
        "productive", "Productive Mode", "When many lines have been added",
        ("mascot", "productive"), "emojis",
        threshold_range=(0, LINE_COUNT_MAX), threshold_unit=" lines",
    ),
    Mood(
        "deletion", "Deletion Mode", "When more lines removed than added",
        ("mascot", "deletion"), "emojis",
        threshold_range=(0, LINE_COUNT_MAX), threshold_unit=" lines",
    ),
    Mood(
        "time_night", "Night Mood (12am-6am)", "Late night/early morning moods",
        ("mascot", "time_based"), "night", has_threshold=False,
    ),
    Mood(
        "time_morning", "Morning Mood (6am-12pm)", "Morning time moods",
        ("mascot", "time_based"), "morning", has_threshold=False,
    ),
    Mood(
        "time_afternoon", "Afternoon Mood (12pm-6pm)", "Afternoon moods",
        ("mascot", "time_based"), "afternoon", has_threshold=False,
    ),
    Mood(
        "time_evening", "Evening Mood (6pm-12am)", "Evening moods",
        ("mascot", "time_based"), "evening", has_threshold=False,
    ),
]


class MascotController(CategoryScreenController):
    title = "Mascot Settings"

    def _build(self) -> None:
        self.categories = [self._category(mood) for mood in MOODS]

    def _category(self, mood: Mood) -> Category:
        section_cls = MascotState if mood.has_threshold else TimeBasedMood
        fields = section_cls.get_ui_fields()

        def bind(name: str, **overrides) -> FieldBinding:
            return FieldBinding(self.config, mood.section + (name,), fields[name], **overrides)

        enabled = bind("enabled")
        prefix = [enabled]
        if mood.has_threshold:
            low, high = mood.threshold_range
            prefix.append(bind("threshold", minimum=low, maximum=high, unit=mood.threshold_unit))
        if mood.has_animation:
            prefix += [bind("animate"), bind("speed")]
        return Category(
            key=mood.key,
            label=mood.label,
            description=mood.description,
            enabled=enabled,
            prefix=prefix,
            items=bind(mood.emojis),
            item_label="Frame",
            new_item=NEW_FRAME_EMOJI,
        )

