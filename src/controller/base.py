"""Screen controller state machine shared by every settings screen.

States
------
    Browsing    cursor moves over the screen's items (or categories)
    InCategory  cursor moves over one category's sub-items (nested screens)
    Editing     an EditSession owns the keyboard until enter/escape
    Choosing    a ChoicePicker owns the keyboard until enter/escape

Every key goes through handle_key(), which returns a KeyResult telling the
NavigationCoordinator whether the config changed (dirty) and whether the
screen wants to be left.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from controller.edit_session import ChoicePicker, EditSession
from model.choices import COLOR_OPTIONS, VOLUME_OPTIONS, Choice
from model.field_binding import FieldBinding

log = logging.getLogger(__name__)

UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")
BACK_KEYS = ("escape", "q")
TOGGLE_KEYS = ("space", "x")
EDIT_KEYS = ("enter", "e")
ADD_KEYS = ("a",)
DELETE_KEYS = ("d", "backspace", "delete")
PREVIEW_KEYS = ("p",)

ChoiceSource = Callable[[], list[Choice]]

DEFAULT_CHOICE_SOURCES: dict[str, ChoiceSource] = {
    "volumes": lambda: list(VOLUME_OPTIONS),
    "colors": lambda: list(COLOR_OPTIONS),
}


@dataclass
class KeyResult:
    """Outcome of one key press."""

    handled: bool = False
    changed: bool = False  # config was mutated
    leave: bool = False  # screen asks to return to the menu
    message: str | None = None
    target: str | None = None  # menu only: screen or action picked


def wrap(index: int, length: int) -> int:
    """Keep a cursor inside [0, length) by wrapping."""
    if length <= 0:
        return 0
    return index % length


class ScreenController:
    """Base class: cursor, edit session and choice picker handling."""

    title = ""

    def __init__(
        self,
        config: Any,
        choice_sources: dict[str, ChoiceSource] | None = None,
        preview_sound: Callable[[str], None] | None = None,
    ) -> None:
        self.choice_sources = {**DEFAULT_CHOICE_SOURCES, **(choice_sources or {})}
        self.preview_sound = preview_sound
        self.selected = 0
        self.session: EditSession | None = None
        self.picker: ChoicePicker | None = None
        self._choice_cache: dict[str, list[Choice]] = {}
        self.attach(config)

    # =========================================================================
    # Binding lifecycle
    # =========================================================================

    def attach(self, config: Any) -> None:
        """(Re)build bindings against a config object."""
        self.config = config
        self.session = None
        self.picker = None
        self._build()
        self._clamp_cursor()

    def _build(self) -> None:
        raise NotImplementedError

    def _clamp_cursor(self) -> None:
        length = self.level_length()
        if self.cursor >= length:
            self.cursor = max(length - 1, 0)

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> str:
        if self.session is not None:
            return "editing"
        if self.picker is not None:
            return "choosing"
        return "browsing"

    @property
    def cursor(self) -> int:
        """Index at the level currently being navigated."""
        return self.selected

    @cursor.setter
    def cursor(self, value: int) -> None:
        self.selected = value

    def level_length(self) -> int:
        raise NotImplementedError

    # =========================================================================
    # Navigation
    # =========================================================================

    def up(self) -> None:
        if self.session is not None:
            return
        if self.picker is not None:
            self.picker.up()
            return
        self.cursor = wrap(self.cursor - 1, self.level_length())

    def down(self) -> None:
        if self.session is not None:
            return
        if self.picker is not None:
            self.picker.down()
            return
        self.cursor = wrap(self.cursor + 1, self.level_length())

    # =========================================================================
    # Choices
    # =========================================================================

    def choices_for(self, binding: FieldBinding, refresh: bool = False) -> list[Choice]:
        """Options for a choice field (cached per source until refreshed)."""
        source_name = binding.field.choices
        if source_name is None:
            return []
        if refresh or source_name not in self._choice_cache:
            source = self.choice_sources.get(source_name)
            self._choice_cache[source_name] = source() if source else []
        return self._choice_cache[source_name]

    def display_value(self, binding: FieldBinding) -> str:
        return binding.display(self.choices_for(binding))

    # =========================================================================
    # Key handling
    # =========================================================================

    def handle_key(self, key: str, character: str | None = None) -> KeyResult:
        """Route one key press through the active state."""
        if self.session is not None:
            return self._handle_edit_key(key, character)
        if self.picker is not None:
            return self._handle_choice_key(key)
        if key in UP_KEYS:
            self.up()
            return KeyResult(handled=True)
        if key in DOWN_KEYS:
            self.down()
            return KeyResult(handled=True)
        return self.handle_browse_key(key)

    def handle_browse_key(self, key: str) -> KeyResult:
        raise NotImplementedError

    def activate(self, binding: FieldBinding) -> KeyResult:
        """Enter on a field: toggle, start editing, or open the picker."""
        kind = binding.kind
        if kind == "bool":
            binding.toggle()
            return KeyResult(handled=True, changed=True)
        if kind == "choice":
            options = self.choices_for(binding, refresh=True)
            self.picker = ChoicePicker.start(binding, options)
            return KeyResult(handled=True)
        if kind in ("int", "float", "str"):
            self.session = EditSession.start(binding)
            return KeyResult(handled=True)
        return KeyResult()

    def _handle_edit_key(self, key: str, character: str | None) -> KeyResult:
        session = self.session
        if key == "enter":
            if not session.commit():
                return KeyResult(handled=True, message=session.error)
            self.session = None
            return KeyResult(handled=True, changed=True)
        if key == "escape":
            self.session = None
            return KeyResult(handled=True)
        if key == "backspace":
            session.backspace()
            return KeyResult(handled=True)
        if key == "ctrl+u":
            session.clear()
            return KeyResult(handled=True)
        if character and character.isprintable():
            session.insert(character)
            return KeyResult(handled=True)
        return KeyResult()

    def _handle_choice_key(self, key: str) -> KeyResult:
        picker = self.picker
        if key in UP_KEYS:
            picker.up()
            return KeyResult(handled=True)
        if key in DOWN_KEYS:
            picker.down()
            return KeyResult(handled=True)
        if key == "enter":
            changed = picker.commit()
            self.picker = None
            return KeyResult(handled=True, changed=changed)
        if key in BACK_KEYS:
            self.picker = None
            return KeyResult(handled=True)
        if key in PREVIEW_KEYS and picker.binding.field.choices == "sounds":
            option = picker.current
            if option is not None and option.value and self.preview_sound:
                self.preview_sound(option.value)
            return KeyResult(handled=True)
        return KeyResult()


class FieldListController(ScreenController):
    """A flat screen: one row per FieldBinding."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.items: list[FieldBinding] = []
        super().__init__(*args, **kwargs)

    def level_length(self) -> int:
        return len(self.items)

    @property
    def current(self) -> FieldBinding | None:
        if not self.items:
            return None
        return self.items[self.selected]

    def handle_browse_key(self, key: str) -> KeyResult:
        binding = self.current
        if key in BACK_KEYS:
            return KeyResult(handled=True, leave=True)
        if binding is None:
            return KeyResult()
        if key in EDIT_KEYS:
            return self.activate(binding)
        if key in TOGGLE_KEYS and binding.kind == "bool":
            binding.toggle()
            return KeyResult(handled=True, changed=True)
        return KeyResult()
