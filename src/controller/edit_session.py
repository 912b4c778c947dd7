"""Transient edit state: typing a value, or picking one from a list."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from model.choices import Choice, index_of_value
from model.field_binding import FieldBinding, FieldValidationError

log = logging.getLogger(__name__)


@dataclass
class EditSession:
    """Typing a replacement value for one field.

    The buffer starts as the field's current text. Nothing reaches the config
    until commit() succeeds; cancel is simply dropping the session.
    """

    binding: FieldBinding
    buffer: str = ""
    error: str | None = None

    @classmethod
    def start(cls, binding: FieldBinding) -> EditSession:
        return cls(binding=binding, buffer=binding.edit_text())

    @property
    def kind(self) -> str:
        return self.binding.kind

    def insert(self, text: str) -> None:
        self.buffer += text
        self.error = None

    def backspace(self) -> None:
        self.buffer = self.buffer[:-1]
        self.error = None

    def clear(self) -> None:
        self.buffer = ""
        self.error = None

    def commit(self) -> bool:
        """Apply the buffer to the field.

        Returns False (field untouched, error set) when the text is invalid.
        """
        try:
            self.binding.set_from_text(self.buffer)
        except FieldValidationError as e:
            log.info(f"Rejected edit of {self.binding.key}: {e}")
            self.error = str(e)
            return False
        return True


@dataclass
class ChoicePicker:
    """Picking one option for a field from an enumerated list."""

    binding: FieldBinding
    options: list[Choice] = field(default_factory=list)
    selected: int = 0

    @classmethod
    def start(cls, binding: FieldBinding, options: list[Choice]) -> ChoicePicker:
        return cls(
            binding=binding,
            options=options,
            selected=index_of_value(options, binding.value),
        )

    @property
    def current(self) -> Choice | None:
        if not self.options:
            return None
        return self.options[self.selected]

    def up(self) -> None:
        if self.options:
            self.selected = (self.selected - 1) % len(self.options)

    def down(self) -> None:
        if self.options:
            self.selected = (self.selected + 1) % len(self.options)

    def commit(self) -> bool:
        """Store the highlighted option; False when there is nothing to pick."""
        option = self.current
        if option is None:
            return False
        self.binding.set_value(option.value)
        return True
