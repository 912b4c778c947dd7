"""UIField descriptor for settings sections with display and range metadata.

This module implements Python's descriptor protocol to create fields that:
1. Store configuration values (like regular instance attributes)
2. Carry UI metadata (labels, explanations, units)
3. Know the value range accepted from text entry

The Descriptor Pattern
----------------------
A descriptor assigned to a class attribute intercepts attribute access on
instances. Class access returns the UIField itself, so the same declaration
is both the storage slot and the metadata record:

    class Display(ConfigBase):
        separator = UIField(
            str, " • ",
            "Separator", "Text between sections",
        )

    display = Display()
    display.separator = " | "          # Set value
    print(display.separator)           # Get value: " | "

    field = Display.separator          # Metadata (via class)
    print(field.explanation)           # "Text between sections"

Architecture Overview
---------------------
                    ┌─────────────────┐
                    │  ConfigBase     │  __init__, get_ui_fields()
                    │                 │
                    └────────┬────────┘
                             │
         ┌───────────────────┼───────────────────┐
         ▼                   ▼                   ▼
┌─────────────────┐ ┌─────────────────┐ ┌─────────────────┐
│ EnabledSections │ │ MascotState     │ │ DesktopNotif... │
│ git=...         │ │ threshold=...   │ │ sound_path=...  │
└─────────────────┘ └─────────────────┘ └─────────────────┘

Integration Points
------------------
1. FieldBinding (model/field_binding.py): pairs a UIField with an index path
   into a StatuslineConfig and performs get/set/toggle/parse through it.

2. Persistence (config_store.py): iterates get_ui_fields() to serialize and to
   merge stored values over defaults.

3. Controllers (controller/*.py): build their item lists from the declared
   fields, so adding a field to a section adds it to the screen.
"""

from __future__ import annotations

import copy
from typing import Any, Callable


class UIField:
    """Descriptor that holds field value + all metadata.

    When accessed on the class, returns the UIField itself (with metadata).
    When accessed on an instance, returns the actual value.
    """

    def __init__(
        self,
        type_: type,
        default: Any,
        label: str,
        explanation: str,
        *,
        minimum: int | float | None = None,
        maximum: int | float | None = None,
        unit: str = "",
        choices: str | None = None,
        min_items: int = 0,
        item_type: type = str,
        default_factory: Callable[[], Any] | None = None,
    ):
        """Create a UIField descriptor.

        Args:
            type_: The Python type of this field (bool, int, float, str, list)
            default: Default value for the field
            label: Short label shown in the editor
            explanation: Help text shown under the selected row
            minimum: Lower clamp bound for numeric text entry
            maximum: Upper clamp bound for numeric text entry
            unit: Suffix shown after numeric values ("%", "ms", "x")
            choices: Name of the option source when the value is picked from a list
            min_items: Smallest length a list field may shrink to
            item_type: Type of each element of a list field
            default_factory: Factory for mutable defaults (lists)
        """
        self.type_ = type_
        self.default = default
        self.label = label
        self.explanation = explanation
        self.minimum = minimum
        self.maximum = maximum
        self.unit = unit
        self.choices = choices
        self.min_items = min_items
        self.item_type = item_type
        self.default_factory = default_factory
        self.name: str | None = None

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self.name = name
        # Each class gets its own registry so subclasses don't leak fields upward
        if "_ui_fields" not in owner.__dict__:
            inherited = getattr(owner, "_ui_fields", {})
            owner._ui_fields = dict(inherited)
        owner._ui_fields[name] = self

    def __get__(self, obj: Any, owner: type | None = None) -> Any:
        """Get the field value or the descriptor itself.

        - Class access (obj is None): returns UIField with metadata
        - Instance access: returns the actual value
        """
        if obj is None:
            return self
        if self.name not in obj.__dict__:
            obj.__dict__[self.name] = self.make_default()
        return obj.__dict__[self.name]

    def __set__(self, obj: Any, value: Any) -> None:
        """Set the field value on an instance."""
        obj.__dict__[self.name] = value

    def make_default(self) -> Any:
        """Return a fresh default value (lists are never shared between instances)."""
        if self.default_factory:
            return self.default_factory()
        return copy.copy(self.default)

    @property
    def kind(self) -> str:
        """Editing kind: bool, int, float, str, list or choice."""
        if self.choices:
            return "choice"
        return self.type_.__name__


class ConfigBase:
    """Base class for UIField-based settings sections."""

    _ui_fields: dict[str, UIField]

    def __init__(self, **kwargs: Any) -> None:
        """Initialize section with optional field values."""
        ui_fields = self.get_ui_fields()
        for name, value in kwargs.items():
            if name in ui_fields:
                setattr(self, name, value)

    @classmethod
    def get_ui_fields(cls) -> dict[str, UIField]:
        """Get all UIField descriptors for this class, in declaration order."""
        return getattr(cls, "_ui_fields", {})

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return all(
            getattr(self, name) == getattr(other, name)
            for name in self.get_ui_fields()
        )

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={getattr(self, name)!r}" for name in self.get_ui_fields()
        )
        return f"{type(self).__name__}({values})"
