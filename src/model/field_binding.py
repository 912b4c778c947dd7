"""FieldBinding: a label bound to one leaf of a StatuslineConfig.

A binding never holds the value. It holds an index path (attribute names and
list indices from the config root) and resolves it on every read and write,
so editing through the binding edits the shared config directly:

    binding = FieldBinding(config, ("mascot", "context_panic", "threshold"),
                           MascotState.threshold)
    binding.set_from_text("150")        # clamps to 100
    config.mascot.context_panic.threshold
    # 100

When the config object is replaced (revert, reload), controllers rebuild
their bindings against the new root via attach().
"""

from __future__ import annotations

from typing import Any, Sequence

from model.validators import validate_float, validate_int, validate_text
from model.choices import Choice, name_for_value
from model.ui_field import UIField

PathPart = str | int

_UNSET: Any = object()

CHECKED = "[x]"
UNCHECKED = "[ ]"


class FieldValidationError(ValueError):
    """Raised when typed text cannot be stored in a field."""


def resolve_path(root: Any, path: Sequence[PathPart]) -> Any:
    """Follow an index path from root and return the value it names."""
    node = root
    for part in path:
        node = node[part] if isinstance(part, int) else getattr(node, part)
    return node


def assign_path(root: Any, path: Sequence[PathPart], value: Any) -> None:
    """Store value at the location an index path names."""
    parent = resolve_path(root, path[:-1])
    last = path[-1]
    if isinstance(last, int):
        parent[last] = value
    else:
        setattr(parent, last, value)


ELEMENT_FIELD = UIField(str, "", "Item", "")


class FieldBinding:
    """Generic get/set/toggle/parse access to one config leaf."""

    def __init__(
        self,
        config: Any,
        path: Sequence[PathPart],
        field: UIField,
        *,
        label: str | None = None,
        explanation: str | None = None,
        unit: str | None = None,
        minimum: int | float | None = _UNSET,
        maximum: int | float | None = _UNSET,
    ):
        """Bind a field.

        Args:
            config: Root of the settings tree
            path: Index path from the root to the leaf
            field: UIField carrying kind, range and display metadata
            label: Label override (defaults to field.label)
            explanation: Help text override (defaults to field.explanation)
            unit: Unit suffix override (defaults to field.unit)
            minimum: Range override for this leaf only
            maximum: Range override for this leaf only
        """
        self.config = config
        self.path = tuple(path)
        self.field = field
        self.label = label if label is not None else field.label
        self.explanation = explanation if explanation is not None else field.explanation
        self.unit = unit if unit is not None else field.unit
        self.minimum = field.minimum if minimum is _UNSET else minimum
        self.maximum = field.maximum if maximum is _UNSET else maximum

    def __repr__(self) -> str:
        return f"FieldBinding({'.'.join(str(p) for p in self.path)})"

    @property
    def key(self) -> str:
        """Dotted path, stable across rebinds."""
        return ".".join(str(p) for p in self.path)

    @property
    def kind(self) -> str:
        return self.field.kind

    @property
    def value(self) -> Any:
        return resolve_path(self.config, self.path)

    def set_value(self, value: Any) -> None:
        assign_path(self.config, self.path, value)

    # =========================================================================
    # Display
    # =========================================================================

    def display(self, choices: list[Choice] | None = None) -> str:
        """Current value as display text.

        Strings are quoted, numbers carry their unit, booleans render as a
        checkbox and lists as their elements separated by spaces.
        """
        value = self.value
        kind = self.kind
        if kind == "bool":
            return CHECKED if value else UNCHECKED
        if kind == "choice":
            name = name_for_value(choices or [], value)
            if name is not None:
                return name
            if self.field.type_ is float:
                return f"{value:.1f}{self.unit}"
            return str(value).rsplit("/", 1)[-1] or "(None)"
        if kind == "int":
            return f"{value}{self.unit}"
        if kind == "float":
            return f"{value:.1f}{self.unit}"
        if kind == "list":
            return " ".join(str(v) for v in value)
        return f'"{value}"'

    def edit_text(self) -> str:
        """Text an edit session starts from."""
        value = self.value
        if self.kind == "float":
            return f"{value:g}"
        return str(value)

    # =========================================================================
    # Mutation
    # =========================================================================

    def toggle(self) -> bool:
        """Flip a boolean leaf and return the new value."""
        if self.kind != "bool":
            raise TypeError(f"{self.key} is not a boolean field")
        new_value = not self.value
        self.set_value(new_value)
        return new_value

    def set_from_text(self, raw: str) -> Any:
        """Parse raw text by field kind and store it.

        Numbers outside the field's range are clamped to the nearest bound.

        Raises:
            FieldValidationError: text does not parse; the field is unchanged
            TypeError: the field is not text-editable (bool, list, choice)
        """
        kind = self.kind
        if kind == "int":
            parsed = validate_int(raw, self.minimum, self.maximum)
            if parsed is None:
                raise FieldValidationError(f"{self.label}: '{raw.strip()}' is not a whole number")
        elif kind == "float":
            parsed = validate_float(raw, self.minimum, self.maximum)
            if parsed is None:
                raise FieldValidationError(f"{self.label}: '{raw.strip()}' is not a number")
        elif kind == "str":
            parsed = validate_text(raw)
        else:
            raise TypeError(f"{self.key} ({kind}) cannot be set from text")
        self.set_value(parsed)
        return parsed

    # =========================================================================
    # List operations
    # =========================================================================

    def _require_list(self) -> list:
        if self.kind != "list":
            raise TypeError(f"{self.key} is not a list field")
        return self.value

    def length(self) -> int:
        return len(self._require_list())

    def append(self, default: Any) -> int:
        """Add one element at the end; returns the new length."""
        items = self._require_list()
        items.append(default)
        return len(items)

    def remove_at(self, index: int) -> bool:
        """Remove the element at index.

        Refused (returns False, nothing changes) when the index is out of
        range or the list is already at its minimum length.
        """
        items = self._require_list()
        if not 0 <= index < len(items):
            return False
        if len(items) <= max(self.field.min_items, 1):
            return False
        del items[index]
        return True

    def element(self, index: int, label: str | None = None) -> FieldBinding:
        """String binding for one list element."""
        self._require_list()
        return FieldBinding(
            self.config,
            self.path + (index,),
            ELEMENT_FIELD,
            label=label if label is not None else f"{self.label} {index + 1}",
            explanation=self.explanation,
        )
