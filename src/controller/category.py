"""Nested screens: a list of categories, each with its own sub-items.

A category's sub-items are a fixed prefix of scalar bindings followed by an
optional variable-length list (mascot emoji frames). CategoryLayout is derived
from the category every time it is asked for, so offsets follow appends and
removals without bookkeeping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from controller.base import (
    ADD_KEYS,
    BACK_KEYS,
    DELETE_KEYS,
    EDIT_KEYS,
    TOGGLE_KEYS,
    KeyResult,
    ScreenController,
)
from model.field_binding import FieldBinding

log = logging.getLogger(__name__)


@dataclass
class Category:
    """One entry on a nested screen."""

    key: str
    label: str
    description: str
    enabled: FieldBinding
    prefix: list[FieldBinding] = field(default_factory=list)
    items: FieldBinding | None = None
    item_label: str = "Frame"
    new_item: Any = None

    @property
    def layout(self) -> CategoryLayout:
        return CategoryLayout(self.prefix, self.items)

    def sub_binding(self, index: int) -> FieldBinding:
        """Binding for the sub-item at a layout index."""
        layout = self.layout
        if index < layout.list_offset:
            return self.prefix[index]
        position = index - layout.list_offset
        return self.items.element(position, label=f"{self.item_label} {position + 1}")


@dataclass(frozen=True)
class CategoryLayout:
    prefix: list[FieldBinding]
    items_binding: FieldBinding | None = None

    @property
    def list_offset(self) -> int:
        return len(self.prefix)

    @property
    def list_length(self) -> int:
        if self.items_binding is None:
            return 0
        return self.items_binding.length()

    @property
    def count(self) -> int:
        return self.list_offset + self.list_length

    def is_list_index(self, index: int) -> bool:
        return self.items_binding is not None and self.list_offset <= index < self.count


class CategoryScreenController(ScreenController):
    """Browsing over categories, then over one category's sub-items."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        self.categories: list[Category] = []
        self.sub_selected = 0
        self.in_category = False
        super().__init__(*args, **kwargs)

    @property
    def state(self) -> str:
        state = super().state
        if state == "browsing" and self.in_category:
            return "in_category"
        return state

    @property
    def cursor(self) -> int:
        return self.sub_selected if self.in_category else self.selected

    @cursor.setter
    def cursor(self, value: int) -> None:
        if self.in_category:
            self.sub_selected = value
        else:
            self.selected = value

    def level_length(self) -> int:
        if self.in_category:
            return self.current.layout.count
        return len(self.categories)

    def attach(self, config: Any) -> None:
        super().attach(config)
        if self.in_category:
            count = self.current.layout.count
            if self.sub_selected >= count:
                self.sub_selected = max(count - 1, 0)

    @property
    def current(self) -> Category:
        return self.categories[self.selected]

    @property
    def current_sub(self) -> FieldBinding | None:
        if not self.in_category:
            return None
        return self.current.sub_binding(self.sub_selected)

    def enter_category(self) -> None:
        self.in_category = True
        self.sub_selected = 0

    def leave_category(self) -> None:
        self.in_category = False
        self.sub_selected = 0

    def handle_browse_key(self, key: str) -> KeyResult:
        if not self.in_category:
            if key in BACK_KEYS:
                return KeyResult(handled=True, leave=True)
            if key == "enter":
                self.enter_category()
                return KeyResult(handled=True)
            if key in TOGGLE_KEYS:
                self.current.enabled.toggle()
                return KeyResult(handled=True, changed=True)
            return KeyResult()

        category = self.current
        binding = self.current_sub
        if key in BACK_KEYS:
            self.leave_category()
            return KeyResult(handled=True)
        if key in EDIT_KEYS:
            return self.activate(binding)
        if key in TOGGLE_KEYS and binding.kind == "bool":
            binding.toggle()
            return KeyResult(handled=True, changed=True)
        if key in ADD_KEYS and category.items is not None:
            length = category.items.append(category.new_item)
            self.sub_selected = category.layout.list_offset + length - 1
            return KeyResult(handled=True, changed=True)
        if key in DELETE_KEYS and category.layout.is_list_index(self.sub_selected):
            return self._remove_item(category)
        return KeyResult()

    def _remove_item(self, category: Category) -> KeyResult:
        layout = category.layout
        position = self.sub_selected - layout.list_offset
        if not category.items.remove_at(position):
            log.info(f"Refused to remove the last {category.item_label.lower()} of {category.key}")
            return KeyResult(handled=True)
        count = category.layout.count
        if self.sub_selected >= count:
            self.sub_selected = count - 1
        return KeyResult(handled=True, changed=True)
