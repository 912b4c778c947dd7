"""Config file serialization for statusline-config."""

from __future__ import annotations

import json
import logging
from dataclasses import fields, is_dataclass
from pathlib import Path
from typing import Any

from constants import CONFIG_FILE_NAME
from model.statusline_config import StatuslineConfig, default_config
from model.ui_field import ConfigBase, UIField

log = logging.getLogger(__name__)


class PersistenceError(Exception):
    """Raised when the config file or the runtime script cannot be read or written."""


def get_config_path() -> Path:
    """Default location of the config file."""
    return Path.home() / ".claude" / CONFIG_FILE_NAME


def _has_ui_fields(obj: Any) -> bool:
    cls = obj if isinstance(obj, type) else type(obj)
    return hasattr(cls, "_ui_fields")


def serialize(obj: Any) -> Any:
    """Recursively serialize a config object to JSON-compatible data."""
    if _has_ui_fields(obj) and not isinstance(obj, type):
        return {name: serialize(getattr(obj, name)) for name in type(obj).get_ui_fields()}

    if is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: serialize(getattr(obj, f.name)) for f in fields(obj)}

    if isinstance(obj, list):
        return [serialize(v) for v in obj]
    return obj


def _is_scalar(value_type: type, value: Any) -> bool:
    if value_type is bool:
        return isinstance(value, bool)
    if value_type is int:
        return isinstance(value, int) and not isinstance(value, bool)
    if value_type is float:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if value_type is str:
        return isinstance(value, str)
    return False


def _accepts(field: UIField, value: Any) -> bool:
    """Whether a stored JSON value fits a field's type."""
    if field.type_ is list:
        return (
            isinstance(value, list)
            and len(value) >= field.min_items
            and all(_is_scalar(field.item_type, v) for v in value)
        )
    if _has_ui_fields(field.type_):
        return isinstance(value, dict)
    return _is_scalar(field.type_, value)


def merge_into(target: ConfigBase, data: dict, where: str = "") -> None:
    """Overlay stored values onto a section that already holds defaults.

    Unknown keys are ignored; values of the wrong type keep the default.
    """
    for name, field in type(target).get_ui_fields().items():
        if name not in data:
            continue
        value = data[name]
        key = f"{where}.{name}" if where else name
        if not _accepts(field, value):
            log.warning(f"Ignoring {key}: expected {field.type_.__name__}, got {value!r}")
            continue
        if _has_ui_fields(field.type_):
            merge_into(getattr(target, name), value, key)
        elif field.type_ is float:
            setattr(target, name, float(value))
        else:
            setattr(target, name, list(value) if isinstance(value, list) else value)


def deserialize(data: dict) -> StatuslineConfig:
    """Build a config from stored data, defaulting everything missing."""
    config = default_config()
    if not isinstance(data, dict):
        log.warning(f"Config root is {type(data).__name__}, not an object; using defaults")
        return config
    for f in fields(StatuslineConfig):
        if f.name not in data:
            continue
        value = data[f.name]
        section = getattr(config, f.name)
        if isinstance(section, ConfigBase):
            if isinstance(value, dict):
                merge_into(section, value, f.name)
            else:
                log.warning(f"Ignoring {f.name}: expected an object, got {value!r}")
        elif isinstance(value, str):
            setattr(config, f.name, value)
    return config


class ConfigStore:
    """Loads and saves the statusline config file."""

    def __init__(self, path: Path | None = None):
        self.path = path if path is not None else get_config_path()

    def load(self) -> StatuslineConfig:
        """Stored config merged over defaults; defaults when there is no file.

        Raises:
            PersistenceError: The file exists but cannot be read or parsed.
        """
        if not self.path.exists():
            log.info(f"No config at {self.path}, using defaults")
            return default_config()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except UnicodeDecodeError as e:
            raise PersistenceError(f"{self.path} is not UTF-8 text: {e}") from e
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Invalid JSON in {self.path}: {e}") from e
        except OSError as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}") from e
        log.info(f"Loaded config from {self.path}")
        return deserialize(data)

    def save(self, config: StatuslineConfig) -> None:
        """Write config as indented JSON, creating the directory if needed.

        Raises:
            PersistenceError: The file cannot be written.
        """
        text = json.dumps(serialize(config), indent=2, ensure_ascii=False) + "\n"
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.path}: {e}") from e
        log.info(f"Saved config to {self.path}")
