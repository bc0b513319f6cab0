"""
Best-effort persistence of form inputs and notes.

The schedule core never touches storage. The calling layer injects a
KeyValueStore, loads a ScheduleConfig once at start-up and writes it back
after each change. A stored value that cannot be parsed falls back to its
default with a warning; a failed write is logged and otherwise ignored.
"""

import json
import logging
import os
import tempfile
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

from .config import (
    SLOT_CURRENT_DATE,
    SLOT_DAILY_SHIFT,
    SLOT_END_DATE,
    SLOT_NOTES,
    SLOT_SLEEP_END,
    SLOT_SLEEP_START,
    SLOT_START_DATE,
)
from .types import ScheduleConfig
from .validation import validate_date, validate_notes, validate_shift, validate_time

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Storage keyed by slot name holding JSON-compatible values."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryStore:
    """Dict-backed store."""

    def __init__(self, data: dict[str, Any] | None = None):
        self.data: dict[str, Any] = dict(data or {})

    def get(self, key: str) -> Any | None:
        return self.data.get(key)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    Store backed by a single JSON object file.

    A missing or unreadable file reads as an empty store. Every set rewrites
    the whole file through a temporary file in the same directory, so the
    file on disk is always either the old object or the new one.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> dict[str, Any]:
        try:
            with open(self.path) as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to read store %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Store %s does not hold a JSON object, ignoring it", self.path)
            return {}
        return data

    def get(self, key: str) -> Any | None:
        return self._read().get(key)

    def set(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        text = json.dumps(data, indent=2, sort_keys=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w") as f:
                f.write(text)
            os.replace(tmp_name, self.path)
        except BaseException:
            os.unlink(tmp_name)
            raise


def _checked(check: Callable[[Any], bool]) -> Callable[[Any], Any]:
    """Parser that returns the stored value unchanged if it passes check."""

    def parse(value: Any) -> Any:
        if not check(value):
            raise ValueError(f"Invalid stored value: {value!r}")
        return value

    return parse


def _parse_shift(value: Any) -> float:
    if isinstance(value, (bool, str)):
        raise ValueError(f"Invalid stored shift: {value!r}")
    shift = float(value)
    if not validate_shift(shift):
        raise ValueError(f"Invalid stored shift: {value!r}")
    return shift


def _parse_notes(value: Any) -> dict[str, str]:
    """Validated copy of a stored note map, detached from the store."""
    return dict(_checked(validate_notes)(value))


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class Slot:
    """One persisted form field."""

    key: str
    attr: str  # ScheduleConfig attribute
    parser: Callable[[Any], Any]
    serializer: Callable[[Any], Any] = _identity


SLOTS = (
    Slot(SLOT_SLEEP_START, "sleep_start", _checked(validate_time)),
    Slot(SLOT_SLEEP_END, "sleep_end", _checked(validate_time)),
    Slot(SLOT_CURRENT_DATE, "current_date", _checked(validate_date)),
    Slot(SLOT_START_DATE, "start_date", _checked(validate_date)),
    Slot(SLOT_END_DATE, "end_date", _checked(validate_date)),
    Slot(SLOT_DAILY_SHIFT, "daily_shift_minutes", _parse_shift),
    Slot(SLOT_NOTES, "notes", _parse_notes, serializer=dict),
)


def load_config(store: KeyValueStore, defaults: ScheduleConfig | None = None) -> ScheduleConfig:
    """
    Load every slot from store, falling back to defaults per slot.

    Args:
        store: Injected key-value store
        defaults: Values for missing or corrupt slots (ScheduleConfig() if None)

    Returns:
        ScheduleConfig assembled from stored and default values
    """
    if defaults is None:
        defaults = ScheduleConfig()

    values: dict[str, Any] = {}
    for slot in SLOTS:
        stored = store.get(slot.key)
        if stored is None:
            continue
        try:
            values[slot.attr] = slot.parser(stored)
        except (TypeError, ValueError):
            logger.warning("Failed to parse stored %s: %r, using default", slot.key, stored)

    return ScheduleConfig(**{slot.attr: getattr(defaults, slot.attr) for slot in SLOTS} | values)


def save_config(store: KeyValueStore, config: ScheduleConfig) -> None:
    """Write every slot of config to store. Failures are logged, not raised."""
    for slot in SLOTS:
        value = getattr(config, slot.attr)
        try:
            store.set(slot.key, slot.serializer(value))
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to save %s: %s", slot.key, e)
