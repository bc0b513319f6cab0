"""
Input checks for the form collaborator.

The schedule core assumes well-formed inputs; these helpers catch bad values
before they reach it and return an error message instead of raising.
"""

import math
from datetime import datetime
from decimal import Decimal

from .config import (
    DATE_KEY_FORMAT,
    SLOT_CURRENT_DATE,
    SLOT_DAILY_SHIFT,
    SLOT_END_DATE,
    SLOT_NOTES,
    SLOT_SLEEP_END,
    SLOT_SLEEP_START,
    SLOT_START_DATE,
)
from .types import ScheduleConfig


def validate_time(t: str) -> bool:
    """Validate time format like '07:00'."""
    if not isinstance(t, str) or len(t) != 5:
        return False
    try:
        parts = t.split(":")
        if len(parts) != 2:
            return False
        hour = int(parts[0])
        minute = int(parts[1])
        return 0 <= hour <= 23 and 0 <= minute <= 59
    except (ValueError, IndexError):
        return False


def validate_date(d: str) -> bool:
    """Validate ISO date format like '2025-01-06'."""
    if not isinstance(d, str) or len(d) != 10:
        return False
    try:
        datetime.strptime(d, DATE_KEY_FORMAT)
        return True
    except ValueError:
        return False


def validate_shift(value: object) -> bool:
    """Validate daily shift minutes (finite real number, not bool)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def validate_notes(notes: object) -> bool:
    """Validate a note map: date-string keys, string values."""
    if not isinstance(notes, dict):
        return False
    return all(validate_date(k) and isinstance(v, str) for k, v in notes.items())


def validate_config(config: ScheduleConfig) -> str | None:
    """Validate a config, return error message or None if valid."""
    if not validate_time(config.sleep_start):
        return f"Invalid sleep start time: {config.sleep_start}"
    if not validate_time(config.sleep_end):
        return f"Invalid sleep end time: {config.sleep_end}"

    for label, value in (
        ("current", config.current_date),
        ("start", config.start_date),
        ("end", config.end_date),
    ):
        if not validate_date(value):
            return f"Invalid {label} date: {value}"

    if config.end_date < config.start_date:
        return f"End date {config.end_date} is before start date {config.start_date}"

    if not validate_shift(config.daily_shift_minutes):
        return f"Invalid daily shift minutes: {config.daily_shift_minutes}"

    if not validate_notes(config.notes):
        return "Notes must map YYYY-MM-DD dates to text"

    return None


def validate_request(data: dict) -> str | None:
    """Validate raw request data, return error message or None if valid."""
    required_fields = [
        SLOT_SLEEP_START,
        SLOT_SLEEP_END,
        SLOT_CURRENT_DATE,
        SLOT_START_DATE,
        SLOT_END_DATE,
        SLOT_DAILY_SHIFT,
    ]

    for field in required_fields:
        if field not in data:
            return f"Missing required field: {field}"

    return validate_config(
        ScheduleConfig(
            sleep_start=data[SLOT_SLEEP_START],
            sleep_end=data[SLOT_SLEEP_END],
            current_date=data[SLOT_CURRENT_DATE],
            start_date=data[SLOT_START_DATE],
            end_date=data[SLOT_END_DATE],
            daily_shift_minutes=data[SLOT_DAILY_SHIFT],
            notes=data.get(SLOT_NOTES, {}),
        )
    )


def get_step_value(value: float) -> float:
    """
    Step increment for a number input holding value.

    Integers step by 1; otherwise the step matches the last decimal place,
    e.g. 1.5 -> 0.1, 51.43 -> 0.01, 0.000015 -> 0.000001.
    """
    exponent = Decimal(repr(float(value))).normalize().as_tuple().exponent
    if exponent >= 0:
        return 1
    return 10**exponent
