"""
Test helper functions for schedule label checks.

Labels are only parsed here to make assertions readable; production code
works from the instants on each row.
"""

from freerun.config import NEXT_DAY_SUFFIX


def strip_next_day(label: str) -> str:
    """Remove the next-day marker from a label."""
    if label.endswith(NEXT_DAY_SUFFIX):
        return label[: -len(NEXT_DAY_SUFFIX)]
    return label


def label_to_minutes(label: str) -> int:
    """
    Convert a "H:MM AM/PM" label to minutes since midnight.

    Args:
        label: Label as rendered on a row, optionally with the next-day marker

    Returns:
        Minutes since midnight (0-1439)
    """
    clock, period = strip_next_day(label).split(" ")
    hour, minute = (int(part) for part in clock.split(":"))
    hour %= 12
    if period == "PM":
        hour += 12
    return hour * 60 + minute


def minutes_diff(earlier: str, later: str) -> int:
    """Clock-face minutes from earlier to later, wrapped into [0, 1440)."""
    return (label_to_minutes(later) - label_to_minutes(earlier)) % (24 * 60)
