#!/usr/bin/env python3
"""
Regenerate schedule from a JSON state file.

Usage: python3 regenerate_schedule.py <state_file.json> [up|down|today]

The state file holds the form inputs and notes, keyed by slot name. Missing
or corrupt slots fall back to defaults. An optional action changes the state
before generation and saves it back to the file:

    up     move every note to the previous day
    down   move every note to the next day
    today  re-anchor the shift to today's date in the local timezone

The generated schedule and the current notes are written as JSON to stdout.
"""

import json
import logging
import sys
from dataclasses import replace

# Import freerun modules (assumes api/_python is in path or script is run from there)
from freerun.config import LOCAL_TZ
from freerun.notes import shift_notes_down, shift_notes_up
from freerun.persistence import JsonFileStore, load_config, save_config
from freerun.scheduler import generate_schedule_from_config, rows_to_dict
from freerun.time_math import format_date_key, get_current_date_in_tz
from freerun.types import ScheduleConfig
from freerun.validation import validate_config

ACTIONS = ("up", "down", "today")


def apply_action(config: ScheduleConfig, action: str) -> ScheduleConfig:
    """Return the config after a user action."""
    if action == "up":
        return config.with_notes(shift_notes_up(config.notes))
    elif action == "down":
        return config.with_notes(shift_notes_down(config.notes))
    elif action == "today":
        today = get_current_date_in_tz(LOCAL_TZ)
        return replace(config, current_date=format_date_key(today))
    else:
        raise ValueError(f"Unknown action: {action}")


def main() -> None:
    if len(sys.argv) not in (2, 3) or (len(sys.argv) == 3 and sys.argv[2] not in ACTIONS):
        print(json.dumps({"error": "Usage: regenerate_schedule.py <state_file.json> [up|down|today]"}))
        sys.exit(1)

    store = JsonFileStore(sys.argv[1])
    action = sys.argv[2] if len(sys.argv) == 3 else None

    try:
        config = load_config(store)

        if action is not None:
            config = apply_action(config, action)
            save_config(store, config)

        validation_error = validate_config(config)
        if validation_error:
            print(json.dumps({"error": validation_error}))
            sys.exit(1)

        rows = generate_schedule_from_config(config)

        print(json.dumps({"rows": rows_to_dict(rows), "notes": config.notes}))

    except ValueError as e:
        print(json.dumps({"error": f"Invalid input: {e}"}))
        sys.exit(1)
    except Exception as e:
        print(json.dumps({"error": f"Schedule generation failed: {e}"}))
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main()
