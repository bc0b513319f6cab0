"""
Pytest fixtures for sleep-shift schedule tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from freerun.scheduler import ScheduleGenerator
from freerun.types import ScheduleConfig


@pytest.fixture
def generator():
    """ScheduleGenerator for the default Vancouver/Shanghai pair."""
    return ScheduleGenerator()


@pytest.fixture
def two_day_config():
    """22:00-06:00 sleep, shifting 30 min/day, two days from the reference date."""
    return ScheduleConfig(
        sleep_start="22:00",
        sleep_end="06:00",
        current_date="2024-01-15",
        start_date="2024-01-15",
        end_date="2024-01-16",
        daily_shift_minutes=30,
        notes={"2024-01-20": "A", "2024-01-21": "B"},
    )


@pytest.fixture
def state_file(tmp_path):
    """Factory writing a JSON state file and returning its path."""

    def _write(data: dict) -> Path:
        path = tmp_path / "state.json"
        path.write_text(json.dumps(data))
        return path

    return _write
