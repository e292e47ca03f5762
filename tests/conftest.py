"""Shared fixtures."""

from datetime import datetime, timezone

import pytest

from points_dashboard.models import Observation


def ts(*args: int) -> int:
    """Epoch seconds for naive wall-clock fields."""
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


@pytest.fixture
def daily_series() -> list[Observation]:
    """Eight daily points at 12:00, 01.06.2024 - 08.06.2024, values 100..107."""
    return [Observation(time=ts(2024, 6, day, 12, 0), value=100.0 + day - 1) for day in range(1, 9)]
