"""Data models for the points series."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Observation:
    """Single timestamped value from the sheet."""

    time: int  # seconds since epoch, built from wall-clock fields
    value: float


class RangeSelector(str, Enum):
    """Lookback windows offered above the chart."""

    ALL = "ALL"
    ONE_DAY = "1D"
    ONE_WEEK = "1W"
    ONE_MONTH = "1M"
    THREE_MONTHS = "3M"
    ONE_YEAR = "1Y"
    YTD = "YTD"

    @classmethod
    def parse(cls, value: "str | RangeSelector") -> "RangeSelector | None":
        """Return the selector with exactly this name, or None for anything else."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass(frozen=True)
class HeadlineResult:
    """Latest value and change versus the first point of a range."""

    last_value: float
    last_time: int
    change_abs: float
    change_pct: float  # unguarded: inf/nan when the first value is zero
    is_non_negative: bool
