"""Restrict a series to a lookback window ending at its last point."""

from datetime import datetime

from points_dashboard.data.parsers import EPOCH, from_timestamp
from points_dashboard.models import Observation, RangeSelector


DAY_SECONDS = 24 * 60 * 60

# Fixed day counts, not calendar months/years
LOOKBACK_DAYS: dict[RangeSelector, int] = {
    RangeSelector.ONE_DAY: 1,
    RangeSelector.ONE_WEEK: 7,
    RangeSelector.ONE_MONTH: 30,
    RangeSelector.THREE_MONTHS: 90,
    RangeSelector.ONE_YEAR: 365,
}


def cutoff_for(series: list[Observation], selector: RangeSelector | str) -> int:
    """Earliest timestamp kept for the selector. Unknown selectors keep everything."""
    selected = RangeSelector.parse(selector)
    if not series or selected is None or selected is RangeSelector.ALL:
        return 0

    last_t = series[-1].time
    if selected is RangeSelector.YTD:
        year_start = datetime(from_timestamp(last_t).year, 1, 1)
        return int((year_start - EPOCH).total_seconds())

    return last_t - LOOKBACK_DAYS[selected] * DAY_SECONDS


def filter_range(
    series: list[Observation], selector: RangeSelector | str
) -> list[Observation]:
    """
    Observations at or after the selector's cutoff.

    Args:
        series: Full series sorted by time
        selector: Range name such as "1W" or a RangeSelector

    Returns:
        The series itself for ALL, otherwise a new list (possibly empty)
    """
    if RangeSelector.parse(selector) is RangeSelector.ALL:
        return series

    cutoff = cutoff_for(series, selector)
    return [p for p in series if p.time >= cutoff]
