"""Headline figures for the selected range."""

import math

from points_dashboard.models import HeadlineResult, Observation


def percent_change(first: float, diff: float) -> float:
    """diff / first * 100 without clamping a zero base."""
    if first == 0:
        # Same outcome as IEEE float division
        return math.copysign(math.inf, diff) if diff else math.nan
    return diff / first * 100


def compute_headline(points: list[Observation]) -> HeadlineResult | None:
    """
    Latest value and change versus the first point in range.

    Returns None for an empty range so callers can skip the update.
    """
    if not points:
        return None

    last = points[-1]
    base = points[0]

    # Only one distinct point in time: report a flat change
    if base.time == last.time:
        return HeadlineResult(
            last_value=last.value,
            last_time=last.time,
            change_abs=0.0,
            change_pct=0.0,
            is_non_negative=True,
        )

    diff = last.value - base.value
    return HeadlineResult(
        last_value=last.value,
        last_time=last.time,
        change_abs=diff,
        change_pct=percent_change(base.value, diff),
        is_non_negative=diff >= 0,
    )
