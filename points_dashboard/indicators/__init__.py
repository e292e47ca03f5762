"""Range and headline calculations."""

from points_dashboard.indicators.range_filter import filter_range, cutoff_for
from points_dashboard.indicators.headline import compute_headline

__all__ = ["filter_range", "cutoff_for", "compute_headline"]
