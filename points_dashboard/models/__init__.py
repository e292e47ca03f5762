"""Data models."""

from .series import Observation, RangeSelector, HeadlineResult

__all__ = ["Observation", "RangeSelector", "HeadlineResult"]
