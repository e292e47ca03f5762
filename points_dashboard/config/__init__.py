"""Configuration."""

from .settings import Settings, DEFAULT_CSV_URL, RANGE_LABELS

__all__ = ["Settings", "DEFAULT_CSV_URL", "RANGE_LABELS"]
