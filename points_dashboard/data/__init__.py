"""Data fetching and parsing."""

from .csv_fetcher import AcquisitionError, CsvFetcher, load_series
from .series_builder import build_series

__all__ = ["AcquisitionError", "CsvFetcher", "load_series", "build_series"]
