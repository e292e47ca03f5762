"""Points series dashboard: CSV sheet ingestion, range filtering and headline."""

__version__ = "0.1.0"
