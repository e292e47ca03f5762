"""Fetch the published sheet export and build the series."""

import logging
from pathlib import Path

import httpx

from points_dashboard.config import Settings
from points_dashboard.data.series_builder import build_series
from points_dashboard.models import Observation


logger = logging.getLogger(__name__)


class AcquisitionError(RuntimeError):
    """Raised when the export text could not be retrieved."""


class CsvFetcher:
    """Downloads the CSV export over HTTP, one request per load."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._client = client

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client."""
        if self._client is None:
            self._client = httpx.Client(
                timeout=self.settings.request_timeout,
                follow_redirects=True,
                headers={"Cache-Control": "no-cache"},
            )
        return self._client

    def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> "CsvFetcher":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def fetch_text(self) -> str:
        """
        Download the export as text.

        Raises:
            AcquisitionError: on transport failure or a non-2xx response
        """
        url = self.settings.csv_url
        logger.info(f"Fetching {url}...")
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise AcquisitionError(
                f"CSV could not be loaded: HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise AcquisitionError(f"CSV could not be loaded: {e}") from e

        text = response.text
        logger.info(f"  Received {len(text)} characters")
        return text.lstrip("\ufeff")

    def load_series(self) -> list[Observation]:
        """Fetch and parse. Returns a fresh list on every call."""
        series = build_series(self.fetch_text())
        if series:
            logger.info(f"  Parsed {len(series)} observations")
        else:
            logger.warning("  No usable rows in export")
        return series


def load_series(settings: Settings | None = None) -> list[Observation]:
    """Single fetch-and-parse cycle for the configured source."""
    with CsvFetcher(settings) as fetcher:
        return fetcher.load_series()


def main() -> None:
    """CLI entry point for a one-off load."""
    import argparse
    import sys

    from points_dashboard.indicators import compute_headline, filter_range
    from points_dashboard.ui.formatting import headline_texts, format_timestamp_de

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    parser = argparse.ArgumentParser(description="Load the points sheet and print the headline")
    parser.add_argument(
        "--url",
        type=str,
        help="CSV export URL (overrides POINTS_CSV_URL)",
    )
    parser.add_argument(
        "--file",
        type=Path,
        help="Read a local export instead of fetching",
    )
    parser.add_argument(
        "--range",
        type=str,
        default=None,
        help="Range for the headline (ALL, 1D, 1W, 1M, 3M, 1Y, YTD)",
    )
    args = parser.parse_args()

    settings = Settings()
    if args.url:
        settings.csv_url = args.url

    try:
        if args.file:
            series = build_series(args.file.read_text(encoding="utf-8"))
        else:
            series = load_series(settings)
    except ValueError as e:
        print(f"Configuration error: {e}")
        sys.exit(1)
    except (AcquisitionError, OSError) as e:
        logger.error(f"{e}")
        print("Data unavailable")
        sys.exit(1)

    if not series:
        print("No data")
        sys.exit(1)

    selected = args.range or settings.default_range
    points = filter_range(series, selected)
    print(f"\n{len(series)} observations, "
          f"{format_timestamp_de(series[0].time)} - {format_timestamp_de(series[-1].time)}")

    headline = compute_headline(points)
    if headline is None:
        print(f"No observations in range {selected}")
        return

    texts = headline_texts(headline, settings.value_unit)
    print(f"Range {selected}: {len(points)} points")
    print(f"  {texts['last_value']}  {texts['change_abs']} {texts['change_pct']}")
    print(f"  {texts['last_timestamp']}")


if __name__ == "__main__":
    main()
