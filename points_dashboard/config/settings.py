"""Configuration settings for the dashboard."""

from dataclasses import dataclass, field
from pathlib import Path
import os

from dotenv import load_dotenv


load_dotenv()


# Published spreadsheet export the dashboard was built around
DEFAULT_CSV_URL = (
    "https://docs.google.com/spreadsheets/d/e/"
    "2PACX-1vREa_HW3XWf2Z_3WQ0YAT2P3whceAVheUiZyscHb9hsoqFzHpOIhIyEH0jsE7r6EpfW3DTcBrAlkVTH"
    "/pub?gid=133794820&single=true&output=csv"
)

# Range buttons in display order, with their labels
RANGE_LABELS: dict[str, str] = {
    "1D": "1T",
    "1W": "1W",
    "1M": "1M",
    "3M": "3M",
    "YTD": "YTD",
    "1Y": "1J",
    "ALL": "Max",
}


@dataclass
class Settings:
    """Application settings."""

    csv_url: str = field(default_factory=lambda: os.getenv("POINTS_CSV_URL", DEFAULT_CSV_URL))
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("POINTS_REQUEST_TIMEOUT", "30"))
    )
    default_range: str = field(
        default_factory=lambda: os.getenv("POINTS_DEFAULT_RANGE", "ALL")
    )
    value_unit: str = field(default_factory=lambda: os.getenv("POINTS_VALUE_UNIT", "Punkte"))
    refresh_seconds: int = field(
        default_factory=lambda: int(os.getenv("POINTS_REFRESH_SECONDS", "300"))
    )
    output_dir: Path = field(
        default_factory=lambda: Path(__file__).parent.parent.parent / "dist"
    )

    def validate(self) -> None:
        """Validate required settings."""
        if not self.csv_url:
            raise ValueError(
                "POINTS_CSV_URL not set. Publish the sheet as CSV and put the link in .env"
            )
        if self.default_range not in RANGE_LABELS:
            raise ValueError(
                f"Unknown POINTS_DEFAULT_RANGE {self.default_range!r}. "
                f"Expected one of: {', '.join(RANGE_LABELS)}"
            )
