"""Display formats for values, timestamps and headline changes."""

from points_dashboard.data.parsers import from_timestamp
from points_dashboard.models import HeadlineResult


def format_number_de(n: float) -> str:
    """Two decimals, '.' for thousands and ',' for decimals: 1.234,56"""
    text = f"{n:,.2f}"
    return text.replace(",", "_").replace(".", ",").replace("_", ".")


def format_timestamp_de(ts: int) -> str:
    """DD.MM.YYYY HH:MM, same wall-clock rule as parsing."""
    return from_timestamp(ts).strftime("%d.%m.%Y %H:%M")


def change_sign(headline: HeadlineResult) -> str:
    return "+" if headline.is_non_negative else ""


def format_change_abs(headline: HeadlineResult) -> str:
    return f"{change_sign(headline)}{format_number_de(headline.change_abs)}"


def format_change_pct(headline: HeadlineResult) -> str:
    return f"({change_sign(headline)}{headline.change_pct:.2f}%)"


def headline_texts(headline: HeadlineResult, unit: str = "Punkte") -> dict[str, str]:
    """All strings the headline block shows, plus its pos/neg style class."""
    return {
        "last_value": f"{format_number_de(headline.last_value)} {unit}".strip(),
        "last_timestamp": f"Stand: {format_timestamp_de(headline.last_time)}",
        "change_abs": format_change_abs(headline),
        "change_pct": format_change_pct(headline),
        "style": "pos" if headline.is_non_negative else "neg",
    }
