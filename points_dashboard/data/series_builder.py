"""Turn raw CSV export text into a sorted series of observations."""

import logging
import re

from points_dashboard.data.parsers import parse_value, to_timestamp
from points_dashboard.data.tokenizer import detect_delimiter, tokenize_line
from points_dashboard.models import Observation


logger = logging.getLogger(__name__)

BOM = "\ufeff"
LINE_BREAK = re.compile(r"\r?\n")
HEADER_MARKER = re.compile(r"datum|date", re.IGNORECASE)


def split_lines(text: str) -> list[str]:
    """Strip a leading BOM and return the non-blank lines."""
    if text.startswith(BOM):
        text = text[len(BOM):]
    return [line for line in LINE_BREAK.split(text) if line.strip()]


def parse_row(fields: list[str], delimiter: str) -> Observation | None:
    """Build an observation from tokenized fields, or None to skip the row."""
    if len(fields) < 3:
        return None
    if fields[0] == "" and fields[1] == "" and fields[2] == "":
        return None
    # Header rows can appear anywhere in hand-maintained sheets
    if HEADER_MARKER.search(fields[0]):
        return None

    # Thousands separators may have split the value across fields
    value_text = delimiter.join(fields[2:]).strip()

    value = parse_value(value_text)
    ts = to_timestamp(fields[0], fields[1])
    if value is None or ts is None:
        return None

    return Observation(time=ts, value=value)


def build_series(text: str) -> list[Observation]:
    """
    Parse an export into observations sorted by time.

    Malformed, blank and header rows are dropped without error. Rows that
    share a timestamp keep their input order.

    Returns:
        New list of observations, empty if nothing parsed
    """
    lines = split_lines(text)
    delimiter = detect_delimiter(lines)

    data = []
    for line in lines:
        obs = parse_row(tokenize_line(line, delimiter), delimiter)
        if obs is not None:
            data.append(obs)

    data.sort(key=lambda o: o.time)
    logger.debug(
        f"Parsed {len(data)} observations from {len(lines)} lines "
        f"(delimiter {delimiter!r}, {len(lines) - len(data)} skipped)"
    )
    return data
