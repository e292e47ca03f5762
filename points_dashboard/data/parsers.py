"""Date, time and number parsing for sheet rows.

Every parser returns None instead of raising: a None is the signal for
the caller to drop the row.
"""

import math
import re
from datetime import datetime, timedelta


ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
GERMAN_DATE = re.compile(r"^(\d{2})\.(\d{2})\.(\d{4})$")
CLOCK_TIME = re.compile(r"^(\d{1,2}):(\d{2})$")
PLAIN_NUMBER = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")

EPOCH = datetime(1970, 1, 1)


def parse_date(text: str | None) -> tuple[int, int, int] | None:
    """Parse YYYY-MM-DD or DD.MM.YYYY into (year, month, day)."""
    s = (text or "").strip()

    match = ISO_DATE.match(s)
    if match:
        y, m, d = (int(g) for g in match.groups())
    else:
        match = GERMAN_DATE.match(s)
        if not match:
            return None
        d, m, y = (int(g) for g in match.groups())

    try:
        datetime(y, m, d)
    except ValueError:
        return None
    return y, m, d


def parse_time(text: str | None) -> tuple[int, int] | None:
    """Parse H:MM or HH:MM into (hour, minute). Values are not range-checked."""
    match = CLOCK_TIME.match((text or "").strip())
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def to_timestamp(date_text: str | None, time_text: str | None) -> int | None:
    """
    Combine a date and a clock time into epoch seconds.

    Wall-clock fields are taken as-is with no timezone applied. Hours and
    minutes are added as a duration so that e.g. 25:99 rolls over into
    the next day.
    """
    ymd = parse_date(date_text)
    if ymd is None:
        return None
    hm = parse_time(time_text)
    if hm is None:
        return None

    try:
        moment = datetime(*ymd) + timedelta(hours=hm[0], minutes=hm[1])
    except OverflowError:
        return None
    return int((moment - EPOCH).total_seconds())


def from_timestamp(ts: int) -> datetime:
    """Inverse of to_timestamp, for display and calendar arithmetic."""
    return EPOCH + timedelta(seconds=ts)


def parse_value(text: str | None) -> float | None:
    """
    Parse a German-formatted number ("1.234,56") into a float.

    Text without a comma is read as a plain decimal ("1.5" is 1.5).
    """
    s = (text or "").strip()
    if "," in s:
        head, _, tail = s.partition(",")
        s = head.replace(".", "") + "." + tail
    if not PLAIN_NUMBER.match(s):
        return None

    value = float(s)
    if not math.isfinite(value):
        return None
    return value
