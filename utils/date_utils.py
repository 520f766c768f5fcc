"""
Date utilities for provider payloads.

Upstream dates arrive as M/D/YY strings, ISO-8601 strings, epoch milliseconds
or nothing at all. Everything is normalized to a naive UTC datetime, and any
value that cannot be read becomes None. Nothing here raises.
"""

import re
from datetime import date, datetime, timezone
from typing import Any, Optional

import pandas as pd

# M/D/YY or M/D/YYYY, nothing else on the line
SLASH_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{2}|\d{4})$")
HAS_DIGIT_RE = re.compile(r"\d")

# Tried after ISO-8601, before the generic fallback
EXTRA_FORMATS = ("%Y/%m/%d", "%m-%d-%Y", "%b %d, %Y", "%d %b %Y", "%m/%d/%Y %H:%M")


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parse a provider date into a naive UTC datetime.

    Accepts:
        - "3/5/24", "03/05/2024" (month first; 2-digit years are 20YY)
        - ISO-8601, with or without time, "Z" or offset
        - datetime / date objects
        - int/float epoch milliseconds (zero or negative is unset)
        - anything pandas can read as a calendar date

    Returns:
        datetime, or None for empty or unreadable input
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        return to_naive_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    if isinstance(value, (int, float)):
        return _from_epoch_ms(value)

    if not isinstance(value, str):
        return None

    value_str = value.strip()
    if not value_str:
        return None

    match = SLASH_DATE_RE.match(value_str)
    if match:
        month, day, year = (int(part) for part in match.groups())
        if year < 100:
            year += 2000
        try:
            return datetime(year, month, day)
        except ValueError:
            return None

    try:
        return to_naive_utc(datetime.fromisoformat(value_str.replace("Z", "+00:00")))
    except ValueError:
        pass

    for fmt in EXTRA_FORMATS:
        try:
            return datetime.strptime(value_str, fmt)
        except ValueError:
            continue

    # Generic fallback; a calendar date always has at least one digit
    if not HAS_DIGIT_RE.search(value_str):
        return None
    try:
        result = pd.to_datetime(value_str)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(result):
        return None
    if result.tzinfo is not None:
        result = result.tz_convert("UTC").tz_localize(None)
    return result.to_pydatetime()


def days_until(instant: datetime, now: datetime) -> int:
    """
    Whole calendar days from now until instant.

    Both sides are truncated to midnight, so the same calendar day is 0 and
    yesterday is -1.
    """
    return (to_naive_utc(instant).date() - to_naive_utc(now).date()).days


def format_date(value: Optional[datetime]) -> str:
    """Render a date for operators; absent dates render as '-'."""
    if value is None:
        return "-"
    return f"{value.strftime('%b')} {value.day}, {value.year}"


def utc_now() -> datetime:
    """Current time as a naive UTC datetime."""
    return datetime.utcnow()


def to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def _from_epoch_ms(value: float) -> Optional[datetime]:
    # Zero or negative means unset; NaN and out-of-range timestamps are unreadable
    if value <= 0:
        return None
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError, OSError):
        return None
