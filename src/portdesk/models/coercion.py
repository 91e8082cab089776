"""Value coercion for loosely typed Supabase rows."""

from __future__ import annotations

from datetime import date, datetime, time, timezone
from typing import Any, Mapping, Optional


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Convert a stored timestamp into a datetime, or None when unknown.

    Accepts datetimes, dates (start of day), ISO-8601 strings (a trailing
    ``Z`` is read as UTC), epoch seconds, and ``{"seconds": n}`` mappings as
    written by older document-store exports.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_epoch(value)
    if isinstance(value, Mapping):
        seconds = value.get("seconds", value.get("_seconds"))
        if isinstance(seconds, (int, float)) and not isinstance(seconds, bool):
            return _from_epoch(seconds)
        return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def _from_epoch(seconds: float) -> Optional[datetime]:
    # NaN and out-of-range epochs raise from fromtimestamp depending on platform.
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return None


def coerce_number(value: Any) -> Optional[float | int]:
    """Return ``value`` as an int/float, or None when it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.replace(",", "").strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
        return int(number) if number.is_integer() else number
    return None


def number_or_zero(value: Any) -> float | int:
    number = coerce_number(value)
    return 0 if number is None else number


def clean_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
