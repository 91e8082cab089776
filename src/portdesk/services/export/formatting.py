"""Display formatting shared by the CSV and workbook exporters."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ...models.coercion import parse_timestamp

PLACEHOLDER = "-"


def format_number(value: Any) -> Any:
    """Render numbers with thousands separators; pass anything else through."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,.3f}".rstrip("0").rstrip(".")
    return f"{int(value):,}"


def format_date(value: Any) -> str:
    """Short month/day/year ("Jan 5, 2024"); unparsable strings come back unchanged."""
    if value is None or value == "":
        return ""
    if isinstance(value, (datetime, date)):
        moment = value
    else:
        moment = parse_timestamp(value)
        if moment is None:
            return str(value)
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.strftime("%Y-%m-%d %H:%M")


def or_placeholder(value: Any) -> Any:
    """Missing and empty values become the placeholder dash; zero counts as missing."""
    if value is None or value == "" or value == 0:
        return PLACEHOLDER
    return value
