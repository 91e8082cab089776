"""Multi-criteria filtering over vessel and performance-report snapshots.

Both record kinds expose the same small surface used here:
``search_fields()``, ``category``, ``port_id`` and ``timestamp``. Filtering
is a pure, order-preserving pass; records are never copied or mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Iterable, Optional, Sequence, TypeVar

from ...models.coercion import parse_timestamp

ALL_CATEGORIES = "all"

RecordT = TypeVar("RecordT")


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    search_text: str = ""
    category: str = ALL_CATEGORIES
    port_ids: frozenset[str] = frozenset()
    from_date: Optional[datetime | date] = None
    to_date: Optional[datetime | date] = None

    @classmethod
    def from_params(
        cls,
        *,
        search: Optional[str] = None,
        category: Optional[str] = None,
        port_ids: Optional[Iterable[str]] = None,
        from_date: Optional[str | date | datetime] = None,
        to_date: Optional[str | date | datetime] = None,
    ) -> "FilterCriteria":
        """Build criteria from raw query-string values."""
        normalized_ports = frozenset(p.strip() for p in (port_ids or ()) if p and p.strip())
        return cls(
            search_text=(search or "").strip(),
            category=(category or "").strip() or ALL_CATEGORIES,
            port_ids=normalized_ports,
            from_date=_parse_bound(from_date),
            to_date=_parse_bound(to_date),
        )

    @property
    def is_empty(self) -> bool:
        return (
            not self.search_text
            and self.category == ALL_CATEGORIES
            and not self.port_ids
            and self.from_date is None
            and self.to_date is None
        )


def filter_records(records: Sequence[RecordT], criteria: FilterCriteria) -> list[RecordT]:
    """Return the records matching every active criterion, in input order."""
    search = criteria.search_text.lower()
    start = _start_bound(criteria.from_date)
    end = _end_of_day(criteria.to_date)
    return [
        record
        for record in records
        if _matches(record, criteria, search, start, end)
    ]


def matches_criteria(record: object, criteria: FilterCriteria) -> bool:
    return _matches(
        record,
        criteria,
        criteria.search_text.lower(),
        _start_bound(criteria.from_date),
        _end_of_day(criteria.to_date),
    )


def _matches(
    record,
    criteria: FilterCriteria,
    search: str,
    start: Optional[datetime],
    end: Optional[datetime],
) -> bool:
    if search and not _matches_search(search, *record.search_fields()):
        return False
    if criteria.category and criteria.category != ALL_CATEGORIES and record.category != criteria.category:
        return False
    if criteria.port_ids and record.port_id not in criteria.port_ids:
        return False
    return _within_range(record.timestamp, start, end)


def _matches_search(search: str, *values: Optional[str]) -> bool:
    for value in values:
        if isinstance(value, str) and search in value.lower():
            return True
    return False


def _within_range(moment: Optional[datetime], start: Optional[datetime], end: Optional[datetime]) -> bool:
    # Records without a timestamp pass through any date range.
    if moment is None:
        return True
    if start is not None and moment < _align(start, moment):
        return False
    if end is not None and moment > _align(end, moment):
        return False
    return True


def _align(bound: datetime, reference: datetime) -> datetime:
    """Give a naive bound the record's timezone so the two compare."""
    if bound.tzinfo is None and reference.tzinfo is not None:
        return bound.replace(tzinfo=reference.tzinfo)
    if bound.tzinfo is not None and reference.tzinfo is None:
        return bound.replace(tzinfo=None)
    return bound


def _start_bound(value: Optional[datetime | date]) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def _end_of_day(value: Optional[datetime | date]) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return datetime.combine(value.date(), time.max, tzinfo=value.tzinfo)
    return datetime.combine(value, time.max)


def _parse_bound(value: Optional[str | date | datetime]) -> Optional[datetime | date]:
    if value is None or isinstance(value, (date, datetime)):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    parsed = parse_timestamp(text)
    if parsed is None:
        raise ValueError(f"Invalid date value '{value}'")
    return parsed
