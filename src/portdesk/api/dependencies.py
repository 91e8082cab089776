"""Shared request dependencies."""

from __future__ import annotations

from urllib.parse import quote

from fastapi import HTTPException, Query, status

from ..services.filters import FilterCriteria


def filter_criteria(
    search: str | None = Query(default=None, description="Case-insensitive search across names, IMO, cargo and port"),
    category: str | None = Query(default=None, description="Operation category (Import, Export, Coastal) or 'all'"),
    port_id: list[str] = Query(default=[], description="Restrict to these port ids; repeat for several ports"),
    from_date: str | None = Query(default=None, description="Inclusive lower bound (ISO date or datetime)"),
    to_date: str | None = Query(default=None, description="Inclusive upper bound, through the end of that day"),
) -> FilterCriteria:
    try:
        return FilterCriteria.from_params(
            search=search,
            category=category,
            port_ids=port_id,
            from_date=from_date,
            to_date=to_date,
        )
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc


def unavailable(exc: Exception) -> HTTPException:
    return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))


def attachment_headers(file_name: str) -> dict[str, str]:
    """Content-Disposition with a printable-ASCII fallback and the exact name as RFC 5987 UTF-8."""
    fallback = "".join(ch for ch in file_name if " " <= ch <= "~" and ch not in '"\\').strip()
    encoded = quote(file_name, safe="")
    return {"Content-Disposition": f"attachment; filename=\"{fallback or 'download'}\"; filename*=UTF-8''{encoded}"}
