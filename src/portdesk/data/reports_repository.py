"""Weekly performance reports backed by Supabase."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from ..config import settings
from ..db.supabase import require_supabase_client
from ..models.coercion import clean_text, coerce_number, number_or_zero, parse_timestamp
from ..models.domain import DailyEntry, PerformanceReport
from .ports_repository import port_names_for

_DAILY_NUMERIC_FIELDS = ("total_quantity", "demurrages", "demurrage_charges", "quantity")

_CAMEL_KEYS = {
    "port_id": "portId",
    "vessel_name": "vesselName",
    "agent_name": "agentName",
    "owner_details": "ownerDetails",
    "purpose_of_arrival": "purposeOfArrival",
    "cargo_type": "cargoType",
    "type_of_cargo": "typeOfCargo",
    "total_quantity": "totalQuantity",
    "demurrages_collected": "demurragesCollected",
    "berthed_date": "berthedDate",
    "departure_date": "departureDate",
    "clearance_issued": "clearanceIssued",
    "daily_data": "dailyData",
    "created_at": "createdAt",
    "demurrage_charges": "demurrageCharges",
}


def _field(row: dict, name: str) -> Any:
    value = row.get(name)
    if value is None and name in _CAMEL_KEYS:
        value = row.get(_CAMEL_KEYS[name])
    return value


def _text_or_number(value: Any) -> Any:
    number = coerce_number(value)
    return number if number is not None else clean_text(value)


def row_to_daily_entry(row: dict) -> DailyEntry:
    return DailyEntry(
        date=clean_text(_field(row, "date")),
        cargo_type=clean_text(_field(row, "cargo_type")),
        type_of_cargo=clean_text(_field(row, "type_of_cargo")),
        total_quantity=coerce_number(_field(row, "total_quantity")),
        demurrages=coerce_number(_field(row, "demurrages")),
        reason=clean_text(_field(row, "reason")),
    )


def row_to_report(row: dict, port_name: Optional[str] = None) -> PerformanceReport:
    daily_rows = _field(row, "daily_data")
    daily = tuple(
        row_to_daily_entry(item) for item in (daily_rows or []) if isinstance(item, dict)
    )
    return PerformanceReport(
        id=str(row["id"]),
        port_id=clean_text(_field(row, "port_id")),
        port_name=port_name,
        vessel_name=clean_text(_field(row, "vessel_name")),
        agent_name=clean_text(_field(row, "agent_name")),
        owner_details=clean_text(_field(row, "owner_details")),
        purpose_of_arrival=clean_text(_field(row, "purpose_of_arrival")),
        status=clean_text(_field(row, "status")),
        cargo_type=clean_text(_field(row, "cargo_type")),
        type_of_cargo=clean_text(_field(row, "type_of_cargo")),
        total_quantity=coerce_number(_field(row, "total_quantity")),
        demurrages_collected=coerce_number(_field(row, "demurrages_collected")),
        dwt=_text_or_number(_field(row, "dwt")),
        loa=_text_or_number(_field(row, "loa")),
        berthed_date=clean_text(_field(row, "berthed_date")),
        departure_date=clean_text(_field(row, "departure_date")),
        clearance_issued=clean_text(_field(row, "clearance_issued")),
        daily_data=daily,
        created_at=parse_timestamp(_field(row, "created_at")),
        raw=row,
    )


def list_weekly_reports() -> list[PerformanceReport]:
    """Fetch every weekly performance report with its port name attached."""
    supabase = require_supabase_client()
    response = supabase.table(settings.reports_table).select("*").execute()
    rows = response.data or []
    port_names = port_names_for(str(_field(row, "port_id")) for row in rows if _field(row, "port_id"))

    reports: list[PerformanceReport] = []
    for row in rows:
        try:
            port_id = _field(row, "port_id")
            reports.append(row_to_report(row, port_names.get(str(port_id)) if port_id else None))
        except (KeyError, TypeError, ValueError) as e:
            logging.warning(f"Skipping invalid weekly report row: {e}")
    logging.info(f"Loaded {len(reports)} weekly performance reports")
    return reports


def sanitize_report_payload(payload: dict) -> dict:
    """Coerce quantity and demurrage fields to numbers; unusable values become 0."""
    data = {key: value for key, value in payload.items() if key != "id"}
    if "daily_data" in data and data["daily_data"] is not None:
        data["daily_data"] = [
            {**day, **{name: number_or_zero(day.get(name)) for name in _DAILY_NUMERIC_FIELDS}}
            for day in data["daily_data"]
        ]
    for name in ("total_quantity", "demurrages_collected"):
        if name in data:
            data[name] = number_or_zero(data[name])
    return data


def add_weekly_report(payload: dict, port_id: str) -> str:
    data = sanitize_report_payload(payload)
    data["port_id"] = port_id
    data["created_at"] = datetime.now(timezone.utc).isoformat()
    supabase = require_supabase_client()
    response = supabase.table(settings.reports_table).insert(data).execute()
    if not response.data:
        raise RuntimeError("Weekly report insert returned no row")
    report_id = str(response.data[0]["id"])
    logging.info(f"Added weekly report {report_id} for port '{port_id}'")
    return report_id


def update_weekly_report(report_id: str, payload: dict) -> bool:
    """Apply a partial update; returns False when no report has ``report_id``."""
    data = sanitize_report_payload(payload)
    supabase = require_supabase_client()
    response = supabase.table(settings.reports_table).update(data).eq("id", report_id).execute()
    return bool(response.data)
