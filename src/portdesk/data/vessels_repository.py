"""Vessel-call records: Supabase rows to ``VesselRecord`` snapshots and back."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from ..config import settings
from ..db.supabase import require_supabase_client
from ..models.coercion import clean_text, coerce_number, parse_timestamp
from ..models.domain import CargoDescriptor, DraftReading, VesselRecord
from .ports_repository import port_names_for

REQUIRED_VESSEL_FIELDS: tuple[str, ...] = (
    "port_id",
    "vessel_name",
    "imo",
    "grt",
    "loa",
    "dwt",
    "operation_type",
    "voyage_type",
    "arrival_from",
    "location",
    "operation",
    "cargo",
)

_TIMESTAMP_FIELDS = (
    "entry_date",
    "sailed_out_date",
    "arrival_date_time",
    "pob_date_time",
    "berthing_date_time",
    "pob_departure_date_time",
)

_CAMEL_KEYS = {
    "port_id": "portId",
    "port_name": "portName",
    "vessel_name": "vesselName",
    "vessel_owner": "vesselOwner",
    "vessel_agent": "vesselAgent",
    "entry_date": "entryDate",
    "sailed_out_date": "sailedOutDate",
    "arrival_date_time": "arrivalDateTime",
    "pob_date_time": "pobDateTime",
    "berthing_date_time": "berthingDateTime",
    "pob_departure_date_time": "pobDepartureDateTime",
    "next_port_of_call": "nextPortOfCall",
    "draft_available": "draftAvailable",
    "arrival_draft": "arrivalDraft",
    "departure_draft": "departureDraft",
    "operation_type": "operationType",
    "voyage_type": "voyageType",
    "arrival_from": "arrivalFrom",
    "cargo_quantity": "cargoQuantity",
    "total_revenue": "totalRevenue",
    "created_at": "createdAt",
}


def _field(row: dict, name: str) -> Any:
    value = row.get(name)
    if value is None and name in _CAMEL_KEYS:
        value = row.get(_CAMEL_KEYS[name])
    return value


def _draft(value: Any) -> Optional[DraftReading]:
    if not isinstance(value, dict):
        return None
    return DraftReading(forward=coerce_number(value.get("forward")), aft=coerce_number(value.get("aft")))


def _cargo(value: Any) -> Optional[CargoDescriptor]:
    if not isinstance(value, dict):
        return None
    return CargoDescriptor(
        type=clean_text(value.get("type")),
        name=clean_text(value.get("name")),
        volume=coerce_number(value.get("volume")),
        units=clean_text(value.get("units")),
        quantity=clean_text(value.get("quantity")),
    )


def row_to_vessel(row: dict, port_name: Optional[str] = None) -> VesselRecord:
    grt = _field(row, "grt")
    grt_number = coerce_number(grt)
    return VesselRecord(
        id=str(row["id"]),
        port_id=clean_text(_field(row, "port_id")),
        port_name=port_name or clean_text(_field(row, "port_name")),
        vessel_name=clean_text(_field(row, "vessel_name")),
        imo=clean_text(_field(row, "imo")),
        grt=grt_number if grt_number is not None else clean_text(grt),
        vessel_owner=clean_text(_field(row, "vessel_owner")),
        vessel_agent=clean_text(_field(row, "vessel_agent")),
        entry_date=parse_timestamp(_field(row, "entry_date")),
        sailed_out_date=parse_timestamp(_field(row, "sailed_out_date")),
        arrival_date_time=parse_timestamp(_field(row, "arrival_date_time")),
        pob_date_time=parse_timestamp(_field(row, "pob_date_time")),
        berthing_date_time=parse_timestamp(_field(row, "berthing_date_time")),
        pob_departure_date_time=parse_timestamp(_field(row, "pob_departure_date_time")),
        next_port_of_call=clean_text(_field(row, "next_port_of_call")),
        loa=coerce_number(_field(row, "loa")),
        beam=coerce_number(_field(row, "beam")),
        dwt=coerce_number(_field(row, "dwt")),
        length=coerce_number(_field(row, "length")),
        draft_available=coerce_number(_field(row, "draft_available")),
        arrival_draft=_draft(_field(row, "arrival_draft")),
        departure_draft=_draft(_field(row, "departure_draft")),
        operation_type=clean_text(_field(row, "operation_type")),
        voyage_type=clean_text(_field(row, "voyage_type")),
        operation=clean_text(_field(row, "operation")),
        arrival_from=clean_text(_field(row, "arrival_from")),
        location=clean_text(_field(row, "location")),
        cargo=_cargo(_field(row, "cargo")),
        cargo_quantity=clean_text(_field(row, "cargo_quantity")),
        total_revenue=coerce_number(_field(row, "total_revenue")),
        created_at=parse_timestamp(_field(row, "created_at")),
        raw=row,
    )


def _rows_to_vessels(rows: list[dict], port_names: dict[str, str]) -> list[VesselRecord]:
    vessels: list[VesselRecord] = []
    for row in rows:
        try:
            port_id = _field(row, "port_id")
            vessels.append(row_to_vessel(row, port_names.get(str(port_id)) if port_id else None))
        except (KeyError, TypeError, ValueError) as e:
            logging.warning(f"Skipping invalid vessel row: {e}")
    return vessels


def list_vessels(port_id: Optional[str] = None) -> list[VesselRecord]:
    """Fetch vessel calls, newest first, with port names joined in."""
    supabase = require_supabase_client()
    query = supabase.table(settings.vessels_table).select("*")
    if port_id:
        query = query.eq("port_id", port_id)
    response = query.order("created_at", desc=True).execute()
    rows = response.data or []
    port_names = port_names_for(str(_field(row, "port_id")) for row in rows if _field(row, "port_id"))
    vessels = _rows_to_vessels(rows, port_names)
    logging.info(f"Loaded {len(vessels)} vessels" + (f" for port '{port_id}'" if port_id else ""))
    return vessels


def get_vessel(vessel_id: str) -> Optional[VesselRecord]:
    supabase = require_supabase_client()
    response = supabase.table(settings.vessels_table).select("*").eq("id", vessel_id).limit(1).execute()
    if not response.data:
        return None
    row = response.data[0]
    port_id = _field(row, "port_id")
    port_names = port_names_for([str(port_id)]) if port_id else {}
    return row_to_vessel(row, port_names.get(str(port_id)))


def sanitize_vessel_payload(payload: dict) -> dict:
    """Validate required fields and coerce numbers and timestamps for storage."""
    for name in REQUIRED_VESSEL_FIELDS:
        if not payload.get(name):
            raise ValueError(f"Missing required field: {name}")

    data = {key: value for key, value in payload.items() if key != "id"}
    for name in _TIMESTAMP_FIELDS:
        moment = parse_timestamp(data.get(name))
        data[name] = moment.isoformat() if moment else None

    for name in ("length", "draft_available", "loa", "dwt"):
        data[name] = coerce_number(data.get(name))
    data["beam"] = coerce_number(data.get("beam")) if data.get("beam") else None

    for name in ("arrival_draft", "departure_draft"):
        draft = data.get(name)
        data[name] = (
            {"forward": coerce_number(draft.get("forward")), "aft": coerce_number(draft.get("aft"))}
            if isinstance(draft, dict)
            else None
        )

    cargo = dict(data["cargo"])
    cargo["volume"] = coerce_number(cargo.get("volume"))
    data["cargo"] = cargo

    data["total_revenue"] = coerce_number(data.get("total_revenue")) if data.get("total_revenue") else None
    data.pop("port_name", None)
    return data


def add_vessel(payload: dict) -> str:
    """Insert a vessel call and return its new id."""
    data = sanitize_vessel_payload(payload)
    data["created_at"] = datetime.now(timezone.utc).isoformat()
    supabase = require_supabase_client()
    response = supabase.table(settings.vessels_table).insert(data).execute()
    if not response.data:
        raise RuntimeError("Vessel insert returned no row")
    vessel_id = str(response.data[0]["id"])
    logging.info(f"Added vessel '{data.get('vessel_name')}' ({vessel_id}) to port '{data.get('port_id')}'")
    return vessel_id
