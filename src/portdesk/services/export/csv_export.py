"""Delimited-text export of vessel listings."""

from __future__ import annotations

import csv
import io
from datetime import date
from typing import Any, Optional, Sequence

from ...models.domain import VesselRecord
from .formatting import format_datetime

CSV_MEDIA_TYPE = "text/csv"

VESSEL_CSV_COLUMNS: tuple[str, ...] = (
    # General information
    "Vessel Name",
    "IMO Number",
    "GRT",
    "Port Name",
    "Vessel Owner",
    "Vessel Agent",
    "Entry Date",
    "Sailed Out Date",
    # Dates and times
    "Arrival Date & Time",
    "Pilot On Board Date & Time",
    "Berthing Date & Time",
    "Pilot Off Board Date & Time",
    "Next Port of Call",
    # Static data
    "Length Over All (LOA)",
    "Beam",
    "Dead Weight Tonnage (DWT)",
    "Length",
    "Draft Available",
    # Drafts
    "Arrival Draft Forward",
    "Arrival Draft Aft",
    "Departure Draft Forward",
    "Departure Draft Aft",
    # Operation
    "Operation Type",
    "Voyage Type",
    "Operation",
    "Arrival From",
    "Location",
    # Cargo
    "Cargo Type",
    "Cargo Name",
    "Cargo Volume",
    "Volume Units",
    "Cargo Quantity",
    "Total Revenue",
    "Status",
)


def vessel_csv_row(vessel: VesselRecord) -> list[Any]:
    """Column values for one vessel, aligned with ``VESSEL_CSV_COLUMNS``."""
    arrival_draft = vessel.arrival_draft
    departure_draft = vessel.departure_draft
    cargo = vessel.cargo
    return [
        vessel.vessel_name,
        vessel.imo,
        vessel.grt,
        vessel.port_name,
        vessel.vessel_owner,
        vessel.vessel_agent,
        format_datetime(vessel.entry_date),
        format_datetime(vessel.sailed_out_date),
        format_datetime(vessel.arrival_date_time),
        format_datetime(vessel.pob_date_time),
        format_datetime(vessel.berthing_date_time),
        format_datetime(vessel.pob_departure_date_time),
        vessel.next_port_of_call,
        vessel.loa,
        vessel.beam,
        vessel.dwt,
        vessel.length,
        vessel.draft_available,
        arrival_draft.forward if arrival_draft else None,
        arrival_draft.aft if arrival_draft else None,
        departure_draft.forward if departure_draft else None,
        departure_draft.aft if departure_draft else None,
        vessel.operation_type,
        vessel.voyage_type,
        vessel.operation,
        vessel.arrival_from,
        vessel.location,
        cargo.type if cargo else None,
        cargo.name if cargo else None,
        cargo.volume if cargo else None,
        cargo.units if cargo else None,
        vessel.cargo_quantity,
        vessel.total_revenue or None,
        vessel.status,
    ]


def vessels_to_csv(vessels: Sequence[VesselRecord]) -> str:
    """Serialize vessels to CSV text: header line, then one line per vessel.

    Text is quoted with embedded quotes doubled, numbers are written bare and
    missing values are left empty so columns stay aligned.
    """
    buffer = io.StringIO()
    buffer.write(",".join(VESSEL_CSV_COLUMNS) + "\n")
    writer = csv.writer(buffer, quoting=csv.QUOTE_STRINGS, lineterminator="\n")
    for vessel in vessels:
        writer.writerow(vessel_csv_row(vessel))
    return buffer.getvalue().rstrip("\n")


def csv_export_filename(prefix: Optional[str] = None, today: Optional[date] = None) -> str:
    stamp = (today or date.today()).isoformat()
    prefix = (prefix or "").strip()
    return f"{prefix}_records_{stamp}.csv" if prefix else f"records_{stamp}.csv"

