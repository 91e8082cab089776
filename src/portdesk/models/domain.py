"""Domain models for port, vessel-call and performance-report records."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .coercion import parse_timestamp

Number = int | float


@dataclass(frozen=True, slots=True)
class Port:
    id: str
    port_name: str
    email: Optional[str] = None
    status: Optional[str] = None


@dataclass(frozen=True, slots=True)
class CargoType:
    """Catalogue entry offered when registering a vessel's cargo."""

    id: str
    name: str
    description: str = ""
    created_at: Optional[datetime] = None


@dataclass(frozen=True, slots=True)
class DraftReading:
    forward: Optional[Number] = None
    aft: Optional[Number] = None


@dataclass(frozen=True, slots=True)
class CargoDescriptor:
    type: Optional[str] = None
    name: Optional[str] = None
    volume: Optional[Number] = None
    units: Optional[str] = None
    quantity: Optional[str] = None


@dataclass(frozen=True, slots=True)
class VesselRecord:
    """A single vessel call as stored for a port."""

    id: str
    port_id: Optional[str] = None
    port_name: Optional[str] = None
    vessel_name: Optional[str] = None
    imo: Optional[str] = None
    grt: Optional[Number | str] = None
    vessel_owner: Optional[str] = None
    vessel_agent: Optional[str] = None
    entry_date: Optional[datetime] = None
    sailed_out_date: Optional[datetime] = None
    arrival_date_time: Optional[datetime] = None
    pob_date_time: Optional[datetime] = None
    berthing_date_time: Optional[datetime] = None
    pob_departure_date_time: Optional[datetime] = None
    next_port_of_call: Optional[str] = None
    loa: Optional[Number] = None
    beam: Optional[Number] = None
    dwt: Optional[Number] = None
    length: Optional[Number] = None
    draft_available: Optional[Number] = None
    arrival_draft: Optional[DraftReading] = None
    departure_draft: Optional[DraftReading] = None
    operation_type: Optional[str] = None
    voyage_type: Optional[str] = None
    operation: Optional[str] = None
    arrival_from: Optional[str] = None
    location: Optional[str] = None
    cargo: Optional[CargoDescriptor] = None
    cargo_quantity: Optional[str] = None
    total_revenue: Optional[Number] = None
    created_at: Optional[datetime] = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def status(self) -> str:
        return "Sailed" if self.sailed_out_date else "Active"

    @property
    def category(self) -> Optional[str]:
        return self.operation_type

    @property
    def timestamp(self) -> Optional[datetime]:
        return self.arrival_date_time

    def search_fields(self) -> tuple[Optional[str], ...]:
        cargo_type = self.cargo.type if self.cargo else None
        return (self.vessel_name, self.imo, self.arrival_from, cargo_type, self.port_name)


@dataclass(frozen=True, slots=True)
class DailyEntry:
    """One day's cargo activity nested under a performance report."""

    date: Optional[str] = None
    cargo_type: Optional[str] = None
    type_of_cargo: Optional[str] = None
    total_quantity: Optional[Number] = None
    demurrages: Optional[Number] = None
    reason: Optional[str] = None

    def is_blank(self) -> bool:
        return not any(
            (self.date, self.cargo_type, self.type_of_cargo, self.total_quantity, self.demurrages, self.reason)
        )


@dataclass(frozen=True, slots=True)
class PerformanceReport:
    """Weekly performance report for one vessel call."""

    id: str
    port_id: Optional[str] = None
    port_name: Optional[str] = None
    vessel_name: Optional[str] = None
    agent_name: Optional[str] = None
    owner_details: Optional[str] = None
    purpose_of_arrival: Optional[str] = None
    status: Optional[str] = None
    cargo_type: Optional[str] = None
    type_of_cargo: Optional[str] = None
    total_quantity: Optional[Number] = None
    demurrages_collected: Optional[Number] = None
    dwt: Optional[Number | str] = None
    loa: Optional[Number | str] = None
    berthed_date: Optional[str] = None
    departure_date: Optional[str] = None
    clearance_issued: Optional[str] = None
    daily_data: tuple[DailyEntry, ...] = ()
    created_at: Optional[datetime] = None
    raw: dict = field(default_factory=dict, compare=False, repr=False)

    @property
    def is_cleared(self) -> bool:
        return bool(self.clearance_issued)

    @property
    def category(self) -> Optional[str]:
        return self.purpose_of_arrival

    @property
    def timestamp(self) -> Optional[datetime]:
        return parse_timestamp(self.berthed_date)

    def search_fields(self) -> tuple[Optional[str], ...]:
        return (
            self.vessel_name,
            self.agent_name,
            self.owner_details,
            self.cargo_type,
            self.type_of_cargo,
            self.port_name,
        )


@dataclass(frozen=True, slots=True)
class WeeklySummaryLine:
    description: str
    total: Number | str
    remarks: Optional[str] = None
