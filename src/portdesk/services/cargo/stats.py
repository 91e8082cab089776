"""Cargo handled aggregates over vessel snapshots."""

from __future__ import annotations

import re
from collections import Counter
from typing import Optional, Sequence

from ...models.domain import VesselRecord

_LEADING_INTEGER = re.compile(r"^\s*([+-]?\d+)")


def parse_cargo_quantity(value: Optional[str]) -> int:
    """Leading integer of a quantity string such as ``"1200 MT"``; 0 when absent."""
    if not isinstance(value, str):
        return 0
    match = _LEADING_INTEGER.match(value)
    return int(match.group(1)) if match else 0


def compute_cargo_stats(vessels: Sequence[VesselRecord]) -> dict:
    by_type: Counter[str] = Counter()
    by_port: Counter[str] = Counter()
    total = 0

    for vessel in vessels:
        quantity = parse_cargo_quantity(vessel.cargo.quantity if vessel.cargo else None)
        total += quantity

        cargo_type = (vessel.cargo.type if vessel.cargo else None) or "Unknown"
        by_type[cargo_type] += quantity

        if vessel.port_name:
            by_port[vessel.port_name] += quantity

    vessel_count = len(vessels)
    average = total / vessel_count if vessel_count else 0.0

    return {
        "totalCargo": total,
        "vesselCount": vessel_count,
        "averageCargoPerVessel": round(average, 2),
        "cargoByType": _ranked(by_type),
        "cargoByPort": _ranked(by_port),
    }


def _ranked(counts: Counter[str]) -> list[dict]:
    ranked = sorted(counts.items(), key=lambda item: (-item[1], item[0].lower()))
    return [{"name": name, "quantity": quantity} for name, quantity in ranked]
