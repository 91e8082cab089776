"""Port lookups backed by Supabase."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable, Optional

from ..config import settings
from ..db.supabase import require_supabase_client
from ..models.coercion import clean_text
from ..models.domain import Port

_UPDATABLE_PORT_FIELDS = ("port_name", "email", "status")


def row_to_port(row: dict) -> Port:
    return Port(
        id=str(row["id"]),
        port_name=clean_text(row.get("port_name") or row.get("portName")) or "",
        email=clean_text(row.get("email")),
        status=clean_text(row.get("status")),
    )


def list_ports() -> list[Port]:
    supabase = require_supabase_client()
    response = supabase.table(settings.ports_table).select("*").execute()
    ports: list[Port] = []
    for row in response.data or []:
        try:
            ports.append(row_to_port(row))
        except KeyError as e:
            logging.warning(f"Skipping port row without {e}")
    return ports


def get_port(port_id: str) -> Optional[Port]:
    supabase = require_supabase_client()
    response = supabase.table(settings.ports_table).select("*").eq("id", port_id).limit(1).execute()
    if not response.data:
        return None
    return row_to_port(response.data[0])


def port_names_for(port_ids: Iterable[str]) -> dict[str, str]:
    """Map port id to port name for the given ids; unknown ids are left out."""
    unique_ids = sorted({port_id for port_id in port_ids if port_id})
    if not unique_ids:
        return {}
    supabase = require_supabase_client()
    response = supabase.table(settings.ports_table).select("id, port_name").in_("id", unique_ids).execute()
    return {str(row["id"]): row.get("port_name") or "" for row in response.data or []}


def update_port(port_id: str, payload: dict) -> bool:
    """Patch a port's status, email or name; returns False when the id is unknown."""
    data = {key: value for key, value in payload.items() if key in _UPDATABLE_PORT_FIELDS}
    if not data:
        raise ValueError("No updatable port fields supplied")
    data["updated_at"] = datetime.now(timezone.utc).isoformat()
    supabase = require_supabase_client()
    response = supabase.table(settings.ports_table).update(data).eq("id", port_id).execute()
    if response.data:
        logging.info(f"Updated port {port_id}: {sorted(data)}")
    return bool(response.data)
