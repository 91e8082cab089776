"""Cargo type catalogue backed by Supabase."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from ..config import settings
from ..db.supabase import require_supabase_client
from ..models.coercion import clean_text, parse_timestamp
from ..models.domain import CargoType


def row_to_cargo_type(row: dict) -> CargoType:
    return CargoType(
        id=str(row["id"]),
        name=clean_text(row.get("name")) or "",
        description=clean_text(row.get("description")) or "",
        created_at=parse_timestamp(row.get("created_at") or row.get("createdAt")),
    )


def _clean_name(name: Optional[str]) -> str:
    cleaned = clean_text(name)
    if not cleaned:
        raise ValueError("Missing required field: name")
    return cleaned


def list_cargo_types() -> list[CargoType]:
    """Catalogue entries ordered by name."""
    supabase = require_supabase_client()
    response = supabase.table(settings.cargo_types_table).select("*").order("name").execute()
    cargo_types: list[CargoType] = []
    for row in response.data or []:
        try:
            cargo_types.append(row_to_cargo_type(row))
        except KeyError as e:
            logging.warning(f"Skipping cargo type row without {e}")
    return cargo_types


def add_cargo_type(name: str, description: str = "") -> str:
    data = {
        "name": _clean_name(name),
        "description": clean_text(description) or "",
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    supabase = require_supabase_client()
    response = supabase.table(settings.cargo_types_table).insert(data).execute()
    if not response.data:
        raise RuntimeError("Cargo type insert returned no row")
    cargo_type_id = str(response.data[0]["id"])
    logging.info(f"Added cargo type '{data['name']}' ({cargo_type_id})")
    return cargo_type_id


def update_cargo_type(cargo_type_id: str, name: str, description: str = "") -> bool:
    """Rename or re-describe a cargo type; returns False when the id is unknown."""
    data = {
        "name": _clean_name(name),
        "description": clean_text(description) or "",
        "updated_at": datetime.now(timezone.utc).isoformat(),
    }
    supabase = require_supabase_client()
    response = supabase.table(settings.cargo_types_table).update(data).eq("id", cargo_type_id).execute()
    return bool(response.data)


def delete_cargo_type(cargo_type_id: str) -> bool:
    supabase = require_supabase_client()
    response = supabase.table(settings.cargo_types_table).delete().eq("id", cargo_type_id).execute()
    deleted = bool(response.data)
    if deleted:
        logging.info(f"Deleted cargo type {cargo_type_id}")
    return deleted
