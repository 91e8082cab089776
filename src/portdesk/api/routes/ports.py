"""Port endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Path, status
from fastapi.responses import Response

from ...data.ports_repository import list_ports, update_port
from ...db.supabase import DataSourceUnavailable
from ...schemas.ports import PortModel, PortUpdateRequest
from ..dependencies import unavailable

router = APIRouter(prefix="/ports", tags=["ports"])


@router.get("", response_model=list[PortModel], status_code=status.HTTP_200_OK)
def get_ports() -> list[PortModel]:
    try:
        ports = list_ports()
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    return [PortModel(id=port.id, port_name=port.port_name, email=port.email, status=port.status) for port in ports]


@router.patch("/{port_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_port(
    payload: PortUpdateRequest,
    port_id: str = Path(..., description="Port id"),
) -> Response:
    try:
        updated = update_port(port_id, payload.model_dump(exclude_unset=True))
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Port '{port_id}' not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
