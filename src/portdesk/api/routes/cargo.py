"""Cargo handled statistics and the cargo type catalogue."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Path, status
from fastapi.responses import Response

from ...data.cargo_types_repository import add_cargo_type, delete_cargo_type, list_cargo_types, update_cargo_type
from ...data.vessels_repository import list_vessels
from ...db.supabase import DataSourceUnavailable
from ...schemas.cargo import CargoStatsResponse, CargoTypeCreatedResponse, CargoTypeModel, CargoTypeWriteRequest
from ...services.cargo import compute_cargo_stats
from ...services.filters import FilterCriteria, filter_records
from ..dependencies import filter_criteria, unavailable

router = APIRouter(prefix="/cargo", tags=["cargo"])


@router.get("/stats", response_model=CargoStatsResponse, status_code=status.HTTP_200_OK)
def get_cargo_stats(criteria: FilterCriteria = Depends(filter_criteria)) -> CargoStatsResponse:
    try:
        vessels = list_vessels()
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    return CargoStatsResponse(**compute_cargo_stats(filter_records(vessels, criteria)))


@router.get("/types", response_model=list[CargoTypeModel], status_code=status.HTTP_200_OK)
def get_cargo_types() -> list[CargoTypeModel]:
    try:
        cargo_types = list_cargo_types()
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    return [
        CargoTypeModel(id=item.id, name=item.name, description=item.description, created_at=item.created_at)
        for item in cargo_types
    ]


@router.post("/types", response_model=CargoTypeCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_cargo_type(payload: CargoTypeWriteRequest) -> CargoTypeCreatedResponse:
    try:
        cargo_type_id = add_cargo_type(payload.name, payload.description)
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return CargoTypeCreatedResponse(id=cargo_type_id)


@router.put("/types/{cargo_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_cargo_type(
    payload: CargoTypeWriteRequest,
    cargo_type_id: str = Path(..., description="Cargo type id"),
) -> Response:
    try:
        updated = update_cargo_type(cargo_type_id, payload.name, payload.description)
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Cargo type '{cargo_type_id}' not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/types/{cargo_type_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_cargo_type(cargo_type_id: str = Path(..., description="Cargo type id")) -> Response:
    try:
        deleted = delete_cargo_type(cargo_type_id)
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Cargo type '{cargo_type_id}' not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
