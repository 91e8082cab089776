"""Vessel-call endpoints: filtered listing, CSV export and registration."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from fastapi.responses import Response

from ...data.vessels_repository import add_vessel, get_vessel, list_vessels
from ...db.supabase import DataSourceUnavailable
from ...schemas.vessels import VesselCreatedResponse, VesselCreateRequest, VesselModel
from ...services.export import CSV_MEDIA_TYPE, csv_export_filename, vessels_to_csv
from ...services.filters import FilterCriteria, filter_records
from ..dependencies import attachment_headers, filter_criteria, unavailable

router = APIRouter(prefix="/vessels", tags=["vessels"])


def _load_vessels(criteria: FilterCriteria):
    # A single selected port is narrowed in the query; the filter still applies the full set.
    port_id = next(iter(criteria.port_ids)) if len(criteria.port_ids) == 1 else None
    try:
        vessels = list_vessels(port_id)
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    return filter_records(vessels, criteria)


@router.get("", response_model=list[VesselModel], status_code=status.HTTP_200_OK)
def get_vessels(criteria: FilterCriteria = Depends(filter_criteria)) -> list[VesselModel]:
    return [VesselModel.from_record(vessel) for vessel in _load_vessels(criteria)]


@router.get("/export", response_class=Response, status_code=status.HTTP_200_OK)
def export_vessels(
    criteria: FilterCriteria = Depends(filter_criteria),
    prefix: str | None = Query(default=None, description="Optional file name prefix, e.g. a port name"),
) -> Response:
    vessels = _load_vessels(criteria)
    content = vessels_to_csv(vessels)
    file_name = csv_export_filename(prefix)
    logging.info(f"Exporting {len(vessels)} vessels to {file_name}")
    return Response(
        content=content.encode("utf-8"),
        media_type=f"{CSV_MEDIA_TYPE}; charset=utf-8",
        headers=attachment_headers(file_name),
    )


@router.get("/{vessel_id}", response_model=VesselModel, status_code=status.HTTP_200_OK)
def get_vessel_details(vessel_id: str = Path(..., description="Vessel record id")) -> VesselModel:
    try:
        vessel = get_vessel(vessel_id)
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    if vessel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Vessel '{vessel_id}' not found")
    return VesselModel.from_record(vessel)


@router.post("", response_model=VesselCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_vessel(payload: VesselCreateRequest) -> VesselCreatedResponse:
    try:
        vessel_id = add_vessel(payload.model_dump())
    except DataSourceUnavailable as exc:
        raise unavailable(exc) from exc
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return VesselCreatedResponse(id=vessel_id)
