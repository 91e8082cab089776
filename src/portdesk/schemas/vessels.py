"""Vessel API schemas."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import Literal, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import VesselRecord

Number = Union[int, float]


class DraftModel(BaseModel):
  forward: Optional[Number] = None
  aft: Optional[Number] = None


class CargoModel(BaseModel):
  type: Optional[str] = None
  name: Optional[str] = None
  volume: Optional[Number] = None
  units: Optional[str] = None
  quantity: Optional[str] = None


class VesselModel(BaseModel):
  id: str
  port_id: Optional[str] = Field(None, alias='portId')
  port_name: Optional[str] = Field(None, alias='portName')
  vessel_name: Optional[str] = Field(None, alias='vesselName')
  imo: Optional[str] = None
  grt: Optional[Union[Number, str]] = None
  vessel_owner: Optional[str] = Field(None, alias='vesselOwner')
  vessel_agent: Optional[str] = Field(None, alias='vesselAgent')
  entry_date: Optional[datetime] = Field(None, alias='entryDate')
  sailed_out_date: Optional[datetime] = Field(None, alias='sailedOutDate')
  arrival_date_time: Optional[datetime] = Field(None, alias='arrivalDateTime')
  pob_date_time: Optional[datetime] = Field(None, alias='pobDateTime')
  berthing_date_time: Optional[datetime] = Field(None, alias='berthingDateTime')
  pob_departure_date_time: Optional[datetime] = Field(None, alias='pobDepartureDateTime')
  next_port_of_call: Optional[str] = Field(None, alias='nextPortOfCall')
  loa: Optional[Number] = None
  beam: Optional[Number] = None
  dwt: Optional[Number] = None
  length: Optional[Number] = None
  draft_available: Optional[Number] = Field(None, alias='draftAvailable')
  arrival_draft: Optional[DraftModel] = Field(None, alias='arrivalDraft')
  departure_draft: Optional[DraftModel] = Field(None, alias='departureDraft')
  operation_type: Optional[str] = Field(None, alias='operationType')
  voyage_type: Optional[str] = Field(None, alias='voyageType')
  operation: Optional[str] = None
  arrival_from: Optional[str] = Field(None, alias='arrivalFrom')
  location: Optional[str] = None
  cargo: Optional[CargoModel] = None
  cargo_quantity: Optional[str] = Field(None, alias='cargoQuantity')
  total_revenue: Optional[Number] = Field(None, alias='totalRevenue')
  status: str

  class Config:
    populate_by_name = True

  @classmethod
  def from_record(cls, vessel: VesselRecord) -> "VesselModel":
    data = asdict(vessel)
    data.pop('raw', None)
    data['status'] = vessel.status
    return cls.model_validate(data)


class VesselCreateRequest(BaseModel):
  port_id: str = Field(..., alias='portId')
  vessel_name: str = Field(..., alias='vesselName')
  imo: str
  grt: Union[Number, str]
  vessel_owner: Optional[str] = Field(None, alias='vesselOwner')
  vessel_agent: Optional[str] = Field(None, alias='vesselAgent')
  entry_date: Optional[datetime] = Field(None, alias='entryDate')
  sailed_out_date: Optional[datetime] = Field(None, alias='sailedOutDate')
  arrival_date_time: Optional[datetime] = Field(None, alias='arrivalDateTime')
  pob_date_time: Optional[datetime] = Field(None, alias='pobDateTime')
  berthing_date_time: Optional[datetime] = Field(None, alias='berthingDateTime')
  pob_departure_date_time: Optional[datetime] = Field(None, alias='pobDepartureDateTime')
  next_port_of_call: Optional[str] = Field(None, alias='nextPortOfCall')
  loa: Union[Number, str]
  beam: Optional[Union[Number, str]] = None
  dwt: Union[Number, str]
  length: Optional[Union[Number, str]] = None
  draft_available: Optional[Union[Number, str]] = Field(None, alias='draftAvailable')
  arrival_draft: Optional[DraftModel] = Field(None, alias='arrivalDraft')
  departure_draft: Optional[DraftModel] = Field(None, alias='departureDraft')
  operation_type: Literal['Import', 'Export', 'Coastal'] = Field(..., alias='operationType')
  voyage_type: Literal['Coastal', 'Foreign'] = Field(..., alias='voyageType')
  operation: str
  arrival_from: str = Field(..., alias='arrivalFrom')
  location: str
  cargo: CargoModel
  cargo_quantity: Optional[str] = Field(None, alias='cargoQuantity')
  total_revenue: Optional[Union[Number, str]] = Field(None, alias='totalRevenue')

  class Config:
    populate_by_name = True


class VesselCreatedResponse(BaseModel):
  id: str
