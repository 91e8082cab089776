"""Cargo statistics and cargo type catalogue API schemas."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class CargoBucketModel(BaseModel):
  name: str
  quantity: int


class CargoStatsResponse(BaseModel):
  totalCargo: int
  vesselCount: int
  averageCargoPerVessel: float
  cargoByType: List[CargoBucketModel]
  cargoByPort: List[CargoBucketModel]


class CargoTypeModel(BaseModel):
  id: str
  name: str
  description: str = ""
  created_at: Optional[datetime] = Field(None, alias='createdAt')

  class Config:
    populate_by_name = True


class CargoTypeWriteRequest(BaseModel):
  name: str
  description: str = ""


class CargoTypeCreatedResponse(BaseModel):
  id: str
