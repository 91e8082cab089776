"""Port API schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class PortModel(BaseModel):
  id: str
  port_name: str = Field(..., alias='portName')
  email: Optional[str] = None
  status: Optional[str] = None

  class Config:
    populate_by_name = True


class PortUpdateRequest(BaseModel):
  port_name: Optional[str] = Field(None, alias='portName')
  email: Optional[str] = None
  status: Optional[str] = None

  class Config:
    populate_by_name = True
