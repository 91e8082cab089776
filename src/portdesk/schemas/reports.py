"""Weekly performance report API schemas."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, Field

from ..models.domain import PerformanceReport, WeeklySummaryLine

Number = Union[int, float]


class DailyEntryModel(BaseModel):
  date: Optional[str] = None
  cargo_type: Optional[str] = Field(None, alias='cargoType')
  type_of_cargo: Optional[str] = Field(None, alias='typeOfCargo')
  total_quantity: Optional[Union[Number, str]] = Field(None, alias='totalQuantity')
  demurrages: Optional[Union[Number, str]] = None
  reason: Optional[str] = None

  class Config:
    populate_by_name = True


class WeeklyReportModel(BaseModel):
  id: str
  port_id: Optional[str] = Field(None, alias='portId')
  port_name: Optional[str] = Field(None, alias='portName')
  vessel_name: Optional[str] = Field(None, alias='vesselName')
  agent_name: Optional[str] = Field(None, alias='agentName')
  owner_details: Optional[str] = Field(None, alias='ownerDetails')
  purpose_of_arrival: Optional[str] = Field(None, alias='purposeOfArrival')
  status: Optional[str] = None
  cargo_type: Optional[str] = Field(None, alias='cargoType')
  type_of_cargo: Optional[str] = Field(None, alias='typeOfCargo')
  total_quantity: Optional[Number] = Field(None, alias='totalQuantity')
  demurrages_collected: Optional[Number] = Field(None, alias='demurragesCollected')
  dwt: Optional[Union[Number, str]] = None
  loa: Optional[Union[Number, str]] = None
  berthed_date: Optional[str] = Field(None, alias='berthedDate')
  departure_date: Optional[str] = Field(None, alias='departureDate')
  clearance_issued: Optional[str] = Field(None, alias='clearanceIssued')
  daily_data: List[DailyEntryModel] = Field(default_factory=list, alias='dailyData')
  created_at: Optional[datetime] = Field(None, alias='createdAt')
  cleared: bool = False

  class Config:
    populate_by_name = True

  @classmethod
  def from_record(cls, report: PerformanceReport) -> "WeeklyReportModel":
    data = asdict(report)
    data.pop('raw', None)
    data['cleared'] = report.is_cleared
    return cls.model_validate(data)


class WeeklyReportWriteModel(BaseModel):
  vessel_name: Optional[str] = Field(None, alias='vesselName')
  owner_details: Optional[str] = Field(None, alias='ownerDetails')
  loa: Optional[Union[Number, str]] = None
  agent_name: Optional[str] = Field(None, alias='agentName')
  purpose_of_arrival: Optional[str] = Field(None, alias='purposeOfArrival')
  berthed_date: Optional[str] = Field(None, alias='berthedDate')
  dwt: Optional[Union[Number, str]] = None
  cargo_type: Optional[str] = Field(None, alias='cargoType')
  type_of_cargo: Optional[str] = Field(None, alias='typeOfCargo')
  total_quantity: Optional[Union[Number, str]] = Field(None, alias='totalQuantity')
  demurrages_collected: Optional[Union[Number, str]] = Field(None, alias='demurragesCollected')
  status: Optional[str] = None
  clearance_issued: Optional[str] = Field(None, alias='clearanceIssued')
  departure_date: Optional[str] = Field(None, alias='departureDate')
  daily_data: Optional[List[DailyEntryModel]] = Field(None, alias='dailyData')

  class Config:
    populate_by_name = True


class WeeklyReportCreateRequest(WeeklyReportWriteModel):
  port_id: str = Field(..., alias='portId')


class WeeklyReportCreatedResponse(BaseModel):
  id: str


class WeeklySummaryLineModel(BaseModel):
  description: str
  total: Union[Number, str]
  remarks: Optional[str] = None

  def to_line(self) -> WeeklySummaryLine:
    return WeeklySummaryLine(self.description, self.total, self.remarks)


class WeeklyReportExportRequest(BaseModel):
  summary: Optional[List[WeeklySummaryLineModel]] = None
  file_name: Optional[str] = Field(None, alias='fileName')
  search: Optional[str] = None
  category: Optional[str] = None
  port_ids: List[str] = Field(default_factory=list, alias='portIds')
  from_date: Optional[str] = Field(None, alias='fromDate')
  to_date: Optional[str] = Field(None, alias='toDate')

  class Config:
    populate_by_name = True
