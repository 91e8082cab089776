"""Weekly performance report endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Body, Depends, HTTPException, Path, Query, status
from fastapi.responses import Response

from ...config import settings
from ...data.reports_repository import add_weekly_report, list_weekly_reports, update_weekly_report
from ...db.supabase import DataSourceUnavailable
from ...models.domain import PerformanceReport, WeeklySummaryLine
from ...schemas.reports import (
  WeeklyReportCreatedResponse,
  WeeklyReportCreateRequest,
  WeeklyReportExportRequest,
  WeeklyReportModel,
  WeeklyReportWriteModel,
)
from ...services.export import XLSX_MEDIA_TYPE, export_weekly_report, weekly_summary_from_reports
from ...services.filters import FilterCriteria, filter_records
from ..dependencies import attachment_headers, filter_criteria, unavailable

router = APIRouter(prefix="/reports", tags=["reports"])


def _load_reports(criteria: FilterCriteria) -> list[PerformanceReport]:
  try:
    reports = list_weekly_reports()
  except DataSourceUnavailable as exc:
    raise unavailable(exc) from exc
  return filter_records(reports, criteria)


def _workbook_response(
  summary: list[WeeklySummaryLine] | None,
  reports: list[PerformanceReport],
  file_name: str | None,
) -> Response:
  lines = summary if summary is not None else weekly_summary_from_reports(reports)
  payload = export_weekly_report(lines, reports, sheet_title=settings.export_sheet_title)
  name = (file_name or "").strip() or settings.export_default_workbook_name
  if not name.lower().endswith(".xlsx"):
    name = f"{name}.xlsx"
  return Response(content=payload, media_type=XLSX_MEDIA_TYPE, headers=attachment_headers(name))


@router.get("/weekly", response_model=list[WeeklyReportModel])
def get_weekly_reports(criteria: FilterCriteria = Depends(filter_criteria)) -> list[WeeklyReportModel]:
  return [WeeklyReportModel.from_record(report) for report in _load_reports(criteria)]


@router.post("/weekly", response_model=WeeklyReportCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_weekly_report(payload: WeeklyReportCreateRequest) -> WeeklyReportCreatedResponse:
  data = payload.model_dump(exclude={"port_id"}, exclude_none=True)
  try:
    report_id = add_weekly_report(data, payload.port_id)
  except DataSourceUnavailable as exc:
    raise unavailable(exc) from exc
  return WeeklyReportCreatedResponse(id=report_id)


@router.put("/weekly/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
def edit_weekly_report(
  payload: WeeklyReportWriteModel,
  report_id: str = Path(..., description="Weekly report id"),
) -> Response:
  try:
    updated = update_weekly_report(report_id, payload.model_dump(exclude_unset=True))
  except DataSourceUnavailable as exc:
    raise unavailable(exc) from exc
  if not updated:
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Weekly report '{report_id}' not found")
  return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/weekly/export", response_class=Response, status_code=status.HTTP_200_OK)
def download_weekly_report(
  criteria: FilterCriteria = Depends(filter_criteria),
  file_name: str | None = Query(default=None, description="Download name; defaults to weekly_report.xlsx"),
) -> Response:
  return _workbook_response(None, _load_reports(criteria), file_name)


@router.post("/weekly/export", response_class=Response, status_code=status.HTTP_200_OK)
def export_weekly_report_with_summary(request: WeeklyReportExportRequest = Body(...)) -> Response:
  try:
    criteria = FilterCriteria.from_params(
      search=request.search,
      category=request.category,
      port_ids=request.port_ids,
      from_date=request.from_date,
      to_date=request.to_date,
    )
  except ValueError as exc:
    raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)) from exc
  summary = [line.to_line() for line in request.summary] if request.summary is not None else None
  return _workbook_response(summary, _load_reports(criteria), request.file_name)
