"""Weekly performance workbook export.

The sheet is assembled in two passes. ``build_weekly_report_rows`` lays the
sheet out as a list of ``SheetRow`` values, each tagged with its role, and
``render_workbook`` writes and styles those rows with openpyxl. Styling only
ever looks at the role tag, so a user value that happens to read like a
column caption is still styled as data.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.page import PageMargins

from ...config import settings
from ...models.domain import DailyEntry, PerformanceReport, WeeklySummaryLine
from .formatting import PLACEHOLDER, format_date, format_number, or_placeholder

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"

SUMMARY_TITLE = "SUMMARY (ABSTRACT)"
CLEARED_SECTION_TITLE = "WEEKLY PERFORMANCE REPORTS - CLEARED VESSELS"
PENDING_SECTION_TITLE = "WEEKLY PERFORMANCE REPORTS - PENDING CLEARANCE"

SUMMARY_COLUMNS: tuple[str, ...] = ("S.no", "Description", "Total Number", "Remarks")

REPORT_COLUMNS: tuple[str, ...] = (
    "Vessel Name",
    "Port",
    "Agent Name",
    "Owner Details",
    "Purpose of Arrival",
    "Status",
    "Cargo Type",
    "Type of Cargo",
    "Total Quantity",
    "DWT",
    "LOA",
    "Berthed Date",
    "Departure Date",
    "Demurrages Collected",
    "Clearance Status",
)

DAILY_COLUMNS: tuple[str, ...] = (
    "Date",
    "Cargo Type",
    "Type of Cargo",
    "Total Quantity",
    "Demurrages",
    "Reason",
)

# Daily columns sit under the tail of the report header.
DAILY_OFFSET = len(REPORT_COLUMNS) - len(DAILY_COLUMNS)

COLUMN_WIDTHS: tuple[int, ...] = (6, 25, 20, 15, 20, 15, 15, 15, 20, 12, 12, 12, 15, 15, 15)


class RowRole(str, Enum):
    TITLE = "title"
    SPACER = "spacer"
    SUMMARY_HEADER = "summary_header"
    SUMMARY = "summary"
    SECTION_TITLE = "section_title"
    HEADER = "header"
    REPORT = "report"
    SUB_HEADER = "sub_header"
    DAILY = "daily"


@dataclass(frozen=True, slots=True)
class SheetRow:
    role: RowRole
    values: tuple[Any, ...] = ()
    offset: int = 0


SPACER = SheetRow(RowRole.SPACER)


def weekly_summary_from_reports(reports: Sequence[PerformanceReport]) -> list[WeeklySummaryLine]:
    """Default abstract lines used when the caller does not supply a summary."""
    cleared = sum(1 for report in reports if report.is_cleared)
    return [
        WeeklySummaryLine("Vessels Reported", len(reports)),
        WeeklySummaryLine("Vessels Cleared", cleared),
        WeeklySummaryLine("Vessels Pending Clearance", len(reports) - cleared),
        WeeklySummaryLine("Total Quantity Handled", _sum(r.total_quantity for r in reports)),
        WeeklySummaryLine("Demurrages Collected", _sum(r.demurrages_collected for r in reports)),
    ]


def build_weekly_report_rows(
    summary: Sequence[WeeklySummaryLine],
    reports: Sequence[PerformanceReport],
) -> list[SheetRow]:
    rows: list[SheetRow] = [
        SheetRow(RowRole.TITLE, (SUMMARY_TITLE,)),
        SPACER,
        SheetRow(RowRole.SUMMARY_HEADER, SUMMARY_COLUMNS),
    ]
    for index, line in enumerate(summary, start=1):
        rows.append(
            SheetRow(
                RowRole.SUMMARY,
                (index, line.description, format_number(line.total), line.remarks or ""),
            )
        )
    rows.extend([SPACER, SPACER])

    cleared = [report for report in reports if report.is_cleared]
    pending = [report for report in reports if not report.is_cleared]

    if cleared:
        rows.extend(_section_rows(CLEARED_SECTION_TITLE, cleared))
        rows.append(SPACER)
    if pending:
        rows.extend(_section_rows(PENDING_SECTION_TITLE, pending))
    return rows


def _section_rows(title: str, reports: Iterable[PerformanceReport]) -> list[SheetRow]:
    rows = [
        SheetRow(RowRole.SECTION_TITLE, (title,)),
        SPACER,
        SheetRow(RowRole.HEADER, REPORT_COLUMNS),
    ]
    for report in reports:
        rows.append(SheetRow(RowRole.REPORT, report_row_values(report)))
        if report.daily_data:
            rows.append(SheetRow(RowRole.SUB_HEADER, DAILY_COLUMNS, DAILY_OFFSET))
            rows.extend(
                SheetRow(RowRole.DAILY, daily_row_values(entry), DAILY_OFFSET)
                for entry in report.daily_data
                if not entry.is_blank()
            )
            rows.append(SPACER)
    return rows


def report_row_values(report: PerformanceReport) -> tuple[Any, ...]:
    return (
        or_placeholder(report.vessel_name),
        or_placeholder(report.port_name),
        or_placeholder(report.agent_name),
        or_placeholder(report.owner_details),
        or_placeholder(report.purpose_of_arrival),
        or_placeholder(report.status),
        or_placeholder(report.cargo_type),
        or_placeholder(report.type_of_cargo),
        _display_number(report.total_quantity),
        or_placeholder(report.dwt),
        or_placeholder(report.loa),
        or_placeholder(format_date(report.berthed_date)),
        or_placeholder(format_date(report.departure_date)),
        _display_number(report.demurrages_collected),
        or_placeholder(format_date(report.clearance_issued)),
    )


def daily_row_values(entry: DailyEntry) -> tuple[str, ...]:
    return (
        str(or_placeholder(format_date(entry.date))),
        str(or_placeholder(entry.cargo_type)),
        str(or_placeholder(entry.type_of_cargo)),
        str(_display_number(entry.total_quantity)),
        str(_display_number(entry.demurrages)),
        str(or_placeholder(entry.reason)),
    )


def _display_number(value: Any) -> Any:
    if value is None or value == "":
        return PLACEHOLDER
    return format_number(value)


def _sum(values: Iterable[Any]) -> int | float:
    return sum(v for v in values if isinstance(v, (int, float)) and not isinstance(v, bool))


_THIN = Side(style="thin", color="E5E7EB")
_CELL_BORDER = Border(top=_THIN, bottom=_THIN, left=_THIN, right=_THIN)
_WRAPPED = Alignment(horizontal="left", vertical="center", wrap_text=True)

_TITLE_FONT = Font(bold=True, size=16, color="047857")
_TITLE_BORDER = Border(bottom=Side(style="medium", color="14B8A6"))
_HEADER_FONT = Font(bold=True, size=11, color="FFFFFF")
_HEADER_FILL = PatternFill(fill_type="solid", fgColor="14B8A6")
_SUB_HEADER_FILL = PatternFill(fill_type="solid", fgColor="E2E8F0")
_SUB_HEADER_FONT = Font(bold=True, size=11, color="1F2937")
_CELL_FONT = Font(size=10)

_ROW_HEIGHTS = {
    RowRole.TITLE: 35,
    RowRole.SECTION_TITLE: 35,
    RowRole.HEADER: 30,
    RowRole.SUMMARY_HEADER: 30,
}
_DEFAULT_ROW_HEIGHT = 25


def render_workbook(rows: Sequence[SheetRow], sheet_title: Optional[str] = None) -> Workbook:
    """Write ``rows`` into a single-sheet workbook, styling each cell by row role."""
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = sheet_title or settings.export_sheet_title

    for row_index, row in enumerate(rows, start=1):
        for column_index, value in enumerate(row.values, start=row.offset + 1):
            cell = sheet.cell(row=row_index, column=column_index, value=value)
            _style_cell(cell, row.role)
        sheet.row_dimensions[row_index].height = _ROW_HEIGHTS.get(row.role, _DEFAULT_ROW_HEIGHT)

    for column_index, width in enumerate(COLUMN_WIDTHS, start=1):
        sheet.column_dimensions[get_column_letter(column_index)].width = width

    sheet.page_margins = PageMargins(left=0.5, right=0.5, top=0.5, bottom=0.5)
    return workbook


def _style_cell(cell, role: RowRole) -> None:
    if role in (RowRole.TITLE, RowRole.SECTION_TITLE):
        cell.font = _TITLE_FONT
        cell.alignment = Alignment(horizontal="left")
        cell.border = _TITLE_BORDER
    elif role in (RowRole.HEADER, RowRole.SUMMARY_HEADER, RowRole.SUB_HEADER):
        sub_header = role is RowRole.SUB_HEADER
        cell.font = _SUB_HEADER_FONT if sub_header else _HEADER_FONT
        cell.fill = _SUB_HEADER_FILL if sub_header else _HEADER_FILL
        cell.alignment = _WRAPPED
        cell.border = _CELL_BORDER
    else:
        cell.font = _CELL_FONT
        cell.alignment = _WRAPPED
        cell.border = _CELL_BORDER


def export_weekly_report(
    summary: Sequence[WeeklySummaryLine],
    reports: Sequence[PerformanceReport],
    *,
    sheet_title: Optional[str] = None,
) -> bytes:
    """Build the weekly report workbook and return the serialized .xlsx bytes."""
    rows = build_weekly_report_rows(summary, reports)
    workbook = render_workbook(rows, sheet_title)
    buffer = io.BytesIO()
    workbook.save(buffer)
    payload = buffer.getvalue()
    logging.info(f"Weekly report workbook built: {len(reports)} reports, {len(rows)} rows, {len(payload)} bytes")
    return payload
