"""Export services."""

from .csv_export import CSV_MEDIA_TYPE, VESSEL_CSV_COLUMNS, csv_export_filename, vessels_to_csv
from .workbook import (
    XLSX_MEDIA_TYPE,
    RowRole,
    SheetRow,
    build_weekly_report_rows,
    export_weekly_report,
    render_workbook,
    weekly_summary_from_reports,
)

__all__ = [
    "CSV_MEDIA_TYPE",
    "VESSEL_CSV_COLUMNS",
    "XLSX_MEDIA_TYPE",
    "RowRole",
    "SheetRow",
    "build_weekly_report_rows",
    "csv_export_filename",
    "export_weekly_report",
    "render_workbook",
    "vessels_to_csv",
    "weekly_summary_from_reports",
]
