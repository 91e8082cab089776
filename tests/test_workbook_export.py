from io import BytesIO

from openpyxl import load_workbook

from src.portdesk.models.domain import DailyEntry, PerformanceReport, WeeklySummaryLine
from src.portdesk.services.export import (
    RowRole,
    build_weekly_report_rows,
    export_weekly_report,
    render_workbook,
    weekly_summary_from_reports,
)
from src.portdesk.services.export.formatting import format_date, format_number
from src.portdesk.services.export.workbook import (
    CLEARED_SECTION_TITLE,
    DAILY_COLUMNS,
    DAILY_OFFSET,
    PENDING_SECTION_TITLE,
    REPORT_COLUMNS,
)


def _report(rid: str, cleared: bool = False, daily: tuple[DailyEntry, ...] = (), **fields) -> PerformanceReport:
    return PerformanceReport(
        id=rid,
        vessel_name=fields.pop("vessel_name", f"Vessel {rid}"),
        clearance_issued="2024-01-12" if cleared else None,
        daily_data=daily,
        **fields,
    )


def _section(rows, title):
    """Rows from a section title up to (not including) the next section title."""
    start = next(i for i, row in enumerate(rows) if row.role is RowRole.SECTION_TITLE and row.values == (title,))
    end = next(
        (i for i in range(start + 1, len(rows)) if rows[i].role is RowRole.SECTION_TITLE),
        len(rows),
    )
    return rows[start:end]


SUMMARY = [
    WeeklySummaryLine("Vessels handled", 12500, "week 2"),
    WeeklySummaryLine("Berth occupancy", "87%"),
]


def test_summary_block_leads_the_sheet():
    rows = build_weekly_report_rows(SUMMARY, [])

    assert [row.role for row in rows] == [
        RowRole.TITLE,
        RowRole.SPACER,
        RowRole.SUMMARY_HEADER,
        RowRole.SUMMARY,
        RowRole.SUMMARY,
        RowRole.SPACER,
        RowRole.SPACER,
    ]
    assert rows[0].values == ("SUMMARY (ABSTRACT)",)
    assert rows[3].values == (1, "Vessels handled", "12,500", "week 2")
    assert rows[4].values == (2, "Berth occupancy", "87%", "")


def test_reports_are_split_by_clearance():
    reports = [_report("a", cleared=True), _report("b"), _report("c", cleared=True), _report("d")]

    rows = build_weekly_report_rows(SUMMARY, reports)
    cleared = _section(rows, CLEARED_SECTION_TITLE)
    pending = _section(rows, PENDING_SECTION_TITLE)

    cleared_names = [row.values[0] for row in cleared if row.role is RowRole.REPORT]
    pending_names = [row.values[0] for row in pending if row.role is RowRole.REPORT]
    assert cleared_names == ["Vessel a", "Vessel c"]
    assert pending_names == ["Vessel b", "Vessel d"]
    assert cleared[1].role is RowRole.SPACER
    assert cleared[2].values == REPORT_COLUMNS
    assert pending[2].values == REPORT_COLUMNS


def test_sections_without_reports_are_omitted():
    rows = build_weekly_report_rows([], [_report("a")])

    titles = [row.values[0] for row in rows if row.role is RowRole.SECTION_TITLE]
    assert titles == [PENDING_SECTION_TITLE]

    rows = build_weekly_report_rows([], [_report("b", cleared=True)])
    titles = [row.values[0] for row in rows if row.role is RowRole.SECTION_TITLE]
    assert titles == [CLEARED_SECTION_TITLE]


def test_daily_entries_nest_under_their_report():
    daily = (
        DailyEntry(date="2024-01-08", cargo_type="Bulk", total_quantity=4200, demurrages=0),
        DailyEntry(date="2024-01-09", type_of_cargo="Coal", total_quantity=3100.5, reason="Rain"),
    )
    reports = [_report("a", daily=daily), _report("b")]

    rows = build_weekly_report_rows([], reports)
    main_index = next(i for i, row in enumerate(rows) if row.role is RowRole.REPORT and row.values[0] == "Vessel a")

    nested = rows[main_index + 1 : main_index + 5]
    assert [row.role for row in nested] == [RowRole.SUB_HEADER, RowRole.DAILY, RowRole.DAILY, RowRole.SPACER]
    assert nested[0].values == DAILY_COLUMNS
    assert nested[0].offset == DAILY_OFFSET == len(REPORT_COLUMNS) - len(DAILY_COLUMNS)
    assert nested[1].values == ("Jan 8, 2024", "Bulk", "-", "4,200", "0", "-")
    assert nested[2].values == ("Jan 9, 2024", "-", "Coal", "3,100.5", "-", "Rain")
    assert rows[main_index + 5].role is RowRole.REPORT


def test_blank_daily_entries_are_skipped():
    daily = (DailyEntry(), DailyEntry(reason="Berth closed"))
    rows = build_weekly_report_rows([], [_report("a", daily=daily)])

    assert sum(1 for row in rows if row.role is RowRole.DAILY) == 1


def test_missing_report_fields_render_as_dash():
    rows = build_weekly_report_rows([], [PerformanceReport(id="x")])
    report_row = next(row for row in rows if row.role is RowRole.REPORT)

    assert len(report_row.values) == len(REPORT_COLUMNS)
    assert set(report_row.values) == {"-"}


def test_report_row_formats_numbers_and_dates():
    report = _report(
        "a",
        cleared=True,
        port_name="Kandla",
        total_quantity=1234567,
        demurrages_collected=2500.75,
        berthed_date="2024-01-05",
        departure_date="sometime next week",
    )
    row = next(r for r in build_weekly_report_rows([], [report]) if r.role is RowRole.REPORT)
    values = dict(zip(REPORT_COLUMNS, row.values))

    assert values["Port"] == "Kandla"
    assert values["Total Quantity"] == "1,234,567"
    assert values["Demurrages Collected"] == "2,500.75"
    assert values["Berthed Date"] == "Jan 5, 2024"
    assert values["Departure Date"] == "sometime next week"
    assert values["Clearance Status"] == "Jan 12, 2024"


def test_repeated_builds_do_not_share_state():
    reports = [_report("a", cleared=True), _report("b")]

    first = build_weekly_report_rows(SUMMARY, reports)
    build_weekly_report_rows(SUMMARY * 3, reports * 2)
    again = build_weekly_report_rows(SUMMARY, reports)

    assert first == again


def test_styling_follows_row_role_not_cell_text():
    reports = [_report("a", vessel_name="Vessel Name", cargo_type="Date")]
    workbook = render_workbook(build_weekly_report_rows([], reports), "Weekly Report")
    sheet = workbook.active

    header_row = next(r for r in range(1, sheet.max_row + 1) if sheet.cell(row=r, column=1).value == "Vessel Name")
    data_row = header_row + 1

    assert sheet.cell(row=header_row, column=1).font.bold
    assert sheet.cell(row=data_row, column=1).value == "Vessel Name"
    assert not sheet.cell(row=data_row, column=1).font.bold
    assert sheet.cell(row=data_row, column=1).font.size == 10


def test_rendered_layout_widths_and_heights():
    daily = (DailyEntry(date="2024-01-08", total_quantity=10),)
    rows = build_weekly_report_rows(SUMMARY, [_report("a", daily=daily)])
    sheet = render_workbook(rows).active

    assert sheet.title == "Weekly Report"
    assert sheet["A1"].font.size == 16
    assert sheet.row_dimensions[1].height == 35
    assert sheet.row_dimensions[3].height == 30
    assert sheet.row_dimensions[4].height == 25
    assert sheet.column_dimensions["A"].width == 6
    assert sheet.column_dimensions["B"].width == 25

    sub_header_index = next(i for i, row in enumerate(rows, start=1) if row.role is RowRole.SUB_HEADER)
    assert sheet.cell(row=sub_header_index, column=DAILY_OFFSET).value is None
    assert sheet.cell(row=sub_header_index, column=DAILY_OFFSET + 1).value == "Date"
    assert sheet.cell(row=sub_header_index, column=len(REPORT_COLUMNS)).value == "Reason"
    assert sheet.cell(row=sub_header_index, column=DAILY_OFFSET + 1).fill.fgColor.rgb.endswith("E2E8F0")


def test_export_returns_single_sheet_xlsx_bytes():
    reports = [_report("a", cleared=True), _report("b")]

    payload = export_weekly_report(weekly_summary_from_reports(reports), reports)
    workbook = load_workbook(BytesIO(payload))

    assert workbook.sheetnames == ["Weekly Report"]
    sheet = workbook["Weekly Report"]
    assert sheet["A1"].value == "SUMMARY (ABSTRACT)"
    values = [cell.value for cell in sheet["A"]]
    assert CLEARED_SECTION_TITLE in values
    assert PENDING_SECTION_TITLE in values


def test_default_summary_counts_reports():
    reports = [
        _report("a", cleared=True, total_quantity=1000, demurrages_collected=50),
        _report("b", total_quantity=500.5),
        _report("c"),
    ]

    lines = weekly_summary_from_reports(reports)

    assert [(line.description, line.total) for line in lines] == [
        ("Vessels Reported", 3),
        ("Vessels Cleared", 1),
        ("Vessels Pending Clearance", 2),
        ("Total Quantity Handled", 1500.5),
        ("Demurrages Collected", 50),
    ]


def test_format_number_and_date():
    assert format_number(1234567) == "1,234,567"
    assert format_number(1234.0) == "1,234"
    assert format_number(0.5) == "0.5"
    assert format_number("n/a") == "n/a"
    assert format_date("2024-02-29T10:15:00Z") == "Feb 29, 2024"
    assert format_date("31/02/2024") == "31/02/2024"
    assert format_date(None) == ""
