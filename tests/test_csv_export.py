import csv
import io
from datetime import date, datetime

from src.portdesk.models.domain import CargoDescriptor, DraftReading, VesselRecord
from src.portdesk.services.export import VESSEL_CSV_COLUMNS, csv_export_filename, vessels_to_csv
from src.portdesk.services.export.csv_export import vessel_csv_row


def _vessel(vid: str, **fields) -> VesselRecord:
    return VesselRecord(id=vid, **fields)


def test_header_is_first_line_and_one_line_per_record():
    vessels = [_vessel("v1", vessel_name="Alpha"), _vessel("v2", vessel_name="Beta"), _vessel("v3")]

    lines = vessels_to_csv(vessels).split("\n")

    assert lines[0] == ",".join(VESSEL_CSV_COLUMNS)
    assert len(lines) == len(vessels) + 1
    assert all(line for line in lines)


def test_empty_input_yields_only_header():
    assert vessels_to_csv([]) == ",".join(VESSEL_CSV_COLUMNS)


def test_every_row_has_one_field_per_column():
    vessel = _vessel("v1", vessel_name="Alpha", cargo=CargoDescriptor(type="Coal"))

    assert len(vessel_csv_row(vessel)) == len(VESSEL_CSV_COLUMNS)


def test_embedded_quotes_are_doubled():
    line = vessels_to_csv([_vessel("v1", vessel_name='He said "go"')]).split("\n")[1]

    assert line.startswith('"He said ""go""",')


def test_commas_stay_inside_quoted_text():
    line = vessels_to_csv([_vessel("v1", vessel_owner="Blue, Green & Co")]).split("\n")[1]

    assert '"Blue, Green & Co"' in line


def test_numbers_are_bare_and_missing_values_empty():
    vessel = _vessel(
        "v1",
        vessel_name="Alpha",
        grt=5400,
        loa=189.5,
        arrival_draft=DraftReading(forward=8.2, aft=None),
        total_revenue=125000,
    )

    fields = vessels_to_csv([vessel]).split("\n")[1].split(",")

    assert fields[VESSEL_CSV_COLUMNS.index("GRT")] == "5400"
    assert fields[VESSEL_CSV_COLUMNS.index("Length Over All (LOA)")] == "189.5"
    assert fields[VESSEL_CSV_COLUMNS.index("Arrival Draft Forward")] == "8.2"
    assert fields[VESSEL_CSV_COLUMNS.index("Arrival Draft Aft")] == ""
    assert fields[VESSEL_CSV_COLUMNS.index("Vessel Owner")] == ""
    assert fields[VESSEL_CSV_COLUMNS.index("Cargo Type")] == ""
    assert fields[VESSEL_CSV_COLUMNS.index("Total Revenue")] == "125000"


def test_status_column_is_derived_from_sailed_out_date():
    active = _vessel("v1", vessel_name="Alpha")
    sailed = _vessel("v2", vessel_name="Beta", sailed_out_date=datetime(2024, 1, 9, 6, 30))

    lines = vessels_to_csv([active, sailed]).split("\n")

    assert lines[1].endswith(',"Active"')
    assert lines[2].endswith(',"Sailed"')


def test_timestamps_are_rendered_as_quoted_text():
    vessel = _vessel("v1", arrival_date_time=datetime(2024, 1, 5, 14, 30))

    fields = vessels_to_csv([vessel]).split("\n")[1].split(",")

    assert fields[VESSEL_CSV_COLUMNS.index("Arrival Date & Time")] == '"2024-01-05 14:30"'


def test_zero_revenue_is_left_empty():
    fields = vessels_to_csv([_vessel("v1", total_revenue=0)]).split("\n")[1].split(",")

    assert fields[VESSEL_CSV_COLUMNS.index("Total Revenue")] == ""


def test_export_filename_uses_optional_prefix_and_iso_date():
    assert csv_export_filename(today=date(2024, 3, 7)) == "records_2024-03-07.csv"
    assert csv_export_filename("Kandla", today=date(2024, 3, 7)) == "Kandla_records_2024-03-07.csv"
    assert csv_export_filename("  ", today=date(2024, 3, 7)) == "records_2024-03-07.csv"


def test_output_reads_back_with_csv_reader():
    vessel = _vessel("v1", vessel_name="Alpha", location="Berth 3\nNorth quay", grt=5400)

    rows = list(csv.reader(io.StringIO(vessels_to_csv([vessel]))))

    assert rows[0] == list(VESSEL_CSV_COLUMNS)
    assert len(rows) == 2
    assert rows[1][VESSEL_CSV_COLUMNS.index("Location")] == "Berth 3\nNorth quay"
    assert rows[1][VESSEL_CSV_COLUMNS.index("GRT")] == "5400"
