from datetime import date, datetime, timezone

import pytest

from src.portdesk.models.domain import CargoDescriptor, PerformanceReport, VesselRecord
from src.portdesk.services.filters import FilterCriteria, filter_records, matches_criteria


def _vessel(vid: str, name: str, port_id: str = "P1", arrival: datetime | None = None, **extra) -> VesselRecord:
    return VesselRecord(
        id=vid,
        port_id=port_id,
        port_name=extra.pop("port_name", f"Port {port_id}"),
        vessel_name=name,
        arrival_date_time=arrival,
        **extra,
    )


def _fleet() -> list[VesselRecord]:
    return [
        _vessel("v1", "Alpha", "P1", datetime(2024, 1, 5), imo="9100001", operation_type="Import",
                cargo=CargoDescriptor(type="Coal", quantity="1200 MT"), arrival_from="Chennai"),
        _vessel("v2", "Beta", "P2", datetime(2024, 2, 10), imo="9100002", operation_type="Export",
                cargo=CargoDescriptor(type="Containers"), arrival_from="Colombo"),
        _vessel("v3", "Gamma", "P1", None, imo="9100003", operation_type="Coastal"),
        _vessel("v4", "Delta", "P3", datetime(2024, 1, 31, 23, 59, 59), imo="9100004", operation_type="Import"),
    ]


def test_example_date_range_selects_january_arrival():
    vessels = [
        _vessel("a", "Alpha", "P1", datetime(2024, 1, 5)),
        _vessel("b", "Beta", "P2", datetime(2024, 2, 10)),
    ]
    criteria = FilterCriteria.from_params(from_date="2024-01-01", to_date="2024-01-31")

    result = filter_records(vessels, criteria)

    assert [v.vessel_name for v in result] == ["Alpha"]


def test_empty_criteria_returns_every_record_in_order():
    vessels = _fleet()
    criteria = FilterCriteria(search_text="", category="all", port_ids=frozenset(), from_date=None, to_date=None)

    result = filter_records(vessels, criteria)

    assert criteria.is_empty
    assert len(result) == len(vessels)
    assert all(a is b for a, b in zip(result, vessels))


def test_undated_record_passes_any_date_range():
    vessels = _fleet()
    criteria = FilterCriteria(from_date=date(2030, 1, 1), to_date=date(2030, 12, 31))

    result = filter_records(vessels, criteria)

    assert [v.id for v in result] == ["v3"]


def test_to_date_is_inclusive_through_end_of_day():
    vessels = [
        _vessel("last", "Last", arrival=datetime(2024, 1, 31, 23, 59, 59, 999000)),
        _vessel("next", "Next", arrival=datetime(2024, 2, 1, 0, 0, 0)),
    ]

    result = filter_records(vessels, FilterCriteria(to_date=date(2024, 1, 31)))

    assert [v.id for v in result] == ["last"]


def test_to_datetime_bound_still_covers_rest_of_its_day():
    vessels = [_vessel("late", "Late", arrival=datetime(2024, 1, 31, 22, 0))]

    result = filter_records(vessels, FilterCriteria(to_date=datetime(2024, 1, 31, 8, 0)))

    assert [v.id for v in result] == ["late"]


def test_from_date_is_inclusive_of_literal_instant():
    vessels = [
        _vessel("before", "Before", arrival=datetime(2024, 1, 5, 11, 59)),
        _vessel("exact", "Exact", arrival=datetime(2024, 1, 5, 12, 0)),
        _vessel("after", "After", arrival=datetime(2024, 1, 6)),
    ]

    result = filter_records(vessels, FilterCriteria(from_date=datetime(2024, 1, 5, 12, 0)))

    assert [v.id for v in result] == ["exact", "after"]


def test_search_matches_any_field_case_insensitively():
    vessels = _fleet()

    assert [v.id for v in filter_records(vessels, FilterCriteria(search_text="ALPH"))] == ["v1"]
    assert [v.id for v in filter_records(vessels, FilterCriteria(search_text="9100002"))] == ["v2"]
    assert [v.id for v in filter_records(vessels, FilterCriteria(search_text="coal"))] == ["v1"]
    assert [v.id for v in filter_records(vessels, FilterCriteria(search_text="colombo"))] == ["v2"]
    assert [v.id for v in filter_records(vessels, FilterCriteria(search_text="port p1"))] == ["v1", "v3"]
    assert filter_records(vessels, FilterCriteria(search_text="nowhere")) == []


def test_category_is_exact_and_all_bypasses():
    vessels = _fleet()

    assert [v.id for v in filter_records(vessels, FilterCriteria(category="Import"))] == ["v1", "v4"]
    assert [v.id for v in filter_records(vessels, FilterCriteria(category="import"))] == []
    assert len(filter_records(vessels, FilterCriteria(category="all"))) == len(vessels)


def test_port_selection_restricts_and_empty_selection_does_not():
    vessels = _fleet()

    assert [v.id for v in filter_records(vessels, FilterCriteria(port_ids=frozenset({"P1", "P3"})))] == [
        "v1",
        "v3",
        "v4",
    ]
    assert len(filter_records(vessels, FilterCriteria(port_ids=frozenset()))) == len(vessels)


def test_criteria_groups_are_combined_with_and():
    vessels = _fleet()
    criteria = FilterCriteria(
        search_text="a",
        category="Import",
        port_ids=frozenset({"P1", "P3"}),
        from_date=date(2024, 1, 1),
        to_date=date(2024, 1, 31),
    )

    result = filter_records(vessels, criteria)

    assert [v.id for v in result] == ["v1", "v4"]
    assert all(matches_criteria(v, criteria) for v in result)
    assert not matches_criteria(vessels[1], criteria)


def test_result_is_an_ordered_subsequence():
    vessels = _fleet()
    result = filter_records(vessels, FilterCriteria(search_text="a"))

    positions = [vessels.index(v) for v in result]
    assert positions == sorted(positions)


def test_naive_bounds_compare_against_aware_timestamps():
    vessels = [
        _vessel("utc", "Utc", arrival=datetime(2024, 1, 5, 10, 0, tzinfo=timezone.utc)),
        _vessel("later", "Later", arrival=datetime(2024, 3, 5, 10, 0, tzinfo=timezone.utc)),
    ]

    result = filter_records(vessels, FilterCriteria.from_params(from_date="2024-01-01", to_date="2024-01-31"))

    assert [v.id for v in result] == ["utc"]


def test_report_filtering_uses_report_fields():
    reports = [
        PerformanceReport(id="r1", port_id="P1", vessel_name="Ocean Star", agent_name="Blue Agency",
                          purpose_of_arrival="Import", berthed_date="2024-01-10"),
        PerformanceReport(id="r2", port_id="P2", vessel_name="Sea Breeze", owner_details="Harbor Lines",
                          purpose_of_arrival="Export", berthed_date="2024-03-02"),
        PerformanceReport(id="r3", port_id="P1", vessel_name="River Queen", type_of_cargo="Bulk",
                          purpose_of_arrival="Import", berthed_date="not a date"),
    ]

    assert [r.id for r in filter_records(reports, FilterCriteria(search_text="agency"))] == ["r1"]
    assert [r.id for r in filter_records(reports, FilterCriteria(search_text="harbor"))] == ["r2"]
    assert [r.id for r in filter_records(reports, FilterCriteria(category="Import"))] == ["r1", "r3"]
    january = FilterCriteria(from_date=date(2024, 1, 1), to_date=date(2024, 1, 31))
    assert [r.id for r in filter_records(reports, january)] == ["r1", "r3"]


def test_from_params_normalises_raw_values():
    criteria = FilterCriteria.from_params(
        search="  alpha ",
        category="",
        port_ids=["P1", " ", "", "P2 "],
        from_date="2024-01-01",
        to_date="",
    )

    assert criteria.search_text == "alpha"
    assert criteria.category == "all"
    assert criteria.port_ids == frozenset({"P1", "P2"})
    assert criteria.from_date == date(2024, 1, 1)
    assert criteria.to_date is None


def test_from_params_rejects_unparsable_dates():
    with pytest.raises(ValueError):
        FilterCriteria.from_params(from_date="yesterday")
