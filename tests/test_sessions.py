import pytest

from models import ApConnection, SessionMetrics, Tier
from sessions import (
    ap_timeline,
    build_day_session,
    count_ap_switches,
    day_overview,
    is_poor_connection,
    session_metrics,
    sort_by_time,
)

from conftest import MAC_A, MAC_B, make_record

pytestmark = pytest.mark.sessions


def test_ap_switches_after_sorting_by_time() -> None:
    records = [
        make_record(time="10:30", ap_name="A"),
        make_record(time="10:00", ap_name="A"),
        make_record(time="10:45", ap_name="B"),
        make_record(time="11:00", ap_name="A"),
    ]
    assert count_ap_switches(sort_by_time(records)) == 2
    assert session_metrics(records).ap_switches == 2


def test_first_record_never_counts_as_switch() -> None:
    assert count_ap_switches([make_record(ap_name="A")]) == 0
    assert count_ap_switches([]) == 0


def test_poor_connection_percentage() -> None:
    records = [make_record(snr=10)] + [make_record(snr=20, median_rssi=100) for _ in range(3)]
    metrics = session_metrics(records)
    assert sum(is_poor_connection(r) for r in records) == 1
    assert metrics.poor_connection_percentage == 25.0


def test_poor_connection_uses_or_and_dbm() -> None:
    assert is_poor_connection(make_record(snr=30, median_rssi=29))
    assert is_poor_connection(make_record(snr=14, median_rssi=60))
    assert not is_poor_connection(make_record(snr=15, median_rssi=30))


def test_empty_selection_is_defined() -> None:
    assert session_metrics([]) == SessionMetrics(0.0, 0, 0.0)
    assert ap_timeline([]) == {}


def test_single_record_average() -> None:
    assert session_metrics([make_record(snr=17.5)]).average_snr == 17.5


def test_timeline_groups_by_ap_in_time_order() -> None:
    records = [
        make_record(time="12:00", ap_name="B", snr=30),
        make_record(time="09:00", ap_name="A", snr=10),
        make_record(time="10:00", ap_name="B", snr=20),
        make_record(time="11:00", ap_name="A", snr=40),
    ]
    timeline = ap_timeline(records)
    assert list(timeline) == ["A", "B"]
    assert timeline["A"] == [
        ApConnection(time="09:00", snr=10, is_poor=True),
        ApConnection(time="11:00", snr=40, is_poor=False),
    ]
    assert [c.time for c in timeline["B"]] == ["10:00", "12:00"]


def test_timeline_is_poor_only_looks_at_snr() -> None:
    [conn] = ap_timeline([make_record(snr=20, median_rssi=10)])["AP-1"]
    assert conn.is_poor is False


def test_build_day_session(sample_records) -> None:
    session = build_day_session(sample_records, MAC_A, "Dec 19 2024")
    assert session.mac_address == MAC_A
    assert session.date == "Dec 19 2024"
    assert session.record_count == 4
    assert session.metrics.ap_switches == 2
    assert session.metrics.average_snr == 15.0
    assert session.metrics.poor_connection_percentage == 50.0
    assert session.snr_tier == Tier.MODERATE
    assert session.health_tier == Tier.POOR
    assert [c.time for c in session.ap_connections["AP-1"]] == ["09:00:00", "10:00:00", "12:00:00"]
    assert [c.is_poor for c in session.ap_connections["AP-1"]] == [True, False, True]
    assert session.ap_connections["AP-2"] == [ApConnection("11:00:00", 20.0, False)]


def test_build_day_session_without_readings(sample_records) -> None:
    session = build_day_session(sample_records, MAC_B, "Dec 20 2024")
    assert session.record_count == 0
    assert session.metrics == SessionMetrics()
    assert session.ap_connections == {}


def test_day_overview_groups_by_device_and_date(sample_records) -> None:
    overview = day_overview(sample_records)
    keys = [(s.mac_address, s.date) for s in overview]
    assert keys == [
        (MAC_A, "Dec 19 2024"),
        (MAC_A, "Dec 20 2024"),
        (MAC_B, "Dec 19 2024"),
        (MAC_B, "not a date"),
    ]
    by_key = {(s.mac_address, s.date): s for s in overview}
    assert by_key[(MAC_A, "Dec 20 2024")].metrics == SessionMetrics(26.0, 0, 0.0)
    assert by_key[(MAC_A, "Dec 19 2024")].metrics.ap_switches == 2


def test_day_overview_does_not_merge_days() -> None:
    records = [
        make_record(date="Dec 19 2024", time="23:00", ap_name="A"),
        make_record(date="Dec 20 2024", time="00:30", ap_name="B"),
    ]
    assert [s.metrics.ap_switches for s in day_overview(records)] == [0, 0]
