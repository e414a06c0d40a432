import pytest

from analysis import AnalysisSession
from models import AnalysisFilters

from conftest import MAC_A, MAC_B

pytestmark = pytest.mark.analysis


@pytest.fixture()
def session(sample_text: str) -> AnalysisSession:
    return AnalysisSession.from_text(sample_text)


def test_default_filters_select_everything(session: AnalysisSession) -> None:
    assert session.filters == AnalysisFilters("all", "all")
    assert len(session.filtered()) == 7
    assert session.summary().record_count == 7


def test_with_filters_returns_new_session(session: AnalysisSession) -> None:
    narrowed = session.with_filters(device_id=MAC_A)
    assert session.filters.device_id == "all"
    assert narrowed.filters == AnalysisFilters(MAC_A, "all")
    assert narrowed.records == session.records

    both = narrowed.with_filters(date="Dec 19 2024")
    assert both.filters == AnalysisFilters(MAC_A, "Dec 19 2024")
    assert len(both.filtered()) == 4
    assert both.reset_filters().filters == AnalysisFilters()


def test_views_follow_filters(session: AnalysisSession) -> None:
    narrowed = session.with_filters(device_id=MAC_B)
    assert narrowed.summary().record_count == 2
    assert len(narrowed.classified()) == 2
    assert narrowed.disconnections() == []
    assert len(narrowed.day_overview()) == 2
    assert len(session.disconnections()) == 1


def test_selectable_values_ignore_filters(session: AnalysisSession) -> None:
    narrowed = session.with_filters(device_id=MAC_B)
    assert narrowed.dates() == ["Dec 19 2024", "Dec 20 2024"]
    assert narrowed.devices() == [MAC_B, MAC_A]


def test_day_session_requires_device(session: AnalysisSession) -> None:
    assert session.day_session("Dec 19 2024") is None

    detail = session.with_filters(device_id=MAC_A).day_session("Dec 19 2024")
    assert detail is not None
    assert detail.metrics.ap_switches == 2

    explicit = session.day_session("Dec 20 2024", device_id=MAC_A)
    assert explicit.record_count == 1


def test_empty_session_views_are_defined() -> None:
    empty = AnalysisSession.from_text("")
    assert empty.summary().average_snr == 0.0
    assert empty.classified() == []
    assert empty.disconnections() == []
    assert empty.day_overview() == []
    assert empty.dates() == []


def test_explicit_empty_device_overrides_filter(session: AnalysisSession) -> None:
    filtered = session.with_filters(device_id=MAC_A)
    detail = filtered.day_session("Dec 19 2024", device_id="")
    assert detail is not None
    assert detail.mac_address == ""
    assert detail.record_count == 0
