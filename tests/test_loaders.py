from datetime import date

import pytest

from activity_report.constants import ERROR_CONFIG, ERROR_NETWORK, ERROR_NO_DATA
from activity_report.data.api_client import ApiError
from activity_report.data import loaders
from activity_report.data.loaders import ReportLoadError, build_report, history_frame, load_settings, parse_stats


def _fetch_returning(payload, calls=None):
    def fetch(user_id):
        if calls is not None:
            calls.append(user_id)
        return payload

    return fetch


def test_build_report_parses_payload(stats_payload):
    calls = []
    stats = build_report("42", fetch=_fetch_returning(stats_payload, calls))
    assert calls == ["42"]
    assert stats.today.screen_time_goal == 120
    assert len(stats.history) == 2


@pytest.mark.parametrize("user_id", [None, "", "   "])
def test_missing_user_id_wins_and_never_fetches(user_id):
    calls = []
    with pytest.raises(ReportLoadError) as excinfo:
        build_report(user_id, fetch=_fetch_returning({}, calls))
    assert excinfo.value.kind == ERROR_CONFIG
    assert calls == []


def test_fetch_failure_is_a_network_error():
    def failing_fetch(user_id):
        raise ApiError("API error 500 Internal Server Error", status_code=500)

    with pytest.raises(ReportLoadError) as excinfo:
        build_report("42", fetch=failing_fetch)
    assert excinfo.value.kind == ERROR_NETWORK


@pytest.mark.parametrize("payload", [None, {}, {"history": []}, {"today": None}, "oops"])
def test_empty_payload_is_no_data(payload):
    with pytest.raises(ReportLoadError) as excinfo:
        build_report("42", fetch=_fetch_returning(payload))
    assert excinfo.value.kind == ERROR_NO_DATA
    assert str(excinfo.value) == "No data"


def test_unreadable_history_day_is_dropped_and_today_kept(stats_payload):
    stats_payload["history"].insert(0, {"date": "not-a-date"})
    stats = build_report("42", fetch=_fetch_returning(stats_payload))
    assert stats.today.screen_time_goal == 120
    assert [day.iso_date for day in stats.history] == ["2024-05-06", "2024-05-05"]


def test_history_timestamps_keep_their_calendar_date(stats_payload):
    stats_payload["history"][0]["date"] = "2024-05-06T10:15:00Z"
    stats = parse_stats(stats_payload)
    assert stats.history[0].date == date(2024, 5, 6)


def test_invalid_today_is_no_data(stats_payload):
    stats_payload["today"]["date"] = "not-a-date"
    assert parse_stats(stats_payload) is None


@pytest.mark.parametrize("name, value", [("REPORT_TIMEZONE", "Mars/Olympus"), ("REPORT_DATE_LOCALE", "fr")])
def test_bad_settings_are_a_configuration_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ReportLoadError) as excinfo:
        load_settings()
    assert excinfo.value.kind == ERROR_CONFIG
    assert str(excinfo.value).startswith("Invalid configuration")


def test_bad_settings_surface_on_first_fetch(monkeypatch):
    monkeypatch.setattr(loaders, "_cached_fetch", None)
    monkeypatch.setenv("REPORT_TIMEZONE", "Mars/Olympus")
    with pytest.raises(ReportLoadError):
        loaders.load_stats_payload("42")
    assert loaders._cached_fetch is None


def test_history_frame_skips_rest_days_and_sorts(stats_payload):
    stats = parse_stats(stats_payload)
    frame = history_frame(stats.history)
    assert list(frame["date"]) == [date(2024, 5, 6)]
    assert list(frame["screen_time_actual"]) == [100]


def test_history_frame_empty():
    frame = history_frame([])
    assert frame.empty
    assert "screen_time_goal" in frame.columns
