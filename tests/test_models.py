from datetime import date

from activity_report.models import ActivityKind, ChecklistItem, DayRecord, StatsResponse


def _day(**overrides):
    payload = {
        "is_rest_day": False,
        "morning_poll_completed": True,
        "screen_time_goal": 120,
        "screen_time_actual": 140,
        "productive_time_actual": 95,
        "screen_time_breakdown": {"YouTube": 90, "Games": 50},
        "productive_time_breakdown": {"Coding": 60, "English": 35},
        "workout_planned": True,
        "workout_done": True,
        "coding_planned": True,
        "coding_done": False,
    }
    payload.update(overrides)
    return payload


def test_flat_flags_fold_into_checklist():
    day = DayRecord.model_validate(_day())
    assert day.checklist[ActivityKind.WORKOUT] == ChecklistItem(planned=True, done=True)
    assert day.checklist[ActivityKind.CODING] == ChecklistItem(planned=True, done=False)
    assert day.checklist[ActivityKind.ENGLISH] == ChecklistItem()
    assert [kind for kind, _ in day.planned_activities()] == [ActivityKind.WORKOUT, ActivityKind.CODING]


def test_breakdown_order_survives_parsing():
    day = DayRecord.model_validate(_day(screen_time_breakdown={"z": 1, "a": 2, "m": 3}))
    assert list(day.screen_time_breakdown) == ["z", "a", "m"]


def test_malformed_breakdowns_parse_as_empty():
    day = DayRecord.model_validate(_day(screen_time_breakdown=None, productive_time_breakdown=["Coding", 30]))
    assert day.screen_time_breakdown == {}
    assert day.productive_time_breakdown == {}


def test_bad_breakdown_entries_are_dropped_and_negatives_floored():
    day = DayRecord.model_validate(
        _day(screen_time_breakdown={"ok": "15", "bad": "n/a", "none": None, "neg": -4, "flag": True})
    )
    assert day.screen_time_breakdown == {"ok": 15.0, "neg": 0.0}


def test_missing_fields_take_defaults():
    day = DayRecord.model_validate({})
    assert day.date is None
    assert day.iso_date == ""
    assert day.screen_time_goal == 0
    assert not day.is_rest_day
    assert day.planned_activities() == []


def test_history_dates_parse():
    stats = StatsResponse.model_validate(
        {"today": _day(), "history": [_day(date="2024-05-06"), _day(date="2024-05-05", is_rest_day=True)]}
    )
    assert stats.history[0].date == date(2024, 5, 6)
    assert stats.history[1].iso_date == "2024-05-05"


def test_null_history_is_empty():
    stats = StatsResponse.model_validate({"today": _day(), "history": None})
    assert stats.history == []


def test_unknown_keys_are_ignored():
    day = DayRecord.model_validate(_day(user_id=42, streak=3))
    assert not hasattr(day, "streak")


def test_string_flags_use_boolean_parsing():
    day = DayRecord.model_validate(
        _day(is_rest_day="false", morning_poll_completed="true", workout_planned="false", coding_done="1")
    )
    assert day.is_rest_day is False
    assert day.morning_poll_completed is True
    assert day.checklist[ActivityKind.WORKOUT].planned is False
    assert day.checklist[ActivityKind.CODING].done is True


def test_null_flags_are_false():
    day = DayRecord.model_validate(_day(is_rest_day=None, workout_done=None))
    assert day.is_rest_day is False
    assert day.checklist[ActivityKind.WORKOUT].done is False


def test_unreadable_history_days_are_skipped():
    stats = StatsResponse.model_validate(
        {"today": _day(), "history": [_day(date="2024-05-06"), _day(date="yesterday"), "oops"]}
    )
    assert [day.iso_date for day in stats.history] == ["2024-05-06"]
    assert stats.today.screen_time_goal == 120
