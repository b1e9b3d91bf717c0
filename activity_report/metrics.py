from __future__ import annotations

import math

from activity_report.models import DayRecord


def _trim_number(value):
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def format_hours(minutes) -> str:
    """Minutes as hours rounded to one decimal, ``"2.5"`` or ``"3"``."""
    hours = math.floor((minutes or 0) / 60 * 10 + 0.5) / 10
    return _trim_number(hours)


def goal_hours(minutes) -> str:
    return _trim_number((minutes or 0) / 60)


def is_over_goal(day: DayRecord) -> bool:
    return day.screen_time_actual > day.screen_time_goal


def checklist_rows(day: DayRecord):
    return [(kind.label, item.done) for kind, item in day.planned_activities()]


def time_summary(day: DayRecord):
    return [
        f"Screen time: ~{format_hours(day.screen_time_actual)}h / {goal_hours(day.screen_time_goal)}h",
        f"Productive time: ~{format_hours(day.productive_time_actual)}h",
    ]
