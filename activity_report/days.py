from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Sequence
from zoneinfo import ZoneInfo

from activity_report.constants import MONTH_NAMES, REST_DAY_SUFFIX, WEEKDAY_NAMES
from activity_report.models import DayRecord


def current_date(tz_name="UTC") -> date:
    return datetime.now(ZoneInfo(tz_name)).date()


def selectable_days(today: DayRecord, history: Sequence[DayRecord], today_date: date) -> List[DayRecord]:
    """Days offered in the history picker, most recent first.

    Today joins the list once its morning survey is done, or when it is a rest
    day.
    """
    days = list(history or [])
    if today.morning_poll_completed or today.is_rest_day:
        dated_today = today if today.date else today.model_copy(update={"date": today_date})
        days.insert(0, dated_today)
    return days


def lookup(days: Sequence[DayRecord], date_str) -> Optional[DayRecord]:
    if not date_str:
        return None
    for day in days:
        if day.iso_date == date_str:
            return day
    return None


def format_date_label(value: date, locale="en") -> str:
    weekdays = WEEKDAY_NAMES.get(locale, WEEKDAY_NAMES["en"])
    months = MONTH_NAMES.get(locale, MONTH_NAMES["en"])
    return f"{weekdays[value.weekday()]}, {value.day} {months[value.month - 1]}"


def day_label(day: DayRecord, locale="en") -> str:
    if day.date is None:
        return ""
    label = format_date_label(day.date, locale)
    if day.is_rest_day:
        label += REST_DAY_SUFFIX.get(locale, REST_DAY_SUFFIX["en"])
    return label
