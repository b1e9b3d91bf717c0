from __future__ import annotations

import datetime
import logging
import math
from collections.abc import Mapping
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

logger = logging.getLogger(__name__)


class ActivityKind(str, Enum):
    WORKOUT = "workout"
    ENGLISH = "english"
    CODING = "coding"
    PLANNING = "planning"
    STRETCHING = "stretching"
    REFLECTION = "reflection"

    @property
    def label(self) -> str:
        return ACTIVITY_LABELS[self]


ACTIVITY_LABELS = {
    ActivityKind.WORKOUT: "Workout",
    ActivityKind.ENGLISH: "English",
    ActivityKind.CODING: "Coding",
    ActivityKind.PLANNING: "Planning",
    ActivityKind.STRETCHING: "Stretching",
    ActivityKind.REFLECTION: "Reflection",
}


class ChecklistItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    planned: bool = False
    done: bool = False


def _to_minutes(value):
    if value is None or isinstance(value, bool):
        return None
    try:
        minutes = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(minutes) or math.isinf(minutes):
        return None
    return max(0.0, minutes)


class DayRecord(BaseModel):
    """One day of the stats document.

    The wire format carries checklist state as flat ``<activity>_planned`` and
    ``<activity>_done`` flags; they are folded into ``checklist`` on parse.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    date: Optional[datetime.date] = None
    is_rest_day: bool = False
    morning_poll_completed: bool = False

    screen_time_goal: float = 0.0
    screen_time_actual: float = 0.0
    productive_time_actual: float = 0.0

    screen_time_breakdown: Dict[str, float] = Field(default_factory=dict)
    productive_time_breakdown: Dict[str, float] = Field(default_factory=dict)

    checklist: Dict[ActivityKind, ChecklistItem] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _fold_checklist_flags(cls, data):
        if not isinstance(data, Mapping) or "checklist" in data:
            return data
        payload = dict(data)
        payload["checklist"] = {
            kind: {
                "planned": data.get(f"{kind.value}_planned") or False,
                "done": data.get(f"{kind.value}_done") or False,
            }
            for kind in ActivityKind
        }
        return payload

    @field_validator("is_rest_day", "morning_poll_completed", mode="before")
    @classmethod
    def _null_flag(cls, value):
        return False if value is None else value

    @field_validator("date", mode="before")
    @classmethod
    def _calendar_date(cls, value):
        if isinstance(value, datetime.datetime):
            return value.date()
        if isinstance(value, str) and len(value) > 10 and value[10] in "T ":
            return value[:10]
        return value

    @field_validator("screen_time_goal", "screen_time_actual", "productive_time_actual", mode="before")
    @classmethod
    def _non_negative_minutes(cls, value):
        minutes = _to_minutes(value)
        return 0.0 if minutes is None else minutes

    @field_validator("screen_time_breakdown", "productive_time_breakdown", mode="before")
    @classmethod
    def _clean_breakdown(cls, value):
        if not isinstance(value, Mapping):
            return {}
        cleaned = {}
        for label, raw_minutes in value.items():
            minutes = _to_minutes(raw_minutes)
            if minutes is None:
                continue
            cleaned[str(label)] = minutes
        return cleaned

    @property
    def iso_date(self) -> str:
        return self.date.isoformat() if self.date else ""

    def checklist_item(self, kind: ActivityKind) -> ChecklistItem:
        return self.checklist.get(kind) or ChecklistItem()

    def planned_activities(self) -> List[tuple]:
        return [
            (kind, self.checklist_item(kind))
            for kind in ActivityKind
            if self.checklist_item(kind).planned
        ]


class StatsResponse(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    today: DayRecord
    history: List[DayRecord] = Field(default_factory=list)

    @field_validator("history", mode="before")
    @classmethod
    def _readable_days(cls, value):
        if not isinstance(value, (list, tuple)):
            return []
        days = []
        for index, raw_day in enumerate(value):
            if isinstance(raw_day, DayRecord):
                days.append(raw_day)
                continue
            try:
                days.append(DayRecord.model_validate(raw_day))
            except ValidationError as exc:
                logger.warning("Skipping unreadable history day %s: %s", index, exc.error_count())
        return days
