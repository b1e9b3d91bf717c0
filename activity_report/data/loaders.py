from __future__ import annotations

import logging

import pandas as pd
import streamlit as st
from pydantic import ValidationError

from activity_report.constants import (
    ERROR_CONFIG,
    ERROR_MESSAGES,
    ERROR_NETWORK,
    ERROR_NO_DATA,
)
from activity_report.data import api_client
from activity_report.models import StatsResponse
from activity_report.settings import DashboardSettings, get_settings

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["date", "screen_time_actual", "screen_time_goal", "productive_time_actual"]


class ReportLoadError(RuntimeError):
    def __init__(self, kind, message=None):
        super().__init__(message or ERROR_MESSAGES[kind])
        self.kind = kind


_cached_fetch = None


def load_settings() -> DashboardSettings:
    try:
        return get_settings()
    except ValidationError as exc:
        fields = ", ".join(str(error["loc"][0]) for error in exc.errors() if error.get("loc"))
        logger.error("Invalid dashboard settings: %s", fields)
        raise ReportLoadError(ERROR_CONFIG, f"Invalid configuration: {fields or 'settings'}") from exc


def load_stats_payload(user_id):
    global _cached_fetch
    if _cached_fetch is None:
        _cached_fetch = st.cache_data(ttl=load_settings().stats_cache_ttl, show_spinner=False)(api_client.fetch_stats)
    return _cached_fetch(user_id)


def parse_stats(payload):
    if not payload or not isinstance(payload, dict) or not payload.get("today"):
        return None
    try:
        return StatsResponse.model_validate(payload)
    except ValidationError as exc:
        logger.warning("Discarding malformed stats payload: %s", exc.error_count())
        return None


def build_report(user_id, fetch=load_stats_payload) -> StatsResponse:
    user_id = str(user_id or "").strip()
    if not user_id:
        logger.info("No user_id query parameter")
        raise ReportLoadError(ERROR_CONFIG)
    try:
        payload = fetch(user_id)
    except api_client.ApiError as exc:
        logger.info("Stats fetch failed for %s: %s", user_id, exc)
        raise ReportLoadError(ERROR_NETWORK) from exc
    stats = parse_stats(payload)
    if stats is None:
        logger.info("Empty stats payload for %s", user_id)
        raise ReportLoadError(ERROR_NO_DATA)
    return stats


def history_frame(days) -> pd.DataFrame:
    rows = [
        {
            "date": day.date,
            "screen_time_actual": day.screen_time_actual,
            "screen_time_goal": day.screen_time_goal,
            "productive_time_actual": day.productive_time_actual,
        }
        for day in days
        if day.date is not None and not day.is_rest_day
    ]
    if not rows:
        return pd.DataFrame(columns=HISTORY_COLUMNS)
    frame = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
    frame = frame.drop_duplicates(subset="date", keep="first")
    return frame.sort_values("date").reset_index(drop=True)
