from __future__ import annotations

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from activity_report.constants import RENDER_WIDTH, SUPPORTED_LOCALES, TICK_STEP_MINUTES


class DashboardSettings(BaseSettings):
    stats_api_base_url: str = Field("https://regime-guardian-bot.onrender.com", alias="STATS_API_BASE_URL")
    stats_api_timeout: float = Field(10.0, alias="STATS_API_TIMEOUT", gt=0)
    stats_cache_ttl: int = Field(300, alias="STATS_CACHE_TTL", ge=0)

    render_width: int = Field(RENDER_WIDTH, alias="TIMELINE_RENDER_WIDTH", gt=0)
    tick_minutes: int = Field(TICK_STEP_MINUTES, alias="TIMELINE_TICK_MINUTES", gt=0)

    report_timezone: str = Field("UTC", alias="REPORT_TIMEZONE")
    date_locale: str = Field("en", alias="REPORT_DATE_LOCALE")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @field_validator("report_timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"unknown timezone {value!r}") from exc
        return value

    @field_validator("date_locale")
    @classmethod
    def _supported_locale(cls, value: str) -> str:
        value = value.strip().lower()
        if value not in SUPPORTED_LOCALES:
            raise ValueError(f"locale must be one of {', '.join(SUPPORTED_LOCALES)}")
        return value


_settings: DashboardSettings | None = None


def get_settings() -> DashboardSettings:
    global _settings
    if _settings is None:
        _settings = DashboardSettings()
    return _settings


def reset_settings():
    global _settings
    _settings = None
