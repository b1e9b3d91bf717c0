import logging
from typing import Any
from urllib.parse import quote

import requests
from requests.adapters import HTTPAdapter

from activity_report.settings import get_settings

logger = logging.getLogger(__name__)


class ApiError(RuntimeError):
    def __init__(self, message, status_code=None):
        super().__init__(message)
        self.status_code = status_code


def _build_session():
    session = requests.Session()
    adapter = HTTPAdapter(max_retries=0, pool_connections=4, pool_maxsize=4)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


_SESSION = _build_session()


def api_base_url():
    return (get_settings().stats_api_base_url or "").strip()


def request(method: str, path: str, params: dict | None = None, timeout: float | None = None) -> Any:
    base = api_base_url().rstrip("/")
    if not base:
        raise ApiError("STATS_API_BASE_URL not configured")
    if timeout is None:
        timeout = get_settings().stats_api_timeout
    url = f"{base}{path}"
    logger.debug("%s %s", method, url)
    try:
        response = _SESSION.request(method, url, params=params, timeout=timeout)
    except requests.RequestException as exc:
        logger.warning("Stats API unreachable: %s", exc)
        raise ApiError(f"Stats API unreachable: {exc}") from exc
    if not response.ok:
        logger.warning("Stats API returned %s %s for %s", response.status_code, response.reason, path)
        raise ApiError(f"API error {response.status_code} {response.reason}", status_code=response.status_code)
    if response.status_code == 204:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise ApiError("Stats API returned a non-JSON body", status_code=response.status_code) from exc


def fetch_stats(user_id: str) -> Any:
    return request("GET", f"/api/stats/{quote(str(user_id), safe='')}")
