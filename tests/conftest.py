import pytest

from activity_report.settings import reset_settings

SETTINGS_ENV = [
    "STATS_API_BASE_URL",
    "STATS_API_TIMEOUT",
    "STATS_CACHE_TTL",
    "TIMELINE_RENDER_WIDTH",
    "TIMELINE_TICK_MINUTES",
    "REPORT_TIMEZONE",
    "REPORT_DATE_LOCALE",
]


class FakeResponse:
    """Just enough of ``requests.Response`` for the API client."""

    def __init__(self, status_code=200, payload=None, reason="OK", body_is_json=True):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self._body_is_json = body_is_json

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if not self._body_is_json:
            raise ValueError("Expecting value")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def stats_payload():
    return {
        "today": {
            "is_rest_day": False,
            "morning_poll_completed": True,
            "screen_time_goal": 120,
            "screen_time_actual": 140,
            "productive_time_actual": 95,
            "screen_time_breakdown": {"YouTube": 90, "Games": 50},
            "productive_time_breakdown": {"Coding": 60, "English": 35},
            "workout_planned": True,
            "workout_done": True,
        },
        "history": [
            {
                "date": "2024-05-06",
                "screen_time_goal": 120,
                "screen_time_actual": 100,
                "productive_time_actual": 30,
                "english_planned": True,
            },
            {"date": "2024-05-05", "is_rest_day": True},
        ],
    }


class RecordingStreamlit:
    """Stands in for the ``st`` module inside a tab and records what it draws."""

    def __init__(self, selection=""):
        self.selection = selection
        self.session_state = {}
        self.calls = []

    def markdown(self, body, **kwargs):
        self.calls.append(("markdown", body))

    def plotly_chart(self, fig, **kwargs):
        self.calls.append(("plotly_chart", fig))

    def info(self, body, **kwargs):
        self.calls.append(("info", body))

    def caption(self, body, **kwargs):
        self.calls.append(("caption", body))

    def selectbox(self, label, options, index=0, format_func=str, **kwargs):
        self.calls.append(("selectbox", [format_func(option) for option in options]))
        return self.selection

    @property
    def kinds(self):
        return [kind for kind, _ in self.calls]

    def texts(self, kind):
        return [body for call_kind, body in self.calls if call_kind == kind]


@pytest.fixture
def recording_st(monkeypatch):
    from activity_report import theme
    from activity_report.state import session_slices
    from activity_report.tabs import checklist_tab, history_tab, today_tab

    def install(selection=""):
        fake = RecordingStreamlit(selection)
        for module in (theme, session_slices, checklist_tab, history_tab, today_tab):
            monkeypatch.setattr(module, "st", fake)
        return fake

    return install
