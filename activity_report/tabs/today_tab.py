import streamlit as st

from activity_report.constants import PRODUCTIVE_SERIES_TITLE, SCREEN_SERIES_TITLE
from activity_report.timeline import build_series
from activity_report.visualizations import screen_time_chart, timeline_html


def build_today_series(today, width, step):
    """Both timeline series for today, empty ones left out.

    The productive series is measured against the screen-time goal as well.
    """
    goal = today.screen_time_goal
    candidates = [
        build_series(SCREEN_SERIES_TITLE, today.screen_time_breakdown, goal, productive=False, width=width, step=step),
        build_series(PRODUCTIVE_SERIES_TITLE, today.productive_time_breakdown, goal, productive=True, width=width, step=step),
    ]
    return [series for series in candidates if series is not None]


def render_today_tab(ctx):
    today = ctx.today
    if today.is_rest_day:
        return

    st.plotly_chart(screen_time_chart(today), use_container_width=True)

    for series in build_today_series(today, ctx.settings.render_width, ctx.settings.tick_minutes):
        st.markdown(timeline_html(series), unsafe_allow_html=True)
