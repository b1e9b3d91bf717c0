import streamlit as st

from activity_report.context import ReportContext
from activity_report.data.loaders import ReportLoadError, build_report, load_settings
from activity_report.days import current_date
from activity_report.logging_config import configure_logging
from activity_report.router import render_report
from activity_report.theme import inject_theme_css

configure_logging()
st.set_page_config(page_title="Daily activity report", layout="centered")
theme_meta = inject_theme_css()

user_id = st.query_params.get("user_id")

try:
    settings = load_settings()
    with st.spinner("Loading..."):
        stats = build_report(user_id)
except ReportLoadError as exc:
    st.error(f"Error: {exc}")
    st.stop()

context = ReportContext(
    user_id=user_id,
    stats=stats,
    today_date=current_date(settings.report_timezone),
    settings=settings,
)

render_report(context, theme_meta)
