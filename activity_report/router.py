import streamlit as st

from activity_report.header import render_report_header
from activity_report.tabs.checklist_tab import render_checklist_tab
from activity_report.tabs.history_tab import render_history_tab
from activity_report.tabs.today_tab import render_today_tab


def render_report(ctx, theme_meta=None):
    render_report_header(ctx, theme_meta)
    render_today_tab(ctx)
    render_checklist_tab(ctx)
    _render_history(ctx)


@st.fragment
def _render_history(ctx):
    render_history_tab(ctx)
