import streamlit as st

from activity_report.days import format_date_label
from activity_report.theme import toggle_theme


def render_report_header(ctx, theme_meta=None):
    title_cols = st.columns([0.9, 0.1])
    with title_cols[0]:
        st.markdown("<div class='page-title'>📊 Commander's report</div>", unsafe_allow_html=True)
    if theme_meta:
        with title_cols[1]:
            if st.button(theme_meta["THEME_TOGGLE_ICON"], key="toggle_theme_mode", help=theme_meta["THEME_TOGGLE_HELP"]):
                toggle_theme()
                st.rerun()
    st.markdown(
        "<div class='small-label' style='text-align:center;margin-bottom:10px;'>"
        f"{format_date_label(ctx.today_date, ctx.settings.date_locale)}</div>",
        unsafe_allow_html=True,
    )
