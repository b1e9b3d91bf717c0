import streamlit as st

from activity_report.data.loaders import history_frame
from activity_report.days import day_label, lookup, selectable_days
from activity_report.state import session_slices
from activity_report.tabs.checklist_tab import render_day_checklist
from activity_report.visualizations import history_chart

SLICE = "history"
WIDGET_KEY = "history.selected_date"


def _remember_selection():
    session_slices.set_value(SLICE, "selected_date", st.session_state.get(WIDGET_KEY) or "")


def render_history_tab(ctx):
    days = selectable_days(ctx.today, ctx.history, ctx.today_date)
    if not days:
        st.info("No data to show a checklist yet. Complete /morning.")
        return

    st.markdown("<div class='section-title'>Checklists for past days</div>", unsafe_allow_html=True)
    locale = ctx.settings.date_locale
    labels = {day.iso_date: day_label(day, locale) for day in days if day.date is not None}
    options = [""] + list(labels.keys())
    remembered = session_slices.get_str(SLICE, "selected_date")
    if remembered not in labels:
        remembered = ""
    selected = st.selectbox(
        "Day",
        options,
        index=options.index(remembered),
        format_func=lambda value: labels.get(value, "Pick a day"),
        key=WIDGET_KEY,
        on_change=_remember_selection,
        label_visibility="collapsed",
    )

    selected_day = lookup(days, selected)
    if selected_day is None:
        st.caption("Pick a day to view its checklist.")
    elif selected_day.is_rest_day:
        st.info("🏖️ This was a rest day. No data recorded.")
    else:
        render_day_checklist(selected_day)

    frame = history_frame(days)
    if not frame.empty:
        st.plotly_chart(history_chart(frame), use_container_width=True)
