import html

import streamlit as st

from activity_report.metrics import checklist_rows, time_summary


def checklist_html(day):
    items = []
    for label, done in checklist_rows(day):
        status = "✅ Done!" if done else "❌ Not done"
        css_class = " class='done'" if done else ""
        items.append(f"<li{css_class}>{html.escape(label)}: {status}</li>")
    summary = "".join([f"<p>{html.escape(line)}</p>" for line in time_summary(day)])
    return f"{summary}<ul class='checklist'>{''.join(items)}</ul>"


def render_day_checklist(day):
    st.markdown(checklist_html(day), unsafe_allow_html=True)


def render_checklist_tab(ctx):
    today = ctx.today
    if today.morning_poll_completed and not today.is_rest_day:
        st.markdown("<div class='section-title'>Today's activity checklist</div>", unsafe_allow_html=True)
        render_day_checklist(today)
    elif today.is_rest_day:
        st.info("🏖️ Today is a rest day. No data recorded.")
    else:
        st.info("The checklist will be available after the morning survey (/morning).")
