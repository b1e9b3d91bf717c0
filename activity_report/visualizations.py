from __future__ import annotations

import html

import plotly.graph_objects as go

from activity_report.constants import GOAL_COLOR, SCREEN_TIME_COLOR
from activity_report.metrics import is_over_goal
from activity_report.theme import get_active_theme


def _active_theme():
    return get_active_theme()[1]


def _px(value):
    return f"{round(float(value), 2):g}px"


def apply_common_plot_style(fig, title, theme=None, show_xgrid=False, show_ygrid=True):
    theme = theme or _active_theme()
    fig.update_layout(
        title=dict(text=title, x=0.5, xanchor="center"),
        title_font=dict(color=theme["border"], size=26, family="Rajdhani"),
        paper_bgcolor="rgba(0,0,0,0)",
        plot_bgcolor="rgba(0,0,0,0)",
        font=dict(color=theme["text_main"], family="Rajdhani"),
        margin=dict(l=40, r=20, t=60, b=30),
        xaxis=dict(
            showgrid=show_xgrid,
            gridcolor=theme["plot_grid"],
            tickfont=dict(color=theme["text_main"], size=18),
            zeroline=False,
        ),
        yaxis=dict(
            showgrid=show_ygrid,
            gridcolor=theme["plot_grid"],
            zeroline=False,
            rangemode="tozero",
            tickfont=dict(color=theme["text_main"], size=16),
        ),
        showlegend=False,
    )
    return fig


def screen_time_chart(day, theme=None, height=360):
    over_goal = is_over_goal(day)
    fig = go.Figure(
        data=go.Bar(
            x=["Actual", "Goal"],
            y=[day.screen_time_actual, day.screen_time_goal],
            marker=dict(
                color=["rgba(255, 59, 95, 0.9)" if over_goal else SCREEN_TIME_COLOR, GOAL_COLOR],
                line=dict(color=[SCREEN_TIME_COLOR, GOAL_COLOR], width=[4 if over_goal else 2, 2]),
            ),
            width=0.4,
            hovertemplate="%{x}: %{y} min<extra></extra>",
        )
    )
    apply_common_plot_style(fig, "Screen time", theme=theme)
    fig.update_layout(height=height)
    return fig


def history_chart(frame, theme=None, height=300):
    theme = theme or _active_theme()
    dates = [value.strftime("%b %d") for value in frame["date"]]
    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=dates,
            y=list(frame["screen_time_actual"]),
            name="Screen time",
            mode="lines+markers",
            line=dict(color=SCREEN_TIME_COLOR, width=2),
            marker=dict(size=8, color=SCREEN_TIME_COLOR),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=dates,
            y=list(frame["screen_time_goal"]),
            name="Goal",
            mode="lines",
            line=dict(color=GOAL_COLOR, width=2, dash="dash"),
        )
    )
    apply_common_plot_style(fig, "Screen time, recent days", theme=theme)
    fig.update_layout(height=height, showlegend=True)
    fig.update_xaxes(tickfont=dict(size=12, color=theme["text_soft"]))
    return fig


def minute_ruler_html(ticks, track_width):
    markers = []
    for tick in ticks:
        css_kind = "centered" if tick.centered else "pinned"
        markers.append(
            f"<div class='minute-tick {css_kind}' style='left:{_px(tick.pixel_offset)};'>"
            f"{tick.minute_value} min"
            "<div class='minute-tick-mark'></div>"
            "</div>"
        )
    return f"<div class='minute-ruler' style='width:{_px(track_width)};'>{''.join(markers)}</div>"


def activity_track_html(segments, track_width):
    bars = []
    for segment in segments:
        classes = ["activity-segment"]
        if segment.is_highlighted:
            classes.append("exceeding")
        bars.append(
            f"<div class='{' '.join(classes)}' "
            f"title='{html.escape(segment.label, quote=True)}: {round(segment.minutes)} min' "
            f"style='left:{_px(segment.offset_pixels)};width:{_px(segment.width_pixels)};"
            f"background-color:{segment.color};'></div>"
        )
    return f"<div class='activity-track' style='width:{_px(track_width)};'>{''.join(bars)}</div>"


def legend_html(entries):
    rows = "".join(
        [
            (
                "<div class='legend-row'>"
                f"<div class='legend-swatch' style='background-color:{entry.color};'></div>"
                f"<span>{html.escape(entry.label)}</span>"
                "</div>"
            )
            for entry in entries
        ]
    )
    return f"<div class='activity-legend'>{rows}</div>"


def timeline_html(series):
    return (
        "<div class='card'>"
        f"<div class='section-title'>{html.escape(series.title)}</div>"
        "<div class='timeline-scroll'>"
        f"{minute_ruler_html(series.ticks, series.track_width)}"
        f"{activity_track_html(series.segments, series.track_width)}"
        "</div>"
        f"{legend_html(series.legend)}"
        "</div>"
    )
