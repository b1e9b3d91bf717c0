"""Goal-relative activity timeline layout.

Everything here is a pure function of its arguments: a breakdown of
``label -> minutes`` and a goal in minutes go in, positioned segments, ruler
ticks and legend entries come out. Rendering lives in ``visualizations``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from activity_report.constants import ACTIVITY_PALETTE, RENDER_WIDTH, TICK_STEP_MINUTES


@dataclass(frozen=True)
class TickMark:
    minute_value: int
    pixel_offset: float
    centered: bool = True


@dataclass(frozen=True)
class ActivitySegment:
    label: str
    minutes: float
    drawn_minutes: float
    color: str
    offset_pixels: float
    width_pixels: float
    is_exceeding: bool = False
    is_highlighted: bool = False


@dataclass(frozen=True)
class LegendEntry:
    label: str
    color: str


@dataclass(frozen=True)
class TimelineSeries:
    title: str
    goal_minutes: float
    productive: bool
    track_width: float
    ticks: List[TickMark] = field(default_factory=list)
    segments: List[ActivitySegment] = field(default_factory=list)
    legend: List[LegendEntry] = field(default_factory=list)

    @property
    def exceeded(self) -> bool:
        return any(segment.is_exceeding for segment in self.segments)

    @property
    def total_minutes(self) -> float:
        return series_total(self.segments)


def scale(goal_minutes, width=RENDER_WIDTH) -> float:
    """Pixels per minute so that the goal spans ``width``; 1.0 without a goal."""
    if goal_minutes and goal_minutes > 0:
        return width / goal_minutes
    return 1.0


def goal_width(goal_minutes, width=RENDER_WIDTH) -> float:
    return max(0.0, goal_minutes or 0) * scale(goal_minutes, width)


def ruler(goal_minutes, step=TICK_STEP_MINUTES, width=RENDER_WIDTH) -> List[TickMark]:
    """Tick marks every ``step`` minutes up to the goal rounded up to a whole step.

    The zero tick is pinned to the left edge; the others are centred on their
    offset.
    """
    goal_minutes = max(0.0, goal_minutes or 0)
    factor = scale(goal_minutes, width)
    total_ticks = math.ceil(goal_minutes / step)
    ticks = []
    for index in range(total_ticks + 1):
        minute_value = index * step
        if index == 0:
            ticks.append(TickMark(minute_value=0, pixel_offset=0.0, centered=False))
            continue
        ticks.append(TickMark(minute_value=minute_value, pixel_offset=minute_value * factor))
    return ticks


def color_for(index, palette: Sequence[str] = ACTIVITY_PALETTE) -> str:
    return palette[index % len(palette)]


def legend(labels: Iterable[str], palette: Sequence[str] = ACTIVITY_PALETTE) -> List[LegendEntry]:
    return [LegendEntry(label=label, color=color_for(idx, palette)) for idx, label in enumerate(labels)]


def _breakdown_items(breakdown) -> List[Tuple[str, float]]:
    if breakdown is None:
        return []
    if isinstance(breakdown, Mapping):
        pairs = breakdown.items()
    else:
        pairs = breakdown
    items = []
    for label, minutes in pairs:
        try:
            minutes = float(minutes)
        except (TypeError, ValueError):
            continue
        if not math.isfinite(minutes):
            continue
        items.append((str(label), max(0.0, minutes)))
    return items


def layout_segments(
    breakdown,
    goal_minutes,
    productive=False,
    width=RENDER_WIDTH,
    palette: Sequence[str] = ACTIVITY_PALETTE,
) -> List[ActivitySegment]:
    """Lay out one series of activities against a goal.

    Widths are clamped to the goal budget left after the earlier segments, but
    the running total uses the real durations. Only the last segment can be
    flagged as exceeding; it is highlighted unless the series is productive.
    Without a goal the widths follow the durations at the fallback scale.
    """
    items = _breakdown_items(breakdown)
    goal_minutes = max(0.0, goal_minutes or 0)
    factor = scale(goal_minutes, width)
    last_index = len(items) - 1

    segments = []
    accumulated = 0.0
    offset = 0.0
    for index, (label, minutes) in enumerate(items):
        drawn = max(0.0, min(minutes, goal_minutes - max(0.0, accumulated)))
        if goal_minutes > 0:
            width_pixels = drawn * factor
        else:
            width_pixels = minutes * factor
        is_exceeding = index == last_index and accumulated + minutes > goal_minutes
        segments.append(
            ActivitySegment(
                label=label,
                minutes=minutes,
                drawn_minutes=drawn,
                color=color_for(index, palette),
                offset_pixels=offset,
                width_pixels=width_pixels,
                is_exceeding=is_exceeding,
                is_highlighted=is_exceeding and not productive,
            )
        )
        accumulated += minutes
        offset += width_pixels
    return segments


def series_total(segments: Iterable[ActivitySegment]) -> float:
    return sum(segment.minutes for segment in segments)


def build_series(
    title,
    breakdown,
    goal_minutes,
    productive=False,
    width=RENDER_WIDTH,
    step=TICK_STEP_MINUTES,
) -> Optional[TimelineSeries]:
    segments = layout_segments(breakdown, goal_minutes, productive=productive, width=width)
    if not segments:
        return None
    drawn_width = sum(segment.width_pixels for segment in segments)
    return TimelineSeries(
        title=title,
        goal_minutes=max(0.0, goal_minutes or 0),
        productive=productive,
        track_width=max(goal_width(goal_minutes, width), drawn_width),
        ticks=ruler(goal_minutes, step=step, width=width),
        segments=segments,
        legend=legend([segment.label for segment in segments]),
    )
