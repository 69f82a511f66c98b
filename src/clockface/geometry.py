"""Clock geometry: angles to points on the face.

Angles are radians measured clockwise from 12 o'clock. SVG's y axis points
down, so the screen angle is offset by 3π/2 before taking cos/sin. All
points are absolute: the face center is ``(center, center)``.

The dial is a 24-hour dial: the hour hand makes one turn per day.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

TAU = 2 * math.pi

# Screen angle of 12 o'clock
CLOCK_OFFSET = 3 * math.pi / 2

HOUR_TICKS = 24
MINUTE_TICKS = HOUR_TICKS * 5
HOUR_TICK_INSET = 20.0
MINUTE_TICK_INSET = 10.0


@dataclass(frozen=True, slots=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class Segment:
    start: Point
    end: Point


@dataclass(frozen=True, slots=True)
class HandAngles:
    """Angles of the three hands, in radians."""

    hour: float
    minute: float
    second: float


def polar_point(angle: float, radius: float, center: float) -> Point:
    """Return the point ``radius`` away from the center at clock ``angle``.

    Example:
        >>> p = polar_point(0.0, 10.0, 10.0)
        >>> round(p.x, 6), round(p.y, 6)
        (10.0, 0.0)
    """
    screen = angle + CLOCK_OFFSET
    return Point(radius * math.cos(screen) + center, radius * math.sin(screen) + center)


def radial_segment(angle: float, center: float, start_r: float, end_r: float) -> Segment:
    """Segment along the ray at ``angle`` from ``start_r`` to ``end_r``."""
    return Segment(polar_point(angle, start_r, center), polar_point(angle, end_r, center))


def tick_segment(index: int, count: int, r: float, inset: float) -> Segment:
    """Segment of the ``index``-th of ``count`` evenly spaced ticks.

    Runs from the rim inward by ``inset``. The face is centered at ``(r, r)``.
    """
    angle = TAU / count * index
    return radial_segment(angle, r, r, r - inset)


def hand_angles(hour: float, minute: float, second: float) -> HandAngles:
    """Return hand angles for a time of day.

    Minutes and seconds carry into the slower hands, so 12:30 puts the hour
    hand halfway between 12 and 13.
    """
    effective_hour = hour + minute / 60 + second / 3600
    effective_minute = minute + second / 60
    return HandAngles(
        hour=effective_hour / HOUR_TICKS * TAU,
        minute=effective_minute / 60 * TAU,
        second=second / 60 * TAU,
    )


@dataclass(frozen=True, slots=True)
class HandSpan:
    """Radial extent of one hand's opaque segment."""

    start_r: float
    end_r: float


def hand_spans(r: float) -> dict[str, HandSpan]:
    """Radial extents: hour inner third, minute middle third, second outer third."""
    return {
        "hour": HandSpan(0.0, r / 3),
        "minute": HandSpan(r / 3, 2 * r / 3),
        "second": HandSpan(2 * r / 3, r),
    }


__all__ = [
    "CLOCK_OFFSET",
    "HOUR_TICKS",
    "HOUR_TICK_INSET",
    "MINUTE_TICKS",
    "MINUTE_TICK_INSET",
    "HandAngles",
    "HandSpan",
    "Point",
    "Segment",
    "TAU",
    "hand_angles",
    "hand_spans",
    "polar_point",
    "radial_segment",
    "tick_segment",
]
