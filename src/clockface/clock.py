"""Clock face layout.

Assembles a complete clock as a shape tree. Children of the root, in
order:

1. the face circle
2. the label text
3. 24 hour ticks
4. 120 minute ticks
5. hour, minute and second hands, each as an opaque segment followed by a
   translucent "ghost" segment running out to the rim

This module only uses the public node API: constructors, ``add_child``,
``render`` and ``destroy``.
"""

from __future__ import annotations

from clockface import palette
from clockface.config import ClockConfig, get_config
from clockface.geometry import (
    HOUR_TICK_INSET,
    HOUR_TICKS,
    MINUTE_TICK_INSET,
    MINUTE_TICKS,
    hand_angles,
    hand_spans,
    radial_segment,
    tick_segment,
)
from clockface.managed_string import ManagedString
from clockface.nodes import Circle, Line, Root, ShapeNode, Text
from clockface.renderer import render_to_string
from clockface.timeinput import ClockTime
from clockface.utils.logger import get_logger

logger = get_logger(__name__)


def add_ticks(root: ShapeNode, r: float, count: int, inset: float, stroke: str) -> None:
    """Add ``count`` evenly spaced ticks reaching ``inset`` in from the rim."""
    color = ManagedString.from_value(stroke)
    for index in range(count):
        segment = tick_segment(index, count, r, inset)
        root.add_child(
            Line(segment.start.x, segment.start.y, segment.end.x, segment.end.y, color)
        )
    color.destroy()


def add_hand(
    root: ShapeNode, angle: float, r: float, start_r: float, end_r: float, color: str
) -> Line:
    """Add one hand segment from ``start_r`` to ``end_r`` at ``angle``."""
    segment = radial_segment(angle, r, start_r, end_r)
    return root.add_child(
        Line(segment.start.x, segment.start.y, segment.end.x, segment.end.y, color)
    )


def build_clock(time: ClockTime, config: ClockConfig | None = None) -> Root:
    """Build the shape tree for a clock showing ``time``.

    Args:
        time: Time of day to show
        config: Layout; defaults to the active config

    Returns:
        Root node owning the whole tree; the caller destroys it
    """
    config = (config or get_config()).validate()
    r = config.radius
    font_size = config.font_size

    root = Root(int(2 * r), int(2 * r))
    root.add_child(Circle(r, int(r), int(r), palette.FOREGROUND, palette.BACKGROUND))
    root.add_child(
        Text(
            int(r - (4 / 3) * (font_size - 2)),
            int(2 * font_size),
            int(font_size),
            config.label,
            palette.FOREGROUND,
        )
    )

    add_ticks(root, r, HOUR_TICKS, HOUR_TICK_INSET, palette.FOREGROUND)
    add_ticks(root, r, MINUTE_TICKS, MINUTE_TICK_INSET, palette.FOREGROUND)

    angles = hand_angles(time.hour, time.minute, time.second)
    spans = hand_spans(r)
    for name, angle, color in (
        ("hour", angles.hour, palette.HOUR),
        ("minute", angles.minute, palette.MINUTE),
        ("second", angles.second, palette.SECOND),
    ):
        span = spans[name]
        add_hand(root, angle, r, span.start_r, span.end_r, color)
        add_hand(root, angle, r, span.start_r, r, palette.pale(color))

    logger.debug("built clock for %s with %d shapes", time, root.child_count)
    return root


def render_clock(time: ClockTime, config: ClockConfig | None = None) -> str:
    """Build, render and release a clock, returning the SVG document."""
    with build_clock(time, config) as root:
        return render_to_string(root)


__all__ = ["add_hand", "add_ticks", "build_clock", "render_clock"]
