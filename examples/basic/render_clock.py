"""Render a clock face for a fixed time and print the SVG."""

from clockface import ClockTime, render_clock

print(render_clock(ClockTime(13, 45, 7)))
