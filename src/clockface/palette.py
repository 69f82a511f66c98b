"""Fixed color palette for the clock face.

Colors are ``#RRGGBB`` strings. Ghost hand segments use the same color with
an alpha suffix appended (``#RRGGBBAA``).
"""

from __future__ import annotations

FOREGROUND = "#A9B1D6"
BACKGROUND = "#20212E"
HOUR = "#FF7A93"
MINUTE = "#B9F27C"
SECOND = "#AD8EE6"

# Alpha byte appended for translucent segments
PALE_SUFFIX = "77"


def pale(color: str) -> str:
    """Return the translucent variant of ``color``.

    Example:
        >>> pale(HOUR)
        '#FF7A9377'
    """
    return f"{color}{PALE_SUFFIX}"


__all__ = ["BACKGROUND", "FOREGROUND", "HOUR", "MINUTE", "PALE_SUFFIX", "SECOND", "pale"]
