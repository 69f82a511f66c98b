"""Time input parsing.

Accepts three whitespace-separated numbers: hour, minute, second.
Fractional values are allowed (``"10 30.5 0"``); anything else raises
``TimeInputError``. Values are not range-checked, a 25th hour simply keeps
turning the hands.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from clockface.errors import TimeInputError


@dataclass(frozen=True, slots=True)
class ClockTime:
    """Time of day shown by the clock."""

    hour: float
    minute: float
    second: float

    def __str__(self) -> str:
        return f"{self.hour:g}:{self.minute:02g}:{self.second:02g}"


def parse_time(text: str) -> ClockTime:
    """Parse ``"H M S"`` into a ClockTime.

    Example:
        >>> parse_time("13 45 7")
        ClockTime(hour=13.0, minute=45.0, second=7.0)

    Raises:
        TimeInputError: If the input is not exactly three finite numbers
    """
    fields = text.split()
    if len(fields) != 3:
        raise TimeInputError(text, f"expected 3 numbers, got {len(fields)}")
    values: list[float] = []
    for field in fields:
        try:
            value = float(field)
        except ValueError:
            raise TimeInputError(text, f"not a number: {field!r}") from None
        if not math.isfinite(value):
            raise TimeInputError(text, f"not a finite number: {field!r}")
        values.append(value)
    return ClockTime(*values)


__all__ = ["ClockTime", "parse_time"]
