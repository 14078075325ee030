"""Number helpers shared by the scale generators and writers."""

from __future__ import annotations

import math
from typing import Union

Number = Union[int, float]


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves going up (towards +inf)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def format_number(value: Number) -> str:
    """
    Render a number the way token files expect it.

    Integral floats drop the fractional part (``1.0`` → ``"1"``), everything
    else uses the shortest round-trip repr.
    """
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)
