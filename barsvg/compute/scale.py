"""Value-axis scale derivation.

Turns the value range of a chart into a "nice" tick increment (the scale
division) and the ordered tick values of the value axis. The result is
computed once per render pass and passed on to the geometry engine, which
measures every bar in units of the same scale division.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..errors import ChartDataError
from ..render.format_utils import separate_comma

# Float noise tolerance when comparing quotients against whole numbers.
_EPS_DIGITS = 9


@dataclass(frozen=True)
class ScaleResult:
    """Scale of the value axis.

    Attributes:
        scale_division: Increment between adjacent ticks, always > 0.
        tick_values: Ascending tick values of the value axis.
        clamped_min_value: Set only when the minimum was negative; the
            minimum rounded outward to a multiple of ``scale_division``.
    """

    scale_division: float
    tick_values: tuple
    clamped_min_value: Optional[float] = None

    def effective_min(self, min_value: float) -> float:
        """Minimum that geometry measures from."""
        if self.clamped_min_value is not None:
            return self.clamped_min_value
        return min_value

    def tick_labels(self) -> list[str]:
        return [separate_comma(v) for v in self.tick_values]


def _tidy(value: float) -> float:
    if value == 0:
        return 0
    return round(value, 10)


def _is_multiple(value: float, division: float) -> bool:
    q = value / division
    return abs(q - round(q)) < 10**-_EPS_DIGITS


def nice_division(value_range: float) -> float:
    """Round a tenth of ``value_range`` up within its own order of magnitude.

    ``range / 10`` is divided by the power of ten just below it and rounded up,
    so 2.3 becomes 3, 0.3 stays 0.3 and 47 becomes 50.
    """
    rough = value_range / 10
    x = math.ceil(math.log10(rough) - 1)
    if x >= 0:
        return math.ceil(round(rough / 10**x, _EPS_DIGITS)) * 10**x
    # divide by a positive power so the result is correctly rounded
    scale = 10 ** (-x)
    return math.ceil(round(rough * scale, _EPS_DIGITS)) / scale


def compute_scale(
    min_value: float,
    max_value: float,
    override: Optional[float] = None,
    integers_only: bool = False,
    extend_max: bool = True,
) -> ScaleResult:
    """Derive the value-axis scale for ``[min_value, max_value]``.

    Args:
        min_value: Bottom of the data range.
        max_value: Top of the data range.
        override: Fixed scale division replacing the computed one.
        integers_only: Round the division to an integer >= 1.
        extend_max: Add one division on top when ``max_value`` is not a
            multiple of it. Vertical charts extend, horizontal charts do not.

    Returns:
        The :class:`ScaleResult`. A zero-width range gives a single tick at 0
        with a scale division of 1.

    Raises:
        ChartDataError: If a bound is not finite or ``min_value > max_value``.
    """
    if not (np.isfinite(min_value) and np.isfinite(max_value)):
        raise ChartDataError(f"scale bounds must be finite, got [{min_value}, {max_value}]")
    if min_value > max_value:
        raise ChartDataError(f"scale minimum {min_value} is above maximum {max_value}")

    value_range = max_value - min_value
    if value_range == 0:
        return ScaleResult(scale_division=1, tick_values=(0,))

    division = nice_division(value_range)

    if override is not None:
        division = override

    if integers_only:
        division = 1 if division < 1 else int(math.floor(division + 0.5))

    top = max_value
    if extend_max and not _is_multiple(max_value, division):
        top = max_value + division

    start = min_value
    clamped = None
    if min_value < 0:
        steps = math.ceil(round(abs(min_value) / division, _EPS_DIGITS))
        clamped = _tidy(-(division * steps))
        start = clamped

    count = int(math.floor(round((top - start) / division, _EPS_DIGITS))) + 1
    ticks = tuple(_tidy(start + i * division) for i in range(count))
    return ScaleResult(scale_division=division, tick_values=ticks, clamped_min_value=clamped)
