from __future__ import annotations

"""Chart configuration for bar rendering.

All options are fixed at construction time; one config can drive any number
of render passes since nothing on it is mutated while drawing.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from .errors import ChartConfigError


class Orientation(Enum):
    """Which axis carries the values."""

    VERTICAL = "vertical"  # values on Y, fields left to right
    HORIZONTAL = "horizontal"  # values on X, fields bottom to top


class StackMode(Enum):
    """How sibling datasets share a field slot."""

    GROUPED = "grouped"
    STACKED = "stacked"


# Legacy names: "side" for bars next to each other, "top" for bars on top.
_STACK_ALIASES = {"side": StackMode.GROUPED, "top": StackMode.STACKED}

# Number of datasets the default stylesheet has fill classes for.
PALETTE_SIZE = 12


def _coerce_orientation(value: Union[str, Orientation]) -> Orientation:
    if isinstance(value, Orientation):
        return value
    try:
        return Orientation(str(value).lower())
    except ValueError:
        raise ChartConfigError(
            f"orientation must be 'vertical' or 'horizontal', got {value!r}"
        ) from None


def _coerce_stack_mode(value: Union[str, StackMode]) -> StackMode:
    if isinstance(value, StackMode):
        return value
    key = str(value).lower()
    if key in _STACK_ALIASES:
        return _STACK_ALIASES[key]
    try:
        return StackMode(key)
    except ValueError:
        raise ChartConfigError(
            f"stack_mode must be 'grouped' or 'stacked', got {value!r}"
        ) from None


@dataclass
class BarChartConfig:
    """Options understood by the scale calculator and the bar geometry engine.

    Attributes:
        orientation: ``VERTICAL`` draws columns, ``HORIZONTAL`` draws rows.
        stack_mode: ``GROUPED`` places datasets side by side inside a field
            slot; ``STACKED`` layers them along the value axis.
        scale_division_override: Fixed increment between value-axis ticks.
            Must be a finite number greater than zero.
        scale_integers_only: Round the tick increment to an integer >= 1.
        bar_gap_enabled: Leave a small gap (at most 10px) inside each slot.
        font_size: Font size of value labels, used to offset them from bars.
        min_scale_value: Force the bottom of the value axis. By default the
            axis starts at zero, or lower when the data has negative values.
        show_data_values: Whether the SVG sink writes value labels.
        add_popups: Whether the SVG sink writes hover hit regions.
        logger: Logger for render diagnostics; defaults to the module logger.
        log_level: Level applied to ``logger`` when one is given.
    """

    orientation: Orientation = Orientation.VERTICAL
    stack_mode: StackMode = StackMode.GROUPED
    scale_division_override: Optional[float] = None
    scale_integers_only: bool = False
    bar_gap_enabled: bool = True
    font_size: float = 12
    min_scale_value: Optional[float] = None
    # Markup sink toggles
    show_data_values: bool = True
    add_popups: bool = False
    # Logging
    logger: Optional[logging.Logger] = None
    log_level: int = logging.INFO

    def __post_init__(self) -> None:
        self.orientation = _coerce_orientation(self.orientation)
        self.stack_mode = _coerce_stack_mode(self.stack_mode)

        override = self.scale_division_override
        if override is not None:
            if not isinstance(override, (int, float)) or isinstance(override, bool):
                raise ChartConfigError(
                    f"scale_division_override must be a number, got {override!r}"
                )
            if not math.isfinite(override) or override <= 0:
                raise ChartConfigError(
                    f"scale_division_override must be finite and > 0, got {override!r}"
                )

        if not math.isfinite(self.font_size) or self.font_size <= 0:
            raise ChartConfigError(f"font_size must be > 0, got {self.font_size!r}")

        if self.min_scale_value is not None and not math.isfinite(self.min_scale_value):
            raise ChartConfigError(
                f"min_scale_value must be finite, got {self.min_scale_value!r}"
            )

        if self.logger is not None:
            self.logger.setLevel(self.log_level)

    @property
    def is_vertical(self) -> bool:
        return self.orientation is Orientation.VERTICAL

    @property
    def is_stacked(self) -> bool:
        return self.stack_mode is StackMode.STACKED
