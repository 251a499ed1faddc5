"""Numeric core: value-axis scale and bar geometry."""

from .geometry import BarRect, FrameMetrics, OrientationStrategy, compute_bar, strategy_for
from .scale import ScaleResult, compute_scale

__all__ = [
    "BarRect",
    "FrameMetrics",
    "OrientationStrategy",
    "ScaleResult",
    "compute_bar",
    "compute_scale",
    "strategy_for",
]
