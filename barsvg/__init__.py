"""barsvg package exports.

Preferred high-level API:
    from barsvg import BarChartData, BarChartConfig, render_bar_chart
"""

from .api import BarChart, render_bar_chart
from .compute.geometry import BarRect, FrameMetrics, compute_bar, strategy_for
from .compute.scale import ScaleResult, compute_scale
from .config import BarChartConfig, Orientation, StackMode
from .data import BarChartData, Dataset
from .errors import ChartConfigError, ChartDataError
from .render.category_axis import CategoryAxis
from .render.pipeline import ChartFrame, RenderPipeline
from .render.svg_sink import SvgMarkupSink

__version__ = "0.1.0"

__all__ = [
    "BarChart",
    "BarChartConfig",
    "BarChartData",
    "BarRect",
    "CategoryAxis",
    "ChartConfigError",
    "ChartDataError",
    "ChartFrame",
    "Dataset",
    "FrameMetrics",
    "Orientation",
    "RenderPipeline",
    "ScaleResult",
    "StackMode",
    "SvgMarkupSink",
    "compute_bar",
    "compute_scale",
    "render_bar_chart",
    "strategy_for",
]
