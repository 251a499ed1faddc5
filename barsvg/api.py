"""High-level entry point for drawing a bar chart in one call.

:func:`render_bar_chart` computes the value-axis scale once, derives the
frame's pixel sizes from it, runs the render pipeline into an
:class:`~barsvg.render.svg_sink.SvgMarkupSink` and returns everything a page
needs to lay the chart out: the SVG fragment, the scale, the bar rectangles
and the labels of both axes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Union

from .compute.geometry import BarRect, FrameMetrics
from .compute.scale import ScaleResult
from .config import BarChartConfig
from .data import BarChartData
from .errors import ChartDataError
from .render.category_axis import CategoryAxis
from .render.pipeline import RenderPipeline
from .render.svg_sink import SvgMarkupSink

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd  # type: ignore

DataLike = Union[BarChartData, "pd.DataFrame"]


@dataclass
class BarChart:
    """Result of one render pass.

    Attributes:
        svg: Bars, value labels and hover regions as SVG elements, in graph
            coordinates (origin at the top-left of the plotting area).
        scale: Value-axis scale the bars were measured against.
        bars: Bar rectangles in drawing order (fields, then datasets).
        category_labels: Field labels in axis order.
        value_labels: Tick labels of the value axis with grouped digits.
        frame: Pixel sizes the bars were laid out with.
    """

    svg: str
    scale: ScaleResult
    bars: list[BarRect]
    category_labels: list[str]
    value_labels: list[str]
    frame: FrameMetrics

    def _repr_svg_(self) -> str:  # pragma: no cover - visual
        return (
            f'<svg xmlns="http://www.w3.org/2000/svg" width="{self.frame.graph_width}" '
            f'height="{self.frame.graph_height}">{self.svg}</svg>'
        )


def _coerce_input(data: DataLike) -> BarChartData:
    if isinstance(data, BarChartData):
        return data
    try:
        import pandas as pd  # type: ignore

        if isinstance(data, pd.DataFrame):
            return BarChartData.from_frame(data)
    except ImportError:
        pass
    raise ChartDataError(
        f"Unsupported data type {type(data).__name__}. Provide BarChartData or a pandas DataFrame."
    )


def render_bar_chart(
    data: DataLike,
    config: Optional[BarChartConfig] = None,
    width: float = 500,
    height: float = 300,
) -> BarChart:
    """Lay out and draw a bar chart.

    Args:
        data: Fields and datasets, or a DataFrame whose index holds the fields
            and whose numeric columns hold the datasets.
        config: Chart options; defaults to a vertical grouped chart.
        width: Width of the plotting area in pixels.
        height: Height of the plotting area in pixels.

    Returns:
        A :class:`BarChart`.

    Raises:
        ChartDataError: If the data is empty or not a supported type.
    """
    cfg = config or BarChartConfig()
    chart_data = _coerce_input(data)
    pipeline = RenderPipeline(cfg)

    scale = pipeline.scale_for(chart_data)
    frame = FrameMetrics.for_chart(
        width,
        height,
        field_count=len(chart_data.fields),
        tick_count=len(scale.tick_values),
        orientation=cfg.orientation,
        font_size=cfg.font_size,
    )
    sink = SvgMarkupSink(
        font_size=cfg.font_size,
        show_data_values=cfg.show_data_values,
        add_popups=cfg.add_popups,
    )
    bars = pipeline.render(chart_data, scale, frame, sink)

    return BarChart(
        svg=sink.markup(),
        scale=scale,
        bars=bars,
        category_labels=CategoryAxis(chart_data.fields, cfg.orientation).labels(),
        value_labels=scale.tick_labels(),
        frame=frame,
    )
