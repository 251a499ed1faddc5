"""Render pass: fields x datasets -> rectangles, value labels, hover targets.

The pipeline owns no drawing code. It hands every computed bar to a
:class:`ChartFrame`, the collaborator that turns coordinates into markup.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

from ..compute.geometry import BarRect, FrameMetrics, compute_bar, strategy_for
from ..compute.scale import ScaleResult, compute_scale
from ..config import PALETTE_SIZE, BarChartConfig
from ..data import BarChartData
from .format_utils import raw_text, separate_comma


@runtime_checkable
class ChartFrame(Protocol):
    """Receiver of the calls a render pass makes for each bar."""

    def draw_rect(self, rect: BarRect, style_class: str) -> None:
        ...

    def render_value_label(
        self, x: float, y: float, formatted_value: str, style_hint: str = ""
    ) -> None:
        ...

    def render_hover_target(self, x: float, y: float, raw_value: str) -> None:
        ...


class RenderPipeline:
    """Drives one or more render passes with a fixed configuration.

    The pipeline keeps no state between passes: the scale is computed by
    :meth:`scale_for` and handed back to :meth:`render` by the caller.
    """

    def __init__(self, config: Optional[BarChartConfig] = None):
        self.config = config or BarChartConfig()
        self.logger = self.config.logger or logging.getLogger(__name__)

    def value_range(self, data: BarChartData) -> tuple[float, float]:
        cfg = self.config
        return (
            data.min_value(cfg.stack_mode, cfg.min_scale_value),
            data.max_value(cfg.stack_mode),
        )

    def scale_for(self, data: BarChartData) -> ScaleResult:
        """Compute the value-axis scale for ``data``; call once per pass."""
        cfg = self.config
        min_value, max_value = self.value_range(data)
        return compute_scale(
            min_value,
            max_value,
            override=cfg.scale_division_override,
            integers_only=cfg.scale_integers_only,
            extend_max=cfg.is_vertical,
        )

    def render(
        self,
        data: BarChartData,
        scale: ScaleResult,
        frame: FrameMetrics,
        sink: ChartFrame,
    ) -> list[BarRect]:
        """Draw every (field, dataset) pair into ``sink``.

        Fields are visited in order and, inside a field, datasets in insertion
        order. Each pair produces exactly one ``draw_rect``, one
        ``render_value_label`` and one ``render_hover_target`` call.

        Args:
            data: Fields and datasets to draw.
            scale: Result of :meth:`scale_for` for the same data.
            frame: Pixel sizes from the chart frame.
            sink: Receiver of the drawing calls.

        Returns:
            The bar rectangles in drawing order.
        """
        cfg = self.config
        strategy = strategy_for(cfg.orientation, frame)
        min_value, _ = self.value_range(data)
        effective_min = scale.effective_min(min_value)
        n_datasets = len(data.datasets)

        if n_datasets > PALETTE_SIZE:
            self.logger.warning(
                "%d datasets exceed the %d fill styles of the default stylesheet; "
                "classes fill%d and above need custom styling",
                n_datasets,
                PALETTE_SIZE,
                PALETTE_SIZE + 1,
            )
        self.logger.debug(
            "rendering %d fields x %d datasets (%s, %s), scale division %s from %s",
            len(data.fields),
            n_datasets,
            cfg.orientation.value,
            cfg.stack_mode.value,
            scale.scale_division,
            effective_min,
        )

        bars: list[BarRect] = []
        for field_index in range(len(data.fields)):
            # running totals of what is already stacked above and below zero
            above = 0
            below = 0
            for dataset_index, dataset in enumerate(data.datasets):
                value = dataset.values[field_index]
                base = 0
                if cfg.is_stacked:
                    base = above if value >= 0 else below

                rect = compute_bar(
                    value,
                    dataset_index,
                    n_datasets,
                    field_index,
                    strategy,
                    effective_min,
                    scale.scale_division,
                    cfg.stack_mode,
                    bar_gap=cfg.bar_gap_enabled,
                    stacked_base=base,
                )
                if value >= 0:
                    above += value
                else:
                    below += value

                sink.draw_rect(rect, f"fill{dataset_index + 1}")
                label_x, label_y = strategy.value_label_anchor(rect)
                sink.render_value_label(
                    label_x, label_y, separate_comma(value), strategy.label_style_hint
                )
                # number formatting never applies to popups
                hover_x, hover_y = strategy.hover_anchor(rect)
                sink.render_hover_target(hover_x, hover_y, raw_text(value))
                bars.append(rect)

        return bars
