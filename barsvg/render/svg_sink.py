"""SVG markup sink for the render pipeline.

Collects the bars, value labels and hover regions of a render pass as SVG
fragments. Canvas, axes, legend and stylesheet are left to the page that
embeds the fragments; bars only carry ``fillN`` classes for it to style.
"""

from __future__ import annotations

import html as _html

from ..compute.geometry import BarRect

POPUP_RADIUS = 10


class SvgMarkupSink:
    """Implements :class:`~barsvg.render.pipeline.ChartFrame` by emitting SVG.

    Args:
        font_size: Font size written on value labels.
        show_data_values: Emit ``<text>`` value labels.
        add_popups: Emit invisible hover regions carrying the raw value.
    """

    def __init__(self, font_size: float = 12, show_data_values: bool = True, add_popups: bool = False):
        self.font_size = font_size
        self.show_data_values = show_data_values
        self.add_popups = add_popups
        self.rects: list[str] = []
        self.labels: list[str] = []
        self.popups: list[str] = []

    def draw_rect(self, rect: BarRect, style_class: str) -> None:
        self.rects.append(
            f'<rect class="{_html.escape(style_class)}" x="{rect.x:.2f}" y="{rect.y:.2f}" '
            f'width="{rect.width:.2f}" height="{rect.height:.2f}"/>'
        )

    def render_value_label(self, x: float, y: float, formatted_value: str, style_hint: str = "") -> None:
        if not self.show_data_values:
            return
        style = f' style="{_html.escape(style_hint)}"' if style_hint else ""
        self.labels.append(
            f'<text class="dataPointLabel" x="{x:.2f}" y="{y:.2f}" '
            f'font-size="{self.font_size}"{style}>{_html.escape(formatted_value)}</text>'
        )

    def render_hover_target(self, x: float, y: float, raw_value: str) -> None:
        if not self.add_popups:
            return
        value = _html.escape(raw_value)
        self.popups.append(
            f'<circle class="dataPointPopupMask" cx="{x:.2f}" cy="{y:.2f}" r="{POPUP_RADIUS}" '
            f'fill="transparent" data-value="{value}"><title>{value}</title></circle>'
        )

    def markup(self) -> str:
        """All fragments in paint order: bars, then labels, then hover regions."""
        return "\n".join(self.rects + self.labels + self.popups)
