"""Bar geometry engine.

Converts one data value into the rectangle that represents it. Vertical and
horizontal charts run the same algorithm; an :class:`OrientationStrategy`
decides which pixel axis carries values and which carries fields.

Layout inside a field slot: 80% of the slot holds bars, the rest is margin.
A small gap (at most 10px) is taken off the bar area when enabled. Grouped
charts split the remaining width between datasets; stacked charts give every
dataset the full width and move each bar along the value axis instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..config import Orientation, StackMode
from ..errors import ChartConfigError

SLOT_FILL = 0.8
MAX_BAR_GAP = 10
LABEL_PADDING = 5


@dataclass(frozen=True)
class BarRect:
    """Pixel geometry of one bar; width and height are never negative."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class FrameMetrics:
    """Pixel sizes supplied by the chart frame.

    Attributes:
        graph_width: Width of the plotting area.
        graph_height: Height of the plotting area.
        field_width: Pixels per field slot (vertical) or per scale division
            (horizontal).
        field_height: Pixels per scale division (vertical) or per field slot
            (horizontal).
        font_size: Font size of value labels.
    """

    graph_width: float
    graph_height: float
    field_width: float
    field_height: float
    font_size: float = 12

    def __post_init__(self) -> None:
        for name in ("graph_width", "graph_height", "field_width", "field_height", "font_size"):
            value = getattr(self, name)
            if not value > 0:
                raise ChartConfigError(f"{name} must be > 0, got {value!r}")

    @classmethod
    def for_chart(
        cls,
        graph_width: float,
        graph_height: float,
        field_count: int,
        tick_count: int,
        orientation: Orientation,
        font_size: float = 12,
    ) -> "FrameMetrics":
        """Derive slot sizes the way a chart frame lays out its axes.

        The category axis is cut into one slot per field; the value axis is
        cut into ``tick_count - 1`` scale divisions.
        """
        if field_count < 1:
            raise ChartConfigError("field_count must be >= 1")
        divisions = max(tick_count - 1, 1)
        if orientation is Orientation.VERTICAL:
            field_width = graph_width / field_count
            field_height = graph_height / divisions
        else:
            field_width = graph_width / divisions
            field_height = graph_height / field_count
        return cls(graph_width, graph_height, field_width, field_height, font_size)


@dataclass(frozen=True)
class OrientationStrategy:
    """Axis roles for one orientation.

    ``value_unit`` is the pixel length of one scale division and
    ``category_unit`` the pixel length of one field slot. A value equal to
    the effective minimum maps to ``baseline_origin``; larger values move by
    ``growth_sign`` per unit. Field slots start at ``category_origin`` and
    advance in ``category_sign`` direction.
    """

    orientation: Orientation
    value_unit: float
    category_unit: float
    baseline_origin: float
    growth_sign: int
    category_origin: float
    category_sign: int
    font_size: float

    @property
    def label_style_hint(self) -> str:
        if self.orientation is Orientation.HORIZONTAL:
            return "text-anchor: start; "
        return ""

    def value_to_pixel(self, value: float, effective_min: float, scale_division: float) -> float:
        offset = (value - effective_min) / scale_division * self.value_unit
        return self.baseline_origin + self.growth_sign * offset

    def slot_start(self, field_index: int) -> float:
        """Lowest pixel coordinate of a field's slot on the category axis."""
        if self.category_sign > 0:
            return self.category_origin + self.category_unit * field_index
        return self.category_origin - self.category_unit * (field_index + 1)

    def make_rect(self, category_pos: float, thickness: float, value_pos: float, length: float) -> BarRect:
        if self.orientation is Orientation.VERTICAL:
            return BarRect(x=category_pos, y=value_pos, width=thickness, height=length)
        return BarRect(x=value_pos, y=category_pos, width=length, height=thickness)

    def value_label_anchor(self, rect: BarRect) -> tuple[float, float]:
        """Where the value label of ``rect`` goes: past the bar's far end."""
        if self.orientation is Orientation.VERTICAL:
            return rect.x + rect.width / 2.0, rect.y - self.font_size / 2
        return (
            rect.x + rect.width + LABEL_PADDING,
            rect.y + rect.height / 2 + self.font_size / 2,
        )

    def hover_anchor(self, rect: BarRect) -> tuple[float, float]:
        if self.orientation is Orientation.VERTICAL:
            return rect.x + rect.width / 2.0, rect.y
        return rect.x + rect.width, rect.y + rect.height / 2 + self.font_size / 2


def strategy_for(orientation: Orientation, frame: FrameMetrics) -> OrientationStrategy:
    """Build the strategy for ``orientation`` from the frame's pixel sizes."""
    if orientation is Orientation.VERTICAL:
        # values grow upward from the bottom edge, fields run left to right
        return OrientationStrategy(
            orientation=orientation,
            value_unit=frame.field_height,
            category_unit=frame.field_width,
            baseline_origin=frame.graph_height,
            growth_sign=-1,
            category_origin=0.0,
            category_sign=1,
            font_size=frame.font_size,
        )
    # values grow rightward from the left edge, fields run bottom to top
    return OrientationStrategy(
        orientation=orientation,
        value_unit=frame.field_width,
        category_unit=frame.field_height,
        baseline_origin=0.0,
        growth_sign=1,
        category_origin=frame.graph_height,
        category_sign=-1,
        font_size=frame.font_size,
    )


def bar_thickness(slot: float, dataset_count: int, stack_mode: StackMode, bar_gap: bool = True) -> float:
    """Width of one bar across the category axis."""
    slot_width = slot * SLOT_FILL
    gap = min(MAX_BAR_GAP, slot_width / 2) if bar_gap else 0
    usable = slot_width - gap
    if stack_mode is StackMode.GROUPED:
        return usable / dataset_count
    return usable


def value_interval(value: float, effective_min: float, stacked_base: float = 0) -> tuple[float, float]:
    """Span ``(lo, hi)`` a bar covers in value space.

    cases (stacked_base = 0):
        value  min   span
         +ve   +ve   min .. value
         +ve   -ve   0 .. value
         -ve   -ve   value .. 0
    """
    if value >= 0:
        lo, hi = stacked_base, stacked_base + value
    else:
        lo, hi = stacked_base + value, stacked_base
    if effective_min > 0:
        lo = max(lo, effective_min)
        hi = max(hi, lo)
    return lo, hi


def compute_bar(
    value: float,
    dataset_index: int,
    dataset_count: int,
    field_index: int,
    strategy: OrientationStrategy,
    effective_min: float,
    scale_division: float,
    stack_mode: StackMode = StackMode.GROUPED,
    bar_gap: bool = True,
    stacked_base: float = 0,
) -> BarRect:
    """Compute the rectangle for ``value`` of dataset ``dataset_index`` at field ``field_index``.

    Args:
        value: The data value.
        dataset_index: Position of the dataset in insertion order.
        dataset_count: Number of datasets in the chart.
        field_index: Position of the field on the category axis.
        strategy: Axis roles and pixel sizes; see :func:`strategy_for`.
        effective_min: Bottom of the value axis after clamping.
        scale_division: Value increment per ``strategy.value_unit`` pixels.
        stack_mode: Grouped or stacked layout.
        bar_gap: Whether to leave the small gap inside the slot.
        stacked_base: Sum of the same-sign values stacked below this bar.
            Only meaningful in stacked mode.

    Returns:
        The bar's :class:`BarRect`.
    """
    if dataset_count < 1 or not 0 <= dataset_index < dataset_count:
        raise ValueError(f"dataset_index {dataset_index} out of range for {dataset_count} datasets")

    slot = strategy.category_unit
    thickness = bar_thickness(slot, dataset_count, stack_mode, bar_gap)

    if stack_mode is StackMode.GROUPED:
        offset = (slot / dataset_count * 0.2) * (dataset_index + 1)
        offset += thickness * dataset_index
    else:
        # siblings share one origin across the category axis
        offset = slot * 0.2
    category_pos = strategy.slot_start(field_index) + offset

    lo, hi = value_interval(value, effective_min, stacked_base)
    length = (hi - lo) / scale_division * strategy.value_unit
    value_pos = min(
        strategy.value_to_pixel(lo, effective_min, scale_division),
        strategy.value_to_pixel(hi, effective_min, scale_division),
    )
    return strategy.make_rect(category_pos, thickness, value_pos, length)
