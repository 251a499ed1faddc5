"""Tests for the high-level render_bar_chart entry point."""

import pandas as pd
import pytest

from barsvg import BarChart, BarChartConfig, BarChartData, ChartDataError, render_bar_chart


@pytest.fixture
def sales():
    data = BarChartData(["Jan", "Feb", "Mar"])
    data.add_data([12, 45, 21], title="Sales 2002")
    return data


class TestRenderBarChart:
    """End-to-end rendering into SVG markup."""

    def test_vertical_chart(self, sales):
        chart = render_bar_chart(sales, width=500, height=300)

        assert isinstance(chart, BarChart)
        assert chart.scale.scale_division == 5
        assert chart.value_labels == ["0", "5", "10", "15", "20", "25", "30", "35", "40", "45"]
        assert chart.category_labels == ["Jan", "Feb", "Mar"]
        assert len(chart.bars) == 3
        assert chart.svg.count("<rect") == 3
        assert ">45</text>" in chart.svg
        assert chart.frame.field_width == pytest.approx(500 / 3)
        assert chart.frame.field_height == pytest.approx(300 / 9)

    def test_tallest_bar_reaches_top(self, sales):
        chart = render_bar_chart(sales, width=500, height=300)
        feb = chart.bars[1]

        assert feb.y == pytest.approx(0)
        assert feb.height == pytest.approx(300)

    def test_horizontal_chart(self, sales):
        chart = render_bar_chart(sales, BarChartConfig(orientation="horizontal"), width=400, height=300)

        assert all(b.height == pytest.approx(chart.bars[0].height) for b in chart.bars)
        # first field sits at the bottom
        assert chart.bars[0].y > chart.bars[2].y
        assert "text-anchor: start; " in chart.svg

    def test_popups_and_labels_follow_config(self, sales):
        cfg = BarChartConfig(show_data_values=False, add_popups=True)
        chart = render_bar_chart(sales, cfg)

        assert "<text" not in chart.svg
        assert chart.svg.count("dataPointPopupMask") == 3

    def test_thousands_in_labels_not_in_popups(self):
        data = BarChartData(["Jan"])
        data.add_data([1234])
        chart = render_bar_chart(data, BarChartConfig(add_popups=True))

        assert ">1,234</text>" in chart.svg
        assert 'data-value="1234"' in chart.svg

    def test_dataframe_input(self):
        df = pd.DataFrame({"2002": [12, 45, 21], "2003": [-5, 30, 10]}, index=["Jan", "Feb", "Mar"])
        chart = render_bar_chart(df, BarChartConfig(stack_mode="stacked"))

        assert len(chart.bars) == 6
        assert 'class="fill2"' in chart.svg
        assert chart.scale.clamped_min_value is not None

    def test_unsupported_input(self):
        with pytest.raises(ChartDataError, match="Unsupported"):
            render_bar_chart([[1, 2, 3]])

    def test_empty_chart_raises(self):
        with pytest.raises(ChartDataError):
            render_bar_chart(BarChartData(["Jan"]))
