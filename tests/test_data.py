"""Tests for chart data validation and ingestion."""

import math

import numpy as np
import pandas as pd
import pytest

from barsvg.config import StackMode
from barsvg.data import BarChartData, Dataset
from barsvg.errors import ChartDataError


class TestAddData:
    """Datasets are validated when they are added."""

    def test_add_data_keeps_order_and_types(self):
        data = BarChartData(["Jan", "Feb", "Mar"])
        first = data.add_data([12, 45, 21], title="Sales 2002")
        data.add_data([1.5, 2, 3])

        assert isinstance(first, Dataset)
        assert [d.title for d in data.datasets] == ["Sales 2002", "Series 2"]
        assert first.values == (12, 45, 21)
        assert isinstance(first.values[0], int)
        assert len(data) == 2

    def test_length_mismatch_raises(self):
        data = BarChartData(["Jan", "Feb"])
        with pytest.raises(ChartDataError, match="2 fields"):
            data.add_data([1, 2, 3])

    @pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf, np.nan])
    def test_non_finite_raises(self, bad):
        data = BarChartData(["Jan", "Feb"])
        with pytest.raises(ChartDataError, match="not finite"):
            data.add_data([1, bad])

    @pytest.mark.parametrize("bad", ["3", None, True])
    def test_non_number_raises(self, bad):
        data = BarChartData(["Jan", "Feb"])
        with pytest.raises(ChartDataError, match="not a number"):
            data.add_data([1, bad])

    def test_failed_add_leaves_data_untouched(self):
        data = BarChartData(["Jan"])
        with pytest.raises(ChartDataError):
            data.add_data([1, 2])
        assert data.datasets == []

    def test_numpy_scalars_accepted(self):
        data = BarChartData(["Jan", "Feb"])
        data.add_data(np.array([1, 2], dtype=np.int64))
        assert data.max_value() == 2

    def test_fields_are_strings(self):
        assert BarChartData([2001, 2002]).fields == ("2001", "2002")


class TestValueRange:
    """Value range feeding the scale calculator."""

    def test_positive_data_starts_at_zero(self):
        data = BarChartData(["a", "b"])
        data.add_data([12, 45])

        assert data.min_value() == 0
        assert data.max_value() == 45
        assert isinstance(data.max_value(), int)

    def test_negative_minimum(self):
        data = BarChartData(["a", "b"])
        data.add_data([12, -8])

        assert data.min_value() == -8

    def test_all_negative_data_reaches_zero(self):
        data = BarChartData(["a", "b"])
        data.add_data([-3, -8])

        assert data.max_value() == 0
        assert data.min_value() == -8

    def test_fractional_values_stay_fractional(self):
        data = BarChartData(["a"])
        data.add_data([2.5])
        assert data.max_value() == 2.5

    def test_stacked_sums(self):
        data = BarChartData(["a", "b"])
        data.add_data([3, -1])
        data.add_data([4, -5])
        data.add_data([-2, 6])

        assert data.max_value(StackMode.STACKED) == 7
        assert data.min_value(StackMode.STACKED) == -6
        assert data.max_value(StackMode.GROUPED) == 6
        assert data.min_value(StackMode.GROUPED) == -5

    def test_min_scale_value_overrides(self):
        data = BarChartData(["a"])
        data.add_data([50])
        assert data.min_value(min_scale_value=20) == 20

    def test_empty_raises(self):
        with pytest.raises(ChartDataError, match="at least one"):
            BarChartData(["a"]).max_value()
        with pytest.raises(ChartDataError):
            BarChartData([]).min_value()


class TestFromFrame:
    """pandas DataFrame ingestion."""

    def test_index_as_fields(self):
        df = pd.DataFrame(
            {"2002": [12, 45, 21], "2003": [15, 30, 40]},
            index=["Jan", "Feb", "Mar"],
        )
        data = BarChartData.from_frame(df)

        assert data.fields == ("Jan", "Feb", "Mar")
        assert [d.title for d in data.datasets] == ["2002", "2003"]
        assert data.datasets[1].values == (15, 30, 40)

    def test_field_column_and_non_numeric_columns_skipped(self):
        df = pd.DataFrame(
            {"month": ["Jan", "Feb"], "note": ["x", "y"], "sales": [1.5, 2.0]}
        )
        data = BarChartData.from_frame(df, fields="month")

        assert data.fields == ("Jan", "Feb")
        assert [d.title for d in data.datasets] == ["sales"]

    def test_missing_values_rejected(self):
        df = pd.DataFrame({"sales": [1.0, None]}, index=["Jan", "Feb"])
        with pytest.raises(ChartDataError, match="not finite"):
            BarChartData.from_frame(df)

    def test_unknown_field_column(self):
        df = pd.DataFrame({"sales": [1, 2]})
        with pytest.raises(ChartDataError, match="not found"):
            BarChartData.from_frame(df, fields="month")

    def test_no_numeric_columns(self):
        df = pd.DataFrame({"note": ["x", "y"]})
        with pytest.raises(ChartDataError, match="no numeric"):
            BarChartData.from_frame(df)

    def test_not_a_frame(self):
        with pytest.raises(ChartDataError):
            BarChartData.from_frame({"sales": [1, 2]})
