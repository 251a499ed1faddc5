"""Tests for chart configuration validation."""

import logging

import pytest

from barsvg.config import BarChartConfig, Orientation, StackMode
from barsvg.errors import ChartConfigError


class TestDefaults:
    def test_defaults(self):
        cfg = BarChartConfig()

        assert cfg.orientation is Orientation.VERTICAL
        assert cfg.stack_mode is StackMode.GROUPED
        assert cfg.scale_division_override is None
        assert cfg.bar_gap_enabled is True
        assert cfg.is_vertical
        assert not cfg.is_stacked


class TestCoercion:
    """String options are normalized to enums."""

    @pytest.mark.parametrize(
        "raw,expected",
        [("vertical", Orientation.VERTICAL), ("HORIZONTAL", Orientation.HORIZONTAL)],
    )
    def test_orientation_strings(self, raw, expected):
        assert BarChartConfig(orientation=raw).orientation is expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("grouped", StackMode.GROUPED),
            ("side", StackMode.GROUPED),
            ("stacked", StackMode.STACKED),
            ("top", StackMode.STACKED),
        ],
    )
    def test_stack_mode_strings(self, raw, expected):
        assert BarChartConfig(stack_mode=raw).stack_mode is expected

    def test_unknown_orientation(self):
        with pytest.raises(ChartConfigError, match="orientation"):
            BarChartConfig(orientation="diagonal")

    def test_unknown_stack_mode(self):
        with pytest.raises(ChartConfigError, match="stack_mode"):
            BarChartConfig(stack_mode="pile")


class TestValidation:
    """Out-of-range options fail at construction."""

    @pytest.mark.parametrize("bad", [0, -5, float("nan"), float("inf")])
    def test_bad_override(self, bad):
        with pytest.raises(ChartConfigError, match="scale_division_override"):
            BarChartConfig(scale_division_override=bad)

    def test_override_must_be_number(self):
        with pytest.raises(ChartConfigError, match="must be a number"):
            BarChartConfig(scale_division_override="5")

    def test_valid_override(self):
        assert BarChartConfig(scale_division_override=2.5).scale_division_override == 2.5

    def test_bad_font_size(self):
        with pytest.raises(ChartConfigError, match="font_size"):
            BarChartConfig(font_size=0)

    def test_bad_min_scale_value(self):
        with pytest.raises(ChartConfigError, match="min_scale_value"):
            BarChartConfig(min_scale_value=float("nan"))

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            BarChartConfig(font_size=-1)


def test_logger_level_applied():
    logger = logging.getLogger("barsvg.test.config")
    BarChartConfig(logger=logger, log_level=logging.WARNING)
    assert logger.level == logging.WARNING
