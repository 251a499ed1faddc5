"""Exceptions raised at the public boundary of barsvg."""

from __future__ import annotations


class ChartConfigError(ValueError):
    """Raised when a chart configuration option is out of range."""


class ChartDataError(ValueError):
    """Raised when fields or datasets cannot be drawn as given.

    Covers mismatched dataset/field lengths, non-numeric values and
    non-finite numbers. The chart never truncates or pads data to recover.
    """
