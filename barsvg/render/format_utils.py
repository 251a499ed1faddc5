from __future__ import annotations

import numbers


def separate_comma(value: numbers.Real) -> str:
    """Group thousands with commas, e.g. ``1234567.5`` -> ``"1,234,567.5"``."""
    if isinstance(value, numbers.Integral):
        return f"{int(value):,}"
    return f"{value:,}"


def raw_text(value: numbers.Real) -> str:
    # hover targets show the value exactly as given, never grouped
    return str(value)
