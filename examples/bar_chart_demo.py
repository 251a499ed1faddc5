#!/usr/bin/env python3
"""Draw the same sales data as grouped columns and as stacked rows."""

import logging

import pandas as pd

from barsvg import BarChartConfig, render_bar_chart


def main():
    logging.basicConfig(level=logging.DEBUG)

    sales = pd.DataFrame(
        {"2002": [12, 45, 21, -8], "2003": [15, 30, 40, 6]},
        index=["Jan", "Feb", "Mar", "Apr"],
    )

    columns = render_bar_chart(sales, BarChartConfig(add_popups=True))
    print("Value axis:", ", ".join(columns.value_labels))
    print(columns.svg)

    rows = render_bar_chart(
        sales,
        BarChartConfig(orientation="horizontal", stack_mode="stacked", scale_division_override=10),
        width=400,
        height=240,
    )
    print("Value axis:", ", ".join(rows.value_labels))
    print(rows.svg)


if __name__ == "__main__":
    main()
