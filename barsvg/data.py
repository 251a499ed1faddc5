"""Fields and datasets for bar charts.

A chart has one ordered sequence of field labels (the category axis) and any
number of datasets, each holding exactly one value per field. Datasets are
drawn, and stacked, in the order they were added.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Iterable, Optional, Sequence

import numpy as np

from .config import StackMode
from .errors import ChartDataError

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd  # type: ignore


@dataclass(frozen=True)
class Dataset:
    """One data series; ``values[i]`` belongs to field ``i``.

    Values keep the numeric type they were given with, so an ``int`` stays an
    ``int`` and its raw text form has no trailing ``.0``.
    """

    title: str
    values: tuple

    def __len__(self) -> int:
        return len(self.values)


def _validate_values(values: Sequence[Any], n_fields: int, title: str) -> tuple:
    vals = tuple(values)
    if len(vals) != n_fields:
        raise ChartDataError(
            f"dataset {title!r} has {len(vals)} values but there are {n_fields} fields"
        )
    for i, v in enumerate(vals):
        if isinstance(v, bool) or not isinstance(v, numbers.Real):
            raise ChartDataError(
                f"dataset {title!r} value at index {i} is not a number: {v!r}"
            )
    if vals:
        finite = np.isfinite(np.asarray(vals, dtype=np.float64))
        if not finite.all():
            bad = int(np.flatnonzero(~finite)[0])
            raise ChartDataError(
                f"dataset {title!r} value at index {bad} is not finite: {vals[bad]!r}"
            )
    return vals


def _plain(x: float) -> float:
    # integral floats come back as int so axis ticks read "20", not "20.0"
    return int(x) if float(x).is_integer() else float(x)


class BarChartData:
    """Field labels plus the datasets drawn against them."""

    def __init__(self, fields: Iterable[Any]):
        self.fields: tuple[str, ...] = tuple(str(f) for f in fields)
        self.datasets: list[Dataset] = []

    def __len__(self) -> int:
        return len(self.datasets)

    def __repr__(self) -> str:
        return f"BarChartData(fields={len(self.fields)}, datasets={len(self.datasets)})"

    def add_data(self, values: Sequence[Any], title: Optional[str] = None) -> Dataset:
        """Append a dataset after validating it against the fields.

        Args:
            values: One number per field, in field order.
            title: Dataset title; defaults to ``"Series N"``.

        Returns:
            The stored :class:`Dataset`.

        Raises:
            ChartDataError: If the length does not match the field count or a
                value is not a finite real number.
        """
        if title is None:
            title = f"Series {len(self.datasets) + 1}"
        dataset = Dataset(title=str(title), values=_validate_values(values, len(self.fields), title))
        self.datasets.append(dataset)
        return dataset

    @classmethod
    def from_frame(cls, frame: "pd.DataFrame", fields: Optional[str] = None) -> "BarChartData":
        """Build chart data from a pandas DataFrame.

        Rows are fields and numeric columns are datasets. The field labels come
        from the index, or from the column named by ``fields``.

        Args:
            frame: Source DataFrame.
            fields: Optional column holding the field labels.

        Raises:
            ChartDataError: If ``fields`` is not a column or no numeric column
                is left to plot.
        """
        import pandas as pd

        if not isinstance(frame, pd.DataFrame):
            raise ChartDataError(f"expected a pandas DataFrame, got {type(frame).__name__}")

        if fields is not None:
            if fields not in frame.columns:
                raise ChartDataError(f"field column {fields!r} not found in frame")
            labels = frame[fields].tolist()
            frame = frame.drop(columns=[fields])
        else:
            labels = frame.index.tolist()

        numeric = frame.select_dtypes(include=[np.number])
        if numeric.shape[1] == 0:
            raise ChartDataError("frame has no numeric columns to plot")

        data = cls(labels)
        for column in numeric.columns:
            data.add_data(numeric[column].tolist(), title=str(column))
        return data

    def _matrix(self) -> np.ndarray:
        # rows are datasets, columns are fields
        if not self.fields or not self.datasets:
            raise ChartDataError("chart needs at least one field and one dataset")
        return np.asarray([d.values for d in self.datasets], dtype=np.float64)

    def max_value(self, stack_mode: StackMode = StackMode.GROUPED) -> float:
        """Largest value the value axis must reach.

        The axis always reaches zero; stacked charts reach the tallest per-field
        sum of positive values.
        """
        m = self._matrix()
        if stack_mode is StackMode.STACKED:
            return _plain(np.max(np.where(m > 0, m, 0.0).sum(axis=0)))
        highest = float(np.max(m))
        return _plain(highest) if highest > 0 else 0

    def min_value(
        self,
        stack_mode: StackMode = StackMode.GROUPED,
        min_scale_value: Optional[float] = None,
    ) -> float:
        """Bottom of the value axis before tick clamping.

        Bars start at zero unless values are negative; ``min_scale_value``
        replaces the data minimum when given.
        """
        if min_scale_value is not None:
            return _plain(min_scale_value)
        m = self._matrix()
        if stack_mode is StackMode.STACKED:
            lowest = float(np.min(np.where(m < 0, m, 0.0).sum(axis=0)))
        else:
            lowest = float(np.min(m))
        return _plain(lowest) if lowest < 0 else 0
