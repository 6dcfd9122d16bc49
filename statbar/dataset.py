from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any, Hashable, Protocol, runtime_checkable

import numpy as np

from statbar.errors import DatasetError, InvalidDatasetKind


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]


@runtime_checkable
class StatisticalDataset(Protocol):
    def get_mean_value(self, row: int, column: int) -> float | None:
        ...

    def get_std_dev_value(self, row: int, column: int) -> float | None:
        ...


def require_statistical(dataset: Any) -> StatisticalDataset:
    if not isinstance(dataset, StatisticalDataset):
        raise InvalidDatasetKind(
            f"statistical bars require mean/std-dev accessors, got {type(dataset).__name__}"
        )
    return dataset


class ArrayStatisticalDataset:
    """Mean and standard deviation tables indexed by (row, column).

    Rows are series and columns are categories. Missing cells are stored as
    NaN and read back as ``None``.
    """

    def __init__(
        self,
        means: Any,
        std_devs: Any = None,
        *,
        row_keys: Sequence[Hashable] | None = None,
        column_keys: Sequence[Hashable] | None = None,
    ) -> None:
        mean_arr = _coerce_2d_numeric(means, label="means")
        if std_devs is None:
            std_arr = np.full(mean_arr.shape, np.nan, dtype=np.float64)
        else:
            std_arr = _coerce_2d_numeric(std_devs, label="std_devs")
        if std_arr.shape != mean_arr.shape:
            raise DatasetError(f"means and std_devs shape mismatch: {mean_arr.shape} != {std_arr.shape}")

        rows, cols = mean_arr.shape
        self._row_keys = tuple(row_keys) if row_keys is not None else tuple(range(rows))
        self._column_keys = tuple(column_keys) if column_keys is not None else tuple(range(cols))
        if len(self._row_keys) != rows:
            raise DatasetError(f"expected {rows} row keys, got {len(self._row_keys)}")
        if len(self._column_keys) != cols:
            raise DatasetError(f"expected {cols} column keys, got {len(self._column_keys)}")
        mean_arr.setflags(write=False)
        std_arr.setflags(write=False)
        self._means = mean_arr
        self._std_devs = std_arr

    @classmethod
    def from_frame(cls, means: Any, std_devs: Any = None) -> "ArrayStatisticalDataset":
        """Build from pandas frames: index labels become rows, columns become categories."""
        if pd is None:
            raise DatasetError("pandas is required for from_frame")
        if not isinstance(means, pd.DataFrame):
            raise DatasetError("`means` must be a pandas DataFrame")
        if std_devs is not None:
            if not isinstance(std_devs, pd.DataFrame):
                raise DatasetError("`std_devs` must be a pandas DataFrame")
            std_devs = std_devs.reindex(index=means.index, columns=means.columns)
        return cls(
            means.to_numpy(),
            None if std_devs is None else std_devs.to_numpy(),
            row_keys=list(means.index),
            column_keys=list(means.columns),
        )

    @property
    def row_count(self) -> int:
        return int(self._means.shape[0])

    @property
    def column_count(self) -> int:
        return int(self._means.shape[1])

    @property
    def row_keys(self) -> tuple[Hashable, ...]:
        return self._row_keys

    @property
    def column_keys(self) -> tuple[Hashable, ...]:
        return self._column_keys

    @property
    def means(self) -> np.ndarray:
        return self._means

    @property
    def std_devs(self) -> np.ndarray:
        return self._std_devs

    def row_index(self, key: Hashable) -> int:
        try:
            return self._row_keys.index(key)
        except ValueError:
            raise KeyError(key) from None

    def column_index(self, key: Hashable) -> int:
        try:
            return self._column_keys.index(key)
        except ValueError:
            raise KeyError(key) from None

    def get_mean_value(self, row: int, column: int) -> float | None:
        return _cell(self._means, row, column)

    def get_std_dev_value(self, row: int, column: int) -> float | None:
        return _cell(self._std_devs, row, column)


def find_range_bounds(dataset: Any, include_interval: bool = True) -> tuple[float, float] | None:
    """Smallest value range covering every finite mean, widened by ± std dev when asked."""
    data = require_statistical(dataset)
    row_count = getattr(data, "row_count", None)
    column_count = getattr(data, "column_count", None)
    if row_count is None or column_count is None:
        raise InvalidDatasetKind(f"{type(dataset).__name__} does not report row_count/column_count")
    lows: list[float] = []
    highs: list[float] = []
    for row in range(int(row_count)):
        for column in range(int(column_count)):
            mean = data.get_mean_value(row, column)
            if mean is None or not np.isfinite(mean):
                continue
            low = high = float(mean)
            if include_interval:
                dev = data.get_std_dev_value(row, column)
                if dev is not None and np.isfinite(dev):
                    low = float(mean) - float(dev)
                    high = float(mean) + float(dev)
            lows.append(min(low, high))
            highs.append(max(low, high))
    if not lows:
        return None
    return (min(lows), max(highs))


def _cell(table: np.ndarray, row: int, column: int) -> float | None:
    if not (0 <= row < table.shape[0] and 0 <= column < table.shape[1]):
        raise IndexError(f"cell ({row}, {column}) outside {table.shape[0]}x{table.shape[1]} dataset")
    value = float(table[row, column])
    if np.isnan(value):
        return None
    return value


def _coerce_2d_numeric(value: Any, *, label: str) -> np.ndarray:
    if pd is not None and isinstance(value, pd.DataFrame):
        value = value.to_numpy()

    if isinstance(value, np.ndarray):
        arr = value
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        rows = [
            list(r) if isinstance(r, (Sequence, np.ndarray)) and not isinstance(r, (str, bytes)) else r
            for r in value
        ]
        if rows and not all(isinstance(r, list) for r in rows):
            raise DatasetError(f"{label} must be a sequence of rows")
        widths = {len(r) for r in rows}
        if len(widths) > 1:
            raise DatasetError(f"{label} rows have differing lengths: {sorted(widths)}")
        arr = np.empty((len(rows), widths.pop() if widths else 0), dtype=object)
        for i, r in enumerate(rows):
            for j, cell in enumerate(r):
                arr[i, j] = cell
    else:
        raise DatasetError(f"unsupported {label} input type: {type(value)!r}")

    if arr.ndim != 2:
        raise DatasetError(f"{label} must be 2-D (rows x categories)")
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=True)

    out = np.empty(arr.shape, dtype=np.float64)
    for (i, j), raw in np.ndenumerate(arr):
        if raw is None:
            out[i, j] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[i, j] = float(raw)
            continue
        try:
            out[i, j] = float(raw)
        except (TypeError, ValueError) as exc:
            raise DatasetError(f"{label} contains non-numeric value at ({i}, {j}): {raw!r}") from exc
    return out
