from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import Any

import numpy as np

from compareseries.errors import SeriesDataError
from compareseries.series import Point


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def normalize_points(data: Any = None, *, x: Any = None, y: Any = None) -> list[Point]:
    """Coerce raw point input into a list of float tuples.

    Accepts either `data` (rows of `(x, y[, bottom])`, a 2-D array/tensor or a
    DataFrame) or separate 1-D `x` and `y` columns. Missing values become NaN
    so the row layout of the input is preserved.
    """

    if x is not None or y is not None:
        if data is not None:
            raise SeriesDataError("pass either `data` or `x`/`y`, not both")
        if x is None or y is None:
            raise SeriesDataError("both `x` and `y` are required")
        x_arr = _coerce_1d_numeric(x, label="x")
        y_arr = _coerce_1d_numeric(y, label="y")
        if x_arr.shape != y_arr.shape:
            raise SeriesDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")
        return [(float(a), float(b)) for a, b in zip(x_arr.tolist(), y_arr.tolist())]

    if data is None:
        return []
    rows = _coerce_2d_numeric(data)
    if rows.shape[0] == 0:
        return []
    if rows.shape[1] < 2:
        raise SeriesDataError(f"points need at least 2 fields, got {rows.shape[1]}")
    return [tuple(float(v) for v in row) for row in rows.tolist()]


def _coerce_2d_numeric(value: Any) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 2:
            raise SeriesDataError("point tensor must be 2-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.DataFrame):
        if "x" in value.columns and "y" in value.columns:
            columns = ["x", "y"] + (["bottom"] if "bottom" in value.columns else [])
        else:
            columns = []
            for column in value.columns[:3]:
                if not _is_numeric_dtype(value[column]):
                    break
                columns.append(column)
        return _coerce_ndarray(value[columns].to_numpy(), label="data")

    if isinstance(value, np.ndarray):
        if value.ndim != 2:
            if value.size == 0:
                return np.empty((0, 2), dtype=np.float64)
            raise SeriesDataError("point array must be 2-D")
        return _coerce_ndarray(value, label="data")

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        if len(value) == 0:
            return np.empty((0, 2), dtype=np.float64)
        rows = [_row_values(row, index=i) for i, row in enumerate(value)]
        widths = {len(row) for row in rows}
        if len(widths) != 1:
            raise SeriesDataError(f"points have mixed sizes: {sorted(widths)}")
        arr = np.empty((len(rows), widths.pop()), dtype=object)
        for i, row in enumerate(rows):
            arr[i, :] = row
        return _coerce_ndarray(arr, label="data")

    raise SeriesDataError(f"unsupported point input type: {type(value)!r}")


def _row_values(row: Any, *, index: int) -> list[Any]:
    if torch is not None and isinstance(row, torch.Tensor):
        if row.ndim != 1:
            raise SeriesDataError(f"point at index {index} must be 1-D")
        return row.detach().cpu().tolist()
    if isinstance(row, np.ndarray):
        if row.ndim != 1:
            raise SeriesDataError(f"point at index {index} must be 1-D")
        return row.tolist()
    if isinstance(row, Sequence) and not isinstance(row, (str, bytes, bytearray)):
        return list(row)
    raise SeriesDataError(f"point at index {index} is not a sequence: {row!r}")


def _is_numeric_dtype(series: Any) -> bool:
    if pd is None:
        return False
    try:
        return bool(pd.api.types.is_numeric_dtype(series))
    except (TypeError, ValueError):
        return False


def _coerce_1d_numeric(value: Any, *, label: str) -> np.ndarray:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.ndim != 1:
            raise SeriesDataError(f"{label} must be 1-D")
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()

    if pd is not None and isinstance(value, pd.Series):
        return _coerce_ndarray(value.to_numpy(), label=label)

    if isinstance(value, np.ndarray):
        if value.ndim != 1:
            raise SeriesDataError(f"{label} must be 1-D")
        return _coerce_ndarray(value, label=label)

    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return _coerce_ndarray(np.asarray(value, dtype=object), label=label)

    raise SeriesDataError(f"unsupported {label} input type: {type(value)!r}")


def _coerce_ndarray(arr: np.ndarray, *, label: str) -> np.ndarray:
    if arr.dtype.kind in {"i", "u", "f", "b"}:
        return arr.astype(np.float64, copy=False)

    out = np.empty(arr.shape, dtype=np.float64)
    for idx, raw in np.ndenumerate(arr):
        if raw is None:
            out[idx] = np.nan
            continue
        if isinstance(raw, Decimal):
            out[idx] = float(raw)
            continue
        try:
            out[idx] = float(raw)
        except (TypeError, ValueError) as exc:
            raise SeriesDataError(f"{label} contains non-numeric value at index {idx}: {raw!r}") from exc
    return out
