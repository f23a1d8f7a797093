from __future__ import annotations

from collections.abc import Mapping, Sequence
import math
from typing import Any

import numpy as np

from plot_axes.errors import PlotDataError
from plot_axes.series import Item, NormalizedData, Point, Scalar, Series


try:
    import pandas as pd
except ImportError:
    pd = None  # type: ignore[assignment]

try:
    import torch
except ImportError:
    torch = None  # type: ignore[assignment]


def normalize_data(data: Any) -> NormalizedData:
    """Resolve raw chart data into flat series of scalars and points.

    Accepted shapes: a chart mapping with a ``series`` list, a series mapping with
    ``data`` (and optional ``name``), a list of series, a single flat list, numpy
    arrays (1-D or 2-D, rows are series), pandas Series/DataFrames and torch tensors.
    Nested lists inside a series are flattened. Values that are missing, non-numeric
    or non-finite become holes.
    """
    if isinstance(data, NormalizedData):
        return data
    if isinstance(data, Series):
        return NormalizedData(series=(data,))
    if data is None:
        return NormalizedData(series=())

    if isinstance(data, Mapping) and "series" in data:
        raw_series = data["series"]
        if not (_is_sequence(raw_series) or isinstance(raw_series, np.ndarray)):
            raise PlotDataError("`series` must be a sequence")
        return NormalizedData(series=tuple(_coerce_series(s) for s in raw_series))

    if pd is not None and isinstance(data, pd.DataFrame):
        cols = [c for c in data.columns if _is_numeric_column(data[c])]
        return NormalizedData(
            series=tuple(_series_from_array(data[c].to_numpy(), name=str(c)) for c in cols)
        )

    arr = _as_ndarray(data)
    if arr is not None:
        if arr.ndim == 1:
            return NormalizedData(series=(_series_from_array(arr),))
        if arr.ndim == 2:
            return NormalizedData(series=tuple(_series_from_array(row) for row in arr))
        raise PlotDataError(f"array input must be 1-D or 2-D, got {arr.ndim}-D")

    if _is_sequence(data):
        if any(_is_series_like(entry) for entry in data):
            return NormalizedData(series=tuple(_coerce_series(entry) for entry in data))
        return NormalizedData(series=(_coerce_series(data),))

    if isinstance(data, Mapping) and "data" in data:
        return NormalizedData(series=(_coerce_series(data),))

    return NormalizedData(series=(Series(items=(coerce_item(data),)),))


def coerce_item(raw: Any) -> Item:
    if isinstance(raw, (Scalar, Point)):
        return raw
    if isinstance(raw, Mapping):
        if "value" in raw:
            return coerce_item(raw["value"])
        if "x" in raw or "y" in raw:
            return Point(x=number_or_nan(raw.get("x")), y=number_or_nan(raw.get("y")))
    return Scalar(value=number_or_nan(raw))


def number_or_nan(raw: Any) -> float:
    if raw is None:
        return math.nan
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return math.nan
    return value if math.isfinite(value) else math.nan


def _coerce_series(raw: Any) -> Series:
    if isinstance(raw, Series):
        return raw
    name = None
    if isinstance(raw, Mapping) and "data" in raw:
        name = raw.get("name")
        raw = raw["data"]

    arr = _as_ndarray(raw)
    if arr is not None:
        if arr.ndim != 1:
            raise PlotDataError("series arrays must be 1-D")
        return _series_from_array(arr, name=name)
    if not _is_sequence(raw):
        raise PlotDataError(f"unsupported series input type: {type(raw)!r}")

    items: list[Item] = []
    _flatten_into(raw, items)
    return Series(items=tuple(items), name=name)


def _flatten_into(raw: Any, out: list[Item]) -> None:
    for entry in raw:
        if _is_sequence(entry):
            _flatten_into(entry, out)
        elif isinstance(entry, Mapping) and "data" in entry:
            _flatten_into(entry["data"], out)
        else:
            out.append(coerce_item(entry))


def _series_from_array(arr: np.ndarray, *, name: str | None = None) -> Series:
    if arr.dtype.kind in {"i", "u", "f"}:
        values = arr.astype(np.float64, copy=False)
        values = np.where(np.isfinite(values), values, np.nan)
        return Series(items=tuple(Scalar(value=float(v)) for v in values.tolist()), name=name)
    return Series(items=tuple(coerce_item(v) for v in arr.tolist()), name=name)


def _as_ndarray(value: Any) -> np.ndarray | None:
    if torch is not None and isinstance(value, torch.Tensor):
        tensor = value.detach()
        if tensor.is_cuda:
            tensor = tensor.cpu()
        return tensor.to(torch.float64).numpy()
    if pd is not None and isinstance(value, pd.Series):
        return value.to_numpy()
    if isinstance(value, np.ndarray):
        return value
    return None


def _is_series_like(value: Any) -> bool:
    if isinstance(value, Series):
        return True
    if isinstance(value, Mapping):
        return "data" in value
    return _is_sequence(value) or isinstance(value, np.ndarray)


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _is_numeric_column(column: Any) -> bool:
    # numpy and pandas extension dtypes both expose a one-letter kind.
    return getattr(column.dtype, "kind", "O") in "biuf"
