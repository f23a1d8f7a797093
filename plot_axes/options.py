from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
import math
from pathlib import Path
import tomllib
from typing import Any, Callable

from plot_axes.errors import AxisConfigError
from plot_axes.scales import DEFAULT_PRECISION, HighLow

LabelInterpolation = Callable[[Any, int], Any]

DEFAULT_SCALE_MIN_SPACE = 20.0


@dataclass(frozen=True)
class AxisOptions:
    """Per-axis configuration shared by all axis strategies."""

    high: float | None = None
    low: float | None = None
    scale_min_space: float = DEFAULT_SCALE_MIN_SPACE
    only_integer: bool = False
    reference_value: float | None = None
    divisor: int = 1
    ticks: tuple[Any, ...] | None = None
    stretch: bool = False
    high_low: HighLow | None = None
    label_interpolation: LabelInterpolation | None = None
    precision: int = DEFAULT_PRECISION


DEFAULT_AXIS_OPTIONS = AxisOptions()

_ALIASES = {
    "scaleMinSpace": "scale_min_space",
    "onlyInteger": "only_integer",
    "referenceValue": "reference_value",
    "highLow": "high_low",
    "labelInterpolationFnc": "label_interpolation",
}


def validate_axis_options(overrides: Mapping[str, Any] | AxisOptions | None = None) -> AxisOptions:
    """Merge ``overrides`` over the defaults and validate the result.

    Keys may use either the snake_case field names or the camelCase option names
    (``scaleMinSpace``, ``onlyInteger``, ...).
    """
    if isinstance(overrides, AxisOptions):
        overrides = {field: getattr(overrides, field) for field in AxisOptions.__dataclass_fields__}
    raw: dict[str, Any] = {
        field: getattr(DEFAULT_AXIS_OPTIONS, field) for field in AxisOptions.__dataclass_fields__
    }
    if overrides:
        for key, value in overrides.items():
            name = _ALIASES.get(key, key)
            if name not in raw:
                raise AxisConfigError(f"Unknown axis option: {key}")
            raw[name] = value

    high = _optional_number(raw["high"], "high")
    low = _optional_number(raw["low"], "low")
    reference_value = _optional_number(raw["reference_value"], "reference_value")

    scale_min_space = raw["scale_min_space"]
    if not _is_number(scale_min_space) or float(scale_min_space) < 0:
        raise AxisConfigError("Option `scale_min_space` must be a number >= 0")

    divisor = raw["divisor"]
    if divisor is None:
        divisor = 1
    if not _is_number(divisor) or float(divisor) < 1 or not float(divisor).is_integer():
        raise AxisConfigError("Option `divisor` must be an integer >= 1")

    ticks = raw["ticks"]
    if ticks is not None:
        if not isinstance(ticks, Sequence) or isinstance(ticks, (str, bytes, bytearray)):
            raise AxisConfigError("Option `ticks` must be a sequence")
        ticks = tuple(ticks)

    high_low = raw["high_low"]
    if high_low is not None:
        high_low = _coerce_high_low(high_low)

    label_interpolation = raw["label_interpolation"]
    if label_interpolation is not None and not callable(label_interpolation):
        raise AxisConfigError("Option `label_interpolation` must be callable")

    precision = raw["precision"]
    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise AxisConfigError("Option `precision` must be a non-negative integer")

    return AxisOptions(
        high=high,
        low=low,
        scale_min_space=float(scale_min_space),
        only_integer=bool(raw["only_integer"]),
        reference_value=reference_value,
        divisor=int(divisor),
        ticks=ticks,
        stretch=bool(raw["stretch"]),
        high_low=high_low,
        label_interpolation=label_interpolation,
        precision=precision,
    )


def load_axis_options(path: str | Path, *, table: str | None = "axis") -> AxisOptions:
    """Read axis options from a TOML file, optionally from a nested ``table``."""
    options_path = Path(path)
    if not options_path.exists():
        raise FileNotFoundError(f"axis options not found: {options_path}")
    with options_path.open("rb") as f:
        raw = tomllib.load(f)
    if table is not None:
        for part in table.split("."):
            if part not in raw:
                raise AxisConfigError(f"table `{table}` missing from {options_path}")
            raw = raw[part]
            if not isinstance(raw, dict):
                raise AxisConfigError(f"`{table}` in {options_path} must be a table")
    return validate_axis_options(raw)


def _coerce_high_low(value: Any) -> HighLow:
    if isinstance(value, HighLow):
        high, low = value.high, value.low
    elif isinstance(value, Mapping):
        try:
            high, low = value["high"], value["low"]
        except KeyError as exc:
            raise AxisConfigError(f"Option `high_low` missing field: {exc.args[0]}") from exc
    else:
        raise AxisConfigError("Option `high_low` must be a HighLow or a mapping with high/low")
    if not (_is_number(high) and _is_number(low)) or not (math.isfinite(high) and math.isfinite(low)):
        raise AxisConfigError("Option `high_low` requires finite numbers")
    if float(high) <= float(low):
        raise AxisConfigError("Option `high_low` requires high > low")
    return HighLow(high=float(high), low=float(low))


def _optional_number(value: Any, name: str) -> float | None:
    if value is None:
        return None
    if not _is_number(value) or not math.isfinite(float(value)):
        raise AxisConfigError(f"Option `{name}` must be a finite number")
    return float(value)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
