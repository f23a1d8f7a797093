from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal

from plot_axes.errors import AxisConfigError


AxisPosition = Literal["start", "end"]

DEFAULT_X_AXIS_OFFSET = 30.0
DEFAULT_Y_AXIS_OFFSET = 40.0


@dataclass(frozen=True)
class AxisUnits:
    pos: Literal["x", "y"]
    len: Literal["width", "height"]
    dir: Literal["horizontal", "vertical"]
    rect_start: str
    rect_end: str
    rect_offset: str


AXIS_X = AxisUnits(pos="x", len="width", dir="horizontal", rect_start="x1", rect_end="x2", rect_offset="y2")
AXIS_Y = AxisUnits(pos="y", len="height", dir="vertical", rect_start="y2", rect_end="y1", rect_offset="x1")


def counter_units(units: AxisUnits) -> AxisUnits:
    return AXIS_Y if units == AXIS_X else AXIS_X


@dataclass(frozen=True)
class Padding:
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0


@dataclass(frozen=True)
class ChartRect:
    """Drawing rectangle in surface pixels: (x1, y1) bottom-left, (x2, y2) top-right."""

    x1: float
    x2: float
    y1: float
    y2: float
    padding: Padding = Padding()

    @property
    def width(self) -> float:
        return self.x2 - self.x1

    @property
    def height(self) -> float:
        return self.y1 - self.y2

    def __getitem__(self, key: str) -> float:
        if key not in {"x1", "x2", "y1", "y2"}:
            raise KeyError(key)
        return float(getattr(self, key))

    def length(self, units: AxisUnits) -> float:
        return self[units.rect_end] - self[units.rect_start]


def normalize_padding(padding: float | Mapping[str, float] | Padding | None, fallback: float = 0.0) -> Padding:
    if padding is None:
        return Padding(fallback, fallback, fallback, fallback)
    if isinstance(padding, Padding):
        return padding
    if isinstance(padding, (int, float)) and not isinstance(padding, bool):
        p = float(padding)
        return Padding(top=p, right=p, bottom=p, left=p)
    if not isinstance(padding, Mapping):
        raise AxisConfigError(f"padding must be a number or mapping, got {type(padding)!r}")
    unknown = set(padding) - {"top", "right", "bottom", "left"}
    if unknown:
        raise AxisConfigError(f"unknown padding keys: {sorted(unknown)}")

    def side(name: str) -> float:
        value = padding.get(name)
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
        return float(fallback)

    return Padding(top=side("top"), right=side("right"), bottom=side("bottom"), left=side("left"))


def create_chart_rect(
    width: float,
    height: float,
    *,
    padding: float | Mapping[str, float] | Padding | None = 5.0,
    fallback_padding: float = 0.0,
    x_axis_offset: float = DEFAULT_X_AXIS_OFFSET,
    y_axis_offset: float = DEFAULT_Y_AXIS_OFFSET,
    x_axis_position: AxisPosition = "end",
    y_axis_position: AxisPosition = "start",
    has_axis: bool = True,
) -> ChartRect:
    """Place the data area inside a ``width`` x ``height`` surface, leaving room for padding and axes.

    Undersized surfaces are grown to fit offsets and padding, and the result always
    spans at least one pixel in each direction.
    """
    if x_axis_position not in ("start", "end") or y_axis_position not in ("start", "end"):
        raise AxisConfigError("axis position must be 'start' or 'end'")
    pad = normalize_padding(padding, fallback_padding)
    x_off = y_axis_offset if has_axis else 0.0
    y_off = x_axis_offset if has_axis else 0.0
    width = max(float(width or 0.0), x_off + pad.left + pad.right)
    height = max(float(height or 0.0), y_off + pad.top + pad.bottom)

    if has_axis and x_axis_position == "start":
        y2 = pad.top + x_axis_offset
        y1 = max(height - pad.bottom, y2 + 1)
    else:
        y2 = pad.top
        y1 = max(height - pad.bottom - y_off, y2 + 1)

    if has_axis and y_axis_position == "start":
        x1 = pad.left + y_axis_offset
        x2 = max(width - pad.right, x1 + 1)
    else:
        x1 = pad.left
        x2 = max(width - pad.right - x_off, x1 + 1)

    return ChartRect(x1=x1, x2=x2, y1=y1, y2=y2, padding=pad)
