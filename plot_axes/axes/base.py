from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import math
from numbers import Real
from typing import Any, Literal, Sequence

from plot_axes.errors import InvalidGeometry
from plot_axes.geometry import AxisUnits, ChartRect, counter_units
from plot_axes.options import AxisOptions, LabelInterpolation
from plot_axes.scales import format_ticks_for_axis
from plot_axes.series import Point, Scalar

MIN_LAST_LABEL_LENGTH = 30.0


@dataclass(frozen=True)
class AxisGeometry:
    axis_length: float
    grid_offset: float
    orientation: Literal["horizontal", "vertical"]


@dataclass(frozen=True)
class Tick:
    index: int
    value: Any
    position: float
    label: Any
    label_length: float


class Axis:
    """Geometry and tick list of one chart axis; subclasses supply the value projection."""

    def __init__(
        self,
        units: AxisUnits,
        chart_rect: ChartRect,
        ticks: Sequence[Any] | None,
        options: AxisOptions,
    ) -> None:
        axis_length = chart_rect.length(units)
        if not math.isfinite(axis_length) or axis_length <= 0:
            raise InvalidGeometry(f"{units.pos} axis length must be > 0, got {axis_length!r}")
        self.units = units
        self.counter_units = counter_units(units)
        self.chart_rect = chart_rect
        self.geometry = AxisGeometry(
            axis_length=axis_length,
            grid_offset=chart_rect[units.rect_offset],
            orientation=units.dir,
        )
        self.ticks: tuple[Any, ...] = tuple(ticks) if ticks is not None else ()
        self.options = options
        self.range: tuple[float, float] | None = None
        self.label_step: float | None = None

    @property
    def axis_length(self) -> float:
        return self.geometry.axis_length

    @property
    def grid_offset(self) -> float:
        return self.geometry.grid_offset

    def project_value(self, value: Any, index: int = 0, data: Any = None) -> float:
        raise NotImplementedError("base Axis cannot project values")

    def to_chart_coordinate(self, position: float) -> float:
        if self.units.pos == "x":
            return self.chart_rect.x1 + position
        return self.chart_rect.y1 - position

    def ticks_with_labels(self, label_fn: LabelInterpolation | None = None) -> tuple[Tick, ...]:
        """Project every tick and pair it with its label and the room the label has.

        Ticks whose label is ``None`` or ``False`` are left out; ``0`` and ``""`` are kept.
        """
        positions = [self.project_value(value, index) for index, value in enumerate(self.ticks)]
        labels = self._labels(label_fn or self.options.label_interpolation)

        out: list[Tick] = []
        for index, (value, position, label) in enumerate(zip(self.ticks, positions, labels)):
            if index + 1 < len(positions):
                label_length = positions[index + 1] - position
            else:
                label_length = max(self.axis_length - position, MIN_LAST_LABEL_LENGTH)
            if label is None or label is False:
                continue
            out.append(Tick(index=index, value=value, position=position, label=label, label_length=label_length))
        return tuple(out)

    def _labels(self, label_fn: LabelInterpolation | None) -> list[Any]:
        if label_fn is not None:
            return [label_fn(value, index) for index, value in enumerate(self.ticks)]
        if self.ticks and all(_is_real(v) for v in self.ticks):
            return format_ticks_for_axis([float(v) for v in self.ticks], step=self.label_step)
        return [str(v) for v in self.ticks]


def coordinate(value: Any, dimension: str) -> float:
    """Numeric coordinate of ``value`` along ``dimension``; NaN when it has none."""
    if isinstance(value, Point):
        return float(value.get(dimension))  # type: ignore[arg-type]
    if isinstance(value, Scalar):
        return float(value.value)
    if isinstance(value, Mapping) and ("x" in value or "y" in value):
        value = value.get(dimension)
    if value is None:
        return math.nan
    try:
        out = float(value)
    except (TypeError, ValueError):
        return math.nan
    return out if math.isfinite(out) else math.nan


def _is_real(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)
