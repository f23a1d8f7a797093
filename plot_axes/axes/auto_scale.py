from __future__ import annotations

from typing import Any

from plot_axes.axes.base import Axis, coordinate
from plot_axes.geometry import AxisUnits, ChartRect
from plot_axes.options import AxisOptions
from plot_axes.ranges import find_range
from plot_axes.scales import Bounds, HighLow, compute_bounds


class AutoScaleAxis(Axis):
    """Linear axis whose ticks are picked from the data range and the available pixels.

    The projection runs against the snapped bounds, so ``bounds.min`` maps to 0 and
    ``bounds.max`` to the full axis length.
    """

    def __init__(self, units: AxisUnits, data: Any, chart_rect: ChartRect, options: AxisOptions) -> None:
        super().__init__(units, chart_rect, None, options)
        self.high_low: HighLow = options.high_low or find_range(
            data,
            high=options.high,
            low=options.low,
            reference_value=options.reference_value,
            dimension=units.pos,
        )
        self.bounds: Bounds = compute_bounds(
            self.axis_length,
            self.high_low,
            options.scale_min_space,
            options.only_integer,
            precision=options.precision,
        )
        self.range = (self.bounds.min, self.bounds.max)
        self.ticks = self.bounds.values
        self.label_step = self.bounds.step

    def project_value(self, value: Any, index: int = 0, data: Any = None) -> float:
        v = coordinate(value, self.units.pos)
        return self.axis_length * (v - self.bounds.min) / self.bounds.range
