from __future__ import annotations

from typing import Any

from plot_axes.axes.base import Axis, coordinate
from plot_axes.errors import AxisConfigError
from plot_axes.geometry import AxisUnits, ChartRect
from plot_axes.options import AxisOptions
from plot_axes.ranges import find_range
from plot_axes.scales import HighLow


class FixedScaleAxis(Axis):
    """Linear axis over the raw data range with ticks from a divisor or an explicit list."""

    def __init__(self, units: AxisUnits, data: Any, chart_rect: ChartRect, options: AxisOptions) -> None:
        super().__init__(units, chart_rect, None, options)
        self.high_low: HighLow = options.high_low or find_range(
            data,
            high=options.high,
            low=options.low,
            reference_value=options.reference_value,
            dimension=units.pos,
        )
        self.divisor = options.divisor or 1
        if isinstance(self.divisor, bool) or not isinstance(self.divisor, int) or self.divisor < 1:
            raise AxisConfigError(f"divisor must be an integer >= 1, got {options.divisor!r}")
        if options.ticks is not None:
            ticks = sorted(options.ticks)
        else:
            low = self.high_low.low
            span = self.high_low.high - low
            # Both ends included.
            ticks = [low + span / self.divisor * i for i in range(self.divisor + 1)]
        self.ticks = tuple(ticks)
        self.range = (self.high_low.low, self.high_low.high)
        self.step_length = self.axis_length / self.divisor

    def project_value(self, value: Any, index: int = 0, data: Any = None) -> float:
        v = coordinate(value, self.units.pos)
        low, high = self.range
        return self.axis_length * (v - low) / (high - low)
