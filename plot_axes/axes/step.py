from __future__ import annotations

from typing import Any

from plot_axes.axes.base import Axis
from plot_axes.geometry import AxisUnits, ChartRect
from plot_axes.options import AxisOptions


class StepAxis(Axis):
    """Distributes arbitrary tick labels evenly; values are placed by their index alone.

    With ``stretch`` the last tick lands on the far end of the axis, otherwise the
    axis is split into one slot per tick.
    """

    def __init__(self, units: AxisUnits, data: Any, chart_rect: ChartRect, options: AxisOptions) -> None:
        super().__init__(units, chart_rect, options.ticks, options)
        slots = max(1, len(self.ticks) - (1 if options.stretch else 0))
        self.step_length = self.axis_length / slots

    def project_value(self, value: Any, index: int = 0, data: Any = None) -> float:
        return self.step_length * index
