from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any, Literal

from plot_axes.axes import AutoScaleAxis, Axis, FixedScaleAxis, StepAxis
from plot_axes.errors import AxisConfigError
from plot_axes.geometry import AxisUnits, ChartRect
from plot_axes.options import AxisOptions, validate_axis_options

LOGGER = logging.getLogger(__name__)

AxisKind = Literal["step", "auto", "fixed"]

AXIS_TYPES: dict[str, type[Axis]] = {
    "step": StepAxis,
    "auto": AutoScaleAxis,
    "fixed": FixedScaleAxis,
}


def create_axis(
    kind: AxisKind | type[Axis],
    units: AxisUnits,
    data: Any,
    chart_rect: ChartRect,
    options: AxisOptions | Mapping[str, Any] | None = None,
) -> Axis:
    if isinstance(kind, type):
        if not issubclass(kind, Axis) or kind is Axis:
            raise AxisConfigError(f"axis type must be a concrete Axis subclass, got {kind!r}")
        axis_type = kind
    else:
        try:
            axis_type = AXIS_TYPES[kind]
        except KeyError as exc:
            raise AxisConfigError(f"unknown axis kind: {kind!r}") from exc

    resolved = options if isinstance(options, AxisOptions) else validate_axis_options(options)
    axis = axis_type(units, data, chart_rect, resolved)
    LOGGER.debug(
        "built %s for %s axis: length=%s ticks=%d",
        axis_type.__name__,
        units.pos,
        axis.axis_length,
        len(axis.ticks),
    )
    return axis
