from plot_axes.adapters.normalize import normalize_data
from plot_axes.api import create_axis
from plot_axes.axes import AutoScaleAxis, Axis, AxisGeometry, FixedScaleAxis, StepAxis, Tick
from plot_axes.errors import (
    AxisConfigError,
    InvalidGeometry,
    InvalidRange,
    IterationLimitExceeded,
    PlotAxisError,
    PlotDataError,
)
from plot_axes.geometry import AXIS_X, AXIS_Y, AxisUnits, ChartRect, Padding, create_chart_rect, normalize_padding
from plot_axes.options import AxisOptions, load_axis_options, validate_axis_options
from plot_axes.ranges import find_range
from plot_axes.scales import Bounds, HighLow, compute_bounds, format_tick, format_ticks_for_axis
from plot_axes.series import NormalizedData, Point, Scalar, Series

__all__ = [
    "AXIS_X",
    "AXIS_Y",
    "AutoScaleAxis",
    "Axis",
    "AxisConfigError",
    "AxisGeometry",
    "AxisOptions",
    "AxisUnits",
    "Bounds",
    "ChartRect",
    "FixedScaleAxis",
    "HighLow",
    "InvalidGeometry",
    "InvalidRange",
    "IterationLimitExceeded",
    "NormalizedData",
    "Padding",
    "PlotAxisError",
    "PlotDataError",
    "Point",
    "Scalar",
    "Series",
    "StepAxis",
    "Tick",
    "compute_bounds",
    "create_axis",
    "create_chart_rect",
    "find_range",
    "format_tick",
    "format_ticks_for_axis",
    "load_axis_options",
    "normalize_data",
    "normalize_padding",
    "validate_axis_options",
]
