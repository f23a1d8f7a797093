from plot_axes.axes.auto_scale import AutoScaleAxis
from plot_axes.axes.base import Axis, AxisGeometry, Tick, coordinate
from plot_axes.axes.fixed_scale import FixedScaleAxis
from plot_axes.axes.step import StepAxis

__all__ = [
    "AutoScaleAxis",
    "Axis",
    "AxisGeometry",
    "FixedScaleAxis",
    "StepAxis",
    "Tick",
    "coordinate",
]
