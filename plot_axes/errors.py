from __future__ import annotations


class PlotAxisError(Exception):
    pass


class PlotDataError(PlotAxisError, ValueError):
    pass


class AxisConfigError(PlotAxisError, ValueError):
    pass


class InvalidGeometry(PlotAxisError, ValueError):
    pass


class InvalidRange(PlotAxisError, ValueError):
    pass


class IterationLimitExceeded(PlotAxisError, RuntimeError):
    pass
