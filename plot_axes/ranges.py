from __future__ import annotations

import logging
import sys
from typing import Any

import numpy as np

from plot_axes.adapters.normalize import normalize_data
from plot_axes.scales import HighLow
from plot_axes.series import Dimension

LOGGER = logging.getLogger(__name__)


def find_range(
    data: Any,
    high: float | None = None,
    low: float | None = None,
    reference_value: float | None = None,
    dimension: Dimension | None = None,
) -> HighLow:
    """Highest and lowest value of ``data`` along ``dimension``, overridable by explicit bounds.

    Holes are ignored. A ``reference_value`` is always included in the result, and a
    flat or empty range is widened so that ``high > low`` holds on return.
    """
    find_high = high is None
    find_low = low is None
    out_high = -sys.float_info.max if find_high else float(high)
    out_low = sys.float_info.max if find_low else float(low)

    if find_high or find_low:
        values = normalize_data(data).values(dimension)
        finite = values[np.isfinite(values)]
        if finite.size:
            if find_high:
                out_high = max(out_high, float(np.max(finite)))
            if find_low:
                out_low = min(out_low, float(np.min(finite)))

    if reference_value is not None:
        out_high = max(float(reference_value), out_high)
        out_low = min(float(reference_value), out_low)

    if out_high <= out_low:
        corrected = _correct_degenerate(out_high, out_low)
        LOGGER.debug("degenerate range high=%s low=%s corrected to %s", out_high, out_low, corrected)
        return corrected
    return HighLow(high=out_high, low=out_low)


def _correct_degenerate(high: float, low: float) -> HighLow:
    if low == 0:
        return HighLow(high=1.0, low=low)
    if low < 0:
        # Same negative value on both ends: keep the zero line in view.
        return HighLow(high=0.0, low=low)
    if high > 0:
        return HighLow(high=high, low=0.0)
    # Empty data: the scan sentinels survived untouched.
    return HighLow(high=1.0, low=0.0)
