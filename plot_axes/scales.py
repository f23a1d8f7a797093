from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
import logging
import math
from typing import Sequence

import numpy as np

from plot_axes.errors import InvalidGeometry, InvalidRange, IterationLimitExceeded

LOGGER = logging.getLogger(__name__)

EPSILON = 2.221e-16
DEFAULT_PRECISION = 8
MAX_STEP_ITERATIONS = 1000


@dataclass(frozen=True)
class HighLow:
    high: float
    low: float


@dataclass(frozen=True)
class Bounds:
    high: float
    low: float
    value_range: float
    order_of_magnitude: int
    step: float
    min: float
    max: float
    range: float
    number_of_steps: int
    values: tuple[float, ...]

    def as_array(self) -> np.ndarray:
        return np.asarray(self.values, dtype=np.float64)


def order_of_magnitude(value: float) -> int:
    return int(math.floor(math.log10(abs(value))))


def project_length(axis_length: float, length: float, value_range: float) -> float:
    return length / value_range * axis_length


def round_with_precision(value: float, digits: int = DEFAULT_PRECISION) -> float:
    # Half-up rounding; builtin round() is half-even.
    scale = 10.0**digits
    return math.floor(value * scale + 0.5) / scale


def safe_increment(value: float, increment: float) -> float:
    result = value + increment
    if result == value:
        # Increment vanished below float resolution: nudge by one relative epsilon instead.
        return value * (1 + (EPSILON if increment > 0 else -EPSILON))
    return result


def smallest_factor(num: int) -> int:
    """Smallest non-trivial factor of ``num`` via Pollard's rho; primes return themselves."""
    if num == 1:
        return num
    if num % 2 == 0:
        return 2

    x1 = 2
    x2 = 2
    divisor = 1
    while divisor == 1:
        x1 = (x1 * x1 + 1) % num
        x2 = ((x2 * x2 + 1) ** 2 + 1) % num
        divisor = math.gcd(abs(x1 - x2), num)
    return divisor


def compute_bounds(
    axis_length: float,
    high_low: HighLow,
    min_tick_spacing: float,
    only_integer: bool = False,
    *,
    precision: int = DEFAULT_PRECISION,
) -> Bounds:
    """Snap ``high_low`` to a nice step so that ticks are at least ``min_tick_spacing`` pixels apart.

    The step starts at the order of magnitude of the value range and is then doubled or
    halved (never both) until the projected tick distance sits just above the minimum.
    With ``only_integer`` the step is kept integral: step 1 or the smallest factor of the
    snapped range are preferred, and a halving that would leave integers is undone.
    """
    if not math.isfinite(axis_length) or axis_length <= 0:
        raise InvalidGeometry(f"axis length must be > 0, got {axis_length!r}")
    high = float(high_low.high)
    low = float(high_low.low)
    if not (math.isfinite(high) and math.isfinite(low)) or high <= low:
        raise InvalidRange(f"high must be greater than low, got high={high!r} low={low!r}")
    if min_tick_spacing < 0:
        raise InvalidGeometry("min_tick_spacing must be >= 0")

    value_range = high - low
    if not math.isfinite(value_range):
        raise InvalidRange(f"range between low={low!r} and high={high!r} overflows a float")
    oom = order_of_magnitude(value_range)
    step = 10.0**oom
    if only_integer:
        # Integer ticks need integer snapping even for sub-unit ranges.
        step = max(step, 1.0)
    snapped_min = math.floor(low / step) * step
    snapped_max = math.ceil(high / step) * step
    snapped_range = snapped_max - snapped_min
    if not math.isfinite(snapped_range):
        raise InvalidRange(f"snapping [{low!r}, {high!r}] to step {step!r} overflows a float")
    number_of_steps = int(math.floor(snapped_range / step + 0.5))

    scale_up = project_length(axis_length, step, snapped_range) < min_tick_spacing

    if only_integer and project_length(axis_length, 1, snapped_range) >= min_tick_spacing:
        step = 1.0
    elif only_integer and _integer_factor_fits(axis_length, step, snapped_range, min_tick_spacing):
        step = float(smallest_factor(int(snapped_range)))
    else:
        step = _optimize_step(axis_length, step, snapped_range, min_tick_spacing, scale_up, only_integer)

    step = max(step, EPSILON)

    new_min = snapped_min
    new_max = snapped_max
    while new_min + step <= low:
        new_min = safe_increment(new_min, step)
    while new_max - step >= high:
        new_max = safe_increment(new_max, -step)

    values: list[float] = []
    current = new_min
    while current <= new_max:
        value = round_with_precision(current, precision)
        if not values or value != values[-1]:
            values.append(value)
        current = safe_increment(current, step)

    LOGGER.debug(
        "bounds for [%s, %s] over %spx: step=%s min=%s max=%s ticks=%d",
        low,
        high,
        axis_length,
        step,
        new_min,
        new_max,
        len(values),
    )
    return Bounds(
        high=high,
        low=low,
        value_range=value_range,
        order_of_magnitude=oom,
        step=step,
        min=new_min,
        max=new_max,
        range=new_max - new_min,
        number_of_steps=number_of_steps,
        values=tuple(values),
    )


def _integer_factor_fits(axis_length: float, step: float, snapped_range: float, min_tick_spacing: float) -> bool:
    if snapped_range < 1 or not float(snapped_range).is_integer():
        return False
    factor = smallest_factor(int(snapped_range))
    return factor < step and project_length(axis_length, factor, snapped_range) >= min_tick_spacing


def _optimize_step(
    axis_length: float,
    step: float,
    snapped_range: float,
    min_tick_spacing: float,
    scale_up: bool,
    only_integer: bool,
) -> float:
    iterations = 0
    while True:
        if scale_up and project_length(axis_length, step, snapped_range) <= min_tick_spacing:
            step *= 2
        elif not scale_up and project_length(axis_length, step / 2, snapped_range) >= min_tick_spacing:
            step /= 2
            if only_integer and step % 1 != 0:
                step *= 2
                break
        else:
            break

        iterations += 1
        if iterations > MAX_STEP_ITERATIONS:
            LOGGER.warning(
                "step optimization did not converge: axis_length=%s range=%s min_tick_spacing=%s",
                axis_length,
                snapped_range,
                min_tick_spacing,
            )
            raise IterationLimitExceeded("exceeded maximum number of iterations while optimizing scale step")
    return step


def format_tick(value: float, *, step: float | None = None) -> str:
    """Render one tick value with as many decimals as ``step`` needs."""
    if not math.isfinite(value):
        return str(value)
    has_step = step is not None and math.isfinite(step) and step > 0
    if has_step and abs(value) <= step * 1e-9:
        value = 0.0
    magnitude = abs(value)
    if magnitude and (magnitude >= 1e6 or magnitude < 1e-6 or (has_step and step < 1e-4)):
        return f"{value:.4e}"

    text = f"{value:.{_step_decimals(step if has_step else None)}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_ticks_for_axis(ticks: Sequence[float] | np.ndarray, step: float | None = None) -> list[str]:
    """Labels for a whole tick list; without ``step`` the smallest tick gap is used."""
    arr = np.asarray(ticks, dtype=np.float64)
    if step is None and arr.size > 1:
        step = float(np.min(np.abs(np.diff(arr))))
    return [format_tick(float(v), step=step) for v in arr]


def _step_decimals(step: float | None) -> int:
    if step is None:
        return 6
    exponent = Decimal(repr(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exponent)))
