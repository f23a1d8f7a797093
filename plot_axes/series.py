from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Union

import numpy as np


Dimension = Literal["x", "y"]
DEFAULT_DIMENSION: Dimension = "y"


@dataclass(frozen=True)
class Scalar:
    value: float


@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def get(self, dimension: Dimension) -> float:
        return self.x if dimension == "x" else self.y


Item = Union[Scalar, Point]


@dataclass(frozen=True)
class Series:
    items: tuple[Item, ...]
    name: str | None = None

    def __len__(self) -> int:
        return len(self.items)

    def values(self, dimension: Dimension | None = None) -> np.ndarray:
        """Flat float64 view of one dimension; holes are NaN."""
        out = np.full(len(self.items), np.nan, dtype=np.float64)
        for i, item in enumerate(self.items):
            out[i] = item_value(item, dimension)
        return out


@dataclass(frozen=True)
class NormalizedData:
    series: tuple[Series, ...]

    def values(self, dimension: Dimension | None = None) -> np.ndarray:
        if not self.series:
            return np.empty(0, dtype=np.float64)
        return np.concatenate([s.values(dimension) for s in self.series])


def item_value(item: Item | float | None, dimension: Dimension | None = None) -> float:
    # Bare scalars only carry a y coordinate; their x is the ordinal position.
    if item is None:
        return float("nan")
    if isinstance(item, Point):
        return float(item.get(dimension or DEFAULT_DIMENSION))
    if dimension == "x":
        return float("nan")
    if isinstance(item, Scalar):
        return float(item.value)
    return float(item)
