from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Protocol

import math

from statbar.clip import ClipBounds


RectangleEdge = Literal["top", "bottom", "left", "right"]
HORIZONTAL_EDGES: frozenset[str] = frozenset({"top", "bottom"})
VERTICAL_EDGES: frozenset[str] = frozenset({"left", "right"})


@dataclass(frozen=True)
class DataArea:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("data area width/height must be > 0")

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height


class AxisProjection(Protocol):
    def value_to_pixel(self, value: float, area: DataArea, edge: RectangleEdge) -> float:
        ...


@dataclass(frozen=True)
class LinearValueAxis:
    """Numeric axis mapping ``[lower, upper]`` linearly onto a data area edge.

    Axes on the top/bottom edge run left to right; axes on the left/right
    edge run bottom to top, so larger values sit higher on screen.
    """

    lower: float
    upper: float
    inverted: bool = False

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise ValueError("axis range must be finite")
        if self.upper <= self.lower:
            raise ValueError("axis upper bound must be > lower bound")

    def clip_bounds(self) -> ClipBounds:
        return ClipBounds(lower=self.lower, upper=self.upper)

    def value_to_pixel(self, value: float, area: DataArea, edge: RectangleEdge) -> float:
        if edge in HORIZONTAL_EDGES:
            start, end = area.x, area.max_x
        elif edge in VERTICAL_EDGES:
            start, end = area.max_y, area.y
        else:
            raise ValueError(f"unknown axis edge: {edge!r}")
        if self.inverted:
            start, end = end, start
        frac = (float(value) - self.lower) / (self.upper - self.lower)
        return start + frac * (end - start)

