from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class BarGeometry:
    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError("bar geometry must be normalized (width/height >= 0)")

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    def contains(self, x: float, y: float) -> bool:
        return self.x <= x <= self.max_x and self.y <= y <= self.max_y


@dataclass(frozen=True)
class Segment:
    x1: float
    y1: float
    x2: float
    y2: float

    @property
    def length(self) -> float:
        return math.hypot(self.x2 - self.x1, self.y2 - self.y1)


@dataclass(frozen=True)
class ErrorIndicatorGeometry:
    center_line: Segment
    cap1: Segment
    cap2: Segment

    def segments(self) -> tuple[Segment, Segment, Segment]:
        return (self.center_line, self.cap1, self.cap2)


@dataclass(frozen=True)
class ItemCoordinates:
    row: int
    column: int
    visible_row: int
