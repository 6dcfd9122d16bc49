from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, get_args

from statbar.projection import HORIZONTAL_EDGES, VERTICAL_EDGES, AxisProjection, DataArea, RectangleEdge
from statbar.shapes import BarGeometry, Segment


AxisOrientation = Literal["horizontal", "vertical"]


@dataclass(frozen=True)
class OrientationFrame:
    """Maps along-axis/cross-axis pixel coordinates onto screen coordinates.

    "Along" follows the value axis and "cross" follows the category axis.
    A vertical chart puts the value axis on screen Y; a horizontal chart
    puts it on screen X. Geometry builders work purely in along/cross terms
    and resolve to ``(x, y)`` through this frame as their last step.
    """

    orientation: AxisOrientation
    projection: AxisProjection
    data_area: DataArea
    edge: RectangleEdge

    def __post_init__(self) -> None:
        if self.orientation not in get_args(AxisOrientation):
            raise ValueError(f"unknown orientation: {self.orientation!r}")
        # a vertical chart's value axis sits on a left/right edge and vice versa
        allowed = VERTICAL_EDGES if self.orientation == "vertical" else HORIZONTAL_EDGES
        if self.edge not in allowed:
            raise ValueError(f"edge {self.edge!r} is not valid for a {self.orientation} value axis")

    @classmethod
    def create(
        cls,
        orientation: AxisOrientation,
        projection: AxisProjection,
        data_area: DataArea,
        edge: RectangleEdge | None = None,
    ) -> "OrientationFrame":
        if edge is None:
            edge = "left" if orientation == "vertical" else "bottom"
        return cls(orientation=orientation, projection=projection, data_area=data_area, edge=edge)

    @property
    def is_vertical(self) -> bool:
        return self.orientation == "vertical"

    def along_axis_pixel(self, value: float) -> float:
        return self.projection.value_to_pixel(value, self.data_area, self.edge)

    def cross_axis_extent(self, bar_width: float, position: float) -> tuple[float, float]:
        if bar_width < 0:
            raise ValueError("bar width must be >= 0")
        return (position, bar_width)

    def cross_axis_range(self) -> tuple[float, float]:
        area = self.data_area
        if self.is_vertical:
            return (area.x, area.width)
        return (area.y, area.height)

    def to_screen(self, along: float, cross: float) -> tuple[float, float]:
        if self.is_vertical:
            return (cross, along)
        return (along, cross)

    def rect(self, along_origin: float, along_size: float, cross_origin: float, cross_size: float) -> BarGeometry:
        x, y = self.to_screen(along_origin, cross_origin)
        if self.is_vertical:
            return BarGeometry(x=x, y=y, width=cross_size, height=along_size)
        return BarGeometry(x=x, y=y, width=along_size, height=cross_size)

    def segment(self, along1: float, cross1: float, along2: float, cross2: float) -> Segment:
        x1, y1 = self.to_screen(along1, cross1)
        x2, y2 = self.to_screen(along2, cross2)
        return Segment(x1=x1, y1=y1, x2=x2, y2=y2)

    def cross_axis_span(self, bar: BarGeometry) -> tuple[float, float]:
        if self.is_vertical:
            return (bar.x, bar.width)
        return (bar.y, bar.height)
