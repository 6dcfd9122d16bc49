from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Literal, Protocol, Union

from statbar.shapes import BarGeometry


RGBA = tuple[int, int, int, int]

BAR_OUTLINE_WIDTH_THRESHOLD = 3.0
DEFAULT_ERROR_CAP_HALF_LENGTH = 5.0
DEFAULT_ERROR_INDICATOR_PAINT: RGBA = (128, 128, 128, 255)


@dataclass(frozen=True)
class Stroke:
    width: float = 1.0

    def __post_init__(self) -> None:
        if self.width <= 0:
            raise ValueError("stroke width must be > 0")


@dataclass(frozen=True)
class GradientPaint:
    color1: RGBA
    color2: RGBA
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 0.0
    y2: float = 1.0


Paint = Union[RGBA, GradientPaint]


class GradientPaintTransformer(Protocol):
    def transform(self, paint: GradientPaint, bar: BarGeometry) -> GradientPaint:
        ...


GradientDirection = Literal["vertical", "horizontal", "center_vertical", "center_horizontal"]


@dataclass(frozen=True)
class StandardGradientTransformer:
    """Stretches a gradient across a bar so both end colors fall on the bar."""

    direction: GradientDirection = "vertical"

    def transform(self, paint: GradientPaint, bar: BarGeometry) -> GradientPaint:
        cx, cy = bar.center
        if self.direction == "vertical":
            return replace(paint, x1=cx, y1=bar.y, x2=cx, y2=bar.max_y)
        if self.direction == "horizontal":
            return replace(paint, x1=bar.x, y1=cy, x2=bar.max_x, y2=cy)
        if self.direction == "center_vertical":
            return replace(paint, x1=cx, y1=bar.y, x2=cx, y2=cy)
        if self.direction == "center_horizontal":
            return replace(paint, x1=bar.x, y1=cy, x2=cx, y2=cy)
        raise ValueError(f"unknown gradient direction: {self.direction!r}")


@dataclass(frozen=True)
class BarStyle:
    fill: Paint = (62, 149, 255, 255)
    series_fills: tuple[Paint, ...] = ()
    outline_paint: RGBA | None = (208, 218, 232, 255)
    outline_stroke: Stroke | None = field(default_factory=Stroke)
    draw_bar_outline: bool = False
    outline_width_threshold: float = BAR_OUTLINE_WIDTH_THRESHOLD
    # None falls back to the item outline paint/stroke
    error_indicator_paint: RGBA | None = DEFAULT_ERROR_INDICATOR_PAINT
    error_indicator_stroke: Stroke | None = field(default_factory=Stroke)
    error_cap_half_length: float = DEFAULT_ERROR_CAP_HALF_LENGTH
    gradient_transformer: GradientPaintTransformer | None = None
    item_labels_visible: bool = False
    label_color: RGBA = (208, 218, 232, 255)
    label_font_size_px: float = 10.0

    def __post_init__(self) -> None:
        if self.outline_width_threshold < 0:
            raise ValueError("outline width threshold must be >= 0")
        if self.error_cap_half_length < 0:
            raise ValueError("error cap half length must be >= 0")

    def replace(self, **changes: Any) -> "BarStyle":
        return replace(self, **changes)

    def item_paint(self, row: int, column: int) -> Paint:
        if self.series_fills:
            return self.series_fills[row % len(self.series_fills)]
        return self.fill

    def item_outline_paint(self, row: int, column: int) -> RGBA | None:
        return self.outline_paint

    def item_outline_stroke(self, row: int, column: int) -> Stroke | None:
        return self.outline_stroke

    def resolve_fill(self, row: int, column: int, bar: BarGeometry) -> Paint:
        paint = self.item_paint(row, column)
        if self.gradient_transformer is not None and isinstance(paint, GradientPaint):
            return self.gradient_transformer.transform(paint, bar)
        return paint

    def resolve_error_indicator(self, row: int, column: int) -> tuple[RGBA | None, Stroke | None]:
        paint = self.error_indicator_paint
        if paint is None:
            paint = self.item_outline_paint(row, column)
        stroke = self.error_indicator_stroke
        if stroke is None:
            stroke = self.item_outline_stroke(row, column)
        return (paint, stroke)
