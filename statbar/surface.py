from __future__ import annotations

import math
from typing import Protocol

import numpy as np

from statbar.raster import draw_line, draw_text, fill_gradient_rect, fill_rect, stroke_rect, text_size
from statbar.shapes import BarGeometry, Segment
from statbar.style import RGBA, GradientPaint, Paint, Stroke


class Surface(Protocol):
    def fill_rect(self, rect: BarGeometry, paint: Paint) -> None:
        ...

    def draw_rect(self, rect: BarGeometry, paint: RGBA, stroke: Stroke) -> None:
        ...

    def draw_line(self, segment: Segment, paint: RGBA, stroke: Stroke) -> None:
        ...

    def draw_text(self, x: float, y: float, text: str, paint: RGBA, font_size_px: float) -> None:
        ...

    def text_size(self, text: str, font_size_px: float) -> tuple[int, int]:
        ...


class RasterSurface:
    """Surface painting onto an ``(height, width, 4)`` uint8 RGBA array."""

    def __init__(self, canvas: np.ndarray) -> None:
        if canvas.ndim != 3 or canvas.shape[2] != 4 or canvas.dtype != np.uint8:
            raise ValueError("canvas must be an (H, W, 4) uint8 array")
        self.canvas = canvas

    def fill_rect(self, rect: BarGeometry, paint: Paint) -> None:
        if isinstance(paint, GradientPaint):
            fill_gradient_rect(
                self.canvas,
                rect.x,
                rect.y,
                rect.width,
                rect.height,
                color1=paint.color1,
                color2=paint.color2,
                start=(paint.x1, paint.y1),
                end=(paint.x2, paint.y2),
            )
            return
        fill_rect(self.canvas, rect.x, rect.y, rect.width, rect.height, paint)

    def draw_rect(self, rect: BarGeometry, paint: RGBA, stroke: Stroke) -> None:
        stroke_rect(self.canvas, rect.x, rect.y, rect.width, rect.height, paint, line_width=_pixels(stroke))

    def draw_line(self, segment: Segment, paint: RGBA, stroke: Stroke) -> None:
        if not all(math.isfinite(v) for v in (segment.x1, segment.y1, segment.x2, segment.y2)):
            return
        draw_line(self.canvas, segment.x1, segment.y1, segment.x2, segment.y2, paint, width=_pixels(stroke))

    def draw_text(self, x: float, y: float, text: str, paint: RGBA, font_size_px: float) -> None:
        draw_text(self.canvas, int(round(x)), int(round(y)), text, paint, font_size_px=font_size_px)

    def text_size(self, text: str, font_size_px: float) -> tuple[int, int]:
        return text_size(text, font_size_px=font_size_px)


def _pixels(stroke: Stroke) -> int:
    return max(1, int(round(stroke.width)))
