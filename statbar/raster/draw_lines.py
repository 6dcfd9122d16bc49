from __future__ import annotations

import numpy as np

from statbar.raster.canvas import RGBA, draw_hline, draw_pixel, draw_vline


def draw_line(dst: np.ndarray, x0: float, y0: float, x1: float, y1: float, color: RGBA, width: int = 1) -> None:
    ix0, iy0, ix1, iy1 = (int(round(v)) for v in (x0, y0, x1, y1))
    radius = max(0, width // 2)
    if iy0 == iy1:
        for yy in range(iy0 - radius, iy0 + radius + 1):
            draw_hline(dst, ix0, ix1, yy, color)
        return
    if ix0 == ix1:
        for xx in range(ix0 - radius, ix0 + radius + 1):
            draw_vline(dst, xx, iy0, iy1, color)
        return
    _draw_bresenham(dst, ix0, iy0, ix1, iy1, color=color, radius=radius)


def _draw_bresenham(dst: np.ndarray, x0: int, y0: int, x1: int, y1: int, color: RGBA, radius: int) -> None:
    dx = abs(x1 - x0)
    sx = 1 if x0 < x1 else -1
    dy = -abs(y1 - y0)
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        for yy in range(y0 - radius, y0 + radius + 1):
            for xx in range(x0 - radius, x0 + radius + 1):
                draw_pixel(dst, xx, yy, color)
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy
