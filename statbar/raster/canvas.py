from __future__ import annotations

import numpy as np


RGBA = tuple[int, int, int, int]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError("canvas width/height must be > 0")
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def pixel_span(start: float, end: float, limit: int) -> tuple[int, int] | None:
    """Inclusive pixel range covered by ``[start, end)``, at least one pixel wide."""
    a = int(round(min(start, end)))
    b = int(round(max(start, end))) - 1
    if b < a:
        b = a
    a = max(0, a)
    b = min(limit - 1, b)
    if a > b:
        return None
    return (a, b)


def _blend(patch: np.ndarray, rgb: np.ndarray, alpha: np.ndarray | float) -> None:
    a = np.asarray(alpha, dtype=np.float32)
    if a.ndim == 2:
        a = a[:, :, None]
    inv = 1.0 - a
    patch[:, :, :3] = (rgb * a + patch[:, :, :3].astype(np.float32) * inv).astype(np.uint8)
    patch[:, :, 3] = 255


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    _blend(dst[y : y + 1, x : x + 1], np.asarray(color[0:3], dtype=np.float32), color[3] / 255.0)


def fill_rect(dst: np.ndarray, x: float, y: float, width: float, height: float, color: RGBA) -> None:
    cols = pixel_span(x, x + width, dst.shape[1])
    rows = pixel_span(y, y + height, dst.shape[0])
    if cols is None or rows is None:
        return
    patch = dst[rows[0] : rows[1] + 1, cols[0] : cols[1] + 1]
    _blend(patch, np.asarray(color[0:3], dtype=np.float32), color[3] / 255.0)


def fill_gradient_rect(
    dst: np.ndarray,
    x: float,
    y: float,
    width: float,
    height: float,
    *,
    color1: RGBA,
    color2: RGBA,
    start: tuple[float, float],
    end: tuple[float, float],
) -> None:
    """Fill a rectangle with a linear gradient running from ``start`` to ``end``.

    Pixels before ``start`` take ``color1`` and pixels past ``end`` take
    ``color2`` (no cycling).
    """
    cols = pixel_span(x, x + width, dst.shape[1])
    rows = pixel_span(y, y + height, dst.shape[0])
    if cols is None or rows is None:
        return
    dx = end[0] - start[0]
    dy = end[1] - start[1]
    norm = dx * dx + dy * dy
    yy, xx = np.mgrid[rows[0] : rows[1] + 1, cols[0] : cols[1] + 1].astype(np.float32)
    if norm <= 0.0:
        t = np.zeros_like(xx)
    else:
        t = ((xx + 0.5 - start[0]) * dx + (yy + 0.5 - start[1]) * dy) / norm
        np.clip(t, 0.0, 1.0, out=t)
    c1 = np.asarray(color1, dtype=np.float32)
    c2 = np.asarray(color2, dtype=np.float32)
    mix = c1[None, None, :] * (1.0 - t[:, :, None]) + c2[None, None, :] * t[:, :, None]
    patch = dst[rows[0] : rows[1] + 1, cols[0] : cols[1] + 1]
    _blend(patch, mix[:, :, :3], mix[:, :, 3] / 255.0)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    _blend(dst[y : y + 1, xa : xb + 1], np.asarray(color[0:3], dtype=np.float32), color[3] / 255.0)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    _blend(dst[ya : yb + 1, x : x + 1], np.asarray(color[0:3], dtype=np.float32), color[3] / 255.0)


def stroke_rect(dst: np.ndarray, x: float, y: float, width: float, height: float, color: RGBA, line_width: int = 1) -> None:
    left = int(round(x))
    top = int(round(y))
    right = max(left, int(round(x + width)) - 1)
    bottom = max(top, int(round(y + height)) - 1)
    for k in range(max(1, line_width)):
        draw_hline(dst, left, right, top + k, color)
        if bottom - k > top + k:
            draw_hline(dst, left, right, bottom - k, color)
        draw_vline(dst, left + k, top + 1, bottom - 1, color)
        if right - k > left + k:
            draw_vline(dst, right - k, top + 1, bottom - 1, color)
