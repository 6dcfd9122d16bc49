from __future__ import annotations

import math

from statbar.clip import ClipBounds, resolve_clip
from statbar.orientation import OrientationFrame
from statbar.shapes import BarGeometry, ErrorIndicatorGeometry, Segment


DEFAULT_CAP_HALF_LENGTH = 5.0


def _is_null(value: float | None) -> bool:
    return value is None or math.isnan(value)


def build_bar(
    mean: float | None,
    clip_bounds: ClipBounds,
    category_position: float,
    bar_width: float,
    frame: OrientationFrame,
) -> BarGeometry | None:
    """Return the screen rectangle for one mean value, or None when no bar shows."""
    if _is_null(mean):
        return None
    clip = resolve_clip(float(mean), clip_bounds.lower, clip_bounds.upper)
    if not clip.visible:
        return None

    p_base = frame.along_axis_pixel(clip.base)
    p_value = frame.along_axis_pixel(clip.clipped_value)
    along_origin = min(p_base, p_value)
    along_size = abs(p_value - p_base)
    cross_origin, cross_size = frame.cross_axis_extent(bar_width, category_position)
    return frame.rect(along_origin, along_size, cross_origin, cross_size)


def build_error_indicator(
    mean: float,
    deviation: float | None,
    bar: BarGeometry,
    frame: OrientationFrame,
    cap_half_length: float = DEFAULT_CAP_HALF_LENGTH,
) -> ErrorIndicatorGeometry | None:
    """Return the I-beam for ``mean ± deviation`` centred across ``bar``.

    The deviation is not clipped: the indicator may extend past the visible
    value range even when the bar itself was clamped.
    """
    if _is_null(deviation):
        return None
    high_value = float(mean) + float(deviation)
    low_value = float(mean) - float(deviation)
    if not (math.isfinite(high_value) and math.isfinite(low_value)):
        return None
    high = frame.along_axis_pixel(high_value)
    low = frame.along_axis_pixel(low_value)

    cross_origin, cross_size = frame.cross_axis_span(bar)
    mid = cross_origin + cross_size / 2.0
    center_line: Segment = frame.segment(low, mid, high, mid)
    cap1 = frame.segment(high, mid - cap_half_length, high, mid + cap_half_length)
    cap2 = frame.segment(low, mid - cap_half_length, low, mid + cap_half_length)
    return ErrorIndicatorGeometry(center_line=center_line, cap1=cap1, cap2=cap2)
