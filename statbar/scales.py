from __future__ import annotations

from decimal import Decimal, InvalidOperation

import numpy as np


def compute_value_range(
    bounds: tuple[float, float] | None,
    *,
    buffer_ratio: float = 0.05,
    include_zero: bool = True,
    nice: bool = False,
) -> tuple[float, float]:
    """Pad data bounds into a drawable value axis range.

    Bar charts normally keep zero in view so bars keep their true base;
    ``include_zero=False`` keeps the raw window, which the clip logic then
    handles by growing bars from the window edge.
    """
    if bounds is None:
        return (0.0, 1.0)
    vmin, vmax = float(bounds[0]), float(bounds[1])
    if include_zero:
        vmin = min(vmin, 0.0)
        vmax = max(vmax, 0.0)

    if vmin == vmax:
        delta = max(1.0, abs(vmin) * buffer_ratio)
        vmin -= delta
        vmax += delta
    else:
        pad = (vmax - vmin) * buffer_ratio
        # never pad across zero: a bar base at zero should stay on the axis edge
        vmin = vmin if (include_zero and vmin == 0.0) else vmin - pad
        vmax = vmax if (include_zero and vmax == 0.0) else vmax + pad

    if nice:
        ticks = generate_nice_ticks(vmin, vmax, target=6)
        vmin, vmax = float(ticks[0]), float(ticks[-1])
    return (vmin, vmax)


def generate_nice_ticks(vmin: float, vmax: float, target: int) -> np.ndarray:
    if target <= 0:
        raise ValueError("target must be > 0")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)

    span = _nice_number(vmax - vmin, round_result=False)
    step = _nice_number(span / max(target - 1, 1), round_result=True)
    tick_min = np.floor(vmin / step) * step
    tick_max = np.ceil(vmax / step) * step

    ticks = np.arange(tick_min, tick_max + 0.5 * step, step, dtype=np.float64)
    # Normalize floating-point drift so values like -4.44e-16 become 0.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def format_tick(value: float, *, step: float | None = None) -> str:
    if not np.isfinite(value):
        return str(value)
    if step is not None and np.isfinite(step) and step > 0 and abs(value) <= step * 1e-9:
        value = 0.0
    abs_v = abs(value)
    decimals = _decimals_from_step(step) if step is not None else 6
    if abs_v != 0 and (abs_v >= 1e6 or (step is not None and abs(step) < 1e-4) or abs_v < 1e-6):
        return f"{value:.4e}"

    d = Decimal(str(value))
    try:
        q = d.quantize(Decimal("1").scaleb(-decimals))
    except InvalidOperation:
        q = d
    out = format(q, "f")
    if "." in out:
        out = out.rstrip("0").rstrip(".")
    if out == "-0":
        out = "0"
    return out


def _nice_number(value: float, *, round_result: bool) -> float:
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def _decimals_from_step(step: float) -> int:
    if step <= 0 or not np.isfinite(step):
        return 6
    exp = Decimal(str(step)).normalize().as_tuple().exponent
    return min(12, max(0, -int(exp)))
