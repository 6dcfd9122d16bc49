from __future__ import annotations

from dataclasses import dataclass
import math


@dataclass(frozen=True)
class ClipResult:
    base: float
    clipped_value: float
    visible: bool


@dataclass(frozen=True)
class ClipBounds:
    lower: float
    upper: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lower) and math.isfinite(self.upper)):
            raise ValueError("clip bounds must be finite")
        if self.lower > self.upper:
            raise ValueError(f"lower clip {self.lower} exceeds upper clip {self.upper}")

    def resolve(self, value: float) -> ClipResult:
        return resolve_clip(value, self.lower, self.upper)


def resolve_clip(value: float, lower: float, upper: float) -> ClipResult:
    """Resolve the base and drawn extent of a bar grown from zero.

    When the visible range excludes zero the bar grows from the clip edge
    nearest to zero instead, and a value lying entirely on the far side of
    that edge produces no bar at all.
    """
    value = float(value)
    if upper <= 0.0:
        # whole window at or below zero: bars hang from the upper clip
        if value >= upper:
            return ClipResult(base=upper, clipped_value=upper, visible=False)
        if value <= lower:
            value = lower
        return ClipResult(base=upper, clipped_value=value, visible=True)

    if lower <= 0.0:
        if value >= upper:
            value = upper
        elif value <= lower:
            value = lower
        return ClipResult(base=0.0, clipped_value=value, visible=True)

    # whole window above zero: bars stand on the lower clip
    if value <= lower:
        return ClipResult(base=lower, clipped_value=lower, visible=False)
    if value >= upper:
        value = upper
    return ClipResult(base=lower, clipped_value=value, visible=True)
