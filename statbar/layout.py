from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from statbar.shapes import ItemCoordinates


@dataclass(frozen=True)
class CategoryLayout:
    """Cross-axis placement of bars grouped by category.

    The available cross-axis space is split into an axis margin at each
    end, one slot per category with a gap between adjacent categories, and
    inside each slot one bar per visible series separated by item gaps.
    Margins are fractions of the available space.
    """

    lower_margin: float = 0.05
    upper_margin: float = 0.05
    category_margin: float = 0.20
    item_margin: float = 0.20
    maximum_bar_width: float = 1.0

    def __post_init__(self) -> None:
        for name in ("lower_margin", "upper_margin", "category_margin", "item_margin"):
            value = getattr(self, name)
            if not 0.0 <= value < 1.0:
                raise ValueError(f"{name} must be in [0, 1)")
        if self.lower_margin + self.upper_margin + self.category_margin + self.item_margin >= 1.0:
            raise ValueError("margins leave no space for bars")
        if not 0.0 < self.maximum_bar_width <= 1.0:
            raise ValueError("maximum_bar_width must be in (0, 1]")

    def calculate_bar_width(self, space: float, series_count: int, category_count: int) -> float:
        max_width = space * self.maximum_bar_width
        category_margin = self.category_margin if category_count > 1 else 0.0
        item_margin = self.item_margin if series_count > 1 else 0.0
        used = space * (1.0 - self.lower_margin - self.upper_margin - category_margin - item_margin)
        if series_count * category_count > 0:
            return min(used / (series_count * category_count), max_width)
        return min(used, max_width)

    def category_start(self, category: int, category_count: int, start: float, space: float) -> float:
        return start + self.lower_margin * space + category * (
            self._category_size(category_count, space) + self._category_gap(category_count, space)
        )

    def category_middle(self, category: int, category_count: int, start: float, space: float) -> float:
        return self.category_start(category, category_count, start, space) + self._category_size(category_count, space) / 2.0

    def bar_position(
        self,
        *,
        column: int,
        visible_row: int,
        series_count: int,
        category_count: int,
        bar_width: float,
        start: float,
        space: float,
    ) -> float:
        """Cross-axis origin of the bar for ``visible_row`` within category ``column``."""
        if series_count > 1:
            series_gap = space * self.item_margin / (category_count * (series_count - 1))
            series_width = self._series_width(space, series_count, category_count)
            origin = self.category_start(column, category_count, start, space)
            return origin + visible_row * (series_width + series_gap) + series_width / 2.0 - bar_width / 2.0
        return self.category_middle(column, category_count, start, space) - bar_width / 2.0

    def _category_size(self, category_count: int, space: float) -> float:
        available = space * (1.0 - self.lower_margin - self.upper_margin)
        if category_count > 1:
            available -= space * self.category_margin
        return available / max(1, category_count)

    def _category_gap(self, category_count: int, space: float) -> float:
        if category_count > 1:
            return space * self.category_margin / (category_count - 1)
        return 0.0

    def _series_width(self, space: float, series_count: int, category_count: int) -> float:
        factor = 1.0 - self.item_margin - self.lower_margin - self.upper_margin
        if category_count > 1:
            factor -= self.category_margin
        return space * factor / (category_count * series_count)


def visible_series_indices(row_count: int, hidden: Sequence[int] = ()) -> list[int]:
    """Map each row to its index among visible rows, -1 for hidden rows."""
    hidden_set = set(hidden)
    out: list[int] = []
    next_index = 0
    for row in range(row_count):
        if row in hidden_set:
            out.append(-1)
            continue
        out.append(next_index)
        next_index += 1
    return out


@dataclass(frozen=True)
class CategoryPositions:
    """A ``CategoryLayout`` bound to one render pass's counts and cross-axis span."""

    layout: CategoryLayout
    series_count: int
    category_count: int
    start: float
    space: float

    @property
    def bar_width(self) -> float:
        return self.layout.calculate_bar_width(self.space, self.series_count, self.category_count)

    def position(self, coords: ItemCoordinates) -> float:
        return self.layout.bar_position(
            column=coords.column,
            visible_row=coords.visible_row,
            series_count=self.series_count,
            category_count=self.category_count,
            bar_width=self.bar_width,
            start=self.start,
            space=self.space,
        )
