from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from statbar.scales import format_tick
from statbar.shapes import BarGeometry


class ItemLabelGenerator(Protocol):
    def generate_label(self, dataset: Any, row: int, column: int) -> str | None:
        ...


@dataclass(frozen=True)
class StandardItemLabelGenerator:
    """Formats the mean, optionally followed by ``± std dev``."""

    include_deviation: bool = False
    step: float | None = None

    def generate_label(self, dataset: Any, row: int, column: int) -> str | None:
        mean = dataset.get_mean_value(row, column)
        if mean is None:
            return None
        text = format_tick(mean, step=self.step)
        if self.include_deviation:
            dev = dataset.get_std_dev_value(row, column)
            if dev is not None:
                text = f"{text} ± {format_tick(dev, step=self.step)}"
        return text


@dataclass(frozen=True)
class RasterLabelDrawer:
    """Places item labels just outside the value end of a bar."""

    offset_px: float = 3.0

    def draw_item_label(
        self,
        surface: Any,
        text: str,
        bar: BarGeometry,
        *,
        negative: bool,
        vertical: bool,
        color: tuple[int, int, int, int],
        font_size_px: float,
    ) -> tuple[float, float]:
        w, h = surface.text_size(text, font_size_px)
        cx, cy = bar.center
        if vertical:
            x = cx - w / 2.0
            y = bar.max_y + self.offset_px if negative else bar.y - self.offset_px - h
        else:
            y = cy - h / 2.0
            x = bar.x - self.offset_px - w if negative else bar.max_x + self.offset_px
        surface.draw_text(x, y, text, color, font_size_px)
        return (x, y)


@dataclass(frozen=True)
class ItemEntity:
    row: int
    column: int
    area: BarGeometry
    tooltip: str | None = None


@dataclass
class EntityCollection:
    entities: list[ItemEntity] = field(default_factory=list)

    def add(self, entity: ItemEntity) -> None:
        self.entities.append(entity)

    def clear(self) -> None:
        self.entities.clear()

    def hit_test(self, x: float, y: float) -> ItemEntity | None:
        # later entities are painted on top
        for entity in reversed(self.entities):
            if entity.area.contains(x, y):
                return entity
        return None

    def __len__(self) -> int:
        return len(self.entities)
