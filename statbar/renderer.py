from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Protocol

from statbar.clip import ClipBounds
from statbar.dataset import StatisticalDataset, find_range_bounds, require_statistical
from statbar.geometry import build_bar, build_error_indicator
from statbar.labels import EntityCollection, ItemEntity, ItemLabelGenerator, RasterLabelDrawer
from statbar.orientation import OrientationFrame
from statbar.shapes import BarGeometry, ItemCoordinates
from statbar.style import BarStyle
from statbar.surface import Surface


LOGGER = logging.getLogger(__name__)
_UNCHECKED = object()


class CategoryPositionProvider(Protocol):
    def position(self, coords: ItemCoordinates) -> float:
        ...


@dataclass
class ItemRendererState:
    """Per-pass collaborators shared by every item drawn in one render pass."""

    surface: Surface
    positions: CategoryPositionProvider
    bar_width: float
    entities: EntityCollection | None = None
    label_generator: ItemLabelGenerator | None = None
    label_drawer: RasterLabelDrawer = field(default_factory=RasterLabelDrawer)


class StatisticalBarRenderer:
    """Draws mean bars with a ± one standard deviation indicator."""

    def __init__(self, style: BarStyle | None = None) -> None:
        self.style = style or BarStyle()
        self._checked_dataset: Any = _UNCHECKED

    def find_range_bounds(self, dataset: Any) -> tuple[float, float] | None:
        return find_range_bounds(dataset, include_interval=True)

    def _statistical(self, dataset: Any) -> StatisticalDataset:
        # structural check runs once per dataset, not once per cell
        if dataset is not self._checked_dataset:
            require_statistical(dataset)
            self._checked_dataset = dataset
        return self._checked_dataset

    def draw_item(
        self,
        state: ItemRendererState,
        coords: ItemCoordinates,
        dataset: Any,
        clip_bounds: ClipBounds,
        frame: OrientationFrame,
    ) -> BarGeometry | None:
        if coords.visible_row < 0:
            return None
        data = self._statistical(dataset)
        row, column = coords.row, coords.column
        style = self.style

        mean = data.get_mean_value(row, column)
        if mean is None:
            LOGGER.debug("no mean for item (%d, %d)", row, column)
            return None
        bar = build_bar(mean, clip_bounds, state.positions.position(coords), state.bar_width, frame)
        if bar is None:
            LOGGER.debug("item (%d, %d) outside clip [%s, %s]", row, column, clip_bounds.lower, clip_bounds.upper)
            return None

        surface = state.surface
        surface.fill_rect(bar, style.resolve_fill(row, column, bar))
        if style.draw_bar_outline and state.bar_width > style.outline_width_threshold:
            paint = style.item_outline_paint(row, column)
            stroke = style.item_outline_stroke(row, column)
            if paint is not None and stroke is not None:
                surface.draw_rect(bar, paint, stroke)

        indicator = build_error_indicator(
            mean,
            data.get_std_dev_value(row, column),
            bar,
            frame,
            cap_half_length=style.error_cap_half_length,
        )
        if indicator is not None:
            paint, stroke = style.resolve_error_indicator(row, column)
            if paint is not None and stroke is not None:
                for segment in indicator.segments():
                    surface.draw_line(segment, paint, stroke)

        negative = mean < 0.0
        text = None
        if state.label_generator is not None:
            text = state.label_generator.generate_label(data, row, column)
        if text and style.item_labels_visible:
            state.label_drawer.draw_item_label(
                surface,
                text,
                bar,
                negative=negative,
                vertical=frame.is_vertical,
                color=style.label_color,
                font_size_px=style.label_font_size_px,
            )
        if state.entities is not None:
            state.entities.add(ItemEntity(row=row, column=column, area=bar, tooltip=text))
        return bar
