from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Sequence

import numpy as np

from statbar.clip import ClipBounds
from statbar.dataset import require_statistical
from statbar.errors import InvalidDatasetKind
from statbar.labels import EntityCollection, ItemLabelGenerator
from statbar.layout import CategoryLayout, CategoryPositions, visible_series_indices
from statbar.orientation import AxisOrientation, OrientationFrame
from statbar.projection import DataArea, LinearValueAxis, RectangleEdge
from statbar.raster import draw_hline, draw_vline, fill_rect, new_canvas
from statbar.renderer import ItemRendererState, StatisticalBarRenderer
from statbar.scales import compute_value_range
from statbar.shapes import ItemCoordinates
from statbar.style import RGBA, BarStyle
from statbar.surface import RasterSurface


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartLayout:
    gutter_left: int = 40
    gutter_right: int = 16
    gutter_top: int = 16
    gutter_bottom: int = 32
    background: RGBA = (12, 16, 23, 255)
    plot_bg_color: RGBA = (20, 26, 36, 255)
    axis_color: RGBA = (124, 138, 156, 255)
    category: CategoryLayout = field(default_factory=CategoryLayout)

    def data_area(self, width: int, height: int) -> DataArea:
        w = width - self.gutter_left - self.gutter_right
        h = height - self.gutter_top - self.gutter_bottom
        if w <= 1 or h <= 1:
            raise ValueError("chart is too small for its gutters")
        return DataArea(x=float(self.gutter_left), y=float(self.gutter_top), width=float(w), height=float(h))


@dataclass
class ChartRender:
    canvas: np.ndarray
    data_area: DataArea
    clip_bounds: ClipBounds
    entities: EntityCollection
    frame: OrientationFrame


def render_statistical_bar_chart(
    dataset: Any,
    *,
    width: int,
    height: int,
    orientation: AxisOrientation = "vertical",
    value_range: tuple[float, float] | None = None,
    style: BarStyle | None = None,
    hidden_series: Sequence[int] = (),
    label_generator: ItemLabelGenerator | None = None,
    layout: ChartLayout | None = None,
    value_edge: RectangleEdge | None = None,
) -> ChartRender:
    """Render every visible (row, column) cell of ``dataset`` into a fresh RGBA canvas.

    ``value_range`` fixes the visible value window; when omitted it is
    derived from the means and their ± std dev intervals with zero kept in
    view.
    """
    data = require_statistical(dataset)
    row_count = getattr(data, "row_count", None)
    column_count = getattr(data, "column_count", None)
    if row_count is None or column_count is None:
        raise InvalidDatasetKind(f"{type(dataset).__name__} does not report row_count/column_count")

    layout = layout or ChartLayout()
    renderer = StatisticalBarRenderer(style)
    if value_range is None:
        bounds = renderer.find_range_bounds(data)
        if bounds is None:
            LOGGER.warning("dataset has no mean values; rendering an empty chart")
        value_range = compute_value_range(bounds)

    axis = LinearValueAxis(lower=float(value_range[0]), upper=float(value_range[1]))
    area = layout.data_area(width, height)
    frame = OrientationFrame.create(orientation, axis, area, value_edge)
    clip_bounds = axis.clip_bounds()

    visible = visible_series_indices(int(row_count), hidden_series)
    series_count = sum(1 for v in visible if v >= 0)
    cross_start, cross_space = frame.cross_axis_range()
    positions = CategoryPositions(
        layout=layout.category,
        series_count=series_count,
        category_count=int(column_count),
        start=cross_start,
        space=cross_space,
    )

    canvas = new_canvas(width, height, color=layout.background)
    fill_rect(canvas, area.x, area.y, area.width, area.height, layout.plot_bg_color)
    surface = RasterSurface(canvas)
    entities = EntityCollection()
    state = ItemRendererState(
        surface=surface,
        positions=positions,
        bar_width=positions.bar_width,
        entities=entities,
        label_generator=label_generator,
    )

    LOGGER.debug(
        "rendering %d series (%d hidden) x %d categories, clip [%s, %s]",
        series_count,
        int(row_count) - series_count,
        int(column_count),
        clip_bounds.lower,
        clip_bounds.upper,
    )
    for row in range(int(row_count)):
        for column in range(int(column_count)):
            coords = ItemCoordinates(row=row, column=column, visible_row=visible[row])
            renderer.draw_item(state, coords, data, clip_bounds, frame)

    _draw_axis_lines(canvas, frame, layout.axis_color)
    return ChartRender(canvas=canvas, data_area=area, clip_bounds=clip_bounds, entities=entities, frame=frame)


def _draw_axis_lines(canvas: np.ndarray, frame: OrientationFrame, color: RGBA) -> None:
    area = frame.data_area
    left = int(round(area.x))
    right = int(round(area.max_x)) - 1
    top = int(round(area.y))
    bottom = int(round(area.max_y)) - 1
    if frame.edge == "left":
        draw_vline(canvas, left, top, bottom, color)
    elif frame.edge == "right":
        draw_vline(canvas, right, top, bottom, color)
    elif frame.edge == "top":
        draw_hline(canvas, left, right, top, color)
    else:
        draw_hline(canvas, left, right, bottom, color)
