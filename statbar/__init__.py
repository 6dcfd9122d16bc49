from statbar.chart import ChartLayout, ChartRender, render_statistical_bar_chart
from statbar.clip import ClipBounds, ClipResult, resolve_clip
from statbar.dataset import ArrayStatisticalDataset, StatisticalDataset, find_range_bounds, require_statistical
from statbar.errors import DatasetError, InvalidDatasetKind, StatBarError
from statbar.geometry import build_bar, build_error_indicator
from statbar.labels import EntityCollection, ItemEntity, RasterLabelDrawer, StandardItemLabelGenerator
from statbar.layout import CategoryLayout, CategoryPositions
from statbar.orientation import AxisOrientation, OrientationFrame
from statbar.projection import AxisProjection, DataArea, LinearValueAxis
from statbar.renderer import ItemRendererState, StatisticalBarRenderer
from statbar.shapes import BarGeometry, ErrorIndicatorGeometry, ItemCoordinates, Segment
from statbar.style import BarStyle, GradientPaint, StandardGradientTransformer, Stroke
from statbar.surface import RasterSurface, Surface

__all__ = [
    "ArrayStatisticalDataset",
    "AxisOrientation",
    "AxisProjection",
    "BarGeometry",
    "BarStyle",
    "CategoryLayout",
    "CategoryPositions",
    "ChartLayout",
    "ChartRender",
    "ClipBounds",
    "ClipResult",
    "DataArea",
    "DatasetError",
    "EntityCollection",
    "ErrorIndicatorGeometry",
    "GradientPaint",
    "InvalidDatasetKind",
    "ItemCoordinates",
    "ItemEntity",
    "ItemRendererState",
    "LinearValueAxis",
    "OrientationFrame",
    "RasterLabelDrawer",
    "RasterSurface",
    "Segment",
    "StandardGradientTransformer",
    "StandardItemLabelGenerator",
    "StatBarError",
    "StatisticalBarRenderer",
    "StatisticalDataset",
    "Stroke",
    "Surface",
    "build_bar",
    "build_error_indicator",
    "find_range_bounds",
    "render_statistical_bar_chart",
    "require_statistical",
]
