from __future__ import annotations

import unittest
from unittest import mock

from statbar.clip import ClipBounds
from statbar.dataset import require_statistical
from statbar.errors import InvalidDatasetKind
from statbar.labels import EntityCollection, StandardItemLabelGenerator
from statbar.orientation import OrientationFrame
from statbar.projection import DataArea
from statbar.renderer import ItemRendererState, StatisticalBarRenderer
from statbar.shapes import BarGeometry, ItemCoordinates
from statbar.style import BarStyle, GradientPaint, StandardGradientTransformer, Stroke


class _Affine:
    def value_to_pixel(self, value: float, area: DataArea, edge: str) -> float:
        return 100.0 - value * 5.0


class _Cells:
    def __init__(self, mean: float | None, dev: float | None) -> None:
        self.mean = mean
        self.dev = dev

    def get_mean_value(self, row: int, column: int) -> float | None:
        return self.mean

    def get_std_dev_value(self, row: int, column: int) -> float | None:
        return self.dev


class _FixedPositions:
    def position(self, coords: ItemCoordinates) -> float:
        return 30.0


class RecordingSurface:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def fill_rect(self, rect, paint) -> None:
        self.calls.append(("fill", rect, paint))

    def draw_rect(self, rect, paint, stroke) -> None:
        self.calls.append(("outline", rect, paint, stroke))

    def draw_line(self, segment, paint, stroke) -> None:
        self.calls.append(("line", segment, paint, stroke))

    def draw_text(self, x, y, text, paint, font_size_px) -> None:
        self.calls.append(("text", x, y, text))

    def text_size(self, text, font_size_px):
        return (10, 8)

    def kinds(self) -> list[str]:
        return [c[0] for c in self.calls]


FRAME = OrientationFrame.create("vertical", _Affine(), DataArea(0.0, 0.0, 100.0, 100.0))
CLIP = ClipBounds(lower=-20.0, upper=20.0)
ITEM = ItemCoordinates(row=0, column=0, visible_row=0)


class StatisticalBarRendererTests(unittest.TestCase):
    def _state(self, bar_width: float = 20.0, **kwargs) -> ItemRendererState:
        return ItemRendererState(surface=RecordingSurface(), positions=_FixedPositions(), bar_width=bar_width, **kwargs)

    def test_draws_bar_then_indicator(self) -> None:
        state = self._state()
        bar = StatisticalBarRenderer().draw_item(state, ITEM, _Cells(10.0, 2.0), CLIP, FRAME)
        self.assertEqual(bar, BarGeometry(x=30.0, y=50.0, width=20.0, height=50.0))
        self.assertEqual(state.surface.kinds(), ["fill", "line", "line", "line"])
        _, _, paint, stroke = state.surface.calls[1]
        self.assertEqual(paint, (128, 128, 128, 255))
        self.assertEqual(stroke, Stroke(1.0))

    def test_null_mean_draws_nothing_and_registers_nothing(self) -> None:
        entities = EntityCollection()
        generator = mock.Mock()
        state = self._state(entities=entities, label_generator=generator)
        style = BarStyle(item_labels_visible=True)
        result = StatisticalBarRenderer(style).draw_item(state, ITEM, _Cells(None, 2.0), CLIP, FRAME)
        self.assertIsNone(result)
        self.assertEqual(state.surface.calls, [])
        self.assertEqual(len(entities), 0)
        generator.generate_label.assert_not_called()

    def test_clipped_out_item_skips_indicator_label_and_entity(self) -> None:
        entities = EntityCollection()
        state = self._state(entities=entities, label_generator=StandardItemLabelGenerator())
        result = StatisticalBarRenderer(BarStyle(item_labels_visible=True)).draw_item(
            state, ITEM, _Cells(1.0, 5.0), ClipBounds(2.0, 10.0), FRAME
        )
        self.assertIsNone(result)
        self.assertEqual(state.surface.calls, [])
        self.assertEqual(len(entities), 0)

    def test_null_deviation_draws_bar_only(self) -> None:
        state = self._state()
        StatisticalBarRenderer().draw_item(state, ITEM, _Cells(10.0, None), CLIP, FRAME)
        self.assertEqual(state.surface.kinds(), ["fill"])

    def test_hidden_series_is_skipped_before_dataset_check(self) -> None:
        state = self._state()
        coords = ItemCoordinates(row=1, column=0, visible_row=-1)
        self.assertIsNone(StatisticalBarRenderer().draw_item(state, coords, object(), CLIP, FRAME))
        self.assertEqual(state.surface.calls, [])

    def test_wrong_dataset_kind_fails_before_painting(self) -> None:
        state = self._state()

        class _MeansOnly:
            def get_mean_value(self, row: int, column: int) -> float:
                return 1.0

        with self.assertRaises(InvalidDatasetKind):
            StatisticalBarRenderer().draw_item(state, ITEM, _MeansOnly(), CLIP, FRAME)
        self.assertEqual(state.surface.calls, [])

    def test_dataset_kind_checked_once_per_dataset(self) -> None:
        renderer = StatisticalBarRenderer()
        cells = _Cells(10.0, None)
        with mock.patch("statbar.renderer.require_statistical", wraps=require_statistical) as check:
            for column in range(3):
                coords = ItemCoordinates(row=0, column=column, visible_row=0)
                renderer.draw_item(self._state(), coords, cells, CLIP, FRAME)
            self.assertEqual(check.call_count, 1)
            renderer.draw_item(self._state(), ITEM, _Cells(5.0, None), CLIP, FRAME)
            self.assertEqual(check.call_count, 2)

    def test_label_text_is_generated_once_for_label_and_tooltip(self) -> None:
        entities = EntityCollection()
        generator = mock.Mock()
        generator.generate_label.return_value = "10"
        state = self._state(entities=entities, label_generator=generator, label_drawer=mock.Mock())
        StatisticalBarRenderer(BarStyle(item_labels_visible=True)).draw_item(state, ITEM, _Cells(10.0, None), CLIP, FRAME)
        generator.generate_label.assert_called_once()
        self.assertEqual(entities.entities[0].tooltip, "10")

    def test_outline_requires_flag_and_width_above_threshold(self) -> None:
        style = BarStyle(draw_bar_outline=True)
        wide = self._state(bar_width=20.0)
        StatisticalBarRenderer(style).draw_item(wide, ITEM, _Cells(10.0, None), CLIP, FRAME)
        self.assertEqual(wide.surface.kinds(), ["fill", "outline"])

        narrow = self._state(bar_width=3.0)
        StatisticalBarRenderer(style).draw_item(narrow, ITEM, _Cells(10.0, None), CLIP, FRAME)
        self.assertEqual(narrow.surface.kinds(), ["fill"])

        disabled = self._state(bar_width=20.0)
        StatisticalBarRenderer(BarStyle()).draw_item(disabled, ITEM, _Cells(10.0, None), CLIP, FRAME)
        self.assertEqual(disabled.surface.kinds(), ["fill"])

    def test_outline_skipped_without_paint(self) -> None:
        style = BarStyle(draw_bar_outline=True, outline_paint=None)
        state = self._state()
        StatisticalBarRenderer(style).draw_item(state, ITEM, _Cells(10.0, None), CLIP, FRAME)
        self.assertEqual(state.surface.kinds(), ["fill"])

    def test_indicator_falls_back_to_outline_paint_and_stroke(self) -> None:
        style = BarStyle(
            outline_paint=(1, 2, 3, 255),
            outline_stroke=Stroke(2.0),
            error_indicator_paint=None,
            error_indicator_stroke=None,
        )
        state = self._state()
        StatisticalBarRenderer(style).draw_item(state, ITEM, _Cells(10.0, 2.0), CLIP, FRAME)
        lines = [c for c in state.surface.calls if c[0] == "line"]
        self.assertEqual(len(lines), 3)
        for _, _, paint, stroke in lines:
            self.assertEqual(paint, (1, 2, 3, 255))
            self.assertEqual(stroke, Stroke(2.0))

    def test_dedicated_indicator_style_wins_over_outline(self) -> None:
        style = BarStyle(outline_paint=(1, 2, 3, 255), error_indicator_paint=(9, 9, 9, 255), error_indicator_stroke=None,
                         outline_stroke=Stroke(3.0))
        state = self._state()
        StatisticalBarRenderer(style).draw_item(state, ITEM, _Cells(10.0, 2.0), CLIP, FRAME)
        _, _, paint, stroke = state.surface.calls[1]
        self.assertEqual(paint, (9, 9, 9, 255))
        self.assertEqual(stroke, Stroke(3.0))

    def test_gradient_fill_is_fitted_to_bar(self) -> None:
        gradient = GradientPaint(color1=(0, 0, 0, 255), color2=(255, 255, 255, 255))
        style = BarStyle(fill=gradient, gradient_transformer=StandardGradientTransformer("vertical"))
        state = self._state()
        StatisticalBarRenderer(style).draw_item(state, ITEM, _Cells(10.0, None), CLIP, FRAME)
        _, _, paint = state.surface.calls[0]
        self.assertEqual((paint.x1, paint.y1, paint.x2, paint.y2), (40.0, 50.0, 40.0, 100.0))

    def test_gradient_without_transformer_is_passed_through(self) -> None:
        gradient = GradientPaint(color1=(0, 0, 0, 255), color2=(255, 255, 255, 255))
        state = self._state()
        StatisticalBarRenderer(BarStyle(fill=gradient)).draw_item(state, ITEM, _Cells(10.0, None), CLIP, FRAME)
        self.assertIs(state.surface.calls[0][2], gradient)

    def test_label_and_entity_receive_final_bar_and_sign(self) -> None:
        entities = EntityCollection()
        drawer = mock.Mock()
        state = self._state(entities=entities, label_generator=StandardItemLabelGenerator(), label_drawer=drawer)
        style = BarStyle(item_labels_visible=True)
        bar = StatisticalBarRenderer(style).draw_item(state, ITEM, _Cells(-4.0, None), CLIP, FRAME)
        drawer.draw_item_label.assert_called_once()
        args, kwargs = drawer.draw_item_label.call_args
        self.assertEqual(args[1], "-4")
        self.assertEqual(args[2], bar)
        self.assertTrue(kwargs["negative"])
        self.assertTrue(kwargs["vertical"])
        self.assertEqual(len(entities), 1)
        self.assertEqual(entities.entities[0].area, bar)
        self.assertEqual(entities.entities[0].tooltip, "-4")

    def test_labels_hidden_unless_enabled(self) -> None:
        drawer = mock.Mock()
        state = self._state(label_generator=StandardItemLabelGenerator(), label_drawer=drawer)
        StatisticalBarRenderer().draw_item(state, ITEM, _Cells(4.0, None), CLIP, FRAME)
        drawer.draw_item_label.assert_not_called()

    def test_series_fills_cycle_by_row(self) -> None:
        style = BarStyle(series_fills=((1, 0, 0, 255), (0, 1, 0, 255)))
        state = self._state()
        renderer = StatisticalBarRenderer(style)
        for row in range(3):
            renderer.draw_item(state, ItemCoordinates(row=row, column=0, visible_row=row), _Cells(1.0, None), CLIP, FRAME)
        fills = [c[2] for c in state.surface.calls]
        self.assertEqual(fills, [(1, 0, 0, 255), (0, 1, 0, 255), (1, 0, 0, 255)])


class BarStyleTests(unittest.TestCase):
    def test_replace_returns_new_value(self) -> None:
        base = BarStyle()
        changed = base.replace(draw_bar_outline=True)
        self.assertFalse(base.draw_bar_outline)
        self.assertTrue(changed.draw_bar_outline)
        self.assertNotEqual(base, changed)

    def test_defaults(self) -> None:
        style = BarStyle()
        self.assertEqual(style.outline_width_threshold, 3.0)
        self.assertEqual(style.error_cap_half_length, 5.0)

    def test_invalid_values_rejected(self) -> None:
        with self.assertRaises(ValueError):
            BarStyle(error_cap_half_length=-1.0)
        with self.assertRaises(ValueError):
            Stroke(0.0)


if __name__ == "__main__":
    unittest.main()
