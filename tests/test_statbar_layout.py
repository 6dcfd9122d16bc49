from __future__ import annotations

import unittest

from statbar.layout import CategoryLayout, CategoryPositions, visible_series_indices
from statbar.scales import compute_value_range, format_tick
from statbar.shapes import ItemCoordinates


class CategoryLayoutTests(unittest.TestCase):
    def test_single_bar_is_centered(self) -> None:
        layout = CategoryLayout()
        width = layout.calculate_bar_width(100.0, 1, 1)
        self.assertAlmostEqual(width, 90.0)
        x = layout.bar_position(column=0, visible_row=0, series_count=1, category_count=1, bar_width=width, start=0.0, space=100.0)
        self.assertAlmostEqual(x, 5.0)

    def test_series_in_a_category_are_separated_by_item_gap(self) -> None:
        positions = CategoryPositions(CategoryLayout(), series_count=2, category_count=1, start=0.0, space=100.0)
        self.assertAlmostEqual(positions.bar_width, 35.0)
        first = positions.position(ItemCoordinates(row=0, column=0, visible_row=0))
        second = positions.position(ItemCoordinates(row=1, column=0, visible_row=1))
        self.assertAlmostEqual(first, 5.0)
        self.assertAlmostEqual(second - (first + positions.bar_width), 20.0)
        self.assertAlmostEqual(second + positions.bar_width, 95.0)

    def test_categories_separated_by_category_gap(self) -> None:
        positions = CategoryPositions(CategoryLayout(), series_count=2, category_count=2, start=10.0, space=100.0)
        self.assertAlmostEqual(positions.bar_width, 12.5)
        last_in_first = positions.position(ItemCoordinates(row=1, column=0, visible_row=1))
        first_in_second = positions.position(ItemCoordinates(row=0, column=1, visible_row=0))
        self.assertAlmostEqual(last_in_first + positions.bar_width, 50.0)
        self.assertAlmostEqual(first_in_second, 70.0)

    def test_maximum_bar_width_caps_width(self) -> None:
        layout = CategoryLayout(maximum_bar_width=0.1)
        self.assertAlmostEqual(layout.calculate_bar_width(200.0, 1, 1), 20.0)
        x = layout.bar_position(column=0, visible_row=0, series_count=1, category_count=1, bar_width=20.0, start=0.0, space=200.0)
        self.assertAlmostEqual(x, 90.0)

    def test_invalid_margins_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CategoryLayout(item_margin=0.8)
        with self.assertRaises(ValueError):
            CategoryLayout(maximum_bar_width=0.0)

    def test_visible_series_indices_skip_hidden(self) -> None:
        self.assertEqual(visible_series_indices(4, hidden=[1]), [0, -1, 1, 2])
        self.assertEqual(visible_series_indices(2), [0, 1])


class ValueRangeTests(unittest.TestCase):
    def test_zero_kept_as_base(self) -> None:
        lo, hi = compute_value_range((2.0, 10.0))
        self.assertEqual(lo, 0.0)
        self.assertAlmostEqual(hi, 10.5)

    def test_raw_window_padded_both_sides(self) -> None:
        lo, hi = compute_value_range((2.0, 10.0), include_zero=False)
        self.assertAlmostEqual(lo, 1.6)
        self.assertAlmostEqual(hi, 10.4)

    def test_degenerate_and_missing_bounds(self) -> None:
        self.assertEqual(compute_value_range(None), (0.0, 1.0))
        self.assertEqual(compute_value_range((5.0, 5.0), include_zero=False), (4.0, 6.0))

    def test_nice_range_snaps_to_ticks(self) -> None:
        self.assertEqual(compute_value_range((-3.2, 9.1), nice=True), (-5.0, 10.0))

    def test_format_tick(self) -> None:
        self.assertEqual(format_tick(2.5), "2.5")
        self.assertEqual(format_tick(30.0), "30")
        self.assertEqual(format_tick(-4.4e-16, step=1.0), "0")


if __name__ == "__main__":
    unittest.main()
