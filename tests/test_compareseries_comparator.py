from __future__ import annotations

import math
import unittest

from compareseries.comparator import SeriesComparator, is_above, partition
from compareseries.series import BarsStyle, CompareConfig, LinesStyle, PointsStyle, Series


def _series(data, *, compare_to: int | None = None, horizontal: bool = False) -> Series:
    compare = CompareConfig() if compare_to is None else CompareConfig(enabled=True, series_index=compare_to)
    if horizontal:
        return Series(data=list(data), bars=BarsStyle(show=True, horizontal=True), compare=compare)
    return Series(data=list(data), lines=LinesStyle(show=True), points=PointsStyle(show=True), compare=compare)


class PartitionTests(unittest.TestCase):
    def test_disabled_compare_leaves_series_list_unchanged(self) -> None:
        ref = _series([(1, 5)])
        subject = _series([(1, 6)])
        all_series = [ref, subject]
        partition(all_series, 1)
        self.assertEqual(len(all_series), 2)
        self.assertTrue(subject.lines.show)

    def test_disabled_compare_skip_is_logged(self) -> None:
        with self.assertLogs("compareseries.comparator", level="DEBUG") as logs:
            partition([_series([(1, 5)])], 0)
        self.assertIn("has compare disabled", logs.output[0])

    def test_partition_log_names_derived_colors(self) -> None:
        all_series = [_series([(1, 5)]), _series([(1, 6), (1, 2)], compare_to=0)]
        with self.assertLogs("compareseries.comparator", level="DEBUG") as logs:
            partition(all_series, 1)
        self.assertIn("1 above in #FF0000, 1 below in #00FF00", logs.output[-1])

    def test_self_reference_is_a_no_op(self) -> None:
        subject = _series([(1, 6), (2, 1)], compare_to=0)
        all_series = [subject]
        with self.assertLogs("compareseries.comparator", level="DEBUG") as logs:
            partition(all_series, 0)
        self.assertEqual(all_series, [subject])
        self.assertTrue(subject.visible)
        self.assertIn("references itself", logs.output[0])

    def test_missing_reference_is_a_no_op(self) -> None:
        subject = _series([(1, 6)], compare_to=5)
        all_series = [_series([(1, 1)]), subject]
        partition(all_series, 1)
        self.assertEqual(len(all_series), 2)
        self.assertTrue(subject.visible)

    def test_negative_reference_index_is_out_of_range(self) -> None:
        subject = Series(data=[(1, 6)], lines=LinesStyle(show=True), compare=CompareConfig(enabled=True, series_index=-1))
        all_series = [_series([(1, 1)]), subject]
        partition(all_series, 1)
        self.assertEqual(len(all_series), 2)

    def test_vertical_scenario_splits_above_and_below(self) -> None:
        ref = _series([(1, 5), (2, 4), (3, 7)])
        subject = _series([(1, 5), (2, 3), (3, 8)], compare_to=0)
        all_series = [ref, subject]
        partition(all_series, 1)

        self.assertEqual(len(all_series), 4)
        above, below = all_series[2], all_series[3]
        self.assertEqual(above.data, [(1, 5), (3, 8)])
        self.assertEqual(below.data, [(2, 3)])
        self.assertEqual(above.color, (255, 0, 0, 255))
        self.assertEqual(below.color, (0, 255, 0, 255))

    def test_subject_is_hidden_but_its_data_is_untouched(self) -> None:
        original = [(1, 5), (2, 3), (3, 8)]
        ref = _series([(1, 5), (2, 4), (3, 7)])
        subject = _series(original, compare_to=0)
        subject.bars.show = True
        data_before = subject.data
        partition([ref, subject], 1)
        self.assertFalse(subject.bars.show)
        self.assertFalse(subject.lines.show)
        self.assertFalse(subject.points.show)
        self.assertIs(subject.data, data_before)
        self.assertEqual(subject.data, original)

    def test_other_series_are_not_modified(self) -> None:
        ref = _series([(1, 5)])
        bystander = _series([(1, 9)])
        subject = _series([(1, 6)], compare_to=0)
        partition([ref, bystander, subject], 2)
        self.assertTrue(ref.visible)
        self.assertTrue(bystander.visible)
        self.assertEqual(ref.data, [(1, 5)])

    def test_unmatched_key_is_always_above(self) -> None:
        ref = _series([(1, 5), (2, 4), (3, 7)])
        subject = _series([(4, -1000.0), (1, 1)], compare_to=0)
        all_series = [ref, subject]
        partition(all_series, 1)
        self.assertEqual(all_series[2].data, [(4, -1000.0)])
        self.assertEqual(all_series[3].data, [(1, 1)])

    def test_horizontal_bars_swap_key_and_value(self) -> None:
        ref_points = [(4, 1), (4, 2), (4, 3)]
        subject_points = [(5, 1), (3, 2), (8, 3)]

        vertical = [_series(ref_points), _series(subject_points, compare_to=0)]
        partition(vertical, 1)
        self.assertEqual(vertical[2].data, subject_points)
        self.assertEqual(vertical[3].data, [])

        horizontal = [_series(ref_points, horizontal=True), _series(subject_points, compare_to=0, horizontal=True)]
        partition(horizontal, 1)
        self.assertEqual(horizontal[2].data, [(5, 1), (8, 3)])
        self.assertEqual(horizontal[3].data, [(3, 2)])

    def test_reference_is_read_with_subject_orientation(self) -> None:
        ref = _series([(1, 5)], horizontal=True)
        subject = _series([(1, 4)], compare_to=0)
        all_series = [ref, subject]
        partition(all_series, 1)
        self.assertEqual(all_series[3].data, [(1, 4)])

    def test_duplicate_reference_keys_use_last_value(self) -> None:
        ref = _series([(1, 10), (1, 2)])
        subject = _series([(1, 5)], compare_to=0)
        all_series = [ref, subject]
        partition(all_series, 1)
        self.assertEqual(all_series[2].data, [(1, 5)])

    def test_every_point_is_classified_once_and_order_is_kept(self) -> None:
        ref_points = [(float(i), float((i * 7) % 11)) for i in range(40)]
        subject_points = [(float(i), float((i * 5) % 13)) for i in range(0, 60, 2)]
        all_series = [_series(ref_points), _series(subject_points, compare_to=0)]
        partition(all_series, 1)
        above, below = all_series[2], all_series[3]

        self.assertEqual(len(above.data) + len(below.data), len(subject_points))
        self.assertGreater(len(above.data), 0)
        self.assertGreater(len(below.data), 0)

        above_iter = iter(above.data)
        below_iter = iter(below.data)
        next_above = next(above_iter, None)
        next_below = next(below_iter, None)
        rebuilt = []
        for point in subject_points:
            if point == next_above:
                rebuilt.append(next_above)
                next_above = next(above_iter, None)
            else:
                rebuilt.append(next_below)
                next_below = next(below_iter, None)
        self.assertEqual(rebuilt, subject_points)

    def test_points_are_appended_unmodified(self) -> None:
        point = (2, 3, 0.5)
        all_series = [_series([(2, 1)]), _series([point], compare_to=0)]
        partition(all_series, 1)
        self.assertIs(all_series[2].data[0], point)

    def test_incomparable_values_fall_below_without_raising(self) -> None:
        ref = _series([(1, 5), (2, 5), (3, math.nan)])
        subject = _series([(1, math.nan), (2, None), (3, 9)], compare_to=0)
        all_series = [ref, subject]
        partition(all_series, 1)
        self.assertEqual(all_series[2].data, [])
        self.assertEqual(len(all_series[3].data), 3)

    def test_derived_series_are_not_partitioned_again(self) -> None:
        all_series = [_series([(1, 5)]), _series([(1, 6)], compare_to=0)]
        partition(all_series, 1)
        partition(all_series, 2)
        partition(all_series, 3)
        self.assertEqual(len(all_series), 4)

    def test_derived_series_attributes(self) -> None:
        all_series = [_series([(1, 5)]), _series([(1, 6)], compare_to=0)]
        subject = all_series[1]
        subject.label = "sales"
        partition(all_series, 1)
        for derived in all_series[2:]:
            self.assertIs(derived.origin_series, subject)
            self.assertIsNone(derived.label)
            self.assertFalse(derived.compare.enabled)
            self.assertTrue(derived.lines.show)
            self.assertEqual(derived.datapoints.points, [])
            self.assertEqual(derived.datapoints.pointsize, subject.datapoints.pointsize)

    def test_derived_style_groups_are_independent(self) -> None:
        all_series = [_series([(1, 5)]), _series([(1, 6), (1, 2)], compare_to=0)]
        partition(all_series, 1)
        subject, above, below = all_series[1], all_series[2], all_series[3]

        above.lines.show = False
        above.lines.line_width = 7
        above.bars.horizontal = True
        above.points.radius = 11

        self.assertTrue(below.lines.show)
        self.assertEqual(below.lines.line_width, 1)
        self.assertFalse(below.bars.horizontal)
        self.assertEqual(below.points.radius, 3)
        self.assertEqual(subject.lines.line_width, 1)
        self.assertEqual(subject.points.radius, 3)
        self.assertIsNot(above.bars, subject.bars)
        self.assertIsNot(above.datapoints, below.datapoints)

    def test_out_of_range_subject_position_is_a_no_op(self) -> None:
        all_series = [_series([(1, 5)])]
        partition(all_series, 3)
        self.assertEqual(len(all_series), 1)


class IsAboveTests(unittest.TestCase):
    def test_equal_value_is_above(self) -> None:
        self.assertTrue(is_above(1, 5, {1: 5}))

    def test_missing_key_is_above(self) -> None:
        self.assertTrue(is_above(2, -1, {1: 5}))

    def test_integer_and_float_keys_match(self) -> None:
        self.assertFalse(is_above(1.0, 4, {1: 5}))


class SeriesComparatorHookTests(unittest.TestCase):
    def test_hook_partitions_plot_data_at_given_position(self) -> None:
        all_series = [_series([(1, 5)]), _series([(1, 6)], compare_to=0)]

        class _FakePlot:
            def get_data(self) -> list[Series]:
                return all_series

        hook = SeriesComparator()
        subject = all_series[1]
        hook(_FakePlot(), subject, subject.data, subject.datapoints, 1)
        self.assertEqual(len(all_series), 4)
        self.assertEqual(all_series[2].data, [(1, 6)])


if __name__ == "__main__":
    unittest.main()
