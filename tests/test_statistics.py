import unittest

from gradeboard.domain.logic.grading import build_record
from gradeboard.domain.logic.statistics import (
    class_average,
    pass_fail_counts,
    round_half_up,
    sort_by_total_descending,
    top_performer,
    top_performer_indices,
)
from gradeboard.domain.models.entities import EmptyCollectionError


def _record(name, cat, exam):
    return build_record(name, f"REG-{name}", cat, exam)


class StatisticsTests(unittest.TestCase):
    def setUp(self):
        self.john = _record("John", 25, 60)  # 85
        self.jane = _record("Jane", 18, 45)  # 63
        self.bob = _record("Bob", 12, 30)  # 42

    def test_sort_descending(self):
        ordered = sort_by_total_descending([self.bob, self.john, self.jane])
        self.assertEqual([r.total for r in ordered], [85, 63, 42])

    def test_sort_is_stable_for_ties(self):
        first = _record("First", 20, 40)
        second = _record("Second", 10, 50)
        ordered = sort_by_total_descending([self.bob, first, second, self.john])
        self.assertEqual([r.name for r in ordered], ["John", "First", "Second", "Bob"])

    def test_sort_is_idempotent(self):
        once = sort_by_total_descending([self.jane, self.bob, self.john])
        twice = sort_by_total_descending(once)
        self.assertEqual(once, twice)

    def test_sort_returns_new_list(self):
        records = [self.bob, self.john]
        sort_by_total_descending(records)
        self.assertEqual(records, [self.bob, self.john])

    def test_class_average(self):
        self.assertAlmostEqual(class_average([self.john, self.jane, self.bob]), 63.33, places=2)

    def test_empty_collection(self):
        with self.assertRaises(EmptyCollectionError):
            class_average([])
        with self.assertRaises(EmptyCollectionError):
            top_performer([])
        with self.assertRaises(EmptyCollectionError):
            pass_fail_counts([])

    def test_top_performer_takes_first_of_ties(self):
        later = _record("Later", 30, 55)  # 85
        self.assertIs(top_performer([self.john, self.jane, later]), self.john)

    def test_highlight_includes_every_tie(self):
        later = _record("Later", 30, 55)
        self.assertEqual(top_performer_indices([self.john, self.jane, later]), {0, 2})
        self.assertEqual(top_performer_indices([self.jane]), {0})
        self.assertEqual(top_performer_indices([]), set())

    def test_pass_fail_all_pass(self):
        stats = pass_fail_counts([self.john, self.jane, self.bob])
        self.assertEqual(stats.pass_count, 3)
        self.assertEqual(stats.fail_count, 0)
        self.assertEqual(stats.pass_pct, 100.0)
        self.assertEqual(stats.fail_pct, 0.0)

    def test_fail_pct_complements_rounded_pass_pct(self):
        failing = _record("Failing", 5, 10)
        stats = pass_fail_counts([self.john, self.jane, failing])
        self.assertEqual((stats.pass_count, stats.fail_count), (2, 1))
        self.assertEqual(stats.pass_pct, 66.7)
        self.assertAlmostEqual(stats.fail_pct, 33.3, places=6)

    def test_fail_pct_independent_rounding(self):
        records = [self.john] * 5 + [_record("Failing", 0, 0)] * 3  # 62.5 / 37.5
        stats = pass_fail_counts(records, complement_fail_pct=False)
        self.assertEqual(stats.fail_count, 3)
        self.assertAlmostEqual(stats.pass_pct + stats.fail_pct, 100.0, places=6)

    def test_pass_pct_rounds_exact_half_up(self):
        records = [self.john] + [_record("Failing", 5, 10)] * 15  # 6.25 / 93.75
        stats = pass_fail_counts(records)
        self.assertEqual((stats.pass_count, stats.fail_count), (1, 15))
        self.assertEqual(stats.pass_pct, 6.3)
        self.assertEqual(stats.fail_pct, 93.7)
        independent = pass_fail_counts(records, complement_fail_pct=False)
        self.assertEqual(independent.fail_pct, 93.8)

    def test_round_half_up(self):
        self.assertEqual(round_half_up(62.25), 62.3)
        self.assertEqual(round_half_up(6.25), 6.3)
        self.assertEqual(round_half_up(66.66666666666667), 66.7)
        self.assertEqual(round_half_up(100.0), 100.0)


if __name__ == "__main__":
    unittest.main()
