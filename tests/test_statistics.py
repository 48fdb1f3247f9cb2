import unittest
from math import sqrt

import numpy as np

from coinpi.core.statistics import RunningStatistics


class RunningStatisticsTests(unittest.TestCase):
    def test_chunked_updates_match_full_sample(self) -> None:
        values = np.array([0.5, 0.75, 1.0, 0.6, 0.9, 1.0, 0.55])
        stats = RunningStatistics()
        for chunk in np.array_split(values, 3):
            stats.update(chunk)
        self.assertEqual(stats.count, values.size)
        self.assertAlmostEqual(stats.mean, float(values.mean()))
        self.assertAlmostEqual(stats.variance, float(values.var()))
        self.assertAlmostEqual(
            stats.standard_error, sqrt(float(values.var()) / values.size)
        )

    def test_empty_chunk_is_ignored(self) -> None:
        stats = RunningStatistics()
        stats.update(np.array([]))
        self.assertEqual(stats.count, 0)
        with self.assertRaises(ValueError):
            _ = stats.mean

    def test_variance_clamped_at_zero(self) -> None:
        stats = RunningStatistics()
        stats.update(np.full(1000, 0.1))
        self.assertGreaterEqual(stats.variance, 0.0)
        self.assertEqual(stats.standard_error, sqrt(stats.variance / 1000))


if __name__ == "__main__":
    unittest.main()
