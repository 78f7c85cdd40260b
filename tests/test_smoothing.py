"""
单次/二次指数平滑测试

覆盖无效输入、开/闭区间边界以及已知数值结果
"""

import math
import unittest

import numpy as np
import pandas as pd

from expsmooth import SmoothingConfig, exp_smooth, double_exp_smooth
from expsmooth.smoothing import exp_smooth_nb, exp_smooth_1d_nb, double_exp_smooth_nb


SERIES_A = [6.4, 5.6, 7.8, 8.8, 11.0, 11.6, 16.7, 15.3, 21.6, 22.4]


class TestExpSmooth(unittest.TestCase):
    """Single exponential smoothing."""

    def test_invalid_inputs(self):
        self.assertEqual(len(exp_smooth(None, 1.0)), 0)
        self.assertEqual(len(exp_smooth([], 0.0)), 0)
        self.assertEqual(len(exp_smooth([], 0.5)), 0)
        self.assertEqual(len(exp_smooth([3.0], 0.5)), 0)
        self.assertEqual(len(exp_smooth([1, 2, 3], -1)), 0)
        self.assertEqual(len(exp_smooth([1, 2, 3], math.nan)), 0)
        self.assertEqual(len(exp_smooth([1, 2, 3], "0.5")), 0)
        self.assertEqual(len(exp_smooth([1, 2, 3], None)), 0)
        self.assertEqual(len(exp_smooth([[1, 2], [3, 4]], 0.5)), 0)
        self.assertEqual(len(exp_smooth(["a", "b"], 0.5)), 0)
        self.assertEqual(len(exp_smooth(["1", "2"], 0.5)), 0)
        self.assertEqual(len(exp_smooth(np.array(["1.5", "2.5", "3.5"]), 0.5)), 0)
        self.assertEqual(len(exp_smooth([1.0, None, 3.0], 0.5)), 0)

    def test_exclusive_bounds(self):
        self.assertEqual(len(exp_smooth(SERIES_A, 0.0)), 0)
        self.assertEqual(len(exp_smooth(SERIES_A, 1.0)), 0)
        self.assertEqual(len(exp_smooth(SERIES_A, 1e-9)), len(SERIES_A))

    def test_known_values(self):
        result = exp_smooth(SERIES_A, 0.3)
        expected = [0, 6.4, 6.16, 6.652, 7.296, 8.407, 9.365, 11.565, 12.685, 15.360]

        self.assertEqual(len(result), 10)
        self.assertEqual(result[0], 0)
        self.assertEqual(result[1], 6.4)
        for got, want in zip(result, expected):
            self.assertAlmostEqual(got, want, places=2)

    def test_known_values_second_series(self):
        result = exp_smooth([71, 70, 69, 68, 64, 65, 72, 78, 75, 75, 75, 70], 0.1)
        expected = [0, 71, 70.9, 70.71, 70.439, 69.7951, 69.3155, 69.5840,
                    70.4256, 70.8830, 71.2947, 71.6652]

        self.assertEqual(len(result), 12)
        for got, want in zip(result, expected):
            self.assertAlmostEqual(got, want, places=3)

    def test_padding_and_length(self):
        for data in ([2.0, 3.0], [5, -1, 4, 4, 9], np.arange(50.0)):
            result = exp_smooth(data, 0.42)
            self.assertEqual(len(result), len(data))
            self.assertEqual(result[0], 0)
            self.assertEqual(result[1], data[0])

    def test_input_not_mutated(self):
        data = np.array(SERIES_A)
        before = data.copy()
        exp_smooth(data, 0.3)
        np.testing.assert_array_equal(data, before)

    def test_accepts_pandas_series(self):
        result = exp_smooth(pd.Series(SERIES_A), 0.3)
        np.testing.assert_allclose(result, exp_smooth(SERIES_A, 0.3))

    def test_idempotent(self):
        first = exp_smooth(SERIES_A, 0.3)
        second = exp_smooth(SERIES_A, 0.3)
        self.assertTrue(np.array_equal(first, second))

    def test_column_kernel_matches_1d(self):
        a = np.column_stack([SERIES_A, SERIES_A[::-1]])
        out = exp_smooth_nb(a, 0.3)
        np.testing.assert_array_equal(out[:, 0], exp_smooth_1d_nb(np.array(SERIES_A), 0.3))
        np.testing.assert_array_equal(out[:, 1], exp_smooth_1d_nb(np.array(SERIES_A[::-1]), 0.3))


class TestDoubleExpSmooth(unittest.TestCase):
    """Double exponential smoothing."""

    def test_invalid_inputs(self):
        self.assertEqual(len(double_exp_smooth(None, 1.0, 1.0)), 0)
        self.assertEqual(len(double_exp_smooth([], 0.0, 0.0)), 0)
        self.assertEqual(len(double_exp_smooth([1.0], 0.5, 0.5)), 0)
        self.assertEqual(len(double_exp_smooth([1, 2, 3], -1, 0.9)), 0)
        self.assertEqual(len(double_exp_smooth([1, 2, 3], 0.3, 1.5)), 0)
        self.assertEqual(len(double_exp_smooth([1, 2, 3], math.nan, 0.5)), 0)
        self.assertEqual(len(double_exp_smooth([1, 2, 3], 0.5, math.nan)), 0)

    def test_inclusive_bounds(self):
        # 闭区间：0 和 1 对二次平滑有效，对单次平滑无效
        for alpha, trend_gamma in ((0.0, 0.0), (1.0, 1.0), (0.0, 1.0), (1.0, 0.0)):
            self.assertEqual(len(double_exp_smooth(SERIES_A, alpha, trend_gamma)), len(SERIES_A))
        self.assertEqual(len(exp_smooth(SERIES_A, 0.0)), 0)
        self.assertEqual(len(exp_smooth(SERIES_A, 1.0)), 0)

    def test_known_values(self):
        result = double_exp_smooth(SERIES_A, 0.3623, 1.0)
        expected = [0, 6.4, 6.39706, 7.265770, 9.172658, 11.26810,
                    14.572349, 16.943092, 20.142112, 23.00016]

        self.assertEqual(result[0], 0)
        self.assertEqual(result[1], 6.4)
        for got, want in zip(result, expected):
            self.assertAlmostEqual(got, want, places=3)

    def test_two_points(self):
        np.testing.assert_array_equal(double_exp_smooth([4.0, 7.0], 0.5, 0.5), [0.0, 4.0])

    def test_idempotent(self):
        first = double_exp_smooth(SERIES_A, 0.4, 0.2)
        second = double_exp_smooth(SERIES_A, 0.4, 0.2)
        self.assertTrue(np.array_equal(first, second))

    def test_column_kernel_matches_wrapper(self):
        a = np.column_stack([SERIES_A, np.linspace(1.0, 10.0, 10)])
        out = double_exp_smooth_nb(a, 0.4, 0.2)
        np.testing.assert_allclose(out[:, 0], double_exp_smooth(SERIES_A, 0.4, 0.2))
        np.testing.assert_allclose(out[:, 1], double_exp_smooth(np.linspace(1.0, 10.0, 10), 0.4, 0.2))


class TestSmoothingConfig(unittest.TestCase):
    """Stored parameters for the non-seasonal smoothers."""

    def test_helpers_match_functions(self):
        config = SmoothingConfig(alpha=0.3, trend_gamma=0.2)
        np.testing.assert_array_equal(config.exp_smooth(SERIES_A), exp_smooth(SERIES_A, 0.3))
        np.testing.assert_array_equal(config.double_exp_smooth(SERIES_A), double_exp_smooth(SERIES_A, 0.3, 0.2))

    def test_invalid_config_returns_empty(self):
        self.assertEqual(len(SmoothingConfig(alpha=1.0).exp_smooth(SERIES_A)), 0)


if __name__ == '__main__':
    unittest.main()
