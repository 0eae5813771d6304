import math
import unittest

import numpy as np

import densearray as da
from densearray import ArgumentError, DType, DtypeError, NDArray


class TestAxisReductions(unittest.TestCase):
    def setUp(self) -> None:
        self.m = da.array([[1, 2, 3], [4, 5, 6]])

    def test_global_reductions_return_python_scalars(self) -> None:
        self.assertEqual(da.sum(self.m), 21.0)
        self.assertIsInstance(da.sum(self.m), float)
        self.assertEqual(da.prod(self.m), 720.0)
        self.assertEqual(da.mean(self.m), 3.5)
        self.assertEqual(da.min(self.m), 1.0)
        self.assertEqual(da.max(self.m), 6.0)
        self.assertEqual(da.ptp(self.m), 5.0)

    def test_axis_reductions(self) -> None:
        self.assertEqual(da.sum(self.m, 0).tolist(), [5.0, 7.0, 9.0])
        self.assertEqual(da.sum(self.m, 1).tolist(), [6.0, 15.0])
        self.assertEqual(self.m.max(axis=-1).tolist(), [3.0, 6.0])
        self.assertEqual(self.m.mean(0).tolist(), [2.5, 3.5, 4.5])

    def test_rank_one_axis_reduction_has_shape_one(self) -> None:
        out = da.sum([1.0, 2.0, 3.0], 0)
        self.assertIsInstance(out, NDArray)
        self.assertEqual(out.shape, (1,))
        self.assertEqual(out.tolist(), [6.0])

    def test_sum_matches_numpy_on_3d(self) -> None:
        x = np.arange(24.0).reshape(2, 3, 4)
        a = da.from_numpy(x)
        for axis in range(3):
            np.testing.assert_allclose(a.sum(axis).to_numpy(), x.sum(axis=axis))

    def test_sum_of_axis_sums_is_total(self) -> None:
        x = np.random.default_rng(1).standard_normal((4, 5))
        a = da.from_numpy(x)
        self.assertAlmostEqual(da.sum(da.sum(a, 0)), da.sum(a))

    def test_argmin_argmax(self) -> None:
        self.assertEqual(da.argmax([3.0, 9.0, 4.0]), 1)
        self.assertEqual(da.argmin([3.0, 9.0, 1.0]), 2)
        self.assertEqual(self.m.argmax(0).tolist(), [1.0, 1.0, 1.0])
        self.assertEqual(self.m.argmin(1).tolist(), [0.0, 0.0])

    def test_argmax_flattened_position(self) -> None:
        a = da.array([[1, 9], [7, 3]])
        self.assertEqual(a.argmax(), 1)
        self.assertEqual(a.argmin(), 0)

    def test_cumulative(self) -> None:
        self.assertEqual(da.cumsum([1, 2, 3, 4]).tolist(), [1.0, 3.0, 6.0, 10.0])
        self.assertEqual(da.cumprod([1, 2, 3, 4]).tolist(), [1.0, 2.0, 6.0, 24.0])
        self.assertEqual(self.m.cumsum(0).tolist(), [[1.0, 2.0, 3.0], [5.0, 7.0, 9.0]])
        self.assertEqual(self.m.cumsum().shape, (6,))

    def test_logical(self) -> None:
        self.assertTrue(da.all([1.0, 2.0]))
        self.assertFalse(da.all([1.0, 0.0]))
        self.assertTrue(da.any([0.0, 0.0, 3.0]))
        self.assertEqual(da.any([[0, 1], [0, 0]], 1).tolist(), [1.0, 0.0])

    def test_invalid_axis(self) -> None:
        with self.assertRaises(ArgumentError):
            self.m.sum(2)


class TestStatistics(unittest.TestCase):
    def test_population_std(self) -> None:
        self.assertAlmostEqual(da.std([2, 4, 4, 4, 5, 5, 7, 9]), 2.0)
        self.assertAlmostEqual(da.var([2, 4, 4, 4, 5, 5, 7, 9]), 4.0)

    def test_sample_variance(self) -> None:
        self.assertAlmostEqual(da.var([1, 2, 3, 4], ddof=1), np.var([1, 2, 3, 4], ddof=1))
        with self.assertRaises(ArgumentError):
            da.var([1, 2], ddof=-1)

    def test_median(self) -> None:
        self.assertEqual(da.median([1, 2, 3, 4]), 2.5)
        self.assertEqual(da.median([3, 1, 2]), 2.0)

    def test_percentile_and_quantile(self) -> None:
        data = [1, 2, 3, 4, 5]
        self.assertEqual(da.percentile(data, 50), da.median(data))
        self.assertEqual(da.percentile(data, 25), 2.0)
        self.assertEqual(da.quantile(data, 0.75), 4.0)
        self.assertEqual(da.quantile(data, 0.0), 1.0)
        self.assertEqual(da.quantile(data, 1.0), 5.0)
        self.assertAlmostEqual(da.quantile([1, 2], 0.5), 1.5)

    def test_percentile_out_of_range(self) -> None:
        with self.assertRaises(ArgumentError):
            da.percentile([1, 2, 3], 101)
        with self.assertRaises(ArgumentError):
            da.quantile([1, 2, 3], -0.1)

    def test_complex_moments(self) -> None:
        c = da.array([1 + 1j, 3 + 3j])
        self.assertEqual(da.sum(c), 4 + 4j)
        self.assertEqual(da.mean(c), 2 + 2j)
        self.assertAlmostEqual(da.var(c), 2.0)

    def test_order_statistics_reject_complex(self) -> None:
        c = da.array([1 + 1j])
        for fn in (da.min, da.max, da.argmax, da.median):
            with self.assertRaises(DtypeError):
                fn(c)


class TestEmptyReductions(unittest.TestCase):
    def setUp(self) -> None:
        self.empty = da.array([])

    def test_identities(self) -> None:
        self.assertEqual(da.sum(self.empty), 0.0)
        self.assertEqual(da.prod(self.empty), 1.0)
        self.assertIs(da.all(self.empty), True)
        self.assertIs(da.any(self.empty), False)

    def test_moments_are_nan(self) -> None:
        for fn in (da.mean, da.var, da.std, da.median):
            self.assertTrue(math.isnan(fn(self.empty)), fn.__name__)
        self.assertTrue(math.isnan(da.percentile(self.empty, 10)))

    def test_extrema_raise(self) -> None:
        for fn in (da.min, da.max, da.argmin, da.argmax, da.ptp):
            with self.assertRaises(ArgumentError):
                fn(self.empty)

    def test_empty_axis(self) -> None:
        a = NDArray((0, 3))
        self.assertEqual(a.sum(0).tolist(), [0.0, 0.0, 0.0])
        self.assertTrue(all(math.isnan(v) for v in a.mean(0).tolist()))
        with self.assertRaises(ArgumentError):
            a.max(0)


class TestHistogramBincount(unittest.TestCase):
    def test_histogram_counts_and_edges(self) -> None:
        counts, edges = da.histogram([1, 2, 2, 3, 3, 3], 3)
        self.assertEqual(counts.tolist(), [1.0, 2.0, 3.0])
        np.testing.assert_allclose(edges.to_numpy(), [1.0, 5 / 3, 7 / 3, 3.0])

    def test_histogram_default_bins_and_range(self) -> None:
        counts, edges = da.histogram(np.linspace(0, 1, 11).tolist())
        self.assertEqual(counts.size, 10)
        self.assertEqual(edges.size, 11)
        self.assertEqual(da.sum(counts), 11.0)

        counts, _ = da.histogram([0.5, 5.0], 2, range=(0, 2))
        self.assertEqual(counts.tolist(), [1.0, 0.0])

    def test_histogram_degenerate_range(self) -> None:
        counts, edges = da.histogram([2.0, 2.0], 1)
        self.assertEqual(counts.tolist(), [2.0])
        self.assertEqual(edges.tolist(), [1.5, 2.5])

    def test_histogram_invalid_bins(self) -> None:
        with self.assertRaises(ArgumentError):
            da.histogram([1.0], 0)

    def test_bincount(self) -> None:
        self.assertEqual(da.bincount([0, 1, 1, 3]).tolist(), [1.0, 2.0, 0.0, 1.0])
        self.assertEqual(da.bincount([1], minlength=4).tolist(), [0.0, 1.0, 0.0, 0.0])
        self.assertEqual(
            da.bincount([0, 1, 1], weights=[0.5, 1.0, 2.0]).tolist(), [0.5, 3.0]
        )
        with self.assertRaises(ArgumentError):
            da.bincount([-1, 2])
        with self.assertRaises(ArgumentError):
            da.bincount([1.5])

    def test_result_dtype_is_real(self) -> None:
        counts, _ = da.histogram([1.0, 2.0], 2)
        self.assertIs(counts.dtype, DType.REAL64)


if __name__ == "__main__":
    unittest.main()
