import math
import unittest

import numpy as np

from densearray import ArgumentError, ArrayIndexError, DType, NDArray, ShapeError, host
from densearray.host import HostArray


class TestHostArray(unittest.TestCase):
    def setUp(self) -> None:
        self.m = host.array([[1, 2, 3], [4, 5, 6]])

    def test_metadata_and_str(self) -> None:
        self.assertIsInstance(self.m, HostArray)
        self.assertEqual(self.m.shape(), (2, 3))
        self.assertEqual(self.m.ndim(), 2)
        self.assertEqual(self.m.size(), 6)
        self.assertIs(self.m.dtype(), DType.REAL64)
        self.assertEqual(str(self.m), "array(2, 3)")
        self.assertIsInstance(self.m.data, NDArray)

    def test_one_based_get_set(self) -> None:
        self.assertEqual(self.m.get(1, 1), 1.0)
        self.assertEqual(self.m.get(2, 3), 6.0)
        out = self.m.set(2, 1, 40.0)
        self.assertIs(out, self.m)
        self.assertEqual(self.m.get(2, 1), 40.0)

    def test_index_zero_rejected(self) -> None:
        with self.assertRaises(ArrayIndexError):
            self.m.get(0, 1)
        with self.assertRaises(ArrayIndexError):
            self.m.get(3, 1)

    def test_views(self) -> None:
        self.assertEqual(self.m.reshape(3, 2).shape(), (3, 2))
        self.assertEqual(self.m.flatten().shape(), (6,))
        self.assertEqual(self.m.T.shape(), (3, 2))
        self.assertEqual(self.m.transpose((2, 1)).tolist(), self.m.T.tolist())
        col = host.array([[1], [2]])
        self.assertEqual(col.squeeze(2).shape(), (2,))
        self.assertEqual(host.array([1, 2]).expand_dims(1).shape(), (1, 2))
        self.assertEqual(host.array([1, 2]).expand_dims(2).shape(), (2, 1))

    def test_reductions_with_one_based_axis(self) -> None:
        self.assertEqual(self.m.sum(), 21.0)
        self.assertEqual(self.m.sum(axis=1).tolist(), [5.0, 7.0, 9.0])
        self.assertEqual(self.m.sum(axis=2).tolist(), [6.0, 15.0])
        self.assertEqual(self.m.mean(axis=-1).tolist(), [2.0, 5.0])
        self.assertAlmostEqual(host.array([2, 4, 4, 4, 5, 5, 7, 9]).std(), 2.0)
        with self.assertRaises(ArgumentError):
            self.m.sum(axis=0)

    def test_argmin_argmax_are_one_based(self) -> None:
        self.assertEqual(host.array([3, 9, 4]).argmax(), 2)
        self.assertEqual(host.array([3, 9, 1]).argmin(), 3)
        self.assertEqual(self.m.argmax(axis=2).tolist(), [3.0, 3.0])

    def test_operators(self) -> None:
        a = host.array([1, 2, 3])
        b = host.array([4, 5, 6])
        self.assertEqual((a + b).tolist(), [5.0, 7.0, 9.0])
        self.assertEqual((b - a).tolist(), [3.0, 3.0, 3.0])
        self.assertEqual((a * 2).tolist(), [2.0, 4.0, 6.0])
        self.assertEqual((12 / b).tolist(), [3.0, 2.4, 2.0])
        self.assertEqual((a ** 2).tolist(), [1.0, 4.0, 9.0])
        self.assertEqual((b % 4).tolist(), [0.0, 1.0, 2.0])
        self.assertEqual((-a).tolist(), [-1.0, -2.0, -3.0])
        self.assertEqual((a > 1).tolist(), [0.0, 1.0, 1.0])
        self.assertIsInstance(a + b, HostArray)

    def test_broadcast_column_plus_row(self) -> None:
        out = host.array([[1], [2], [3]]) + host.array([10, 20, 30])
        self.assertEqual(out.shape(), (3, 3))

    def test_matmul(self) -> None:
        a = host.array([[1, 2], [3, 4]])
        self.assertEqual((a @ host.identity(2)).tolist(), a.tolist())

    def test_equality_uses_tolerance(self) -> None:
        a = host.array([1.0, 2.0])
        self.assertTrue(a == host.array([1.0, 2.0 + 1e-12]))
        self.assertTrue(a == [1.0, 2.0])
        self.assertFalse(a == host.array([1.0, 2.1]))
        self.assertFalse(a == host.array([[1.0, 2.0]]))
        self.assertTrue(a != host.array([1.0, 3.0]))
        self.assertFalse(a == "text")

    def test_unhashable(self) -> None:
        with self.assertRaises(TypeError):
            hash(host.array([1.0]))

    def test_set_without_arguments(self) -> None:
        with self.assertRaises(ArgumentError):
            self.m.set()

    def test_numpy_integer_axes_and_indices(self) -> None:
        self.assertEqual(host.sum(self.m, axis=np.int64(1)).tolist(), [5.0, 7.0, 9.0])
        self.assertEqual(self.m.get(np.int64(2), np.int32(3)), 6.0)
        self.assertEqual(host.flip([1, 2], axis=np.int64(-1)).tolist(), [2.0, 1.0])
        with self.assertRaises(ArgumentError):
            self.m.sum(axis=np.int64(0))

    def test_numpy_scalar_on_the_left(self) -> None:
        out = np.float64(3.0) * host.array([1.0, 2.0])
        self.assertIsInstance(out, HostArray)
        self.assertEqual(out.tolist(), [3.0, 6.0])

    def test_angle_method(self) -> None:
        z = host.array([1j, -1.0])
        np.testing.assert_allclose(z.angle().tolist(), [math.pi / 2, math.pi])
        self.assertEqual(z.arg().tolist(), z.angle().tolist())


class TestHostRoundTrips(unittest.TestCase):
    def test_tolist_round_trip(self) -> None:
        nested = [[1.5, -2.0], [3.0, 4.25]]
        self.assertEqual(host.tolist(host.array(nested)), nested)
        c = host.array([1 + 2j, 3])
        self.assertEqual(host.array(c.tolist()).tolist(), [1 + 2j, 3 + 0j])

    def test_elementwise_functions(self) -> None:
        x = [0.0, 0.5, 1.0]
        np.testing.assert_allclose(host.sinh(x).tolist(), np.sinh(x))
        np.testing.assert_allclose(host.arcsin(x).tolist(), np.arcsin(x))
        self.assertEqual(host.floor([-1.5, 2.7]).tolist(), [-2.0, 2.0])
        self.assertEqual(host.clip([-1, 5, 10], 0, 6).tolist(), [0.0, 5.0, 6.0])
        np.testing.assert_allclose(host.arctan2([1.0], [1.0]).tolist(), [math.pi / 4])
        grid = [[0.0, 1.0], [2.0, 3.0]]
        np.testing.assert_allclose(host.sin(grid).tolist(), np.sin(grid))
        self.assertEqual(host.csqrt(-4), 2j)

    def test_complex_helpers(self) -> None:
        out = host.clog(-1)
        self.assertAlmostEqual(out.imag, math.pi)
        self.assertAlmostEqual(out.real, 0.0)
        self.assertIsInstance(host.clog([-1.0]), HostArray)
        z = host.from_polar([2.0], [math.pi / 2])
        self.assertIsInstance(z, HostArray)
        np.testing.assert_allclose(z.to_numpy(), [2j], atol=1e-15)
        np.testing.assert_allclose(host.angle(z).tolist(), [math.pi / 2])
        np.testing.assert_allclose(host.arg([-1.0]).tolist(), [math.pi])

    def test_array_of_tolist_reproduces_results(self) -> None:
        x = [0.0, 0.25, -0.5]
        grid = [[0.0, 1.0, 2.0], [3.0, -4.0, 5.5]]
        results = {
            "sinh": host.sinh(x),
            "arcsin": host.arcsin(x),
            "floor": host.floor([-1.5, 2.7, 0.2]),
            "concatenate": host.concatenate([grid, grid]),
            "stack": host.stack([x, x], axis=2),
            "clip": host.clip(grid, -1.0, 2.0),
            "arctan2": host.arctan2(grid, [[1.0, -1.0, 2.0]]),
            "sin": host.sin(grid),
            "complex": host.sin(host.array([[1j, 2.0], [0.5, -1j]])),
        }
        for name, out in results.items():
            back = host.array(out.tolist())
            self.assertEqual(back.shape(), out.shape(), name)
            self.assertIs(back.dtype(), out.dtype(), name)
            self.assertTrue(host.array_equal(back, out), name)
            self.assertTrue(back == out, name)

    def test_concatenate_defaults_to_first_axis(self) -> None:
        out = host.concatenate([[[1, 2]], [[3, 4]]])
        self.assertEqual(out.tolist(), [[1.0, 2.0], [3.0, 4.0]])
        out = host.concatenate([[[1, 2]], [[3, 4]]], axis=2)
        self.assertEqual(out.tolist(), [[1.0, 2.0, 3.0, 4.0]])

    def test_stack_and_split(self) -> None:
        self.assertEqual(host.stack([[1, 2], [3, 4]]).tolist(), [[1.0, 2.0], [3.0, 4.0]])
        parts = host.split(host.arange(6), 2)
        self.assertEqual(len(parts), 2)
        self.assertIsInstance(parts[0], HostArray)
        self.assertEqual(parts[1].tolist(), [3.0, 4.0, 5.0])


class TestHostPositions(unittest.TestCase):
    def test_argsort_and_searchsorted(self) -> None:
        self.assertEqual(host.argsort([30, 10, 20]).tolist(), [2.0, 3.0, 1.0])
        self.assertEqual(host.searchsorted([1, 2, 3], 2), 2)
        self.assertEqual(host.searchsorted([1, 2, 3], 2, side="right"), 3)
        self.assertEqual(host.searchsorted([1, 2, 3], [0, 4]).tolist(), [1.0, 4.0])

    def test_unique_positions(self) -> None:
        values, index, inverse, counts = host.unique(
            [3, 1, 3], return_index=True, return_inverse=True, return_counts=True
        )
        self.assertEqual(values.tolist(), [1.0, 3.0])
        self.assertEqual(index.tolist(), [2.0, 1.0])
        self.assertEqual(inverse.tolist(), [2.0, 1.0, 2.0])
        self.assertEqual(counts.tolist(), [1.0, 2.0])

    def test_unique_counts_only_are_not_shifted(self) -> None:
        _, counts = host.unique([5, 5], return_counts=True)
        self.assertEqual(counts.tolist(), [2.0])

    def test_nonzero_and_argwhere(self) -> None:
        rows, cols = host.nonzero([[0, 1], [1, 0]])
        self.assertEqual(rows.tolist(), [1.0, 2.0])
        self.assertEqual(cols.tolist(), [2.0, 1.0])
        self.assertEqual(host.argwhere([0, 7]).tolist(), [[2.0]])

    def test_insert_and_delete(self) -> None:
        self.assertEqual(host.insert([1, 2, 3], 1, 0).tolist(), [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(host.insert([1, 2, 3], 4, 9).tolist(), [1.0, 2.0, 3.0, 9.0])
        self.assertEqual(host.delete([1, 2, 3], 3).tolist(), [1.0, 2.0])
        self.assertEqual(host.delete([1, 2, 3], [1, 2]).tolist(), [3.0])
        with self.assertRaises(ArrayIndexError):
            host.delete([1, 2, 3], 0)

    def test_axis_conversions(self) -> None:
        m = [[1, 2], [3, 4]]
        self.assertEqual(host.flip(m, axis=2).tolist(), [[2.0, 1.0], [4.0, 3.0]])
        self.assertEqual(host.sort([[2, 1], [0, 3]], axis=1).tolist(), [[0.0, 1.0], [2.0, 3.0]])
        self.assertEqual(host.diff(m, axis=1).tolist(), [[2.0, 2.0]])
        self.assertEqual(host.cumsum(m, axis=2).tolist(), [[1.0, 3.0], [3.0, 7.0]])
        self.assertEqual(host.argmax(m, axis=1).tolist(), [2.0, 2.0])
        self.assertEqual(host.var([1, 3], ddof=1), 2.0)
        with self.assertRaises(ArgumentError):
            host.sum(m, axis=0)

    def test_scalars_pass_through(self) -> None:
        self.assertEqual(host.dot([1, 2], [3, 4]), 11.0)
        self.assertEqual(host.trace(host.eye(3)), 3.0)
        self.assertEqual(host.interp(0.5, [0, 1], [0, 2]), 1.0)

    def test_shape_errors_propagate(self) -> None:
        with self.assertRaises(ShapeError):
            host.array([[1, 2], [3]])


if __name__ == "__main__":
    unittest.main()
