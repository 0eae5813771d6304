import unittest

import numpy as np

import densearray as da
from densearray import ArgumentError, DtypeError, NDArray, ShapeError


class TestLinearAlgebra(unittest.TestCase):
    def test_vector_dot_is_scalar(self) -> None:
        self.assertEqual(da.dot([1, 2, 3], [4, 5, 6]), 32.0)

    def test_matrix_products(self) -> None:
        a = da.array([[1, 2], [3, 4]])
        b = da.array([[5, 6], [7, 8]])
        self.assertEqual(da.matmul(a, b).tolist(), [[19.0, 22.0], [43.0, 50.0]])
        self.assertEqual((a @ b).tolist(), [[19.0, 22.0], [43.0, 50.0]])
        self.assertEqual(da.dot(a, [1, 1]).tolist(), [3.0, 7.0])
        self.assertEqual(da.dot([1, 1], a).tolist(), [4.0, 6.0])

    def test_scalar_operand_scales(self) -> None:
        self.assertEqual(da.dot(2.0, [1, 2]).tolist(), [2.0, 4.0])

    def test_misaligned_shapes(self) -> None:
        with self.assertRaises(ShapeError) as ctx:
            da.dot(da.zeros(2, 3), da.zeros(2, 3))
        self.assertIn("not aligned", str(ctx.exception))
        with self.assertRaises(ShapeError):
            da.dot([1, 2], [1, 2, 3])
        with self.assertRaises(ShapeError):
            da.matmul([1, 2], [[1], [2]])

    def test_complex_dot(self) -> None:
        self.assertEqual(da.dot([1j, 1], [1j, 1]), 0j)

    def test_outer(self) -> None:
        self.assertEqual(da.outer([1, 2], [3, 4, 5]).tolist(), [[3.0, 4.0, 5.0], [6.0, 8.0, 10.0]])

    def test_trace_and_diagonals(self) -> None:
        for n in (1, 3, 5):
            self.assertEqual(da.trace(da.eye(n)), float(n))
        m = da.array([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        self.assertEqual(da.trace(m), 15.0)
        self.assertEqual(da.trace(m, 1), 8.0)
        self.assertEqual(da.diagonal(m, -1).tolist(), [4.0, 8.0])
        self.assertEqual(da.diag([1, 2]).tolist(), [[1.0, 0.0], [0.0, 2.0]])
        self.assertEqual(da.diag(m).tolist(), [1.0, 5.0, 9.0])
        with self.assertRaises(ShapeError):
            da.diag(da.zeros(2, 2, 2))


class TestSortSearch(unittest.TestCase):
    def test_sort_flattens_without_axis(self) -> None:
        self.assertEqual(da.sort([[3, 1], [2, 0]]).tolist(), [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(da.sort([[3, 1], [2, 0]], axis=1).tolist(), [[1.0, 3.0], [0.0, 2.0]])

    def test_argsort_gathers_sorted_values(self) -> None:
        data = np.random.default_rng(3).standard_normal(20)
        order = da.argsort(data.tolist()).to_numpy().astype(int)
        np.testing.assert_array_equal(data[order], da.sort(data.tolist()).to_numpy())

    def test_argsort_is_stable(self) -> None:
        self.assertEqual(da.argsort([2, 1, 2, 1]).tolist(), [1.0, 3.0, 0.0, 2.0])

    def test_sort_rejects_complex(self) -> None:
        with self.assertRaises(DtypeError):
            da.sort([1j, 2])

    def test_searchsorted(self) -> None:
        s = [1, 2, 2, 3]
        self.assertEqual(da.searchsorted(s, 2), 1)
        self.assertEqual(da.searchsorted(s, 2, side="right"), 3)
        self.assertEqual(da.searchsorted(s, [0, 5]).tolist(), [0.0, 4.0])
        with self.assertRaises(ArgumentError):
            da.searchsorted(s, 1, side="middle")

    def test_unique(self) -> None:
        data = [3, 1, 2, 3, 1, 3]
        self.assertEqual(da.unique(data).tolist(), [1.0, 2.0, 3.0])
        values, index, inverse, counts = da.unique(
            data, return_index=True, return_inverse=True, return_counts=True
        )
        self.assertEqual(index.tolist(), [1.0, 2.0, 0.0])
        self.assertEqual(counts.tolist(), [2.0, 1.0, 3.0])
        self.assertEqual(da.sum(counts), len(data))
        gathered = values.to_numpy()[inverse.to_numpy().astype(int)]
        np.testing.assert_array_equal(gathered, data)

    def test_unique_selected_extras(self) -> None:
        out = da.unique([2, 2, 5], return_counts=True)
        self.assertIsInstance(out, tuple)
        self.assertEqual(len(out), 2)
        self.assertEqual(out[1].tolist(), [2.0, 1.0])

    def test_nonzero_and_argwhere(self) -> None:
        m = [[0, 1], [2, 0]]
        rows, cols = da.nonzero(m)
        self.assertEqual(rows.tolist(), [0.0, 1.0])
        self.assertEqual(cols.tolist(), [1.0, 0.0])
        self.assertEqual(da.argwhere(m).tolist(), [[0.0, 1.0], [1.0, 0.0]])
        self.assertEqual(da.argwhere([0, 0]).shape, (0, 1))

    def test_nonzero_accepts_complex(self) -> None:
        (idx,) = da.nonzero([0, 1j, 0])
        self.assertIsInstance(idx, NDArray)
        self.assertEqual(idx.tolist(), [1.0])


if __name__ == "__main__":
    unittest.main()
