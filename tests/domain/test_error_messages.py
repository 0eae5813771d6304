import unittest

import numpy as np

import densearray as da
from densearray import (
    ArgumentError,
    ArrayError,
    ArrayIndexError,
    BroadcastError,
    DtypeError,
    ShapeError,
    host,
)


class TestKeywordPrefix(unittest.TestCase):
    def test_missing_keyword_is_prefixed(self) -> None:
        self.assertEqual(str(ShapeError("ragged input")), "shape error: ragged input")
        self.assertEqual(str(DtypeError("bad leaf")), "dtype error: bad leaf")
        self.assertEqual(str(ArrayIndexError("out of range")), "index error: out of range")
        self.assertEqual(str(ArgumentError("step is zero")), "argument error: step is zero")

    def test_present_keyword_is_kept(self) -> None:
        self.assertEqual(str(ShapeError("shape (2,) vs (3,)")), "shape (2,) vs (3,)")
        self.assertEqual(str(DtypeError("Dtype complex128")), "Dtype complex128")

    def test_empty_message(self) -> None:
        self.assertEqual(str(ShapeError()), "shape error")

    def test_broadcast_message(self) -> None:
        err = BroadcastError((2, 3), (4,))
        self.assertIn("broadcast", str(err))
        self.assertIn("shape", str(err))


class TestRaiseSitesCarryKeyword(unittest.TestCase):
    def assertKeyword(self, cls, fn, *args) -> None:
        with self.assertRaises(cls) as ctx:
            fn(*args)
        self.assertIn(cls.keyword, str(ctx.exception).lower())

    def test_shape_errors(self) -> None:
        self.assertKeyword(ShapeError, host.array, [[1, 2], [3]])
        self.assertKeyword(ShapeError, host.split, [1, 2, 3], 2)
        self.assertKeyword(ShapeError, da.array([[1, 2]]).squeeze, 1)
        self.assertKeyword(ShapeError, da.concatenate, [1, 2])
        self.assertKeyword(ShapeError, da.diff, [1.0])
        self.assertKeyword(ShapeError, da.pad, da.array(1.0), 1)
        self.assertKeyword(ShapeError, da.dot, [1, 2], [1, 2, 3])

    def test_dtype_errors(self) -> None:
        self.assertKeyword(DtypeError, da.complex_array, [1j], [0])
        self.assertKeyword(DtypeError, da.sort, [1j, 2])
        self.assertKeyword(DtypeError, da.full, (2,), "x")
        self.assertKeyword(DtypeError, da.from_polar, [1j], [0.0])

    def test_index_errors(self) -> None:
        self.assertKeyword(ArrayIndexError, da.zeros(2, 2).get, 2, 0)
        self.assertKeyword(ArrayIndexError, host.array([1.0]).get, 0)
        self.assertKeyword(ArrayIndexError, da.delete, [1, 2], 2)

    def test_argument_errors(self) -> None:
        self.assertKeyword(ArgumentError, da.arange, 0, 1, 0)
        self.assertKeyword(ArgumentError, da.linspace, 0, 1, 1)
        self.assertKeyword(ArgumentError, da.pad, [1], 1, "mirror")
        self.assertKeyword(ArgumentError, host.sum, [1, 2], 0)

    def test_mixed_nesting_reports_its_class(self) -> None:
        with self.assertRaises(ArrayError) as ctx:
            host.array([[1, 2], 3])
        self.assertIn(type(ctx.exception).keyword, str(ctx.exception).lower())

    def test_numpy_inputs_keep_keyword(self) -> None:
        with self.assertRaises(DtypeError) as ctx:
            da.from_numpy(np.array(["a"]))
        self.assertIn("dtype", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
