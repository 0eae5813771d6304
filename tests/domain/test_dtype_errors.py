import unittest

import numpy as np

from densearray.domain import (
    ArgumentError,
    ArrayError,
    ArrayIndexError,
    BroadcastError,
    DType,
    DtypeError,
    ShapeError,
    parse_dtype,
    promote,
    promote_all,
)
from densearray.domain._dtype import dtype_of_scalar


class TestDTypePromotion(unittest.TestCase):
    def test_real_with_real_stays_real(self) -> None:
        self.assertIs(promote(DType.REAL64, DType.REAL64), DType.REAL64)

    def test_any_complex_operand_promotes_to_complex(self) -> None:
        self.assertIs(promote(DType.REAL64, DType.COMPLEX128), DType.COMPLEX128)
        self.assertIs(promote(DType.COMPLEX128, DType.REAL64), DType.COMPLEX128)
        self.assertIs(promote(DType.COMPLEX128, DType.COMPLEX128), DType.COMPLEX128)

    def test_promote_all_folds_over_operands(self) -> None:
        self.assertIs(promote_all(), DType.REAL64)
        self.assertIs(
            promote_all(DType.REAL64, DType.REAL64, DType.COMPLEX128), DType.COMPLEX128
        )

    def test_numpy_dtype_and_str(self) -> None:
        self.assertEqual(DType.REAL64.numpy_dtype, np.dtype(np.float64))
        self.assertEqual(DType.COMPLEX128.numpy_dtype, np.dtype(np.complex128))
        self.assertEqual(str(DType.COMPLEX128), "complex128")
        self.assertTrue(DType.COMPLEX128.is_complex)
        self.assertFalse(DType.REAL64.is_complex)


class TestParseDtype(unittest.TestCase):
    def test_spellings(self) -> None:
        self.assertIs(parse_dtype(None), DType.REAL64)
        self.assertIs(parse_dtype("real64"), DType.REAL64)
        self.assertIs(parse_dtype("float64"), DType.REAL64)
        self.assertIs(parse_dtype(float), DType.REAL64)
        self.assertIs(parse_dtype("complex128"), DType.COMPLEX128)
        self.assertIs(parse_dtype(complex), DType.COMPLEX128)
        self.assertIs(parse_dtype(np.complex64), DType.COMPLEX128)
        self.assertIs(parse_dtype(np.int32), DType.REAL64)
        self.assertIs(parse_dtype(DType.COMPLEX128), DType.COMPLEX128)

    def test_unknown_dtype_raises_type_error(self) -> None:
        with self.assertRaises(TypeError):
            parse_dtype("U8")
        with self.assertRaises(TypeError):
            parse_dtype(object)


class TestScalarClassification(unittest.TestCase):
    def test_classifies_python_and_numpy_scalars(self) -> None:
        self.assertIs(dtype_of_scalar(1), DType.REAL64)
        self.assertIs(dtype_of_scalar(2.5), DType.REAL64)
        self.assertIs(dtype_of_scalar(True), DType.REAL64)
        self.assertIs(dtype_of_scalar(np.float32(1.0)), DType.REAL64)
        self.assertIs(dtype_of_scalar(1 + 2j), DType.COMPLEX128)
        self.assertIs(dtype_of_scalar(np.complex128(1j)), DType.COMPLEX128)

    def test_rejects_non_numbers(self) -> None:
        with self.assertRaises(TypeError):
            dtype_of_scalar("1")
        with self.assertRaises(TypeError):
            dtype_of_scalar(None)


class TestErrorHierarchy(unittest.TestCase):
    def test_errors_derive_from_array_error_and_builtins(self) -> None:
        self.assertTrue(issubclass(ShapeError, ArrayError))
        self.assertTrue(issubclass(ShapeError, ValueError))
        self.assertTrue(issubclass(BroadcastError, ShapeError))
        self.assertTrue(issubclass(ArrayIndexError, IndexError))
        self.assertTrue(issubclass(DtypeError, TypeError))
        self.assertTrue(issubclass(ArgumentError, ValueError))

    def test_broadcast_error_message_names_both_shapes(self) -> None:
        err = BroadcastError((2, 3), (4,))
        self.assertIn("broadcast", str(err))
        self.assertIn("(2, 3)", str(err))
        self.assertIn("(4)", str(err))
        self.assertEqual(err.shape_a, (2, 3))
        self.assertEqual(err.shape_b, (4,))

    def test_unsupported_uses_operation_name_and_dtype_label(self) -> None:
        def sort():
            return None

        err = DtypeError.unsupported(sort, DType.COMPLEX128)
        self.assertEqual(
            str(err), "operation 'sort' is not supported for dtype 'complex128'"
        )
        self.assertIn("dtype", str(DtypeError.unsupported("mod", "complex128")))


if __name__ == "__main__":
    unittest.main()
