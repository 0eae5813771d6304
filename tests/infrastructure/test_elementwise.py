import math
import unittest

import numpy as np

import densearray as da
from densearray import ArgumentError, BroadcastError, DType, DtypeError


def values(a) -> np.ndarray:
    return a.to_numpy()


class TestBroadcastingArithmetic(unittest.TestCase):
    def test_same_shape(self) -> None:
        out = da.array([1, 2, 3]) + da.array([4, 5, 6])
        self.assertEqual(out.tolist(), [5.0, 7.0, 9.0])

    def test_scalar_operands(self) -> None:
        a = da.array([1, 2, 3])
        self.assertEqual((a * 2).tolist(), [2.0, 4.0, 6.0])
        self.assertEqual((10 - a).tolist(), [9.0, 8.0, 7.0])
        self.assertEqual((1 / da.array([2, 4])).tolist(), [0.5, 0.25])
        self.assertEqual((2 ** da.array([1, 3])).tolist(), [2.0, 8.0])

    def test_column_plus_row(self) -> None:
        col = da.array([[1], [2], [3]])
        row = da.array([10, 20, 30])
        out = col + row
        self.assertEqual(out.shape, (3, 3))
        np.testing.assert_array_equal(
            values(out), np.array([[1], [2], [3]]) + np.array([10, 20, 30])
        )

    def test_three_dimensional_broadcast_matches_numpy(self) -> None:
        rng = np.random.default_rng(0)
        x = rng.standard_normal((2, 1, 4))
        y = rng.standard_normal((3, 1))
        out = da.from_numpy(x) * da.from_numpy(y)
        self.assertEqual(out.shape, (2, 3, 4))
        np.testing.assert_allclose(values(out), x * y)

    def test_incompatible_shapes_raise(self) -> None:
        with self.assertRaises(BroadcastError) as ctx:
            da.array([[1, 2, 3], [4, 5, 6]]) + da.array([1, 2])
        self.assertIn("broadcast", str(ctx.exception))

    def test_division_by_zero_is_ieee(self) -> None:
        out = da.divide([1.0, -1.0, 0.0], 0.0).tolist()
        self.assertEqual(out[0], math.inf)
        self.assertEqual(out[1], -math.inf)
        self.assertTrue(math.isnan(out[2]))

    def test_nan_propagates(self) -> None:
        out = da.add([1.0, math.nan], 1.0).tolist()
        self.assertEqual(out[0], 2.0)
        self.assertTrue(math.isnan(out[1]))

    def test_real_plus_complex_promotes(self) -> None:
        out = da.array([1.0, 2.0]) + 1j
        self.assertIs(out.dtype, DType.COMPLEX128)
        self.assertEqual(out.tolist(), [1 + 1j, 2 + 1j])

    def test_real_power_of_negative_base_stays_real(self) -> None:
        out = da.power([-8.0], 1.0 / 3.0)
        self.assertIs(out.dtype, DType.REAL64)
        self.assertTrue(math.isnan(out.get(0)))


class TestModulo(unittest.TestCase):
    def test_mod_takes_sign_of_divisor(self) -> None:
        self.assertEqual(da.mod(-7, 3).item(), 2.0)
        self.assertEqual(da.mod(7, -3).item(), -2.0)
        self.assertEqual((da.array([5.5]) % 2).tolist(), [1.5])

    def test_fmod_takes_sign_of_dividend(self) -> None:
        self.assertEqual(da.fmod(-7, 3).item(), -1.0)
        self.assertEqual(da.fmod(7, -3).item(), 1.0)

    def test_mod_law(self) -> None:
        a = np.array([-7.0, -1.5, 0.0, 4.0, 9.25])
        b = np.array([3.0, 2.0, 5.0, -3.0, 4.0])
        m = values(da.mod(a, b))
        np.testing.assert_allclose(a, np.floor(a / b) * b + m)

    def test_complex_operands_rejected(self) -> None:
        with self.assertRaises(DtypeError):
            da.mod([1j], 2)
        with self.assertRaises(DtypeError):
            da.mod([1.0], 2j)
        with self.assertRaises(DtypeError):
            da.arctan2([1j], [1.0])

    def test_arctan2_quadrants(self) -> None:
        out = da.arctan2([1.0, -1.0], [-1.0, -1.0]).tolist()
        self.assertAlmostEqual(out[0], 3 * math.pi / 4)
        self.assertAlmostEqual(out[1], -3 * math.pi / 4)


class TestUnaryFunctions(unittest.TestCase):
    def test_trig_and_hyperbolic_match_numpy(self) -> None:
        x = np.array([-0.9, -0.2, 0.0, 0.3, 0.8])
        for name in ("sin", "cos", "tan", "sinh", "cosh", "tanh", "arcsin", "arccos", "arctan", "arcsinh", "arctanh"):
            out = getattr(da, name)(x.tolist())
            np.testing.assert_allclose(values(out), getattr(np, name)(x), err_msg=name)
        np.testing.assert_allclose(values(da.arccosh([1.0, 2.0])), np.arccosh([1.0, 2.0]))

    def test_real_domain_errors_become_nan(self) -> None:
        self.assertTrue(math.isnan(da.sqrt([-4.0]).get(0)))
        self.assertTrue(math.isnan(da.log([-1.0]).get(0)))
        self.assertEqual(da.log([0.0]).get(0), -math.inf)

    def test_complex_paths_use_principal_branch(self) -> None:
        self.assertAlmostEqual(da.sqrt([-4 + 0j]).get(0), 2j)
        self.assertAlmostEqual(da.log([-1 + 0j]).get(0), math.pi * 1j)
        self.assertAlmostEqual(da.exp([1j * math.pi]).get(0), -1 + 0j)

    def test_csqrt(self) -> None:
        self.assertEqual(da.csqrt(-4), 2j)
        self.assertIsInstance(da.csqrt(4.0), complex)
        out = da.csqrt([-1.0, 9.0])
        self.assertIs(out.dtype, DType.COMPLEX128)
        np.testing.assert_allclose(values(out), [1j, 3 + 0j])

    def test_abs_of_complex_is_real(self) -> None:
        out = da.abs([3 + 4j, -1j])
        self.assertIs(out.dtype, DType.REAL64)
        self.assertEqual(out.tolist(), [5.0, 1.0])

    def test_conj(self) -> None:
        self.assertEqual(da.conj([1 + 2j]).tolist(), [1 - 2j])
        self.assertEqual(da.conj([1.5]).tolist(), [1.5])

    def test_rounding_family(self) -> None:
        self.assertEqual(da.floor([-1.5, 1.5]).tolist(), [-2.0, 1.0])
        self.assertEqual(da.ceil([-1.5, 1.5]).tolist(), [-1.0, 2.0])
        self.assertEqual(da.round([0.5, 1.5, 2.5, -0.5]).tolist(), [0.0, 2.0, 2.0, -0.0])
        self.assertEqual(da.round([1.2345], 2).tolist(), [1.23])
        self.assertEqual(da.sign([-3.0, 0.0, 2.0]).tolist(), [-1.0, 0.0, 1.0])

    def test_rounding_rejects_complex(self) -> None:
        with self.assertRaises(DtypeError):
            da.floor([1j])
        with self.assertRaises(DtypeError):
            da.round([1 + 1j])

    def test_log_family(self) -> None:
        np.testing.assert_allclose(values(da.log2([8.0])), [3.0])
        np.testing.assert_allclose(values(da.log10([1000.0])), [3.0])
        np.testing.assert_allclose(values(da.log1p([1e-12])), [1e-12])
        np.testing.assert_allclose(values(da.expm1([1e-12])), [1e-12])


class TestClipWhere(unittest.TestCase):
    def test_clip_bounds(self) -> None:
        a = [-2.0, 0.5, 3.0]
        self.assertEqual(da.clip(a, 0.0, 1.0).tolist(), [0.0, 0.5, 1.0])
        self.assertEqual(da.clip(a, lo=0.0).tolist(), [0.0, 0.5, 3.0])
        self.assertEqual(da.clip(a, hi=0.0).tolist(), [-2.0, 0.0, 0.0])

    def test_clip_requires_a_bound(self) -> None:
        with self.assertRaises(ArgumentError):
            da.clip([1.0])

    def test_where_broadcasts_all_operands(self) -> None:
        cond = da.array([[1], [0]])
        out = da.where(cond, [1.0, 2.0, 3.0], -1.0)
        self.assertEqual(out.tolist(), [[1.0, 2.0, 3.0], [-1.0, -1.0, -1.0]])


class TestComparisons(unittest.TestCase):
    def test_ordering_returns_zero_one(self) -> None:
        a = da.array([1.0, 2.0, 3.0])
        self.assertEqual((a > 2).tolist(), [0.0, 0.0, 1.0])
        self.assertEqual((a <= 2).tolist(), [1.0, 1.0, 0.0])
        self.assertEqual(da.greater_equal(a, [3, 2, 1]).tolist(), [0.0, 1.0, 1.0])

    def test_ordering_rejects_complex(self) -> None:
        with self.assertRaises(DtypeError):
            da.less([1j], [0.0])

    def test_equality_works_for_complex(self) -> None:
        self.assertEqual(da.equal([1 + 1j, 2j], [1 + 1j, 2.0]).tolist(), [1.0, 0.0])
        self.assertEqual(da.not_equal([1.0, 2.0], 2.0).tolist(), [1.0, 0.0])

    def test_float_class_predicates(self) -> None:
        x = [1.0, math.nan, math.inf, -math.inf]
        self.assertEqual(da.isnan(x).tolist(), [0.0, 1.0, 0.0, 0.0])
        self.assertEqual(da.isinf(x).tolist(), [0.0, 0.0, 1.0, 1.0])
        self.assertEqual(da.isfinite(x).tolist(), [1.0, 0.0, 0.0, 0.0])

    def test_allclose_and_array_equal(self) -> None:
        self.assertTrue(da.allclose([1.0, 2.0], [1.0, 2.0 + 1e-12]))
        self.assertFalse(da.allclose([1.0, 2.0], [1.0, 2.1]))
        self.assertFalse(da.allclose([1.0, 2.0], [[1.0, 2.0]]))
        self.assertTrue(da.array_equal([1, 2], [1.0, 2.0]))
        self.assertFalse(da.array_equal([1, 2], [1, 3]))

    def test_python_equality_is_identity(self) -> None:
        a = da.array([1.0])
        self.assertTrue(a == a)
        self.assertFalse(a == da.array([1.0]))
        self.assertEqual(len({a, a}), 1)


class TestComplexHelpers(unittest.TestCase):
    def test_clog_of_negative_real(self) -> None:
        out = da.clog(-1)
        self.assertIsInstance(out, complex)
        self.assertAlmostEqual(out.real, 0.0)
        self.assertAlmostEqual(out.imag, math.pi)
        self.assertEqual(da.clog(1.0), 0j)

    def test_clog_of_array(self) -> None:
        out = da.clog([-1.0, math.e, 1j])
        self.assertIs(out.dtype, DType.COMPLEX128)
        np.testing.assert_allclose(values(out), [math.pi * 1j, 1.0, math.pi / 2 * 1j])
        self.assertTrue(np.all(np.isnan(values(da.log([-1.0])))))

    def test_angle(self) -> None:
        out = da.angle([1.0, 1j, -1.0, -1j])
        self.assertIs(out.dtype, DType.REAL64)
        np.testing.assert_allclose(values(out), [0.0, math.pi / 2, math.pi, -math.pi / 2])
        self.assertEqual(da.arg([-2.0]).tolist(), [math.pi])


class TestNumpyScalarOperands(unittest.TestCase):
    def test_numpy_scalar_on_the_left(self) -> None:
        a = da.array([1.0, 2.0])
        for out in (np.float64(2.0) * a, np.float64(1.0) + a, np.float64(4.0) / a):
            self.assertIsInstance(out, da.NDArray)
        self.assertEqual((np.float64(2.0) * a).tolist(), [2.0, 4.0])
        self.assertEqual((np.float64(4.0) - a).tolist(), [3.0, 2.0])

    def test_numpy_scalar_from_to_numpy(self) -> None:
        a = da.array([3.0, 4.0])
        scale = a.to_numpy()[0]
        self.assertIsInstance(scale * a, da.NDArray)


if __name__ == "__main__":
    unittest.main()
