"""
Functional forms of the elementwise engine.

Each function coerces its first operand to an NDArray and forwards to the
dtype-dispatched method, so ``mod(-7, 3)`` and ``array([-7]).mod(3)`` share
one implementation. This module adds the operations that do not belong to a
single receiver: three-way :func:`where`, tolerance comparisons and the
complex square root and logarithm conveniences.
"""

from __future__ import annotations

from typing import Any, Optional

import numpy as np

from ...domain._constants import EQUALITY_TOLERANCE
from ...domain._dtype import promote_all
from ..array._ndarray import NDArray
from ..array._shape_engine import broadcast_shapes_n


def _nd(x: Any) -> NDArray:
    return NDArray.coerce(x)


def add(a: Any, b: Any) -> NDArray:
    return _nd(a).add(b)


def subtract(a: Any, b: Any) -> NDArray:
    return _nd(a).sub(b)


def multiply(a: Any, b: Any) -> NDArray:
    return _nd(a).mul(b)


def divide(a: Any, b: Any) -> NDArray:
    return _nd(a).div(b)


def power(a: Any, b: Any) -> NDArray:
    return _nd(a).pow(b)


def mod(a: Any, b: Any) -> NDArray:
    """Floored modulo; sign follows the divisor."""
    return _nd(a).mod(b)


def fmod(a: Any, b: Any) -> NDArray:
    """Truncated modulo; sign follows the dividend."""
    return _nd(a).fmod(b)


def arctan2(y: Any, x: Any) -> NDArray:
    return _nd(y).arctan2(x)


def equal(a: Any, b: Any) -> NDArray:
    return _nd(a).equal(b)


def not_equal(a: Any, b: Any) -> NDArray:
    return _nd(a).not_equal(b)


def greater(a: Any, b: Any) -> NDArray:
    return _nd(a).greater(b)


def less(a: Any, b: Any) -> NDArray:
    return _nd(a).less(b)


def greater_equal(a: Any, b: Any) -> NDArray:
    return _nd(a).greater_equal(b)


def less_equal(a: Any, b: Any) -> NDArray:
    return _nd(a).less_equal(b)


def clip(a: Any, lo: Optional[Any] = None, hi: Optional[Any] = None) -> NDArray:
    return _nd(a).clip(lo, hi)


def where(cond: Any, x: Any, y: Any) -> NDArray:
    """
    Select from `x` where `cond` is nonzero and from `y` elsewhere.

    All three operands are broadcast together. The result dtype is the
    promotion of `x` and `y`; the dtype of `cond` does not matter (a
    complex condition is truthy when either part is nonzero).

    Raises
    ------
    BroadcastError
        If the three shapes cannot be broadcast together.
    """
    c, xa, ya = _nd(cond), _nd(x), _nd(y)
    out_shape = broadcast_shapes_n(c.shape, xa.shape, ya.shape)
    dtype = promote_all(xa.dtype, ya.dtype)
    mask = c._values() != 0
    out = np.where(mask, xa._values_as(dtype), ya._values_as(dtype))
    return NDArray.from_numpy(np.broadcast_to(out, out_shape))


def csqrt(x: Any) -> Any:
    """
    Complex square root with the principal branch.

    Scalars return a Python ``complex`` (``csqrt(-4) == 2j``); arrays
    return a complex array.
    """
    if isinstance(x, (int, float, complex, np.number)) and not isinstance(x, bool):
        return complex(np.sqrt(np.complex128(x)))
    return _nd(x).astype("complex128").sqrt()


def clog(x: Any) -> Any:
    """
    Complex natural logarithm with the principal branch.

    Negative reals map onto the imaginary axis (``clog(-1) == pi * 1j``)
    instead of producing NaN. Scalars return a Python ``complex``; arrays
    return a complex array.
    """
    if isinstance(x, (int, float, complex, np.number)) and not isinstance(x, bool):
        with np.errstate(all="ignore"):
            return complex(np.log(np.complex128(x)))
    return _nd(x).astype("complex128").log()


def allclose(a: Any, b: Any, tol: float = EQUALITY_TOLERANCE) -> bool:
    """
    True when shapes match exactly and every ``|a - b| < tol``.

    No broadcasting is applied. ``nan`` never compares close.
    """
    xa, xb = _nd(a), _nd(b)
    if xa.shape != xb.shape:
        return False
    with np.errstate(all="ignore"):
        diff = np.abs(xa._values() - xb._values())
    return bool(np.all(diff < tol))


def array_equal(a: Any, b: Any) -> bool:
    """True when shapes match and all elements are exactly equal."""
    xa, xb = _nd(a), _nd(b)
    return xa.shape == xb.shape and bool(np.all(xa._values() == xb._values()))


def _unary_function(name: str):
    def fn(a: Any) -> NDArray:
        return getattr(_nd(a), name)()

    fn.__name__ = fn.__qualname__ = name
    fn.__doc__ = f"Functional form of :meth:`NDArray.{name}`."
    return fn


abs = _unary_function("abs")
negative = _unary_function("negative")
conj = _unary_function("conj")
angle = _unary_function("angle")
arg = angle
sqrt = _unary_function("sqrt")
exp = _unary_function("exp")
log = _unary_function("log")
log2 = _unary_function("log2")
log10 = _unary_function("log10")
log1p = _unary_function("log1p")
expm1 = _unary_function("expm1")
sin = _unary_function("sin")
cos = _unary_function("cos")
tan = _unary_function("tan")
sinh = _unary_function("sinh")
cosh = _unary_function("cosh")
tanh = _unary_function("tanh")
arcsin = _unary_function("arcsin")
arccos = _unary_function("arccos")
arctan = _unary_function("arctan")
arcsinh = _unary_function("arcsinh")
arccosh = _unary_function("arccosh")
arctanh = _unary_function("arctanh")
floor = _unary_function("floor")
ceil = _unary_function("ceil")
sign = _unary_function("sign")
isnan = _unary_function("isnan")
isinf = _unary_function("isinf")
isfinite = _unary_function("isfinite")


def round(a: Any, decimals: int = 0) -> NDArray:
    """Round halves to even; see :meth:`NDArray.round`."""
    return _nd(a).round(decimals)
