"""
CPU array factories.

This module is the boundary between NumPy buffer generation and NDArray
construction: every factory builds its values with NumPy and hands them to
:meth:`NDArray.from_numpy`, which takes ownership of a fresh copy.

Shapes may be passed as separate ints (``zeros(2, 3)``) or as one sequence
(``zeros((2, 3))``). Random generators draw from a module-level
``numpy.random.Generator`` that :func:`seed` replaces.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._constants import DEFAULT_LINSPACE_NUM
from ...domain._dtype import DType, dtype_of_scalar, parse_dtype
from ...domain._errors import ArgumentError, DtypeError
from ..array._ndarray import NDArray
from ..array._shape_engine import broadcast_shapes, validate_shape
from ..array._storage import Storage

logger = logging.getLogger(__name__)

ShapeLike = Union[int, Sequence[int]]

_rng = np.random.default_rng()


def _shape_from_args(shape: Sequence[Any]) -> tuple[int, ...]:
    if len(shape) == 1 and isinstance(shape[0], (list, tuple)):
        return validate_shape(shape[0])
    return validate_shape(shape)


def _check_number(value: Any, name: str) -> DType:
    try:
        return dtype_of_scalar(value)
    except TypeError:
        raise DtypeError(f"{name} must be a number, got {type(value).__name__}") from None


def array(obj: Any, dtype: Any = None) -> NDArray:
    """
    Build an array from nested sequences, a NumPy array, an NDArray or a
    scalar. The result always owns a fresh buffer.

    Parameters
    ----------
    obj : Any
        Source data. Nested lists/tuples must be rectangular.
    dtype : optional
        Target dtype; by default complex leaves produce a complex array and
        everything else a real one.

    Raises
    ------
    ShapeError
        For ragged nested input.
    DtypeError
        For non-numeric input.
    """
    if isinstance(obj, NDArray):
        out = obj.copy()
    else:
        inner = getattr(obj, "_data", None)
        if isinstance(inner, NDArray):
            out = inner.copy()
        elif isinstance(obj, (list, tuple)):
            out = NDArray.from_nested(obj)
        elif isinstance(obj, np.ndarray):
            out = NDArray.from_numpy(obj)
        else:
            _check_number(obj, "array element")
            out = NDArray.scalar(obj)
    if dtype is not None and parse_dtype(dtype) is not out.dtype:
        out = out.astype(dtype)
    return out


def asarray(obj: Any) -> NDArray:
    """Like :func:`array` but returns NDArray inputs without copying."""
    return NDArray.coerce(obj)


def complex_array(real: Any, imag: Any = 0.0) -> NDArray:
    """
    Build a complex array from separate real and imaginary parts.

    The parts are broadcast against each other.
    """
    re = NDArray.coerce(real)
    im = NDArray.coerce(imag)
    if re.dtype.is_complex or im.dtype.is_complex:
        raise DtypeError("complex_array expects real-valued parts")
    shape = broadcast_shapes(re.shape, im.shape)
    parts = Storage(
        np.array(np.broadcast_to(re.to_numpy(), shape), dtype=np.float64),
        np.array(np.broadcast_to(im.to_numpy(), shape), dtype=np.float64),
    )
    return NDArray(shape, storage=parts)


def from_polar(r: Any, theta: Any) -> NDArray:
    """
    Complex array ``r * (cos(theta) + 1j * sin(theta))``.

    Magnitudes and angles (radians) are broadcast against each other.

    Raises
    ------
    DtypeError
        If either operand is complex.
    BroadcastError
        If the shapes cannot be broadcast.
    """
    mag = NDArray.coerce(r)
    ang = NDArray.coerce(theta)
    if mag.dtype.is_complex or ang.dtype.is_complex:
        raise DtypeError("from_polar expects real-valued magnitude and angle")
    shape = broadcast_shapes(mag.shape, ang.shape)
    rho, phi = mag.to_numpy(), ang.to_numpy()
    parts = Storage(
        np.array(np.broadcast_to(rho * np.cos(phi), shape), dtype=np.float64),
        np.array(np.broadcast_to(rho * np.sin(phi), shape), dtype=np.float64),
    )
    return NDArray(shape, storage=parts)


def zeros(*shape: ShapeLike, dtype: Any = None) -> NDArray:
    return NDArray(_shape_from_args(shape), dtype=dtype)


def empty(*shape: ShapeLike, dtype: Any = None) -> NDArray:
    """Allocate an array; elements are zero-initialized."""
    return zeros(*shape, dtype=dtype)


def ones(*shape: ShapeLike, dtype: Any = None) -> NDArray:
    dims = _shape_from_args(shape)
    return NDArray.from_numpy(np.ones(dims, dtype=parse_dtype(dtype).numpy_dtype))


def full(shape: ShapeLike, value: Any, dtype: Any = None) -> NDArray:
    """
    Array of `shape` filled with `value`.

    A complex `value` yields a complex array unless `dtype` says otherwise.
    """
    value_dtype = _check_number(value, "fill value")
    target = parse_dtype(dtype) if dtype is not None else value_dtype
    dims = validate_shape(shape)
    logger.debug("full: allocating %s %s filled with %r", dims, target, value)
    return NDArray.from_numpy(np.full(dims, value, dtype=target.numpy_dtype))


def zeros_like(a: Any) -> NDArray:
    src = NDArray.coerce(a)
    return NDArray(src.shape, dtype=src.dtype)


def ones_like(a: Any) -> NDArray:
    src = NDArray.coerce(a)
    return ones(src.shape, dtype=src.dtype)


def full_like(a: Any, value: Any) -> NDArray:
    src = NDArray.coerce(a)
    return full(src.shape, value)


def arange(start: float, stop: Optional[float] = None, step: float = 1.0) -> NDArray:
    """
    Evenly spaced values in the half-open interval ``[start, stop)``.

    With a single argument it is taken as `stop` and counting starts at 0.

    Parameters
    ----------
    start : float
        First value (or `stop` when `stop` is omitted).
    stop : Optional[float]
        End of the interval, exclusive.
    step : float, optional
        Spacing; may be negative. Defaults to 1.

    Returns
    -------
    NDArray
        Rank-1 array of ``max(0, ceil((stop - start) / step))`` values,
        ``start + i * step``.

    Raises
    ------
    ArgumentError
        If `step` is zero or any argument is not finite.
    """
    if stop is None:
        start, stop = 0.0, start
    start, stop, step = float(start), float(stop), float(step)
    if step == 0.0:
        raise ArgumentError("arange step must be nonzero")
    if not all(math.isfinite(v) for v in (start, stop, step)):
        raise ArgumentError("arange arguments must be finite")
    n = max(0, math.ceil((stop - start) / step))
    return NDArray.from_numpy(start + np.arange(n, dtype=np.float64) * step)


def linspace(start: float, stop: float, num: int = DEFAULT_LINSPACE_NUM) -> NDArray:
    """
    `num` evenly spaced values over the closed interval ``[start, stop]``.

    Raises
    ------
    ArgumentError
        If `num` is not an integer of at least 2.
    """
    if isinstance(num, bool) or int(num) != num or int(num) < 2:
        raise ArgumentError(f"linspace num must be an integer >= 2, got {num!r}")
    return NDArray.from_numpy(np.linspace(float(start), float(stop), int(num)))


def eye(n: int, m: Optional[int] = None, k: int = 0) -> NDArray:
    """
    ``n x m`` matrix with ones on diagonal `k` (0 is the main diagonal,
    positive is above it).
    """
    rows = validate_shape((n,))[0]
    cols = rows if m is None else validate_shape((m,))[0]
    return NDArray.from_numpy(np.eye(rows, cols, k=int(k)))


def identity(n: int) -> NDArray:
    return eye(n)


def seed(value: Optional[int] = None) -> None:
    """
    Reseed the module-level generator used by :func:`rand` and
    :func:`randn`. ``None`` draws fresh OS entropy.
    """
    global _rng
    _rng = np.random.default_rng(value)
    logger.debug("random generator reseeded with %r", value)


def rand(*shape: ShapeLike) -> NDArray:
    """Uniform samples on ``[0, 1)``; no shape gives a single value of shape (1,)."""
    dims = _shape_from_args(shape) if shape else (1,)
    return NDArray.from_numpy(_rng.random(dims))


def randn(*shape: ShapeLike) -> NDArray:
    """Standard normal samples."""
    dims = _shape_from_args(shape) if shape else (1,)
    return NDArray.from_numpy(_rng.standard_normal(dims))


def from_numpy(values: Any) -> NDArray:
    """Copy a NumPy array into a new NDArray."""
    if not isinstance(values, np.ndarray):
        raise DtypeError(f"from_numpy expects a numpy.ndarray, got {type(values).__name__}")
    return NDArray.from_numpy(values)
