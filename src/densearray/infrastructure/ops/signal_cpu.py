"""
Basic signal processing: correlation, convolution, numerical gradients
and piecewise-linear interpolation.

Correlation and convolution both compute the full result with
``np.convolve`` and then cut the requested window:

- ``"full"``:  length ``n + m - 1``, offset 0
- ``"same"``:  length ``max(n, m)``, offset ``(full - length) // 2``
- ``"valid"``: length ``max(n, m) - min(n, m) + 1``, offset ``min(n, m) - 1``

Correlation uses the reversed second operand without conjugation.
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

import numpy as np

from ...domain._constants import CONVOLVE_MODES
from ...domain._errors import ArgumentError, DtypeError, ShapeError
from ..array._ndarray import NDArray
from ..array._shape_engine import normalize_axis


def _vector(a: Any, op: str) -> np.ndarray:
    arr = NDArray.coerce(a)
    if arr.ndim != 1:
        raise ShapeError(f"{op} requires 1-D inputs, got shape {arr.shape}")
    if arr.size == 0:
        raise ShapeError(f"{op} requires non-empty inputs")
    return arr._values()


def _window(full: np.ndarray, n: int, m: int, mode: str) -> np.ndarray:
    if mode not in CONVOLVE_MODES:
        raise ArgumentError(
            f"mode must be one of {', '.join(CONVOLVE_MODES)}, got {mode!r}"
        )
    if mode == "full":
        return full
    if mode == "same":
        length = max(n, m)
        offset = (full.size - length) // 2
    else:
        length = max(n, m) - min(n, m) + 1
        offset = min(n, m) - 1
    return full[offset : offset + length]


def convolve(a: Any, v: Any, mode: str = "full") -> NDArray:
    """
    Discrete linear convolution of two 1-D sequences.

    Examples
    --------
    >>> convolve([1, 2, 3], [0, 1, 0.5]).tolist()
    [0.0, 1.0, 2.5, 4.0, 1.5]
    """
    x, y = _vector(a, "convolve"), _vector(v, "convolve")
    with np.errstate(all="ignore"):
        full = np.convolve(x, y)
    return NDArray.from_numpy(_window(full, x.size, y.size, mode))


def correlate(a: Any, v: Any, mode: str = "full") -> NDArray:
    """
    Cross-correlation ``c[k] = sum_n a[n + k] * v[n]`` of two 1-D
    sequences; the full result equals ``convolve(a, v[::-1])``.
    """
    x, y = _vector(a, "correlate"), _vector(v, "correlate")
    with np.errstate(all="ignore"):
        full = np.convolve(x, y[::-1])
    return NDArray.from_numpy(_window(full, x.size, y.size, mode))


def _gradient_along(values: np.ndarray, spacing: float, axis: int) -> np.ndarray:
    if values.shape[axis] < 2:
        return np.zeros_like(values)
    with np.errstate(all="ignore"):
        return np.gradient(values, spacing, axis=axis, edge_order=1)


def gradient(
    a: Any, spacing: float = 1.0, axis: Optional[int] = None
) -> Union[NDArray, List[NDArray]]:
    """
    Numerical gradient with uniform `spacing`.

    Interior points use central differences ``(f[i+1] - f[i-1]) / 2h``;
    the two boundary points use one-sided forward/backward differences.
    An axis of extent 1 has gradient 0.

    Returns
    -------
    NDArray or list of NDArray
        One array for rank-1 input or when `axis` is given; otherwise one
        array per axis.

    Raises
    ------
    ArgumentError
        If `spacing` is zero.
    """
    arr = NDArray.coerce(a)
    if arr.ndim == 0:
        raise ShapeError("gradient requires at least one dimension")
    h = float(spacing)
    if h == 0.0:
        raise ArgumentError("gradient spacing must be nonzero")
    values = arr._values()
    if axis is not None:
        ax = normalize_axis(axis, arr.ndim)
        return NDArray.from_numpy(_gradient_along(values, h, ax))
    if arr.ndim == 1:
        return NDArray.from_numpy(_gradient_along(values, h, 0))
    return [NDArray.from_numpy(_gradient_along(values, h, d)) for d in range(arr.ndim)]


def interp(
    x: Any,
    xp: Any,
    fp: Any,
    left: Optional[float] = None,
    right: Optional[float] = None,
) -> Union[float, NDArray]:
    """
    Piecewise-linear interpolation of ``(xp, fp)`` at `x`.

    Parameters
    ----------
    x : scalar or array-like
        Query points. A scalar returns a float.
    xp : array-like
        Increasing sample coordinates (1-D).
    fp : array-like
        Sample values, same length as `xp`.
    left, right : float, optional
        Values returned below ``xp[0]`` / above ``xp[-1]``; default to
        ``fp[0]`` / ``fp[-1]``.

    Raises
    ------
    ShapeError
        If `xp` and `fp` differ in length or are empty.
    DtypeError
        For complex inputs.
    """
    xs, fs = NDArray.coerce(xp), NDArray.coerce(fp)
    if xs.ndim != 1 or fs.ndim != 1:
        raise ShapeError("interp requires 1-D xp and fp")
    if xs.size != fs.size or xs.size == 0:
        raise ShapeError(
            f"xp and fp must be non-empty and equally long, got {xs.size} and {fs.size}"
        )
    query = NDArray.coerce(x)
    for arr in (xs, fs, query):
        if arr.dtype.is_complex:
            raise DtypeError.unsupported("interp", arr.dtype)
    out = np.interp(query._values(), xs._values(), fs._values(), left=left, right=right)
    if isinstance(x, (int, float, np.number)) and not isinstance(x, bool):
        return float(out)
    return NDArray.from_numpy(out)
