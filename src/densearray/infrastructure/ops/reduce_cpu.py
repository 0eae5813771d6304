"""
CPU (NumPy) reduction and statistics kernels.

Kernels here operate on NumPy arrays and normalized 0-based axes only; the
NDArray boundary lives in the reduction mixins and in
:mod:`densearray.infrastructure.ops.reduce_cpu_ext`.

Axis semantics
--------------
- ``axis=None`` reduces every element and returns a NumPy scalar.
- An integer axis removes that axis from the shape. When the result would
  be rank 0 (a rank-1 input) it is returned with shape ``(1,)``.

Empty input policy
------------------
``sum -> 0``, ``prod -> 1``, ``all -> True``, ``any -> False``;
``mean``, ``var``, ``std``, ``median``, ``percentile`` and ``quantile``
return ``nan``; ``min``, ``max``, ``argmin``, ``argmax`` and ``ptp`` raise
:class:`ArgumentError` because they have no meaningful identity.
"""

from __future__ import annotations

import warnings
from typing import Any, Callable, Optional, Tuple

import numpy as np

from ...domain._errors import ArgumentError

EMPTY_IDENTITY = "identity"
EMPTY_NAN = "nan"
EMPTY_RAISE = "raise"


def _as_axis_result(out: np.ndarray) -> np.ndarray:
    out = np.asarray(out)
    return out.reshape(1) if out.ndim == 0 else out


def reduce_cpu(
    x: np.ndarray,
    axis: Optional[int],
    kernel: Callable[..., Any],
    *,
    name: str,
    on_empty: str = EMPTY_IDENTITY,
) -> Any:
    """
    Apply a NumPy reduction `kernel` globally or along one axis.

    Parameters
    ----------
    x : np.ndarray
        Input values (float64 or complex128).
    axis : Optional[int]
        Normalized axis, or None for a global reduction.
    kernel : Callable
        Reduction accepting ``(values, axis=...)``.
    name : str
        Operation name used in error messages.
    on_empty : str, optional
        Policy when the reduced extent is zero: ``"identity"`` lets the
        kernel decide, ``"nan"`` fills with nan, ``"raise"`` raises.

    Returns
    -------
    Any
        A NumPy scalar for global reductions, an array otherwise.

    Raises
    ------
    ArgumentError
        For an empty reduction under the ``"raise"`` policy.
    """
    reduced_extent = x.size if axis is None else x.shape[axis]
    if reduced_extent == 0 and on_empty != EMPTY_IDENTITY:
        if on_empty == EMPTY_RAISE:
            raise ArgumentError(f"{name} of an empty array is undefined")
        if axis is None:
            return np.float64(np.nan)
        out_shape = x.shape[:axis] + x.shape[axis + 1 :]
        return _as_axis_result(np.full(out_shape, np.nan, dtype=x.dtype))

    with np.errstate(all="ignore"), warnings.catch_warnings():
        warnings.simplefilter("ignore", RuntimeWarning)
        if axis is None:
            return kernel(x.reshape(-1), axis=0)
        return _as_axis_result(kernel(x, axis=axis))


def cumulative_cpu(
    x: np.ndarray, axis: Optional[int], kernel: Callable[..., np.ndarray]
) -> np.ndarray:
    """
    Running totals: over the flattened order when `axis` is None (rank-1
    result), otherwise along `axis` with the input shape preserved.
    """
    with np.errstate(all="ignore"):
        if axis is None:
            return kernel(x.reshape(-1))
        return kernel(x, axis=axis)


def var_kernel(ddof: int = 0) -> Callable[..., Any]:
    """Population variance for ``ddof=0``; sample variance for ``ddof=1``."""

    def _var(v: np.ndarray, axis: int) -> Any:
        return np.var(v, axis=axis, ddof=ddof)

    return _var


def std_kernel(ddof: int = 0) -> Callable[..., Any]:
    def _std(v: np.ndarray, axis: int) -> Any:
        return np.std(v, axis=axis, ddof=ddof)

    return _std


def check_fraction(q: Any, upper: float, name: str) -> float:
    """
    Validate a percentile (``upper=100``) or quantile (``upper=1``) value.

    Raises
    ------
    ArgumentError
        If `q` is not a number within ``[0, upper]``.
    """
    try:
        qf = float(q)
    except (TypeError, ValueError):
        raise ArgumentError(f"{name} must be a number, got {q!r}") from None
    if not (0.0 <= qf <= upper):
        raise ArgumentError(f"{name} must be in [0, {upper:g}], got {q!r}")
    return qf


def quantile_kernel(fraction: float) -> Callable[..., Any]:
    """
    Linear-interpolation quantile at `fraction` in ``[0, 1]``.

    The sorted position is ``f = fraction * (n - 1)``; the result
    interpolates between ``floor(f)`` and ``ceil(f)``.
    """

    def _quantile(v: np.ndarray, axis: int) -> Any:
        return np.quantile(v, fraction, axis=axis)

    return _quantile


def histogram_cpu(
    x: np.ndarray, nbins: int, value_range: Optional[Tuple[float, float]] = None
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Equal-width histogram.

    Parameters
    ----------
    x : np.ndarray
        Real values, flattened.
    nbins : int
        Number of bins (>= 1).
    value_range : Optional[tuple[float, float]]
        ``(lo, hi)``; defaults to ``(min(x), max(x))``. Values outside the
        range are ignored. The last bin includes its right edge.

    Returns
    -------
    counts : np.ndarray
        ``nbins`` counts (float64).
    edges : np.ndarray
        ``nbins + 1`` bin edges.

    Notes
    -----
    When the range is degenerate (``lo == hi``) it widens to
    ``[lo - 0.5, hi + 0.5]``. An empty input without a range uses
    ``[0, 1]``.
    """
    if isinstance(nbins, bool) or int(nbins) != nbins or int(nbins) < 1:
        raise ArgumentError(f"nbins must be a positive integer, got {nbins!r}")
    nbins = int(nbins)
    flat = x.reshape(-1)
    if value_range is None:
        if flat.size == 0:
            lo, hi = 0.0, 1.0
        else:
            lo, hi = float(np.min(flat)), float(np.max(flat))
    else:
        if len(value_range) != 2:
            raise ArgumentError("range must be a (min, max) pair")
        lo, hi = float(value_range[0]), float(value_range[1])
        if lo > hi:
            raise ArgumentError(f"range min {lo} exceeds max {hi}")
    if not (np.isfinite(lo) and np.isfinite(hi)):
        raise ArgumentError(f"histogram range [{lo}, {hi}] is not finite")
    if lo == hi:
        lo, hi = lo - 0.5, hi + 0.5
    counts, edges = np.histogram(flat, bins=nbins, range=(lo, hi))
    return counts.astype(np.float64), edges


def bincount_cpu(
    x: np.ndarray, weights: Optional[np.ndarray] = None, minlength: int = 0
) -> np.ndarray:
    """
    Count occurrences of each non-negative integer in `x`.

    Output length is ``max(max(x) + 1, minlength)``. With `weights`, each
    occurrence contributes its weight instead of 1.

    Raises
    ------
    ArgumentError
        If `x` holds negative or non-integral values, if `weights` differs
        in size, or if `minlength` is negative.
    """
    flat = x.reshape(-1)
    if isinstance(minlength, bool) or int(minlength) != minlength or minlength < 0:
        raise ArgumentError(f"minlength must be a non-negative integer, got {minlength!r}")
    if flat.size and (
        not np.all(np.isfinite(flat))
        or np.any(flat < 0)
        or np.any(flat != np.floor(flat))
    ):
        raise ArgumentError("bincount requires non-negative integer values")
    w = None
    if weights is not None:
        w = weights.reshape(-1)
        if w.size != flat.size:
            raise ArgumentError(
                f"weights has {w.size} elements but input has {flat.size}"
            )
    counts = np.bincount(flat.astype(np.int64), weights=w, minlength=int(minlength))
    return counts.astype(np.float64)
