"""
NDArray boundary for the reduction and statistics kernels.

Functional reductions (``sum(a, axis)`` and friends) forward to the
dtype-dispatched NDArray methods. :func:`histogram` and :func:`bincount`
work on the flattened data and wrap the NumPy kernels in
:mod:`densearray.infrastructure.ops.reduce_cpu`.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from ...domain._constants import DEFAULT_HISTOGRAM_BINS
from ...domain._errors import DtypeError
from ..array._ndarray import NDArray
from .reduce_cpu import bincount_cpu, histogram_cpu


def _real(a: Any, op: str) -> NDArray:
    arr = NDArray.coerce(a)
    if arr.dtype.is_complex:
        raise DtypeError.unsupported(op, arr.dtype)
    return arr


def _axis_reduction(name: str):
    def fn(a: Any, axis: Optional[int] = None) -> Any:
        return getattr(NDArray.coerce(a), name)(axis)

    fn.__name__ = fn.__qualname__ = name
    fn.__doc__ = f"Functional form of :meth:`NDArray.{name}`."
    return fn


sum = _axis_reduction("sum")
prod = _axis_reduction("prod")
mean = _axis_reduction("mean")
min = _axis_reduction("min")
max = _axis_reduction("max")
argmin = _axis_reduction("argmin")
argmax = _axis_reduction("argmax")
ptp = _axis_reduction("ptp")
all = _axis_reduction("all")
any = _axis_reduction("any")
cumsum = _axis_reduction("cumsum")
cumprod = _axis_reduction("cumprod")
median = _axis_reduction("median")


def var(a: Any, axis: Optional[int] = None, ddof: int = 0) -> Any:
    return NDArray.coerce(a).var(axis, ddof)


def std(a: Any, axis: Optional[int] = None, ddof: int = 0) -> Any:
    return NDArray.coerce(a).std(axis, ddof)


def percentile(a: Any, p: float, axis: Optional[int] = None) -> Any:
    return NDArray.coerce(a).percentile(p, axis)


def quantile(a: Any, q: float, axis: Optional[int] = None) -> Any:
    return NDArray.coerce(a).quantile(q, axis)


def histogram(
    data: Any,
    nbins: int = DEFAULT_HISTOGRAM_BINS,
    range: Optional[Tuple[float, float]] = None,
) -> Tuple[NDArray, NDArray]:
    """
    Equal-width histogram of the flattened data.

    Parameters
    ----------
    data : array-like
        Real values.
    nbins : int, optional
        Number of bins. Defaults to 10.
    range : Optional[tuple[float, float]]
        Binning interval; defaults to ``(min, max)`` of the data.

    Returns
    -------
    counts : NDArray
        ``nbins`` counts.
    edges : NDArray
        ``nbins + 1`` edges.
    """
    arr = _real(data, "histogram")
    counts, edges = histogram_cpu(arr._values(), nbins, range)
    return NDArray.from_numpy(counts), NDArray.from_numpy(edges)


def bincount(data: Any, weights: Any = None, minlength: int = 0) -> NDArray:
    """
    Occurrence counts of non-negative integers; see
    :func:`~densearray.infrastructure.ops.reduce_cpu.bincount_cpu`.
    """
    arr = _real(data, "bincount")
    w = None if weights is None else _real(weights, "bincount")._values()
    return NDArray.from_numpy(bincount_cpu(arr._values(), w, minlength))
