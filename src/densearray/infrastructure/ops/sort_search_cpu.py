"""
Sorting and searching.

All positions returned here are 0-based; the host bridge adds one. Sorting
is stable (``kind="stable"``), so ``a[argsort(a)] == sort(a)`` holds and
equal elements keep their original order. Sorting-based operations are
real-only; ``nonzero`` and ``argwhere`` accept complex input.
"""

from __future__ import annotations

from typing import Any, Optional, Tuple, Union

import numpy as np

from ...domain._constants import SEARCH_SIDES
from ...domain._errors import ArgumentError, DtypeError
from ..array._ndarray import NDArray
from ..array._shape_engine import normalize_axis


def _real(a: Any, op: str) -> NDArray:
    arr = NDArray.coerce(a)
    if arr.dtype.is_complex:
        raise DtypeError.unsupported(op, arr.dtype)
    return arr


def sort(a: Any, axis: Optional[int] = None) -> NDArray:
    """
    Ascending stable sort; without an axis the flattened array is sorted.
    """
    arr = _real(a, "sort")
    values = arr._values()
    if axis is None:
        return NDArray.from_numpy(np.sort(values.reshape(-1), kind="stable"))
    ax = normalize_axis(axis, arr.ndim)
    return NDArray.from_numpy(np.sort(values, axis=ax, kind="stable"))


def argsort(a: Any, axis: Optional[int] = None) -> NDArray:
    """
    0-based positions that would sort the array (stable).

    Without an axis the positions refer to the flattened array.
    """
    arr = _real(a, "argsort")
    values = arr._values()
    if axis is None:
        return NDArray.from_numpy(np.argsort(values.reshape(-1), kind="stable"))
    ax = normalize_axis(axis, arr.ndim)
    return NDArray.from_numpy(np.argsort(values, axis=ax, kind="stable"))


def searchsorted(
    sorted_array: Any, values: Any, side: str = "left"
) -> Union[int, NDArray]:
    """
    Insertion positions that keep `sorted_array` ordered.

    Parameters
    ----------
    sorted_array : array-like
        Ascending values, flattened.
    values : scalar or array-like
        Values to locate. A scalar returns an ``int``; an array returns an
        array of the same shape.
    side : {"left", "right"}
        ``"left"`` places a value before equal elements, ``"right"`` after.

    Raises
    ------
    ArgumentError
        For an unknown `side`.
    """
    if side not in SEARCH_SIDES:
        raise ArgumentError(f"side must be 'left' or 'right', got {side!r}")
    haystack = _real(sorted_array, "searchsorted")._values().reshape(-1)
    scalar = not isinstance(values, (list, tuple, np.ndarray)) and not isinstance(
        getattr(values, "_data", values), NDArray
    )
    needles = _real(values, "searchsorted")._values()
    out = np.searchsorted(haystack, needles, side=side)
    if scalar:
        return int(out)
    return NDArray.from_numpy(out)


def unique(
    a: Any,
    return_index: bool = False,
    return_inverse: bool = False,
    return_counts: bool = False,
) -> Union[NDArray, Tuple[NDArray, ...]]:
    """
    Sorted distinct values of the flattened array.

    Parameters
    ----------
    return_index : bool, optional
        Also return the 0-based position of each value's first occurrence.
    return_inverse : bool, optional
        Also return, for every input element, the position of its value in
        the unique array.
    return_counts : bool, optional
        Also return occurrence counts; they sum to ``a.size``.

    Returns
    -------
    NDArray or tuple of NDArray
        The unique values, followed by the requested extras in the order
        index, inverse, counts.

    Notes
    -----
    ``nan`` values collapse to a single trailing entry.
    """
    arr = _real(a, "unique")
    flat = arr._values().reshape(-1)
    values, index, inverse, counts = np.unique(
        flat, return_index=True, return_inverse=True, return_counts=True
    )
    extras = []
    if return_index:
        extras.append(NDArray.from_numpy(index))
    if return_inverse:
        extras.append(NDArray.from_numpy(inverse.reshape(-1)))
    if return_counts:
        extras.append(NDArray.from_numpy(counts))
    if not extras:
        return NDArray.from_numpy(values)
    return (NDArray.from_numpy(values), *extras)


def nonzero(a: Any) -> Tuple[NDArray, ...]:
    """
    One index array per axis listing the nonzero positions in row-major
    order. A rank-0 input is treated as rank 1.
    """
    arr = NDArray.coerce(a)
    values = arr._values()
    if values.ndim == 0:
        values = values.reshape(1)
    return tuple(NDArray.from_numpy(ix) for ix in np.nonzero(values))


def argwhere(a: Any) -> NDArray:
    """
    ``(N, ndim)`` matrix whose rows are the multi-indices of nonzero
    elements, row-major. With no match the shape is ``(0, ndim)``.
    """
    arr = NDArray.coerce(a)
    values = arr._values()
    if values.ndim == 0:
        values = values.reshape(1)
    return NDArray.from_numpy(np.argwhere(values))
