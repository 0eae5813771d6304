"""
Structural manipulation: joining, splitting, replication, reordering,
padding, insertion/deletion and finite differences.

Every function returns arrays with freshly owned buffers and preserves the
dtype (complex inputs move both parts together). Axes are 0-based with
negative values counting from the end; positions in :func:`insert` and
:func:`delete` are 0-based.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from ...domain._constants import PAD_MODES
from ...domain._dtype import promote_all
from ...domain._errors import ArgumentError, ArrayIndexError, ShapeError
from ..array._ndarray import NDArray
from ..array._shape_engine import normalize_axis

IndexLike = Union[int, Sequence[int]]


def _arrays(arrays: Sequence[Any], op: str) -> List[NDArray]:
    items = [NDArray.coerce(a) for a in arrays]
    if not items:
        raise ArgumentError(f"{op} requires at least one array")
    return items


def _joined_values(items: Sequence[NDArray]) -> List[np.ndarray]:
    dtype = promote_all(*(a.dtype for a in items))
    return [a._values_as(dtype) for a in items]


def _is_int(v: Any) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool)


def concatenate(arrays: Sequence[Any], axis: int = 0) -> NDArray:
    """
    Join arrays along an existing axis.

    Raises
    ------
    ShapeError
        If ranks differ, inputs are rank 0, or any extent other than the
        join axis differs.
    """
    items = _arrays(arrays, "concatenate")
    ndim = items[0].ndim
    if ndim == 0:
        raise ShapeError("zero-dimensional arrays cannot be concatenated")
    ax = normalize_axis(axis, ndim)
    ref = items[0].shape
    for i, a in enumerate(items[1:], start=1):
        if a.ndim != ndim:
            raise ShapeError(
                f"all input arrays must have the same rank: array 0 has shape "
                f"{ref} but array {i} has shape {a.shape}"
            )
        for d in range(ndim):
            if d != ax and a.shape[d] != ref[d]:
                raise ShapeError(
                    f"shape mismatch along axis {d}: array 0 has shape {ref} "
                    f"but array {i} has shape {a.shape}"
                )
    return NDArray.from_numpy(np.concatenate(_joined_values(items), axis=ax))


def stack(arrays: Sequence[Any], axis: int = 0) -> NDArray:
    """
    Join same-shaped arrays along a new axis (leading by default).

    Raises
    ------
    ShapeError
        If the shapes are not identical.
    """
    items = _arrays(arrays, "stack")
    ref = items[0].shape
    for i, a in enumerate(items[1:], start=1):
        if a.shape != ref:
            raise ShapeError(
                f"all input arrays must have the same shape: array 0 has shape "
                f"{ref} but array {i} has shape {a.shape}"
            )
    ax = normalize_axis(axis, len(ref), allow_end=True)
    return NDArray.from_numpy(np.stack(_joined_values(items), axis=ax))


def vstack(arrays: Sequence[Any]) -> NDArray:
    """
    Stack rows: 1-D inputs become rows of a matrix, 2-D inputs are joined
    along axis 0.
    """
    items = _arrays(arrays, "vstack")
    rows = [a.reshape(1, a.size) if a.ndim <= 1 else a for a in items]
    return concatenate(rows, axis=0)


def hstack(arrays: Sequence[Any]) -> NDArray:
    """Join 1-D inputs end to end, higher-rank inputs along axis 1."""
    items = _arrays(arrays, "hstack")
    cols = [a.reshape(1) if a.ndim == 0 else a for a in items]
    return concatenate(cols, axis=0 if cols[0].ndim == 1 else 1)


def split(a: Any, sections: IndexLike, axis: int = 0) -> List[NDArray]:
    """
    Split along `axis` into equal sections or at explicit positions.

    Parameters
    ----------
    sections : int or sequence of int
        An int ``n`` makes ``n`` equal chunks; a sequence gives the 0-based
        split points.

    Raises
    ------
    ShapeError
        If ``n`` does not divide the axis extent.
    ArgumentError
        If ``n`` is not positive.
    """
    arr = NDArray.coerce(a)
    if arr.ndim == 0:
        raise ShapeError("cannot split a zero-dimensional array")
    ax = normalize_axis(axis, arr.ndim)
    extent = arr.shape[ax]
    if _is_int(sections):
        n = int(sections)
        if n <= 0:
            raise ArgumentError(f"number of sections must be positive, got {n}")
        if extent % n != 0:
            raise ShapeError(
                f"array of size {extent} along axis {ax} is not evenly divisible "
                f"into {n} sections"
            )
        parts = np.split(arr._values(), n, axis=ax)
    else:
        points = [int(p) for p in sections]
        parts = np.split(arr._values(), points, axis=ax)
    return [NDArray.from_numpy(p) for p in parts]


def tile(a: Any, reps: IndexLike) -> NDArray:
    """
    Replicate the whole array `reps` times per axis.

    When `reps` is shorter than the rank it is padded with leading 1s; when
    longer, the array gains leading axes.
    """
    arr = NDArray.coerce(a)
    counts = (reps,) if _is_int(reps) else tuple(reps)
    if any(int(r) < 0 for r in counts):
        raise ArgumentError(f"tile repetitions must be non-negative, got {counts}")
    return NDArray.from_numpy(np.tile(arr._values(), tuple(int(r) for r in counts)))


def repeat(a: Any, repeats: int, axis: Optional[int] = None) -> NDArray:
    """
    Repeat each element `repeats` times in place.

    Without an axis the array is flattened first.

    Raises
    ------
    ArgumentError
        If `repeats` is not a positive integer.
    """
    if not _is_int(repeats) or int(repeats) <= 0:
        raise ArgumentError(f"repeats must be a positive integer, got {repeats!r}")
    arr = NDArray.coerce(a)
    values = arr._values()
    if axis is None:
        return NDArray.from_numpy(np.repeat(values.reshape(-1), int(repeats)))
    ax = normalize_axis(axis, arr.ndim)
    return NDArray.from_numpy(np.repeat(values, int(repeats), axis=ax))


def flip(a: Any, axis: Optional[int] = None) -> NDArray:
    """Reverse element order along `axis`, or along every axis."""
    arr = NDArray.coerce(a)
    if axis is None:
        return NDArray.from_numpy(np.flip(arr._values()))
    ax = normalize_axis(axis, arr.ndim)
    return NDArray.from_numpy(np.flip(arr._values(), axis=ax))


def roll(a: Any, shift: int, axis: Optional[int] = None) -> NDArray:
    """
    Circularly shift elements by `shift` (positive moves toward higher
    indices). Without an axis the flattened order is rolled and the shape
    restored.
    """
    if not _is_int(shift):
        raise ArgumentError(f"shift must be an integer, got {shift!r}")
    arr = NDArray.coerce(a)
    if axis is None:
        return NDArray.from_numpy(np.roll(arr._values(), int(shift)))
    ax = normalize_axis(axis, arr.ndim)
    return NDArray.from_numpy(np.roll(arr._values(), int(shift), axis=ax))


def _pad_widths(width: Any, ndim: int) -> List[Tuple[int, int]]:
    def _pair(w: Any) -> Tuple[int, int]:
        if _is_int(w):
            return int(w), int(w)
        pair = tuple(w)
        if len(pair) != 2 or not all(_is_int(p) for p in pair):
            raise ArgumentError(f"pad width must be an int or a (before, after) pair, got {w!r}")
        return int(pair[0]), int(pair[1])

    if _is_int(width):
        widths = [_pair(width)] * ndim
    else:
        seq = list(width)
        if len(seq) == 2 and all(_is_int(w) for w in seq):
            widths = [_pair(seq)] * ndim
        elif len(seq) == ndim:
            widths = [_pair(w) for w in seq]
        else:
            raise ArgumentError(
                f"pad width {width!r} does not match array rank {ndim}"
            )
    if any(b < 0 or e < 0 for b, e in widths):
        raise ArgumentError(f"pad widths must be non-negative, got {width!r}")
    return widths


def pad(a: Any, width: Any, mode: str = "constant", value: Any = 0.0) -> NDArray:
    """
    Pad every axis.

    Parameters
    ----------
    width : int, (before, after) or sequence of pairs
        An int pads both ends of every axis; a pair applies to every axis;
        one pair per axis gives full control.
    mode : {"constant", "edge", "wrap", "reflect"}
        ``constant`` fills with `value`; ``edge`` repeats the boundary
        element; ``wrap`` continues periodically; ``reflect`` mirrors without
        repeating the edge.
    value : scalar, optional
        Fill value for ``constant``. Defaults to 0.

    Raises
    ------
    ArgumentError
        For an unknown mode or malformed widths.
    ShapeError
        When ``edge``/``wrap``/``reflect`` would pad an empty axis.
    """
    if mode not in PAD_MODES:
        raise ArgumentError(
            f"unknown pad mode {mode!r}; expected one of {', '.join(PAD_MODES)}"
        )
    arr = NDArray.coerce(a)
    if arr.ndim == 0:
        raise ShapeError("cannot pad a zero-dimensional array")
    widths = _pad_widths(width, arr.ndim)
    if mode != "constant":
        for d, (b, e) in zip(arr.shape, widths):
            if d == 0 and (b or e):
                raise ShapeError(f"cannot pad an empty axis in {mode!r} mode")
    values = arr._values()
    if mode == "constant":
        fill = NDArray.coerce(value)
        if fill.dtype.is_complex and not arr.dtype.is_complex:
            values = values.astype(np.complex128)
        out = np.pad(values, widths, mode="constant", constant_values=fill.item())
    elif mode == "reflect":
        out = np.pad(values, widths, mode="reflect", reflect_type="even")
    else:
        out = np.pad(values, widths, mode=mode)
    return NDArray.from_numpy(out)


def _positions(index: IndexLike) -> List[int]:
    items = [index] if _is_int(index) else list(index)
    if not all(_is_int(i) for i in items):
        raise ArgumentError(f"positions must be integers, got {index!r}")
    return [int(i) for i in items]


def insert(a: Any, index: IndexLike, values: Any, axis: Optional[int] = None) -> NDArray:
    """
    Insert `values` before the given 0-based position(s).

    Without an axis the array is flattened first. Position ``n`` (the axis
    extent) appends.

    Raises
    ------
    ArrayIndexError
        If a position lies outside ``0..n``.
    """
    arr = NDArray.coerce(a)
    vals = NDArray.coerce(values)
    dtype = promote_all(arr.dtype, vals.dtype)
    base = arr._values_as(dtype)
    if axis is None:
        base = base.reshape(-1)
        ax = 0
    else:
        ax = normalize_axis(axis, arr.ndim)
    extent = base.shape[ax]
    positions = _positions(index)
    for p in positions:
        if p < 0 or p > extent:
            raise ArrayIndexError(
                f"index {p} is out of bounds for insertion along axis {ax} with size {extent}"
            )
    target = positions[0] if _is_int(index) else positions
    out = np.insert(base, target, vals._values_as(dtype), axis=ax)
    return NDArray.from_numpy(out)


def delete(a: Any, index: IndexLike, axis: Optional[int] = None) -> NDArray:
    """
    Remove the element(s) or slice(s) at the given 0-based position(s).

    Without an axis the array is flattened first.

    Raises
    ------
    ArrayIndexError
        If a position is out of bounds.
    ArgumentError
        If every entry along the axis would be removed.
    """
    arr = NDArray.coerce(a)
    base = arr._values()
    if axis is None:
        base = base.reshape(-1)
        ax = 0
    else:
        ax = normalize_axis(axis, arr.ndim)
    extent = base.shape[ax]
    positions = sorted(set(_positions(index)))
    for p in positions:
        if p < 0 or p >= extent:
            raise ArrayIndexError(
                f"index {p} is out of bounds for axis {ax} with size {extent}"
            )
    if len(positions) >= extent:
        raise ArgumentError("delete would remove every element along the axis")
    return NDArray.from_numpy(np.delete(base, positions, axis=ax))


def diff(a: Any, n: int = 1, axis: int = -1) -> NDArray:
    """
    `n`-th order forward difference along `axis` (the last by default).

    Raises
    ------
    ArgumentError
        If `n` is not a positive integer.
    ShapeError
        If the axis extent is not greater than `n`.
    """
    if not _is_int(n) or int(n) < 1:
        raise ArgumentError(f"diff order n must be a positive integer, got {n!r}")
    arr = NDArray.coerce(a)
    if arr.ndim == 0:
        raise ShapeError("diff requires at least one dimension")
    ax = normalize_axis(axis, arr.ndim)
    if arr.shape[ax] <= int(n):
        raise ShapeError(
            f"diff of order {n} needs more than {n} elements along axis {ax}, "
            f"got {arr.shape[ax]}"
        )
    with np.errstate(all="ignore"):
        out = np.diff(arr._values(), n=int(n), axis=ax)
    return NDArray.from_numpy(out)
