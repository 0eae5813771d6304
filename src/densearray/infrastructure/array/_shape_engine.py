"""
Shape arithmetic: validation, canonical strides, broadcasting and
index/offset conversion.

All functions here are pure and 0-based. Negative axes are accepted by
:func:`normalize_axis` and count from the end, Python style.
"""

from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ...domain._errors import (
    ArgumentError,
    ArrayIndexError,
    BroadcastError,
    ShapeError,
)

Shape = tuple[int, ...]


def validate_shape(shape: Iterable[int]) -> Shape:
    """
    Normalize `shape` to a tuple of non-negative Python ints.

    Parameters
    ----------
    shape : Iterable[int]
        Candidate shape. A bare int is accepted as a rank-1 shape.

    Returns
    -------
    tuple[int, ...]
        Normalized shape.

    Raises
    ------
    ShapeError
        If any extent is negative or not integral.
    """
    if isinstance(shape, int):
        shape = (shape,)
    out = []
    for d in shape:
        if isinstance(d, bool) or int(d) != d:
            raise ShapeError(f"shape extents must be integers, got {d!r}")
        if int(d) < 0:
            raise ShapeError(f"negative dimension {int(d)} in shape {tuple(shape)}")
        out.append(int(d))
    return tuple(out)


def shape_size(shape: Sequence[int]) -> int:
    """Product of the extents; 1 for the scalar shape ``()``."""
    n = 1
    for d in shape:
        n *= int(d)
    return n


def canonical_strides(shape: Sequence[int]) -> Shape:
    """
    Row-major element strides: the last axis varies fastest.

    Examples
    --------
    >>> canonical_strides((2, 3, 4))
    (12, 4, 1)
    """
    strides = [1] * len(shape)
    acc = 1
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = acc
        acc *= max(int(shape[i]), 1)
    return tuple(strides)


def broadcast_shapes(a: Sequence[int], b: Sequence[int]) -> Shape:
    """
    Compute the broadcast result of two shapes.

    The shapes are right-aligned and the shorter one is padded with leading
    1s. For each aligned pair ``(da, db)`` the result is ``da`` when they are
    equal, the other extent when either is 1, and an error otherwise.

    Parameters
    ----------
    a, b : Sequence[int]
        Operand shapes of arbitrary rank.

    Returns
    -------
    tuple[int, ...]
        The broadcast shape, of rank ``max(len(a), len(b))``.

    Raises
    ------
    BroadcastError
        If an aligned pair is neither equal nor contains a 1.
    """
    rank = max(len(a), len(b))
    pa = (1,) * (rank - len(a)) + tuple(int(d) for d in a)
    pb = (1,) * (rank - len(b)) + tuple(int(d) for d in b)
    out = []
    for da, db in zip(pa, pb):
        if da == db:
            out.append(da)
        elif da == 1:
            out.append(db)
        elif db == 1:
            out.append(da)
        else:
            raise BroadcastError(a, b)
    return tuple(out)


def broadcast_shapes_n(*shapes: Sequence[int]) -> Shape:
    """Fold :func:`broadcast_shapes` over any number of shapes."""
    out: Shape = ()
    for s in shapes:
        out = broadcast_shapes(out, s)
    return out


def normalize_axis(axis: int, ndim: int, allow_end: bool = False) -> int:
    """
    Map a possibly negative axis to ``0..ndim-1``.

    Parameters
    ----------
    axis : int
        Requested axis.
    ndim : int
        Rank of the array the axis refers to.
    allow_end : bool, optional
        Accept ``axis == ndim`` (insertion positions, as used by
        ``expand_dims``). Negative values then count from ``ndim + 1``.

    Raises
    ------
    ArgumentError
        If `axis` is not an integer or is out of bounds.
    """
    if isinstance(axis, bool) or not isinstance(axis, int):
        try:
            if int(axis) != axis:
                raise ValueError
            axis = int(axis)
        except (TypeError, ValueError):
            raise ArgumentError(f"axis must be an integer, got {axis!r}") from None
    limit = ndim + 1 if allow_end else ndim
    ax = axis + limit if axis < 0 else axis
    if ax < 0 or ax >= limit:
        raise ArgumentError(f"axis {axis} out of bounds for ndim {ndim}")
    return ax


def normalize_optional_axis(axis: Optional[int], ndim: int) -> Optional[int]:
    return None if axis is None else normalize_axis(axis, ndim)


def ravel_index(index: Sequence[int], shape: Sequence[int]) -> int:
    """
    Convert a 0-based multi-index to a flat row-major offset.

    Raises
    ------
    ArrayIndexError
        If the number of indices differs from the rank or any index is out
        of bounds.
    """
    if len(index) != len(shape):
        raise ArrayIndexError(
            f"index has {len(index)} components but array has rank {len(shape)}"
        )
    offset = 0
    for i, (ix, dim, stride) in enumerate(zip(index, shape, canonical_strides(shape))):
        if isinstance(ix, bool) or int(ix) != ix:
            raise ArrayIndexError(f"index {ix!r} on axis {i} is not an integer")
        ix = int(ix)
        if ix < 0 or ix >= dim:
            raise ArrayIndexError(
                f"index {ix} is out of bounds for axis {i} with size {dim}"
            )
        offset += ix * stride
    return offset


def unravel_index(offset: int, shape: Sequence[int]) -> Shape:
    """Inverse of :func:`ravel_index` for an in-range flat offset."""
    out = []
    for stride in canonical_strides(shape):
        q, offset = divmod(offset, stride)
        out.append(q)
    return tuple(out)
