"""
Nested-sequence <-> flat buffer conversion.

Construction input is a nested list/tuple of numbers whose depth determines
the rank. Every sub-sequence at a given depth must have the same length;
ragged input is rejected with a :class:`ShapeError` naming the depth where
the lengths disagree.
"""

from __future__ import annotations

from typing import Any, List, Sequence, Tuple

import numpy as np

from ...domain._dtype import DType, dtype_of_scalar
from ...domain._errors import DtypeError, ShapeError


def _is_sequence(obj: Any) -> bool:
    return isinstance(obj, (list, tuple))


def infer_shape(nested: Any) -> Tuple[int, ...]:
    """
    Infer the rectangular shape of a nested sequence.

    Parameters
    ----------
    nested : Any
        A number (rank 0) or a nested list/tuple of numbers.

    Returns
    -------
    tuple[int, ...]
        The extent at each depth.

    Raises
    ------
    ShapeError
        If the nesting is ragged.
    """
    shape: List[int] = []
    level: List[Any] = [nested]
    depth = 0
    while level and all(_is_sequence(x) for x in level):
        lengths = {len(x) for x in level}
        if len(lengths) != 1:
            raise ShapeError(
                f"inconsistent dimensions at depth {depth + 1}: "
                f"found lengths {sorted(lengths)}"
            )
        shape.append(lengths.pop())
        level = [y for x in level for y in x]
        depth += 1
    if any(_is_sequence(x) for x in level):
        raise ShapeError(
            f"inconsistent dimensions at depth {depth + 1}: "
            "mixed scalars and sequences"
        )
    return tuple(shape)


def flatten_nested(nested: Any) -> Tuple[Tuple[int, ...], np.ndarray]:
    """
    Validate `nested` and return ``(shape, flat_values)``.

    `flat_values` is float64, or complex128 when any leaf is complex.

    Raises
    ------
    ShapeError
        For ragged input.
    DtypeError
        For non-numeric leaves.
    """
    shape = infer_shape(nested)
    leaves: List[Any] = [nested]
    for _ in shape:
        leaves = [y for x in leaves for y in x]
    dtype = DType.REAL64
    for leaf in leaves:
        try:
            if dtype_of_scalar(leaf).is_complex:
                dtype = DType.COMPLEX128
        except TypeError:
            raise DtypeError(
                f"cannot build an array from element {leaf!r} of type "
                f"{type(leaf).__name__}; dtype must be numeric"
            ) from None
    return shape, np.array(leaves, dtype=dtype.numpy_dtype).reshape(-1)


def build_nested(flat: Sequence[Any], shape: Sequence[int]) -> Any:
    """
    Rebuild nested lists from row-major `flat` values.

    A scalar shape returns the single element itself.
    """
    if len(shape) == 0:
        return flat[0]

    def _build(offset: int, axis: int) -> Tuple[list, int]:
        if axis == len(shape) - 1:
            n = shape[axis]
            return list(flat[offset : offset + n]), offset + n
        out = []
        for _ in range(shape[axis]):
            sub, offset = _build(offset, axis + 1)
            out.append(sub)
        return out, offset

    return _build(0, 0)[0]
