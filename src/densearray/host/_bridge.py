"""
Index and axis translation between the 1-based host contract and the
0-based core.

Host axes and element indices start at 1. Negative values keep their
Python meaning and count from the end, so ``-1`` is the last axis on both
sides. Zero has no host meaning and is rejected.
"""

from __future__ import annotations

import numbers
from typing import Any, Optional, Sequence, Tuple, Union

from ..domain._errors import ArgumentError, ArrayIndexError
from ..infrastructure.array._ndarray import NDArray


def axis_in(axis: Optional[int]) -> Optional[int]:
    """
    Convert a 1-based host axis to a core axis.

    Raises
    ------
    ArgumentError
        If `axis` is 0 or not an integer.
    """
    if axis is None:
        return None
    if isinstance(axis, bool) or not isinstance(axis, numbers.Integral):
        raise ArgumentError(f"axis must be an integer, got {axis!r}")
    axis = int(axis)
    if axis == 0:
        raise ArgumentError("axis 0 is invalid: host axes start at 1")
    return axis - 1 if axis > 0 else axis


def axes_in(axes: Optional[Sequence[int]]) -> Optional[Tuple[int, ...]]:
    if axes is None:
        return None
    return tuple(axis_in(a) for a in axes)


def index_in(index: int) -> int:
    """
    Convert a 1-based element index to a 0-based one.

    Raises
    ------
    ArrayIndexError
        If `index` is not a positive integer.
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ArrayIndexError(f"index must be an integer, got {index!r}")
    index = int(index)
    if index < 1:
        raise ArrayIndexError(f"index {index} is invalid: host indices start at 1")
    return index - 1


def positions_in(index: Union[int, Sequence[int]]) -> Union[int, list]:
    """Convert one position or a list of positions for insert/delete."""
    if isinstance(index, (list, tuple)):
        return [index_in(i) for i in index]
    return index_in(index)


def index_out(result: Any) -> Any:
    """
    Shift 0-based positions returned by the core to 1-based ones.

    Accepts an int, an NDArray of positions, or a tuple of those.
    """
    if isinstance(result, tuple):
        return tuple(index_out(r) for r in result)
    if isinstance(result, NDArray):
        return result.add(1.0)
    return int(result) + 1
