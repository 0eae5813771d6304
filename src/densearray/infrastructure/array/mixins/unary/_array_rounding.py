"""
Real-only implementations of floor, ceil, round, sign and clip.

These operations depend on the ordering of the reals, so only REAL64 control
paths exist; complex receivers raise :class:`DtypeError` through the
control-path manager.
"""

from typing import Any, Optional

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray
from .....domain._errors import ArgumentError, DtypeError

from ._base import ArrayMixinUnary as AMU


@array_control_path_manager(AMU, AMU.floor, DType.REAL64)
def floor(self: INDArray) -> "INDArray":
    return self._unary(np.floor)


@array_control_path_manager(AMU, AMU.ceil, DType.REAL64)
def ceil(self: INDArray) -> "INDArray":
    return self._unary(np.ceil)


@array_control_path_manager(AMU, AMU.round, DType.REAL64)
def round(self: INDArray, decimals: int = 0) -> "INDArray":
    """
    CPU control path for rounding.

    Uses ``np.round``: halves go to the nearest even value, so
    ``round(2.5) == 2`` and ``round(3.5) == 4``.
    """
    if isinstance(decimals, bool) or int(decimals) != decimals:
        raise ArgumentError(f"decimals must be an integer, got {decimals!r}")
    return self._unary(lambda v: np.round(v, int(decimals)))


@array_control_path_manager(AMU, AMU.sign, DType.REAL64)
def sign(self: INDArray) -> "INDArray":
    return self._unary(np.sign)


@array_control_path_manager(AMU, AMU.clip, DType.REAL64)
def clip(self: INDArray, lo: Optional[Any] = None, hi: Optional[Any] = None) -> "INDArray":
    """
    CPU control path for clip.

    Bounds are coerced to arrays and broadcast against the receiver, so the
    output shape is the broadcast of all three shapes. When ``lo > hi`` at a
    position the result is ``hi`` there, matching ``np.clip``.
    """
    if lo is None and hi is None:
        raise ArgumentError("clip requires at least one of 'lo' or 'hi'")
    out = self
    if lo is not None:
        bound = type(self).coerce(lo)
        if bound.dtype.is_complex:
            raise DtypeError.unsupported("clip", bound.dtype)
        out = out._binary(bound, np.maximum, "clip")
    if hi is not None:
        bound = type(self).coerce(hi)
        if bound.dtype.is_complex:
            raise DtypeError.unsupported("clip", bound.dtype)
        out = out._binary(bound, np.minimum, "clip")
    return out
