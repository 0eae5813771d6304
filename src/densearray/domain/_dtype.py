"""
Element type tags and the promotion table.

An array is either real (one float64 buffer) or complex (two parallel
float64 buffers). The tag is a closed enumeration; the result type of a
binary operation is decided once, up front, by looking the operand tags up
in :data:`PROMOTION_TABLE`.
"""

from enum import Enum
from typing import Any, Dict, Tuple

import numpy as np


class DType(Enum):
    """
    Enumeration of supported element types.

    Attributes
    ----------
    REAL64 : DType
        IEEE-754 double precision real values.
    COMPLEX128 : DType
        Pairs of IEEE-754 doubles (real, imaginary).
    """

    REAL64 = "real64"
    COMPLEX128 = "complex128"

    @property
    def is_complex(self) -> bool:
        return self is DType.COMPLEX128

    @property
    def numpy_dtype(self) -> np.dtype:
        """NumPy dtype used when a buffer of this tag is materialized."""
        return np.dtype(np.complex128 if self.is_complex else np.float64)

    def __str__(self) -> str:
        return self.value


PROMOTION_TABLE: Dict[Tuple[DType, DType], DType] = {
    (DType.REAL64, DType.REAL64): DType.REAL64,
    (DType.REAL64, DType.COMPLEX128): DType.COMPLEX128,
    (DType.COMPLEX128, DType.REAL64): DType.COMPLEX128,
    (DType.COMPLEX128, DType.COMPLEX128): DType.COMPLEX128,
}


def promote(a: DType, b: DType) -> DType:
    """
    Return the result dtype of a binary operation on `a` and `b`.
    """
    return PROMOTION_TABLE[(a, b)]


def promote_all(*dtypes: DType) -> DType:
    out = DType.REAL64
    for dt in dtypes:
        out = promote(out, dt)
    return out


def dtype_of_scalar(value: Any) -> DType:
    """
    Classify a Python or NumPy scalar.

    Parameters
    ----------
    value : Any
        Candidate scalar.

    Returns
    -------
    DType
        ``COMPLEX128`` for complex numbers, ``REAL64`` for bools, ints and
        floats.

    Raises
    ------
    TypeError
        If `value` is not numeric.
    """
    if isinstance(value, (bool, np.bool_)):
        return DType.REAL64
    if isinstance(value, (complex, np.complexfloating)):
        return DType.COMPLEX128
    if isinstance(value, (int, float, np.integer, np.floating)):
        return DType.REAL64
    raise TypeError(f"expected a number, got {type(value).__name__}")


_REAL_NAMES = ("real64", "float64", "real", "float")
_COMPLEX_NAMES = ("complex128", "complex")


def parse_dtype(dtype: Any) -> DType:
    """
    Normalize user-facing dtype spellings to a :class:`DType`.

    Accepts a :class:`DType`, the strings ``"real64"``/``"float64"``/
    ``"complex128"``/``"complex"``, ``float``/``complex`` and NumPy dtypes.
    ``None`` means ``REAL64``.
    """
    if dtype is None:
        return DType.REAL64
    if isinstance(dtype, DType):
        return dtype
    if dtype is float or (isinstance(dtype, str) and dtype in _REAL_NAMES):
        return DType.REAL64
    if dtype is complex or (isinstance(dtype, str) and dtype in _COMPLEX_NAMES):
        return DType.COMPLEX128
    try:
        np_dtype = np.dtype(dtype)
    except TypeError:
        raise TypeError(f"unsupported dtype {dtype!r}") from None
    if np_dtype.kind == "c":
        return DType.COMPLEX128
    if np_dtype.kind in "biuf":
        return DType.REAL64
    raise TypeError(f"unsupported dtype {dtype!r}")
