"""
Dtype-specific implementations of mean, var and std.

Moments are defined for both dtypes. The variance of a complex array is the
real quantity ``mean(|x - mean(x)|**2)``.
"""

from typing import Any, Optional

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray
from .....domain._errors import ArgumentError
from ....ops.reduce_cpu import EMPTY_NAN, var_kernel, std_kernel

from ._base import ArrayMixinReduction as AMR


def _check_ddof(ddof: Any) -> int:
    if isinstance(ddof, bool) or int(ddof) != ddof or ddof < 0:
        raise ArgumentError(f"ddof must be a non-negative integer, got {ddof!r}")
    return int(ddof)


@array_control_path_manager(AMR, AMR.mean, DType.REAL64)
@array_control_path_manager(AMR, AMR.mean, DType.COMPLEX128)
def mean(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.mean, "mean", on_empty=EMPTY_NAN)


@array_control_path_manager(AMR, AMR.var, DType.REAL64)
@array_control_path_manager(AMR, AMR.var, DType.COMPLEX128)
def var(self: INDArray, axis: Optional[int] = None, ddof: int = 0) -> Any:
    """
    CPU control path for variance.

    Divides by ``N - ddof``; when that is not positive the result is
    ``inf`` or ``nan`` rather than an error.
    """
    return self._reduce(axis, var_kernel(_check_ddof(ddof)), "var", on_empty=EMPTY_NAN)


@array_control_path_manager(AMR, AMR.std, DType.REAL64)
@array_control_path_manager(AMR, AMR.std, DType.COMPLEX128)
def std(self: INDArray, axis: Optional[int] = None, ddof: int = 0) -> Any:
    return self._reduce(axis, std_kernel(_check_ddof(ddof)), "std", on_empty=EMPTY_NAN)
