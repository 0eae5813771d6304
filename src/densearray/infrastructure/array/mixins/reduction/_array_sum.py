"""
Dtype-specific implementations of sum, prod, cumsum and cumprod.

All four are defined for both dtypes; complex arrays accumulate both parts.
"""

from typing import Any, Optional

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinReduction as AMR


@array_control_path_manager(AMR, AMR.sum, DType.REAL64)
@array_control_path_manager(AMR, AMR.sum, DType.COMPLEX128)
def sum(self: INDArray, axis: Optional[int] = None) -> Any:
    """
    CPU control path for sum.

    An empty global sum is ``0.0``; summing along a zero-length axis gives
    zeros of the reduced shape.
    """
    return self._reduce(axis, np.sum, "sum")


@array_control_path_manager(AMR, AMR.prod, DType.REAL64)
@array_control_path_manager(AMR, AMR.prod, DType.COMPLEX128)
def prod(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.prod, "prod")


@array_control_path_manager(AMR, AMR.cumsum, DType.REAL64)
@array_control_path_manager(AMR, AMR.cumsum, DType.COMPLEX128)
def cumsum(self: INDArray, axis: Optional[int] = None) -> "INDArray":
    return self._cumulative(axis, np.cumsum)


@array_control_path_manager(AMR, AMR.cumprod, DType.REAL64)
@array_control_path_manager(AMR, AMR.cumprod, DType.COMPLEX128)
def cumprod(self: INDArray, axis: Optional[int] = None) -> "INDArray":
    return self._cumulative(axis, np.cumprod)
