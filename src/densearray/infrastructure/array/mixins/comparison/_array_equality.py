"""
Equality comparisons and floating-point class predicates.

These are defined for both dtypes. Results are always real 0/1 arrays.
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinComparison as AMC


@array_control_path_manager(AMC, AMC.equal, DType.REAL64)
@array_control_path_manager(AMC, AMC.equal, DType.COMPLEX128)
def equal(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.equal, "equal")


@array_control_path_manager(AMC, AMC.not_equal, DType.REAL64)
@array_control_path_manager(AMC, AMC.not_equal, DType.COMPLEX128)
def not_equal(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.not_equal, "not_equal")


@array_control_path_manager(AMC, AMC.isnan, DType.REAL64)
@array_control_path_manager(AMC, AMC.isnan, DType.COMPLEX128)
def isnan(self: INDArray) -> "INDArray":
    return self._unary(np.isnan)


@array_control_path_manager(AMC, AMC.isinf, DType.REAL64)
@array_control_path_manager(AMC, AMC.isinf, DType.COMPLEX128)
def isinf(self: INDArray) -> "INDArray":
    return self._unary(np.isinf)


@array_control_path_manager(AMC, AMC.isfinite, DType.REAL64)
@array_control_path_manager(AMC, AMC.isfinite, DType.COMPLEX128)
def isfinite(self: INDArray) -> "INDArray":
    return self._unary(np.isfinite)
