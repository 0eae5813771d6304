"""
Real-only ordering comparisons: greater, less, greater_equal, less_equal.
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinComparison as AMC


@array_control_path_manager(AMC, AMC.greater, DType.REAL64)
def greater(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.greater, "greater", complex_ok=False)


@array_control_path_manager(AMC, AMC.less, DType.REAL64)
def less(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.less, "less", complex_ok=False)


@array_control_path_manager(AMC, AMC.greater_equal, DType.REAL64)
def greater_equal(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.greater_equal, "greater_equal", complex_ok=False)


@array_control_path_manager(AMC, AMC.less_equal, DType.REAL64)
def less_equal(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.less_equal, "less_equal", complex_ok=False)
