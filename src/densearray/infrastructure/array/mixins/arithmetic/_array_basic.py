"""
Dtype-specific implementations of the four basic arithmetic operations.

Addition, subtraction, multiplication and division are defined for both
dtypes. The same broadcasting kernel serves real and complex receivers; the
registered path only fixes which NumPy ufunc runs after promotion.
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinArithmetic as AMA


@array_control_path_manager(AMA, AMA.add, DType.REAL64)
@array_control_path_manager(AMA, AMA.add, DType.COMPLEX128)
def add(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.add, "add")


@array_control_path_manager(AMA, AMA.sub, DType.REAL64)
@array_control_path_manager(AMA, AMA.sub, DType.COMPLEX128)
def sub(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.subtract, "sub")


@array_control_path_manager(AMA, AMA.mul, DType.REAL64)
@array_control_path_manager(AMA, AMA.mul, DType.COMPLEX128)
def mul(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.multiply, "mul")


@array_control_path_manager(AMA, AMA.div, DType.REAL64)
@array_control_path_manager(AMA, AMA.div, DType.COMPLEX128)
def div(self: INDArray, other: Any) -> "INDArray":
    """
    True division for both dtypes.

    Complex division by zero follows NumPy (``nan``/``inf`` components).
    """
    return self._binary(other, np.true_divide, "div")
