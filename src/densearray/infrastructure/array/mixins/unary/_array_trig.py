"""
Dtype-specific implementations of the circular and hyperbolic functions.

Each function maps one-to-one onto a NumPy ufunc that is defined for both
float64 and complex128, so every method is registered for both dtypes from a
single table.
"""

from typing import Callable

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinUnary as AMU

_TRIG_KERNELS = {
    AMU.sin: np.sin,
    AMU.cos: np.cos,
    AMU.tan: np.tan,
    AMU.sinh: np.sinh,
    AMU.cosh: np.cosh,
    AMU.tanh: np.tanh,
    AMU.arcsin: np.arcsin,
    AMU.arccos: np.arccos,
    AMU.arctan: np.arctan,
    AMU.arcsinh: np.arcsinh,
    AMU.arccosh: np.arccosh,
    AMU.arctanh: np.arctanh,
}


def _elementwise(kernel: Callable[[np.ndarray], np.ndarray]) -> Callable:
    def control_path(self: INDArray) -> "INDArray":
        return self._unary(kernel)

    control_path.__name__ = kernel.__name__
    return control_path


for _method, _kernel in _TRIG_KERNELS.items():
    _path = _elementwise(_kernel)
    for _dtype in DType:
        array_control_path_manager(AMU, _method, _dtype)(_path)
