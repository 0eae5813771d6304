"""
Dtype-specific implementations of abs, negative and conj.
"""

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinUnary as AMU


@array_control_path_manager(AMU, AMU.abs, DType.REAL64)
@array_control_path_manager(AMU, AMU.abs, DType.COMPLEX128)
def abs(self: INDArray) -> "INDArray":
    """
    Absolute value for both dtypes.

    ``np.abs`` on complex128 returns float64 moduli, so the complex path
    yields a real array.
    """
    return self._unary(np.abs)


@array_control_path_manager(AMU, AMU.negative, DType.REAL64)
@array_control_path_manager(AMU, AMU.negative, DType.COMPLEX128)
def negative(self: INDArray) -> "INDArray":
    return self._unary(np.negative)


@array_control_path_manager(AMU, AMU.conj, DType.REAL64)
def conj_real(self: INDArray) -> "INDArray":
    return self.copy()


@array_control_path_manager(AMU, AMU.conj, DType.COMPLEX128)
def conj_complex(self: INDArray) -> "INDArray":
    return self._unary(np.conjugate)
