"""
Dtype-specific implementations of sqrt, exp and the logarithm family.

Both dtypes share the NumPy ufuncs. What differs is the input: a real array
is evaluated on float64 values, so out-of-domain inputs produce ``nan`` or
``-inf``; a complex array is evaluated on complex128 values and gets the
principal-branch analytic continuation.

Examples
--------
Real path::

    array([-4.0]).sqrt()           -> [nan]

Complex path::

    array([-4.0 + 0j]).sqrt()      -> [2j]
    array([-1.0 + 0j]).log()       -> [pi * 1j]
"""

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinUnary as AMU


@array_control_path_manager(AMU, AMU.sqrt, DType.REAL64)
@array_control_path_manager(AMU, AMU.sqrt, DType.COMPLEX128)
def sqrt(self: INDArray) -> "INDArray":
    return self._unary(np.sqrt)


@array_control_path_manager(AMU, AMU.exp, DType.REAL64)
@array_control_path_manager(AMU, AMU.exp, DType.COMPLEX128)
def exp(self: INDArray) -> "INDArray":
    return self._unary(np.exp)


@array_control_path_manager(AMU, AMU.log, DType.REAL64)
@array_control_path_manager(AMU, AMU.log, DType.COMPLEX128)
def log(self: INDArray) -> "INDArray":
    return self._unary(np.log)


@array_control_path_manager(AMU, AMU.log2, DType.REAL64)
@array_control_path_manager(AMU, AMU.log2, DType.COMPLEX128)
def log2(self: INDArray) -> "INDArray":
    return self._unary(np.log2)


@array_control_path_manager(AMU, AMU.log10, DType.REAL64)
@array_control_path_manager(AMU, AMU.log10, DType.COMPLEX128)
def log10(self: INDArray) -> "INDArray":
    return self._unary(np.log10)


@array_control_path_manager(AMU, AMU.log1p, DType.REAL64)
@array_control_path_manager(AMU, AMU.log1p, DType.COMPLEX128)
def log1p(self: INDArray) -> "INDArray":
    return self._unary(np.log1p)


@array_control_path_manager(AMU, AMU.expm1, DType.REAL64)
@array_control_path_manager(AMU, AMU.expm1, DType.COMPLEX128)
def expm1(self: INDArray) -> "INDArray":
    return self._unary(np.expm1)
