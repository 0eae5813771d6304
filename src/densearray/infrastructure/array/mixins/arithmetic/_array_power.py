"""
Dtype-specific implementations of NDArray.pow.

The real path stays real: a negative base raised to a fractional exponent
produces ``nan`` rather than silently switching to complex. The complex path
uses NumPy's principal-branch complex power.
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinArithmetic as AMA


@array_control_path_manager(AMA, AMA.pow, DType.REAL64)
@array_control_path_manager(AMA, AMA.pow, DType.COMPLEX128)
def pow(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.power, "pow")
