"""
Dtype-specific implementations of all and any.

An element is truthy when it is nonzero; for complex arrays when either
part is nonzero.
"""

from typing import Any, Optional

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinReduction as AMR


@array_control_path_manager(AMR, AMR.all, DType.REAL64)
@array_control_path_manager(AMR, AMR.all, DType.COMPLEX128)
def all(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.all, "all")


@array_control_path_manager(AMR, AMR.any, DType.REAL64)
@array_control_path_manager(AMR, AMR.any, DType.COMPLEX128)
def any(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.any, "any")
