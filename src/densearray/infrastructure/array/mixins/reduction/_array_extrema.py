"""
Real-only implementations of min, max, argmin, argmax and ptp.

Complex numbers have no total order, so only REAL64 paths are registered.
Every reduction here raises ``ArgumentError`` on an empty reduced extent.
``nan`` propagates: the minimum of an array holding ``nan`` is ``nan`` and
its position is the first ``nan``.
"""

from typing import Any, Optional

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray
from ....ops.reduce_cpu import EMPTY_RAISE

from ._base import ArrayMixinReduction as AMR


@array_control_path_manager(AMR, AMR.min, DType.REAL64)
def min(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.min, "min", on_empty=EMPTY_RAISE)


@array_control_path_manager(AMR, AMR.max, DType.REAL64)
def max(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.max, "max", on_empty=EMPTY_RAISE)


@array_control_path_manager(AMR, AMR.argmin, DType.REAL64)
def argmin(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.argmin, "argmin", on_empty=EMPTY_RAISE)


@array_control_path_manager(AMR, AMR.argmax, DType.REAL64)
def argmax(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.argmax, "argmax", on_empty=EMPTY_RAISE)


@array_control_path_manager(AMR, AMR.ptp, DType.REAL64)
def ptp(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, np.ptp, "ptp", on_empty=EMPTY_RAISE)
