"""
Real-only order statistics: median, percentile and quantile.

All three share one kernel: sort, then interpolate linearly at sorted
position ``f = q * (n - 1)`` between ``floor(f)`` and ``ceil(f)``.
"""

from typing import Any, Optional

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray
from ....ops.reduce_cpu import EMPTY_NAN, check_fraction, quantile_kernel

from ._base import ArrayMixinReduction as AMR


@array_control_path_manager(AMR, AMR.median, DType.REAL64)
def median(self: INDArray, axis: Optional[int] = None) -> Any:
    return self._reduce(axis, quantile_kernel(0.5), "median", on_empty=EMPTY_NAN)


@array_control_path_manager(AMR, AMR.percentile, DType.REAL64)
def percentile(self: INDArray, p: float, axis: Optional[int] = None) -> Any:
    fraction = check_fraction(p, 100.0, "percentile") / 100.0
    return self._reduce(
        axis, quantile_kernel(fraction), "percentile", on_empty=EMPTY_NAN
    )


@array_control_path_manager(AMR, AMR.quantile, DType.REAL64)
def quantile(self: INDArray, q: float, axis: Optional[int] = None) -> Any:
    fraction = check_fraction(q, 1.0, "quantile")
    return self._reduce(axis, quantile_kernel(fraction), "quantile", on_empty=EMPTY_NAN)
