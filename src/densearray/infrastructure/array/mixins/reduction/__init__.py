"""
Reduction mixins and dtype-specific implementations for NDArray.

This package aggregates reductions and their control paths:

- ``sum``, ``prod``, ``cumsum``, ``cumprod``  : both dtypes
- ``mean``, ``var``, ``std``                  : both dtypes
- ``all``, ``any``                            : both dtypes
- ``min``, ``max``, ``argmin``, ``argmax``, ``ptp`` : real arrays only
- ``median``, ``percentile``, ``quantile``    : real arrays only

Public API
----------
Only the base mixin class is exported:

- ``ArrayMixinReduction``
"""

from ._array_sum import *
from ._array_mean import *
from ._array_extrema import *
from ._array_logical import *
from ._array_quantile import *
from ._base import ArrayMixinReduction

__all__ = [
    ArrayMixinReduction.__name__,
]
