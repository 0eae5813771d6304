"""
Comparison mixins and dtype-specific implementations for NDArray.

- ``equal``, ``not_equal``, ``isnan``, ``isinf``, ``isfinite`` : both dtypes
- ``greater``, ``less``, ``greater_equal``, ``less_equal``   : real arrays only

Only the base mixin ``ArrayMixinComparison`` is exported.
"""

from ._array_equality import *
from ._array_ordering import *
from ._base import ArrayMixinComparison

__all__ = [
    ArrayMixinComparison.__name__,
]
