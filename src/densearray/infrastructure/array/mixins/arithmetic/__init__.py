"""
Arithmetic mixins and dtype-specific implementations for NDArray.

This package aggregates the broadcasting binary operations:

- ``add``, ``sub``, ``mul``, ``div`` : both dtypes
- ``pow``                            : both dtypes
- ``mod``, ``fmod``, ``arctan2``     : real arrays only

Public API
----------
Only the base mixin class is exported:

- ``ArrayMixinArithmetic``

The implementation modules are imported for their side effect of
registering control paths.
"""

from ._array_basic import *
from ._array_power import *
from ._array_modulo import *
from ._base import ArrayMixinArithmetic

__all__ = [
    ArrayMixinArithmetic.__name__,
]
