"""
Unary mixins and dtype-specific implementations for NDArray.

This package aggregates elementwise unary math:

- ``abs``, ``negative``, ``conj``
- ``sqrt``, ``exp``, ``log``, ``log2``, ``log10``, ``log1p``, ``expm1``
- circular and hyperbolic functions and their inverses
- ``floor``, ``ceil``, ``round``, ``sign``, ``clip`` (real arrays only)

Public API
----------
Only the base mixin class is exported:

- ``ArrayMixinUnary``
"""

from ._array_abs import *
from ._array_exp_log import *
from ._array_trig import *
from ._array_rounding import *
from ._base import ArrayMixinUnary

__all__ = [
    ArrayMixinUnary.__name__,
]
