"""
Comparison mixin defining the public NDArray predicate API.

Every method here returns a REAL64 array of 0.0/1.0 values, whatever the
dtype of the operands. Binary comparisons broadcast like arithmetic.
Ordering comparisons are undefined for complex operands and raise
:class:`DtypeError`; equality and the floating-point class predicates work
for both dtypes.
"""

from typing import Any
from abc import ABC

from .....domain._array import INDArray


class ArrayMixinComparison(ABC):
    """
    Abstract mixin defining elementwise comparisons and predicates.
    """

    def equal(self: INDArray, other: Any) -> "INDArray":
        """1 where ``self == other``; ``nan`` never compares equal."""

    def not_equal(self: INDArray, other: Any) -> "INDArray":
        """1 where ``self != other``."""

    def greater(self: INDArray, other: Any) -> "INDArray":
        """1 where ``self > other`` (real only)."""

    def less(self: INDArray, other: Any) -> "INDArray":
        """1 where ``self < other`` (real only)."""

    def greater_equal(self: INDArray, other: Any) -> "INDArray":
        """1 where ``self >= other`` (real only)."""

    def less_equal(self: INDArray, other: Any) -> "INDArray":
        """1 where ``self <= other`` (real only)."""

    def isnan(self: INDArray) -> "INDArray":
        """
        1 where the element is ``nan``.

        For complex arrays an element is ``nan`` when either part is.
        """

    def isinf(self: INDArray) -> "INDArray":
        """1 where the element is ``±inf`` (either part, for complex)."""

    def isfinite(self: INDArray) -> "INDArray":
        """1 where the element is neither ``nan`` nor infinite."""
