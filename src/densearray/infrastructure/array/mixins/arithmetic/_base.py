"""
Arithmetic mixin defining the public NDArray binary-operation API.

This module declares :class:`ArrayMixinArithmetic`, an abstract mixin that
specifies the interface and semantics of broadcasting binary arithmetic.
Concrete implementations are registered per dtype through the array
control-path manager.

Shared semantics
----------------
- The right operand may be an NDArray, a Python/NumPy scalar or anything
  :meth:`NDArray.coerce` accepts; scalars act as rank-0 arrays.
- Operand shapes are combined with the broadcasting rule; incompatible
  shapes raise :class:`BroadcastError`.
- The result dtype is decided once from the promotion table (real with
  complex gives complex).
- Floating-point edge cases follow IEEE-754 and never raise.
"""

from typing import Any
from abc import ABC

from .....domain._array import INDArray


class ArrayMixinArithmetic(ABC):
    """
    Abstract mixin defining broadcasting binary arithmetic.

    Methods declared here are interface declarations; the wrappers that
    replace them at import time dispatch on ``self.dtype``.
    """

    def add(self: INDArray, other: Any) -> "INDArray":
        """Elementwise ``self + other``."""

    def sub(self: INDArray, other: Any) -> "INDArray":
        """Elementwise ``self - other``."""

    def mul(self: INDArray, other: Any) -> "INDArray":
        """Elementwise ``self * other``."""

    def div(self: INDArray, other: Any) -> "INDArray":
        """
        Elementwise true division.

        Division by zero yields ``±inf`` (or ``nan`` for ``0/0``).
        """

    def pow(self: INDArray, other: Any) -> "INDArray":
        """
        Elementwise power ``self ** other``.

        Notes
        -----
        - ``0 ** 0 == 1``.
        - A negative real base with a non-integral real exponent yields
          ``nan``; promote to complex first to get the principal value.
        """

    def mod(self: INDArray, other: Any) -> "INDArray":
        """
        Floored modulo: the result takes the sign of the divisor.

        ``mod(-7, 3) == 2`` and ``mod(7, -3) == -2``. A zero divisor gives
        ``nan``. Undefined for complex operands.
        """

    def fmod(self: INDArray, other: Any) -> "INDArray":
        """
        Truncated modulo: the result takes the sign of the dividend.

        ``fmod(-7, 3) == -1``. A zero divisor gives ``nan``. Undefined for
        complex operands.
        """

    def arctan2(self: INDArray, other: Any) -> "INDArray":
        """
        Elementwise quadrant-aware ``atan(self / other)``, in radians.

        Undefined for complex operands.
        """
