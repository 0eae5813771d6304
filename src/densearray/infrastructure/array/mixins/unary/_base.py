"""
Unary mixin defining the public NDArray elementwise-math API.

This module declares :class:`ArrayMixinUnary`, an abstract mixin specifying
per-element unary operations. Implementations are registered per dtype:
every function has a real path, and the functions with a complex-analytic
definition also have a complex path. Rounding, ``sign`` and ``clip`` are
real-only; calling them on a complex array raises :class:`DtypeError`.

Real paths never change the dtype: ``sqrt`` or ``log`` of a negative real
yields ``nan``. Complex paths use principal branches, so
``sqrt(-4+0j) == 2j`` and ``log(-1+0j) == pi*1j``.
"""

from typing import Any, Optional
from abc import ABC

from .....domain._array import INDArray


class ArrayMixinUnary(ABC):
    """
    Abstract mixin defining elementwise unary math.

    All methods return a new array of the receiver's shape.
    """

    def abs(self: INDArray) -> "INDArray":
        """
        Absolute value.

        For complex input the result is the real-valued modulus.
        """

    def negative(self: INDArray) -> "INDArray":
        """Elementwise negation (``-self``)."""

    def conj(self: INDArray) -> "INDArray":
        """Complex conjugate; the identity on real arrays."""

    def sqrt(self: INDArray) -> "INDArray":
        """
        Square root.

        Real path: ``nan`` for negative inputs. Complex path: principal
        root with the branch cut on the negative real axis.
        """

    def exp(self: INDArray) -> "INDArray":
        """Natural exponential."""

    def log(self: INDArray) -> "INDArray":
        """
        Natural logarithm.

        Real path: ``-inf`` at zero, ``nan`` below. Complex path:
        principal value with imaginary part in ``(-pi, pi]``.
        """

    def log2(self: INDArray) -> "INDArray":
        """Base-2 logarithm."""

    def log10(self: INDArray) -> "INDArray":
        """Base-10 logarithm."""

    def log1p(self: INDArray) -> "INDArray":
        """``log(1 + x)``, accurate near zero."""

    def expm1(self: INDArray) -> "INDArray":
        """``exp(x) - 1``, accurate near zero."""

    def sin(self: INDArray) -> "INDArray":
        """Sine (radians)."""

    def cos(self: INDArray) -> "INDArray":
        """Cosine (radians)."""

    def tan(self: INDArray) -> "INDArray":
        """Tangent (radians)."""

    def sinh(self: INDArray) -> "INDArray":
        """Hyperbolic sine."""

    def cosh(self: INDArray) -> "INDArray":
        """Hyperbolic cosine."""

    def tanh(self: INDArray) -> "INDArray":
        """Hyperbolic tangent."""

    def arcsin(self: INDArray) -> "INDArray":
        """Inverse sine; ``nan`` outside ``[-1, 1]`` on the real path."""

    def arccos(self: INDArray) -> "INDArray":
        """Inverse cosine; ``nan`` outside ``[-1, 1]`` on the real path."""

    def arctan(self: INDArray) -> "INDArray":
        """Inverse tangent."""

    def arcsinh(self: INDArray) -> "INDArray":
        """Inverse hyperbolic sine."""

    def arccosh(self: INDArray) -> "INDArray":
        """Inverse hyperbolic cosine; ``nan`` below 1 on the real path."""

    def arctanh(self: INDArray) -> "INDArray":
        """Inverse hyperbolic tangent; ``±inf`` at ``±1``."""

    def floor(self: INDArray) -> "INDArray":
        """Largest integer not greater than each element (real only)."""

    def ceil(self: INDArray) -> "INDArray":
        """Smallest integer not less than each element (real only)."""

    def round(self: INDArray, decimals: int = 0) -> "INDArray":
        """
        Round to `decimals` places, halves to even (real only).

        Parameters
        ----------
        decimals : int, optional
            Number of decimal places. Defaults to 0.
        """

    def sign(self: INDArray) -> "INDArray":
        """``-1``, ``0`` or ``1`` per element; ``nan`` stays ``nan`` (real only)."""

    def clip(
        self: INDArray, lo: Optional[Any] = None, hi: Optional[Any] = None
    ) -> "INDArray":
        """
        Limit values to ``[lo, hi]`` (real only).

        Parameters
        ----------
        lo, hi : scalar, array or None
            Bounds, broadcast against the receiver. ``None`` leaves that
            side unbounded.

        Raises
        ------
        ArgumentError
            If both bounds are ``None``.
        """
