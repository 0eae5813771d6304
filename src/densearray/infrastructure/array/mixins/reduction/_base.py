"""
Reduction mixin defining the public NDArray reduction API.

This module declares :class:`ArrayMixinReduction`, an abstract mixin that
specifies the interface and semantics of global and per-axis reductions.
Concrete implementations are registered per dtype.

Shared semantics
----------------
- ``axis=None`` reduces every element and returns a Python scalar
  (``float``, ``complex``, ``int`` for arg-reductions, ``bool`` for
  ``all``/``any``).
- An integer axis (0-based, negative counts from the end) removes that
  axis. A rank-1 input reduced along its only axis yields shape ``(1,)``.
- Ordering reductions (``min``, ``max``, ``argmin``, ``argmax``, ``ptp``,
  ``median``, ``percentile``, ``quantile``) are real-only.
"""

from typing import Any, Optional
from abc import ABC

from .....domain._array import INDArray


class ArrayMixinReduction(ABC):
    """
    Abstract mixin defining reduction operations for arrays.

    Notes
    -----
    - Methods defined here are interface declarations only.
    - Empty-input behavior is part of the contract and is documented per
      method.
    """

    def sum(self: INDArray, axis: Optional[int] = None) -> Any:
        """
        Sum of elements.

        Parameters
        ----------
        axis : int or None, optional
            Axis to reduce. Defaults to None (all elements).

        Returns
        -------
        float | complex | INDArray
            Scalar for a global sum, array otherwise. An empty sum is 0.
        """

    def prod(self: INDArray, axis: Optional[int] = None) -> Any:
        """Product of elements. An empty product is 1."""

    def mean(self: INDArray, axis: Optional[int] = None) -> Any:
        """Arithmetic mean; ``nan`` for empty input."""

    def var(self: INDArray, axis: Optional[int] = None, ddof: int = 0) -> Any:
        """
        Variance ``sum(|x - mean|^2) / (N - ddof)``.

        The default ``ddof=0`` is the population variance; for the fixture
        ``[2, 4, 4, 4, 5, 5, 7, 9]`` it equals 4. Complex input yields a
        real variance. Empty input gives ``nan``.
        """

    def std(self: INDArray, axis: Optional[int] = None, ddof: int = 0) -> Any:
        """Square root of :meth:`var`."""

    def min(self: INDArray, axis: Optional[int] = None) -> Any:
        """
        Minimum (real only).

        Raises
        ------
        ArgumentError
            If the reduced extent is zero.
        """

    def max(self: INDArray, axis: Optional[int] = None) -> Any:
        """Maximum (real only); empty input raises ``ArgumentError``."""

    def argmin(self: INDArray, axis: Optional[int] = None) -> Any:
        """
        0-based position of the minimum (real only).

        Ties resolve to the first occurrence. Without an axis the position
        refers to the flattened array. Empty input raises
        ``ArgumentError``.
        """

    def argmax(self: INDArray, axis: Optional[int] = None) -> Any:
        """0-based position of the maximum, first occurrence on ties."""

    def ptp(self: INDArray, axis: Optional[int] = None) -> Any:
        """Peak to peak, ``max - min`` (real only)."""

    def all(self: INDArray, axis: Optional[int] = None) -> Any:
        """True where every element is nonzero. ``nan`` counts as nonzero."""

    def any(self: INDArray, axis: Optional[int] = None) -> Any:
        """True where at least one element is nonzero."""

    def cumsum(self: INDArray, axis: Optional[int] = None) -> "INDArray":
        """
        Running sum.

        Without an axis the flattened order is used and the result is
        rank 1; with an axis the input shape is preserved.
        """

    def cumprod(self: INDArray, axis: Optional[int] = None) -> "INDArray":
        """Running product; same shape rules as :meth:`cumsum`."""

    def median(self: INDArray, axis: Optional[int] = None) -> Any:
        """
        Median by sort-then-interpolate (real only).

        ``median([1, 2, 3, 4]) == 2.5``. Empty input gives ``nan``.
        """

    def percentile(self: INDArray, p: float, axis: Optional[int] = None) -> Any:
        """
        Linearly interpolated percentile (real only).

        Parameters
        ----------
        p : float
            Percentile in ``[0, 100]``. The sorted position is
            ``f = p / 100 * (n - 1)``.
        axis : int or None, optional
            Axis to reduce.

        Raises
        ------
        ArgumentError
            If `p` lies outside ``[0, 100]``.
        """

    def quantile(self: INDArray, q: float, axis: Optional[int] = None) -> Any:
        """Like :meth:`percentile` with ``q`` in ``[0, 1]``."""
