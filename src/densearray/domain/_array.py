"""
Array interface definitions.

This module defines the domain-level interface for dense array objects using
structural typing. The protocol captures the backend-agnostic surface that
engine functions rely on: shape metadata, dtype, element access and
conversion back to nested sequences.
"""

from __future__ import annotations

from typing import Any, Protocol, Union, runtime_checkable

from ._dtype import DType

Number = Union[int, float, complex]


@runtime_checkable
class INDArray(Protocol):
    """
    Dense n-dimensional array interface.

    An `INDArray` is a rectangular collection of real or complex doubles with
    a row-major layout. Implementations are values: operations return new
    arrays, and only :meth:`set` mutates the receiver.

    Notes
    -----
    - Indices and axes at this level are 0-based; negative axes count from
      the end.
    - Conversion to 1-based indexing happens only in the host bridge.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the per-axis extents.

        Returns
        -------
        tuple[int, ...]
            The array shape. An empty tuple denotes a scalar.
        """
        ...

    @property
    def ndim(self) -> int:
        """Number of axes."""
        ...

    @property
    def size(self) -> int:
        """Total number of elements (product of the shape)."""
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """Row-major element strides derived from the shape."""
        ...

    @property
    def dtype(self) -> DType:
        """Element type tag."""
        ...

    def get(self, *index: int) -> Number:
        """
        Read one element.

        Parameters
        ----------
        *index : int
            One 0-based index per axis.

        Returns
        -------
        Number
            ``float`` for real arrays, ``complex`` for complex arrays.
        """
        ...

    def set(self, *index_and_value: Any) -> None:
        """
        Write one element in place (copy-on-write if the buffer is shared).
        """
        ...

    def copy(self) -> "INDArray":
        """Return an array with an independently owned buffer."""
        ...

    def tolist(self) -> Any:
        """Rebuild the nested-list form of the array."""
        ...
