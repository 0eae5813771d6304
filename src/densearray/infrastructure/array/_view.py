"""
Shape, view and element-access mixin for the concrete NDArray.

This module defines `ArrayViewMixin`, which implements the ViewEngine:
reshape/flatten/squeeze/expand_dims return arrays that share the receiver's
storage; transpose reorders elements into a fresh buffer; get/set resolve a
multi-index to a flat row-major offset.

Design notes
------------
- New arrays are constructed via ``type(self)`` so this module never imports
  the concrete class.
- Views attach to the same `Storage`; an element write on any of them
  triggers copy-on-write in :meth:`NDArray._detach`, so sharing is never
  observable.
- All indices and axes are 0-based. Negative axes count from the end;
  negative element indices are rejected.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence, Union

import numpy as np

from ...domain._array import INDArray, Number
from ...domain._dtype import DType, dtype_of_scalar
from ...domain._errors import ArgumentError, DtypeError, ShapeError
from ._shape_engine import (
    normalize_axis,
    ravel_index,
    shape_size,
    validate_shape,
)

logger = logging.getLogger(__name__)


def _shape_args(shape: Sequence[Any]) -> tuple:
    # reshape((2, 3)) and reshape(2, 3) are equivalent
    if len(shape) == 1 and isinstance(shape[0], (list, tuple)):
        return tuple(shape[0])
    return tuple(shape)


class ArrayViewMixin(INDArray):
    """
    View and indexing operations for the concrete NDArray.

    Notes
    -----
    Methods assume the host class provides:

    - ``shape``, ``size``, ``dtype`` and ``_storage``
    - ``_values()`` returning the elements as a shaped NumPy array
    - ``from_numpy(...)`` and a ``(shape, storage=...)`` constructor
    - ``_detach()`` performing copy-on-write before a write
    """

    def reshape(self, *shape: Union[int, Sequence[int]]) -> "INDArray":
        """
        Return an array of `shape` over the same storage.

        Parameters
        ----------
        *shape : int or sequence of int
            The new extents, given either as separate ints or as one
            sequence. A single ``-1`` entry is inferred from the size.

        Returns
        -------
        INDArray
            A view sharing storage with `self`.

        Raises
        ------
        ShapeError
            If the element count differs, or more than one ``-1`` is given.
        """
        dims = list(_shape_args(shape))
        if dims.count(-1) > 1:
            raise ShapeError("can only infer one dimension in reshape")
        if -1 in dims:
            known = shape_size([d for d in dims if d != -1])
            if known == 0 or self.size % known != 0:
                raise ShapeError(
                    f"cannot reshape array of size {self.size} into shape {tuple(dims)}"
                )
            dims[dims.index(-1)] = self.size // known
        new_shape = validate_shape(dims)
        if shape_size(new_shape) != self.size:
            raise ShapeError(
                f"cannot reshape array of size {self.size} into shape {new_shape}"
            )
        return type(self)(new_shape, storage=self._storage)

    def flatten(self) -> "INDArray":
        """Rank-1 view preserving row-major element order."""
        return type(self)((self.size,), storage=self._storage)

    def ravel(self) -> "INDArray":
        return self.flatten()

    def squeeze(self, axis: Optional[int] = None) -> "INDArray":
        """
        Remove size-1 axes.

        Parameters
        ----------
        axis : int or None, optional
            When given, remove only that axis; its extent must be 1. When
            None, remove every size-1 axis; if that would leave no axes the
            result has shape ``(1,)``.

        Raises
        ------
        ShapeError
            If `axis` is given and its extent is not 1.
        ArgumentError
            If `axis` is out of bounds.
        """
        if axis is None:
            new_shape = tuple(d for d in self.shape if d != 1)
            if not new_shape and self.ndim > 0:
                new_shape = (1,)
        else:
            ax = normalize_axis(axis, self.ndim)
            if self.shape[ax] != 1:
                raise ShapeError(
                    f"cannot squeeze axis {axis} with size {self.shape[ax]}"
                )
            new_shape = self.shape[:ax] + self.shape[ax + 1 :]
        return type(self)(new_shape, storage=self._storage)

    def expand_dims(self, axis: int) -> "INDArray":
        """
        Insert a size-1 axis at position `axis`.

        `axis` is checked against the new rank ``ndim + 1``; ``-1`` appends a
        trailing axis.
        """
        ax = normalize_axis(axis, self.ndim, allow_end=True)
        new_shape = self.shape[:ax] + (1,) + self.shape[ax:]
        return type(self)(new_shape, storage=self._storage)

    def transpose(self, axes: Optional[Sequence[int]] = None) -> "INDArray":
        """
        Permute axes; reverse them when `axes` is None.

        For rank 2 this is the matrix transpose. Ranks 0 and 1 are returned
        as views unchanged.

        Raises
        ------
        ArgumentError
            If `axes` is not a permutation of ``range(ndim)``.
        """
        if axes is None:
            perm = tuple(range(self.ndim - 1, -1, -1))
        else:
            perm = tuple(normalize_axis(a, self.ndim) for a in axes)
            if sorted(perm) != list(range(self.ndim)):
                raise ArgumentError(
                    f"axes {tuple(axes)} is not a permutation for ndim {self.ndim}"
                )
        if perm == tuple(range(self.ndim)):
            return type(self)(self.shape, storage=self._storage)
        return type(self).from_numpy(np.transpose(self._values(), perm))

    @property
    def T(self) -> "INDArray":
        return self.transpose()

    def get(self, *index: int) -> Number:
        """
        Read the element at a 0-based multi-index.

        Raises
        ------
        ArrayIndexError
            If the index count differs from the rank or an index is out of
            bounds.
        """
        offset = ravel_index(index, self.shape)
        storage = self._storage
        if storage.imag is None:
            return float(storage.real[offset])
        return complex(storage.real[offset], storage.imag[offset])

    def set(self, *index_and_value: Any) -> None:
        """
        Write one element in place: ``a.set(i, j, value)``.

        If the storage is shared with another array (a view, or an array
        this one was reshaped from) it is cloned first. Writing a complex
        value into a real array promotes the array to complex.

        Raises
        ------
        ArrayIndexError
            If the index is invalid.
        DtypeError
            If `value` is not a number.
        """
        if not index_and_value:
            raise ArgumentError("set requires the index components and a value")
        *index, value = index_and_value
        offset = ravel_index(index, self.shape)
        try:
            value_dtype = dtype_of_scalar(value)
        except TypeError:
            raise DtypeError(
                f"cannot store {type(value).__name__} into a numeric array"
            ) from None
        if value_dtype is DType.COMPLEX128 and self.dtype is DType.REAL64:
            logger.debug("promoting array %s to complex on set", self.shape)
            self._detach(to_complex=True)
        else:
            self._detach()
        storage = self._storage
        if storage.imag is None:
            storage.real[offset] = float(value)
        else:
            c = complex(value)
            storage.real[offset] = c.real
            storage.imag[offset] = c.imag

    def item(self) -> Number:
        """
        Return the only element of a size-1 array.

        Raises
        ------
        ShapeError
            If the array does not hold exactly one element.
        """
        if self.size != 1:
            raise ShapeError(
                f"item() requires an array of size 1, got shape {self.shape}"
            )
        return self.get(*([0] * self.ndim))
