"""
Concrete NDArray implementation (NumPy CPU backend).

This module provides `NDArray`, the dense n-dimensional array of the engine.
It satisfies the domain-level `INDArray` protocol and combines:

- the view/indexing mixin (reshape, squeeze, transpose, get/set),
- the dtype-dispatched operation mixins (arithmetic, unary, comparison,
  reduction), whose control paths are registered per `DType`,
- the operator protocol (``+ - * / ** % @``, ordering comparisons).

Storage model
-------------
An NDArray is a shape plus a reference to a `Storage`. Views share storage
and copy-on-write keeps every array observably independent. The dtype is
derived from the storage: one buffer means REAL64, two mean COMPLEX128.

Design notes
------------
- All operations return new arrays; only :meth:`set` mutates.
- The core is 0-based. 1-based addressing belongs to ``densearray.host``.
- ``==`` keeps Python identity semantics so arrays stay hashable and
  usable in containers; elementwise equality is :meth:`equal`.
"""

from __future__ import annotations

import logging
import weakref
from typing import Any, Callable, Optional, Sequence

import numpy as np

from ...domain._array import Number
from ...domain._constants import REPR_MAX_ELEMENTS
from ...domain._dtype import DType, dtype_of_scalar, parse_dtype, promote
from ...domain._errors import DtypeError, ShapeError
from ..ops.reduce_cpu import EMPTY_IDENTITY, cumulative_cpu, reduce_cpu
from ._nested import build_nested, flatten_nested
from ._shape_engine import (
    broadcast_shapes,
    canonical_strides,
    normalize_optional_axis,
    shape_size,
    validate_shape,
)
from ._storage import Storage
from ._view import ArrayViewMixin

from .mixins.arithmetic import ArrayMixinArithmetic
from .mixins.unary import ArrayMixinUnary
from .mixins.comparison import ArrayMixinComparison
from .mixins.reduction import ArrayMixinReduction

logger = logging.getLogger(__name__)


class NDArray(
    ArrayMixinArithmetic,
    ArrayMixinUnary,
    ArrayMixinComparison,
    ArrayMixinReduction,
    ArrayViewMixin,
):
    """
    Dense, row-major array of real or complex doubles.

    Parameters
    ----------
    shape : Sequence[int]
        Array shape. ``()`` denotes a scalar.
    storage : Optional[Storage], optional
        Existing storage to attach to (views pass their parent's storage).
        When None, zero-filled storage of the requested dtype is allocated.
    dtype : optional
        Element type used when allocating. Ignored when `storage` is given,
        since the storage determines the dtype.

    Raises
    ------
    ShapeError
        If the shape is invalid or does not match the storage length.
    """

    def __init__(
        self,
        shape: Sequence[int],
        storage: Optional[Storage] = None,
        dtype: Any = None,
    ) -> None:
        self._shape = validate_shape(shape)
        size = shape_size(self._shape)
        if storage is None:
            storage = Storage.allocate(size, parse_dtype(dtype).is_complex)
        if storage.length != size:
            raise ShapeError(
                f"shape {self._shape} needs {size} elements but storage holds "
                f"{storage.length}"
            )
        self._release = None
        self._attach(storage)

    # ------------------------------------------------------------------
    # Storage ownership
    # ------------------------------------------------------------------
    def _attach(self, storage: Storage) -> None:
        if self._release is not None:
            self._release()
        storage.incref()
        self._storage = storage
        self._release = weakref.finalize(self, storage.decref)

    def _detach(self, to_complex: bool = False) -> None:
        """
        Ensure this array owns its storage exclusively before a write.

        Parameters
        ----------
        to_complex : bool, optional
            Also convert the storage to complex. Defaults to False.
        """
        if to_complex:
            self._attach(self._storage.promoted())
        elif self._storage.refcount > 1:
            logger.debug("copy-on-write detach for array of shape %s", self._shape)
            self._attach(self._storage.clone())

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        return self._shape

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return self._storage.length

    @property
    def strides(self) -> tuple[int, ...]:
        return canonical_strides(self._shape)

    @property
    def dtype(self) -> DType:
        return DType.COMPLEX128 if self._storage.is_complex else DType.REAL64

    @property
    def storage(self) -> Storage:
        return self._storage

    # ------------------------------------------------------------------
    # Construction and conversion
    # ------------------------------------------------------------------
    @classmethod
    def from_numpy(cls, values: Any) -> "NDArray":
        """
        Build an array owning a copy of `values`.

        Bool and integer inputs become REAL64; complex inputs COMPLEX128.

        Raises
        ------
        DtypeError
            For non-numeric NumPy dtypes (strings, objects, ...).
        """
        arr = np.asarray(values)
        if arr.dtype.kind not in "biufc":
            raise DtypeError(f"cannot build an array from NumPy dtype '{arr.dtype}'")
        return cls(arr.shape, storage=Storage.from_values(arr))

    @classmethod
    def from_nested(cls, nested: Any) -> "NDArray":
        """
        Build an array from nested lists/tuples of numbers.

        Raises
        ------
        ShapeError
            If the nesting is ragged.
        DtypeError
            If a leaf is not numeric.
        """
        shape, flat = flatten_nested(nested)
        return cls(shape, storage=Storage.from_values(flat))

    @classmethod
    def scalar(cls, value: Number) -> "NDArray":
        """Rank-0 array holding `value`."""
        dtype_of_scalar(value)
        return cls.from_numpy(np.asarray(value))

    @classmethod
    def coerce(cls, obj: Any) -> "NDArray":
        """
        Convert an operand to an NDArray without copying existing arrays.

        Accepts NDArray instances (returned as-is), Python/NumPy scalars,
        NumPy arrays, nested lists/tuples, and objects exposing ``_data``
        holding an NDArray (host wrappers).

        Raises
        ------
        DtypeError
            For anything else.
        """
        if isinstance(obj, NDArray):
            return obj
        inner = getattr(obj, "_data", None)
        if isinstance(inner, NDArray):
            return inner
        if isinstance(obj, np.ndarray):
            return cls.from_numpy(obj)
        if isinstance(obj, (list, tuple)):
            return cls.from_nested(obj)
        try:
            dtype_of_scalar(obj)
        except TypeError:
            raise DtypeError(
                f"cannot use {type(obj).__name__} as an array operand"
            ) from None
        return cls.scalar(obj)

    def _values(self) -> np.ndarray:
        """Elements as a shaped NumPy array (read-only view for real arrays)."""
        return self._storage.values().reshape(self._shape)

    def _values_as(self, dtype: DType) -> np.ndarray:
        values = self._values()
        if dtype.is_complex and not self.dtype.is_complex:
            return values.astype(np.complex128)
        return values

    def to_numpy(self) -> np.ndarray:
        """Return a writable NumPy copy (float64 or complex128)."""
        return np.array(self._values(), copy=True)

    __array_ufunc__ = None

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        out = self.to_numpy()
        return out if dtype is None else out.astype(dtype)

    def copy(self) -> "NDArray":
        """Return an array with an independently owned buffer."""
        return type(self)(self._shape, storage=self._storage.clone())

    def astype(self, dtype: Any) -> "NDArray":
        """
        Convert to another dtype.

        Converting complex to real keeps the real part.
        """
        target = parse_dtype(dtype)
        if target is self.dtype:
            return self.copy()
        if target.is_complex:
            return type(self)(self._shape, storage=self._storage.promoted())
        return type(self)(self._shape, storage=Storage(self._storage.real.copy()))

    @property
    def real(self) -> "NDArray":
        return type(self)(self._shape, storage=Storage(self._storage.real.copy()))

    @property
    def imag(self) -> "NDArray":
        if self._storage.imag is None:
            return type(self)(self._shape)
        return type(self)(self._shape, storage=Storage(self._storage.imag.copy()))

    def angle(self) -> "NDArray":
        """Argument of each element in radians (0 or pi for reals)."""
        return self._unary(np.angle)

    def tolist(self) -> Any:
        """
        Rebuild the nested-list form.

        Real arrays yield floats, complex arrays yield Python ``complex``
        values. A rank-0 array returns its scalar.
        """
        flat = self._storage.values().tolist()
        return build_nested(flat, self._shape)

    # ------------------------------------------------------------------
    # Kernel plumbing used by the mixin control paths
    # ------------------------------------------------------------------
    def _unary(self, kernel: Callable[[np.ndarray], Any]) -> "NDArray":
        with np.errstate(all="ignore"):
            out = kernel(self._values())
        return type(self).from_numpy(out)

    def _binary(
        self,
        other: Any,
        kernel: Callable[[np.ndarray, np.ndarray], Any],
        op: str,
        complex_ok: bool = True,
    ) -> "NDArray":
        """
        Broadcast `self` against `other` and apply a binary NumPy kernel.

        The broadcast shape and the result dtype are computed up front; the
        dtype comes from the promotion table, never per element.

        Raises
        ------
        BroadcastError
            If the shapes are incompatible.
        DtypeError
            If promotion yields complex and `complex_ok` is False.
        """
        rhs = type(self).coerce(other)
        out_shape = broadcast_shapes(self._shape, rhs.shape)
        dtype = promote(self.dtype, rhs.dtype)
        if dtype.is_complex and not complex_ok:
            raise DtypeError.unsupported(op, dtype)
        with np.errstate(all="ignore"):
            out = kernel(self._values_as(dtype), rhs._values_as(dtype))
        out = np.broadcast_to(np.asarray(out), out_shape)
        return type(self).from_numpy(out)

    def _reduce(
        self,
        axis: Optional[int],
        kernel: Callable[..., Any],
        name: str,
        on_empty: str = EMPTY_IDENTITY,
    ) -> Any:
        ax = normalize_optional_axis(axis, self.ndim)
        out = reduce_cpu(self._values(), ax, kernel, name=name, on_empty=on_empty)
        if ax is None:
            return np.asarray(out).item()
        return type(self).from_numpy(out)

    def _cumulative(self, axis: Optional[int], kernel: Callable[..., Any]) -> "NDArray":
        ax = normalize_optional_axis(axis, self.ndim)
        return type(self).from_numpy(cumulative_cpu(self._values(), ax, kernel))

    # ------------------------------------------------------------------
    # Python protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        if self.ndim == 0:
            raise TypeError("len() of a rank-0 array")
        return self._shape[0]

    def __bool__(self) -> bool:
        if self.size != 1:
            raise ValueError(
                f"truth value of an array with {self.size} elements is ambiguous"
            )
        return bool(self.item())

    def __repr__(self) -> str:
        head = f"NDArray(shape={self._shape}, dtype={self.dtype.value}"
        if self.size <= REPR_MAX_ELEMENTS:
            return f"{head}, data={self.tolist()!r})"
        return head + ")"

    def __str__(self) -> str:
        return "array(" + ", ".join(str(d) for d in self._shape) + ")"

    __hash__ = object.__hash__

    def __add__(self, other: Any) -> "NDArray":
        return self.add(other)

    def __radd__(self, other: Any) -> "NDArray":
        return type(self).coerce(other).add(self)

    def __sub__(self, other: Any) -> "NDArray":
        return self.sub(other)

    def __rsub__(self, other: Any) -> "NDArray":
        return type(self).coerce(other).sub(self)

    def __mul__(self, other: Any) -> "NDArray":
        return self.mul(other)

    def __rmul__(self, other: Any) -> "NDArray":
        return type(self).coerce(other).mul(self)

    def __truediv__(self, other: Any) -> "NDArray":
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "NDArray":
        return type(self).coerce(other).div(self)

    def __pow__(self, other: Any) -> "NDArray":
        return self.pow(other)

    def __rpow__(self, other: Any) -> "NDArray":
        return type(self).coerce(other).pow(self)

    def __mod__(self, other: Any) -> "NDArray":
        return self.mod(other)

    def __rmod__(self, other: Any) -> "NDArray":
        return type(self).coerce(other).mod(self)

    def __neg__(self) -> "NDArray":
        return self.negative()

    def __pos__(self) -> "NDArray":
        return self.copy()

    def __abs__(self) -> "NDArray":
        return self.abs()

    def __matmul__(self, other: Any) -> "NDArray":
        from ..ops.linalg_cpu import matmul

        return matmul(self, other)

    def __rmatmul__(self, other: Any) -> "NDArray":
        from ..ops.linalg_cpu import matmul

        return matmul(other, self)

    def __lt__(self, other: Any) -> "NDArray":
        return self.less(other)

    def __le__(self, other: Any) -> "NDArray":
        return self.less_equal(other)

    def __gt__(self, other: Any) -> "NDArray":
        return self.greater(other)

    def __ge__(self, other: Any) -> "NDArray":
        return self.greater_equal(other)
