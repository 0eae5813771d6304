"""
Host-facing array wrapper.

`HostArray` exposes an `NDArray` under the 1-based host contract:
element indices and axes start at 1, positions returned by ``argmin`` and
``argmax`` start at 1, and equality compares values with the engine's
equality tolerance instead of identity.
"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from ..domain._constants import EQUALITY_TOLERANCE
from ..domain._dtype import DType
from ..domain._errors import ArgumentError, ArrayError
from ..infrastructure.array._ndarray import NDArray
from ..infrastructure.ops.elementwise_cpu import allclose
from ..infrastructure.ops.linalg_cpu import matmul
from ._bridge import axes_in, axis_in, index_in, index_out

Number = Union[float, complex]


def wrap(result: Any) -> Any:
    """
    Wrap core results for the host: NDArrays become HostArrays, lists and
    tuples are wrapped element-wise, scalars pass through.
    """
    if isinstance(result, NDArray):
        return HostArray(result)
    if isinstance(result, tuple):
        return tuple(wrap(r) for r in result)
    if isinstance(result, list):
        return [wrap(r) for r in result]
    return result


def _reduction(name: str, positions: bool = False):
    def method(self: "HostArray", axis: Optional[int] = None) -> Any:
        out = getattr(self._data, name)(axis_in(axis))
        return wrap(index_out(out) if positions else out)

    method.__name__ = method.__qualname__ = name
    method.__doc__ = f"``{name}`` over the whole array or along a 1-based `axis`."
    return method


def _operator(name: str, reflected: bool = False):
    def method(self: "HostArray", other: Any) -> "HostArray":
        if reflected:
            return HostArray(getattr(NDArray.coerce(other), name)(self._data))
        return HostArray(getattr(self._data, name)(other))

    return method


class HostArray:
    """
    1-based view of an NDArray.

    Parameters
    ----------
    data : array-like
        An NDArray (wrapped without copying) or anything
        :meth:`NDArray.coerce` accepts.

    Examples
    --------
    >>> a = HostArray([[1, 2, 3], [4, 5, 6]])
    >>> a.get(2, 1)
    4.0
    >>> str(a)
    'array(2, 3)'
    """

    __slots__ = ("_data",)

    def __init__(self, data: Any) -> None:
        self._data = NDArray.coerce(data)

    @property
    def data(self) -> NDArray:
        """The wrapped 0-based NDArray."""
        return self._data

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------
    def shape(self) -> tuple[int, ...]:
        return self._data.shape

    def ndim(self) -> int:
        return self._data.ndim

    def size(self) -> int:
        return self._data.size

    def dtype(self) -> DType:
        return self._data.dtype

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------
    def get(self, *index: int) -> Number:
        """Read the element at a 1-based multi-index."""
        return self._data.get(*(index_in(i) for i in index))

    def set(self, *index_and_value: Any) -> "HostArray":
        """
        Write the element at a 1-based multi-index and return self, so
        calls can be chained.
        """
        if not index_and_value:
            raise ArgumentError("set requires the index components and a value")
        *index, value = index_and_value
        self._data.set(*(index_in(i) for i in index), value)
        return self

    def item(self) -> Number:
        return self._data.item()

    def tolist(self) -> Any:
        return self._data.tolist()

    def copy(self) -> "HostArray":
        return HostArray(self._data.copy())

    def astype(self, dtype: Any) -> "HostArray":
        return HostArray(self._data.astype(dtype))

    def to_numpy(self):
        return self._data.to_numpy()

    __array_ufunc__ = None

    def __array__(self, dtype: Any = None, copy: Any = None):
        return self._data.__array__(dtype)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------
    def reshape(self, *shape: Any) -> "HostArray":
        return HostArray(self._data.reshape(*shape))

    def flatten(self) -> "HostArray":
        return HostArray(self._data.flatten())

    def squeeze(self, axis: Optional[int] = None) -> "HostArray":
        return HostArray(self._data.squeeze(axis_in(axis)))

    def expand_dims(self, axis: int) -> "HostArray":
        """Insert a length-1 axis so that it becomes 1-based axis `axis`."""
        return HostArray(self._data.expand_dims(axis_in(axis)))

    def transpose(self, axes: Optional[Sequence[int]] = None) -> "HostArray":
        return HostArray(self._data.transpose(axes_in(axes)))

    @property
    def T(self) -> "HostArray":
        return self.transpose()

    def real(self) -> "HostArray":
        return HostArray(self._data.real)

    def imag(self) -> "HostArray":
        return HostArray(self._data.imag)

    def conj(self) -> "HostArray":
        return HostArray(self._data.conj())

    def angle(self) -> "HostArray":
        """Argument of each element in radians."""
        return HostArray(self._data.angle())

    arg = angle

    def abs(self) -> "HostArray":
        return HostArray(self._data.abs())

    # ------------------------------------------------------------------
    # Reductions
    # ------------------------------------------------------------------
    sum = _reduction("sum")
    prod = _reduction("prod")
    mean = _reduction("mean")
    min = _reduction("min")
    max = _reduction("max")
    ptp = _reduction("ptp")
    all = _reduction("all")
    any = _reduction("any")
    median = _reduction("median")
    cumsum = _reduction("cumsum")
    cumprod = _reduction("cumprod")
    argmin = _reduction("argmin", positions=True)
    argmax = _reduction("argmax", positions=True)

    def var(self, axis: Optional[int] = None, ddof: int = 0) -> Any:
        return wrap(self._data.var(axis_in(axis), ddof))

    def std(self, axis: Optional[int] = None, ddof: int = 0) -> Any:
        return wrap(self._data.std(axis_in(axis), ddof))

    def percentile(self, p: float, axis: Optional[int] = None) -> Any:
        return wrap(self._data.percentile(p, axis_in(axis)))

    def quantile(self, q: float, axis: Optional[int] = None) -> Any:
        return wrap(self._data.quantile(q, axis_in(axis)))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------
    __add__ = _operator("add")
    __sub__ = _operator("sub")
    __mul__ = _operator("mul")
    __truediv__ = _operator("div")
    __pow__ = _operator("pow")
    __mod__ = _operator("mod")
    __radd__ = _operator("add", reflected=True)
    __rsub__ = _operator("sub", reflected=True)
    __rmul__ = _operator("mul", reflected=True)
    __rtruediv__ = _operator("div", reflected=True)
    __rpow__ = _operator("pow", reflected=True)
    __rmod__ = _operator("mod", reflected=True)
    __lt__ = _operator("less")
    __le__ = _operator("less_equal")
    __gt__ = _operator("greater")
    __ge__ = _operator("greater_equal")

    def __matmul__(self, other: Any) -> "HostArray":
        return HostArray(matmul(self._data, other))

    def __rmatmul__(self, other: Any) -> "HostArray":
        return HostArray(matmul(other, self._data))

    def __neg__(self) -> "HostArray":
        return HostArray(self._data.negative())

    def __pos__(self) -> "HostArray":
        return self.copy()

    def __abs__(self) -> "HostArray":
        return self.abs()

    def __eq__(self, other: Any) -> bool:
        """
        Value equality: same shape and every element within
        ``EQUALITY_TOLERANCE`` of its counterpart.
        """
        try:
            rhs = NDArray.coerce(other)
        except ArrayError:
            return NotImplemented
        return allclose(self._data, rhs, tol=EQUALITY_TOLERANCE)

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None

    def __len__(self) -> int:
        return len(self._data)

    def __str__(self) -> str:
        return str(self._data)

    def __repr__(self) -> str:
        return "Host" + repr(self._data)
