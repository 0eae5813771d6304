"""
Module-level host functions.

Each function mirrors a core operation from
:mod:`densearray.infrastructure.ops` under the 1-based host contract:

- ``axis`` arguments are 1-based (negative values count from the end),
- positions produced by argmin/argmax/argsort/searchsorted/unique/nonzero/
  argwhere are 1-based,
- positions consumed by insert/delete are 1-based,
- concatenate, stack and split default to axis 1.

Operands may be HostArrays, NDArrays, NumPy arrays, nested sequences or
scalars. Array results come back as HostArrays; scalars pass through.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple, Union

from ..domain._constants import DEFAULT_HISTOGRAM_BINS, DEFAULT_LINSPACE_NUM
from ..infrastructure.ops import (
    creation_cpu,
    elementwise_cpu,
    linalg_cpu,
    manipulation_cpu,
    reduce_cpu_ext,
    signal_cpu,
    sort_search_cpu,
)
from ._bridge import axis_in, index_out, positions_in
from ._host_array import HostArray, wrap


def _lift(fn):
    """Host wrapper for core functions without axes or positions."""

    def lifted(*args: Any, **kwargs: Any) -> Any:
        return wrap(fn(*args, **kwargs))

    lifted.__name__ = lifted.__qualname__ = fn.__name__
    lifted.__doc__ = fn.__doc__
    return lifted


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------
def array(obj: Any, dtype: Any = None) -> HostArray:
    """
    Build a HostArray from nested sequences, scalars or existing arrays.

    The data is always copied.

    Raises
    ------
    ShapeError
        For ragged nesting.
    DtypeError
        For non-numeric leaves.
    """
    return HostArray(creation_cpu.array(obj, dtype))


def tolist(a: Any) -> Any:
    """Nested-list form of `a`; ``array(tolist(a))`` reproduces `a`."""
    return HostArray(a).tolist()


def arange(start: float, stop: Optional[float] = None, step: float = 1.0) -> HostArray:
    return HostArray(creation_cpu.arange(start, stop, step))


def linspace(start: float, stop: float, num: int = DEFAULT_LINSPACE_NUM) -> HostArray:
    return HostArray(creation_cpu.linspace(start, stop, num))


asarray = _lift(creation_cpu.asarray)
complex_array = _lift(creation_cpu.complex_array)
from_polar = _lift(creation_cpu.from_polar)
zeros = _lift(creation_cpu.zeros)
ones = _lift(creation_cpu.ones)
empty = _lift(creation_cpu.empty)
full = _lift(creation_cpu.full)
zeros_like = _lift(creation_cpu.zeros_like)
ones_like = _lift(creation_cpu.ones_like)
full_like = _lift(creation_cpu.full_like)
eye = _lift(creation_cpu.eye)
identity = _lift(creation_cpu.identity)
rand = _lift(creation_cpu.rand)
randn = _lift(creation_cpu.randn)
seed = creation_cpu.seed
from_numpy = _lift(creation_cpu.from_numpy)


# ----------------------------------------------------------------------
# Elementwise
# ----------------------------------------------------------------------
add = _lift(elementwise_cpu.add)
subtract = _lift(elementwise_cpu.subtract)
multiply = _lift(elementwise_cpu.multiply)
divide = _lift(elementwise_cpu.divide)
power = _lift(elementwise_cpu.power)
mod = _lift(elementwise_cpu.mod)
fmod = _lift(elementwise_cpu.fmod)
arctan2 = _lift(elementwise_cpu.arctan2)
equal = _lift(elementwise_cpu.equal)
not_equal = _lift(elementwise_cpu.not_equal)
greater = _lift(elementwise_cpu.greater)
less = _lift(elementwise_cpu.less)
greater_equal = _lift(elementwise_cpu.greater_equal)
less_equal = _lift(elementwise_cpu.less_equal)
clip = _lift(elementwise_cpu.clip)
where = _lift(elementwise_cpu.where)
csqrt = _lift(elementwise_cpu.csqrt)
clog = _lift(elementwise_cpu.clog)
allclose = elementwise_cpu.allclose
array_equal = elementwise_cpu.array_equal
round = _lift(elementwise_cpu.round)

abs = _lift(elementwise_cpu.abs)
negative = _lift(elementwise_cpu.negative)
conj = _lift(elementwise_cpu.conj)
angle = _lift(elementwise_cpu.angle)
arg = angle
sqrt = _lift(elementwise_cpu.sqrt)
exp = _lift(elementwise_cpu.exp)
log = _lift(elementwise_cpu.log)
log2 = _lift(elementwise_cpu.log2)
log10 = _lift(elementwise_cpu.log10)
log1p = _lift(elementwise_cpu.log1p)
expm1 = _lift(elementwise_cpu.expm1)
sin = _lift(elementwise_cpu.sin)
cos = _lift(elementwise_cpu.cos)
tan = _lift(elementwise_cpu.tan)
sinh = _lift(elementwise_cpu.sinh)
cosh = _lift(elementwise_cpu.cosh)
tanh = _lift(elementwise_cpu.tanh)
arcsin = _lift(elementwise_cpu.arcsin)
arccos = _lift(elementwise_cpu.arccos)
arctan = _lift(elementwise_cpu.arctan)
arcsinh = _lift(elementwise_cpu.arcsinh)
arccosh = _lift(elementwise_cpu.arccosh)
arctanh = _lift(elementwise_cpu.arctanh)
floor = _lift(elementwise_cpu.floor)
ceil = _lift(elementwise_cpu.ceil)
sign = _lift(elementwise_cpu.sign)
isnan = _lift(elementwise_cpu.isnan)
isinf = _lift(elementwise_cpu.isinf)
isfinite = _lift(elementwise_cpu.isfinite)


# ----------------------------------------------------------------------
# Reductions and statistics
# ----------------------------------------------------------------------
def _reduction(fn, positions: bool = False):
    def reduced(a: Any, axis: Optional[int] = None) -> Any:
        out = fn(a, axis_in(axis))
        return wrap(index_out(out) if positions else out)

    reduced.__name__ = reduced.__qualname__ = fn.__name__
    reduced.__doc__ = f"Host form of ``{fn.__name__}`` with a 1-based `axis`."
    return reduced


sum = _reduction(reduce_cpu_ext.sum)
prod = _reduction(reduce_cpu_ext.prod)
mean = _reduction(reduce_cpu_ext.mean)
min = _reduction(reduce_cpu_ext.min)
max = _reduction(reduce_cpu_ext.max)
ptp = _reduction(reduce_cpu_ext.ptp)
all = _reduction(reduce_cpu_ext.all)
any = _reduction(reduce_cpu_ext.any)
median = _reduction(reduce_cpu_ext.median)
cumsum = _reduction(reduce_cpu_ext.cumsum)
cumprod = _reduction(reduce_cpu_ext.cumprod)
argmin = _reduction(reduce_cpu_ext.argmin, positions=True)
argmax = _reduction(reduce_cpu_ext.argmax, positions=True)


def var(a: Any, axis: Optional[int] = None, ddof: int = 0) -> Any:
    return wrap(reduce_cpu_ext.var(a, axis_in(axis), ddof))


def std(a: Any, axis: Optional[int] = None, ddof: int = 0) -> Any:
    return wrap(reduce_cpu_ext.std(a, axis_in(axis), ddof))


def percentile(a: Any, p: float, axis: Optional[int] = None) -> Any:
    return wrap(reduce_cpu_ext.percentile(a, p, axis_in(axis)))


def quantile(a: Any, q: float, axis: Optional[int] = None) -> Any:
    return wrap(reduce_cpu_ext.quantile(a, q, axis_in(axis)))


def histogram(
    data: Any,
    nbins: int = DEFAULT_HISTOGRAM_BINS,
    range: Optional[Tuple[float, float]] = None,
) -> Tuple[HostArray, HostArray]:
    return wrap(reduce_cpu_ext.histogram(data, nbins, range))


bincount = _lift(reduce_cpu_ext.bincount)


# ----------------------------------------------------------------------
# Linear algebra
# ----------------------------------------------------------------------
dot = _lift(linalg_cpu.dot)
matmul = _lift(linalg_cpu.matmul)
outer = _lift(linalg_cpu.outer)
diagonal = _lift(linalg_cpu.diagonal)
trace = _lift(linalg_cpu.trace)
diag = _lift(linalg_cpu.diag)


# ----------------------------------------------------------------------
# Sorting and searching
# ----------------------------------------------------------------------
def sort(a: Any, axis: Optional[int] = None) -> HostArray:
    return HostArray(sort_search_cpu.sort(a, axis_in(axis)))


def argsort(a: Any, axis: Optional[int] = None) -> HostArray:
    """1-based positions that would sort `a` (stable)."""
    return HostArray(index_out(sort_search_cpu.argsort(a, axis_in(axis))))


def searchsorted(sorted_array: Any, values: Any, side: str = "left") -> Any:
    """
    1-based insertion positions. Inserting before position ``k`` keeps
    the array ordered; ``len + 1`` means append.
    """
    return wrap(index_out(sort_search_cpu.searchsorted(sorted_array, values, side)))


def unique(
    a: Any,
    return_index: bool = False,
    return_inverse: bool = False,
    return_counts: bool = False,
) -> Union[HostArray, Tuple[HostArray, ...]]:
    """
    Sorted distinct values; first-occurrence and inverse positions are
    1-based. Extras follow in the order index, inverse, counts.
    """
    out = sort_search_cpu.unique(a, return_index, return_inverse, return_counts)
    if not isinstance(out, tuple):
        return HostArray(out)
    values, *extras = out
    shifted = []
    flags = [f for f in (return_index, return_inverse) if f]
    for i, extra in enumerate(extras):
        shifted.append(index_out(extra) if i < len(flags) else extra)
    return wrap((values, *shifted))


def nonzero(a: Any) -> Tuple[HostArray, ...]:
    return wrap(index_out(sort_search_cpu.nonzero(a)))


def argwhere(a: Any) -> HostArray:
    """``(N, ndim)`` matrix of 1-based multi-indices of nonzero elements."""
    return HostArray(index_out(sort_search_cpu.argwhere(a)))


# ----------------------------------------------------------------------
# Manipulation
# ----------------------------------------------------------------------
def concatenate(arrays: Sequence[Any], axis: int = 1) -> HostArray:
    return HostArray(manipulation_cpu.concatenate(arrays, axis_in(axis)))


def stack(arrays: Sequence[Any], axis: int = 1) -> HostArray:
    return HostArray(manipulation_cpu.stack(arrays, axis_in(axis)))


vstack = _lift(manipulation_cpu.vstack)
hstack = _lift(manipulation_cpu.hstack)


def split(a: Any, sections: Union[int, Sequence[int]], axis: int = 1) -> List[HostArray]:
    """
    Split into `sections` equal parts, or after each count in a list of
    split points (``[2, 5]`` yields parts of 2, 3 and the rest).
    """
    return wrap(manipulation_cpu.split(a, sections, axis_in(axis)))


tile = _lift(manipulation_cpu.tile)


def repeat(a: Any, repeats: int, axis: Optional[int] = None) -> HostArray:
    return HostArray(manipulation_cpu.repeat(a, repeats, axis_in(axis)))


rep = repeat


def flip(a: Any, axis: Optional[int] = None) -> HostArray:
    return HostArray(manipulation_cpu.flip(a, axis_in(axis)))


def roll(a: Any, shift: int, axis: Optional[int] = None) -> HostArray:
    return HostArray(manipulation_cpu.roll(a, shift, axis_in(axis)))


pad = _lift(manipulation_cpu.pad)


def insert(a: Any, index: Union[int, Sequence[int]], values: Any, axis: Optional[int] = None) -> HostArray:
    """Insert `values` before 1-based position(s) `index`; ``len + 1`` appends."""
    return HostArray(manipulation_cpu.insert(a, positions_in(index), values, axis_in(axis)))


def delete(a: Any, index: Union[int, Sequence[int]], axis: Optional[int] = None) -> HostArray:
    """Remove the element(s) or slice(s) at 1-based position(s) `index`."""
    return HostArray(manipulation_cpu.delete(a, positions_in(index), axis_in(axis)))


def diff(a: Any, n: int = 1, axis: int = -1) -> HostArray:
    return HostArray(manipulation_cpu.diff(a, n, axis_in(axis)))


def squeeze(a: Any, axis: Optional[int] = None) -> HostArray:
    return HostArray(a).squeeze(axis)


def expand_dims(a: Any, axis: int) -> HostArray:
    return HostArray(a).expand_dims(axis)


def reshape(a: Any, *shape: Any) -> HostArray:
    return HostArray(a).reshape(*shape)


def flatten(a: Any) -> HostArray:
    return HostArray(a).flatten()


def transpose(a: Any, axes: Optional[Sequence[int]] = None) -> HostArray:
    return HostArray(a).transpose(axes)


# ----------------------------------------------------------------------
# Signal processing
# ----------------------------------------------------------------------
convolve = _lift(signal_cpu.convolve)
correlate = _lift(signal_cpu.correlate)
interp = _lift(signal_cpu.interp)


def gradient(
    a: Any, spacing: float = 1.0, axis: Optional[int] = None
) -> Union[HostArray, List[HostArray]]:
    return wrap(signal_cpu.gradient(a, spacing, axis_in(axis)))


__all__ = [
    "array",
    "tolist",
    "arange",
    "linspace",
    "asarray",
    "complex_array",
    "from_polar",
    "zeros",
    "ones",
    "empty",
    "full",
    "zeros_like",
    "ones_like",
    "full_like",
    "eye",
    "identity",
    "rand",
    "randn",
    "seed",
    "from_numpy",
    "add",
    "subtract",
    "multiply",
    "divide",
    "power",
    "mod",
    "fmod",
    "arctan2",
    "equal",
    "not_equal",
    "greater",
    "less",
    "greater_equal",
    "less_equal",
    "clip",
    "where",
    "csqrt",
    "clog",
    "allclose",
    "array_equal",
    "round",
    "abs",
    "negative",
    "conj",
    "angle",
    "arg",
    "sqrt",
    "exp",
    "log",
    "log2",
    "log10",
    "log1p",
    "expm1",
    "sin",
    "cos",
    "tan",
    "sinh",
    "cosh",
    "tanh",
    "arcsin",
    "arccos",
    "arctan",
    "arcsinh",
    "arccosh",
    "arctanh",
    "floor",
    "ceil",
    "sign",
    "isnan",
    "isinf",
    "isfinite",
    "sum",
    "prod",
    "mean",
    "min",
    "max",
    "ptp",
    "all",
    "any",
    "median",
    "cumsum",
    "cumprod",
    "argmin",
    "argmax",
    "var",
    "std",
    "percentile",
    "quantile",
    "histogram",
    "bincount",
    "dot",
    "matmul",
    "outer",
    "diagonal",
    "trace",
    "diag",
    "sort",
    "argsort",
    "searchsorted",
    "unique",
    "nonzero",
    "argwhere",
    "concatenate",
    "stack",
    "vstack",
    "hstack",
    "split",
    "tile",
    "repeat",
    "rep",
    "flip",
    "roll",
    "pad",
    "insert",
    "delete",
    "diff",
    "squeeze",
    "expand_dims",
    "reshape",
    "flatten",
    "transpose",
    "convolve",
    "correlate",
    "interp",
    "gradient",
]
