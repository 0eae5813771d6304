"""
densearray: dense n-dimensional real and complex arrays on NumPy buffers.

The top-level namespace exposes the 0-based core: the :class:`NDArray`
type, its :class:`DType` tag, the error hierarchy and the CPU operations
as free functions. The 1-based host contract lives in
:mod:`densearray.host`.
"""

import logging

from .infrastructure.array import NDArray, Storage, broadcast_shapes
from .domain import (
    INDArray,
    DType,
    promote,
    ArrayError,
    ShapeError,
    BroadcastError,
    ArrayIndexError,
    DtypeError,
    ArgumentError,
)
from .infrastructure.ops.creation_cpu import (
    array,
    asarray,
    complex_array,
    from_polar,
    zeros,
    empty,
    ones,
    full,
    zeros_like,
    ones_like,
    full_like,
    arange,
    linspace,
    eye,
    identity,
    from_numpy,
)
from .infrastructure.ops.elementwise_cpu import (
    add,
    subtract,
    multiply,
    divide,
    power,
    mod,
    fmod,
    arctan2,
    equal,
    not_equal,
    greater,
    less,
    greater_equal,
    less_equal,
    clip,
    where,
    csqrt,
    clog,
    allclose,
    array_equal,
    abs,
    negative,
    conj,
    angle,
    arg,
    sqrt,
    exp,
    log,
    log2,
    log10,
    log1p,
    expm1,
    sin,
    cos,
    tan,
    sinh,
    cosh,
    tanh,
    arcsin,
    arccos,
    arctan,
    arcsinh,
    arccosh,
    arctanh,
    floor,
    ceil,
    round,
    sign,
    isnan,
    isinf,
    isfinite,
)
from .infrastructure.ops.reduce_cpu_ext import (
    sum,
    prod,
    mean,
    var,
    std,
    min,
    max,
    argmin,
    argmax,
    ptp,
    all,
    any,
    cumsum,
    cumprod,
    median,
    percentile,
    quantile,
    histogram,
    bincount,
)
from .infrastructure.ops.linalg_cpu import dot, matmul, outer, diagonal, trace, diag
from .infrastructure.ops.sort_search_cpu import (
    sort,
    argsort,
    searchsorted,
    unique,
    nonzero,
    argwhere,
)
from .infrastructure.ops.manipulation_cpu import (
    concatenate,
    stack,
    vstack,
    hstack,
    split,
    tile,
    repeat,
    flip,
    roll,
    pad,
    insert,
    delete,
    diff,
)
from .infrastructure.ops.signal_cpu import correlate, convolve, gradient, interp
from . import host, random

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"
