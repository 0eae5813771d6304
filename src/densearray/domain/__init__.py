"""
Backend-agnostic contracts of the array engine.
"""

from ._array import INDArray
from ._dtype import DType, promote, promote_all, parse_dtype
from ._errors import (
    ArrayError,
    ShapeError,
    BroadcastError,
    ArrayIndexError,
    DtypeError,
    ArgumentError,
)

__all__ = [
    INDArray.__name__,
    DType.__name__,
    promote.__name__,
    promote_all.__name__,
    parse_dtype.__name__,
    ArrayError.__name__,
    ShapeError.__name__,
    BroadcastError.__name__,
    ArrayIndexError.__name__,
    DtypeError.__name__,
    ArgumentError.__name__,
]
