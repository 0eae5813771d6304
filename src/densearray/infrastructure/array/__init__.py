"""
Concrete array implementation: storage, shape engine and NDArray.
"""

from ._storage import Storage
from ._shape_engine import (
    broadcast_shapes,
    broadcast_shapes_n,
    canonical_strides,
    normalize_axis,
    ravel_index,
    shape_size,
    unravel_index,
    validate_shape,
)
from ._ndarray import NDArray

__all__ = [
    Storage.__name__,
    NDArray.__name__,
    broadcast_shapes.__name__,
    broadcast_shapes_n.__name__,
    canonical_strides.__name__,
    normalize_axis.__name__,
    ravel_index.__name__,
    shape_size.__name__,
    unravel_index.__name__,
    validate_shape.__name__,
]
