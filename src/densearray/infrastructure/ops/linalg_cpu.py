"""
Small dense linear-algebra kernel.

Provides dot/matmul, outer products and diagonal helpers. Inputs may be real
or complex; the result dtype follows the promotion table through NumPy.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from ...domain._errors import ShapeError
from ..array._ndarray import NDArray


def _matrix(a: Any, op: str) -> NDArray:
    arr = NDArray.coerce(a)
    if arr.ndim != 2:
        raise ShapeError(f"{op} requires a 2-D array, got shape {arr.shape}")
    return arr


def dot(a: Any, b: Any) -> Any:
    """
    Inner/matrix product.

    Cases
    -----
    - 1-D · 1-D: scalar inner product; lengths must match.
    - 2-D · 2-D: matrix product; inner extents must match.
    - 2-D · 1-D: matrix-vector product, rank-1 result.
    - 1-D · 2-D: vector-matrix product, rank-1 result.
    - Rank-0 operands scale the other operand.

    Raises
    ------
    ShapeError
        If the contracted extents differ or a rank above 2 is given.
    """
    x, y = NDArray.coerce(a), NDArray.coerce(b)
    if x.ndim == 0 or y.ndim == 0:
        return x.mul(y)
    if x.ndim > 2 or y.ndim > 2:
        raise ShapeError(
            f"dot supports ranks 1 and 2, got shapes {x.shape} and {y.shape}"
        )
    inner_x = x.shape[-1]
    inner_y = y.shape[0]
    if inner_x != inner_y:
        raise ShapeError(
            f"shapes {x.shape} and {y.shape} are not aligned: "
            f"{inner_x} (dim {x.ndim - 1}) != {inner_y} (dim 0)"
        )
    with np.errstate(all="ignore"):
        out = np.dot(x._values(), y._values())
    if x.ndim == 1 and y.ndim == 1:
        return np.asarray(out).item()
    return NDArray.from_numpy(out)


def matmul(a: Any, b: Any) -> NDArray:
    """
    Matrix product of two 2-D arrays (the ``@`` operator).

    Raises
    ------
    ShapeError
        If either operand is not 2-D or the inner extents differ.
    """
    return dot(_matrix(a, "matmul"), _matrix(b, "matmul"))


def outer(a: Any, b: Any) -> NDArray:
    """
    Outer product: ``out[i, j] = a[i] * b[j]`` over the flattened inputs.
    """
    x, y = NDArray.coerce(a), NDArray.coerce(b)
    with np.errstate(all="ignore"):
        out = np.outer(x._values().reshape(-1), y._values().reshape(-1))
    return NDArray.from_numpy(out)


def diagonal(m: Any, offset: int = 0) -> NDArray:
    """
    Extract diagonal `offset` of a matrix (positive is above the main
    diagonal). An offset past the edge gives an empty array.
    """
    arr = _matrix(m, "diagonal")
    return NDArray.from_numpy(np.diagonal(arr._values(), offset=int(offset)))


def trace(m: Any, offset: int = 0) -> Any:
    """Sum of diagonal `offset` of a matrix; ``trace(eye(n)) == n``."""
    arr = _matrix(m, "trace")
    return np.asarray(np.trace(arr._values(), offset=int(offset))).item()


def diag(v: Any, k: int = 0) -> NDArray:
    """
    Construct or extract a diagonal.

    A 1-D input builds a square matrix with `v` on diagonal `k` and zeros
    elsewhere; a 2-D input returns its diagonal `k`.

    Raises
    ------
    ShapeError
        For inputs of any other rank.
    """
    arr = NDArray.coerce(v)
    if arr.ndim not in (1, 2):
        raise ShapeError(f"diag requires a 1-D or 2-D array, got shape {arr.shape}")
    return NDArray.from_numpy(np.diag(arr._values(), k=int(k)))
