"""
Flat double buffers and their shared-ownership bookkeeping.

This module defines `Storage`, the reference-counted owner of an array's
element buffers. A real array is backed by one flat float64 buffer; a complex
array by two parallel float64 buffers (real and imaginary parts) of identical
length that always travel together.

Core Concepts
-------------
- **Shared storage**:
    View operations (reshape, flatten, squeeze, expand_dims) build a new
    array over the *same* `Storage` instance instead of copying elements.
    Each array attached to a storage holds one reference.

- **Copy-on-write**:
    An in-place element write first checks `refcount`. When more than one
    array is attached, the writer clones the storage and re-attaches to the
    private copy, so aliasing is never observable through the public API.

- **Finalization**:
    Arrays detach through a `weakref.finalize` callback, so the count drops
    when an array is garbage-collected without any `__del__` logic.

Thread Safety
-------------
Reference count updates are protected by an internal lock. Element writes
are not; concurrent writers must synchronize externally.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import threading

import numpy as np


@dataclass(eq=False)
class Storage:
    """
    Reference-counted owner of one (real) or two (complex) flat buffers.

    Attributes
    ----------
    real : np.ndarray
        Contiguous 1-D float64 buffer of real parts.
    imag : Optional[np.ndarray]
        Contiguous 1-D float64 buffer of imaginary parts, or ``None`` for a
        real array. When present it has the same length as `real`.

    Notes
    -----
    - The count starts at zero; every array attaching itself calls
      :meth:`incref` and releases with :meth:`decref`.
    - Buffers are never resized. A shape change is expressed by a new array
      reading the same buffers.
    """

    real: np.ndarray
    imag: Optional[np.ndarray] = None

    _refcnt: int = 0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def __post_init__(self) -> None:
        self.real = np.ascontiguousarray(self.real, dtype=np.float64).reshape(-1)
        if self.imag is not None:
            self.imag = np.ascontiguousarray(self.imag, dtype=np.float64).reshape(-1)
            if self.imag.shape != self.real.shape:
                raise ValueError(
                    "real and imaginary buffers must have the same length, "
                    f"got {self.real.size} and {self.imag.size}"
                )

    @classmethod
    def allocate(cls, size: int, is_complex: bool = False) -> "Storage":
        """
        Allocate zero-filled buffers for `size` elements.
        """
        real = np.zeros(int(size), dtype=np.float64)
        imag = np.zeros(int(size), dtype=np.float64) if is_complex else None
        return cls(real, imag)

    @classmethod
    def from_values(cls, values: np.ndarray) -> "Storage":
        """
        Copy a NumPy array (any shape) into freshly owned flat buffers.

        Complex input produces a complex storage; everything else is
        converted to float64.
        """
        arr = np.asarray(values)
        if np.iscomplexobj(arr):
            flat = np.array(arr, dtype=np.complex128, order="C", copy=True).reshape(-1)
            return cls(flat.real.copy(), flat.imag.copy())
        return cls(np.array(arr, dtype=np.float64, order="C", copy=True).reshape(-1))

    @property
    def is_complex(self) -> bool:
        return self.imag is not None

    @property
    def length(self) -> int:
        return int(self.real.shape[0])

    @property
    def refcount(self) -> int:
        """Number of arrays currently attached to this storage."""
        with self._lock:
            return self._refcnt

    def incref(self) -> None:
        """
        Increment the storage reference count.

        Called once by every array that attaches to this storage.
        """
        with self._lock:
            self._refcnt += 1

    def decref(self) -> None:
        """
        Decrement the storage reference count.

        The buffers themselves are released by ordinary garbage collection
        once no array refers to this object.
        """
        with self._lock:
            if self._refcnt > 0:
                self._refcnt -= 1

    def clone(self) -> "Storage":
        """
        Return a storage with independently owned copies of the buffers.

        The clone starts detached (reference count zero).
        """
        imag = None if self.imag is None else self.imag.copy()
        return Storage(self.real.copy(), imag)

    def promoted(self) -> "Storage":
        """
        Return a complex clone of this storage.

        A real storage gains a zero imaginary buffer; a complex storage is
        simply cloned.
        """
        if self.imag is not None:
            return self.clone()
        return Storage(self.real.copy(), np.zeros_like(self.real))

    def values(self) -> np.ndarray:
        """
        Return the flat elements as one NumPy array.

        For a real storage this is a read-only view of `real`; for a complex
        storage a new complex128 array is assembled from both buffers.
        """
        if self.imag is None:
            view = self.real.view()
            view.flags.writeable = False
            return view
        out = np.empty(self.length, dtype=np.complex128)
        out.real = self.real
        out.imag = self.imag
        return out
