"""
Random array factories backed by a module-level ``numpy.random.Generator``.

>>> from densearray import random
>>> random.seed(7)
>>> random.rand(2, 3).shape
(2, 3)
"""

from .infrastructure.ops.creation_cpu import rand, randn, seed

__all__ = [
    rand.__name__,
    randn.__name__,
    seed.__name__,
]
