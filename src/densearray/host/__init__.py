"""
InteropBridge: the 1-based host contract over the 0-based core.

``densearray.host`` is the surface scripting hosts talk to. Axes, element
indices and returned positions start at 1, arrays come back as
:class:`HostArray`, and equality compares values within
``EQUALITY_TOLERANCE``.

Examples
--------
>>> from densearray import host
>>> a = host.array([[1, 2, 3], [4, 5, 6]])
>>> a.get(1, 3)
3.0
>>> host.sum(a, axis=1).tolist()
[5.0, 7.0, 9.0]
>>> host.argmax([3, 9, 4])
2
"""

from ._host_array import HostArray
from ._functions import *  # noqa: F401,F403
from ._functions import __all__ as _function_names

__all__ = [HostArray.__name__, *_function_names]
