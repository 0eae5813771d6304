"""
Real-only modulo and two-argument arctangent.

Only REAL64 control paths are registered. A complex receiver falls through
to the manager's trap and raises :class:`DtypeError`; a real receiver with a
complex operand is rejected by the broadcasting kernel itself.
"""

from typing import Any

import numpy as np

from ..._array_builder import array_control_path_manager

from .....domain._dtype import DType
from .....domain._array import INDArray

from ._base import ArrayMixinArithmetic as AMA


@array_control_path_manager(AMA, AMA.mod, DType.REAL64)
def mod(self: INDArray, other: Any) -> "INDArray":
    """
    CPU control path for floored modulo on real arrays.

    The result takes the sign of the divisor (``mod(-7, 3) == 2``).
    """
    return self._binary(other, np.mod, "mod", complex_ok=False)


@array_control_path_manager(AMA, AMA.fmod, DType.REAL64)
def fmod(self: INDArray, other: Any) -> "INDArray":
    """
    CPU control path for truncated modulo on real arrays.

    The result takes the sign of the dividend (``fmod(-7, 3) == -1``).
    """
    return self._binary(other, np.fmod, "fmod", complex_ok=False)


@array_control_path_manager(AMA, AMA.arctan2, DType.REAL64)
def arctan2(self: INDArray, other: Any) -> "INDArray":
    return self._binary(other, np.arctan2, "arctan2", complex_ok=False)
