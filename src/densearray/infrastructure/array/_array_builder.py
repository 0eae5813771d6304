"""
Array control-path manager for dtype-specific dispatch.

This module defines the shared control-path manager used to register and
resolve dtype-specific implementations of NDArray methods.

The manager specializes the generic `create_path_builder` utility with the
state attribute ``"dtype"``, so a call such as ``NDArray.sqrt()`` dispatches
on ``self.dtype``:

    @array_control_path_manager(ArrayMixinUnary, ArrayMixinUnary.sqrt, DType.REAL64)
    def sqrt_real(self): ...

    @array_control_path_manager(ArrayMixinUnary, ArrayMixinUnary.sqrt, DType.COMPLEX128)
    def sqrt_complex(self): ...

A dtype without a registered path raises
:meth:`DtypeError.unsupported <densearray.domain._errors.DtypeError.unsupported>`.
"""

from ...domain.utils._control_path import create_path_builder
from ...domain._errors import DtypeError

# Control-path manager that dispatches NDArray methods based on `self.dtype`
array_control_path_manager = create_path_builder(
    "dtype", trap_exception=DtypeError.unsupported
)
