"""
Array-engine exceptions for densearray.

This module defines the error types raised by the array engine. Every error
derives from :class:`ArrayError` and additionally from the closest builtin
exception, so callers can catch either the engine-specific class or the
familiar Python one (``ValueError``, ``IndexError``, ``TypeError``).

Each message contains a stable lowercase keyword identifying the failure
class ("shape", "broadcast", "index", "dtype", "argument") so that host
code can pattern-match on the text alone.

Floating-point edge cases (division by zero, ``log`` of a negative real,
overflow) are never reported through these exceptions; they propagate as
NaN/Inf values.
"""

from typing import Any, Sequence


def _fmt_shape(shape: Sequence[int]) -> str:
    return "(" + ", ".join(str(int(d)) for d in shape) + ")"


class ArrayError(Exception):
    """
    Base class of every error raised by the array engine.

    Attributes
    ----------
    keyword : str
        Lowercase word every message of this class contains. A message
        that does not mention it is prefixed with ``"<keyword> error: "``.
    """

    keyword = "array"

    def __init__(self, message: Any = "", *args: Any) -> None:
        text = str(message)
        if self.keyword not in text.lower():
            text = f"{self.keyword} error: {text}" if text else f"{self.keyword} error"
        super().__init__(text, *args)


class ShapeError(ArrayError, ValueError):
    """
    Raised when an operation receives arrays of incompatible shape.

    Typical causes are a reshape whose element count does not match, rank
    mismatches in joins, non-square inputs to matrix helpers, and ragged
    nested sequences passed to the constructor.
    """

    keyword = "shape"


class BroadcastError(ShapeError):
    """
    Raised when two shapes cannot be aligned under the broadcasting rule.

    Attributes
    ----------
    shape_a : tuple[int, ...]
        Left operand shape.
    shape_b : tuple[int, ...]
        Right operand shape.
    """

    keyword = "broadcast"

    def __init__(self, shape_a: Sequence[int], shape_b: Sequence[int]) -> None:
        """
        Initialize the BroadcastError.

        Parameters
        ----------
        shape_a : Sequence[int]
            Shape of the left operand.
        shape_b : Sequence[int]
            Shape of the right operand.
        """
        super().__init__(
            f"cannot broadcast shapes {_fmt_shape(shape_a)} and {_fmt_shape(shape_b)}"
        )
        self.shape_a = tuple(int(d) for d in shape_a)
        self.shape_b = tuple(int(d) for d in shape_b)


class ArrayIndexError(ArrayError, IndexError):
    """
    Raised when an element index is out of bounds or has the wrong arity.
    """

    keyword = "index"


class DtypeError(ArrayError, TypeError):
    """
    Raised when an operation is undefined for the dtype of its operands.

    Examples are ordering comparisons, rounding or sorting applied to
    complex arrays, and non-numeric leaves in nested input.
    """

    keyword = "dtype"

    @classmethod
    def unsupported(cls, op: Any, dtype: Any) -> "DtypeError":
        """
        Build the error reported when no control path exists for a dtype.

        Parameters
        ----------
        op : Any
            Operation name, or the callable whose ``__name__`` names it.
        dtype : Any
            The dtype tag the operation was requested for.

        Returns
        -------
        DtypeError
            Error instance ready to be raised.
        """
        name = getattr(op, "__name__", op)
        label = getattr(dtype, "value", dtype)
        return cls(f"operation '{name}' is not supported for dtype '{label}'")


class ArgumentError(ArrayError, ValueError):
    """
    Raised for invalid scalar arguments.

    Covers invalid axes, out-of-range percentile/quantile values, unknown
    mode strings (pad, convolve, searchsorted side) and reductions that have
    no defined value for empty input.
    """

    keyword = "argument"
