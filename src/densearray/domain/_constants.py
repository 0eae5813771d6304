"""
Numeric defaults shared across the engine.
"""

DEFAULT_LINSPACE_NUM = 50
"""Number of samples produced by ``linspace`` when `num` is omitted."""

DEFAULT_HISTOGRAM_BINS = 10

EQUALITY_TOLERANCE = 1e-10
"""Absolute per-element tolerance used by host-side array equality."""

REPR_MAX_ELEMENTS = 20
"""Arrays larger than this print only their shape in ``repr``."""

PAD_MODES = ("constant", "edge", "wrap", "reflect")
CONVOLVE_MODES = ("full", "same", "valid")
SEARCH_SIDES = ("left", "right")
