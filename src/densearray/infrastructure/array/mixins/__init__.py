from .arithmetic import ArrayMixinArithmetic
from .unary import ArrayMixinUnary
from .comparison import ArrayMixinComparison
from .reduction import ArrayMixinReduction

__all__ = [
    ArrayMixinArithmetic.__name__,
    ArrayMixinUnary.__name__,
    ArrayMixinComparison.__name__,
    ArrayMixinReduction.__name__,
]
