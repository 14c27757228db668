from .basic import compose, constant, flow, negate, pipe, swap
from .operators import Fn, fn

__all__ = (
    # Composition
    "compose",
    "flow",
    "pipe",
    "swap",
    "constant",
    "negate",
    # Operators
    "Fn",
    "fn",
)
