from .curry import curry, uncurry
from .partial import partial
from .tuples import tupleize, untuple

__all__ = (
    # Curry
    "curry",
    "uncurry",
    # Partial
    "partial",
    # Tuples
    "tupleize",
    "untuple",
)
