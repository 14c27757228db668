"""
Sky: higher-order functions missing from the standard library.

Small, stateless building blocks for manipulating functions: currying,
partial application, tuple conversion, composition with pipe operators,
lifting raising functions into Result values, predicate-guarded
application and placeholder expressions.

Architecture:
- apply/        - curry, uncurry, partial, tupleize, untuple
- composition/  - compose, flow, pipe, swap, constant, negate, Fn (>> / <<)
- lift/         - noraise, lift_ok, reject_if, apply_if
- placeholders  - placeholder expressions (_, call, fill, op)

Results are kungfu `Ok` / `Error` values.
"""

import logging

# Core types
from ._types import REJECTED, Checked, Predicate, Rejected, Unary

# Helpers
from ._helpers import arity, identity

# Application
from .apply import curry, partial, tupleize, uncurry, untuple

# Composition
from .composition import Fn, compose, constant, flow, fn, negate, pipe, swap

# Lift helpers
from . import lift
from .lift import apply_if, lift_ok, noraise, noraise_async, reject_if

# Placeholder expressions
from . import placeholders
from .placeholders import _, call, fill, op

# Errors
from ._errors import ArityError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Checked",
    "Predicate",
    "Unary",
    "Rejected",
    "REJECTED",
    # Helpers
    "arity",
    "identity",
    # Application
    "curry",
    "uncurry",
    "partial",
    "tupleize",
    "untuple",
    # Composition
    "compose",
    "flow",
    "pipe",
    "swap",
    "constant",
    "negate",
    "Fn",
    "fn",
    # Lift module (namespace import)
    "lift",
    # Lift functions (direct import)
    "noraise",
    "noraise_async",
    "lift_ok",
    "reject_if",
    "apply_if",
    # Placeholders
    "placeholders",
    "_",
    "call",
    "fill",
    "op",
    # Errors
    "ArityError",
)
