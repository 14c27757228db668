"""
Core type definitions for sky.

Type aliases and the untagged failure marker used across the library.
"""

from __future__ import annotations

import typing
from collections.abc import Callable

from kungfu import Ok

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Unary = single-argument function, the unit of composition
type Unary[T, R] = Callable[[T], R]

# ============================================================================
# Untagged failure marker
# ============================================================================


@typing.final
class Rejected:
    """
    Failure without a payload.

    There is exactly one instance, `REJECTED`. It is falsy, so
    `if result:` reads naturally after `reject_if`.
    """

    __slots__ = ()

    _instance: typing.ClassVar[Rejected | None] = None

    def __new__(cls) -> Rejected:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "REJECTED"

    def __reduce__(self) -> str:
        return "REJECTED"


REJECTED: typing.Final = Rejected()

# Outcome of reject_if
type Checked[T] = Ok[T] | Rejected

__all__ = (
    # Type aliases
    "Predicate",
    "Unary",
    "Checked",
    # Marker
    "Rejected",
    "REJECTED",
)
