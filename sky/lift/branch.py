"""
Branching combinators
=====================

Predicate-guarded application, so callers don't need an `if` around a call.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Ok

from .._helpers import ensure_callable
from .._types import REJECTED, Checked, Predicate


def reject_if[T, R](f: Callable[[T], R], predicate: Predicate[T]) -> Callable[[T], Checked[R]]:
    """
    Apply `f` only to values that satisfy `predicate`.

    Returns `Ok(f(x))` when `predicate(x)` is truthy, REJECTED otherwise.

    Example:
        dec = reject_if(lambda x: x - 1, lambda x: x > 0)
        dec(1)  # Ok(0)
        dec(0)  # REJECTED
    """
    ensure_callable(f, "reject_if")
    ensure_callable(predicate, "reject_if")

    def checked(x: T, /) -> Checked[R]:
        if predicate(x):
            return Ok(f(x))
        return REJECTED

    return checked


def apply_if[T, R](f: Callable[[T], R], predicate: Predicate[T]) -> Callable[[T], R | T]:
    """
    Apply `f` only to values that satisfy `predicate`; return others as is.

    Unlike reject_if, nothing is wrapped.

    Example:
        safe_tail = apply_if(lambda xs: xs[1:], lambda xs: len(xs) > 0)
        safe_tail([1, 2])  # [2]
        safe_tail([])      # []
    """
    ensure_callable(f, "apply_if")
    ensure_callable(predicate, "apply_if")

    def applied(x: T, /) -> R | T:
        if predicate(x):
            return f(x)
        return x

    return applied


__all__ = ("reject_if", "apply_if")
