"""
Composition combinators
=======================

Build new unary functions out of existing ones.
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import reduce

from .._helpers import ensure_callable, identity
from .._types import Predicate, Unary


def compose[A, B, C](f: Unary[B, C], g: Unary[A, B]) -> Unary[A, C]:
    """
    Classic right-to-left composition `f ∘ g`.

    Example:
        shout = compose(str.upper, str.strip)
        shout("  hi  ")  # "HI"
    """
    ensure_callable(f, "compose")
    ensure_callable(g, "compose")

    def composed(x: A, /) -> C:
        return f(g(x))

    return composed


def flow(*fs: Unary[typing.Any, typing.Any]) -> Unary[typing.Any, typing.Any]:
    """
    Left-to-right composition of any number of unary functions.

    `flow(f, g, h)(x) == h(g(f(x)))`; `flow()` is identity.
    """
    for f in fs:
        ensure_callable(f, "flow")
    return reduce(lambda acc, f: compose(f, acc), fs, identity)


def pipe(value: typing.Any, /, *fs: Unary[typing.Any, typing.Any]) -> typing.Any:
    """
    Feed a value through unary functions, left to right.

    Example:
        pipe("Hello", str.lower, len)  # 5
    """
    return flow(*fs)(value)


def swap[A, B, R](f: Callable[[A, B], R]) -> Callable[[B, A], R]:
    """
    Swap the order in which a two-argument function receives its arguments.

    Example:
        swap(divmod)(5, 7)           # (1, 2)
        swap(lambda a, b: a - b)(2, 1)  # -1
    """
    ensure_callable(f, "swap")

    def swapped(a: B, b: A, /) -> R:
        return f(b, a)

    return swapped


def constant[T](value: T) -> Unary[typing.Any, T]:
    """Function of one argument that ignores it and returns `value`."""

    def constantly(_: typing.Any, /) -> T:
        return value

    return constantly


def negate[T](predicate: Predicate[T]) -> Predicate[T]:
    """
    Boolean complement of a predicate: `negate(p)(x) == not p(x)`.

    Example:
        non_negative = negate(lambda x: x < 0)
        non_negative(1)  # True
    """
    ensure_callable(predicate, "negate")

    def negated(x: T, /) -> bool:
        return not predicate(x)

    return negated


__all__ = (
    "compose",
    "flow",
    "pipe",
    "swap",
    "constant",
    "negate",
)
