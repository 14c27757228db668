"""
Currying
========

Turn an n-ary function into a chain of one-argument functions and back.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from functools import reduce

from .._errors import ArityError
from .._helpers import check_count, ensure_callable, resolve_arity, stamp_arity


def _curry(f: Callable[..., typing.Any], given: tuple[typing.Any, ...], n: int) -> typing.Any:
    if len(given) > n:
        raise ArityError(n, len(given), where="curry")
    if len(given) == n:
        return f(*given)

    def curried(x: typing.Any, /) -> typing.Any:
        return _curry(f, (*given, x), n)

    return curried


def curry(
    f: Callable[..., typing.Any],
    given: Iterable[typing.Any] = (),
    *,
    arity: int | None = None,
) -> typing.Any:
    """
    Curry `f`, starting with an optional sequence of already given arguments.

    Arguments accumulate left to right, so the call order is the parameter
    order. Once `arity` arguments are collected `f` is applied; if `given`
    already holds all of them, that happens right away.

    Example:
        curry(lambda a, b: a - b)(5)(4)             # 1
        curry(lambda a, b, c: a + b + c, [1, 2])(3)  # 6

    NOTE: arity is introspected from `f` unless passed explicitly
          (needed for *args functions and some builtins).
    """
    ensure_callable(f, "curry")
    return _curry(f, tuple(given), resolve_arity(f, arity))


def uncurry(curried: Callable[[typing.Any], typing.Any], arity: int) -> Callable[..., typing.Any]:
    """
    Evaluate a curried chain `arity` levels deep with positional arguments.

    Almost, but not quite, the inverse of curry: the arity can't be
    recovered from a curried chain, so it has to be given.

    Example:
        volume = curry(lambda x, y, z: x * y * z)
        uncurry(volume, 3)(1, 2, 3)  # 6

    NOTE: with arity 0 there is nothing to apply, so the returned
          function gives back `curried` itself without calling it.
    """
    ensure_callable(curried, "uncurry")
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")

    def uncurried(*args: typing.Any) -> typing.Any:
        check_count(arity, args, "uncurry")
        return reduce(lambda func, arg: func(arg), args, curried)

    return stamp_arity(uncurried, arity)


__all__ = ("curry", "uncurry")
