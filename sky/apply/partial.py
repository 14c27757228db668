"""Partial application over argument lists."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable

from .._errors import ArityError
from .._helpers import ensure_callable, resolve_arity


def _partial(f: Callable[..., typing.Any], args: tuple[typing.Any, ...], n: int) -> typing.Any:
    if len(args) > n:
        raise ArityError(n, len(args), where="partial")
    if len(args) == n:
        return f(*args)

    def partially_applied(more: list[typing.Any] | tuple[typing.Any, ...], /) -> typing.Any:
        if not isinstance(more, (list, tuple)):
            raise TypeError(f"partial: expected a list of arguments, got {type(more).__name__}")
        return _partial(f, (*args, *more), n)

    return partially_applied


def partial(
    f: Callable[..., typing.Any],
    given: Iterable[typing.Any] = (),
    *,
    arity: int | None = None,
) -> typing.Any:
    """
    Partially apply `f`. Cousin of curry.

    The returned function takes a *list* with more arguments instead of just
    the next one, which makes any function unary over argument lists.

    Example:
        add3 = lambda a, b, c: a + b + c
        partial(add3)([1, 2, 3])    # 6
        partial(add3, [1, 2])([3])  # 6
        partial(add3)([1])([2, 3])  # 6
    """
    ensure_callable(f, "partial")
    return _partial(f, tuple(given), resolve_arity(f, arity))


__all__ = ("partial",)
