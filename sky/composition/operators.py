"""
Pipe operators
==============

`Fn` wraps a unary function and gives it two operators:

- `>>` pipes left to right: `value >> f` applies, `f >> g` composes
  in application order (first f, then g).
- `<<` pipes right to left: `f << value` applies, `f << g` composes
  in mathematical order (`f ∘ g`).

Only one side of each operator has to be an `Fn`; plain functions and
values on the other side are picked up by the reflected methods.

Example:
    inc = fn(lambda x: x + 1)
    halve = fn(lambda x: x / 2)

    11 >> inc >> halve           # 6.0
    (halve << halve << inc)(11)  # 3.0
    halve << halve << inc << 11  # 3.0
"""

from __future__ import annotations

import typing
from collections.abc import Callable
from functools import update_wrapper

from .._helpers import ensure_callable


class Fn[A, R]:
    """Unary function with `>>` / `<<` piping."""

    def __init__(self, func: Callable[[A], R], /) -> None:
        ensure_callable(func, "Fn")
        self._func = func
        update_wrapper(self, func)

    @property
    def func(self) -> Callable[[A], R]:
        """The wrapped function."""
        return self._func

    def __call__(self, x: A, /) -> R:
        return self._func(x)

    # Left to right

    def __rshift__(self, other: typing.Any) -> typing.Any:
        # self >> other
        if callable(other):
            return _then(self._func, other)
        return NotImplemented

    def __rrshift__(self, other: typing.Any) -> typing.Any:
        # other >> self
        if callable(other):
            return _then(other, self._func)
        return self._func(other)

    # Right to left

    def __lshift__(self, other: typing.Any) -> typing.Any:
        # self << other
        if callable(other):
            return _then(other, self._func)
        return self._func(other)

    def __rlshift__(self, other: typing.Any) -> typing.Any:
        # other << self
        if callable(other):
            return _then(self._func, other)
        return NotImplemented

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", None) or repr(self._func)
        return f"Fn({name})"


def _then(first: Callable[[typing.Any], typing.Any], second: Callable[[typing.Any], typing.Any]) -> Fn[typing.Any, typing.Any]:
    def piped(x: typing.Any, /) -> typing.Any:
        return second(first(x))

    return Fn(piped)


def fn[A, R](func: Callable[[A], R], /) -> Fn[A, R]:
    """Wrap `func` into Fn. Already wrapped functions are returned as is."""
    if isinstance(func, Fn):
        return func
    return Fn(func)


__all__ = ("Fn", "fn")
