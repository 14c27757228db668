"""
Tuple conversion
================

Move between n-ary functions and unary functions over one aggregate.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from .._errors import ArityError
from .._helpers import check_count, ensure_callable, resolve_arity, stamp_arity


def tupleize[R](
    f: Callable[..., R],
    *,
    arity: int | None = None,
) -> Callable[[Sequence[typing.Any]], R]:
    """
    Given `f` of arity n, return a function of a single n-sized sequence
    that unpacks it into `f`.

    Example:
        tupleize(lambda a, b: a + b)((1, 2))  # 3

    Looks pointless for unary functions, but gains composability with the
    rest of the library (noraise, lift_ok, pipes).
    """
    ensure_callable(f, "tupleize")
    n = resolve_arity(f, arity)

    def tupleized(values: Sequence[typing.Any], /) -> R:
        if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
            raise TypeError(f"tupleize: expected a sequence, got {type(values).__name__}")
        if len(values) != n:
            raise ArityError(n, len(values), where="tupleize")
        return f(*values)

    return tupleized


def untuple[R](f: Callable[[tuple[typing.Any, ...]], R], arity: int) -> Callable[..., R]:
    """
    Given a unary `f` over an n-tuple, return an n-ary function that packs
    its arguments and calls `f`.

    Example:
        flip = lambda pair: (pair[1], pair[0])
        untuple(flip, 2)("a", "b")  # ("b", "a")

    Not the strict inverse of tupleize: whatever `f` checks on the tuple
    is not carried over to the new signature.
    """
    ensure_callable(f, "untuple")
    if arity < 0:
        raise ValueError(f"arity must be non-negative, got {arity}")

    def untupled(*args: typing.Any) -> R:
        check_count(arity, args, "untuple")
        return f(args)

    return stamp_arity(untupled, arity)


__all__ = ("tupleize", "untuple")
