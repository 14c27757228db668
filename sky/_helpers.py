"""Internal helpers for sky.

Arity introspection and signature stamping shared by the combinator modules.
`arity` and `identity` are re-exported as part of the public API."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from ._errors import ArityError

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


# Identity function
def identity[T](x: T, /) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def ensure_callable(f: object, where: str) -> None:
    """Raise TypeError unless `f` is callable."""
    if not callable(f):
        raise TypeError(f"{where}: expected a callable, got {type(f).__name__}")


def arity(f: Callable[..., typing.Any], /) -> int:
    """
    Number of required positional parameters of `f`.

    Parameters with defaults and keyword-only parameters don't count.
    Functions taking `*args`, or whose signature can't be read (some
    builtins), have no fixed arity and raise TypeError: pass `arity=`
    explicitly to the combinator instead.

    Example:
        arity(lambda a, b, c: None)  # 3
        arity(operator.add)          # 2
    """
    ensure_callable(f, "arity")
    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"arity: cannot inspect {f!r}, pass arity= explicitly") from exc

    count = 0
    for param in signature.parameters.values():
        if param.kind is inspect.Parameter.VAR_POSITIONAL:
            raise TypeError(f"arity: {f!r} takes *args, pass arity= explicitly")
        if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty:
            count += 1
    return count


def resolve_arity(f: Callable[..., typing.Any], explicit: int | None) -> int:
    """Explicit arity wins over introspection."""
    if explicit is None:
        return arity(f)
    if explicit < 0:
        raise ValueError(f"arity must be non-negative, got {explicit}")
    return explicit


def stamp_arity[F: Callable[..., typing.Any]](f: F, n: int) -> F:
    """
    Give a `*args` wrapper the signature of an n-ary positional function.

    Keeps results of uncurry/untuple introspectable, so they can be fed
    back into curry, partial or tupleize.
    """
    params = [
        inspect.Parameter(f"arg{i}", inspect.Parameter.POSITIONAL_ONLY)
        for i in range(n)
    ]
    f.__signature__ = inspect.Signature(params)  # type: ignore[attr-defined]
    return f


def check_count(expected: int, args: tuple[typing.Any, ...], where: str) -> None:
    if len(args) != expected:
        raise ArityError(expected, len(args), where=where)


__all__ = (
    "identity",
    "arity",
    "ensure_callable",
    "resolve_arity",
    "stamp_arity",
    "check_count",
)
