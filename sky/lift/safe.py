"""
Safety combinators
==================

Bridge between exception-based code and Result-based code, and lifting of
plain functions into `Ok` values.
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Awaitable, Callable
from functools import wraps

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import ensure_callable

logger = logging.getLogger(__name__)

type Catch = type[BaseException] | tuple[type[BaseException], ...]


def noraise[T, E, **P](
    f: Callable[P, T],
    *,
    catch: Catch = (Exception,),
    on_error: Callable[[BaseException], E] | None = None,
) -> Callable[P, Result[T, typing.Any]]:
    """
    Wrap a raising function so it returns a Result instead.

    - `Ok(value)` when no exception is raised
    - `Error(exc)` when an exception listed in `catch` is raised
      (`Error(on_error(exc))` if `on_error` is given)

    Exceptions outside `catch` propagate untouched.

    Example:
        safe_div = noraise(lambda pair: pair[0] / pair[1])
        safe_div((1, 0))  # Error(ZeroDivisionError('division by zero'))
        safe_div((1, 2))  # Ok(0.5)

    NOTE: Catches Exception by default, so KeyboardInterrupt and
          SystemExit still stop the program.
    """
    ensure_callable(f, "noraise")

    @wraps(f)
    def safe(*args: P.args, **kwargs: P.kwargs) -> Result[T, typing.Any]:
        try:
            return Ok(f(*args, **kwargs))
        except catch as exc:
            logger.debug("noraise: %r raised %r", f, exc)
            return Error(on_error(exc) if on_error is not None else exc)

    return safe


def noraise_async[T, E, **P](
    f: Callable[P, Awaitable[T]],
    *,
    catch: Catch = (Exception,),
    on_error: Callable[[BaseException], E] | None = None,
) -> Callable[P, LazyCoroResult[T, typing.Any]]:
    """
    Async version of noraise.

    Each call returns a LazyCoroResult; the coroutine runs only when it
    is awaited.

    Example:
        safe_fetch = noraise_async(client.get_user)
        result = await safe_fetch(42)  # Ok(User) or Error(APIException)
    """
    ensure_callable(f, "noraise_async")

    @wraps(f)
    def safe(*args: P.args, **kwargs: P.kwargs) -> LazyCoroResult[T, typing.Any]:
        async def run() -> Result[T, typing.Any]:
            try:
                return Ok(await f(*args, **kwargs))
            except catch as exc:
                logger.debug("noraise_async: %r raised %r", f, exc)
                return Error(on_error(exc) if on_error is not None else exc)

        return LazyCoroResult(run)

    return safe


def _flatten(value: typing.Any) -> Ok[typing.Any]:
    match value:
        case Ok(inner):
            return _flatten(inner)
        case _:
            return Ok(value)


def lift_ok[T, R](f: Callable[[T], R]) -> Callable[[typing.Any], typing.Any]:
    """
    Lift a unary function over `Ok` values.

    The returned function applies `f` to the payload of an `Ok` and returns
    the result wrapped in exactly one `Ok`, however many `Ok` layers `f`
    returned. Anything else (an `Error`, REJECTED, a plain value) is
    returned without change.

    Example:
        inc = lift_ok(lambda n: n + 1)
        inc(Ok(1))               # Ok(2)
        inc(inc(Ok(1)))          # Ok(3)
        inc(Error("bad input"))  # Error('bad input')
    """
    ensure_callable(f, "lift_ok")

    def lifted(value: typing.Any, /) -> typing.Any:
        match value:
            case Ok(inner):
                return _flatten(f(inner))
            case _:
                return value

    return lifted


__all__ = ("noraise", "noraise_async", "lift_ok")
