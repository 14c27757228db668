"""
Placeholder expressions.

Build an expression with holes in it, then get back a curried function
that fills the holes one argument at a time, left to right in order of
appearance, and evaluates the expression once the last hole is filled.

Architecture:
- Expr - node of the expression tree; Python operators on an Expr build
  new nodes instead of evaluating
- `_` - the placeholder (a hole)
- call() - deferred function call node
- fill() - turns a template into a curried function
- op() - partial application of an operator by its symbol

Example:
    from sky.placeholders import _, call, fill, op

    fill([_, 1, _, 3])(0)(2)                      # [0, 1, 2, 3]
    fill(_ / _)(10)(2)                            # 5.0
    fill(1 / _)(2)                                # 0.5
    fill(call(reduce, operator.add, [1, 2, 3], _))(10)  # 16
    op("-", _, 1)(10)                             # 9
"""

from __future__ import annotations

import operator
import typing
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from ._errors import ArityError
from .apply.curry import curry


# ============================================================================
# Expression nodes
# ============================================================================


def _binary(func: Callable[[typing.Any, typing.Any], typing.Any]) -> Callable[..., Expr]:
    def method(self: Expr, other: typing.Any) -> Expr:
        return Call(Const(func), (self, template(other)), ())

    return method


def _reflected(func: Callable[[typing.Any, typing.Any], typing.Any]) -> Callable[..., Expr]:
    def method(self: Expr, other: typing.Any) -> Expr:
        return Call(Const(func), (template(other), self), ())

    return method


def _unary(func: Callable[[typing.Any], typing.Any]) -> Callable[..., Expr]:
    def method(self: Expr) -> Expr:
        return Call(Const(func), (self,), ())

    return method


def _compare(func: Callable[[typing.Any, typing.Any], typing.Any]) -> Callable[..., Expr]:
    # `_ > [_]` and a reflected `[_] < _` both arrive here as self=_, other=[_];
    # holes in a plain container on the other side can't be ordered safely.
    def method(self: Expr, other: typing.Any) -> Expr:
        operand = template(other)
        if not isinstance(other, Expr) and operand.holes() > 0:
            raise TypeError(
                "ambiguous placeholder order in comparison with a container holding "
                "placeholders; wrap it with template(...) or use op(...) / "
                "call(operator.<cmp>, ...)"
            )
        return Call(Const(func), (self, operand), ())

    return method


class Expr:
    """
    Node of a placeholder expression.

    Subclasses implement `holes` (how many placeholders the subtree holds)
    and `evaluate` (consume exactly that many values from the iterator, in
    the same left-to-right order, and compute the value).
    """

    __slots__ = ()

    def holes(self) -> int:
        raise NotImplementedError

    def evaluate(self, values: Iterator[typing.Any]) -> typing.Any:
        raise NotImplementedError

    # Arithmetic
    __add__ = _binary(operator.add)
    __radd__ = _reflected(operator.add)
    __sub__ = _binary(operator.sub)
    __rsub__ = _reflected(operator.sub)
    __mul__ = _binary(operator.mul)
    __rmul__ = _reflected(operator.mul)
    __matmul__ = _binary(operator.matmul)
    __rmatmul__ = _reflected(operator.matmul)
    __truediv__ = _binary(operator.truediv)
    __rtruediv__ = _reflected(operator.truediv)
    __floordiv__ = _binary(operator.floordiv)
    __rfloordiv__ = _reflected(operator.floordiv)
    __mod__ = _binary(operator.mod)
    __rmod__ = _reflected(operator.mod)
    __pow__ = _binary(operator.pow)
    __rpow__ = _reflected(operator.pow)

    # Bitwise
    __and__ = _binary(operator.and_)
    __rand__ = _reflected(operator.and_)
    __or__ = _binary(operator.or_)
    __ror__ = _reflected(operator.or_)
    __xor__ = _binary(operator.xor)
    __rxor__ = _reflected(operator.xor)
    __lshift__ = _binary(operator.lshift)
    __rlshift__ = _reflected(operator.lshift)
    __rshift__ = _binary(operator.rshift)
    __rrshift__ = _reflected(operator.rshift)

    # Comparison (Python reflects lt/gt, le/ge onto the placeholder side)
    __lt__ = _compare(operator.lt)
    __le__ = _compare(operator.le)
    __gt__ = _compare(operator.gt)
    __ge__ = _compare(operator.ge)
    __eq__ = _compare(operator.eq)  # type: ignore[assignment]
    __ne__ = _compare(operator.ne)  # type: ignore[assignment]
    __hash__ = object.__hash__

    # Unary
    __neg__ = _unary(operator.neg)
    __pos__ = _unary(operator.pos)
    __invert__ = _unary(operator.invert)
    __abs__ = _unary(operator.abs)

    def __getitem__(self, key: typing.Any) -> Expr:
        return Call(Const(operator.getitem), (self, template(key)), ())

    def __iter__(self) -> typing.NoReturn:
        raise TypeError("placeholder expressions are not iterable")

    def __bool__(self) -> bool:
        raise TypeError(
            "placeholder expressions have no truth value; "
            "use op('and', ...) style calls or fill() a call() instead"
        )


@typing.final
class Placeholder(Expr):
    """A hole. Use the module-level `_` instance."""

    __slots__ = ()

    def holes(self) -> int:
        return 1

    def evaluate(self, values: Iterator[typing.Any]) -> typing.Any:
        return next(values)

    def __repr__(self) -> str:
        return "_"


@dataclass(frozen=True, slots=True, eq=False)
class Const(Expr):
    value: typing.Any

    def holes(self) -> int:
        return 0

    def evaluate(self, values: Iterator[typing.Any]) -> typing.Any:
        return self.value


@dataclass(frozen=True, slots=True, eq=False)
class SequenceLiteral(Expr):
    """List or tuple literal."""

    kind: type[list[typing.Any]] | type[tuple[typing.Any, ...]]
    items: tuple[Expr, ...]

    def holes(self) -> int:
        return sum(item.holes() for item in self.items)

    def evaluate(self, values: Iterator[typing.Any]) -> typing.Any:
        return self.kind(item.evaluate(values) for item in self.items)


@dataclass(frozen=True, slots=True, eq=False)
class MappingLiteral(Expr):
    """Dict literal. Keys are constants, values may hold placeholders."""

    entries: tuple[tuple[typing.Any, Expr], ...]

    def holes(self) -> int:
        return sum(value.holes() for key, value in self.entries)

    def evaluate(self, values: Iterator[typing.Any]) -> typing.Any:
        return {key: value.evaluate(values) for key, value in self.entries}


@dataclass(frozen=True, slots=True, eq=False)
class Call(Expr):
    """Deferred call. Evaluated function first, then args, then kwargs."""

    func: Expr
    args: tuple[Expr, ...]
    kwargs: tuple[tuple[str, Expr], ...]

    def holes(self) -> int:
        return (
            self.func.holes()
            + sum(arg.holes() for arg in self.args)
            + sum(value.holes() for name, value in self.kwargs)
        )

    def evaluate(self, values: Iterator[typing.Any]) -> typing.Any:
        func = self.func.evaluate(values)
        args = [arg.evaluate(values) for arg in self.args]
        kwargs = {name: value.evaluate(values) for name, value in self.kwargs}
        return func(*args, **kwargs)


_ = Placeholder()


# ============================================================================
# Builders
# ============================================================================


def template(obj: typing.Any) -> Expr:
    """
    Turn a Python value into an expression tree.

    Lists, tuples and dicts are walked recursively; other values become
    constants. Subclasses (namedtuples, OrderedDict, ...) stay constants
    so their type survives evaluation.
    """
    if isinstance(obj, Expr):
        return obj
    if type(obj) is list or type(obj) is tuple:
        return SequenceLiteral(type(obj), tuple(template(item) for item in obj))
    if type(obj) is dict:
        return MappingLiteral(tuple((key, template(value)) for key, value in obj.items()))
    return Const(obj)


def call(func: typing.Any, /, *args: typing.Any, **kwargs: typing.Any) -> Call:
    """
    Deferred call of `func`. Any of `func`, `args` and `kwargs` values may
    be (or contain) placeholders.

    Example:
        fill(call(max, _, 0))(-5)  # 0
        fill(call(_, 2))(str)      # "2"
    """
    return Call(
        template(func),
        tuple(template(arg) for arg in args),
        tuple((name, template(value)) for name, value in kwargs.items()),
    )


def fill(expr: typing.Any) -> typing.Any:
    """
    Curried function that substitutes one value per call into the
    placeholders of `expr`, left to right, then evaluates it.

    A template without placeholders is evaluated right away.

    Example:
        fill({"id": _, "tags": [_]})(1)("new")  # {"id": 1, "tags": ["new"]}
        fill(_ > 0)(2)                          # True
    """
    tree = template(expr)

    def evaluate(*values: typing.Any) -> typing.Any:
        return tree.evaluate(iter(values))

    return curry(evaluate, arity=tree.holes())


# ============================================================================
# Operator sugar
# ============================================================================


def _contains(item: typing.Any, container: typing.Any) -> bool:
    return item in container


def _and(left: typing.Any, right: typing.Any) -> typing.Any:
    return left and right


def _or(left: typing.Any, right: typing.Any) -> typing.Any:
    return left or right


# symbol -> {operand count: function}
OPERATORS: typing.Final[dict[str, dict[int, Callable[..., typing.Any]]]] = {
    "+": {1: operator.pos, 2: operator.add},
    "-": {1: operator.neg, 2: operator.sub},
    "*": {2: operator.mul},
    "@": {2: operator.matmul},
    "/": {2: operator.truediv},
    "//": {2: operator.floordiv},
    "%": {2: operator.mod},
    "**": {2: operator.pow},
    "==": {2: operator.eq},
    "!=": {2: operator.ne},
    "<": {2: operator.lt},
    "<=": {2: operator.le},
    ">": {2: operator.gt},
    ">=": {2: operator.ge},
    "&": {2: operator.and_},
    "|": {2: operator.or_},
    "^": {2: operator.xor},
    "<<": {2: operator.lshift},
    ">>": {2: operator.rshift},
    "in": {2: _contains},
    "is": {2: operator.is_},
    "and": {2: _and},
    "or": {2: _or},
    "not": {1: operator.not_},
    "neg": {1: operator.neg},
    "~": {1: operator.invert},
}


def op(symbol: str, /, *operands: typing.Any) -> typing.Any:
    """
    Partially apply an operator given by its symbol.

    Example:
        op("/", 1, _)(4)        # 0.25
        op("-", _, _)(10)(3)    # 7
        op("in", _, "abc")("b")  # True
        op("not", _)(0)         # True

    NOTE: `and` / `or` evaluate both operands (there is no short circuit
          once the values are substituted).
    """
    try:
        variants = OPERATORS[symbol]
    except KeyError:
        raise ValueError(f"op: unknown operator {symbol!r}") from None
    func = variants.get(len(operands))
    if func is None:
        raise ArityError(max(variants), len(operands), where=f"op({symbol!r})")
    return fill(call(func, *operands))


__all__ = (
    # Nodes
    "Expr",
    "Placeholder",
    "Const",
    "SequenceLiteral",
    "MappingLiteral",
    "Call",
    # Placeholder
    "_",
    # Builders
    "template",
    "call",
    "fill",
    # Operators
    "OPERATORS",
    "op",
)
