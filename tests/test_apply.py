from __future__ import annotations

import operator

import pytest

from sky import ArityError, arity, curry, partial, tupleize, uncurry, untuple


def add3(a: int, b: int, c: int) -> int:
    return a + b + c


def test_arity_counts_required_positional_parameters():
    assert arity(lambda: None) == 0
    assert arity(lambda a, b, c: None) == 3
    assert arity(operator.add) == 2
    assert arity(lambda a, b=1, *, c: None) == 1


def test_arity_rejects_varargs():
    with pytest.raises(TypeError, match="arity="):
        arity(lambda *args: None)


def test_curry_respects_argument_order():
    assert curry(lambda a, b: a - b)(5)(4) == 1
    assert curry(lambda a, b, c: (a, b, c))(1)(2)(3) == (1, 2, 3)


def test_curry_with_given_arguments():
    assert curry(add3, [1, 2])(3) == 6
    assert curry(add3, (1, 2, 3)) == 6


def test_curry_zero_arity_evaluates_immediately():
    assert curry(lambda: "done") == "done"


def test_curry_each_step_is_independent():
    step = curry(lambda a, b: a * 10 + b)(1)
    assert step(2) == 12
    assert step(3) == 13


def test_curry_explicit_arity_for_varargs():
    assert curry(lambda *xs: sum(xs), arity=3)(1)(2)(3) == 6


def test_curry_rejects_too_many_given():
    with pytest.raises(ArityError) as info:
        curry(lambda a, b: a + b, [1, 2, 3])
    assert info.value.expected == 2
    assert info.value.received == 3


def test_curry_rejects_non_callable():
    with pytest.raises(TypeError):
        curry(42)


def test_partial_takes_lists():
    assert partial(add3)([1, 2, 3]) == 6
    assert partial(add3, [1, 2])([3]) == 6
    assert partial(add3)([1])([2, 3]) == 6
    assert partial(add3)([])([1])([])([2, 3]) == 6


def test_partial_rejects_overshoot():
    with pytest.raises(ArityError):
        partial(add3, [1])([2, 3, 4])


def test_partial_rejects_non_list():
    with pytest.raises(TypeError, match="list of arguments"):
        partial(add3)(1)


def test_uncurry_inverts_curry():
    volume = curry(lambda x, y, z: x * y * z)
    assert volume(1)(2)(3) == 6
    assert uncurry(volume, 3)(1, 2, 3) == 6


def test_uncurry_result_has_arity():
    uncurried = uncurry(curry(add3), 3)
    assert arity(uncurried) == 3
    assert curry(uncurried)(1)(2)(3) == 6


def test_uncurry_rejects_wrong_argument_count():
    with pytest.raises(ArityError):
        uncurry(curry(add3), 3)(1, 2)


def test_tupleize():
    assert tupleize(lambda a, b: a + b)((1, 2)) == 3
    assert tupleize(lambda a, b: a + b)([1, 2]) == 3


def test_tupleize_unary():
    assert tupleize(str.upper)(("abc",)) == "ABC"


def test_tupleize_rejects_wrong_size():
    with pytest.raises(ArityError):
        tupleize(lambda a, b: a + b)((1, 2, 3))


@pytest.mark.parametrize("value", [1, "ab", b"ab", None])
def test_tupleize_rejects_non_sequence(value):
    with pytest.raises(TypeError):
        tupleize(lambda a, b: a + b)(value)


def test_untuple():
    flip = lambda pair: (pair[1], pair[0])
    assert untuple(flip, 2)("a", "b") == ("b", "a")


def test_untuple_rejects_wrong_argument_count():
    with pytest.raises(ArityError):
        untuple(len, 2)(1)


def test_untuple_tupleize_round_trip():
    assert untuple(tupleize(add3), 3)(1, 2, 3) == add3(1, 2, 3)
    assert arity(untuple(tupleize(add3), 3)) == 3


def test_uncurry_rejects_negative_arity():
    with pytest.raises(ValueError):
        uncurry(curry(add3), -1)


def test_uncurry_zero_arity_returns_chain_unapplied():
    thunk = lambda: "value"
    assert uncurry(thunk, 0)() is thunk


def test_untuple_rejects_negative_arity():
    with pytest.raises(ValueError):
        untuple(len, -1)


def test_partial_explicit_arity_for_varargs():
    total = partial(lambda *xs: sum(xs), [1], arity=3)
    assert total([2])([3]) == 6


def test_tupleize_explicit_arity_for_varargs():
    assert tupleize(lambda *xs: sum(xs), arity=2)((3, 4)) == 7
    with pytest.raises(ArityError):
        tupleize(lambda *xs: sum(xs), arity=2)((3, 4, 5))
