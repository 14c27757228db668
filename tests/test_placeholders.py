from __future__ import annotations

import operator
from functools import reduce

import pytest

from sky import ArityError
from sky.placeholders import Call, Const, OPERATORS, _, call, fill, op, template


def test_fill_list():
    assert fill([_, 1, _, 3])(0)(2) == [0, 1, 2, 3]


def test_fill_tuple():
    assert fill((_, 1, _, 3))(0)(2) == (0, 1, 2, 3)


def test_fill_binary_operators():
    assert fill(_ / _)(10)(2) == 5.0
    assert fill(1 / _)(2) == 0.5
    assert fill(_ - _)(10)(3) == 7
    assert fill(2 ** _)(10) == 1024


def test_fill_comparison():
    assert fill(_ > 0)(2) is True
    assert fill(0 < _)(-2) is False
    assert fill(_ == "a")("a") is True


def test_fill_call():
    assert fill(call(reduce, operator.add, [1, 2, 3], _))(10) == 16


def test_fill_call_with_placeholder_function():
    assert fill(call(_, 2))(str) == "2"
    assert fill(call(sorted, _, key=_))(["bb", "a"])(len) == ["a", "bb"]


def test_fill_nested_structures_left_to_right():
    filled = fill({"id": _, "tags": [_, (_, "x")]})
    assert filled(1)("new")("y") == {"id": 1, "tags": ["new", ("y", "x")]}


def test_fill_nested_operators_left_to_right():
    assert fill((_ - _) * _)(10)(4)(2) == 12
    assert fill(_ - (_ * _))(10)(4)(2) == 2


def test_fill_unary_and_subscript():
    assert fill(-_)(3) == -3
    assert fill(_[1])("abc") == "b"
    assert fill(abs(_ - 5))(2) == 3


def test_fill_without_placeholders_evaluates_immediately():
    assert fill(call(max, 1, 2)) == 2
    assert fill([1, 2]) == [1, 2]


def test_fill_builds_fresh_containers():
    make = fill([_])
    first = make(1)
    second = make(1)
    assert first == second
    assert first is not second


def test_fill_is_reusable_per_step():
    add = fill(_ + _)
    add_ten = add(10)
    assert add_ten(1) == 11
    assert add_ten(2) == 12


def test_template_keeps_subclasses_constant():
    assert isinstance(template(_), type(_))
    assert isinstance(template(5), Const)
    assert isinstance(call(len, _), Call)


def test_placeholder_has_no_truth_value():
    with pytest.raises(TypeError):
        bool(_ > 0)
    with pytest.raises(TypeError):
        iter(_)


def test_op():
    assert op("/", 1, _)(4) == 0.25
    assert op("-", _, _)(10)(3) == 7
    assert op("-", _)(3) == -3
    assert op("in", _, "abc")("b") is True
    assert op("not", _)(0) is True
    assert op("+", 1, 2) == 3


def test_op_unknown_symbol():
    with pytest.raises(ValueError, match="unknown operator"):
        op("<=>", _, _)


def test_op_wrong_operand_count():
    with pytest.raises(ArityError):
        op("*", _)


def test_operator_table_symbols():
    assert {"+", "-", "/", "in", "not"} <= set(OPERATORS)


def test_comparison_with_container_of_placeholders_is_rejected():
    with pytest.raises(TypeError, match="template"):
        [_] == _
    with pytest.raises(TypeError, match="template"):
        (_,) < _
    with pytest.raises(TypeError, match="template"):
        _ > {"k": _}


def test_comparison_with_templated_container_fills_left_to_right():
    assert fill(template([_]) == _)(1)([1]) is True
    assert fill(template((_,)) < _)(1)((2,)) is True
    assert fill(_ != template([_]))(1)(2) is True


def test_comparison_with_constant_container():
    assert fill(_ == [1, 2])([1, 2]) is True
    assert fill((1,) < _)((2,)) is True
