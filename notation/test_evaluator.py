# test_evaluator.py

import math

import pytest

from notation.errors import ErrorKind, NotationError
from notation.evaluator import (
    evaluate_infix_expression,
    evaluate_postfix_expression,
    operate,
)

# ---------------------------
# operate
# ---------------------------

def test_operate_top_operand_is_right_hand_side():
    # b=8 pushed first, a=2 on top
    assert operate(2, 8, '+') == 10.0
    assert operate(2, 8, '-') == 6.0
    assert operate(2, 8, '*') == 16.0
    assert operate(2, 8, '/') == 4.0
    assert operate(3, 2, '^') == 8.0

def test_operate_division_by_zero_follows_ieee():
    assert operate(0, 1, '/') == math.inf
    assert operate(0, -1, '/') == -math.inf
    assert math.isnan(operate(0, 0, '/'))

def test_operate_unknown_operator():
    with pytest.raises(NotationError) as e:
        operate(1, 2, '%')
    assert e.value.kind is ErrorKind.UNKNOWN_OPERATOR

def test_operate_returns_builtin_float():
    assert type(operate(1, 2, '+')) is float

# ---------------------------
# Infix evaluation
# ---------------------------

@pytest.mark.parametrize("expr, expected", [
    ("2+3*4", 14.0),
    ("(2+3)*4", 20.0),
    ("10-4-3", 3.0),
    ("8/4/2", 1.0),
    ("2^3^2", 512.0),
    ("2*3^2", 18.0),
    ("2^3*4", 32.0),
    ("{1+[2*(3-1)]}/2", 2.5),
    ("1.5*4", 6.0),
    ("100", 100.0),
    (" 12 + 30 ", 42.0),
])
def test_evaluate_infix(expr, expected):
    assert math.isclose(evaluate_infix_expression(expr), expected)

def test_evaluate_infix_division_by_zero():
    assert evaluate_infix_expression("2/0") == math.inf
    assert evaluate_infix_expression("2-4/0") == -math.inf
    assert math.isnan(evaluate_infix_expression("0/0"))

def test_evaluate_infix_power_overflow_is_inf():
    assert evaluate_infix_expression("2^1024") == math.inf

def test_evaluate_infix_with_variables(variables):
    assert evaluate_infix_expression("a*b+c", variables) == 10.0
    assert evaluate_infix_expression("x/a", variables) == 4.0

def test_evaluate_infix_undefined_variable():
    with pytest.raises(NotationError) as e:
        evaluate_infix_expression("a+1")
    assert e.value.kind is ErrorKind.UNDEFINED_VARIABLE
    assert "a" in e.value.message

@pytest.mark.parametrize("expr, kind", [
    ("(2+3", ErrorKind.UNBALANCED_DELIMITERS),
    ("{2+3)", ErrorKind.UNBALANCED_DELIMITERS),
    ("5++4", ErrorKind.SEQUENTIAL_OPERATORS),
    ("2 3", ErrorKind.RESIDUAL_OPERANDS),
    ("5+", ErrorKind.STACK_UNDERFLOW),
    ("2 & 3", ErrorKind.INVALID_CHARACTER),
    ("2+²", ErrorKind.INVALID_CHARACTER),
    ("", ErrorKind.INVALID_CHARACTER),
])
def test_evaluate_infix_errors(expr, kind):
    with pytest.raises(NotationError) as e:
        evaluate_infix_expression(expr)
    assert e.value.kind is kind

def test_evaluate_infix_bounded_stacks():
    assert evaluate_infix_expression("((1))", max_stack_size=2) == 1.0
    with pytest.raises(NotationError) as e:
        evaluate_infix_expression("((((1))))", max_stack_size=2)
    assert e.value.kind is ErrorKind.STACK_OVERFLOW

def test_stack_errors_do_not_leak():
    with pytest.raises(NotationError) as e:
        evaluate_infix_expression("5*")
    assert e.value.kind is ErrorKind.STACK_UNDERFLOW
    assert e.value.__cause__ is not None

# ---------------------------
# Postfix evaluation
# ---------------------------

@pytest.mark.parametrize("expr, expected", [
    ("8 2 -", 6.0),
    ("8 2 /", 4.0),
    ("2 3 ^", 8.0),
    ("2 3 4 * +", 14.0),
    ("12 3 - 2 -", 7.0),
    ("1.5 2.5 +", 4.0),
    ("7", 7.0),
])
def test_evaluate_postfix(expr, expected):
    assert math.isclose(evaluate_postfix_expression(expr), expected)

def test_evaluate_postfix_division_by_zero():
    assert evaluate_postfix_expression("5 0 /") == math.inf

def test_evaluate_postfix_with_variables(variables):
    assert evaluate_postfix_expression("a b *", variables) == 6.0

@pytest.mark.parametrize("expr, kind", [
    ("2 3", ErrorKind.RESIDUAL_OPERANDS),
    ("2 +", ErrorKind.STACK_UNDERFLOW),
    ("(2 3 +)", ErrorKind.INVALID_CHARACTER),
    ("2 ① +", ErrorKind.INVALID_CHARACTER),
    ("   ", ErrorKind.INVALID_CHARACTER),
    ("2..5 1 +", ErrorKind.MALFORMED_NUMBER),
    ("q 1 +", ErrorKind.UNDEFINED_VARIABLE),
])
def test_evaluate_postfix_errors(expr, kind):
    with pytest.raises(NotationError) as e:
        evaluate_postfix_expression(expr)
    assert e.value.kind is kind

def test_evaluate_postfix_bounded_stack():
    with pytest.raises(NotationError) as e:
        evaluate_postfix_expression("1 2 3 + +", max_stack_size=2)
    assert e.value.kind is ErrorKind.STACK_OVERFLOW
