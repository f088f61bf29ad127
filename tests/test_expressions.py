import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.expressions import (
    ExpressionError,
    evaluate_postfix,
    infix_to_postfix,
    precedence,
)


@pytest.mark.parametrize(
    "symbol, expected",
    [("^", 3), ("*", 2), ("/", 2), ("+", 1), ("-", 1), ("(", -1), ("a", -1)],
)
def test_precedence(symbol, expected):
    assert precedence(symbol) == expected


def test_infix_worked_example():
    assert infix_to_postfix("a+b*(c^d-e)^(f+g*h)-i") == "abcd^e-fgh*+^*+i-"


def test_infix_single_operand():
    assert infix_to_postfix("x") == "x"


def test_infix_parentheses_only_group():
    assert infix_to_postfix("(a)") == infix_to_postfix("a")


@given(st.sampled_from("+-*/^"), st.sampled_from("+-*/^"))
def test_infix_output_is_permutation_without_parens(op1, op2):
    expr = f"(a{op1}b){op2}c"
    result = infix_to_postfix(expr)
    assert sorted(result) == sorted(expr.replace("(", "").replace(")", ""))
    assert result.startswith("ab")


@pytest.mark.parametrize("expr", ["a+b)", "(a+b", "a + b", "a%b"])
def test_infix_errors(expr):
    with pytest.raises(ExpressionError):
        infix_to_postfix(expr)


@given(st.integers(0, 9), st.integers(0, 9))
def test_evaluate_operand_order(a, b):
    assert evaluate_postfix(f"{a}{b}+") == a + b
    assert evaluate_postfix(f"{a}{b}-") == a - b
    assert evaluate_postfix(f"{a}{b}*") == a * b


def test_evaluate_single_digit():
    assert evaluate_postfix("7") == 7


def test_evaluate_compound():
    assert evaluate_postfix("23*4+") == 10


def test_evaluate_division_truncates_toward_zero():
    assert evaluate_postfix("07-2/") == -3


@given(st.integers(0, 9), st.integers(1, 9))
def test_evaluate_nonnegative_division(a, b):
    assert evaluate_postfix(f"{a}{b}/") == a // b


@pytest.mark.parametrize("expr", ["", "1+", "12", "50/", "1 2+", "12%"])
def test_evaluate_errors(expr):
    with pytest.raises(ExpressionError):
        evaluate_postfix(expr)


def test_expression_error_is_value_error():
    with pytest.raises(ValueError):
        evaluate_postfix("+")