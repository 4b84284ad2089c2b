"""Test class PostfixEvaluator."""
import pytest

from math_logic_evaluator.common.errors import ExpressionError
from math_logic_evaluator.common.postfix import PostfixEvaluator
from math_logic_evaluator.common.tokens import LeftParen, Number, Operator


def _n(value: int) -> Number:
    return Number(value=value)


def _op(symbol: str) -> Operator:
    return Operator(symbol=symbol)


def test_evaluate_basic():
    """A simple postfix sequence evaluates correctly."""
    assert PostfixEvaluator.evaluate([_n(3), _n(4), _n(2), _op("*"), _op("+")]) == 11


def test_right_operand_is_popped_first():
    """The top of the stack is the right operand."""
    assert PostfixEvaluator.evaluate([_n(10), _n(3), _op("-")]) == 7


@pytest.mark.parametrize("symbol,left,right,expected", [
    ("+", 2, 3, 5),
    ("-", 2, 3, -1),
    ("*", -2, 3, -6),
    ("/", 7, 2, 3),
    ("/", -7, 2, -3),
    ("/", 7, -2, -3),
    ("%", 7, 3, 1),
    ("%", -7, 2, -1),
    ("%", 7, -2, 1),
    ("^", 2, 10, 1024),
    ("^", 2, -1, 0),
    ("^", -2, 3, -8),
    ("==", 2, 2, 1),
    ("!=", 2, 2, 0),
    (">", 3, 2, 1),
    ("<", 3, 2, 0),
    (">=", 2, 2, 1),
    ("<=", 3, 2, 0),
    ("&&", 5, -1, 1),
    ("&&", 5, 0, 0),
    ("||", 0, 0, 0),
    ("||", 0, 7, 1),
])
def test_apply_binary(symbol, left, right, expected):
    """Binary operators follow integer semantics with truncation."""
    assert PostfixEvaluator.apply_binary(symbol, left, right) == expected


@pytest.mark.parametrize("symbol,operand,expected", [
    ("!", 0, 1),
    ("!", 5, 0),
    ("++", 1, 2),
    ("--", 1, 0),
    ("neg", 4, -4),
    ("neg", -4, 4),
])
def test_apply_unary(symbol, operand, expected):
    """Unary operators follow integer semantics."""
    assert PostfixEvaluator.apply_unary(symbol, operand) == expected


def test_division_by_zero():
    """Dividing by zero raises ExpressionError."""
    with pytest.raises(ExpressionError, match="Division by zero"):
        PostfixEvaluator.apply_binary("/", 4, 0)


def test_modulo_by_zero():
    """Taking a remainder by zero raises ExpressionError."""
    with pytest.raises(ExpressionError, match="Modulo by zero"):
        PostfixEvaluator.apply_binary("%", 4, 0)


@pytest.mark.parametrize("left,right", [(0, -1), (10, 1000)])
def test_power_out_of_range(left, right):
    """Exponentiation that leaves the float range raises ExpressionError."""
    with pytest.raises(ExpressionError, match="Exponentiation out of range"):
        PostfixEvaluator.apply_binary("^", left, right)


@pytest.mark.parametrize("postfix,message", [
    ([_op("!")], "Missing operand for unary operator"),
    ([_n(1), _op("+")], "Missing operands for binary operator"),
    ([_n(1), _n(2)], "leftover operands"),
    ([], "leftover operands"),
    ([_n(1), _n(2), _op("$")], "Unknown binary operator: \\$"),
    ([_n(1), _n(2), LeftParen()], "Unknown binary operator: \\("),
    ([_n(1), LeftParen()], "Missing operands for binary operator"),
])
def test_evaluate_invalid(postfix, message):
    """Malformed postfix sequences raise ExpressionError."""
    with pytest.raises(ExpressionError, match=message):
        PostfixEvaluator.evaluate(postfix)


def test_unknown_unary_operator():
    """apply_unary rejects symbols it has no semantics for."""
    with pytest.raises(ExpressionError, match="Unknown unary operator"):
        PostfixEvaluator.apply_unary("~", 1)
