"""Test class MathLogicEvaluator end to end."""
from concurrent.futures import ThreadPoolExecutor
import logging

import pytest

from math_logic_evaluator.common.errors import ExpressionError
from math_logic_evaluator.common.evaluator import MathLogicEvaluator, evaluate


@pytest.mark.parametrize("expr,expected", [
    ("1 + 2 * 3", 7),
    ("3 + 4", 7),
    ("10 - 2", 8),
    ("3 * 5", 15),
    ("8 / 2", 4),
    ("7 / 2", 3),
    ("7 + 3 * 2 - 4 / 2", 11),
    ("(1 + 2) * 3", 9),
    ("((2))", 2),
    ("10 - 4 - 3", 3),
    ("100 / 10 / 5", 2),
    ("2 * (3 + 4) * 5", 70),
])
def test_arithmetic(expr, expected):
    """Arithmetic respects precedence and left-to-right grouping."""
    assert evaluate(expr) == expected


def test_exponent_is_right_associative():
    """2 ^ 3 ^ 2 is 2 ^ (3 ^ 2)."""
    assert evaluate("2 ^ 3 ^ 2") == 512


@pytest.mark.parametrize("expr,expected", [
    ("-3 + 5", 2),
    ("3 - -5", 8),
    ("(-3) * 2", -6),
    ("-(2 + 3)", -5),
    ("- -3", 3),
    ("--3", 2),
    ("++3", 4),
    ("-2 ^ 2", 4),
])
def test_unary_operators(expr, expected):
    """Unary minus and increment/decrement bind tightest."""
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,expected", [
    ("1 && 0", 0),
    ("1 || 0", 1),
    ("!0", 1),
    ("!7", 0),
    ("5 > 3", 1),
    ("5 <= 3", 0),
    ("2 + 2 == 4", 1),
    ("1 != 1 || 2 >= 2", 1),
    ("1 < 2 && 2 < 1", 0),
    ("!(1 && 0)", 1),
])
def test_logical_and_relational(expr, expected):
    """Logical and relational operators yield exactly 0 or 1."""
    assert evaluate(expr) == expected


@pytest.mark.parametrize("expr,message", [
    ("4 / 0", "Division by zero"),
    ("* 3 + 2", "binary operator"),
    (") 3", "closing parenthesis"),
    ("3 4", "Two operands in a row"),
    ("3 + + 4", "Two binary operators in a row"),
    ("3 +", "Missing operands"),
    ("!", "Missing operand for unary operator"),
    ("(1 + 2", "Missing operands"),
    ("1 $ 2", "Unknown binary operator"),
    ("3--2", "leftover operands"),
    ("", "leftover operands"),
])
def test_invalid_expressions(expr, message):
    """Malformed or invalid expressions raise ExpressionError."""
    with pytest.raises(ExpressionError, match=message):
        evaluate(expr)


def test_unmatched_closing_parenthesis_is_tolerated():
    """A stray ')' does not prevent evaluation."""
    assert evaluate("1 + 2) * 3") == 9


def test_evaluation_is_repeatable():
    """Re-evaluating the same expression always gives the same result."""
    assert {MathLogicEvaluator.evaluate("2 ^ 3 ^ 2 - 12 % 5") for _ in range(20)} == {510}


def test_concurrent_evaluation():
    """Concurrent calls do not interfere with each other."""
    exprs = [f"{i} * {i} + 1" for i in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(evaluate, exprs))
    assert results == [i * i + 1 for i in range(50)]


def test_debug_logging(caplog):
    """Tokens and postfix are logged at DEBUG level."""
    with caplog.at_level(logging.DEBUG, logger="math_logic_evaluator"):
        evaluate("1 + 2")
    assert "1 2 +" in caplog.text
