"""Evaluate postfix token sequences on an integer stack."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, Dict, List

from math_logic_evaluator.common.errors import ExpressionError
from math_logic_evaluator.common.operators import NEG, is_unary
from math_logic_evaluator.common.tokens import Number, Operator, Token


# Type aliases for operator functions over integers
BinaryFn: ABCCallable[[int, int], int] = Callable[[int, int], int]
UnaryFn: ABCCallable[[int], int] = Callable[[int], int]


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero, e.g. -7 / 2 == -3."""
    if right == 0:
        raise ExpressionError("Division by zero")
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def _truncating_mod(left: int, right: int) -> int:
    """Remainder whose sign follows the dividend, e.g. -7 % 2 == -1."""
    if right == 0:
        raise ExpressionError("Modulo by zero")
    return left - right * _truncating_div(left, right)


def _power(left: int, right: int) -> int:
    """Raise through a float intermediate and truncate, so large results may lose precision."""
    try:
        return int(math.pow(left, right))
    except (OverflowError, ValueError) as exc:
        raise ExpressionError(f"Exponentiation out of range: {left} ^ {right}") from exc


# Mapping of binary operator symbols to their integer semantics
BINARY_OPERATIONS: Dict[str, BinaryFn] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
    "%": _truncating_mod,
    "^": _power,
    "==": lambda a, b: int(a == b),
    "!=": lambda a, b: int(a != b),
    ">": lambda a, b: int(a > b),
    "<": lambda a, b: int(a < b),
    ">=": lambda a, b: int(a >= b),
    "<=": lambda a, b: int(a <= b),
    "&&": lambda a, b: int(bool(a) and bool(b)),
    "||": lambda a, b: int(bool(a) or bool(b)),
}

# Mapping of unary operator symbols to their integer semantics
UNARY_OPERATIONS: Dict[str, UnaryFn] = {
    "!": lambda a: int(a == 0),
    "++": lambda a: a + 1,
    "--": lambda a: a - 1,
    NEG: operator.neg,
}


class PostfixEvaluator:
    """Execute a postfix sequence produced by the converter."""

    @staticmethod
    def apply_binary(symbol: str, left: int, right: int) -> int:
        """
        Apply a binary operator.

        :param str symbol: Operator symbol
        :param int left: Left operand
        :param int right: Right operand

        :return: Result of the operation
        :rtype: int
        :raises ExpressionError: On division by zero or unknown operator
        """
        fn = BINARY_OPERATIONS.get(symbol)
        if fn is None:
            raise ExpressionError(f"Unknown binary operator: {symbol}")
        return fn(left, right)

    @staticmethod
    def apply_unary(symbol: str, operand: int) -> int:
        fn = UNARY_OPERATIONS.get(symbol)
        if fn is None:
            raise ExpressionError(f"Unknown unary operator: {symbol}")
        return fn(operand)

    @staticmethod
    def evaluate(postfix: List[Token]) -> int:
        """
        Evaluate a postfix token sequence.

        :param List[Token] postfix: Tokens in postfix order

        :return: The single remaining value
        :rtype: int
        :raises ExpressionError: If operands are missing or left over, or an operation fails
        """
        stack: List[int] = []

        for token in postfix:
            if isinstance(token, Number):
                stack.append(token.value)
            elif isinstance(token, Operator) and is_unary(token.symbol):
                if not stack:
                    raise ExpressionError("Missing operand for unary operator")
                operand = stack.pop()
                stack.append(PostfixEvaluator.apply_unary(token.symbol, operand))
            else:
                # Binary operators, unknown symbols and stray "(" all take this path
                if len(stack) < 2:
                    raise ExpressionError("Missing operands for binary operator")
                right = stack.pop()
                left = stack.pop()
                stack.append(PostfixEvaluator.apply_binary(token.symbol, left, right))

        if len(stack) != 1:
            raise ExpressionError("Expression evaluation error: leftover operands")

        return stack[0]
