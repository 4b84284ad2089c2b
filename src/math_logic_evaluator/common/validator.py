"""Structural checks on a token sequence before evaluation."""
from typing import List, Optional

from math_logic_evaluator.common.errors import ExpressionError
from math_logic_evaluator.common.operators import is_binary, is_unary
from math_logic_evaluator.common.tokens import Number, Operator, RightParen, Token


def _is_binary(token: Optional[Token]) -> bool:
    return isinstance(token, Operator) and is_binary(token.symbol)


def _is_unary(token: Optional[Token]) -> bool:
    return isinstance(token, Operator) and is_unary(token.symbol)


class Validator:
    """
    Reject structurally malformed token sequences.

    Only cheap, local checks are made here. Parenthesis balance, operand count
    and a trailing unary operator are caught later by the postfix evaluator.
    """

    @staticmethod
    def validate(tokens: List[Token]) -> None:
        """
        Scan the tokens in order and raise on the first violation.

        :param List[Token] tokens: Tokens produced by the tokenizer

        :return: None
        :raises ExpressionError: If the sequence is malformed
        """
        for i, token in enumerate(tokens):
            prev: Optional[Token] = tokens[i - 1] if i > 0 else None
            next_: Optional[Token] = tokens[i + 1] if i + 1 < len(tokens) else None

            if i == 0 and isinstance(token, RightParen):
                raise ExpressionError("Expression can't start with a closing parenthesis @ token: 0")

            if i == 0 and _is_binary(token):
                raise ExpressionError("Expression can't start with a binary operator @ token: 0")

            if _is_binary(token) and _is_binary(prev):
                raise ExpressionError(f"Two binary operators in a row @ token: {i}")

            if isinstance(token, Number) and isinstance(prev, Number):
                raise ExpressionError(f"Two operands in a row @ token: {i}")

            if _is_unary(token) and _is_binary(next_):
                raise ExpressionError(
                    f"A unary operand can't be followed by a binary operator @ token: {i + 1}"
                )
