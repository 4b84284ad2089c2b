"""Convert infix tokens to Reverse Polish Notation (postfix)."""
from typing import List, Union

from math_logic_evaluator.common.operators import lookup
from math_logic_evaluator.common.tokens import LeftParen, Number, Operator, RightParen, Token


# Symbols missing from the operator table sort below every real operator
UNKNOWN_PRECEDENCE: int = 0


def _precedence(symbol: str) -> int:
    descriptor = lookup(symbol)
    return descriptor.precedence if descriptor is not None else UNKNOWN_PRECEDENCE


def _is_right_associative(symbol: str) -> bool:
    descriptor = lookup(symbol)
    return descriptor is not None and descriptor.is_right_associative


class PostfixConverter:
    """
    Reorder infix tokens into postfix order with the Shunting-yard algorithm.

    Operators wait on a stack until an operator that binds less tightly (or a
    closing parenthesis) forces them to the output.

    Examples:
        - Infix: 3 + 4 * 2   -> Postfix: 3 4 2 * +
        - Infix: 2 ^ 3 ^ 2   -> Postfix: 2 3 2 ^ ^
        - Infix: (1 + 2) * 3 -> Postfix: 1 2 + 3 *

    Unmatched parentheses are tolerated: a stray ")" is dropped, and a
    stray "(" ends up in the output where the evaluator rejects it.
    """

    @staticmethod
    def _should_pop(token: Operator, top: Union[Operator, LeftParen]) -> bool:
        """Return True if the stack top must be output before pushing token."""
        if isinstance(top, LeftParen):
            return False
        prec = _precedence(token.symbol)
        top_prec = _precedence(top.symbol)
        if _is_right_associative(token.symbol):
            return prec < top_prec
        return prec <= top_prec

    @staticmethod
    def to_rpn(tokens: List[Token]) -> List[Token]:
        """
        Convert a list of infix tokens into postfix order.

        :param List[Token] tokens: Validated infix tokens

        :return: Tokens in postfix order
        :rtype: List[Token]
        """
        output: List[Token] = []
        stack: List[Union[Operator, LeftParen]] = []

        for token in tokens:
            if isinstance(token, Number):
                output.append(token)
            elif isinstance(token, LeftParen):
                stack.append(token)
            elif isinstance(token, RightParen):
                while stack and not isinstance(stack[-1], LeftParen):
                    output.append(stack.pop())
                if stack:
                    # Discard the matching "("
                    stack.pop()
            else:
                while stack and PostfixConverter._should_pop(token, stack[-1]):
                    output.append(stack.pop())
                stack.append(token)

        # Append remaining operators in reverse order (stack top first)
        output.extend(stack[::-1])
        return output
