"""Evaluate infix arithmetic and logic expressions to integers."""
from typing import List

from math_logic_evaluator.common.converter import PostfixConverter
from math_logic_evaluator.common.logger import logger
from math_logic_evaluator.common.postfix import PostfixEvaluator
from math_logic_evaluator.common.tokenizer import Tokenizer
from math_logic_evaluator.common.tokens import Token, render
from math_logic_evaluator.common.validator import Validator


class MathLogicEvaluator:
    """
    Parse, validate and evaluate infix expressions safely.

    Design constraints:
        - No eval(), no dynamic code execution
        - No state kept between calls, so concurrent use is safe

    Algorithm:
        1. Tokenize, rewriting unary minus as "neg"
        2. Validate the token sequence structurally
        3. Convert to Reverse Polish Notation (RPN) using Shunting-yard
        4. Evaluate RPN using a stack

    Supported operators, loosest to tightest:
        ||, &&, == !=, > >= < <=, + -, * / %, ^ (right-assoc), ! ++ -- neg (unary)

    Examples:
        - "1 + 2 * 3" -> 7
        - "2 ^ 3 ^ 2" -> 512
        - "(1 < 2) && !0" -> 1
    """

    @staticmethod
    def evaluate(expression: str) -> int:
        """
        Evaluate an expression.

        :param str expression: Infix expression string

        :return: Computed integer result
        :rtype: int
        :raises ExpressionError: If the expression is malformed or cannot be evaluated
        """
        tokens: List[Token] = Tokenizer.tokenize(expression)
        logger.debug(f"🔤 Tokens: {render(tokens)}")

        Validator.validate(tokens)

        postfix: List[Token] = PostfixConverter.to_rpn(tokens)
        logger.debug(f"🔁 Postfix: {render(postfix)}")

        return PostfixEvaluator.evaluate(postfix)


def evaluate(expression: str) -> int:
    """Shortcut for MathLogicEvaluator.evaluate."""
    return MathLogicEvaluator.evaluate(expression)
