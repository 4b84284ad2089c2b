"""Split raw expression text into tokens."""
import string
from typing import List

from math_logic_evaluator.common.operators import NEG, OPERATORS
from math_logic_evaluator.common.tokens import LeftParen, Number, Operator, RightParen, Token


DIGITS: str = string.digits
WHITESPACE: str = string.whitespace


class Tokenizer:
    """
    Turn an expression string into an ordered list of tokens.

    Rules, applied left to right:
        1. Whitespace is skipped.
        2. A maximal run of digits becomes one Number token.
        3. Two-character operators (e.g. ">=", "&&", "++") win over one-character ones.
        4. A "-" where a value is expected (start of input, after "(" or after an
           operator) becomes the unary "neg" operator.
        5. Any other character becomes a one-character token verbatim.

    No errors are raised here: malformed input is left to the validator and evaluator.
    """

    @staticmethod
    def _expects_value(tokens: List[Token]) -> bool:
        """Return True if the next token should be an operand rather than a binary operator."""
        if not tokens:
            return True
        last = tokens[-1]
        if isinstance(last, LeftParen):
            return True
        return isinstance(last, Operator) and last.symbol in OPERATORS

    @staticmethod
    def _single(char: str) -> Token:
        if char == "(":
            return LeftParen()
        if char == ")":
            return RightParen()
        return Operator(symbol=char)

    @staticmethod
    def tokenize(expr: str) -> List[Token]:
        """
        Tokenize an expression.

        :param str expr: Expression text, e.g. "3 - -5 >= 2"

        :return: List of tokens
        :rtype: List[Token]
        """
        tokens: List[Token] = []
        i = 0
        length = len(expr)

        while i < length:
            char = expr[i]

            if char in WHITESPACE:
                i += 1
                continue

            if char in DIGITS:
                start = i
                while i < length and expr[i] in DIGITS:
                    i += 1
                tokens.append(Number(value=int(expr[start:i])))
                continue

            pair = expr[i:i + 2]
            if len(pair) == 2 and pair in OPERATORS:
                tokens.append(Operator(symbol=pair))
                i += 2
                continue

            if char == "-" and Tokenizer._expects_value(tokens):
                tokens.append(Operator(symbol=NEG))
            else:
                tokens.append(Tokenizer._single(char))
            i += 1

        return tokens
