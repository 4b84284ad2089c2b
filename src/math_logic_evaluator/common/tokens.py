"""Lexical tokens produced by the tokenizer and reordered by the converter."""
from typing import Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class Number(BaseModel):
    """Non-negative integer literal."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    value: int = Field(..., ge=0, description="Literal value")

    def __str__(self) -> str:
        return str(self.value)


class Operator(BaseModel):
    """
    Operator symbol.

    Usually a key of the operator table, but unrecognized single characters
    are carried through verbatim and rejected later during evaluation.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["operator"] = "operator"
    symbol: str = Field(..., min_length=1, description="Operator symbol")

    def __str__(self) -> str:
        return self.symbol


class LeftParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["lparen"] = "lparen"
    symbol: Literal["("] = "("

    def __str__(self) -> str:
        return self.symbol


class RightParen(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["rparen"] = "rparen"
    symbol: Literal[")"] = ")"

    def __str__(self) -> str:
        return self.symbol


Token = Union[Number, Operator, LeftParen, RightParen]


def render(tokens: Iterable[Token]) -> str:
    """
    Render a token sequence as space-separated text.

    Examples:
        - [Number(3), Number(4), Operator("+")] -> "3 4 +"
    """
    return " ".join(str(token) for token in tokens)
