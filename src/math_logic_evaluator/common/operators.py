"""Operator table shared by every stage of the evaluation pipeline."""
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


# Synthetic symbol for unary minus, never present in raw input
NEG: str = "neg"


class Associativity(str, Enum):
    """Grouping direction for operators of equal precedence."""

    LEFT = "left"
    RIGHT = "right"


class Arity(str, Enum):
    """Number of operands an operator consumes."""

    UNARY = "unary"
    BINARY = "binary"


class OperatorDescriptor(BaseModel):
    """Immutable description of one supported operator symbol."""

    model_config = ConfigDict(frozen=True)

    symbol: str = Field(..., min_length=1, description="Operator symbol as it appears in tokens")
    precedence: int = Field(..., ge=1, description="Binding strength, higher binds tighter")
    associativity: Associativity = Field(..., description="Left or right associativity")
    arity: Arity = Field(..., description="Unary or binary")

    @property
    def is_unary(self) -> bool:
        return self.arity is Arity.UNARY

    @property
    def is_right_associative(self) -> bool:
        return self.associativity is Associativity.RIGHT


def _group(
    symbols: Iterable[str],
    precedence: int,
    associativity: Associativity = Associativity.LEFT,
    arity: Arity = Arity.BINARY,
) -> Dict[str, OperatorDescriptor]:
    """Build descriptors for a set of symbols sharing the same properties."""
    return {
        symbol: OperatorDescriptor(
            symbol=symbol, precedence=precedence, associativity=associativity, arity=arity
        )
        for symbol in symbols
    }


# Mapping of operator symbols to their descriptor, read-only once built
OPERATORS: Mapping[str, OperatorDescriptor] = MappingProxyType({
    **_group(["||"], 1),
    **_group(["&&"], 2),
    **_group(["==", "!="], 3),
    **_group([">", ">=", "<", "<="], 4),
    **_group(["+", "-"], 5),
    **_group(["*", "/", "%"], 6),
    **_group(["^"], 7, Associativity.RIGHT),
    **_group(["!", "++", "--", NEG], 8, Associativity.RIGHT, Arity.UNARY),
})


def lookup(symbol: str) -> Optional[OperatorDescriptor]:
    """
    Return the descriptor for an operator symbol.

    :param str symbol: Candidate operator symbol

    :return: Descriptor, or None if the symbol is not an operator
    :rtype: Optional[OperatorDescriptor]
    """
    return OPERATORS.get(symbol)


def is_unary(symbol: str) -> bool:
    descriptor = OPERATORS.get(symbol)
    return descriptor is not None and descriptor.is_unary


def is_binary(symbol: str) -> bool:
    descriptor = OPERATORS.get(symbol)
    return descriptor is not None and not descriptor.is_unary
