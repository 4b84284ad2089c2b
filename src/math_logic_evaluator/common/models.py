"""Pydantic models for evaluation requests and results."""
from typing import Optional

from pydantic import BaseModel, Field


class EvaluationRequest(BaseModel):
    """Represents a single expression submitted for evaluation."""

    expression: str = Field(..., description="Infix expression as a string")


class EvaluationResult(BaseModel):
    """Represents the outcome of evaluating one expression of a batch."""

    line: int = Field(..., ge=1, description="Line number of the expression in the input")
    expression: str = Field(..., description="Original expression")
    result: Optional[int] = Field(default=None, description="Integer result, if evaluation succeeded")
    error: Optional[str] = Field(default=None, description="Error message, if evaluation failed")

    @property
    def ok(self) -> bool:
        return self.error is None

    def format(self) -> str:
        """Render the result as a line of the output file."""
        if self.ok:
            return f"{self.expression} = {self.result}"
        return f"{self.expression} -> ERROR: {self.error}"
