"""Worker process for evaluating a single expression."""
from multiprocessing.connection import Connection
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from math_logic_evaluator.common.evaluator import evaluate
from math_logic_evaluator.common.logger import logger
from math_logic_evaluator.common.models import EvaluationRequest, EvaluationResult


class WorkerProcess(BaseModel):
    """
    Worker process responsible for evaluating a single expression.

    Lifecycle:
        - Spawned by the batch evaluator
        - Receives one EvaluationRequest only
        - Sends an EvaluationResult payload (result or error) through a Pipe
        - Terminates immediately after computation
    """

    # Allow arbitrary types like multiprocessing.Connection
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    conn: Connection = Field(..., description="Connection object for sending results back to the batch evaluator")
    request: EvaluationRequest = Field(..., description="Single expression to evaluate")
    line_number: int = Field(..., ge=1, description="Line number in the input file")

    @field_validator("request")
    @classmethod
    def expression_must_not_be_empty(cls, v: EvaluationRequest) -> EvaluationRequest:
        """Ensure that the expression is not empty."""
        if not v.expression.strip():
            raise ValueError("Expression cannot be empty")
        return v

    def run(self) -> None:
        """
        Evaluate the expression and send the result or error through the pipe.

        :return: None
        """
        expression = self.request.expression
        logger.info(f"👷🏁 Worker started on line {self.line_number}: {expression}")

        result: Optional[int] = None

        try:
            result = evaluate(expression)
            payload = EvaluationResult(line=self.line_number, expression=expression, result=result)

        except Exception as exc:
            logger.error(
                f"👷❌ Worker failed on line {self.line_number}: {exc}\n"
                f"Invalid expression, could not evaluate: {expression!r}"
            )
            payload = EvaluationResult(line=self.line_number, expression=expression, error=str(exc))

        try:
            self.conn.send(payload.model_dump())
        finally:
            # Always close the connection
            self.conn.close()

        if result is not None:
            logger.info(f"👷✅ Worker finished on line {self.line_number}: {result}")
