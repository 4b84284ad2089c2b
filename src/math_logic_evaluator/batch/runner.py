"""Evaluate a batch of expressions using worker processes."""
from multiprocessing import Pipe, Process, cpu_count
from multiprocessing.connection import Connection
from pathlib import Path
from typing import List, NamedTuple, Optional, TextIO

from pydantic import BaseModel, ConfigDict, Field

from math_logic_evaluator.batch.worker import WorkerProcess
from math_logic_evaluator.common.logger import logger
from math_logic_evaluator.common.models import EvaluationRequest, EvaluationResult


class ActiveWorker(NamedTuple):
    """A spawned worker and the receiving end of its pipe."""

    process: Process
    conn: Connection
    line_number: int
    request: EvaluationRequest


class BatchEvaluator(BaseModel):
    """
    Evaluate many expressions concurrently, one worker process per expression.

    Features:
        - Spawns one worker process per expression.
        - Writes results to disk as soon as a worker reports back.
        - Ensures each worker is joined immediately after finishing.
        - Keeps at most max_workers workers alive (defaults to CPU core count).
    """

    model_config = ConfigDict(frozen=True)

    output_file: Path = Field(..., description="Path to write evaluation results")
    max_workers: Optional[int] = Field(default=None, ge=1, description="Upper bound on simultaneous workers")

    def _spawn_worker(self, request: EvaluationRequest, line_number: int) -> ActiveWorker:
        """
        Spawn a WorkerProcess for the given expression.

        :param EvaluationRequest request: Expression to evaluate
        :param int line_number: Line number of expression in input

        :return: The running process with its parent pipe
        :rtype: ActiveWorker
        """
        parent_conn, child_conn = Pipe(duplex=False)
        worker = WorkerProcess(conn=child_conn, request=request, line_number=line_number)
        process = Process(target=worker.run)
        process.start()
        # The child holds its own copy of the sending end
        child_conn.close()
        return ActiveWorker(process, parent_conn, line_number, request)

    def _receive(self, worker: ActiveWorker) -> EvaluationResult:
        try:
            return EvaluationResult.model_validate(worker.conn.recv())
        except EOFError:
            logger.error(f"👷💀 Worker on line {worker.line_number} exited without a result")
            return EvaluationResult(
                line=worker.line_number,
                expression=worker.request.expression,
                error="Worker exited without a result",
            )

    def _collect_finished_workers(
        self,
        active_workers: List[ActiveWorker],
        f_out: TextIO,
        results: List[EvaluationResult],
    ) -> None:
        """
        Collect results from all workers that reported back and write them to the output file.

        Finished workers are removed from the active_workers list.

        :param list active_workers: Workers still running or not yet collected
        :param TextIO f_out: Open file handle for writing results
        :param list results: Collected results, extended in place
        """
        # Iterate in reverse to safely remove finished workers while iterating
        for i in reversed(range(len(active_workers))):
            worker = active_workers[i]
            if not worker.conn.poll(0.01):
                continue

            payload = self._receive(worker)
            worker.conn.close()
            worker.process.join()
            active_workers.pop(i)

            results.append(payload)
            f_out.write(payload.format() + "\n")
            f_out.flush()

    def run(self, requests: List[EvaluationRequest]) -> List[EvaluationResult]:
        """
        Evaluate every expression and write one result line per expression.

        Lines are written in completion order; the returned list is sorted by line number.

        :param List[EvaluationRequest] requests: Non-empty expressions, in input order

        :return: One result per expression
        :rtype: List[EvaluationResult]
        """
        results: List[EvaluationResult] = []
        limit: int = self.max_workers or cpu_count()
        active_workers: List[ActiveWorker] = []

        logger.info(f"🖥️ Evaluating {len(requests)} expressions with up to {limit} workers")

        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, request in enumerate(requests, start=1):
                # Wait until a worker slot is available
                while len(active_workers) >= limit:
                    self._collect_finished_workers(active_workers, f_out, results)

                active_workers.append(self._spawn_worker(request, line_number))

            # Collect remaining active workers
            while active_workers:
                self._collect_finished_workers(active_workers, f_out, results)

        logger.info(f"💾 Results written to {self.output_file}")
        return sorted(results, key=lambda r: r.line)
