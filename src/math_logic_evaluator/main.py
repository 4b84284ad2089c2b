"""
Command-line entrypoint.

This script either:
- Evaluates a single expression (the reference "1 + 2 * 3" when none is given)
  and prints "Result: <n>" or "Error: <message>"
- Evaluates every line of an operations file (plain text or archive) with a
  pool of worker processes and writes the results next to the input file
"""

import argparse
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError

from math_logic_evaluator.batch.loader import read_expressions
from math_logic_evaluator.batch.runner import BatchEvaluator
from math_logic_evaluator.common.evaluator import evaluate
from math_logic_evaluator.common.logger import set_log_level


DEFAULT_EXPRESSION: str = "1 + 2 * 3"
LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "ERROR"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    expression : str
        Expression evaluated when no file is given.
    file_path : FilePath, optional
        Path to a file containing one expression per line.
    output : Path, optional
        Where batch results are written.
    max_workers : int, optional
        Upper bound on simultaneous worker processes.
    log_level : str
        Logger verbosity.
    """

    expression: str = DEFAULT_EXPRESSION
    file_path: Optional[FilePath] = None
    output: Optional[Path] = None
    max_workers: Optional[int] = Field(default=None, ge=1)
    log_level: str = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic, relational and logical infix expressions"
    )

    parser.add_argument(
        "expression",
        nargs="?",
        default=DEFAULT_EXPRESSION,
        help=f"Expression to evaluate (default: {DEFAULT_EXPRESSION!r})",
    )
    parser.add_argument(
        "-f", "--file",
        dest="file_path",
        help="File (.txt, .zip, .tar.xz, .7z) containing one expression per line",
    )
    parser.add_argument(
        "-o", "--output",
        help="Path of the results file (batch mode only)",
    )
    parser.add_argument(
        "-j", "--max-workers",
        type=int,
        help="Maximum number of worker processes (default: CPU count)",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    name = input_path.name
    suffixes = "".join(input_path.suffixes)
    stem = name[: len(name) - len(suffixes)] if suffixes else name
    return input_path.with_name(f"{stem}{suffixes.replace('.', '_')}_results.txt")


def run_single(expression: str) -> int:
    """Evaluate one expression, print the outcome and return the exit status."""
    try:
        result = evaluate(expression)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1
    print(f"Result: {result}")
    return 0


def run_batch(cli_args: CliArgs) -> int:
    """Evaluate every expression of the input file and return the exit status."""
    input_path: Path = Path(cli_args.file_path)
    output_path: Path = cli_args.output or build_output_path(input_path)

    try:
        requests = read_expressions(input_path)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 1

    evaluator = BatchEvaluator(output_file=output_path, max_workers=cli_args.max_workers)
    results = evaluator.run(requests)

    failed = sum(1 for r in results if not r.ok)
    print(f"Evaluated {len(results)} expressions ({failed} failed), results written to {output_path}")
    return 1 if failed else 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function used by the console script.
    """
    cli_args = parse_args(argv)
    set_log_level(cli_args.log_level)

    if cli_args.file_path is not None:
        return run_batch(cli_args)
    return run_single(cli_args.expression)


if __name__ == "__main__":
    sys.exit(main())
