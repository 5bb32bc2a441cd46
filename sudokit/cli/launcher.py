"""Command-line entry point: solve one puzzle file into one output file."""

import argparse
import os
import sys
from typing import List, Optional

from sudokit.common.config import Config, load_config
from sudokit.common.constants import (
    BAD_PUZZLE_TAG,
    CONFIG_PATH_ENV_VAR,
    MULTIPLE_SOLUTIONS_TAG,
    SOLVED_TAG,
    UNSOLVABLE_TAG,
    SolveStatus,
)
from sudokit.common.exceptions import SudokuError
from sudokit.filer import SudokuFiler
from sudokit.puzzle import Puzzle
from sudokit.solver import SolveResult, Solver
from sudokit.utils.log import get_logger, set_log_level

logger = get_logger(__name__)


def format_report(filer: SudokuFiler, puzzle: Puzzle, result: SolveResult) -> List[str]:
    """The input grid followed by a blank line and the outcome block."""
    lines = filer.to_lines(puzzle)
    lines.append("")
    if result.status == SolveStatus.UNSOLVABLE:
        lines.append(UNSOLVABLE_TAG)
    elif result.status == SolveStatus.SOLVED:
        lines.append(SOLVED_TAG)
        lines.extend(filer.to_lines(result.solutions[0]))
    else:
        lines.append(MULTIPLE_SOLUTIONS_TAG)
        for solution in result.solutions:
            lines.append("")
            lines.extend(filer.to_lines(solution))
    return lines


def _write_lines(filepath: str, lines: List[str]) -> bool:
    try:
        with open(filepath, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    except OSError as e:
        logger.error(f"Could not write to file {filepath}: {e}")
        return False
    return True


def solve_file(input_path: str, output_path: str, config: Optional[Config] = None) -> int:
    """Solve the puzzle in `input_path` and write the report to `output_path`.

    Returns:
        `int`: Process exit status; 0 unless the input is missing or malformed,
        or the output cannot be written.
    """
    config = config or Config()
    if not os.path.isfile(input_path):
        logger.error(f"Could not find file {input_path}")
        return 1

    try:
        filer = SudokuFiler.from_file(input_path)
        puzzle = filer.create_puzzle()
    except (SudokuError, UnicodeDecodeError) as e:
        logger.error(f"Could not convert file {input_path} into a sudoku puzzle: {e}")
        with open(input_path, "r", encoding="utf-8", errors="replace") as f:
            lines = f.read().splitlines()
        _write_lines(output_path, lines + ["", BAD_PUZZLE_TAG])
        return 1
    except OSError as e:
        logger.error(f"Could not read file {input_path}: {e}")
        return 1

    result = Solver(config.solver).run(puzzle)
    if not _write_lines(output_path, format_report(filer, puzzle, result)):
        return 1
    logger.info(f"Wrote {result.status.value} report to {output_path}")
    return 0


def solve(args: argparse.Namespace) -> int:
    config = load_config(args.config or os.environ.get(CONFIG_PATH_ENV_VAR))
    if args.log_level:
        config.log.level = args.log_level
    config.check_and_update()
    set_log_level(config.log.level)
    return solve_file(args.input, args.output, config)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="sudokit", description="Sudoku solver.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    solve_parser = subparsers.add_parser("solve", help="Solve a puzzle file.")
    solve_parser.add_argument("input", type=str, help="Path to the puzzle file.")
    solve_parser.add_argument("output", type=str, help="Path of the report to write.")
    solve_parser.add_argument(
        "--config", type=str, default=None, help="Path to a yaml config file."
    )
    solve_parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level.",
    )
    solve_parser.set_defaults(func=solve)

    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except ValueError as e:
        logger.error(str(e))
        return 2


if __name__ == "__main__":
    sys.exit(main())
