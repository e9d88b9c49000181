"""
Command-line entrypoint of the arccos calculator.

This script:
- Evaluates arccos of a value given as argument, or
- Prompts for values interactively when no argument is given

Results are printed in radians and degrees along with the computation time.
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional

from pydantic import BaseModel, Field, ValidationError

from arccos_calculator.calculator.calculator import ArccosCalculator
from arccos_calculator.common.errors import ArccosError
from arccos_calculator.common.logger import setup_logger
from arccos_calculator.common.models import SeriesSettings

PROMPT = "Enter x [-1 to 1]: "


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    value : str, optional
        Text to evaluate; None starts the interactive prompt.
    max_terms : int
        Upper bound of the series loop.
    tolerance : float
        Absolute size below which a term stops the series.
    verbose : bool
        Enable debug logging.
    """

    value: Optional[str] = None
    max_terms: int = Field(default=100, ge=1)
    tolerance: float = Field(default=1e-15, ge=0.0)
    verbose: bool = False


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, defaults to sys.argv[1:]

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Compute arccos(x) with a Taylor series"
    )

    parser.add_argument(
        "value",
        nargs="?",
        help="Value of x in [-1, 1]; omit it to be prompted",
    )
    parser.add_argument("--max-terms", type=int, default=100, help="Series term cap")
    parser.add_argument("--tolerance", type=float, default=1e-15, help="Series stop tolerance")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            value=args.value,
            max_terms=args.max_terms,
            tolerance=args.tolerance,
            verbose=args.verbose,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def run_once(calculator: ArccosCalculator, text: str) -> int:
    """
    Evaluate a single value and print the outcome.

    :param ArccosCalculator calculator: Configured calculator
    :param str text: Raw input text

    :return: Process exit code, 0 on success and 1 on a calculation error
    :rtype: int
    """
    try:
        result = calculator.compute(text)
    except ArccosError as exc:
        print(calculator.error_message(exc), file=sys.stderr)
        return 1

    print(result.format())
    return 0


def run_interactive(calculator: ArccosCalculator, read: Optional[Callable[[str], str]] = None) -> int:
    """
    Prompt for values until an empty line or end of input.

    :param ArccosCalculator calculator: Configured calculator
    :param read: Function used to read a line, input() by default

    :return: Process exit code
    :rtype: int
    """
    read = read or input
    while True:
        try:
            text = read(PROMPT)
        except EOFError:
            break
        if not text.strip():
            break
        print(calculator.render(text))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the console script.
    """
    cli_args = parse_args(argv)
    setup_logger(logging.DEBUG if cli_args.verbose else logging.WARNING)

    calculator = ArccosCalculator(
        settings=SeriesSettings(max_terms=cli_args.max_terms, tolerance=cli_args.tolerance)
    )

    if cli_args.value is None:
        return run_interactive(calculator)
    return run_once(calculator, cli_args.value)


if __name__ == "__main__":
    sys.exit(main())
