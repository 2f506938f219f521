"""
Command-line entrypoint.

This script either:
- Starts the interactive shell (no argument)
- Calculates a single expression given with --expression
- Calculates every line of a file given as argument, writing '<name>_results.txt' beside it
"""

import argparse
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError, model_validator

from func_calc.batch.runner import BatchCalculator, build_output_path
from func_calc.common.calculator import calc
from func_calc.common.logger import configure_logging
from func_calc.common.parser import ParseError
from func_calc.shell.shell import CalculatorShell


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath, optional
        Path to a file with one expression per line.
    expression : str, optional
        Single expression to calculate.
    history_size : int
        Number of lines the shell keeps in history.
    alternate_screen : bool
        Whether the shell runs inside the terminal alternate screen.
    verbose : bool
        Whether to log debug messages.
    """

    file_path: Optional[FilePath] = None
    expression: Optional[str] = None
    history_size: int = Field(default=20, ge=0)
    alternate_screen: bool = True
    verbose: bool = False

    @model_validator(mode="after")
    def single_input_source(self) -> "CliArgs":
        """Ensure that a file and an expression are not both given."""
        if self.file_path is not None and self.expression is not None:
            raise ValueError("Give either a file or an expression, not both")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments without the program name, defaults to sys.argv[1:]
    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="func-calc",
        description="Calculate arithmetic expressions with functions and constants",
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        help="Path to a file with one expression per line",
    )
    parser.add_argument(
        "-e",
        "--expression",
        help="Calculate this expression and exit",
    )
    parser.add_argument(
        "--history-size",
        type=int,
        default=20,
        help="Number of lines kept in the shell history",
    )
    parser.add_argument(
        "--no-alternate-screen",
        dest="alternate_screen",
        action="store_false",
        help="Keep the shell in the normal terminal screen",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(**vars(args))
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the func-calc command.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.verbose)

    if cli_args.file_path is not None:
        runner = BatchCalculator(
            input_file=cli_args.file_path,
            output_file=build_output_path(cli_args.file_path),
        )
        runner.run()
        print(runner.output_file)
        return

    if cli_args.expression is not None:
        try:
            print(f"=> {calc(cli_args.expression)}")
        except ParseError as exc:
            print(exc, file=sys.stderr)
            sys.exit(1)
        return

    CalculatorShell(
        history_size=cli_args.history_size,
        alternate_screen=cli_args.alternate_screen,
    ).run()


if __name__ == "__main__":
    main()
