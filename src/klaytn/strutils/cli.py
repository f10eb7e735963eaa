"""Implements the strutils command line interface."""

import sys
from logging import DEBUG, INFO, WARNING, Logger, basicConfig, getLogger
from typing import Any, Final

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers.web import JsonLexer

from .core.search import SearchStrategy
from .core.slice import Slice
from .models.cli_arguments import CLIArguments
from .models.operation_report import OperationReport

basicConfig()
getLogger(__name__.rsplit(".", 1)[0]).setLevel(INFO)

logger: Final[Logger] = getLogger(__name__)


def run_cli() -> None:
    """Implements the strutils command line interface."""
    args: Final[CLIArguments] = CLIArguments(sys.argv)

    if args.quiet:
        getLogger(__name__.rsplit(".", 1)[0]).setLevel(WARNING)
    if args.verbose:
        getLogger(__name__.rsplit(".", 1)[0]).setLevel(DEBUG)

    # STEP 1: Load the string to operate on.
    text: bytes = args.text
    if args.input is not None:
        with args.input.open("rb") as input_file:
            text = input_file.read()
        logger.debug(f"Read {len(text)} bytes from {args.input}")

    # STEP 2: Run the operation.
    try:
        strategy: Final[SearchStrategy] = SearchStrategy(args.chunk_width, args.algorithm)
        result: Final[Any] = args.operation.apply(Slice(text), args.args, strategy)
    except ValueError as e:
        logger.error(e)  # noqa: TRY400
        sys.exit(1)

    # STEP 3: Generate the JSON report.
    report_json: Final[str] = OperationReport(args.operation, text, args.args, result).to_json(pretty=True)

    # STEP 3.1: Print colorized report to the terminal.
    if not args.quiet:
        report_colorized: Final[str] = highlight(report_json, JsonLexer(), TerminalFormatter())
        print(f"Report: {report_colorized}")  # noqa: T201

    # STEP 3.2: If required, then write report to disk.
    if args.output:
        with args.output.open("w") as output_file:
            output_file.write(report_json)
        logger.info(f"Report written to {args.output}")
