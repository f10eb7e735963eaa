"""CLI Arguments data model."""

import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path
from typing import Final

from ..core.chunk import CHUNK_WIDTH
from ..core.content_hash import DEFAULT_CONTENT_HASH, ContentHash
from .operation import Operation


class CLIArguments:
    """CLI Arguments data model."""

    def __init__(self, argv: list[str]) -> None:
        """Initialize a new instance of the CLI Arguments data model.

        Args:
            argv: Raw CLI arguments.
        """
        parser: Final[ArgumentParser] = ArgumentParser(prog=Path(argv[0]).name)

        parser.add_argument("operation", choices=[str(op) for op in Operation], help="The operation to run.")
        parser.add_argument("text", nargs="?", help="The string to operate on.")
        parser.add_argument("args", nargs="*", help="Extra arguments of the operation (needle, pad, bounds ...).")
        parser.add_argument("-i", "--input", help="Read the string to operate on from a file.")
        parser.add_argument(
            "-a",
            "--algorithm",
            choices=[str(algorithm) for algorithm in ContentHash],
            default=str(DEFAULT_CONTENT_HASH),
            help="Content hash used to compare long needles.",
        )
        parser.add_argument(
            "-w", "--chunk-width", type=int, default=CHUNK_WIDTH, help="Number of bytes compared at once."
        )
        parser.add_argument("-o", "--output", help="Path of the output JSON report.")
        parser.add_argument("-q", "--quiet", action="store_true", help="Reduce the amount of logs.")
        parser.add_argument("-v", "--verbose", action="store_true", help="Increase the amount of logs.")

        if len(argv) <= 1:
            parser.print_usage()
            sys.exit()

        parsed_args: Final[Namespace] = parser.parse_intermixed_args(argv[1:])

        self._operation: Final[Operation] = Operation(parsed_args.operation)
        self._input: Final[Path | None] = Path(parsed_args.input).resolve() if parsed_args.input else None

        # With --input, the first positional is an operation argument rather than the text.
        positionals: Final[list[str]] = [
            *([parsed_args.text] if parsed_args.text is not None else []),
            *parsed_args.args,
        ]
        self._text: Final[bytes] = positionals[0].encode() if positionals and not self._input else b""
        self._args: Final[list[bytes]] = [arg.encode() for arg in (positionals if self._input else positionals[1:])]

        self._algorithm: Final[ContentHash] = ContentHash(parsed_args.algorithm)
        self._chunk_width: Final[int] = parsed_args.chunk_width

        self._output: Final[Path | None] = Path(parsed_args.output).resolve() if parsed_args.output else None
        self._quiet: Final[bool] = parsed_args.quiet
        self._verbose: Final[bool] = parsed_args.verbose

    @property
    def operation(self) -> Operation:
        """Returns the operation to run.

        Returns:
            The operation to run.
        """
        return self._operation

    @property
    def input(self) -> Path | None:
        """Returns the path of the file holding the string to operate on (if any).

        Returns:
            Path to the input file (if any).
        """
        return self._input

    @property
    def text(self) -> bytes:
        """Returns the string given on the command line.

        Returns:
            The UTF-8 encoded string, empty when read from a file.
        """
        return self._text

    @property
    def args(self) -> list[bytes]:
        """Returns the extra arguments of the operation.

        Returns:
            The UTF-8 encoded arguments.
        """
        return self._args.copy()

    @property
    def algorithm(self) -> ContentHash:
        """Returns the content hash used to compare long needles.

        Returns:
            The content hash algorithm.
        """
        return self._algorithm

    @property
    def chunk_width(self) -> int:
        """Returns the number of bytes compared at once.

        Returns:
            The chunk width.
        """
        return self._chunk_width

    @property
    def output(self) -> Path | None:
        """Returns the path of the output JSON report.

        Returns:
            The path of the output JSON report.
        """
        return self._output

    @property
    def quiet(self) -> bool:
        """Returns whether to reduce logging.

        Returns:
            Whether to reduce logging.
        """
        return self._quiet

    @property
    def verbose(self) -> bool:
        """Returns whether to increase logging.

        Returns:
            Whether to increase logging.
        """
        return self._verbose
