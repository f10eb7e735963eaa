"""Report of a string operation run from the command line."""

import json
from typing import Any, Final, override

from ..core.rune import Rune
from ..core.slice import Slice
from .operation import Operation


class OperationReportEncoder(json.JSONEncoder):
    """OperationReport JSON encoder."""

    @override
    def default(self, o: Any) -> Any:
        """Add support for serializing buffers, slices and runes."""
        if isinstance(o, Slice):
            return {"Offset": o.offset, "Length": o.length, **self.default(o.to_string())}
        if isinstance(o, bytes):
            return {"Text": o.decode("utf-8", "backslashreplace"), "Hex": o.hex()}
        if isinstance(o, Rune):
            return {"Codepoint": o.codepoint, "Width": o.width}
        return super().default(o)


class OperationReport:
    """Report of a string operation run from the command line."""

    def __init__(self, operation: Operation, text: bytes, args: list[bytes], result: Any) -> None:
        """Initialize a new OperationReport.

        Args:
            operation: The operation that was run.
            text: The input string, before the operation ran.
            args: The extra arguments of the operation.
            result: The result of the operation.
        """
        self._operation: Final[Operation] = operation
        self._text: Final[bytes] = text
        self._args: Final[list[bytes]] = args
        self._result: Final[Any] = result

    def to_dict(self) -> dict:
        """Returns the dictionary representation of the OperationReport.

        Returns:
            The dictionary representation of the OperationReport.
        """
        return {
            "Operation": str(self._operation),
            "Input": self._text,
            "Arguments": self._args,
            "Result": self._result,
        }

    def to_json(self, pretty: bool = False) -> str:
        """Returns the JSON representation of the OperationReport.

        Args:
            pretty: Whether to prettify the output or not.

        Returns:
            JSON text data.
        """
        return json.dumps(self.to_dict(), cls=OperationReportEncoder, indent=4 if pretty else None)
