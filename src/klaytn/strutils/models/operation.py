"""Enumeration of the string operations available from the command line."""

from enum import StrEnum
from typing import Any, Final

from ..core.search import SearchStrategy
from ..core.slice import Slice
from ..strings import from_word, split, to_slice


class Operation(StrEnum):
    """Enumeration of the string operations available from the command line."""

    LEN = "len"
    EMPTY = "empty"
    ORD = "ord"
    HASH = "hash"
    COMPARE = "compare"
    EQUALS = "equals"
    STARTS_WITH = "starts-with"
    ENDS_WITH = "ends-with"
    BEYOND = "beyond"
    UNTIL = "until"
    FIND = "find"
    RFIND = "rfind"
    SPLIT = "split"
    RSPLIT = "rsplit"
    COUNT = "count"
    CONTAINS = "contains"
    TOKENIZE = "tokenize"
    CONCAT = "concat"
    JOIN = "join"
    PAD_START = "pad-start"
    PAD_END = "pad-end"
    SUBSTRING = "substring"
    RUNES = "runes"
    WORD = "word"

    @property
    def arity(self) -> int | None:
        """Returns the number of extra arguments the operation takes.

        Returns:
            The number of arguments, None if it takes any number of them.
        """
        match self:
            case Operation.LEN | Operation.EMPTY | Operation.ORD | Operation.HASH | Operation.RUNES | Operation.WORD:
                return 0
            case Operation.PAD_START | Operation.PAD_END | Operation.SUBSTRING:
                return 2
            case Operation.JOIN:
                return None
            case _:
                return 1

    def apply(self, text: Slice, args: list[bytes], strategy: SearchStrategy) -> Any:  # noqa: C901, PLR0911, PLR0912
        """Run the operation on a string.

        Args:
            text: The string to operate on.
            args: The extra arguments of the operation.
            strategy: The search parameters to use.

        Returns:
            The result of the operation.
        """
        if self.arity is not None and len(args) != self.arity:
            msg = f"{self} expects {self.arity} argument(s), got {len(args)}"
            raise ValueError(msg)

        other: Final[Slice] = to_slice(args[0]) if args else Slice(b"")
        match self:
            case Operation.LEN:
                return len(text)
            case Operation.EMPTY:
                return text.empty()
            case Operation.ORD:
                return text.ord()
            case Operation.HASH:
                return text.content_hash(strategy.algorithm)
            case Operation.COMPARE:
                return text.compare(other, strategy)
            case Operation.EQUALS:
                return text.equals(other, strategy)
            case Operation.STARTS_WITH:
                return text.starts_with(other, strategy)
            case Operation.ENDS_WITH:
                return text.ends_with(other, strategy)
            case Operation.BEYOND:
                return text.beyond(other, strategy)
            case Operation.UNTIL:
                return text.until(other, strategy)
            case Operation.FIND:
                return text.find(other, strategy)
            case Operation.RFIND:
                return text.rfind(other, strategy)
            case Operation.SPLIT:
                return {"Token": text.split(other, strategy=strategy), "Remainder": text}
            case Operation.RSPLIT:
                return {"Token": text.rsplit(other, strategy=strategy), "Remainder": text}
            case Operation.COUNT:
                return text.count(other, strategy)
            case Operation.CONTAINS:
                return text.contains(other, strategy)
            case Operation.TOKENIZE:
                return split(text, other, strategy)
            case Operation.CONCAT:
                return text.concat(other)
            case Operation.JOIN:
                return text.join([to_slice(arg) for arg in args])
            case Operation.PAD_START:
                return text.pad_start(int(args[0]), to_slice(args[1]))
            case Operation.PAD_END:
                return text.pad_end(int(args[0]), to_slice(args[1]))
            case Operation.SUBSTRING:
                return text.substring(int(args[0]), int(args[1]))
            case Operation.RUNES:
                return [{"Rune": rune, "Decoded": rune.rune()} for rune in text]
            case Operation.WORD:
                # The string is the hex encoding of the word.
                return from_word(bytes.fromhex(text.decode()))
