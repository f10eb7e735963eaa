"""Zero-copy views over immutable string buffers.

A Slice is an `(offset, length)` pair over a `bytes` buffer it does not own. Operations
such as `find`, `split` or `beyond` rewrite that pair in place and return the slice itself
so they can be chained, while operations such as `concat` or `pad_start` allocate and
return a new buffer.
"""

from collections.abc import Iterator, Sequence
from typing import Final

from . import transforms
from .compare import compare
from .content_hash import DEFAULT_CONTENT_HASH, ContentHash
from .rune import Rune, count_runes, decode_rune, rune_width
from .search import DEFAULT_STRATEGY, SearchStrategy


class Slice:
    """Zero-copy view over an immutable string buffer."""

    def __init__(self, buffer: bytes, offset: int = 0, length: int | None = None) -> None:
        """Initialize a new Slice.

        Args:
            buffer: The buffer to view.
            offset: The offset of the first viewed byte.
            length: The number of viewed bytes, defaults to the rest of the buffer.
        """
        if not isinstance(buffer, bytes):
            msg = f"Slices view bytes, not {type(buffer).__name__}"
            raise TypeError(msg)
        if length is None:
            length = len(buffer) - offset
        if offset < 0 or length < 0 or offset + length > len(buffer):
            msg = f"Invalid view ({offset}, {length}) over {len(buffer)} bytes"
            raise ValueError(msg)

        self._buffer: bytes = buffer
        self._offset: int = offset
        self._length: int = length

    @property
    def buffer(self) -> bytes:
        """Returns the buffer viewed by the slice.

        Returns:
            The viewed buffer.
        """
        return self._buffer

    @property
    def offset(self) -> int:
        """Returns the offset of the first viewed byte.

        Returns:
            Offset in the buffer.
        """
        return self._offset

    @property
    def length(self) -> int:
        """Returns the number of viewed bytes.

        Returns:
            Byte length of the slice.
        """
        return self._length

    @property
    def end(self) -> int:
        """Returns the buffer offset one past the last viewed byte.

        Returns:
            End offset in the buffer.
        """
        return self._offset + self._length

    def _move(self, offset: int, length: int) -> "Slice":
        """Rewrite the view in place."""
        self._offset = offset
        self._length = length
        return self

    def view(self) -> memoryview:
        """Returns a read-only memoryview of the viewed bytes.

        Returns:
            The viewed bytes, without copying them.
        """
        return memoryview(self._buffer)[self._offset : self.end]

    def copy(self) -> "Slice":
        """Returns a new slice viewing the same bytes.

        Returns:
            The copied slice.
        """
        return Slice(self._buffer, self._offset, self._length)

    def __copy__(self) -> "Slice":
        """Shallow copy support, the buffer is never duplicated."""
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "Slice":
        """Deep copy support, the buffer is immutable and is shared."""
        return self.copy()

    def empty(self) -> bool:
        """Tests whether the slice views no byte.

        Returns:
            Whether the slice is empty.
        """
        return self._length == 0

    def __bool__(self) -> bool:
        """Returns whether the slice views at least a byte."""
        return self._length != 0

    def rune_len(self) -> int:
        """Count the runes in the slice.

        This walks the whole slice, use `empty()` to test for emptiness.

        Returns:
            The number of runes.
        """
        return count_runes(self._buffer, self._offset, self._length)

    def __len__(self) -> int:
        """Returns the number of runes in the slice."""
        return self.rune_len()

    def next_rune(self) -> "Slice":
        """Consume the first rune of the slice.

        A truncated trailing rune consumes the rest of the slice.

        Returns:
            A slice viewing the consumed rune.
        """
        if self._length == 0:
            return Slice(self._buffer, self._offset, 0)

        width: int = rune_width(self._buffer[self._offset])
        width = min(width, self._length)
        rune: Final[Slice] = Slice(self._buffer, self._offset, width)
        self._move(self._offset + width, self._length - width)
        return rune

    def runes(self) -> Iterator["Slice"]:
        """Iterate over the runes of the slice, leaving it unchanged.

        Yields:
            A slice viewing each rune in turn.
        """
        cursor: Final[Slice] = self.copy()
        while not cursor.empty():
            yield cursor.next_rune()

    def __iter__(self) -> Iterator["Slice"]:
        """Iterate over the runes of the slice."""
        return self.runes()

    def rune(self) -> Rune | None:
        """Decode the first rune of the slice.

        Returns:
            The decoded rune, or None if the slice is empty or does not start with valid UTF-8.
        """
        return decode_rune(self._buffer, self._offset, self._length)

    def ord(self) -> int:
        """Returns the codepoint of the first rune, or 0 when it cannot be decoded.

        Returns:
            The first codepoint.
        """
        rune: Final[Rune | None] = self.rune()
        return rune.codepoint if rune is not None else 0

    def content_hash(self, algorithm: ContentHash | None = None) -> bytes:
        """Returns the digest of the viewed bytes.

        Args:
            algorithm: The digest algorithm to use.

        Returns:
            The digest of the slice.
        """
        return (algorithm or DEFAULT_CONTENT_HASH).digest(self._buffer, self._offset, self._length)

    def compare(self, other: "Slice", strategy: SearchStrategy | None = None) -> int:
        """Compare the slice to another, lexicographically.

        Args:
            other: The slice to compare to.
            strategy: The search parameters to use, only the chunk width applies.

        Returns:
            A negative value, 0, or a positive value.
        """
        _require_slice(other)
        return compare(self, other, (strategy or DEFAULT_STRATEGY).chunk_width)

    def equals(self, other: "Slice", strategy: SearchStrategy | None = None) -> bool:
        """Tests whether the slice holds the same bytes as another.

        Args:
            other: The slice to compare to.
            strategy: The search parameters to use, only the chunk width applies.

        Returns:
            Whether the slices are equal.
        """
        return self.compare(other, strategy) == 0

    def __eq__(self, other: object) -> bool:
        """Tests the equality between this and another slice."""
        if not isinstance(other, Slice):
            return NotImplemented
        return self.equals(other)

    def __ne__(self, other: object) -> bool:
        """Tests the inequality between this and another slice."""
        if not isinstance(other, Slice):
            return NotImplemented
        return not self.equals(other)

    def __lt__(self, other: object) -> bool:
        """Tests whether the slice sorts before another."""
        if not isinstance(other, Slice):
            return NotImplemented
        return compare(self, other) < 0

    def __le__(self, other: object) -> bool:
        """Tests whether the slice sorts before or with another."""
        if not isinstance(other, Slice):
            return NotImplemented
        return compare(self, other) <= 0

    def __gt__(self, other: object) -> bool:
        """Tests whether the slice sorts after another."""
        if not isinstance(other, Slice):
            return NotImplemented
        return compare(self, other) > 0

    def __ge__(self, other: object) -> bool:
        """Tests whether the slice sorts after or with another."""
        if not isinstance(other, Slice):
            return NotImplemented
        return compare(self, other) >= 0

    __hash__ = None  # type: ignore[assignment]

    def starts_with(self, needle: "Slice", strategy: SearchStrategy | None = None) -> bool:
        """Tests whether the slice starts with the needle.

        Args:
            needle: The slice to look for.
            strategy: The search parameters to use.

        Returns:
            Whether the slice starts with the needle.
        """
        _require_slice(needle)
        if self._length < needle.length:
            return False
        return (strategy or DEFAULT_STRATEGY).region_equals(self, self._offset, needle)

    def ends_with(self, needle: "Slice", strategy: SearchStrategy | None = None) -> bool:
        """Tests whether the slice ends with the needle.

        Args:
            needle: The slice to look for.
            strategy: The search parameters to use.

        Returns:
            Whether the slice ends with the needle.
        """
        _require_slice(needle)
        if self._length < needle.length:
            return False
        return (strategy or DEFAULT_STRATEGY).region_equals(self, self.end - needle.length, needle)

    def beyond(self, needle: "Slice", strategy: SearchStrategy | None = None) -> "Slice":
        """Strip the needle from the start of the slice, if present.

        Args:
            needle: The prefix to strip.
            strategy: The search parameters to use.

        Returns:
            This slice.
        """
        if self.starts_with(needle, strategy):
            self._move(self._offset + needle.length, self._length - needle.length)
        return self

    def until(self, needle: "Slice", strategy: SearchStrategy | None = None) -> "Slice":
        """Strip the needle from the end of the slice, if present.

        Args:
            needle: The suffix to strip.
            strategy: The search parameters to use.

        Returns:
            This slice.
        """
        if self.ends_with(needle, strategy):
            self._move(self._offset, self._length - needle.length)
        return self

    def find(self, needle: "Slice", strategy: SearchStrategy | None = None) -> "Slice":
        """Narrow the slice to start at the first occurrence of the needle.

        If the needle is absent, the slice becomes empty at its end.

        Args:
            needle: The slice to look for.
            strategy: The search parameters to use.

        Returns:
            This slice.
        """
        _require_slice(needle)
        ptr: Final[int] = (strategy or DEFAULT_STRATEGY).forward_find(self, needle)
        return self._move(ptr, self._length - (ptr - self._offset))

    def rfind(self, needle: "Slice", strategy: SearchStrategy | None = None) -> "Slice":
        """Narrow the slice to end with the last occurrence of the needle.

        If the needle is absent, the slice becomes empty at its start.

        Args:
            needle: The slice to look for.
            strategy: The search parameters to use.

        Returns:
            This slice.
        """
        _require_slice(needle)
        ptr: Final[int] = (strategy or DEFAULT_STRATEGY).reverse_find(self, needle)
        return self._move(self._offset, ptr - self._offset)

    def split(self, needle: "Slice", token: "Slice | None" = None, strategy: SearchStrategy | None = None) -> "Slice":
        """Split the slice on the first occurrence of the needle.

        The slice is set to everything after the needle and the token to everything before it.
        If the needle is absent, the token is the whole slice and the slice becomes empty.

        Args:
            needle: The delimiter to split on.
            token: A slice to rewrite with the token, a new one is created otherwise.
            strategy: The search parameters to use.

        Returns:
            The token.
        """
        _require_slice(needle)
        ptr: Final[int] = (strategy or DEFAULT_STRATEGY).forward_find(self, needle)
        token = _rebind(token, self._buffer, self._offset, ptr - self._offset)

        if ptr == self.end:
            self._move(self.end, 0)
        else:
            self._move(ptr + needle.length, self._length - token.length - needle.length)
        return token

    def rsplit(self, needle: "Slice", token: "Slice | None" = None, strategy: SearchStrategy | None = None) -> "Slice":
        """Split the slice on the last occurrence of the needle.

        The slice is set to everything before the needle and the token to everything after it.
        If the needle is absent, the token is the whole slice and the slice becomes empty.

        Args:
            needle: The delimiter to split on.
            token: A slice to rewrite with the token, a new one is created otherwise.
            strategy: The search parameters to use.

        Returns:
            The token.
        """
        _require_slice(needle)
        ptr: Final[int] = (strategy or DEFAULT_STRATEGY).reverse_find(self, needle)
        token = _rebind(token, self._buffer, ptr, self.end - ptr)

        if ptr == self._offset:
            self._move(self._offset, 0)
        else:
            self._move(self._offset, self._length - token.length - needle.length)
        return token

    def count(self, needle: "Slice", strategy: SearchStrategy | None = None) -> int:
        """Count the non-overlapping occurrences of the needle.

        An empty needle has no occurrence.

        Args:
            needle: The slice to count.
            strategy: The search parameters to use.

        Returns:
            The number of occurrences.
        """
        _require_slice(needle)
        if needle.empty():
            return 0

        search: Final[SearchStrategy] = strategy or DEFAULT_STRATEGY
        cursor: Final[Slice] = self.copy()
        occurrences: int = 0
        ptr: int = search.forward_find(cursor, needle) + needle.length
        while ptr <= self.end:
            occurrences += 1
            cursor._move(ptr, self.end - ptr)
            ptr = search.forward_find(cursor, needle) + needle.length
        return occurrences

    def contains(self, needle: "Slice", strategy: SearchStrategy | None = None) -> bool:
        """Tests whether the needle occurs in the slice.

        Args:
            needle: The slice to look for.
            strategy: The search parameters to use.

        Returns:
            Whether the needle was found.
        """
        _require_slice(needle)
        return (strategy or DEFAULT_STRATEGY).reverse_find(self, needle) != self._offset

    def to_string(self) -> bytes:
        """Copy the viewed bytes into a new buffer.

        Returns:
            The copied bytes.
        """
        return transforms.to_string(self)

    def __bytes__(self) -> bytes:
        """Returns a copy of the viewed bytes."""
        return transforms.to_string(self)

    def decode(self, errors: str = "strict") -> str:
        """Decode the viewed bytes as UTF-8.

        Args:
            errors: The codec error handling scheme.

        Returns:
            The decoded text.
        """
        return self.to_string().decode("utf-8", errors)

    def concat(self, other: "Slice") -> bytes:
        """Allocate a buffer holding this slice followed by another.

        Args:
            other: The slice to append.

        Returns:
            The concatenated buffer.
        """
        _require_slice(other)
        return transforms.concat(self, other)

    def join(self, parts: Sequence["Slice"]) -> bytes:
        """Join the parts using this slice as the delimiter.

        Args:
            parts: The slices to join.

        Returns:
            The joined buffer.
        """
        for part in parts:
            _require_slice(part)
        return transforms.join(self, parts)

    def pad_start(self, target_length: int, pad: "Slice") -> bytes:
        """Pad the slice from the left up to a byte length.

        Args:
            target_length: The byte length of the result.
            pad: The slice repeated to fill the remaining space.

        Returns:
            The padded buffer.
        """
        _require_slice(pad)
        return transforms.pad_start(self, target_length, pad)

    def pad_end(self, target_length: int, pad: "Slice") -> bytes:
        """Pad the slice from the right up to a byte length.

        Args:
            target_length: The byte length of the result.
            pad: The slice repeated to fill the remaining space.

        Returns:
            The padded buffer.
        """
        _require_slice(pad)
        return transforms.pad_end(self, target_length, pad)

    def substring(self, begin: int, end: int) -> bytes:
        """Copy the bytes between two offsets of the slice.

        Args:
            begin: The offset of the first byte.
            end: The offset one past the last byte.

        Returns:
            The copied bytes.
        """
        return transforms.substring(self, begin, end)

    def __repr__(self) -> str:
        """Slice representation."""
        return f"Slice({self.to_string()!r}, offset={self._offset}, length={self._length})"

    def __str__(self) -> str:
        """Returns the viewed text, with undecodable bytes escaped."""
        return self.decode("backslashreplace")


def _rebind(token: Slice | None, buffer: bytes, offset: int, length: int) -> Slice:
    """Point the token at a region of the buffer, creating it if needed."""
    if token is None:
        return Slice(buffer, offset, length)
    token._buffer = buffer
    return token._move(offset, length)


def _require_slice(value: object) -> None:
    """Reject an operand that is not a slice."""
    if not isinstance(value, Slice):
        msg = f"Expected a Slice, got {type(value).__name__}"
        raise TypeError(msg)
