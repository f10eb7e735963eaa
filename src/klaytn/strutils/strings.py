"""Buffer level string functions.

These accept `bytes`, `str` (encoded as UTF-8) or a `Slice` wherever a string is expected
and return owned `bytes`, so callers never have to manage views themselves.
"""

from collections.abc import Sequence
from typing import Final

from .core import transforms
from .core.compare import compare as compare_slices
from .core.fixed_word import len_b32, to_slice_b32
from .core.search import SearchStrategy
from .core.slice import Slice

Text = Slice | bytes | str


def to_buffer(value: bytes | str) -> bytes:
    """Returns the buffer of a string value.

    Args:
        value: The string, as bytes or text.

    Returns:
        The UTF-8 buffer of the string.
    """
    if isinstance(value, bytes):
        return value
    if isinstance(value, str):
        return value.encode("utf-8")
    msg = f"Expected bytes or str, got {type(value).__name__}"
    raise TypeError(msg)


def to_slice(value: Text) -> Slice:
    """Returns a slice over a whole string.

    Args:
        value: The string to view, slices are copied.

    Returns:
        A slice starting at offset 0 and covering the whole buffer.
    """
    if isinstance(value, Slice):
        return value.copy()
    return Slice(to_buffer(value))


def length(value: Text) -> int:
    """Count the runes of a string.

    Args:
        value: The string to measure.

    Returns:
        The number of runes.
    """
    return to_slice(value).rune_len()


def compare(a: Text, b: Text) -> int:
    """Compare two strings lexicographically.

    Args:
        a: The first string.
        b: The second string.

    Returns:
        A negative value, 0, or a positive value.
    """
    return compare_slices(to_slice(a), to_slice(b))


def equals(a: Text, b: Text) -> bool:
    """Tests whether two strings hold the same bytes.

    Args:
        a: The first string.
        b: The second string.

    Returns:
        Whether the strings are equal.
    """
    return compare(a, b) == 0


def find(value: Text, needle: Text, strategy: SearchStrategy | None = None) -> bytes:
    """Returns the string from the first occurrence of the needle onward.

    Args:
        value: The string to search in.
        needle: The string to look for.
        strategy: The search parameters to use.

    Returns:
        The matching tail, empty if the needle is absent.
    """
    return to_slice(value).find(to_slice(needle), strategy).to_string()


def rfind(value: Text, needle: Text, strategy: SearchStrategy | None = None) -> bytes:
    """Returns the string up to the end of the last occurrence of the needle.

    Args:
        value: The string to search in.
        needle: The string to look for.
        strategy: The search parameters to use.

    Returns:
        The matching head, empty if the needle is absent.
    """
    return to_slice(value).rfind(to_slice(needle), strategy).to_string()


def count(value: Text, needle: Text, strategy: SearchStrategy | None = None) -> int:
    """Count the non-overlapping occurrences of the needle.

    Args:
        value: The string to search in.
        needle: The string to count.
        strategy: The search parameters to use.

    Returns:
        The number of occurrences, 0 for an empty needle.
    """
    return to_slice(value).count(to_slice(needle), strategy)


def contains(value: Text, needle: Text, strategy: SearchStrategy | None = None) -> bool:
    """Tests whether the needle occurs in the string.

    Args:
        value: The string to search in.
        needle: The string to look for.
        strategy: The search parameters to use.

    Returns:
        Whether the needle was found.
    """
    return to_slice(value).contains(to_slice(needle), strategy)


def split(value: Text, needle: Text, strategy: SearchStrategy | None = None) -> list[bytes]:
    """Split a string on every occurrence of the needle.

    Consecutive delimiters produce empty tokens. An empty delimiter never splits.

    Args:
        value: The string to split.
        needle: The delimiter.
        strategy: The search parameters to use.

    Returns:
        The `count(value, needle) + 1` tokens.
    """
    remainder: Final[Slice] = to_slice(value)
    delimiter: Final[Slice] = to_slice(needle)
    token: Final[Slice] = remainder.copy()
    if delimiter.empty():
        return [remainder.to_string()]

    tokens: Final[list[bytes]] = []
    for _ in range(remainder.count(delimiter, strategy) + 1):
        tokens.append(remainder.split(delimiter, token, strategy).to_string())
    return tokens


def concat(a: Text, b: Text) -> bytes:
    """Concatenate two strings.

    Args:
        a: The first string.
        b: The second string.

    Returns:
        The concatenated buffer.
    """
    return transforms.concat(to_slice(a), to_slice(b))


def join(delimiter: Text, parts: Sequence[Text]) -> bytes:
    """Join strings with a delimiter.

    Args:
        delimiter: The string inserted between parts.
        parts: The strings to join.

    Returns:
        The joined buffer.
    """
    return transforms.join(to_slice(delimiter), [to_slice(part) for part in parts])


def join_with(parts: Sequence[Text], delimiter: Text) -> bytes:
    """Join strings with a delimiter, taking the parts first.

    Args:
        parts: The strings to join.
        delimiter: The string inserted between parts.

    Returns:
        The joined buffer.
    """
    return join(delimiter, parts)


def pad_start(value: Text, target_length: int, pad: Text) -> bytes:
    """Pad a string from the left up to a byte length.

    Args:
        value: The string to pad.
        target_length: The byte length of the result.
        pad: The string repeated to fill the remaining space.

    Returns:
        The padded buffer.
    """
    return transforms.pad_start(to_slice(value), target_length, to_slice(pad))


def pad_end(value: Text, target_length: int, pad: Text) -> bytes:
    """Pad a string from the right up to a byte length.

    Args:
        value: The string to pad.
        target_length: The byte length of the result.
        pad: The string repeated to fill the remaining space.

    Returns:
        The padded buffer.
    """
    return transforms.pad_end(to_slice(value), target_length, to_slice(pad))


def substring(value: Text, begin: int, end: int) -> bytes:
    """Copy the bytes of a string between two offsets.

    Args:
        value: The string to copy from.
        begin: The offset of the first byte.
        end: The offset one past the last byte.

    Returns:
        The copied bytes.
    """
    return transforms.substring(to_slice(value), begin, end)


def from_word(word: bytes | int) -> bytes:
    """Returns the string held by a 32-byte word.

    Args:
        word: The word, as 32 bytes or as an unsigned integer.

    Returns:
        The string, without its trailing NUL padding.
    """
    return to_slice_b32(word).to_string()


def word_length(word: bytes | int) -> int:
    """Returns the byte length of the string held by a 32-byte word.

    Args:
        word: The word, as 32 bytes or as an unsigned integer.

    Returns:
        The number of bytes before the trailing NUL padding.
    """
    return len_b32(word)
