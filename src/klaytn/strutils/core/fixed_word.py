"""Short strings stored in a fixed 32-byte word, padded with NUL bytes."""

from typing import Final

from .slice import Slice

FIXED_WORD_SIZE: Final[int] = 32


def _as_word(word: bytes | int) -> bytes:
    """Returns the 32 bytes of a word given as bytes or as an unsigned integer."""
    if isinstance(word, int):
        if word < 0 or word.bit_length() > 8 * FIXED_WORD_SIZE:
            msg = f"Integer does not fit a {FIXED_WORD_SIZE} bytes word"
            raise ValueError(msg)
        return word.to_bytes(FIXED_WORD_SIZE, "big")
    if len(word) != FIXED_WORD_SIZE:
        msg = f"Expected a {FIXED_WORD_SIZE} bytes word, got {len(word)} bytes"
        raise ValueError(msg)
    return word


def len_b32(word: bytes | int) -> int:
    """Returns the length of the string held by a word.

    Args:
        word: The word, as 32 bytes or as an unsigned integer.

    Returns:
        The number of bytes before the trailing NUL padding.
    """
    return len(_as_word(word).rstrip(b"\x00"))


def to_slice_b32(word: bytes | int) -> Slice:
    """Returns a slice over the string held by a word.

    Args:
        word: The word, as 32 bytes or as an unsigned integer.

    Returns:
        A slice viewing the string, without its trailing NUL padding.
    """
    data: Final[bytes] = _as_word(word)
    return Slice(data, 0, len_b32(data))
