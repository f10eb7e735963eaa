"""UTF-8 rune classification and decoding."""

from dataclasses import dataclass
from typing import Final

CONTINUATION_MASK: Final[int] = 0xC0
CONTINUATION_TAG: Final[int] = 0x80
CONTINUATION_BITS: Final[int] = 0x3F


@dataclass(frozen=True)
class Rune:
    """A decoded codepoint and the number of bytes it was encoded with."""

    codepoint: int
    width: int


def rune_width(lead: int) -> int:
    """Classify a lead byte by its high bits.

    Lead bytes from 0xF8 upward are counted as 5 and 6 bytes wide, as legacy UTF-8 did.

    Args:
        lead: The lead byte of the rune.

    Returns:
        The width of the rune, in bytes.
    """
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    if lead < 0xF8:
        return 4
    if lead < 0xFC:
        return 5
    return 6


def count_runes(data: bytes, offset: int, size: int) -> int:
    """Count the runes of a byte range.

    Args:
        data: The buffer holding the range.
        offset: The offset at which the range starts.
        size: The size of the range.

    Returns:
        The number of runes, a truncated trailing rune counting as one.
    """
    end: Final[int] = offset + size
    ptr: int = offset
    count: int = 0
    while ptr < end:
        ptr += rune_width(data[ptr])
        count += 1
    return count


def decode_rune(data: bytes, offset: int, size: int) -> Rune | None:
    """Decode the first rune of a byte range.

    Args:
        data: The buffer holding the range.
        offset: The offset at which the range starts.
        size: The size of the range.

    Returns:
        The decoded rune, or None if the range is empty, truncated or malformed.
    """
    if size == 0:
        return None

    lead: Final[int] = data[offset]
    codepoint: int
    width: int
    if lead < 0x80:
        codepoint, width = lead, 1
    elif lead < 0xE0:
        codepoint, width = lead & 0x1F, 2
    elif lead < 0xF0:
        codepoint, width = lead & 0x0F, 3
    else:
        codepoint, width = lead & 0x07, 4

    if width > size:
        return None

    for continuation in data[offset + 1 : offset + width]:
        if continuation & CONTINUATION_MASK != CONTINUATION_TAG:
            return None
        codepoint = (codepoint << 6) | (continuation & CONTINUATION_BITS)
    return Rune(codepoint, width)
