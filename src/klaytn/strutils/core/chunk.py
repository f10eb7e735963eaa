"""Fixed-width chunk reads used by comparison and short-needle search."""

from typing import Final

CHUNK_WIDTH: Final[int] = 32


def read_chunk(data: bytes, offset: int, size: int, width: int = CHUNK_WIDTH) -> int:
    """Read a big-endian chunk of the specified width, keeping only its first bytes.

    Bytes past `size` are masked off, so two chunks compare equal exactly when
    their first `size` bytes are equal.

    Args:
        data: The buffer to read the chunk from.
        offset: The offset in the buffer at which the chunk starts.
        size: The number of significant bytes in the chunk.
        width: The width of the chunk, in bytes.

    Returns:
        The masked chunk as an unsigned integer.
    """
    significant: Final[int] = min(size, width)
    value: Final[int] = int.from_bytes(data[offset : offset + significant], "big")
    return value << (8 * (width - significant))
