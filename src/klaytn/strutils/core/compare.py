"""Lexicographic comparison of slices."""

from typing import TYPE_CHECKING, Final

from .chunk import CHUNK_WIDTH, read_chunk

if TYPE_CHECKING:
    from .slice import Slice


def compare(a: "Slice", b: "Slice", chunk_width: int = CHUNK_WIDTH) -> int:
    """Compare two slices byte by byte, one chunk at a time.

    Args:
        a: The first slice.
        b: The second slice.
        chunk_width: The number of bytes compared at once.

    Returns:
        A negative value if `a` sorts first, a positive one if `b` does, 0 if they are equal.
    """
    shortest: Final[int] = min(a.length, b.length)
    for idx in range(0, shortest, chunk_width):
        size: int = min(chunk_width, shortest - idx)
        chunk_a: int = read_chunk(a.buffer, a.offset + idx, size, chunk_width)
        chunk_b: int = read_chunk(b.buffer, b.offset + idx, size, chunk_width)
        if chunk_a != chunk_b:
            return chunk_a - chunk_b
    return a.length - b.length


def equals(a: "Slice", b: "Slice") -> bool:
    """Tests whether two slices hold the same bytes.

    Args:
        a: The first slice.
        b: The second slice.

    Returns:
        Whether the two slices are equal.
    """
    return compare(a, b) == 0
