"""Forward and reverse substring search over slices.

Needles that fit in a single chunk are compared chunk against chunk at each candidate
position. Longer needles are hashed once and compared digest against digest. Both scans
visit positions in the same order and first accept a candidate that aliases the needle.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .chunk import CHUNK_WIDTH, read_chunk
from .content_hash import DEFAULT_CONTENT_HASH, ContentHash

if TYPE_CHECKING:
    from .slice import Slice

logger: Final[logging.Logger] = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchStrategy:
    """Tunable parameters of the search engine."""

    chunk_width: int = CHUNK_WIDTH
    algorithm: ContentHash = DEFAULT_CONTENT_HASH

    def __post_init__(self) -> None:
        """Validate the search parameters."""
        if self.chunk_width <= 0:
            msg = f"Invalid chunk width: {self.chunk_width}"
            raise ValueError(msg)

    def uses_hash(self, needle: "Slice") -> bool:
        """Returns whether the needle is compared by content hash.

        Args:
            needle: The needle to search for.

        Returns:
            Whether the needle is longer than a chunk.
        """
        return needle.length > self.chunk_width

    def forward_find(self, haystack: "Slice", needle: "Slice") -> int:
        """Locate the first occurrence of the needle.

        Args:
            haystack: The slice to search in.
            needle: The slice to search for.

        Returns:
            The buffer offset of the match, or the end of the haystack if absent.
        """
        start: Final[int] = haystack.offset
        end: Final[int] = haystack.offset + haystack.length
        if needle.length > haystack.length:
            return end

        last: Final[int] = end - needle.length
        data: Final[bytes] = haystack.buffer

        if self.uses_hash(needle):
            logger.debug(f"Forward search of {needle.length} bytes by content hash")
            expected: Final[bytes] = needle.content_hash(self.algorithm)
            for ptr in range(start, last + 1):
                if _aliases(haystack, needle, ptr):
                    return ptr
                if self.algorithm.digest(data, ptr, needle.length) == expected:
                    return ptr
            return end

        needle_chunk: Final[int] = read_chunk(needle.buffer, needle.offset, needle.length, self.chunk_width)
        for ptr in range(start, last + 1):
            if _aliases(haystack, needle, ptr):
                return ptr
            if read_chunk(data, ptr, needle.length, self.chunk_width) == needle_chunk:
                return ptr
        return end

    def reverse_find(self, haystack: "Slice", needle: "Slice") -> int:
        """Locate the last occurrence of the needle.

        Args:
            haystack: The slice to search in.
            needle: The slice to search for.

        Returns:
            The buffer offset one past the end of the match, or the start of the haystack if absent.
        """
        start: Final[int] = haystack.offset
        if needle.length > haystack.length:
            return start

        last: Final[int] = haystack.offset + haystack.length - needle.length
        data: Final[bytes] = haystack.buffer

        if self.uses_hash(needle):
            logger.debug(f"Reverse search of {needle.length} bytes by content hash")
            expected: Final[bytes] = needle.content_hash(self.algorithm)
            for ptr in range(last, start - 1, -1):
                if _aliases(haystack, needle, ptr):
                    return ptr + needle.length
                if self.algorithm.digest(data, ptr, needle.length) == expected:
                    return ptr + needle.length
            return start

        needle_chunk: Final[int] = read_chunk(needle.buffer, needle.offset, needle.length, self.chunk_width)
        for ptr in range(last, start - 1, -1):
            if _aliases(haystack, needle, ptr):
                return ptr + needle.length
            if read_chunk(data, ptr, needle.length, self.chunk_width) == needle_chunk:
                return ptr + needle.length
        return start

    def region_equals(self, haystack: "Slice", offset: int, needle: "Slice") -> bool:
        """Tests whether the haystack holds the needle at a given buffer offset.

        Args:
            haystack: The slice holding the region.
            offset: The buffer offset of the region.
            needle: The slice to compare the region to.

        Returns:
            Whether the region and the needle are equal.
        """
        if _aliases(haystack, needle, offset):
            return True
        return self.algorithm.digest(haystack.buffer, offset, needle.length) == needle.content_hash(self.algorithm)


def _aliases(haystack: "Slice", needle: "Slice", offset: int) -> bool:
    """Tests whether the needle views the haystack's buffer at the given offset."""
    return needle.buffer is haystack.buffer and needle.offset == offset


DEFAULT_STRATEGY: Final[SearchStrategy] = SearchStrategy()
