"""Content digests of byte ranges."""

from enum import StrEnum, auto
from hashlib import blake2b, sha3_256, sha256, sha512
from typing import Final


class ContentHash(StrEnum):
    """Digest algorithms available to compare byte ranges."""

    SHA256 = auto()
    SHA3_256 = auto()
    SHA512 = auto()
    BLAKE2B = auto()

    def digest(self, data: bytes, offset: int = 0, size: int | None = None) -> bytes:
        """Compute the digest of a byte range.

        Args:
            data: The buffer holding the range.
            offset: The offset at which the range starts.
            size: The size of the range, defaults to the rest of the buffer.

        Returns:
            The digest of exactly the selected bytes.
        """
        end: Final[int] = len(data) if size is None else offset + size
        region: Final[memoryview] = memoryview(data)[offset:end]

        match self:
            case ContentHash.SHA256:
                return sha256(region).digest()
            case ContentHash.SHA3_256:
                return sha3_256(region).digest()
            case ContentHash.SHA512:
                return sha512(region).digest()
            case ContentHash.BLAKE2B:
                return blake2b(region).digest()


DEFAULT_CONTENT_HASH: Final[ContentHash] = ContentHash.SHA3_256
