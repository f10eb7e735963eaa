"""Transforms allocating a new buffer from one or more slices."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .slice import Slice

logger: Final[logging.Logger] = logging.getLogger(__name__)


def to_string(value: "Slice") -> bytes:
    """Copy the bytes viewed by a slice into a new buffer.

    Args:
        value: The slice to copy.

    Returns:
        A buffer holding exactly the viewed bytes.
    """
    return value.buffer[value.offset : value.offset + value.length]


def concat(a: "Slice", b: "Slice") -> bytes:
    """Allocate a buffer holding two slices back to back.

    Args:
        a: The first slice.
        b: The second slice.

    Returns:
        The concatenated buffer.
    """
    ret: Final[bytearray] = bytearray(a.length + b.length)
    ret[: a.length] = a.view()
    ret[a.length :] = b.view()
    return bytes(ret)


def join(delimiter: "Slice", parts: Sequence["Slice"]) -> bytes:
    """Allocate a buffer holding the parts with the delimiter between each of them.

    Args:
        delimiter: The slice to insert between parts.
        parts: The slices to join.

    Returns:
        The joined buffer.
    """
    if len(parts) == 0:
        return b""

    size: Final[int] = sum(part.length for part in parts) + delimiter.length * (len(parts) - 1)
    logger.debug(f"Joining {len(parts)} parts into {size} bytes")

    ret: Final[bytearray] = bytearray(size)
    ptr: int = 0
    for idx, part in enumerate(parts):
        if idx > 0:
            ret[ptr : ptr + delimiter.length] = delimiter.view()
            ptr += delimiter.length
        ret[ptr : ptr + part.length] = part.view()
        ptr += part.length
    return bytes(ret)


def _tile(pad: "Slice", size: int) -> bytes:
    """Repeat the pad until it fills exactly `size` bytes."""
    unit: Final[bytes] = to_string(pad)
    return (unit * (size // len(unit) + 1))[:size]


def pad_start(value: "Slice", target_length: int, pad: "Slice") -> bytes:
    """Pad a slice from the left up to a target length.

    Args:
        value: The slice to pad.
        target_length: The byte length of the result.
        pad: The slice repeated to fill the remaining space.

    Returns:
        The padded buffer, or a copy of the slice when it is already long enough.
    """
    if target_length < 0:
        msg = f"Invalid target length: {target_length}"
        raise ValueError(msg)
    if value.length >= target_length or pad.empty():
        return to_string(value)

    fill: Final[int] = target_length - value.length
    logger.debug(f"Padding {value.length} bytes to {target_length} from the start")

    ret: Final[bytearray] = bytearray(target_length)
    ret[:fill] = _tile(pad, fill)
    ret[fill:] = value.view()
    return bytes(ret)


def pad_end(value: "Slice", target_length: int, pad: "Slice") -> bytes:
    """Pad a slice from the right up to a target length.

    Args:
        value: The slice to pad.
        target_length: The byte length of the result.
        pad: The slice repeated to fill the remaining space.

    Returns:
        The padded buffer, or a copy of the slice when it is already long enough.
    """
    if target_length < 0:
        msg = f"Invalid target length: {target_length}"
        raise ValueError(msg)
    if value.length >= target_length or pad.empty():
        return to_string(value)

    fill: Final[int] = target_length - value.length
    logger.debug(f"Padding {value.length} bytes to {target_length} from the end")

    ret: Final[bytearray] = bytearray(target_length)
    ret[: value.length] = value.view()
    ret[value.length :] = _tile(pad, fill)
    return bytes(ret)


def substring(value: "Slice", begin: int, end: int) -> bytes:
    """Copy the bytes between two offsets of a slice.

    Out of range offsets are clamped and reversed offsets are swapped, nothing is rejected.

    Args:
        value: The slice to copy from.
        begin: The offset of the first byte, relative to the slice.
        end: The offset one past the last byte, relative to the slice.

    Returns:
        The copied bytes.
    """
    begin = max(begin, 0)
    end = max(end, 0)
    if end > value.length - 1:
        end = value.length
    begin = min(begin, value.length)
    if begin > end:
        logger.debug(f"Swapping substring bounds {begin} and {end}")
        begin, end = end, begin
    if begin == end:
        return b""
    return value.buffer[value.offset + begin : value.offset + end]
