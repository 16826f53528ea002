"""Low-level byte buffer helpers.

These helpers treat every input as raw bytes. Anything implementing the
buffer protocol is accepted (bytes, bytearray, memoryview, array.array, ...);
results are always new, independent ``bytes`` objects.
"""

from __future__ import annotations

from array import array
from typing import Iterable, Union

from ..exceptions import OutOfBoundsSliceError

BufferLike = Union[bytes, bytearray, memoryview, "array[int]"]

DELIMITER = 0x00

# Bytes copied per step when scanning a non-bytes buffer for the delimiter
SCAN_CHUNK_SIZE = 4096


def as_byte_view(buffer: BufferLike) -> memoryview:
    """Reinterpret a buffer as a flat, read-only view of unsigned bytes.

    Wide-element arrays (e.g. ``array("H")`` or ``array("I")``) are not
    converted element by element: the view exposes their backing storage
    exactly as stored, in native byte order.

    Args:
        buffer: Any object implementing the buffer protocol

    Returns:
        Read-only memoryview with format ``"B"`` and ``len()`` equal to the
        buffer's byte length

    Raises:
        TypeError: If ``buffer`` does not implement the buffer protocol

    Example:
        >>> view = as_byte_view(array("H", [1]))
        >>> view.nbytes
        2
    """
    view = memoryview(buffer)
    if not view.c_contiguous:
        # cast() needs contiguous memory; tobytes() copies in C order
        view = memoryview(view.tobytes())
    if view.format != "B" or view.ndim != 1:
        view = view.cast("B")
    return view.toreadonly()


def byte_length(buffer: BufferLike) -> int:
    """Return the size of a buffer in bytes, regardless of element width."""
    return memoryview(buffer).nbytes


def find_delimiter(buffer: BufferLike) -> int:
    """Return the index of the first 0x00 byte, or -1 if there is none.

    Scanning stops at the first match; 0x00 bytes later in the buffer
    (inside payloads) are never considered.
    """
    if isinstance(buffer, (bytes, bytearray)):
        return buffer.find(DELIMITER)

    view = as_byte_view(buffer)
    for start in range(0, len(view), SCAN_CHUNK_SIZE):
        index = view[start : start + SCAN_CHUNK_SIZE].tobytes().find(DELIMITER)
        if index >= 0:
            return start + index
    return -1


def slice_buffer(buffer: BufferLike, start: int, end: int) -> bytes:
    """Copy bytes ``[start, end)`` out of a buffer.

    Args:
        buffer: Source buffer
        start: Zero-based start index (inclusive)
        end: End index (exclusive)

    Returns:
        New bytes object holding a copy of the range

    Raises:
        OutOfBoundsSliceError: If ``0 <= start <= end <= len(buffer)`` does not hold
    """
    view = as_byte_view(buffer)
    if not 0 <= start <= end <= len(view):
        raise OutOfBoundsSliceError(
            f"Slice [{start}, {end}) outside buffer of {len(view)} bytes"
        )
    return view[start:end].tobytes()


def join_buffers(buffers: Iterable[BufferLike]) -> bytes:
    """Copy buffers, in order, into one newly allocated buffer.

    Each input occupies the region ``[offset(i), offset(i) + len(i))`` of the
    result, where offsets accumulate input byte lengths starting at 0.

    Example:
        >>> join_buffers([b"ab", bytearray(b"c"), memoryview(b"de")])
        b'abcde'
    """
    views = [as_byte_view(buffer) for buffer in buffers]
    size = sum(len(view) for view in views)
    result = bytearray(size)

    cursor = 0
    for view in views:
        end = cursor + len(view)
        result[cursor:end] = view
        cursor = end

    return bytes(result)
