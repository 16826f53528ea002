"""Packed size calculation utilities.

This module provides functions to calculate the size of a packed buffer
without actually packing it.
"""

from __future__ import annotations

from typing import Iterable, Sequence

from .buffers import BufferLike, byte_length


def header_length(lengths: Sequence[int]) -> int:
    """Calculate the encoded header size in bytes, including the delimiter.

    Args:
        lengths: Payload byte lengths, in order

    Returns:
        Number of header bytes

    Example:
        >>> header_length([3, 2])
        4  # "3,2" + delimiter
        >>> header_length([])
        1  # delimiter only
    """
    digits = sum(len(str(length)) for length in lengths)
    commas = max(len(lengths) - 1, 0)
    return digits + commas + 1


def packed_size(buffers: Iterable[BufferLike]) -> int:
    """Calculate the size of ``pack(buffers)`` in bytes.

    Example:
        >>> packed_size([b"\\x01\\x02\\x03", b"\\x04\\x05"])
        9
    """
    lengths = [byte_length(buffer) for buffer in buffers]
    return header_length(lengths) + sum(lengths)
