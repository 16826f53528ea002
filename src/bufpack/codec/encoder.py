"""Packer for sequences of byte buffers.

This module provides the pack() function that combines buffers into a single
self-describing packed buffer.
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..utils.buffers import BufferLike, byte_length, join_buffers
from .header import encode_header

logger = logging.getLogger(__name__)


def pack(buffers: Sequence[BufferLike]) -> bytes:
    """Combine buffers into one packed buffer.

    The packed layout is:
    - [Comma-separated decimal lengths] [0x00] [Buffer 0] [Buffer 1] ...

    Inputs are neither modified nor retained. Arrays with elements wider than
    one byte are packed as their raw, native-endian bytes.

    Args:
        buffers: Buffers to combine, in order

    Returns:
        New packed buffer

    Raises:
        TypeError: If an item does not implement the buffer protocol

    Example:
        >>> pack([b"\\x01\\x02\\x03", b"\\x04\\x05"])
        b'3,2\\x00\\x01\\x02\\x03\\x04\\x05'
    """
    lengths = [byte_length(buffer) for buffer in buffers]
    header = encode_header(lengths)

    packed = join_buffers([header, *buffers])
    logger.debug(
        "Packed %d buffers (%d payload bytes, %d header bytes)",
        len(lengths),
        sum(lengths),
        len(header),
    )
    return packed
