"""Unpacker for packed buffers.

This module provides the unpack() function that splits a packed buffer back
into its original buffers, and read_layout() for inspecting one without
copying payloads.
"""

from __future__ import annotations

import logging

from ..exceptions import MalformedHeaderError, TrailingDataError, TruncatedPayloadError
from ..models.layout import PackedLayout
from ..utils.buffers import BufferLike, as_byte_view, find_delimiter, slice_buffer
from .header import decode_header

logger = logging.getLogger(__name__)


def read_layout(buffer: BufferLike) -> PackedLayout:
    """Parse the header of a packed buffer.

    Args:
        buffer: Something generated by ``pack()``

    Returns:
        Layout describing each payload's position

    Raises:
        MalformedHeaderError: If there is no 0x00 header delimiter
        InvalidLengthTokenError: If a header token is not a valid length
        TruncatedPayloadError: If the lengths need more bytes than the buffer has
    """
    view = as_byte_view(buffer)

    delimiter_index = find_delimiter(view)
    if delimiter_index < 0:
        logger.debug("No header delimiter in %d-byte buffer", len(view))
        raise MalformedHeaderError(
            f"No 0x00 header delimiter found in {len(view)}-byte buffer"
        )

    lengths = decode_header(view, delimiter_index)

    header_length = delimiter_index + 1
    expected = header_length + sum(lengths)
    if expected > len(view):
        logger.debug("Header claims %d bytes, buffer has %d", expected, len(view))
        raise TruncatedPayloadError(
            f"Header claims {expected} bytes for {len(lengths)} buffers, "
            f"but only {len(view)} bytes are available",
            expected=expected,
            available=len(view),
        )

    return PackedLayout(lengths=lengths, header_length=header_length, total_length=len(view))


def unpack(buffer: BufferLike, *, allow_trailing: bool = True) -> list[bytes]:
    """Split a packed buffer back into its original buffers.

    Args:
        buffer: Something generated by ``pack()``
        allow_trailing: If False, reject bytes after the last payload

    Returns:
        Unpacked buffers, in their original order

    Raises:
        MalformedHeaderError: If there is no 0x00 header delimiter
        InvalidLengthTokenError: If a header token is not a valid length
        TruncatedPayloadError: If the lengths need more bytes than the buffer has
        TrailingDataError: If ``allow_trailing`` is False and extra bytes remain

    Example:
        >>> unpack(b"3,2\\x00\\x01\\x02\\x03\\x04\\x05")
        [b'\\x01\\x02\\x03', b'\\x04\\x05']
    """
    view = as_byte_view(buffer)
    layout = read_layout(view)

    if not allow_trailing and layout.trailing_length:
        logger.debug("%d trailing bytes after %d buffers", layout.trailing_length, layout.count)
        raise TrailingDataError(
            f"{layout.trailing_length} unexpected bytes after the last buffer"
        )

    buffers = [slice_buffer(view, start, end) for start, end in layout.offsets()]
    logger.debug("Unpacked %d buffers from %d bytes", len(buffers), len(view))
    return buffers
