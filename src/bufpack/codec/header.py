"""Length header encoding.

The header is the comma-separated decimal byte length of every payload,
terminated by a single 0x00 byte:

    b"3,2\\x00"   two payloads of 3 and 2 bytes
    b"0\\x00"     one empty payload
    b"\\x00"      no payloads
"""

from __future__ import annotations

import logging
from typing import Sequence

from ..exceptions import InvalidLengthTokenError, OutOfBoundsSliceError
from ..utils.buffers import BufferLike, as_byte_view
from ..utils.strings import small

SEPARATOR = ","
DELIMITER_TEXT = "\0"

logger = logging.getLogger(__name__)


def encode_header(lengths: Sequence[int]) -> bytes:
    """Encode payload lengths as a delimited header.

    Args:
        lengths: Non-negative payload byte lengths, in payload order

    Returns:
        Header bytes, delimiter included

    Raises:
        ValueError: If any length is negative

    Example:
        >>> encode_header([3, 2])
        b'3,2\\x00'
    """
    for length in lengths:
        if length < 0:
            raise ValueError(f"Buffer length must be >= 0, got {length}")

    text = SEPARATOR.join(str(length) for length in lengths)
    return small.encode(text + DELIMITER_TEXT)


def _invalid_token(message: str, token: str, index: int) -> InvalidLengthTokenError:
    logger.debug("Rejecting length token at position %d (%d chars)", index, len(token))
    return InvalidLengthTokenError(message, token=token, index=index)


def _parse_length(token: str, index: int, max_digits: int) -> int:
    # int() alone would accept "+1", " 1", "1_0" and non-ASCII digits
    if not (token.isascii() and token.isdigit()):
        raise _invalid_token(f"Invalid length token {token!r} at position {index}", token, index)

    # A length with more significant digits than the buffer size can never fit
    if len(token.lstrip("0")) > max_digits:
        raise _invalid_token(
            f"Length token at position {index} has {len(token)} digits, "
            f"longer than any length the buffer can hold",
            token,
            index,
        )

    try:
        return int(token, 10)
    except ValueError as e:
        raise _invalid_token(
            f"Invalid length token at position {index}: {e}", token, index
        ) from e


def decode_header(buffer: BufferLike, delimiter_index: int) -> list[int]:
    """Decode the payload lengths held in ``buffer[:delimiter_index]``.

    An empty header means zero payloads and decodes to ``[]``; it is handled
    before splitting because ``"".split(",")`` yields one empty token.

    Args:
        buffer: Packed buffer
        delimiter_index: Index of the header delimiter

    Returns:
        Payload byte lengths, in payload order

    Raises:
        InvalidLengthTokenError: If the header is not ASCII or a token is not
            a non-negative base-10 integer that could fit in the buffer
        OutOfBoundsSliceError: If ``delimiter_index`` is not inside the buffer
    """
    view = as_byte_view(buffer)
    if not 0 <= delimiter_index < len(view):
        raise OutOfBoundsSliceError(
            f"Delimiter index {delimiter_index} outside buffer of {len(view)} bytes"
        )

    try:
        text = small.decode(view[:delimiter_index])
    except UnicodeDecodeError as e:
        logger.debug("Header bytes before offset %d are not ASCII", delimiter_index)
        raise InvalidLengthTokenError(f"Header is not ASCII text: {e}") from e

    if not text:
        return []

    max_digits = len(str(len(view)))
    return [
        _parse_length(token, index, max_digits)
        for index, token in enumerate(text.split(SEPARATOR))
    ]
