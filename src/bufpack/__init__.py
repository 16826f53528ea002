"""bufpack: Packed Buffer Sequences

A Python library for combining an ordered sequence of opaque byte buffers into
one self-describing buffer, and splitting it back apart, with no external schema
or out-of-band length information.

Wire format:
    <len_0>,<len_1>,...,<len_n-1> 0x00 <buffer_0><buffer_1>...<buffer_n-1>

Key Features:
- Accepts any buffer-protocol object (bytes, bytearray, memoryview, array)
- Typed errors naming the stage that failed
- Header inspection without copying payloads
- Pure Python, no native dependencies

Quick Start:
    >>> from bufpack import pack, unpack
    >>>
    >>> packed = pack([b"\\x01\\x02\\x03", b"\\x04\\x05"])
    >>> packed
    b'3,2\\x00\\x01\\x02\\x03\\x04\\x05'
    >>> unpack(packed)
    [b'\\x01\\x02\\x03', b'\\x04\\x05']
"""

from __future__ import annotations

from .codec import decode_header, encode_header, pack, read_layout, unpack
from .exceptions import (
    BufpackError,
    InvalidLengthTokenError,
    MalformedHeaderError,
    OutOfBoundsSliceError,
    TrailingDataError,
    TruncatedPayloadError,
    UnpackError,
)
from .models import PackedLayout
from .utils import header_length, packed_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "pack",
    "unpack",
    "read_layout",
    "PackedLayout",
    # Header codec
    "encode_header",
    "decode_header",
    # Exceptions
    "BufpackError",
    "UnpackError",
    "MalformedHeaderError",
    "InvalidLengthTokenError",
    "TruncatedPayloadError",
    "TrailingDataError",
    "OutOfBoundsSliceError",
    # Sizing
    "header_length",
    "packed_size",
    # Version
    "__version__",
]
