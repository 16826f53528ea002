"""Utility functions for bufpack.

This module provides raw buffer helpers, the header text codec, and size calculation.
"""

from __future__ import annotations

from .buffers import (
    BufferLike,
    as_byte_view,
    byte_length,
    find_delimiter,
    join_buffers,
    slice_buffer,
)
from .sizing import header_length, packed_size
from .strings import SmallTextCodec, small

__all__ = [
    # Buffer helpers
    "BufferLike",
    "as_byte_view",
    "byte_length",
    "find_delimiter",
    "join_buffers",
    "slice_buffer",
    # Text codec
    "SmallTextCodec",
    "small",
    # Sizing functions
    "header_length",
    "packed_size",
]
