"""Packing and unpacking of buffer sequences."""

from __future__ import annotations

from .decoder import read_layout, unpack
from .encoder import pack
from .header import decode_header, encode_header

__all__ = ["pack", "unpack", "read_layout", "encode_header", "decode_header"]
