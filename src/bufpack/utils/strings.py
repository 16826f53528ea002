"""Single-byte text codec for packed headers.

Header text must map one character to exactly one byte so that the decoded
character count and the encoded byte count agree. ASCII is the only encoding
used; anything outside it is rejected rather than replaced.
"""

from __future__ import annotations


class SmallTextCodec:
    """Strict one-byte-per-character text codec.

    Example:
        >>> small.encode("3,2")
        b'3,2'
        >>> small.decode(b"3,2")
        '3,2'
    """

    encoding = "ascii"

    def encode(self, text: str) -> bytes:
        """Encode text, raising UnicodeEncodeError on non-ASCII characters."""
        return text.encode(self.encoding, errors="strict")

    def decode(self, data: bytes | bytearray | memoryview) -> str:
        """Decode bytes, raising UnicodeDecodeError on bytes above 0x7F."""
        return bytes(data).decode(self.encoding, errors="strict")


small = SmallTextCodec()
