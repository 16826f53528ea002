"""Exception hierarchy for bufpack.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BufpackError for easy catching of any bufpack-specific error.
"""

from __future__ import annotations


class BufpackError(Exception):
    """Base exception for all bufpack errors.

    Subclasses that set ``stage`` get it prefixed to their message.
    """

    stage: str = ""

    def __init__(self, message: str) -> None:
        super().__init__(f"[{self.stage}] {message}" if self.stage else message)


class UnpackError(BufpackError):
    """Raised when a packed buffer cannot be split back into its payloads.

    The ``stage`` attribute names the step that failed:

        - ``"header"``: locating the header delimiter
        - ``"lengths"``: parsing the comma-separated length tokens
        - ``"payload"``: slicing payloads out of the buffer
    """


class MalformedHeaderError(UnpackError):
    """Raised when no 0x00 delimiter terminates the header.

    Examples:
        - Buffer was never produced by pack()
        - Buffer truncated inside the header
    """

    stage = "header"


class InvalidLengthTokenError(UnpackError, ValueError):
    """Raised when a header token is not a non-negative base-10 integer.

    Examples:
        - Empty token ("3,,2")
        - Signed or padded token ("-1", " 4")
        - Non-ASCII bytes before the delimiter
    """

    stage = "lengths"

    def __init__(self, message: str, *, token: str = "", index: int = -1) -> None:
        super().__init__(message)
        self.token = token
        self.index = index


class TruncatedPayloadError(UnpackError):
    """Raised when the header claims more payload bytes than the buffer holds."""

    stage = "payload"

    def __init__(self, message: str, *, expected: int, available: int) -> None:
        super().__init__(message)
        self.expected = expected
        self.available = available


class TrailingDataError(UnpackError):
    """Raised when bytes follow the last payload and trailing data is disallowed."""

    stage = "payload"


class OutOfBoundsSliceError(BufpackError, IndexError):
    """Raised when a slice range falls outside the source buffer.

    This signals broken cursor arithmetic in the caller, not bad user input.
    """

    stage = "slice"
