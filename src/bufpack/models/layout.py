"""Parsed description of a packed buffer."""

from __future__ import annotations

from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt, model_validator


class PackedLayout(BaseModel):
    """Where each payload lives inside a packed buffer.

    Produced by ``read_layout()`` without copying any payload bytes.

    Example:
        >>> layout = read_layout(b"3,2\\x00\\x01\\x02\\x03\\x04\\x05")
        >>> layout.lengths
        [3, 2]
        >>> list(layout.offsets())
        [(4, 7), (7, 9)]

    Attributes:
        lengths: Payload byte lengths, in payload order
        header_length: Header size in bytes, delimiter included
        total_length: Size of the whole packed buffer in bytes
    """

    model_config = ConfigDict(
        # Layouts describe an immutable buffer
        frozen=True,
        extra="forbid",
    )

    lengths: list[NonNegativeInt]
    header_length: int = Field(ge=1)
    total_length: NonNegativeInt

    @model_validator(mode="after")
    def _check_fits(self) -> PackedLayout:
        if self.header_length + self.payload_length > self.total_length:
            raise ValueError(
                f"Layout needs {self.header_length + self.payload_length} bytes, "
                f"buffer has {self.total_length}"
            )
        return self

    @property
    def count(self) -> int:
        """Number of payloads."""
        return len(self.lengths)

    @property
    def payload_length(self) -> int:
        """Total payload bytes."""
        return sum(self.lengths)

    @property
    def trailing_length(self) -> int:
        """Bytes after the last payload that belong to no payload."""
        return self.total_length - self.header_length - self.payload_length

    def offsets(self) -> Iterator[tuple[int, int]]:
        """Yield the ``(start, end)`` byte range of each payload, in order."""
        cursor = self.header_length
        for length in self.lengths:
            yield cursor, cursor + length
            cursor += length
