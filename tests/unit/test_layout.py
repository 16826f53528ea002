"""Unit tests for the PackedLayout model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bufpack.models import PackedLayout


class TestPackedLayout:
    """Test layout validation."""

    def test_valid_layout(self) -> None:
        """Test a consistent layout builds."""
        layout = PackedLayout(lengths=[1, 0, 2], header_length=6, total_length=9)

        assert layout.count == 3
        assert list(layout.offsets()) == [(6, 7), (7, 7), (7, 9)]

    def test_negative_length(self) -> None:
        """Test negative lengths are rejected."""
        with pytest.raises(ValidationError):
            PackedLayout(lengths=[-1], header_length=3, total_length=3)

    def test_header_requires_delimiter(self) -> None:
        """Test the header is at least the delimiter byte."""
        with pytest.raises(ValidationError):
            PackedLayout(lengths=[], header_length=0, total_length=0)

    def test_does_not_fit(self) -> None:
        """Test layouts larger than the buffer are rejected."""
        with pytest.raises(ValidationError, match="buffer has 5"):
            PackedLayout(lengths=[4], header_length=2, total_length=5)

    def test_extra_fields_forbidden(self) -> None:
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            PackedLayout(lengths=[], header_length=1, total_length=1, version=2)  # type: ignore[call-arg]

    def test_frozen(self) -> None:
        """Test layouts are immutable."""
        layout = PackedLayout(lengths=[], header_length=1, total_length=1)
        with pytest.raises(ValidationError):
            layout.total_length = 2  # type: ignore[misc]
