"""Unit tests for size calculation."""

from __future__ import annotations

from array import array

from bufpack import header_length, pack, packed_size


class TestSizing:
    """Test size calculation matches actual packing."""

    def test_header_length(self) -> None:
        """Test header size for common cases."""
        assert header_length([]) == 1
        assert header_length([0]) == 2
        assert header_length([3, 2]) == 4
        assert header_length([100, 10, 1]) == 9

    def test_packed_size_concrete(self) -> None:
        """Test the documented example is 9 bytes."""
        assert packed_size([b"\x01\x02\x03", b"\x04\x05"]) == 9

    def test_packed_size_matches_pack(self, sample_buffers: list[bytes]) -> None:
        """Test predicted size equals the real packed size."""
        assert packed_size(sample_buffers) == len(pack(sample_buffers))

    def test_packed_size_wide_array(self) -> None:
        """Test wide arrays are sized in bytes."""
        values = array("d", [1.0, 2.0])
        assert packed_size([values]) == len(pack([values]))
