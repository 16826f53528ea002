"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def sample_buffers() -> list[bytes]:
    """Sample payloads, including an empty one and one holding 0x00 bytes."""
    return [b"Hello, packed world!", b"", b"\x00\x01\x00\x02", bytes(range(256))]


@pytest.fixture
def concrete_packed() -> bytes:
    """Packed form of [b"\\x01\\x02\\x03", b"\\x04\\x05"]."""
    return b"3,2\x00\x01\x02\x03\x04\x05"
