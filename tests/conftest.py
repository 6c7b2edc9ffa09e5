# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Pytest configuration and shared fixtures."""

from io import BytesIO

import pytest


class MockStream:
    """Mock binary stream that records every read and write call."""

    def __init__(self, data: bytes = b""):
        self._data = data
        self._pos = 0
        self.read_calls = []
        self.written = BytesIO()

    def read(self, size: int) -> bytes:
        """Read up to size bytes, returning b"" at end (like a timeout)."""
        self.read_calls.append(size)
        chunk = self._data[self._pos:self._pos + size]
        self._pos += len(chunk)
        return chunk

    def write(self, data: bytes) -> int:
        self.written.write(data)
        return len(data)

    @property
    def remaining(self) -> bytes:
        return self._data[self._pos:]


@pytest.fixture
def mock_stream():
    """Factory for MockStream instances preloaded with data."""
    def make(data: bytes = b"") -> MockStream:
        return MockStream(data)
    return make


@pytest.fixture
def loop_port():
    """pyserial loopback port: whatever is written can be read back."""
    serial = pytest.importorskip("serial")
    port = serial.serial_for_url("loop://", timeout=0.1)
    yield port
    port.close()
