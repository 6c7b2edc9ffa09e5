# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Byte sink interface used by the ``*_into`` encoders.

Any object with an ``append(int)`` method is a sink, so a caller-owned
``bytearray`` can be filled directly without building a temporary
``bytes`` object first.
"""

from typing import BinaryIO, Protocol


class ByteSink(Protocol):
    """Append-only destination for encoded bytes."""

    def append(self, byte: int) -> None:
        ...


class StreamSink:
    """
    Adapt a writable binary stream to the ByteSink interface.

    Works with anything exposing ``write(bytes)``: files opened in binary
    mode, ``io.BytesIO``, or a ``serial.Serial`` port.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.written = 0

    def append(self, byte: int) -> None:
        """Write a single byte to the stream."""
        self._stream.write(bytes([byte]))
        self.written += 1
