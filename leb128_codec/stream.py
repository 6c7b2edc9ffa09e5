# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 over binary streams.

Reads go through ``stream.read(1)`` one byte at a time, so exactly the
bytes of one value are taken from the stream. An empty read is treated as
end of input. This matches how a serial port with a read timeout behaves,
as well as files and ``io.BytesIO``.
"""

import logging
from typing import BinaryIO, Iterator

from .result import DecodeResult
from .signed import decode_sleb128, encode_sleb128
from .unsigned import decode_uleb128, encode_uleb128

logger = logging.getLogger(__name__)


class StreamSource:
    """
    Iterate over the bytes of a readable binary stream.

    Each step reads a single byte; iteration stops at the first empty read.
    """

    def __init__(self, stream: BinaryIO):
        self._stream = stream
        self.read_count = 0

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        byte = self._stream.read(1)
        if not byte:
            raise StopIteration
        self.read_count += 1
        return byte[0]


def read_uleb128(stream: BinaryIO) -> DecodeResult:
    """
    Read one ULEB128 value from a stream.

    Args:
        stream: Readable binary stream

    Returns:
        Ok(value, consumed), or Err(UNEXPECTED_END) on EOF mid-value
    """
    return _log_read("ULEB128", decode_uleb128(StreamSource(stream)))


def read_sleb128(stream: BinaryIO) -> DecodeResult:
    """
    Read one SLEB128 value from a stream.

    Args:
        stream: Readable binary stream

    Returns:
        Ok(value, consumed), or Err(UNEXPECTED_END) on EOF mid-value
    """
    return _log_read("SLEB128", decode_sleb128(StreamSource(stream)))


def write_uleb128(stream: BinaryIO, value: int) -> int:
    """
    Write a ULEB128 value to a stream in a single write call.

    Returns:
        Number of bytes written
    """
    return _write("ULEB128", stream, value, encode_uleb128(value))


def write_sleb128(stream: BinaryIO, value: int) -> int:
    """
    Write an SLEB128 value to a stream in a single write call.

    Returns:
        Number of bytes written
    """
    return _write("SLEB128", stream, value, encode_sleb128(value))


def _log_read(variant: str, result: DecodeResult) -> DecodeResult:
    if result.is_ok:
        logger.debug("Read %s value %d (%d bytes)", variant, result.value, result.consumed)
    else:
        logger.debug("Stream ended inside %s value after %d bytes", variant, result.consumed)
    return result


def _write(variant: str, stream: BinaryIO, value: int, data: bytes) -> int:
    stream.write(data)
    logger.debug("Wrote %s value %d (%d bytes)", variant, value, len(data))
    return len(data)
