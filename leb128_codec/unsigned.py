# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Unsigned LEB128 (ULEB128) encoding/decoding.

This is the varint used by protocol buffers, multicodec, DWARF and
WebAssembly. Values are unbounded: Python ints grow as needed, so there is
no 64-bit cut-off on either side.
"""

from typing import Iterable

from .result import DecodeResult, Ok, unexpected_end
from .sink import ByteSink


def encode_uleb128(value: int) -> bytes:
    """
    Encode a non-negative integer as ULEB128.

    Args:
        value: Non-negative integer to encode

    Returns:
        ULEB128-encoded bytes

    Raises:
        TypeError: If value is not an int
        ValueError: If value is negative
    """
    out = bytearray()
    encode_uleb128_into(value, out)
    return bytes(out)


def encode_uleb128_into(value: int, sink: ByteSink) -> None:
    """
    Encode a non-negative integer as ULEB128, appending to a sink.

    Args:
        value: Non-negative integer to encode
        sink: Destination with an ``append(int)`` method (e.g. bytearray)
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if value < 0:
        raise ValueError("Cannot encode negative value as ULEB128")

    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            sink.append(byte | 0x80)
        else:
            sink.append(byte)
            break


def decode_uleb128(data: Iterable[int]) -> DecodeResult:
    """
    Decode a ULEB128 value from a byte source.

    Bytes are pulled one at a time and nothing past the terminating byte is
    read, so an iterator passed in is left at the start of the next value.

    Args:
        data: Bytes, bytearray, or any iterable/iterator of byte values

    Returns:
        Ok(value, consumed), or Err(UNEXPECTED_END) if the source ran out
        while the continuation bit was still set
    """
    value = 0
    shift = 0
    consumed = 0

    for byte in data:
        consumed += 1
        value |= (byte & 0x7F) << shift
        if not (byte & 0x80):
            return Ok(value, consumed)
        shift += 7

    return unexpected_end(consumed)


def decode_uleb128_at(data: bytes, offset: int = 0) -> DecodeResult:
    """
    Decode a ULEB128 value from a buffer at a given offset.

    Args:
        data: Buffer containing the value
        offset: Starting offset in data

    Returns:
        Ok(value, consumed) where ``offset + consumed`` is the offset of the
        next value, or Err(UNEXPECTED_END)
    """
    if offset < 0:
        raise ValueError("Offset must be non-negative")
    return decode_uleb128(memoryview(data)[offset:])


def uleb128_size(value: int) -> int:
    """Return the number of bytes encode_uleb128(value) would produce."""
    if value < 0:
        raise ValueError("Cannot encode negative value as ULEB128")
    return max(1, (value.bit_length() + 6) // 7)
