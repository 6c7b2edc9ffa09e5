# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Signed LEB128 (SLEB128) encoding/decoding.

Two's complement over an unbounded width: a negative number behaves as if
it had infinitely many leading one-bits. Python's ``&`` and ``>>`` already
work that way on negative ints (``>>`` floors toward negative infinity),
which is exactly the arithmetic shift the encoder needs.

Examples:
    >>> encode_sleb128(-123456).hex()
    'c0bb78'
    >>> decode_sleb128(bytes.fromhex('c0bb78')).unwrap()
    -123456
"""

from typing import Iterable

from .result import DecodeResult, Ok, unexpected_end
from .sink import ByteSink


def encode_sleb128(value: int) -> bytes:
    """
    Encode an integer as SLEB128.

    Args:
        value: Integer to encode (any sign, any magnitude)

    Returns:
        SLEB128-encoded bytes

    Raises:
        TypeError: If value is not an int
    """
    out = bytearray()
    encode_sleb128_into(value, out)
    return bytes(out)


def encode_sleb128_into(value: int, sink: ByteSink) -> None:
    """
    Encode an integer as SLEB128, appending to a sink.

    Args:
        value: Integer to encode
        sink: Destination with an ``append(int)`` method (e.g. bytearray)
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"Expected int, got {type(value).__name__}")

    while True:
        byte = value & 0x7F
        value >>= 7

        # Stop once the remaining bits are pure sign extension of bit 6.
        sign_bit = byte & 0x40
        if (value == 0 and not sign_bit) or (value == -1 and sign_bit):
            sink.append(byte)
            break
        sink.append(byte | 0x80)


def decode_sleb128(data: Iterable[int]) -> DecodeResult:
    """
    Decode an SLEB128 value from a byte source.

    Bytes are pulled one at a time and nothing past the terminating byte is
    read.

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
        shift += 7
        if not (byte & 0x80):
            if byte & 0x40:
                value -= 1 << shift
            return Ok(value, consumed)

    return unexpected_end(consumed)


def decode_sleb128_at(data: bytes, offset: int = 0) -> DecodeResult:
    """
    Decode an SLEB128 value from a buffer at a given offset.

    Args:
        data: Buffer containing the value
        offset: Starting offset in data

    Returns:
        Ok(value, consumed) where ``offset + consumed`` is the offset of the
        next value, or Err(UNEXPECTED_END)
    """
    if offset < 0:
        raise ValueError("Offset must be non-negative")
    return decode_sleb128(memoryview(data)[offset:])


def sleb128_size(value: int) -> int:
    """Return the number of bytes encode_sleb128(value) would produce."""
    magnitude = value if value >= 0 else ~value
    return (magnitude.bit_length() + 1 + 6) // 7
