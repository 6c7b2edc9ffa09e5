# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Back-to-back LEB128 values.

A run of integers is stored as the plain concatenation of their encodings,
with no count prefix. Decoding continues until the source is exhausted.
"""

from itertools import chain
from typing import Callable, Iterable, List

from .result import DecodeResult, Ok, unexpected_end
from .signed import decode_sleb128, encode_sleb128_into
from .unsigned import decode_uleb128, encode_uleb128_into


def encode_uleb128_seq(values: Iterable[int]) -> bytes:
    """Encode each value as ULEB128 and concatenate the results."""
    out = bytearray()
    for value in values:
        encode_uleb128_into(value, out)
    return bytes(out)


def encode_sleb128_seq(values: Iterable[int]) -> bytes:
    """Encode each value as SLEB128 and concatenate the results."""
    out = bytearray()
    for value in values:
        encode_sleb128_into(value, out)
    return bytes(out)


def decode_uleb128_seq(data: Iterable[int]) -> DecodeResult:
    """
    Decode concatenated ULEB128 values until the source is exhausted.

    Returns:
        Ok(list_of_values, consumed), or Err(UNEXPECTED_END) if the last
        value is truncated
    """
    return _decode_seq(data, decode_uleb128)


def decode_sleb128_seq(data: Iterable[int]) -> DecodeResult:
    """
    Decode concatenated SLEB128 values until the source is exhausted.

    Returns:
        Ok(list_of_values, consumed), or Err(UNEXPECTED_END) if the last
        value is truncated
    """
    return _decode_seq(data, decode_sleb128)


def _decode_seq(
    data: Iterable[int],
    decode_one: Callable[[Iterable[int]], DecodeResult],
) -> DecodeResult:
    values: List[int] = []
    consumed = 0
    it = iter(data)

    while True:
        first = next(it, None)
        if first is None:
            return Ok(values, consumed)

        result = decode_one(chain((first,), it))
        consumed += result.consumed
        if result.is_err:
            return unexpected_end(consumed)
        values.append(result.value)
