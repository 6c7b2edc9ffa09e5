# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
LEB128 variable-length integer codec.

This package encodes and decodes arbitrary-precision integers in
unsigned (ULEB128) and signed (SLEB128) Little Endian Base 128 form, as
used by protocol buffers, multicodec, DWARF and WebAssembly.

Example usage:
    from leb128_codec import encode_uleb128, decode_uleb128

    data = encode_uleb128(300)            # b"\\xac\\x02"
    result = decode_uleb128(data)
    if result.is_ok:
        print(result.value)               # 300
    else:
        print(f"Truncated: {result.message}")

    # Encode straight into an existing buffer
    buf = bytearray(b"header")
    encode_sleb128_into(-65, buf)         # appends b"\\xbf\\x7f"
"""

import logging

from .result import (
    DecodeErrorKind,
    DecodeResult,
    Err,
    LEB128Error,
    Ok,
    TruncatedInputError,
)
from .sequence import (
    decode_sleb128_seq,
    decode_uleb128_seq,
    encode_sleb128_seq,
    encode_uleb128_seq,
)
from .signed import (
    decode_sleb128,
    decode_sleb128_at,
    encode_sleb128,
    encode_sleb128_into,
    sleb128_size,
)
from .sink import ByteSink, StreamSink
from .stream import (
    StreamSource,
    read_sleb128,
    read_uleb128,
    write_sleb128,
    write_uleb128,
)
from .unsigned import (
    decode_uleb128,
    decode_uleb128_at,
    encode_uleb128,
    encode_uleb128_into,
    uleb128_size,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Unsigned
    "encode_uleb128",
    "encode_uleb128_into",
    "decode_uleb128",
    "decode_uleb128_at",
    "uleb128_size",
    # Signed
    "encode_sleb128",
    "encode_sleb128_into",
    "decode_sleb128",
    "decode_sleb128_at",
    "sleb128_size",
    # Sequences
    "encode_uleb128_seq",
    "encode_sleb128_seq",
    "decode_uleb128_seq",
    "decode_sleb128_seq",
    # Sinks and streams
    "ByteSink",
    "StreamSink",
    "StreamSource",
    "read_uleb128",
    "read_sleb128",
    "write_uleb128",
    "write_sleb128",
    # Results and errors
    "Ok",
    "Err",
    "DecodeResult",
    "DecodeErrorKind",
    "LEB128Error",
    "TruncatedInputError",
]
