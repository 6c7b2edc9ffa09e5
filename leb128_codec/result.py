# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""
Decode outcome types and exceptions.

Decoders never raise on truncated input. They return either an ``Ok``
carrying the decoded value or an ``Err`` describing why decoding stopped,
and the caller decides what to do with it.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Union


class DecodeErrorKind(IntEnum):
    """Reasons a decode can fail."""
    UNEXPECTED_END = 0

    def __str__(self) -> str:
        return self.name


class LEB128Error(Exception):
    """Base exception for LEB128 errors."""
    pass


class TruncatedInputError(LEB128Error, ValueError):
    """Byte source ended before the terminating byte of a value."""

    def __init__(self, message: str, consumed: int = 0):
        super().__init__(message)
        self.kind = DecodeErrorKind.UNEXPECTED_END
        self.consumed = consumed


@dataclass(frozen=True)
class Ok:
    """Successful decode."""
    value: Any
    consumed: int

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Return the decoded value."""
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed decode."""
    kind: DecodeErrorKind
    consumed: int
    message: str = "unexpected end of input"

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """
        Raise the error this result describes.

        Raises:
            TruncatedInputError: Always, for UNEXPECTED_END
        """
        raise TruncatedInputError(
            f"LEB128 decode: {self.message} after {self.consumed} byte(s)",
            consumed=self.consumed,
        )


# Type alias for any decode outcome
DecodeResult = Union[Ok, Err]


def unexpected_end(consumed: int) -> Err:
    """Build the truncated-input error for a source that ran dry."""
    return Err(kind=DecodeErrorKind.UNEXPECTED_END, consumed=consumed)
