# SPDX-License-Identifier: Apache-2.0
"""Error definitions for the UCS-2 codec."""

from __future__ import annotations

from enum import Enum


class Error(str, Enum):
    """Possible failure kinds reported by the codec."""

    # Not enough space left in the output buffer
    BUFFER_OVERFLOW = "buffer_overflow"
    # Input contained a character which cannot be represented in UCS-2
    MULTI_BYTE = "multi_byte"
    # Malformed UTF-8 continuation byte
    INVALID_DATA = "invalid_data"
    # UTF-8 sequence cut short by the end of input
    BUFFER_UNDERFLOW = "buffer_underflow"


_MESSAGES: dict[Error, str] = {
    Error.BUFFER_OVERFLOW: "not enough space left in the output buffer",
    Error.MULTI_BYTE: "character cannot be represented in UCS-2",
    Error.INVALID_DATA: "invalid UTF-8 continuation byte",
    Error.BUFFER_UNDERFLOW: "truncated UTF-8 sequence",
}


class Ucs2Error(ValueError):
    """Recoverable encode/decode failure.

    Attributes:
        error: The failure kind.
        offset: Where the failure was detected: the input byte offset for
            malformed or unrepresentable UTF-8, the output index for
            BUFFER_OVERFLOW. None if unknown.
    """

    def __init__(self, error: Error, offset: int | None = None) -> None:
        message = _MESSAGES[error]
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)
        self.error = error
        self.offset = offset


class LiteralDefinitionError(Exception):
    """A text literal cannot be turned into a fixed UCS-2 array.

    Raised for mistakes in the literal or its declared length. Not a subclass
    of Ucs2Error.
    """
