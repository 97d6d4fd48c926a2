# SPDX-License-Identifier: Apache-2.0
"""Extraction of single UCS-2 characters from UTF-8 data.

Lead byte classification:

    0xxxxxxx  1 byte   7 payload bits
    110xxxxx  2 bytes  5 + 6 payload bits
    1110xxxx  3 bytes  4 + 6 + 6 payload bits
    1111xxxx  rejected (4-byte sequences encode code points >= U+10000)
    10xxxxxx  rejected (continuation byte in lead position)

The input is never trusted to be well-formed: truncated sequences and bad
continuation bytes are reported as errors instead of being read past.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import Error, Ucs2Error

# Input accepted by the encoder: text, or raw UTF-8 data
Utf8Data = Union[bytes, bytearray, memoryview]
TextInput = Union[str, Utf8Data]

CONTINUATION_MASK = 0b1100_0000
CONTINUATION_TAG = 0b1000_0000
CONTINUATION_PAYLOAD = 0b0011_1111


@dataclass(frozen=True)
class Ucs2Char:
    """A decoded UCS-2 character.

    Attributes:
        val: The 16-bit UCS-2 value.
        num_bytes: Number of UTF-8 bytes consumed (1, 2 or 3).
    """

    val: int
    num_bytes: int


def to_utf8(text: TextInput) -> Utf8Data:
    """Get the UTF-8 bytes of an encoder input.

    Strings are encoded with ``surrogatepass`` so that lone surrogate units
    produced by the decoder encode back to the same unit.
    """
    if isinstance(text, str):
        return text.encode("utf-8", "surrogatepass")
    if isinstance(text, memoryview):
        if not text.c_contiguous:
            return text.tobytes()
        return text.cast("B")
    return text


def _continuation(data: Utf8Data, offset: int) -> int:
    byte = data[offset]
    if byte & CONTINUATION_MASK != CONTINUATION_TAG:
        raise Ucs2Error(Error.INVALID_DATA, offset)
    return byte & CONTINUATION_PAYLOAD


def ucs2_from_utf8_at_offset(data: Utf8Data, offset: int) -> Ucs2Char:
    """Decode the UTF-8 sequence starting at ``offset``.

    Args:
        data: UTF-8 encoded bytes.
        offset: Index of the lead byte.

    Returns:
        The decoded character and the number of bytes it occupies.

    Raises:
        Ucs2Error: MULTI_BYTE for 4-byte sequences, BUFFER_UNDERFLOW if the
            sequence runs past the end of ``data``, INVALID_DATA for a
            malformed continuation or lead byte.
        IndexError: If ``offset`` is outside ``data``.
    """
    length = len(data)
    if not 0 <= offset < length:
        raise IndexError(f"offset {offset} out of range for {length} bytes")

    lead = data[offset]

    if lead & 0b1000_0000 == 0b0000_0000:
        return Ucs2Char(val=lead, num_bytes=1)

    if lead & 0b1110_0000 == 0b1100_0000:
        if offset + 1 >= length:
            raise Ucs2Error(Error.BUFFER_UNDERFLOW, offset)
        a = lead & 0b0001_1111
        b = _continuation(data, offset + 1)
        return Ucs2Char(val=(a << 6) | b, num_bytes=2)

    if lead & 0b1111_0000 == 0b1110_0000:
        if offset + 2 >= length:
            raise Ucs2Error(Error.BUFFER_UNDERFLOW, offset)
        a = lead & 0b0000_1111
        b = _continuation(data, offset + 1)
        c = _continuation(data, offset + 2)
        return Ucs2Char(val=(a << 12) | (b << 6) | c, num_bytes=3)

    if lead & 0b1111_0000 == 0b1111_0000:
        raise Ucs2Error(Error.MULTI_BYTE, offset)

    # 10xxxxxx
    raise Ucs2Error(Error.INVALID_DATA, offset)
