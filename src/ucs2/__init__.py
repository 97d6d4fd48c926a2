# SPDX-License-Identifier: Apache-2.0
"""Conversion between UTF-8 and UCS-2.

UCS-2 stores every character of the Basic Multilingual Plane as one 16-bit
unit. Characters outside of it (4-byte UTF-8 sequences) are rejected.

Usage:
    from array import array
    import ucs2

    buffer = array("H", [0] * 16)
    count = ucs2.encode("őэ╋", buffer)        # 3

    out = bytearray(9)
    ucs2.decode([0x24, 0xA2, 0x939, 0xD55C], out)  # 9, out == "$¢ह한".encode()
"""

from .codec import CodecConfig, Ucs2Codec, register
from .codepoint import Ucs2Char, ucs2_from_utf8_at_offset
from .decoder import decode, decode_with
from .encoder import encode, encode_with
from .errors import Error, LiteralDefinitionError, Ucs2Error
from .literal import (
    count_units_needed,
    str_num_ucs2_chars,
    str_to_ucs2,
    text_to_fixed_ucs2_array,
    ucs2_cstr,
)

__all__ = [
    # Errors
    "Error",
    "LiteralDefinitionError",
    "Ucs2Error",
    # Conversion
    "Ucs2Char",
    "decode",
    "decode_with",
    "encode",
    "encode_with",
    "ucs2_from_utf8_at_offset",
    # Literals
    "count_units_needed",
    "str_num_ucs2_chars",
    "str_to_ucs2",
    "text_to_fixed_ucs2_array",
    "ucs2_cstr",
    # Codec registry
    "CodecConfig",
    "Ucs2Codec",
    "register",
]
