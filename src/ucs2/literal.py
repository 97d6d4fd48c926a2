# SPDX-License-Identifier: Apache-2.0
"""Null-terminated UCS-2 arrays built from text literals.

The arrays are ``ctypes`` arrays of ``c_uint16``, ready to be passed to C
APIs expecting a wide string. Build them in module-level constants so that a
bad literal fails at import time:

    GREETING = ucs2_cstr("abc")
    assert list(GREETING) == [97, 98, 99, 0]
"""

from __future__ import annotations

import ctypes

from .codepoint import TextInput
from .encoder import encode_with
from .errors import LiteralDefinitionError, Ucs2Error


def count_units_needed(text: TextInput) -> int:
    """Count the number of UCS-2 characters in a string.

    Args:
        text: A ``str`` or UTF-8 encoded bytes-like object.

    Returns:
        Number of UCS-2 units ``text`` encodes to, without a terminator.

    Raises:
        Ucs2Error: If the string cannot be encoded in UCS-2.
    """
    num_ucs2_chars = 0

    def count(unit: int) -> None:
        nonlocal num_ucs2_chars
        num_ucs2_chars += 1

    encode_with(text, count)
    return num_ucs2_chars


def text_to_fixed_ucs2_array(text: TextInput, declared_length: int) -> ctypes.Array:
    """Convert a string into a null-terminated UCS-2 array.

    Args:
        text: A ``str`` or UTF-8 encoded bytes-like object.
        declared_length: Array length, which must be the number of encoded
            units plus one for the trailing null.

    Returns:
        ``(ctypes.c_uint16 * declared_length)`` array.

    Raises:
        LiteralDefinitionError: If ``text`` contains a null character or
            ``declared_length`` is wrong.
        Ucs2Error: If the string cannot be encoded in UCS-2.
    """
    if declared_length < 1:
        raise LiteralDefinitionError("incorrect array length")

    output = (ctypes.c_uint16 * declared_length)()
    output_offset = 0

    def fill(unit: int) -> None:
        nonlocal output_offset
        if unit == 0:
            raise LiteralDefinitionError("interior null character")
        # Keep the last slot for the terminator
        if output_offset + 1 >= declared_length:
            raise LiteralDefinitionError("incorrect array length")
        output[output_offset] = unit
        output_offset += 1

    encode_with(text, fill)

    if output_offset + 1 != declared_length:
        raise LiteralDefinitionError("incorrect array length")

    return output


def ucs2_cstr(text: TextInput) -> ctypes.Array:
    """Encode a string as UCS-2 with a trailing null character.

    The array length is computed from the text.

    Raises:
        LiteralDefinitionError: If the text contains a null character or a
            character which cannot be represented in UCS-2.
    """
    try:
        num_chars = count_units_needed(text) + 1
    except Ucs2Error as e:
        raise LiteralDefinitionError(
            "input contains a character which cannot be represented in UCS-2"
        ) from e
    return text_to_fixed_ucs2_array(text, num_chars)


# Aliases
str_num_ucs2_chars = count_units_needed
str_to_ucs2 = text_to_fixed_ucs2_array
