# SPDX-License-Identifier: Apache-2.0
"""UTF-8 to UCS-2 encoding."""

from __future__ import annotations

from .codepoint import TextInput, to_utf8, ucs2_from_utf8_at_offset
from .errors import Error, Ucs2Error
from .sinks import UnitCallback, WritableBuffer


def encode_with(text: TextInput, on_unit: UnitCallback) -> None:
    """Encode UTF-8 text to UCS-2 with a custom callback.

    Every encoded unit is passed to ``on_unit`` in input order. Encoding stops
    at the first exception raised either by the decoder or by ``on_unit``;
    units already delivered are not taken back.

    Args:
        text: A ``str`` or UTF-8 encoded bytes-like object.
        on_unit: Callable receiving each 16-bit unit.

    Raises:
        Ucs2Error: MULTI_BYTE if the text contains a character outside the
            Basic Multilingual Plane, INVALID_DATA or BUFFER_UNDERFLOW for
            malformed UTF-8 bytes.
    """
    data = to_utf8(text)
    length = len(data)
    offset = 0

    while offset < length:
        ch = ucs2_from_utf8_at_offset(data, offset)
        offset += ch.num_bytes
        on_unit(ch.val)


def encode(text: TextInput, buffer: WritableBuffer) -> int:
    """Encode UTF-8 text into a fixed UCS-2 buffer.

    Args:
        text: A ``str`` or UTF-8 encoded bytes-like object.
        buffer: Output buffer of 16-bit units, e.g. ``array.array("H", ...)``
            or ``(ctypes.c_uint16 * n)()``.

    Returns:
        Number of units written, which is the number of characters in
        ``text``.

    Raises:
        Ucs2Error: BUFFER_OVERFLOW if ``buffer`` is too small, otherwise as
            for encode_with(). ``buffer`` keeps the units written so far.
    """
    capacity = len(buffer)
    written = 0

    def write(unit: int) -> None:
        nonlocal written
        if written >= capacity:
            raise Ucs2Error(Error.BUFFER_OVERFLOW, written)
        buffer[written] = unit
        written += 1

    encode_with(text, write)
    return written
