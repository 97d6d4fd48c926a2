# SPDX-License-Identifier: Apache-2.0
"""UCS-2 to UTF-8 decoding.

Every 16-bit value maps to a valid 1 to 3 byte UTF-8 group, so decoding can
only fail when the output does not fit.
"""

from __future__ import annotations

from collections.abc import Iterable

from .errors import Error, Ucs2Error
from .sinks import BytesCallback, WritableBuffer


def utf8_group(unit: int) -> bytes:
    """Get the UTF-8 bytes of a single UCS-2 unit.

    Raises:
        ValueError: If ``unit`` is not a 16-bit value.
    """
    if unit < 0 or unit > 0xFFFF:
        raise ValueError(f"not a UCS-2 unit: {unit!r}")

    if unit < 0x0080:
        return bytes((unit,))
    if unit < 0x0800:
        return bytes(
            (
                0b1100_0000 | (unit >> 6),
                0b1000_0000 | (unit & 0b0011_1111),
            )
        )
    return bytes(
        (
            0b1110_0000 | (unit >> 12),
            0b1000_0000 | ((unit >> 6) & 0b0011_1111),
            0b1000_0000 | (unit & 0b0011_1111),
        )
    )


def decode_with(units: Iterable[int], on_bytes: BytesCallback) -> int:
    """Decode UCS-2 units to UTF-8 with a custom callback.

    ``on_bytes`` receives the complete byte group of one character per call.

    Args:
        units: 16-bit UCS-2 units.
        on_bytes: Callable receiving each character's UTF-8 bytes.

    Returns:
        Total number of bytes passed to ``on_bytes``.

    Raises:
        ValueError: If a unit is not a 16-bit value.
    """
    total = 0
    for unit in units:
        group = utf8_group(unit)
        on_bytes(group)
        total += len(group)
    return total


def decode(units: Iterable[int], buffer: WritableBuffer) -> int:
    """Decode UCS-2 units into a fixed UTF-8 byte buffer.

    Args:
        units: 16-bit UCS-2 units.
        buffer: Output byte buffer, e.g. ``bytearray(n)``.

    Returns:
        Number of bytes written.

    Raises:
        Ucs2Error: BUFFER_OVERFLOW if a character's bytes do not fit in the
            remaining space. None of that character's bytes are written.
    """
    capacity = len(buffer)
    written = 0

    def write(group: bytes) -> None:
        nonlocal written
        if written + len(group) > capacity:
            raise Ucs2Error(Error.BUFFER_OVERFLOW, written)
        for byte in group:
            buffer[written] = byte
            written += 1

    return decode_with(units, write)
