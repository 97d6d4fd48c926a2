# SPDX-License-Identifier: Apache-2.0
"""Output sink protocols for the encoder and decoder."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class UnitCallback(Protocol):
    """Receives one UCS-2 unit. Raise to abort encoding."""

    def __call__(self, unit: int) -> None: ...


@runtime_checkable
class BytesCallback(Protocol):
    """Receives the UTF-8 bytes of one character. Raise to abort decoding."""

    def __call__(self, group: bytes) -> None: ...


class WritableBuffer(Protocol):
    """Fixed-capacity output buffer.

    Satisfied by ``list``, ``array.array``, ``bytearray``, ``memoryview`` and
    ``ctypes`` arrays. The codec only assigns items and slices inside
    ``range(len(buffer))``; it never resizes the buffer.
    """

    def __len__(self) -> int: ...

    def __setitem__(self, index, value) -> None: ...
