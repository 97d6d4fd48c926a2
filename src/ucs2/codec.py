# SPDX-License-Identifier: Apache-2.0
"""Integration with the Python codec registry.

After register() the codec is available through the usual str/bytes API:

    import ucs2
    ucs2.register()
    "abc".encode("ucs-2")           # b"a\\x00b\\x00c\\x00"
    b"a\\x00b\\x00".decode("ucs-2")  # "ab"

The serialized form packs every UCS-2 unit into two bytes. Incremental and
stream codecs are provided too, so text files can be opened with
``open(path, encoding="ucs-2")``.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from typing import Literal

from .codepoint import TextInput
from .decoder import decode_with
from .encoder import encode_with
from .errors import Error, Ucs2Error

logger = logging.getLogger(__name__)

ByteOrder = Literal["little", "big"]

# Normalized codec name -> byte order
CODEC_NAMES: dict[str, ByteOrder] = {
    "ucs2": "little",
    "ucs_2": "little",
    "ucs2le": "little",
    "ucs_2le": "little",
    "ucs2be": "big",
    "ucs_2be": "big",
}

UNIT_SIZE = 2


@dataclass
class CodecConfig:
    """UCS-2 serialization configuration.

    Attributes:
        byteorder: Byte order of each serialized unit.
        terminate: Append a null unit when encoding, and drop one trailing
            null unit when decoding.
    """

    byteorder: ByteOrder = "little"
    terminate: bool = False


class Ucs2Codec:
    """Converts between text and serialized UCS-2 bytes.

    Example:
        codec = Ucs2Codec(CodecConfig(byteorder="big"))
        data = codec.encode("őэ╋")  # b"\\x01Q\\x04M%K"
        text = codec.decode(data)
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        """Initialize the codec.

        Args:
            config: Serialization configuration. Uses defaults if None.
        """
        self._config = config or CodecConfig()

    @property
    def config(self) -> CodecConfig:
        return self._config

    def encode(self, text: TextInput) -> bytes:
        """Encode text to serialized UCS-2.

        Raises:
            Ucs2Error: If the text cannot be encoded in UCS-2.
        """
        out = bytearray()
        byteorder = self._config.byteorder

        def write(unit: int) -> None:
            out.extend(unit.to_bytes(UNIT_SIZE, byteorder))

        encode_with(text, write)
        if self._config.terminate:
            write(0)
        return bytes(out)

    def decode(self, data: bytes | bytearray | memoryview) -> str:
        """Decode serialized UCS-2 to text.

        Raises:
            Ucs2Error: BUFFER_UNDERFLOW if ``data`` ends in the middle of a
                unit.
        """
        data = bytes(data)
        if len(data) % UNIT_SIZE:
            raise Ucs2Error(Error.BUFFER_UNDERFLOW, len(data) - 1)

        units = [
            int.from_bytes(data[i : i + UNIT_SIZE], self._config.byteorder)
            for i in range(0, len(data), UNIT_SIZE)
        ]
        if self._config.terminate and units and units[-1] == 0:
            units.pop()

        out = bytearray()
        decode_with(units, out.extend)
        return out.decode("utf-8", "surrogatepass")


def _check_errors(errors: str) -> None:
    if errors != "strict":
        raise ValueError(f"Unsupported error handling mode: {errors}")


def _codec_info(name: str, byteorder: ByteOrder) -> codecs.CodecInfo:
    codec = Ucs2Codec(CodecConfig(byteorder=byteorder))

    def encode(text: str, errors: str = "strict") -> tuple[bytes, int]:
        _check_errors(errors)
        return codec.encode(text), len(text)

    def decode(data: bytes, errors: str = "strict") -> tuple[str, int]:
        _check_errors(errors)
        return codec.decode(data), len(data)

    def partial_decode(
        data: bytes, errors: str = "strict", final: bool = False
    ) -> tuple[str, int]:
        # Whole units only; an odd trailing byte waits for more input
        _check_errors(errors)
        data = bytes(data)
        consumed = len(data) if final else len(data) - len(data) % UNIT_SIZE
        return codec.decode(data[:consumed]), consumed

    class IncrementalEncoder(codecs.IncrementalEncoder):
        def encode(self, input: str, final: bool = False) -> bytes:
            _check_errors(self.errors)
            return codec.encode(input)

    class IncrementalDecoder(codecs.BufferedIncrementalDecoder):
        def _buffer_decode(
            self, input: bytes, errors: str, final: bool
        ) -> tuple[str, int]:
            return partial_decode(input, errors, final)

    class StreamWriter(codecs.StreamWriter):
        def encode(self, input: str, errors: str = "strict") -> tuple[bytes, int]:
            return encode(input, errors)

    class StreamReader(codecs.StreamReader):
        def decode(self, input: bytes, errors: str = "strict") -> tuple[str, int]:
            return partial_decode(input, errors)

    return codecs.CodecInfo(
        encode,
        decode,
        name=name,
        incrementalencoder=IncrementalEncoder,
        incrementaldecoder=IncrementalDecoder,
        streamwriter=StreamWriter,
        streamreader=StreamReader,
    )


def search_function(name: str) -> codecs.CodecInfo | None:
    """Codec search function answering the UCS-2 codec names."""
    normalized = name.lower().replace("-", "_").replace(" ", "_")
    byteorder = CODEC_NAMES.get(normalized)
    if byteorder is None:
        return None
    return _codec_info(normalized, byteorder)


def register() -> None:
    """Register the UCS-2 codecs with the codec registry.

    Safe to call more than once.
    """
    try:
        codecs.lookup("ucs-2")
    except LookupError:
        codecs.register(search_function)
        logger.debug("Registered UCS-2 codecs: %s", ", ".join(CODEC_NAMES))
    else:
        logger.debug("UCS-2 codecs already registered")
