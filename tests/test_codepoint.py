# SPDX-License-Identifier: Apache-2.0
"""Tests for codepoint module."""

import pytest

from ucs2.codepoint import Ucs2Char, to_utf8, ucs2_from_utf8_at_offset
from ucs2.errors import Error, Ucs2Error

# =============================================================================
# Tests for ucs2_from_utf8_at_offset()
# =============================================================================


class TestSequenceLengths:
    """Tests for lead byte classification."""

    def test_one_byte(self) -> None:
        """ASCII bytes decode to themselves."""
        assert ucs2_from_utf8_at_offset(b"a", 0) == Ucs2Char(val=0x61, num_bytes=1)

    def test_two_bytes(self) -> None:
        """110xxxxx lead byte consumes one continuation byte."""
        data = "ő".encode()
        assert ucs2_from_utf8_at_offset(data, 0) == Ucs2Char(val=0x0151, num_bytes=2)

    def test_three_bytes(self) -> None:
        """1110xxxx lead byte consumes two continuation bytes."""
        data = "╋".encode()
        assert ucs2_from_utf8_at_offset(data, 0) == Ucs2Char(val=0x254B, num_bytes=3)

    def test_offset_into_sequence(self) -> None:
        """Decoding starts at the given offset."""
        data = "a$¢ह".encode()
        assert ucs2_from_utf8_at_offset(data, 1) == Ucs2Char(val=0x24, num_bytes=1)
        assert ucs2_from_utf8_at_offset(data, 2) == Ucs2Char(val=0xA2, num_bytes=2)
        assert ucs2_from_utf8_at_offset(data, 4) == Ucs2Char(val=0x939, num_bytes=3)

    def test_boundary_values(self) -> None:
        """Largest value of each sequence length."""
        assert ucs2_from_utf8_at_offset("\x7f".encode(), 0).val == 0x7F
        assert ucs2_from_utf8_at_offset("\u07ff".encode(), 0).val == 0x07FF
        assert ucs2_from_utf8_at_offset("\uffff".encode(), 0).val == 0xFFFF

    def test_null_byte(self) -> None:
        """A zero byte is a regular one-byte character."""
        assert ucs2_from_utf8_at_offset(b"\x00", 0) == Ucs2Char(val=0, num_bytes=1)


class TestRejectedInput:
    """Tests for input that cannot be decoded."""

    @pytest.mark.parametrize("lead", [0xF0, 0xF4, 0xF8, 0xFF])
    def test_four_byte_lead(self, lead: int) -> None:
        """1111xxxx lead bytes are rejected as MULTI_BYTE."""
        data = bytes([lead, 0x9F, 0x98, 0x8E])
        with pytest.raises(Ucs2Error) as exc_info:
            ucs2_from_utf8_at_offset(data, 0)
        assert exc_info.value.error is Error.MULTI_BYTE
        assert exc_info.value.offset == 0

    def test_truncated_two_byte(self) -> None:
        """Missing continuation byte is BUFFER_UNDERFLOW."""
        with pytest.raises(Ucs2Error) as exc_info:
            ucs2_from_utf8_at_offset(b"a\xc5", 1)
        assert exc_info.value.error is Error.BUFFER_UNDERFLOW
        assert exc_info.value.offset == 1

    def test_truncated_three_byte(self) -> None:
        """Only one of two continuation bytes present."""
        with pytest.raises(Ucs2Error) as exc_info:
            ucs2_from_utf8_at_offset(b"\xe2\x95", 0)
        assert exc_info.value.error is Error.BUFFER_UNDERFLOW

    def test_bad_continuation(self) -> None:
        """Continuation byte not of the form 10xxxxxx is INVALID_DATA."""
        with pytest.raises(Ucs2Error) as exc_info:
            ucs2_from_utf8_at_offset(b"\xe2\x95a", 0)
        assert exc_info.value.error is Error.INVALID_DATA
        assert exc_info.value.offset == 2

    def test_continuation_as_lead(self) -> None:
        """A stray continuation byte cannot start a sequence."""
        with pytest.raises(Ucs2Error) as exc_info:
            ucs2_from_utf8_at_offset(b"\x80", 0)
        assert exc_info.value.error is Error.INVALID_DATA

    def test_offset_out_of_range(self) -> None:
        """Offsets outside the data are a programming error."""
        with pytest.raises(IndexError):
            ucs2_from_utf8_at_offset(b"abc", 3)
        with pytest.raises(IndexError):
            ucs2_from_utf8_at_offset(b"abc", -1)


# =============================================================================
# Tests for to_utf8()
# =============================================================================


class TestToUtf8:
    """Tests for to_utf8() function."""

    def test_str(self) -> None:
        """Strings are encoded as UTF-8."""
        assert to_utf8("ő") == b"\xc5\x91"

    def test_lone_surrogate(self) -> None:
        """Lone surrogates keep their 3-byte form."""
        assert to_utf8("\ud800") == b"\xed\xa0\x80"

    def test_bytes_unchanged(self) -> None:
        """Bytes-like input is used as is."""
        data = bytearray(b"abc")
        assert to_utf8(data) is data

    def test_memoryview(self) -> None:
        """Memoryviews are viewed as unsigned bytes."""
        view = to_utf8(memoryview(b"ab"))
        assert view[0] == 0x61
        assert len(view) == 2

    def test_strided_memoryview(self) -> None:
        """Non-contiguous views are copied out."""
        assert to_utf8(memoryview(b"aXbX")[::2]) == b"ab"
