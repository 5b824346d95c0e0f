"""Unit tests for UncheckedDecoder end-of-buffer behavior."""

from __future__ import annotations

import pytest

from wireread import BoundedDecoder, InsufficientDataError, UncheckedDecoder


class TestUnterminatedFallback:
    """Test the rest-of-buffer fallback that only the unchecked mode has."""

    def test_cstring_without_terminator(self) -> None:
        """Test an unterminated C-string returns the remaining bytes."""
        decoder = UncheckedDecoder(b"Hi")

        assert decoder.read_cstring() == "Hi"
        assert decoder.position == 2

    def test_cstring_tail_after_terminated(self) -> None:
        """Test the fallback only covers the unread suffix."""
        decoder = UncheckedDecoder(b"one\x00two")

        assert decoder.read_cstring() == "one"
        assert decoder.read_cstring() == "two"
        assert decoder.bytes_remaining() == 0

    def test_cstring_at_end(self) -> None:
        """Test an exhausted buffer yields an empty string."""
        decoder = UncheckedDecoder(b"x\x00")
        decoder.read_cstring()

        assert decoder.read_cstring() == ""
        assert decoder.position == 2

    def test_line_without_newline(self) -> None:
        """Test an unterminated line returns the remaining bytes."""
        decoder = UncheckedDecoder(b"Hello")

        assert decoder.read_line() == "Hello"
        assert decoder.position == 5

    def test_line_fallback_keeps_trailing_cr(self) -> None:
        """Test CR is only stripped when it precedes an LF."""
        decoder = UncheckedDecoder(b"Hello\r")
        assert decoder.read_line() == "Hello\r"

    @pytest.mark.parametrize("method", ["read_cstring", "read_line"])
    def test_modes_diverge(self, method: str) -> None:
        """Test the same unterminated input fails bounded and succeeds unchecked."""
        data = b"no terminator"

        with pytest.raises(InsufficientDataError):
            getattr(BoundedDecoder(data), method)()

        assert getattr(UncheckedDecoder(data), method)() == "no terminator"


class TestNoChecks:
    """Test the unchecked decoder never raises InsufficientDataError."""

    def test_skip_past_end(self) -> None:
        """Test skip moves the cursor without validation."""
        decoder = UncheckedDecoder(b"\x01\x02")
        decoder.skip(5)

        assert decoder.position == 5

    def test_read_bytes_short(self) -> None:
        """Test a short read is not reported as a decode failure."""
        decoder = UncheckedDecoder(b"\x01\x02")
        decoder.read_bytes(4)

        assert decoder.position == 4

    def test_repr(self) -> None:
        """Test the repr shows position and size."""
        assert repr(UncheckedDecoder(b"abcd")) == "UncheckedDecoder(position=0, size=4)"
