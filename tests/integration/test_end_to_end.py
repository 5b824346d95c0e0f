"""End-to-end tests: validate frames with the bounded decoder, decode them unchecked."""

from __future__ import annotations

from typing import Any

import pytest

from wireread import ByteOrder, Decoder, InsufficientDataError, Ref, new_decoder


def _frame(payload: bytes) -> bytes:
    return len(payload).to_bytes(4, "big") + payload


def _message(msg_id: int, user: str, fields: list[int], note: str) -> bytes:
    body = bytearray()
    body += msg_id.to_bytes(2, "big")
    body += len(fields).to_bytes(1, "big")
    for value in fields:
        body += value.to_bytes(4, "little")
    body += user.encode() + b"\x00"
    body += note.encode() + b"\r\n"
    return bytes(body)


def split_frames(packet: bytes) -> tuple[list[bytes], int]:
    """Collect complete length-prefixed frames; return them and where the tail starts."""
    outer = new_decoder(packet)
    frames = []
    while outer.bytes_remaining():
        start = outer.position
        try:
            length = outer.read_uint32_be()
            frames.append(outer.read_bytes(length))
        except InsufficientDataError:
            return frames, start
    return frames, outer.position


def decode_message(frame: bytes) -> dict[str, Any]:
    """Decode a validated frame on the unchecked hot path."""
    decoder: Decoder = new_decoder(frame, checked=False)
    msg_id: Ref[int] = Ref()
    decoder.read_uint16_be_into(msg_id)
    count = decoder.read_byte()
    fields = [decoder.read_fixed_width_int(32, ByteOrder.LE) for _ in range(count)]
    user = decoder.read_cstring()
    note = decoder.read_line()
    assert decoder.bytes_remaining() == 0
    return {"id": msg_id.value, "fields": fields, "user": user, "note": note}


class TestFramePipeline:
    """Test the validate-then-decode workflow."""

    def test_complete_packet(self) -> None:
        """Test every frame in a complete packet decodes."""
        packet = _frame(_message(7, "alice", [1, 2, 3], "first")) + _frame(
            _message(8, "bob", [], "second")
        )

        frames, consumed = split_frames(packet)

        assert consumed == len(packet)
        assert [decode_message(f) for f in frames] == [
            {"id": 7, "fields": [1, 2, 3], "user": "alice", "note": "first"},
            {"id": 8, "fields": [], "user": "bob", "note": "second"},
        ]

    @pytest.mark.parametrize("cut", [1, 3, 4, 10])
    def test_truncated_tail_resumes(self, cut: int) -> None:
        """Test a partial last frame is left for the caller to complete."""
        first = _frame(_message(1, "a", [10], "x"))
        second = _frame(_message(2, "b", [20, 30], "y"))
        packet = first + second[:cut]

        frames, tail = split_frames(packet)

        assert len(frames) == 1
        assert tail == len(first)

        more, consumed = split_frames(packet[tail:] + second[cut:])
        assert consumed == len(second)
        assert decode_message(more[0])["fields"] == [20, 30]


class TestResultRow:
    """Test decoding a row of length-encoded values."""

    @staticmethod
    def _read_row(decoder: Decoder, columns: int) -> list[str | None]:
        row: list[str | None] = []
        for _ in range(columns):
            if decoder.remaining()[0] == 0xFB:
                decoder.skip(1)
                row.append(None)
                continue
            length = decoder.read_length_encoded_integer()
            row.append(decoder.read_fixed_string(length))
        return row

    def test_row_with_null(self) -> None:
        """Test NULL columns are told apart by the caller, not the decoder."""
        long_value = "z" * 300
        data = (
            b"\x02id"
            + b"\xfb"
            + b"\x00"
            + b"\xfc"
            + (300).to_bytes(2, "little")
            + long_value.encode()
        )

        for checked in (True, False):
            decoder = new_decoder(data, checked=checked)
            assert self._read_row(decoder, 4) == ["id", None, "", long_value]
            assert decoder.bytes_remaining() == 0

    def test_truncated_row_fails_bounded(self) -> None:
        """Test a row cut inside a 2-byte length prefix fails cleanly."""
        decoder = new_decoder(b"\x02id\xfc\x2c")

        assert decoder.read_fixed_string(decoder.read_length_encoded_integer()) == "id"
        with pytest.raises(InsufficientDataError):
            decoder.read_length_encoded_integer()
        assert decoder.position == 3
