"""Decoder for complete, pre-validated frames.

UncheckedDecoder performs no length checks. Use it only on a frame whose
completeness has already been established, typically with a BoundedDecoder
pass over the frame boundary. On a short buffer the outcome is unspecified:
reads may return short values, raise low-level errors such as struct.error
or IndexError, or move the cursor past the end of the buffer.
"""

from __future__ import annotations

from ..config import DEFAULT_CONFIG, DecoderConfig
from .contract import (
    LENENC_NULL,
    LENENC_WIDTHS,
    VARINT_MASK,
    ByteOrder,
    BytesLike,
    Ref,
    fixed_width_struct,
)


class UncheckedDecoder:
    """Decodes wire primitives from a trusted buffer without bounds checks.

    Unterminated C-strings and lines are not errors here: the rest of the
    buffer is returned and the cursor moves to the end.

    Example:
        >>> decoder = UncheckedDecoder(b"\\x04\\x03\\x02\\x01tail")
        >>> hex(decoder.read_uint32_le())
        '0x1020304'
        >>> decoder.read_cstring()
        'tail'
    """

    __slots__ = ("_buf", "_pos", "_encoding", "_errors")

    def __init__(self, buffer: BytesLike, config: DecoderConfig | None = None) -> None:
        config = config or DEFAULT_CONFIG
        self._buf = bytes(buffer)
        self._pos = 0
        self._encoding = config.encoding
        self._errors = config.errors

    def __repr__(self) -> str:
        return f"UncheckedDecoder(position={self._pos}, size={len(self._buf)})"

    @property
    def position(self) -> int:
        """Offset of the next unread byte."""
        return self._pos

    def tell(self) -> int:
        return self._pos

    def remaining(self) -> memoryview:
        return memoryview(self._buf)[self._pos :]

    def bytes_remaining(self) -> int:
        return len(self._buf) - self._pos

    def read_bytes(self, n: int) -> bytes:
        start = self._pos
        self._pos = start + n
        return self._buf[start : self._pos]

    def read_byte(self) -> int:
        value = self._buf[self._pos]
        self._pos += 1
        return value

    def skip(self, n: int) -> None:
        self._pos += n

    def read_fixed_string(self, n: int) -> str:
        """Read the next ``n`` bytes as text; zero length consumes nothing."""
        start = self._pos
        self._pos = start + n
        return self._buf[start : self._pos].decode(self._encoding, self._errors)

    def read_fixed_string_into(self, ref: Ref[str], n: int) -> None:
        ref.value = self.read_fixed_string(n)

    def read_cstring(self) -> str:
        """Read a zero-terminated string, or the rest of the buffer if unterminated."""
        start = self._pos
        end = self._buf.find(0, start)
        if end < 0:
            self._pos = len(self._buf)
            return self._buf[start:].decode(self._encoding, self._errors)
        self._pos = end + 1
        return self._buf[start:end].decode(self._encoding, self._errors)

    def read_line(self) -> str:
        """Read a ``\\n``-terminated line (``\\r\\n`` aware), or the rest of the buffer."""
        start = self._pos
        newline = self._buf.find(b"\n", start)
        if newline < 0:
            self._pos = len(self._buf)
            return self._buf[start:].decode(self._encoding, self._errors)
        end = newline
        if end > start and self._buf[end - 1] == 0x0D:
            end -= 1
        self._pos = newline + 1
        return self._buf[start:end].decode(self._encoding, self._errors)

    def read_fixed_width_int(
        self, width: int, order: ByteOrder | str, signed: bool = False
    ) -> int:
        unpacker = fixed_width_struct(width, order, signed)
        value = unpacker.unpack_from(self._buf, self._pos)[0]
        self._pos += unpacker.size
        return value

    def read_fixed_width_int_into(
        self, ref: Ref[int], width: int, order: ByteOrder | str, signed: bool = False
    ) -> None:
        ref.value = self.read_fixed_width_int(width, order, signed)

    def read_varint(self) -> int:
        """Read a base-128 unsigned varint, one byte at a time from the cursor."""
        result = 0
        shift = 0
        while True:
            byte = self.read_byte()
            if shift < 64:
                result |= (byte & 0x7F) << shift
            if byte < 0x80:
                return result & VARINT_MASK
            shift += 7

    def read_length_encoded_integer(self) -> int:
        marker = self._buf[self._pos]
        width = LENENC_WIDTHS.get(marker, 0)
        start = self._pos + 1
        self._pos = start + width
        if width == 0:
            return 0 if marker == LENENC_NULL else marker
        return int.from_bytes(self._buf[start : self._pos], "little")

    def read_uint16_be(self) -> int:
        return self.read_fixed_width_int(16, ByteOrder.BE)

    def read_int16_be(self) -> int:
        return self.read_fixed_width_int(16, ByteOrder.BE, signed=True)

    def read_uint32_be(self) -> int:
        return self.read_fixed_width_int(32, ByteOrder.BE)

    def read_int32_be(self) -> int:
        return self.read_fixed_width_int(32, ByteOrder.BE, signed=True)

    def read_uint64_be(self) -> int:
        return self.read_fixed_width_int(64, ByteOrder.BE)

    def read_uint16_le(self) -> int:
        return self.read_fixed_width_int(16, ByteOrder.LE)

    def read_uint32_le(self) -> int:
        return self.read_fixed_width_int(32, ByteOrder.LE)

    def read_uint64_le(self) -> int:
        return self.read_fixed_width_int(64, ByteOrder.LE)

    def read_uint16_be_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_uint16_be()

    def read_int16_be_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_int16_be()

    def read_uint32_be_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_uint32_be()

    def read_int32_be_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_int32_be()

    def read_uint64_be_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_uint64_be()

    def read_uint16_le_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_uint16_le()

    def read_uint32_le_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_uint32_le()

    def read_uint64_le_into(self, ref: Ref[int]) -> None:
        ref.value = self.read_uint64_le()
