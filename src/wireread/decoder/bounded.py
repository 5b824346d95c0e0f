"""Bounds-checked decoder.

Every read checks the remaining length before touching the buffer. A read
that cannot be satisfied raises InsufficientDataError and leaves the cursor
where it was, so the caller can fetch more bytes and retry from scratch.
"""

from __future__ import annotations

from ..config import DEFAULT_CONFIG, DecoderConfig
from ..exceptions import InsufficientDataError
from .contract import (
    LENENC_NULL,
    LENENC_WIDTHS,
    VARINT_MASK,
    ByteOrder,
    BytesLike,
    Ref,
    check_count,
    fixed_width_struct,
)


class BoundedDecoder:
    """Decodes wire primitives from a buffer, validating every access.

    The buffer is snapshotted as immutable bytes at construction; bytes and
    text returned by reads are independent copies.

    Example:
        >>> decoder = BoundedDecoder(b"\\x01\\x02Hi\\x00")
        >>> decoder.read_uint16_be()
        258
        >>> decoder.read_cstring()
        'Hi'
        >>> decoder.read_byte()
        Traceback (most recent call last):
        ...
        wireread.exceptions.InsufficientDataError: Need 1 bytes at offset 5, have 0
    """

    __slots__ = ("_buf", "_size", "_pos", "_encoding", "_errors")

    def __init__(self, buffer: BytesLike, config: DecoderConfig | None = None) -> None:
        """Initialize a decoder positioned at the start of ``buffer``.

        Args:
            buffer: Complete or partial frame to decode
            config: Text decoding options (defaults to DEFAULT_CONFIG)
        """
        config = config or DEFAULT_CONFIG
        self._buf = bytes(buffer)
        self._size = len(self._buf)
        self._pos = 0
        self._encoding = config.encoding
        self._errors = config.errors

    def __repr__(self) -> str:
        return f"BoundedDecoder(position={self._pos}, size={self._size})"

    def _require(self, n: int) -> None:
        """Raise InsufficientDataError unless ``n`` more bytes are available."""
        available = self._size - self._pos
        if n > available:
            raise InsufficientDataError(n, available, self._pos)

    # Cursor

    @property
    def position(self) -> int:
        """Offset of the next unread byte."""
        return self._pos

    def tell(self) -> int:
        return self._pos

    def remaining(self) -> memoryview:
        """Return a read-only view of the unread bytes without consuming them."""
        return memoryview(self._buf)[self._pos :]

    def bytes_remaining(self) -> int:
        return self._size - self._pos

    # Raw bytes

    def read_bytes(self, n: int) -> bytes:
        """Read the next ``n`` bytes.

        Raises:
            ValueError: If n is negative
            InsufficientDataError: If fewer than n bytes remain
        """
        check_count(n)
        self._require(n)
        start = self._pos
        self._pos = start + n
        return self._buf[start : self._pos]

    def read_byte(self) -> int:
        """Read a single byte as an integer 0-255.

        Raises:
            InsufficientDataError: If the buffer is exhausted
        """
        self._require(1)
        value = self._buf[self._pos]
        self._pos += 1
        return value

    def skip(self, n: int) -> None:
        """Advance the cursor by ``n`` bytes without reading them.

        Raises:
            ValueError: If n is negative
            InsufficientDataError: If fewer than n bytes remain
        """
        check_count(n)
        self._require(n)
        self._pos += n

    # Text

    def read_fixed_string(self, n: int) -> str:
        """Read the next ``n`` bytes as text.

        A zero length returns an empty string and consumes nothing.

        Raises:
            ValueError: If n is negative
            InsufficientDataError: If fewer than n bytes remain
        """
        check_count(n)
        if n == 0:
            return ""
        self._require(n)
        start = self._pos
        self._pos = start + n
        return self._buf[start : self._pos].decode(self._encoding, self._errors)

    def read_fixed_string_into(self, ref: Ref[str], n: int) -> None:
        ref.value = self.read_fixed_string(n)

    def read_cstring(self) -> str:
        """Read a zero-terminated string and consume its terminator.

        Raises:
            InsufficientDataError: If no zero byte remains in the buffer
        """
        start = self._pos
        end = self._buf.find(0, start)
        if end < 0:
            raise InsufficientDataError(None, self._size - start, start)
        self._pos = end + 1
        return self._buf[start:end].decode(self._encoding, self._errors)

    def read_line(self) -> str:
        """Read a line terminated by ``\\n``, dropping a ``\\r`` just before it.

        Raises:
            InsufficientDataError: If no newline remains in the buffer
        """
        start = self._pos
        newline = self._buf.find(b"\n", start)
        if newline < 0:
            raise InsufficientDataError(None, self._size - start, start)
        end = newline
        if end > start and self._buf[end - 1] == 0x0D:
            end -= 1
        self._pos = newline + 1
        return self._buf[start:end].decode(self._encoding, self._errors)

    # Integers

    def read_fixed_width_int(
        self, width: int, order: ByteOrder | str, signed: bool = False
    ) -> int:
        """Read a 16, 32 or 64-bit integer in the given byte order.

        Args:
            width: Width in bits (16, 32 or 64)
            order: ByteOrder.BE or ByteOrder.LE
            signed: Reinterpret the same bits as two's complement

        Raises:
            ValueError: If width or order is unsupported
            InsufficientDataError: If fewer than width/8 bytes remain
        """
        unpacker = fixed_width_struct(width, order, signed)
        self._require(unpacker.size)
        value = unpacker.unpack_from(self._buf, self._pos)[0]
        self._pos += unpacker.size
        return value

    def read_fixed_width_int_into(
        self, ref: Ref[int], width: int, order: ByteOrder | str, signed: bool = False
    ) -> None:
        ref.value = self.read_fixed_width_int(width, order, signed)

    def read_varint(self) -> int:
        """Read a base-128 unsigned varint (LEB128), truncated to 64 bits.

        The whole encoding is located before the cursor moves.

        Raises:
            InsufficientDataError: If the buffer ends before the final byte
        """
        buf = self._buf
        start = self._pos
        result = 0
        shift = 0
        for index in range(start, self._size):
            byte = buf[index]
            if shift < 64:
                result |= (byte & 0x7F) << shift
            if byte < 0x80:
                self._pos = index + 1
                return result & VARINT_MASK
            shift += 7
        raise InsufficientDataError(None, self._size - start, start)

    def read_length_encoded_integer(self) -> int:
        """Read a MySQL length-encoded integer.

        The marker byte selects the form: below 0xFB the byte is the value,
        0xFB is NULL (returned as 0), and 0xFC/0xFD/0xFE are followed by a
        2, 3 or 8-byte little-endian value. The full span is validated before
        anything is consumed.

        Raises:
            InsufficientDataError: If the marker or its value bytes are missing
        """
        self._require(1)
        start = self._pos
        marker = self._buf[start]
        width = LENENC_WIDTHS.get(marker, 0)
        if width == 0:
            self._pos = start + 1
            return 0 if marker == LENENC_NULL else marker
        self._require(1 + width)
        self._pos = start + 1 + width
        return int.from_bytes(self._buf[start + 1 : self._pos], "little")

    # Named fixed-width readers

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
