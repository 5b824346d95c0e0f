"""The decoding contract shared by both decoder modes.

Both BoundedDecoder and UncheckedDecoder satisfy the Decoder protocol
structurally. They share the lookup tables defined here but no base class.
"""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


class ByteOrder(str, enum.Enum):
    """Byte order of a fixed-width integer.

    Values match the names accepted by ``int.from_bytes``.
    """

    BE = "big"
    LE = "little"


@dataclass
class Ref(Generic[T]):
    """Mutable holder used as the output parameter of ``*_into`` reads.

    Example:
        >>> ref: Ref[int] = Ref()
        >>> decoder.read_uint16_be_into(ref)
        >>> ref.value
        258
    """

    value: T | None = None


BytesLike = bytes | bytearray | memoryview

# Fixed-width integer decoders keyed by (width in bits, byte order, signed)
_FIXED_FORMATS = {16: "H", 32: "I", 64: "Q"}
FIXED_WIDTH_STRUCTS: dict[tuple[int, str, bool], struct.Struct] = {}
for _width, _code in _FIXED_FORMATS.items():
    for _order, _prefix in ((ByteOrder.BE, ">"), (ByteOrder.LE, "<")):
        FIXED_WIDTH_STRUCTS[(_width, _order, False)] = struct.Struct(_prefix + _code)
        FIXED_WIDTH_STRUCTS[(_width, _order, True)] = struct.Struct(_prefix + _code.lower())
del _width, _code, _order, _prefix

# Length-encoded integer markers (MySQL client/server protocol)
LENENC_NULL = 0xFB
LENENC_WIDTHS = {
    0xFC: 2,
    0xFD: 3,
    0xFE: 8,
}

VARINT_MASK = (1 << 64) - 1


def fixed_width_struct(width: int, order: ByteOrder | str, signed: bool = False) -> struct.Struct:
    """Return the precompiled unpacker for a fixed-width integer.

    Args:
        width: Integer width in bits (16, 32 or 64)
        order: Byte order (ByteOrder.BE / ByteOrder.LE, or "big" / "little")
        signed: Interpret the bits as two's complement

    Raises:
        ValueError: If the width or byte order is not supported
    """
    try:
        return FIXED_WIDTH_STRUCTS[(width, ByteOrder(order), bool(signed))]
    except (KeyError, TypeError, ValueError):
        raise ValueError(
            f"Unsupported fixed-width integer: width={width!r}, order={order!r} "
            f"(width must be 16, 32 or 64; order 'big' or 'little')"
        ) from None


def check_count(n: int) -> None:
    """Reject negative byte counts."""
    if n < 0:
        raise ValueError(f"Byte count must be non-negative, got {n}")


@runtime_checkable
class Decoder(Protocol):
    """Cursor-based reader over an immutable byte buffer.

    Every read advances the cursor past the bytes it consumed. Bytes and text
    returned are owned copies, never views into the buffer.
    """

    @property
    def position(self) -> int: ...

    def tell(self) -> int: ...

    def remaining(self) -> memoryview: ...

    def bytes_remaining(self) -> int: ...

    def read_bytes(self, n: int) -> bytes: ...

    def read_byte(self) -> int: ...

    def skip(self, n: int) -> None: ...

    def read_fixed_string(self, n: int) -> str: ...

    def read_fixed_string_into(self, ref: Ref[str], n: int) -> None: ...

    def read_cstring(self) -> str: ...

    def read_line(self) -> str: ...

    def read_fixed_width_int(
        self, width: int, order: ByteOrder | str, signed: bool = False
    ) -> int: ...

    def read_fixed_width_int_into(
        self, ref: Ref[int], width: int, order: ByteOrder | str, signed: bool = False
    ) -> None: ...

    def read_varint(self) -> int: ...

    def read_length_encoded_integer(self) -> int: ...

    def read_uint16_be(self) -> int: ...

    def read_int16_be(self) -> int: ...

    def read_uint32_be(self) -> int: ...

    def read_int32_be(self) -> int: ...

    def read_uint64_be(self) -> int: ...

    def read_uint16_le(self) -> int: ...

    def read_uint32_le(self) -> int: ...

    def read_uint64_le(self) -> int: ...

    def read_uint16_be_into(self, ref: Ref[int]) -> None: ...

    def read_int16_be_into(self, ref: Ref[int]) -> None: ...

    def read_uint32_be_into(self, ref: Ref[int]) -> None: ...

    def read_int32_be_into(self, ref: Ref[int]) -> None: ...

    def read_uint64_be_into(self, ref: Ref[int]) -> None: ...

    def read_uint16_le_into(self, ref: Ref[int]) -> None: ...

    def read_uint32_le_into(self, ref: Ref[int]) -> None: ...

    def read_uint64_le_into(self, ref: Ref[int]) -> None: ...
