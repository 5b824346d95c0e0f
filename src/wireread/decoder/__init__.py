"""Cursor-based decoders for wire protocol primitives.

This subpackage provides the Decoder protocol and its two implementations:
a bounds-checked decoder for untrusted input and an unchecked decoder for
frames that have already been validated.
"""

from __future__ import annotations

from .bounded import BoundedDecoder
from .contract import ByteOrder, Decoder, Ref
from .factory import new_decoder
from .unchecked import UncheckedDecoder

__all__ = [
    "Decoder",
    "BoundedDecoder",
    "UncheckedDecoder",
    "ByteOrder",
    "Ref",
    "new_decoder",
]
