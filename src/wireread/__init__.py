"""wireread: Binary Wire Protocol Readers

Cursor-based decoding of wire protocol primitives from in-memory buffers,
in two modes that share one contract:

- BoundedDecoder: checks every read and raises InsufficientDataError on
  truncation, leaving the cursor untouched
- UncheckedDecoder: no checks, for frames already known to be complete

Supported primitives: raw bytes, fixed-length / zero-terminated / newline
terminated strings, 16/32/64-bit integers in either byte order, base-128
varints and MySQL length-encoded integers.

Quick Start:
    >>> from wireread import ByteOrder, new_decoder
    >>>
    >>> decoder = new_decoder(b"\\x01\\x02\\x04\\x03\\x02\\x01Hello\\x00")
    >>> decoder.read_fixed_width_int(16, ByteOrder.BE)
    258
    >>> decoder.read_fixed_width_int(32, ByteOrder.LE)
    16909060
    >>> decoder.read_cstring()
    'Hello'
"""

from __future__ import annotations

import logging

from .config import DEFAULT_CONFIG, DecoderConfig
from .decoder import BoundedDecoder, ByteOrder, Decoder, Ref, UncheckedDecoder, new_decoder
from .exceptions import ConfigError, DecodeError, InsufficientDataError, WirereadError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Decoder",
    "BoundedDecoder",
    "UncheckedDecoder",
    "new_decoder",
    "ByteOrder",
    "Ref",
    # Configuration
    "DecoderConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "WirereadError",
    "DecodeError",
    "InsufficientDataError",
    "ConfigError",
    # Version
    "__version__",
]
