"""Decoder construction."""

from __future__ import annotations

import logging

from ..config import DecoderConfig
from .bounded import BoundedDecoder
from .contract import BytesLike, Decoder
from .unchecked import UncheckedDecoder

logger = logging.getLogger(__name__)


def new_decoder(
    buffer: BytesLike,
    *,
    checked: bool = True,
    config: DecoderConfig | None = None,
) -> Decoder:
    """Create a decoder positioned at the start of ``buffer``.

    Args:
        buffer: Bytes to decode. Must be a complete frame when checked=False.
        checked: Return a BoundedDecoder (True) or an UncheckedDecoder (False)
        config: Text decoding options shared by both modes

    Returns:
        A decoder implementing the Decoder protocol

    Example:
        >>> outer = new_decoder(packet)
        >>> frame = outer.read_bytes(outer.read_uint32_be())
        >>> body = new_decoder(frame, checked=False)
    """
    decoder: Decoder
    if checked:
        decoder = BoundedDecoder(buffer, config)
    else:
        decoder = UncheckedDecoder(buffer, config)
    logger.debug("Created %s over %d bytes", type(decoder).__name__, decoder.bytes_remaining())
    return decoder
