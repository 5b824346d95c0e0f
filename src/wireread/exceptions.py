"""Exception hierarchy for wireread.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from WirereadError for easy catching of any wireread-specific error.
"""

from __future__ import annotations


class WirereadError(Exception):
    """Base exception for all wireread errors."""

    pass


class ConfigError(WirereadError):
    """Raised when a decoder configuration is invalid.

    Examples:
        - Unknown text encoding
        - Unknown codec error handler
    """

    pass


class DecodeError(WirereadError):
    """Raised when decoding binary data fails."""

    pass


class InsufficientDataError(DecodeError):
    """Raised when a read needs more bytes than the buffer has left.

    This is the only decode failure a bounded decoder produces. The cursor
    is left where it was before the failing call.

    Attributes:
        needed: Bytes the operation required, or None when the operation was
            scanning for a terminator that never appeared
        available: Bytes left in the buffer at the time of the call
        offset: Cursor position at the time of the call
    """

    def __init__(self, needed: int | None, available: int, offset: int) -> None:
        self.needed = needed
        self.available = available
        self.offset = offset
        if needed is None:
            message = f"No terminating byte in {available} remaining bytes at offset {offset}"
        else:
            message = f"Need {needed} bytes at offset {offset}, have {available}"
        super().__init__(message)
