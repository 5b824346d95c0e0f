"""Decoder configuration.

Text-producing operations (fixed strings, C-strings, lines) decode bytes with
the codec named here. The default error handler keeps text decoding total, so
the only way a bounded read can fail is running out of bytes.
"""

from __future__ import annotations

import codecs

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .exceptions import ConfigError


class DecoderConfig(BaseModel):
    """Options shared by both decoder modes.

    Attributes:
        encoding: Text codec used for string reads (default "utf-8")
        errors: Codec error handler (default "surrogateescape", which maps
            undecodable bytes to lone surrogates instead of raising)

    Example:
        >>> config = DecoderConfig.create(encoding="latin-1")
        >>> BoundedDecoder(b"caf\\xe9\\x00", config=config).read_cstring()
        'café'
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
    )

    encoding: str = "utf-8"
    errors: str = "surrogateescape"

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            return codecs.lookup(value).name
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e

    @field_validator("errors")
    @classmethod
    def _check_errors(cls, value: str) -> str:
        try:
            codecs.lookup_error(value)
        except LookupError as e:
            raise ValueError(f"unknown error handler: {value}") from e
        return value

    @classmethod
    def create(cls, **options: str) -> DecoderConfig:
        """Build a config, converting validation failures to ConfigError.

        Raises:
            ConfigError: If an option is unknown or has an invalid value
        """
        try:
            return cls(**options)
        except ValidationError as e:
            raise ConfigError(f"Invalid decoder configuration: {e}") from e


DEFAULT_CONFIG = DecoderConfig()
