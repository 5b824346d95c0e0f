"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from wireread import BoundedDecoder, UncheckedDecoder


@pytest.fixture(params=[BoundedDecoder, UncheckedDecoder], ids=["bounded", "unchecked"])
def decoder_cls(request: pytest.FixtureRequest) -> type:
    """Each decoder implementation, for behavior both modes must share."""
    return request.param


@pytest.fixture
def sample_frame() -> bytes:
    """A u16 BE, a u32 LE and a C-string, back to back."""
    return b"\x01\x02" + b"\x04\x03\x02\x01" + b"Hello\x00"
