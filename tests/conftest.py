# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

import io

import pytest

from unibom.enums import BOMCharset
from unibom.table import lookup

TEXT = "whatever"
BOM_TEXT = "\ufeff" + TEXT

ALL_CHARSETS = list(BOMCharset)


def encode(text: str, charset: BOMCharset) -> bytes:
    """Encode *text* with the Python codec behind *charset*."""
    return text.encode(lookup(charset).codec)


@pytest.fixture(params=ALL_CHARSETS, ids=[c.value for c in ALL_CHARSETS])
def charset(request: pytest.FixtureRequest) -> BOMCharset:
    return request.param


@pytest.fixture
def bom_bytes(charset: BOMCharset) -> bytes:
    """``"\\ufeffwhatever"`` encoded in *charset*."""
    return encode(BOM_TEXT, charset)


class ReadOnlyStream:
    """A minimal byte source with ``read()`` only: no peek, no seek."""

    def __init__(self, data: bytes, chunk: int | None = None) -> None:
        self._data = data
        self._pos = 0
        self._chunk = chunk
        self.close_calls = 0

    def read(self, size: int = -1) -> bytes:
        if size is None or size < 0:
            size = len(self._data) - self._pos
        if self._chunk is not None:
            size = min(size, self._chunk)
        data = self._data[self._pos : self._pos + size]
        self._pos += len(data)
        return data

    def close(self) -> None:
        self.close_calls += 1


class WriteOnlyStream:
    """A minimal byte sink with ``write()`` only."""

    def __init__(self) -> None:
        self.data = bytearray()
        self.close_calls = 0

    def write(self, data: bytes) -> int:
        self.data.extend(data)
        return len(data)

    def close(self) -> None:
        self.close_calls += 1


class ShortReadRaw(io.RawIOBase):
    """A non-seekable raw stream handing out at most *chunk* bytes per read."""

    def __init__(self, data: bytes, chunk: int = 2) -> None:
        self._data = data
        self._pos = 0
        self._chunk = chunk

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        n = min(len(buffer), self._chunk, len(self._data) - self._pos)
        buffer[:n] = self._data[self._pos : self._pos + n]
        self._pos += n
        return n


class ShortWriteRaw(io.RawIOBase):
    """A raw sink accepting at most *chunk* bytes per write."""

    def __init__(self, chunk: int = 1) -> None:
        self.data = bytearray()
        self._chunk = chunk

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        accepted = bytes(data[: self._chunk])
        self.data.extend(accepted)
        return len(accepted)
