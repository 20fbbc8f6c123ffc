"""Internal helpers for turning caller input into binary streams."""

from __future__ import annotations

import io
import os
from typing import IO, Any, Union

from unibom.table import MAX_BOM_LENGTH

#: Anything accepted where a byte source is expected.
Source = Union[bytes, bytearray, memoryview, str, os.PathLike, IO[bytes]]
#: Anything accepted where a byte sink is expected.
Sink = Union[str, os.PathLike, IO[bytes]]


def _is_path(obj: object) -> bool:
    return isinstance(obj, (str, os.PathLike))


def is_seekable(stream: Any) -> bool:
    """Whether *stream* can rewind to a saved position."""
    seekable = getattr(stream, "seekable", None)
    return callable(seekable) and bool(seekable())


class _RawReader(io.RawIOBase):
    """Expose any object with ``read()`` as a raw stream.

    The first ``MAX_BOM_LENGTH`` bytes are fetched up front and handed out by
    the first ``readinto()``, so a ``BufferedReader`` on top can peek at the
    whole BOM even when the source returns short reads.
    """

    def __init__(self, stream: Any) -> None:
        self._stream = stream
        self._head = read_exactly(stream, MAX_BOM_LENGTH)

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: Any) -> int:
        if self._head:
            n = min(len(buffer), len(self._head))
            buffer[:n] = self._head[:n]
            self._head = self._head[n:]
            return n
        data = self._stream.read(len(buffer))
        n = len(data)
        buffer[:n] = data
        return n

    def close(self) -> None:
        if not self.closed:
            try:
                close = getattr(self._stream, "close", None)
                if close is not None:
                    close()
            finally:
                super().close()


class _RawWriter(io.RawIOBase):
    """Expose any object with ``write()`` as a raw stream."""

    def __init__(self, stream: Any) -> None:
        self._stream = stream

    def writable(self) -> bool:
        return True

    def write(self, data: Any) -> int:
        data = bytes(data)
        written = self._stream.write(data)
        return len(data) if written is None else written

    def close(self) -> None:
        if not self.closed:
            try:
                super().close()
            finally:
                close = getattr(self._stream, "close", None)
                if close is not None:
                    close()


def peekable(stream: Any) -> Any:
    """Return *stream* itself if it can seek, else a buffered wrapper.

    A ``peek()`` method alone is not enough: ``io.BufferedReader.peek`` hands
    back whatever is buffered, which over a pipe may be shorter than a BOM.
    The wrapper pre-reads ``MAX_BOM_LENGTH`` bytes and owns *stream*: closing
    it closes *stream* once.
    """
    if is_seekable(stream):
        return stream
    return io.BufferedReader(_RawReader(stream))


def open_source(source: Source) -> tuple[IO[bytes], bool]:
    """Turn *source* into a readable binary stream.

    :returns: ``(stream, owned)`` where *owned* is ``True`` when the stream
        was created here and should be closed by the caller.
    """
    if isinstance(source, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(source)), True
    if _is_path(source):
        return open(source, "rb"), True  # noqa: SIM115
    if not callable(getattr(source, "read", None)):
        msg = (
            "expected bytes, a path or a readable binary stream, "
            f"got {type(source).__name__}"
        )
        raise TypeError(msg)
    return source, False


def open_sink(sink: Sink) -> tuple[IO[bytes], bool]:
    """Turn *sink* into a writable binary stream suitable for ``TextIOWrapper``.

    :returns: ``(stream, owned)`` as for :func:`open_source`.
    """
    if _is_path(sink):
        return open(sink, "wb"), True  # noqa: SIM115
    if isinstance(sink, io.RawIOBase):
        # raw writes may be partial; BufferedWriter retries until done
        return io.BufferedWriter(sink), False
    if isinstance(sink, io.IOBase):
        return sink, False
    if not callable(getattr(sink, "write", None)):
        msg = f"expected a path or a writable binary stream, got {type(sink).__name__}"
        raise TypeError(msg)
    return io.BufferedWriter(_RawWriter(sink)), False


def read_exactly(stream: IO[bytes], size: int) -> bytes:
    """Read up to *size* bytes, retrying short reads until EOF."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)
