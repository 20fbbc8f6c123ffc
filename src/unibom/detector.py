"""BOM detection on byte prefixes and peekable streams."""

from __future__ import annotations

import logging
from typing import IO

from unibom._utils import is_seekable, read_exactly
from unibom.enums import BOMCharset
from unibom.table import BOM, BOMS, MAX_BOM_LENGTH

logger = logging.getLogger(__name__)


def match_bom(data: bytes) -> BOM | None:
    """Return the BOM that *data* starts with, or ``None``.

    Only full signatures match: a truncated prefix such as ``b"\\xef\\xbb"``
    is not a UTF-8 BOM.  Table order decides between overlapping signatures,
    so ``FF FE 00 00`` is UTF-32-LE rather than UTF-16-LE.
    """
    for bom in BOMS:
        if data[: len(bom)] == bom.signature:
            return bom
    return None


def peek(stream: IO[bytes], size: int) -> bytes:
    """Return up to *size* bytes from *stream* without consuming them.

    Seekable streams are read and rewound.  Otherwise ``peek()`` is used,
    which for ``io.BufferedReader`` over a pipe may return fewer bytes than
    are coming; :func:`unibom._utils.peekable` avoids that.

    :raises TypeError: If *stream* can neither peek nor seek.  Wrap such
        streams with :func:`unibom._utils.peekable` first.
    """
    if is_seekable(stream):
        position = stream.tell()
        try:
            return read_exactly(stream, size)
        finally:
            stream.seek(position)
    peek_method = getattr(stream, "peek", None)
    if callable(peek_method):
        return bytes(peek_method(size)[:size])
    msg = f"{type(stream).__name__} supports neither peek() nor seek()"
    raise TypeError(msg)


def detect(stream: IO[bytes]) -> BOMCharset | None:
    """Detect the BOM at the current position of *stream*.

    The stream position is left unchanged, so the BOM bytes are still there
    for whoever reads next.

    :param stream: A binary stream with ``peek()`` or ``seek()`` support.
    :returns: The matching :class:`BOMCharset`, or ``None`` if no BOM is
        present.
    """
    bom = match_bom(peek(stream, MAX_BOM_LENGTH))
    if bom is None:
        logger.debug("no BOM detected")
        return None
    logger.debug("detected %s BOM", bom.charset.value)
    return bom.charset


def detect_bytes(data: bytes | bytearray | memoryview) -> BOMCharset | None:
    """Detect the BOM at the start of an in-memory byte string."""
    bom = match_bom(bytes(data[:MAX_BOM_LENGTH]))
    return None if bom is None else bom.charset
