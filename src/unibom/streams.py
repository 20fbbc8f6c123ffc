"""Text readers and writers that understand byte-order marks."""

from __future__ import annotations

import codecs
import io
import logging
from typing import IO

from unibom._utils import Sink, Source, open_sink, open_source, peekable
from unibom.detector import detect
from unibom.enums import BOMCharset
from unibom.table import lookup

logger = logging.getLogger(__name__)

#: Default codec error handler for readers and writers.
DEFAULT_ERRORS = "strict"
#: Default newline mode: no translation, so text round-trips unchanged.
DEFAULT_NEWLINE = ""


def _skip_character(stream: IO[bytes], encoding: str) -> str:
    """Consume the bytes of exactly one character of *encoding* from *stream*."""
    decoder = codecs.getincrementaldecoder(encoding)()
    while True:
        byte = stream.read(1)
        if not byte:
            return decoder.decode(b"", final=True)
        char = decoder.decode(byte)
        if char:
            return char


def bom_reader(
    source: Source,
    skip_bom: bool = True,
    *,
    default_encoding: str | None = None,
    errors: str = DEFAULT_ERRORS,
    newline: str | None = DEFAULT_NEWLINE,
) -> io.TextIOWrapper:
    """Open *source* as text, choosing the encoding from its BOM.

    With a BOM present the reader decodes with the matching charset and, if
    *skip_bom* is true, the BOM character itself is consumed before the
    reader is returned.  Without one, *default_encoding* is used (``None``
    means the platform default, as with :func:`open`) and nothing is skipped.

    The returned reader owns *source*; use it in a ``with`` block::

        with bom_reader("export.csv") as f:
            rows = list(csv.reader(f))

    :param source: Bytes, a path, or a readable binary stream.
    :param skip_bom: Drop the leading U+FEFF from the decoded text.
    :param default_encoding: Encoding used when no BOM is found.
    :param errors: Codec error handler passed to :class:`io.TextIOWrapper`.
    :param newline: Newline mode passed to :class:`io.TextIOWrapper`.
    """
    stream, owned = open_source(source)
    try:
        buffer = peekable(stream)
        charset = detect(buffer)
        if charset is None:
            encoding = default_encoding
        else:
            encoding = lookup(charset).codec
            if skip_bom:
                _skip_character(buffer, encoding)
                logger.debug("skipped %s BOM", charset.value)
        return io.TextIOWrapper(
            buffer, encoding=encoding, errors=errors, newline=newline
        )
    except BaseException:
        if owned:
            stream.close()
        raise


def bom_writer(
    charset: BOMCharset | str,
    sink: Sink,
    *,
    errors: str = DEFAULT_ERRORS,
    newline: str | None = DEFAULT_NEWLINE,
) -> io.TextIOWrapper:
    """Open *sink* for text in *charset*, starting it with the charset's BOM.

    The BOM bytes are written before this function returns.  The returned
    writer owns *sink*.

    :param charset: One of the names in :func:`unibom.supported_charsets`
        or an alias of the same codec.
    :param sink: A path or a writable binary stream.
    :raises UnsupportedCharsetError: If *charset* has no BOM.  Nothing is
        opened or written in that case.
    """
    bom = lookup(charset)
    stream, owned = open_sink(sink)
    try:
        stream.write(bom.signature)
        writer = io.TextIOWrapper(
            stream, encoding=bom.codec, errors=errors, newline=newline
        )
    except BaseException:
        if owned:
            stream.close()
        raise
    logger.debug("wrote %s BOM", bom.charset.value)
    return writer
