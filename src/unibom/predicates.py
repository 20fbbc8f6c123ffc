"""Single-charset BOM presence checks."""

from __future__ import annotations

from unibom._utils import Source, open_source, read_exactly
from unibom.enums import BOMCharset
from unibom.table import lookup


def has_bom(charset: BOMCharset | str, source: Source) -> bool:
    """Return ``True`` if *source* starts with the BOM of *charset*.

    Exactly as many bytes as the signature holds are read.  A source that
    ends before that simply does not carry the BOM.  Streams are consumed and
    not rewound; paths are opened and closed here.

    :raises UnsupportedCharsetError: If *charset* has no BOM.
    """
    signature = lookup(charset).signature
    stream, owned = open_source(source)
    try:
        head = read_exactly(stream, len(signature))
    finally:
        if owned:
            stream.close()
    return head == signature


def has_utf8_bom(source: Source) -> bool:
    """Return ``True`` if *source* starts with the UTF-8 BOM."""
    return has_bom(BOMCharset.UTF_8, source)


def has_utf16le_bom(source: Source) -> bool:
    """Return ``True`` if *source* starts with the UTF-16LE BOM."""
    return has_bom(BOMCharset.UTF_16LE, source)


def has_utf16be_bom(source: Source) -> bool:
    """Return ``True`` if *source* starts with the UTF-16BE BOM."""
    return has_bom(BOMCharset.UTF_16BE, source)


def has_utf32le_bom(source: Source) -> bool:
    """Return ``True`` if *source* starts with the UTF-32LE BOM."""
    return has_bom(BOMCharset.UTF_32LE, source)


def has_utf32be_bom(source: Source) -> bool:
    """Return ``True`` if *source* starts with the UTF-32BE BOM."""
    return has_bom(BOMCharset.UTF_32BE, source)
