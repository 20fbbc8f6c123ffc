"""The BOM table: charset names and their byte signatures."""

from __future__ import annotations

import codecs
import dataclasses

from unibom.enums import BOMCharset


class UnsupportedCharsetError(ValueError):
    """Raised when a charset has no entry in the BOM table."""

    def __init__(self, charset: object, supported: tuple[str, ...]) -> None:
        self.charset = charset
        self.supported = supported
        super().__init__(
            f"Charset {charset!r} is not recognised; "
            f"expected one of: {', '.join(supported)}"
        )


@dataclasses.dataclass(frozen=True, slots=True)
class BOM:
    """A charset and the exact bytes that mark it at the start of a stream."""

    charset: BOMCharset
    signature: bytes

    @property
    def codec(self) -> str:
        """The Python codec name used to encode and decode this charset."""
        return codecs.lookup(self.charset.value).name

    def __len__(self) -> int:
        return len(self.signature)


# Ordered by detection precedence: UTF-8 first, then the 4-byte UTF-32
# signatures, then UTF-16.  The UTF-32-LE signature starts with the UTF-16-LE
# one, so UTF-32 must be ruled out before UTF-16 is tried.
BOMS: tuple[BOM, ...] = (
    BOM(BOMCharset.UTF_8, codecs.BOM_UTF8),
    BOM(BOMCharset.UTF_32LE, codecs.BOM_UTF32_LE),
    BOM(BOMCharset.UTF_32BE, codecs.BOM_UTF32_BE),
    BOM(BOMCharset.UTF_16LE, codecs.BOM_UTF16_LE),
    BOM(BOMCharset.UTF_16BE, codecs.BOM_UTF16_BE),
)

#: Number of bytes the detector peeks at; grows with the longest signature.
MAX_BOM_LENGTH: int = max(len(bom) for bom in BOMS)

_BY_CHARSET: dict[BOMCharset, BOM] = {bom.charset: bom for bom in BOMS}
_BY_CODEC: dict[str, BOM] = {bom.codec: bom for bom in BOMS}


def supported_charsets() -> tuple[str, ...]:
    """Return the charset names accepted by :func:`lookup`."""
    return tuple(bom.charset.value for bom in BOMS)


def all_boms() -> tuple[BOM, ...]:
    """Return every table entry in detection precedence order."""
    return BOMS


def lookup(charset: BOMCharset | str) -> BOM:
    """Return the table entry for *charset*.

    :param charset: A :class:`BOMCharset`, its name (``"UTF-16LE"``) or any
        Python alias of the same codec (``"utf_16_le"``).
    :raises UnsupportedCharsetError: If *charset* names no table entry.  This
        includes real codecs without a fixed BOM, such as ``"utf-16"``.
    """
    if isinstance(charset, BOMCharset):
        return _BY_CHARSET[charset]
    if isinstance(charset, str):
        try:
            codec = codecs.lookup(charset).name
        except LookupError:
            codec = None
        if codec in _BY_CODEC:
            return _BY_CODEC[codec]
    raise UnsupportedCharsetError(charset, supported_charsets())
