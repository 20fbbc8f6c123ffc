"""Byte-order mark detection and BOM-aware text streams."""

from __future__ import annotations

from unibom.detector import detect, detect_bytes, match_bom
from unibom.enums import BOMCharset
from unibom.predicates import (
    has_bom,
    has_utf8_bom,
    has_utf16be_bom,
    has_utf16le_bom,
    has_utf32be_bom,
    has_utf32le_bom,
)
from unibom.streams import bom_reader, bom_writer
from unibom.table import (
    BOM,
    MAX_BOM_LENGTH,
    UnsupportedCharsetError,
    all_boms,
    lookup,
    supported_charsets,
)

__version__ = "0.1.0"
__all__ = [
    "BOM",
    "MAX_BOM_LENGTH",
    "BOMCharset",
    "UnsupportedCharsetError",
    "all_boms",
    "bom_reader",
    "bom_writer",
    "detect",
    "detect_bytes",
    "has_bom",
    "has_utf8_bom",
    "has_utf16be_bom",
    "has_utf16le_bom",
    "has_utf32be_bom",
    "has_utf32le_bom",
    "lookup",
    "match_bom",
    "supported_charsets",
]
