"""Enumerations for unibom."""

import enum


class BOMCharset(str, enum.Enum):
    """Charsets that carry a fixed byte-order mark.

    Members compare equal to their plain names, so ``BOMCharset.UTF_8 ==
    "UTF-8"`` holds.
    """

    UTF_8 = "UTF-8"
    UTF_16LE = "UTF-16LE"
    UTF_16BE = "UTF-16BE"
    UTF_32LE = "UTF-32LE"
    UTF_32BE = "UTF-32BE"

    def __str__(self) -> str:
        return self.value
