"""Enumerations for utf8codec."""

import enum


class CaseMatch(enum.IntEnum):
    """Which case-folding pattern matched the character at a buffer position.

    The numeric value is also the number of bytes the matched character
    occupies.
    """

    NONE = 0
    ASCII = 1
    UTF8 = 2
