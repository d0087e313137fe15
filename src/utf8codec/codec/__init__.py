"""UTF-8 codec layers and shared result types."""

from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class SequenceInfo:
    """Length of a code point's UTF-8 sequence and the lead byte it starts with."""

    length: int
    lead_byte: int


@dataclasses.dataclass(frozen=True, slots=True)
class DecodeResult:
    """A code point decoded from the start of a buffer.

    *length* is the number of bytes the sequence consumed.
    """

    code_point: int
    length: int
