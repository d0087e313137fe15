"""Length/lead calculation for a single code point."""

from __future__ import annotations

from utf8codec._utils import MAX_CODE_POINT, _validate_code_point
from utf8codec.codec import SequenceInfo

# Pre-built results for the single-byte band, which dominates typical text.
_ASCII_INFO: tuple[SequenceInfo, ...] = tuple(
    SequenceInfo(length=1, lead_byte=cp) for cp in range(0x80)
)


def sequence_length(code_point: int) -> SequenceInfo | None:
    """Return the UTF-8 length of *code_point* and its encoded lead byte.

    :param code_point: The integer code point to measure.
    :returns: A :class:`SequenceInfo`, or ``None`` when *code_point* is
        negative or above U+10FFFF.
    :raises TypeError: If *code_point* is not an int.
    """
    _validate_code_point(code_point)
    if code_point < 0:
        return None
    if code_point <= 0x7F:
        return _ASCII_INFO[code_point]
    if code_point <= 0x07FF:
        return SequenceInfo(length=2, lead_byte=0xC0 | ((code_point >> 6) & 0x1F))
    if code_point <= 0xFFFF:
        return SequenceInfo(length=3, lead_byte=0xE0 | ((code_point >> 12) & 0x0F))
    if code_point <= MAX_CODE_POINT:
        return SequenceInfo(length=4, lead_byte=0xF0 | ((code_point >> 18) & 0x07))
    return None
