"""Case folding for ASCII letters and Latin-1 Supplement letters in UTF-8.

Upper and lower case differ by a single bit (0x20) in both ranges handled
here: directly in the byte for ASCII, and in the second byte of the two-byte
sequences ``C3 80``..``C3 BE`` for U+00C0..U+00FE.  The multiplication sign
(U+00D7, ``C3 97``) and the division sign (U+00F7, ``C3 B7``) sit inside
those ranges but have no case.
"""

from __future__ import annotations

from collections.abc import Callable

from utf8codec._utils import (
    CASE_BIT,
    LATIN1_LEAD,
    _validate_buffer,
    _validate_mutable_buffer,
)
from utf8codec.codec.decoder import sequence_byte_count
from utf8codec.enums import CaseMatch

_MULTIPLICATION_SIGN = 0x97
_DIVISION_SIGN = 0xB7


def _upper_at(buffer: bytes | bytearray | memoryview, pos: int) -> CaseMatch:
    byte = buffer[pos]
    if 0x41 <= byte <= 0x5A:
        return CaseMatch.ASCII
    if byte == LATIN1_LEAD and pos + 1 < len(buffer):
        second = buffer[pos + 1]
        if 0x80 <= second <= 0x9E and second != _MULTIPLICATION_SIGN:
            return CaseMatch.UTF8
    return CaseMatch.NONE


def _lower_at(buffer: bytes | bytearray | memoryview, pos: int) -> CaseMatch:
    byte = buffer[pos]
    if 0x61 <= byte <= 0x7A:
        return CaseMatch.ASCII
    if byte == LATIN1_LEAD and pos + 1 < len(buffer):
        second = buffer[pos + 1]
        if 0xA0 <= second <= 0xBE and second != _DIVISION_SIGN:
            return CaseMatch.UTF8
    return CaseMatch.NONE


def _flip_at(buffer: bytearray, pos: int, match: CaseMatch) -> None:
    # The case bit lives in the last byte of the matched character.
    buffer[pos + match - 1] ^= CASE_BIT


def is_upper(buffer: bytes | bytearray | memoryview) -> CaseMatch:
    """Report whether *buffer* starts with an upper-case letter.

    :returns: :attr:`CaseMatch.ASCII` for ``A``-``Z``, :attr:`CaseMatch.UTF8`
        for U+00C0..U+00DE (except U+00D7), otherwise :attr:`CaseMatch.NONE`.
    """
    _validate_buffer(buffer)
    if not buffer:
        return CaseMatch.NONE
    return _upper_at(buffer, 0)


def is_lower(buffer: bytes | bytearray | memoryview) -> CaseMatch:
    """Report whether *buffer* starts with a lower-case letter.

    :returns: :attr:`CaseMatch.ASCII` for ``a``-``z``, :attr:`CaseMatch.UTF8`
        for U+00E0..U+00FE (except U+00F7), otherwise :attr:`CaseMatch.NONE`.
    """
    _validate_buffer(buffer)
    if not buffer:
        return CaseMatch.NONE
    return _lower_at(buffer, 0)


def to_upper(buffer: bytearray) -> CaseMatch:
    """Upper-case the first character of *buffer* in place if it is lower case.

    :returns: How the lower-case character matched, or
        :attr:`CaseMatch.NONE` if the buffer was left alone.
    """
    _validate_mutable_buffer(buffer)
    match = is_lower(buffer)
    if match:
        _flip_at(buffer, 0, match)
    return match


def to_lower(buffer: bytearray) -> CaseMatch:
    """Lower-case the first character of *buffer* in place if it is upper case.

    :returns: How the upper-case character matched, or
        :attr:`CaseMatch.NONE` if the buffer was left alone.
    """
    _validate_mutable_buffer(buffer)
    match = is_upper(buffer)
    if match:
        _flip_at(buffer, 0, match)
    return match


def _fold(buffer: bytearray, matcher: Callable[[bytearray, int], CaseMatch]) -> None:
    pos = 0
    end = len(buffer)
    while pos < end:
        match = matcher(buffer, pos)
        if match:
            _flip_at(buffer, pos, match)
            pos += match
        else:
            # Step over a whole sequence so continuation bytes are never
            # mistaken for lead bytes.
            pos += sequence_byte_count(buffer[pos]) or 1


def make_upper(buffer: bytearray) -> None:
    """Upper-case every ASCII and Latin-1 Supplement letter of *buffer* in place."""
    _validate_mutable_buffer(buffer)
    _fold(buffer, _lower_at)


def make_lower(buffer: bytearray) -> None:
    """Lower-case every ASCII and Latin-1 Supplement letter of *buffer* in place."""
    _validate_mutable_buffer(buffer)
    _fold(buffer, _upper_at)


def upper(buffer: bytes | bytearray | memoryview) -> bytes:
    """Return an upper-cased copy of *buffer*."""
    _validate_buffer(buffer)
    work = bytearray(buffer)
    make_upper(work)
    return bytes(work)


def lower(buffer: bytes | bytearray | memoryview) -> bytes:
    """Return a lower-cased copy of *buffer*."""
    _validate_buffer(buffer)
    work = bytearray(buffer)
    make_lower(work)
    return bytes(work)
