"""Decode and validate UTF-8 byte sequences.

A sequence is accepted only when its lead byte announces a length of one to
four bytes, every following byte of that length is a continuation byte
(``10xxxxxx``), and re-measuring the assembled code point gives back the same
length.  The last check rejects overlong encodings (``F0 82 82 AC`` for
U+20AC, whose real encoding is three bytes) and anything above U+10FFFF.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from utf8codec._utils import (
    CONTINUATION_MASK,
    CONTINUATION_PAYLOAD,
    CONTINUATION_TAG,
    MAX_SEQUENCE_LENGTH,
    _validate_buffer,
)
from utf8codec.codec import DecodeResult
from utf8codec.codec.length import sequence_length

logger = logging.getLogger(__name__)

# Payload bits kept from the lead byte, indexed by sequence length.
_LEAD_PAYLOAD: tuple[int, ...] = (0x00, 0x7F, 0x1F, 0x0F, 0x07)


def sequence_byte_count(lead_byte: int) -> int:
    """Return the sequence length announced by *lead_byte*, or 0 if it is no lead byte.

    Continuation bytes (``10xxxxxx``) and ``11111xxx`` both give 0.
    """
    if (lead_byte & 0x80) == 0x00:
        return 1
    if (lead_byte & 0xE0) == 0xC0:
        return 2
    if (lead_byte & 0xF0) == 0xE0:
        return 3
    if (lead_byte & 0xF8) == 0xF0:
        return 4
    return 0


def has_continuation_bytes(buffer: bytes | bytearray | memoryview, length: int) -> bool:
    """Check that *buffer* holds *length* bytes and bytes 1.. are all continuation bytes."""
    if length > len(buffer):
        return False
    return all(
        (buffer[i] & CONTINUATION_MASK) == CONTINUATION_TAG for i in range(1, length)
    )


def decode(buffer: bytes | bytearray | memoryview) -> DecodeResult | None:
    """Decode the UTF-8 character at the start of *buffer*.

    Only the first character is examined; slice the buffer to decode at a
    later position.

    :param buffer: Bytes beginning with the sequence to decode.
    :returns: A :class:`DecodeResult`, or ``None`` if the buffer does not
        start with a well-formed sequence.
    :raises TypeError: If *buffer* is not a bytes-like object.
    """
    _validate_buffer(buffer)
    if not buffer:
        return None

    lead = buffer[0]
    length = sequence_byte_count(lead)
    if length == 0:
        logger.debug("rejected 0x%02X: not a lead byte", lead)
        return None
    if not has_continuation_bytes(buffer, length):
        logger.debug(
            "rejected 0x%02X: truncated or missing continuation byte", lead
        )
        return None

    code_point = lead & _LEAD_PAYLOAD[length]
    for i in range(1, length):
        code_point = (code_point << 6) | (buffer[i] & CONTINUATION_PAYLOAD)

    info = sequence_length(code_point)
    if info is None or info.length != length:
        logger.debug(
            "rejected %d-byte sequence for U+%04X: overlong or out of range",
            length,
            code_point,
        )
        return None

    return DecodeResult(code_point=code_point, length=length)


def iter_decode(buffer: bytes | bytearray | memoryview) -> Iterator[DecodeResult]:
    """Yield each character of *buffer* in order.

    Iteration stops silently at the first position that does not hold a
    well-formed sequence; use :func:`is_valid_utf8` to tell the two apart.
    """
    _validate_buffer(buffer)
    pos = 0
    while pos < len(buffer):
        # No view of the caller's buffer is held across a yield.
        result = decode(buffer[pos : pos + MAX_SEQUENCE_LENGTH])
        if result is None:
            return
        yield result
        pos += result.length


def is_valid_utf8(buffer: bytes | bytearray | memoryview) -> bool:
    """Return ``True`` if every byte of *buffer* belongs to a well-formed sequence.

    An empty buffer is valid.
    """
    consumed = sum(result.length for result in iter_decode(buffer))
    return consumed == len(buffer)
