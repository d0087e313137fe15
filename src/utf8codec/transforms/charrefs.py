"""Replace control, ISO-8859-1 and UTF-8 bytes with numeric character references.

The output is pure ASCII, safe to embed in HTML or XML.  Input may
freely mix single ISO-8859-1 high bytes with multi-byte UTF-8 sequences:
anything that decodes as UTF-8 becomes one reference for its code point, and
any other high byte is taken as an ISO-8859-1 character on its own.
"""

from __future__ import annotations

import logging

from utf8codec._utils import (
    MAX_SEQUENCE_LENGTH,
    _validate_buffer,
    _validate_mutable_buffer,
)
from utf8codec.codec.decoder import decode

logger = logging.getLogger(__name__)


def _needs_reference(byte: int) -> bool:
    # Control characters, and every byte with the high bit set.
    return byte <= 31 or byte >= 128


def _reference(code_point: int) -> bytes:
    return b"&#%d;" % code_point


def apply_character_references(buffer: bytearray) -> None:
    """Rewrite *buffer* in place, replacing non-printable characters with ``&#NNN;``.

    :param buffer: The text to rewrite.
    :raises TypeError: If *buffer* is not a :class:`bytearray`.
    """
    _validate_mutable_buffer(buffer)
    i = 0
    while i < len(buffer):
        byte = buffer[i]
        if not _needs_reference(byte):
            i += 1
            continue

        result = decode(buffer[i : i + MAX_SEQUENCE_LENGTH])
        if result is not None:
            code_point, length = result.code_point, result.length
        else:
            logger.debug("byte 0x%02X at offset %d taken as ISO-8859-1", byte, i)
            code_point, length = byte, 1

        ref = _reference(code_point)
        buffer[i : i + length] = ref
        i += len(ref)


def to_character_references(buffer: bytes | bytearray | memoryview) -> bytes:
    """Return a copy of *buffer* with non-printable characters replaced by ``&#NNN;``.

    >>> to_character_references("Déjà vu".encode())
    b'D&#233;j&#224; vu'

    :param buffer: The text to convert.
    :returns: The converted text, containing only ASCII.
    :raises TypeError: If *buffer* is not a bytes-like object.
    """
    _validate_buffer(buffer)
    work = bytearray(buffer)
    apply_character_references(work)
    return bytes(work)
