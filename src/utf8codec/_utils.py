"""Internal shared constants and argument validation for utf8codec."""

from __future__ import annotations

#: Highest code point representable in UTF-8.
MAX_CODE_POINT: int = 0x10FFFF

#: Longest UTF-8 sequence, in bytes.
MAX_SEQUENCE_LENGTH: int = 4

#: Continuation bytes match ``CONTINUATION_MASK & byte == CONTINUATION_TAG``.
CONTINUATION_MASK: int = 0xC0
CONTINUATION_TAG: int = 0x80

#: Payload bits carried by each continuation byte.
CONTINUATION_PAYLOAD: int = 0x3F

#: Bit separating upper and lower case, both in ASCII and in the second byte
#: of a two-byte Latin-1 Supplement sequence.
CASE_BIT: int = 0x20

#: Lead byte shared by U+00C0..U+00FF.
LATIN1_LEAD: int = 0xC3


def _validate_code_point(code_point: int) -> None:
    """Raise TypeError if *code_point* is not an integer."""
    if isinstance(code_point, bool) or not isinstance(code_point, int):
        msg = f"code point must be an int, not {type(code_point).__name__}"
        raise TypeError(msg)


def _validate_buffer(buffer: bytes | bytearray | memoryview) -> None:
    """Raise TypeError if *buffer* is not a bytes-like object.

    A :class:`memoryview` must be one-dimensional with unsigned byte items
    (format ``"B"``), so that indexing and copying see the same values.
    """
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        msg = f"a bytes-like object is required, not {type(buffer).__name__}"
        raise TypeError(msg)
    if isinstance(buffer, memoryview) and (buffer.format != "B" or buffer.ndim != 1):
        msg = (
            "memoryview must be one-dimensional with format 'B', not "
            f"format {buffer.format!r} with {buffer.ndim} dimension(s); "
            "use .cast('B')"
        )
        raise TypeError(msg)


def _validate_mutable_buffer(buffer: bytearray) -> None:
    """Raise TypeError if *buffer* cannot be modified in place."""
    if not isinstance(buffer, bytearray):
        msg = f"a bytearray is required for in-place use, not {type(buffer).__name__}"
        raise TypeError(msg)
