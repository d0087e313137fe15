"""Encode a code point as its UTF-8 byte sequence."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TypeVar

from utf8codec._utils import (
    CONTINUATION_PAYLOAD,
    CONTINUATION_TAG,
    _validate_code_point,
)
from utf8codec.codec.length import sequence_length

T = TypeVar("T")


def iter_encoded(code_point: int) -> Iterator[int]:
    """Yield the byte values of the UTF-8 encoding of *code_point*.

    Yields nothing when *code_point* is outside 0..U+10FFFF.
    """
    info = sequence_length(code_point)
    if info is None:
        return
    yield info.lead_byte
    for i in range(1, info.length):
        shift = 6 * (info.length - 1 - i)
        yield CONTINUATION_TAG | ((code_point >> shift) & CONTINUATION_PAYLOAD)


def encode_values(code_point: int, element_type: Callable[[int], T] = int) -> list[T]:
    """Return the UTF-8 encoding of *code_point* as a list of numeric values.

    :param code_point: The code point to encode.
    :param element_type: Constructor applied to each byte value, e.g. ``int``
        or a fixed-width integer type.
    :returns: One element per encoded byte; empty for an invalid code point.
    """
    return [element_type(value) for value in iter_encoded(code_point)]


def encode(code_point: int) -> bytes:
    """Return the UTF-8 encoding of *code_point* as a byte string.

    The byte string is NUL-terminated text, so U+0000 encodes to ``b""``;
    use :func:`encode_values` to obtain the encoded NUL byte itself.

    :param code_point: The code point to encode.
    :returns: The encoded bytes; empty for an invalid code point.
    """
    _validate_code_point(code_point)
    if code_point == 0:
        return b""
    return bytes(iter_encoded(code_point))
