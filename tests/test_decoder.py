# tests/test_decoder.py
from __future__ import annotations

import logging
from array import array

import pytest

from utf8codec.codec import DecodeResult
from utf8codec.codec.decoder import (
    decode,
    has_continuation_bytes,
    is_valid_utf8,
    iter_decode,
    sequence_byte_count,
)
from utf8codec.codec.encoder import encode_values
from utf8codec.codec.length import sequence_length


@pytest.mark.parametrize(
    ("lead_byte", "expected"),
    [
        (0x00, 1),
        (0x7F, 1),
        (0x80, 0),
        (0xBF, 0),
        (0xC0, 2),
        (0xDF, 2),
        (0xE0, 3),
        (0xEF, 3),
        (0xF0, 4),
        (0xF7, 4),
        (0xF8, 0),
        (0xFF, 0),
    ],
)
def test_sequence_byte_count(lead_byte: int, expected: int) -> None:
    assert sequence_byte_count(lead_byte) == expected


def test_has_continuation_bytes() -> None:
    assert has_continuation_bytes(b"\xe2\x82\xac", 3)
    assert not has_continuation_bytes(b"\xe2\x82", 3)
    assert not has_continuation_bytes(b"\xe2\x82\x2c", 3)
    assert has_continuation_bytes(b"A", 1)


@pytest.mark.parametrize(
    ("data", "code_point", "length"),
    [
        (b"A", 0x41, 1),
        (b"z", 0x7A, 1),
        (b"$", 0x24, 1),
        (b"\xc2\xa2", 0xA2, 2),
        (b"\xc2\xa9", 0xA9, 2),
        (b"\xc3\xb6", 0xF6, 2),
        (b"\xe2\x82\xac", 0x20AC, 3),
        (b"\xe2\xad\xa1", 0x2B61, 3),
        (b"\xf0\x90\x8d\x88", 0x10348, 4),
        (b"\xf0\x9f\x83\x93", 0x1F0D3, 4),
    ],
)
def test_known_vectors(data: bytes, code_point: int, length: int) -> None:
    assert decode(data) == DecodeResult(code_point=code_point, length=length)


def test_only_first_character_is_decoded() -> None:
    assert decode(b"\xc3\xa9tude") == DecodeResult(code_point=0xE9, length=2)


def test_accepts_bytearray_and_memoryview() -> None:
    expected = DecodeResult(code_point=0x20AC, length=3)
    assert decode(bytearray(b"\xe2\x82\xac")) == expected
    assert decode(memoryview(b"x\xe2\x82\xac")[1:]) == expected


@pytest.mark.parametrize(
    "data",
    [
        pytest.param(b"", id="empty"),
        pytest.param(b"\xc2\x22", id="non-continuation-second-byte"),
        pytest.param(b"\xc2", id="truncated-two-byte"),
        pytest.param(b"\xf0\x90\x8d\x08", id="bad-fourth-byte"),
        pytest.param(b"\xa4", id="stray-continuation"),
        pytest.param(b"\xf0\x82\x82\xac", id="overlong-euro"),
        pytest.param(b"\xc0\xaf", id="overlong-slash"),
        pytest.param(b"\xe0\x80\xaf", id="overlong-three-byte"),
        pytest.param(b"\xf4\x90\x80\x80", id="above-max-code-point"),
        pytest.param(b"\xf8\x88\x80\x80\x80", id="five-byte-lead"),
        pytest.param(b"\xff", id="invalid-lead"),
    ],
)
def test_malformed_sequences_are_rejected(data: bytes) -> None:
    assert decode(data) is None


def test_surrogate_is_accepted() -> None:
    assert decode(b"\xed\xa0\x80") == DecodeResult(code_point=0xD800, length=3)


def test_round_trip_over_code_point_range() -> None:
    code_points = [
        *range(0, 0x110000, 61),
        0x7F,
        0x80,
        0x7FF,
        0x800,
        0xFFFF,
        0x10000,
        0x10FFFF,
    ]
    for code_point in code_points:
        info = sequence_length(code_point)
        assert info is not None
        encoded = bytes(encode_values(code_point))
        assert decode(encoded) == DecodeResult(code_point=code_point, length=info.length)


def test_rejection_is_logged_at_debug(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="utf8codec.codec.decoder"):
        decode(b"\xf0\x82\x82\xac")
    assert "overlong" in caplog.text


def test_rejects_str() -> None:
    with pytest.raises(TypeError, match="bytes-like object is required"):
        decode("A")  # type: ignore[arg-type]


def test_iter_decode_yields_each_character() -> None:
    results = list(iter_decode("aé€𐍈".encode()))
    assert [r.code_point for r in results] == [0x61, 0xE9, 0x20AC, 0x10348]
    assert [r.length for r in results] == [1, 2, 3, 4]


def test_iter_decode_stops_at_malformed_byte() -> None:
    results = list(iter_decode(b"ab\xffcd"))
    assert [r.code_point for r in results] == [0x61, 0x62]


def test_is_valid_utf8() -> None:
    assert is_valid_utf8(b"")
    assert is_valid_utf8(b"plain ascii")
    assert is_valid_utf8("Déjà vu 🃓".encode())
    assert is_valid_utf8(bytearray("naïve".encode()))
    assert not is_valid_utf8(b"D\xe9j\xe0 vu")
    assert not is_valid_utf8(b"truncated \xe2\x82")


@pytest.mark.parametrize(
    "view",
    [
        pytest.param(memoryview(array("I", [0xE9])), id="uint32-items"),
        pytest.param(memoryview(array("H", [0x20AC])), id="uint16-items"),
        pytest.param(memoryview(b"\xc3\xa9").cast("b"), id="signed-bytes"),
        pytest.param(memoryview(b"\xc3\xa9\xc3\xa9").cast("B", (2, 2)), id="2d"),
    ],
)
def test_rejects_memoryview_without_byte_items(view: memoryview) -> None:
    with pytest.raises(TypeError, match="format 'B'"):
        decode(view)
    with pytest.raises(TypeError, match="format 'B'"):
        is_valid_utf8(view)


def test_accepts_memoryview_of_unsigned_bytes() -> None:
    view = memoryview(array("B", [0xC2, 0xA9]))
    assert decode(view) == DecodeResult(code_point=0xA9, length=2)
    assert is_valid_utf8(view)
    assert is_valid_utf8(memoryview(b"\xc3\xa9").cast("b").cast("B"))


def test_iter_decode_does_not_lock_the_buffer() -> None:
    buf = bytearray(b"abc")
    it = iter_decode(buf)
    assert next(it).code_point == 0x61
    buf.append(0x64)
    assert [r.code_point for r in it] == [0x62, 0x63, 0x64]
