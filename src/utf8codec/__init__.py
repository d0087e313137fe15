"""UTF-8 codec with character-reference and case-folding transforms."""

from __future__ import annotations

from utf8codec._utils import MAX_CODE_POINT
from utf8codec.codec import DecodeResult, SequenceInfo
from utf8codec.codec.decoder import (
    decode,
    is_valid_utf8,
    iter_decode,
    sequence_byte_count,
)
from utf8codec.codec.encoder import encode, encode_values, iter_encoded
from utf8codec.codec.length import sequence_length
from utf8codec.enums import CaseMatch
from utf8codec.transforms.case import (
    is_lower,
    is_upper,
    lower,
    make_lower,
    make_upper,
    to_lower,
    to_upper,
    upper,
)
from utf8codec.transforms.charrefs import (
    apply_character_references,
    to_character_references,
)

__version__ = "1.0.0"
__all__ = [
    "MAX_CODE_POINT",
    "CaseMatch",
    "DecodeResult",
    "SequenceInfo",
    "apply_character_references",
    "decode",
    "encode",
    "encode_values",
    "is_lower",
    "is_upper",
    "is_valid_utf8",
    "iter_decode",
    "iter_encoded",
    "lower",
    "make_lower",
    "make_upper",
    "sequence_byte_count",
    "sequence_length",
    "to_character_references",
    "to_lower",
    "to_upper",
    "upper",
]
