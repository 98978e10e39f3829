"""Morphology tag decoders for RMAC (Greek) and WIVU (Hebrew/Aramaic)."""

from morphtags.decode.result import (
    Decoded,
    DecodeResult,
    Scheme,
    Unrecognized,
    UnrecognizedCodeError,
    require_decoded,
)
from morphtags.decode.rmac import decode_rmac, describe_rmac, is_rmac
from morphtags.decode.wivu import (
    decode_wivu,
    decode_wivu_part,
    describe_wivu,
    is_wivu,
    normalize_verb,
)
from morphtags.decode.classify import (
    describe,
    describe_grammar_class,
    detect_scheme,
    grammar_class,
)

__all__ = [
    "Decoded",
    "DecodeResult",
    "Scheme",
    "Unrecognized",
    "UnrecognizedCodeError",
    "require_decoded",
    "decode_rmac",
    "describe_rmac",
    "is_rmac",
    "decode_wivu",
    "decode_wivu_part",
    "describe_wivu",
    "is_wivu",
    "normalize_verb",
    "describe",
    "describe_grammar_class",
    "detect_scheme",
    "grammar_class",
]
