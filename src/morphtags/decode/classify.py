"""Scheme detection and grammar class tokens.

Chapter HTML marks each word's morphology as a CSS class on its grammar
span: RMAC codes as "gr-" plus the lowercased code, WIVU tags as "gw-!"
plus the tag verbatim (WIVU is case-sensitive). Tooltips are built by
reading those classes back.
"""

from __future__ import annotations

from morphtags.config import WIVU_LANGUAGES
from morphtags.decode.result import (
    DecodeResult,
    Scheme,
    Unrecognized,
    UnrecognizedCodeError,
)
from morphtags.decode.rmac import decode_rmac, is_rmac
from morphtags.decode.wivu import decode_wivu, is_wivu

RMAC_CLASS_PREFIX = "gr-"
WIVU_CLASS_PREFIX = "gw-!"


def detect_scheme(code: str) -> Scheme | None:
    """Return the scheme a code belongs to, RMAC checked first."""
    if is_rmac(code):
        return Scheme.RMAC
    if is_wivu(code):
        return Scheme.WIVU
    return None


def describe(code: str) -> DecodeResult:
    """Decode a code with whichever scheme recognizes it.

    WIVU tags with a known language letter go through decode_wivu even when
    some part does not fit, so those parts are shown as-is while the rest
    still decode.
    """
    if is_rmac(code):
        return decode_rmac(code)
    if code[:1] in WIVU_LANGUAGES:
        result = decode_wivu(code)
        if result.recognized:
            return result
    return Unrecognized(code)


def grammar_class(code: str) -> str:
    """
    Build the CSS class token for a morphology code.

    Raises:
        UnrecognizedCodeError: If the code belongs to neither scheme
    """
    scheme = detect_scheme(code)
    if scheme is Scheme.RMAC:
        return RMAC_CLASS_PREFIX + code.lower()
    if scheme is Scheme.WIVU:
        return WIVU_CLASS_PREFIX + code
    raise UnrecognizedCodeError(code)


def describe_grammar_class(token: str) -> DecodeResult | None:
    """
    Decode a grammar CSS class token.

    Returns:
        The decode result, or None if the token is not a grammar class
    """
    if token.startswith(WIVU_CLASS_PREFIX):
        return decode_wivu(token[len(WIVU_CLASS_PREFIX) :])
    if token.startswith(RMAC_CLASS_PREFIX):
        return decode_rmac(token[len(RMAC_CLASS_PREFIX) :].upper())
    return None
