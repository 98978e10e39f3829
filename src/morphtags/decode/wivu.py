"""Decode Hebrew/Aramaic WIVU morphology codes into readable descriptions.

A WIVU tag is one language letter (H=Hebrew, A=Aramaic) followed by one or
more slash-separated parts, e.g. "HC/Vqw3ms" or "ANcmsd". Each part starts
with a part-of-speech letter; the remaining characters are positional, one
grammatical axis per position:

  T  Type     subtype letter, meaning depends on the part of speech
  P  Person   1, 2, 3 (shown verbatim)
  G  Gender
  N  Number
  S  State
  E  Stem     verbs only, meaning depends on the language

"x" in a position means "not stated" and is skipped.

Failure is asymmetric: a part whose shape does not fit its category is shown
unchanged while the other parts still decode, but a character in a position
the category has no axis for (such as "Cb" or "Rdd") makes the whole tag
come back unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from morphtags.config import (
    WIVU_GENDERS,
    WIVU_LANGUAGES,
    WIVU_NUMBERS,
    WIVU_PROPER_NAME_GENDERS,
    WIVU_STATES,
    WIVU_STEMS,
    WIVU_SUBTYPES,
)
from morphtags.decode.result import DecodeResult, Decoded, Scheme, Unrecognized

logger = logging.getLogger(__name__)

PLACEHOLDER = "x"
PROPER_NAME_PREFIX = "Np"

VERB_STEM_LETTERS = frozenset("DGHKLMNOPQabcefhijklmopqrstuvwyz")
VERB_TYPE_LETTERS = frozenset("pqiwhjvrsauc")


class _AxisAbort(Exception):
    """A character sits at a position without an axis."""


class _PartMismatch(Exception):
    """A part does not fit its category; it is shown as-is."""


def _fits(rest: str, *slots: str) -> bool:
    """Check that rest has exactly one character from each slot, in order."""
    return len(rest) == len(slots) and all(
        char in slot for char, slot in zip(rest, slots)
    )


def _nominal_shape(types: str, genders: str, numbers: str, states: str):
    def check(rest: str) -> bool:
        return _fits(rest, types) or _fits(rest, types, genders, numbers, states)

    return check


def _any_shape(rest: str) -> bool:
    return True


def _particle_shape(rest: str) -> bool:
    return rest == "" or _fits(rest, "acdeijmnor")


def _verb_shape(rest: str) -> bool:
    if not _fits(rest[:2], VERB_STEM_LETTERS, VERB_TYPE_LETTERS):
        return False
    tail = rest[2:]
    return (
        tail == ""
        or _fits(tail, "123x", "bcfmx", "dpsx")
        or _fits(tail, "123x", "bcfmx", "dpsx", "acdx")
    )


@dataclass(frozen=True)
class PartSpec:
    """How to read the characters following a part-of-speech letter."""

    name: str
    axes: str
    shape: Callable[[str], bool]


PART_SPECS = {
    "A": PartSpec("Adjective", "TGNS", _nominal_shape("acgo", "bcfmx", "dpsx", "acd")),
    "C": PartSpec("Conjunction", "", _any_shape),
    "D": PartSpec("Adverb", "", _any_shape),
    "N": PartSpec("Noun", "TGNS", _nominal_shape("cgtx", "bcfmx", "dpsx", "acd")),
    "P": PartSpec("Pronoun", "TPGN", _nominal_shape("dfipr", "123x", "bcfm", "dps")),
    "R": PartSpec("Preposition", "T", _any_shape),
    "S": PartSpec("Suffix", "TPGN", _nominal_shape("dhnp", "123x", "bcfm", "dps")),
    "T": PartSpec("Particle", "T", _particle_shape),
    "V": PartSpec("Verb", "ETPGNS", _verb_shape),
}


def normalize_verb(rest: str) -> str:
    """
    Pad the short verb shapes to the full stem/type/P/G/N/S layout.

    - stem type gender            -> stem type x gender x x
    - stem type gender number state -> stem type x gender number state
    - stem type state             -> stem type x x x state

    Other shapes are returned unchanged.
    """
    head, tail = rest[:2], rest[2:]
    if not _fits(head, VERB_STEM_LETTERS, VERB_TYPE_LETTERS):
        return rest
    if _fits(tail, "bfm"):
        return head + PLACEHOLDER + tail + PLACEHOLDER * 2
    if _fits(tail, "bcfm", "dps", "acd"):
        return head + PLACEHOLDER + tail
    if _fits(tail, "ac"):
        return head + PLACEHOLDER * 3 + tail
    return rest


def _label(table, key: str) -> str:
    label = table.get(key)
    if label is None:
        raise _PartMismatch(key)
    return label


def _axis_fragment(axis: str, char: str, category: str, language: str) -> str:
    if axis == "T":
        return "Type=" + _label(WIVU_SUBTYPES.get(category, {}), char)
    if axis == "P":
        return "Person=" + char
    if axis == "G":
        return "Gender=" + _label(WIVU_GENDERS, char)
    if axis == "N":
        return "Number=" + _label(WIVU_NUMBERS, char)
    if axis == "S":
        return "State=" + _label(WIVU_STATES, char)
    if axis == "E":
        return "Stem=" + _label(WIVU_STEMS.get(language, {}), char)
    raise _AxisAbort(axis)


def _render_part(part: str, language: str) -> str:
    """Render one part; raises _PartMismatch or _AxisAbort."""
    if part.startswith(PROPER_NAME_PREFIX):
        fragments = ["Type=proper name"]
        if len(part) == 3:
            gender = _label(WIVU_PROPER_NAME_GENDERS, part[2])
            fragments.append(f"Gender={gender}")
        elif len(part) > 3:
            raise _PartMismatch(part)
        return f"Noun ({', '.join(fragments)})"

    spec = PART_SPECS.get(part[:1])
    if spec is None:
        raise _PartMismatch(part)

    category, rest = part[0], part[1:]
    if category == "V":
        rest = normalize_verb(rest)
    if not spec.shape(rest):
        raise _PartMismatch(part)

    fragments = []
    for i, char in enumerate(rest):
        if char == PLACEHOLDER:
            continue
        axis = spec.axes[i] if i < len(spec.axes) else ""
        fragments.append(_axis_fragment(axis, char, category, language))

    if not fragments:
        return spec.name
    return f"{spec.name} ({', '.join(fragments)})"


def decode_wivu_part(part: str, language: str) -> DecodeResult:
    """
    Decode a single WIVU part (without the language letter).

    Args:
        part: Part such as "Ncbsa" or "Vqp3ms"
        language: Language letter of the enclosing tag, "H" or "A"

    Returns:
        Decoded, or Unrecognized carrying the part
    """
    try:
        text = _render_part(part, language)
    except (_PartMismatch, _AxisAbort):
        return Unrecognized(part, Scheme.WIVU)
    return Decoded(part, text, Scheme.WIVU)


def decode_wivu(code: str) -> DecodeResult:
    """
    Decode a full WIVU tag.

    Args:
        code: Tag with language letter, e.g. "HVqp3ms" or "HC/Ncmpa"

    Returns:
        Decoded text "<Language>: part; part", or Unrecognized carrying the code
    """
    language_name = WIVU_LANGUAGES.get(code[:1])
    if language_name is None:
        logger.debug("Unknown WIVU language in %r", code)
        return Unrecognized(code, Scheme.WIVU)

    language = code[0]
    descriptions = []
    for part in code[1:].split("/"):
        try:
            descriptions.append(_render_part(part, language))
        except _PartMismatch:
            logger.debug("WIVU part %r of %r left as-is", part, code)
            descriptions.append(part)
        except _AxisAbort:
            logger.debug("No axis for a position in WIVU part %r of %r", part, code)
            return Unrecognized(code, Scheme.WIVU)

    return Decoded(code, f"{language_name}: {'; '.join(descriptions)}", Scheme.WIVU)


def describe_wivu(code: str) -> str:
    """Describe a WIVU tag, or return it unchanged if it does not decode."""
    return decode_wivu(code).text


def is_wivu(code: str) -> bool:
    """Check whether every part of a WIVU tag decodes."""
    language = code[:1]
    if language not in WIVU_LANGUAGES:
        return False
    return all(
        decode_wivu_part(part, language).recognized for part in code[1:].split("/")
    )
