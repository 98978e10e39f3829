"""Decode Greek RMAC morphology codes into readable descriptions.

RMAC (Robinson's Morphological Analysis Codes) are dash-delimited:

  V-PAI-3S      Verb: tense, voice+mood, person+number
  V-2AAP-NSM    Verb: second aorist participle with case/number/gender
  N-NSM         Noun: case, number, gender
  S-1SNSM       Possessive pronoun: person, possessor number, case/number/gender
  N-NSM-P       Noun of a person (noun kind group)
  A-NSM-C       Adjective, comparative (suffix group)
  ADV, CONJ     Indeclinable words, optionally with a suffix group

Matchers run in order (verb, nominal, indeclinable) and the first that
consumes the whole code wins. Codes no matcher accepts come back unchanged.
"""

from __future__ import annotations

import logging

from morphtags.config import (
    RMAC_CASES,
    RMAC_GENDERS,
    RMAC_INDECLINABLES,
    RMAC_MOODS,
    RMAC_NOMINAL_CATEGORIES,
    RMAC_NOUN_KINDS,
    RMAC_NUMBERS,
    RMAC_PERSON_NUMBERS,
    RMAC_PERSONS,
    RMAC_SUFFIXES,
    RMAC_TENSES,
    RMAC_VERB_SUFFIXES,
    RMAC_VOICES,
)
from morphtags.decode.result import DecodeResult, Decoded, Scheme, Unrecognized

logger = logging.getLogger(__name__)

VERB_PREFIX = "V-"


def _case_fields(group: str) -> list[str] | None:
    """Decode a case+number[+gender] group, e.g. NSM or DP."""
    if len(group) not in (2, 3):
        return None
    case = RMAC_CASES.get(group[0])
    number = RMAC_NUMBERS.get(group[1])
    if case is None or number is None:
        return None
    result = [f"Case={case}", f"Number={number}"]
    if len(group) == 3:
        gender = RMAC_GENDERS.get(group[2])
        if gender is None:
            return None
        result.append(f"Gender={gender}")
    return result


def _verb_person_or_case(group: str) -> list[str] | None:
    """Person/number (3S) and case/number/gender (NSM) share one slot."""
    if len(group) == 2 and group[0] in RMAC_PERSONS:
        if group[1] not in RMAC_PERSON_NUMBERS:
            return None
        return [f"Person={group[0]}", f"Number={RMAC_NUMBERS[group[1]]}"]
    return _case_fields(group)


def _match_verb(code: str) -> str | None:
    groups = code[len(VERB_PREFIX) :].split("-")

    head = groups[0]
    tense_key = head[:2] if head.startswith("2") else head[:1]
    voice_mood = head[len(tense_key) :]
    tense = RMAC_TENSES.get(tense_key)
    if tense is None or len(voice_mood) != 2:
        return None
    voice = RMAC_VOICES.get(voice_mood[0])
    mood = RMAC_MOODS.get(voice_mood[1])
    if voice is None or mood is None:
        return None

    rest = groups[1:]
    suffix = None
    if rest and rest[-1] in RMAC_VERB_SUFFIXES:
        suffix = rest.pop()
    if len(rest) > 1:
        return None

    fields = [f"Tense={tense}", f"Voice={voice}", f"Mood={mood}"]
    if rest:
        extra = _verb_person_or_case(rest[0])
        if extra is None:
            return None
        fields.extend(extra)
    if suffix is not None:
        fields.append(RMAC_SUFFIXES[suffix])

    return f"Verb ({', '.join(fields)})"


def _declension_fields(group: str) -> list[str] | None:
    """Decode [person][possessor number]case number[gender]."""
    fields = []
    pos = 0
    if pos < len(group) and group[pos] in RMAC_PERSONS:
        fields.append(f"Person={group[pos]}")
        pos += 1
    # S/P are never case letters, so a leading one is the possessor number
    if pos < len(group) and group[pos] in RMAC_PERSON_NUMBERS:
        fields.append(f"Number={RMAC_NUMBERS[group[pos]]}")
        pos += 1
    case_fields = _case_fields(group[pos:])
    if case_fields is None:
        return None
    return fields + case_fields


def _match_nominal(code: str) -> str | None:
    groups = code.split("-")
    category = RMAC_NOMINAL_CATEGORIES.get(groups[0])
    if category is None:
        return None

    fields: list[str] = []
    rest = groups[1:]

    # Optional groups, each at most once and in this order
    if rest:
        declension = _declension_fields(rest[0])
        if declension is not None:
            fields.extend(declension)
            rest = rest[1:]
    if rest and rest[0] in RMAC_NOUN_KINDS:
        fields.append(RMAC_NOUN_KINDS[rest[0]])
        rest = rest[1:]
    if rest and rest[0] in RMAC_SUFFIXES:
        fields.append(RMAC_SUFFIXES[rest[0]])
        rest = rest[1:]
    if rest:
        return None

    if not fields:
        return category
    return f"{category} ({', '.join(fields)})"


def _match_indeclinable(code: str) -> str | None:
    if code in RMAC_INDECLINABLES:
        return RMAC_INDECLINABLES[code]
    head, sep, suffix = code.rpartition("-")
    if sep and head in RMAC_INDECLINABLES and suffix in RMAC_SUFFIXES:
        return f"{RMAC_INDECLINABLES[head]} ({RMAC_SUFFIXES[suffix]})"
    return None


def decode_rmac(code: str) -> DecodeResult:
    """
    Decode an RMAC code.

    Args:
        code: RMAC code, uppercase (e.g. "V-PAI-3S")

    Returns:
        Decoded with the description, or Unrecognized carrying the code
    """
    if code.startswith(VERB_PREFIX):
        text = _match_verb(code)
    else:
        text = _match_nominal(code)
        if text is None:
            text = _match_indeclinable(code)

    if text is None:
        logger.debug("Unrecognized RMAC code: %r", code)
        return Unrecognized(code, Scheme.RMAC)
    return Decoded(code, text, Scheme.RMAC)


def describe_rmac(code: str) -> str:
    """Describe an RMAC code, or return it unchanged if it does not decode."""
    return decode_rmac(code).text


def is_rmac(code: str) -> bool:
    """Check whether a code is a well-formed RMAC code."""
    return decode_rmac(code).recognized
