"""Tests for the Hebrew/Aramaic WIVU decoder.

Tests cover:
- Nouns, adjectives, pronouns, suffixes, particles, prepositions
- Proper name shortcut
- Verb normalisation of the short verb shapes
- Language-dependent stem lookup
- Failure asymmetry: shape mismatch keeps the part, a missing axis drops the tag
"""

from __future__ import annotations

import pytest

from morphtags.decode.result import Decoded, Scheme, Unrecognized
from morphtags.decode.wivu import (
    decode_wivu,
    decode_wivu_part,
    describe_wivu,
    is_wivu,
    normalize_verb,
)


class TestNominals:
    """Tests for noun-like parts."""

    def test_common_noun(self):
        """Every axis of a full noun is labeled."""
        assert describe_wivu("HNcbsa") == (
            "Hebrew: Noun (Type=common, Gender=both (noun), Number=singular, "
            "State=absolute)"
        )

    def test_noun_type_only(self):
        """The short noun shape carries the type alone."""
        assert describe_wivu("HNg") == "Hebrew: Noun (Type=gentilic)"

    def test_placeholders_skipped(self):
        """x positions produce no output."""
        assert describe_wivu("HNxmsa") == (
            "Hebrew: Noun (Gender=masculine, Number=singular, State=absolute)"
        )
        assert describe_wivu("HNx") == "Hebrew: Noun"

    def test_adjective(self):
        """Adjective subtypes come from the adjective table."""
        assert describe_wivu("HAcmpa") == (
            "Hebrew: Adjective (Type=cardinal number, Gender=masculine, "
            "Number=plural, State=absolute)"
        )

    def test_aramaic_determined_state(self):
        """The determined state appears in Aramaic nouns."""
        assert describe_wivu("ANcmsd") == (
            "Aramaic: Noun (Type=common, Gender=masculine, Number=singular, "
            "State=determined)"
        )

    def test_pronoun(self):
        """Pronouns read type, person, gender, number."""
        assert describe_wivu("HPp3ms") == (
            "Hebrew: Pronoun (Type=personal, Person=3, Gender=masculine, "
            "Number=singular)"
        )

    def test_noun_with_pronominal_suffix(self):
        """Parts are joined with '; '."""
        assert describe_wivu("HNcmsc/Sp3ms") == (
            "Hebrew: Noun (Type=common, Gender=masculine, Number=singular, "
            "State=construct); Suffix (Type=pronominal, Person=3, "
            "Gender=masculine, Number=singular)"
        )

    def test_directional_he(self):
        """Short suffix shape."""
        assert describe_wivu("HNcmsa/Sd") == (
            "Hebrew: Noun (Type=common, Gender=masculine, Number=singular, "
            "State=absolute); Suffix (Type=directional he)"
        )


class TestProperNames:
    """Tests for the Np shortcut."""

    def test_proper_name(self):
        """Np without gender."""
        assert describe_wivu("HNp") == "Hebrew: Noun (Type=proper name)"

    @pytest.mark.parametrize(
        "letter, label",
        [("m", "masculine"), ("f", "feminine"), ("l", "location"), ("t", "title")],
    )
    def test_proper_name_gender(self, letter, label):
        """Optional third character is a proper-name gender."""
        assert describe_wivu(f"HNp{letter}") == (
            f"Hebrew: Noun (Type=proper name, Gender={label})"
        )

    def test_unknown_proper_name_gender(self):
        """An unknown gender letter leaves the part as-is."""
        assert describe_wivu("HNpz") == "Hebrew: Npz"


class TestParticlesAndPrepositions:
    """Tests for parts with few or no axes."""

    def test_conjunction_and_adverb(self):
        """Categories without axes give the bare name."""
        assert describe_wivu("HC") == "Hebrew: Conjunction"
        assert describe_wivu("HD") == "Hebrew: Adverb"

    def test_preposition(self):
        """Preposition with and without the article type."""
        assert describe_wivu("HR/Ncfsa") == (
            "Hebrew: Preposition; Noun (Type=common, Gender=feminine, "
            "Number=singular, State=absolute)"
        )
        assert describe_wivu("HRd/Ncmpa") == (
            "Hebrew: Preposition (Type=definite article); Noun (Type=common, "
            "Gender=masculine, Number=plural, State=absolute)"
        )

    def test_particles(self):
        """Particle with and without a subtype."""
        assert describe_wivu("HTo") == "Hebrew: Particle (Type=direct object marker)"
        assert describe_wivu("HT") == "Hebrew: Particle"
        assert describe_wivu("HTd/Ncmsa").startswith(
            "Hebrew: Particle (Type=definite article); Noun"
        )

    def test_empty_part(self):
        """Empty parts between slashes pass through empty."""
        assert describe_wivu("HC//D") == "Hebrew: Conjunction; ; Adverb"


class TestVerbs:
    """Tests for verb parts and their normalisation."""

    def test_qal_perfect(self):
        """The full verb shape needs no padding."""
        assert describe_wivu("HVqp3ms") == (
            "Hebrew: Verb (Stem=qal, Type=perfect (qatal), Person=3, "
            "Gender=masculine, Number=singular)"
        )

    def test_wayyiqtol_after_conjunction(self):
        """A multi-part verb tag."""
        assert describe_wivu("HC/Vqw3ms") == (
            "Hebrew: Conjunction; Verb (Stem=qal, "
            "Type=sequential imperfect (wayyiqtol), Person=3, Gender=masculine, "
            "Number=singular)"
        )

    def test_stem_and_type_only(self):
        """Verbs may stop after stem and type."""
        assert describe_wivu("HVqa") == (
            "Hebrew: Verb (Stem=qal, Type=infinitive absolute)"
        )

    def test_participle_gender_number_state(self):
        """Gender/number/state shape is padded with a person placeholder."""
        assert describe_wivu("HVqrmsa") == (
            "Hebrew: Verb (Stem=qal, Type=participle active, Gender=masculine, "
            "Number=singular, State=absolute)"
        )

    def test_gender_only(self):
        """Gender-only shape is padded on both sides."""
        assert describe_wivu("HVqvm") == (
            "Hebrew: Verb (Stem=qal, Type=imperative, Gender=masculine)"
        )

    def test_state_only(self):
        """State-only shape lands in the sixth position."""
        assert describe_wivu("HVqcc") == (
            "Hebrew: Verb (Stem=qal, Type=infinitive construct, State=construct)"
        )

    @pytest.mark.parametrize(
        "rest, expected",
        [
            ("qpm", "qpxmxx"),
            ("qrmsa", "qrxmsa"),
            ("qcc", "qcxxxc"),
            ("qca", "qcxxxa"),
            ("qp3ms", "qp3ms"),
            ("qp", "qp"),
            ("Zpm", "Zpm"),
        ],
    )
    def test_normalize_verb(self, rest, expected):
        """Short shapes are padded, everything else is left alone."""
        assert normalize_verb(rest) == expected


class TestStems:
    """Tests for the language-conditioned stem axis."""

    def test_same_letter_differs_by_language(self):
        """h is hiphil in Hebrew and haphel in Aramaic."""
        assert "Stem=hiphil" in describe_wivu("HVhp3ms")
        assert "Stem=haphel" in describe_wivu("AVhp3ms")

    def test_aramaic_peal(self):
        """q is qal in Hebrew and peal in Aramaic."""
        assert describe_wivu("AVqp3ms") == (
            "Aramaic: Verb (Stem=peal, Type=perfect (qatal), Person=3, "
            "Gender=masculine, Number=singular)"
        )

    def test_part_decoder_uses_given_language(self):
        """decode_wivu_part resolves stems with the caller's language."""
        hebrew = decode_wivu_part("VPp3ms", "H")
        aramaic = decode_wivu_part("VPp3ms", "A")
        assert hebrew.text.startswith("Verb (Stem=pual,")
        assert aramaic.text.startswith("Verb (Stem=ithpaal,")

    def test_stem_missing_in_language(self):
        """An Aramaic-only stem on a Hebrew tag leaves the part as-is."""
        assert describe_wivu("HVap3ms") == "Hebrew: Vap3ms"
        assert isinstance(decode_wivu_part("Vap3ms", "H"), Unrecognized)
        assert decode_wivu_part("Vap3ms", "A").text.startswith("Verb (Stem=aphel,")


class TestFailures:
    """Tests for the two failure modes."""

    def test_shape_mismatch_keeps_other_parts(self):
        """A part that does not fit is shown as-is; the rest still decode."""
        assert describe_wivu("HNz/Ncmsa") == (
            "Hebrew: Nz; Noun (Type=common, Gender=masculine, Number=singular, "
            "State=absolute)"
        )
        assert describe_wivu("HC/Q") == "Hebrew: Conjunction; Q"

    def test_shape_mismatch_still_decoded(self):
        """The whole tag still counts as decoded."""
        result = decode_wivu("HC/Q")
        assert isinstance(result, Decoded)
        assert not is_wivu("HC/Q")

    @pytest.mark.parametrize("code", ["HCb/Ncmsa", "HRdd", "HNcmsa/Dx1"])
    def test_missing_axis_drops_whole_tag(self, code):
        """A character without an axis returns the whole tag unchanged."""
        result = decode_wivu(code)
        assert result == Unrecognized(code, Scheme.WIVU)

    def test_unknown_language(self):
        """Only H and A are languages."""
        assert describe_wivu("XNcmsa") == "XNcmsa"
        assert describe_wivu("") == ""

    @pytest.mark.parametrize("code", ["XNcmsa", "HCb", "ZZZZ"])
    def test_idempotent_on_failure(self, code):
        """Decoding an unchanged tag again yields the same string."""
        once = describe_wivu(code)
        assert once == code
        assert describe_wivu(once) == code


class TestIsWivu:
    """Tests for is_wivu()."""

    def test_valid_tags(self):
        """Tags whose every part decodes."""
        assert is_wivu("HNcbsa")
        assert is_wivu("HC/Vqw3ms")
        assert is_wivu("ARd/R/Ncmsd")

    def test_invalid_tags(self):
        """Unknown language, mismatched or aborting parts."""
        assert not is_wivu("XNcbsa")
        assert not is_wivu("HNz")
        assert not is_wivu("HCb")
        assert not is_wivu("V-PAI-3S")
