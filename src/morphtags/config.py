"""Configuration settings and morphology label tables for morphtags."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType

import yaml

CONFIG_ENV_VAR = "MORPHTAGS_CONFIG"

# Level names uvicorn also accepts
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(Exception):
    """Raised when a settings file cannot be loaded."""

    def __init__(self, message: str, path: Path | None = None):
        self.path = path
        full_message = f"[{path}] {message}" if path else message
        super().__init__(full_message)


@dataclass
class Settings:
    """Application settings."""

    # API server
    api_host: str = "127.0.0.1"
    api_port: int = 47300
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "WARNING"


def load_settings(path: Path | str | None = None) -> Settings:
    """
    Load settings from a YAML file.

    Resolution order: explicit path, then $MORPHTAGS_CONFIG, then defaults.

    Args:
        path: Optional path to a YAML settings file

    Returns:
        Settings populated from the file (missing keys keep their defaults)

    Raises:
        ConfigError: If the file is unreadable, not a mapping, has unknown keys
            or holds a value of the wrong type
    """
    if path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if not env_path:
            return Settings()
        path = env_path

    config_path = Path(path)
    try:
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read settings file: {e}", config_path) from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", config_path) from e

    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError("Settings file must contain a mapping", config_path)

    known = {f.name for f in fields(Settings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ConfigError(f"Unknown settings: {', '.join(unknown)}", config_path)

    _validate_settings(raw, config_path)
    if "log_level" in raw:
        raw["log_level"] = raw["log_level"].upper()
    return Settings(**raw)


def _validate_settings(raw: dict, config_path: Path) -> None:
    if "api_host" in raw and not isinstance(raw["api_host"], str):
        raise ConfigError("api_host must be a string", config_path)

    if "api_port" in raw:
        port = raw["api_port"]
        # bool is an int subclass
        if isinstance(port, bool) or not isinstance(port, int):
            raise ConfigError(f"api_port must be an integer, got {port!r}", config_path)
        if not 0 <= port <= 65535:
            raise ConfigError(f"api_port out of range: {port}", config_path)

    if "cors_origins" in raw:
        origins = raw["cors_origins"]
        if not isinstance(origins, list) or not all(
            isinstance(o, str) for o in origins
        ):
            raise ConfigError("cors_origins must be a list of strings", config_path)

    if "log_level" in raw:
        level = raw["log_level"]
        if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
            raise ConfigError(
                f"log_level must be one of {', '.join(LOG_LEVELS)}, got {level!r}",
                config_path,
            )


def _frozen(table: dict) -> MappingProxyType:
    return MappingProxyType(table)


# ---------------------------------------------------------------------------
# RMAC (Greek) label tables
# ---------------------------------------------------------------------------

RMAC_TENSES = _frozen(
    {
        "P": "Present",
        "I": "Imperfect",
        "F": "Future",
        "A": "Aorist",
        "R": "Perfect",
        "L": "Pluperfect",
        "X": "No tense stated",
        # Second-formation tenses are their own keys
        "2P": "Second Present",
        "2F": "Second Future",
        "2A": "Second Aorist",
        "2R": "Second peRfect",
        "2L": "Second pLuperfect",
    }
)

RMAC_VOICES = _frozen(
    {
        "A": "Active",
        "M": "Middle",
        "P": "Passive",
        "E": "Either middle or passive",
        "D": "Middle deponent",
        "O": "Passive deponent",
        "N": "Middle or passive deponent",
        "Q": "Impersonal active",
        "X": "No voice stated",
    }
)

RMAC_MOODS = _frozen(
    {
        "I": "Indicative",
        "S": "Subjunctive",
        "O": "Optative",
        "M": "Imperative",
        "N": "Infinitive",
        "P": "Participle",
    }
)

RMAC_PERSONS = frozenset("123")

RMAC_CASES = _frozen(
    {
        "N": "Nominative",
        "G": "Genitive",
        "D": "Dative",
        "A": "Accusative",
        "V": "Vocative",
    }
)

RMAC_NUMBERS = _frozen({"S": "Singular", "D": "Dual", "P": "Plural"})

# Person/number groups of verbs and possessor numbers only take these
RMAC_PERSON_NUMBERS = frozenset("SP")

RMAC_GENDERS = _frozen({"M": "Masculine", "F": "Feminine", "N": "Neuter"})

RMAC_SUFFIXES = _frozen(
    {
        "S": "Superlative",
        "C": "Comparative",
        "ABB": "Abbreviated form",
        "I": "Interrogative",
        "N": "Negative",
        "K": "Kai",
        "ARAM": "Aramaic",
        "HEB": "Hebrew",
        "ATT": "Attic Greek form",
    }
)

RMAC_VERB_SUFFIXES = frozenset({"ATT", "ARAM", "HEB"})

RMAC_NOMINAL_CATEGORIES = _frozen(
    {
        "N": "Noun",
        "A": "Adjective",
        "R": "Relative pronoun",
        "C": "Reciprocal pronoun",
        "D": "Demonstrative pronoun",
        "T": "Definite article",
        "K": "Correlative pronoun",
        "I": "Interrogative pronoun",
        "X": "Indefinite pronoun",
        "Q": "correlative or interrogative pronoun",
        "F": "Reflexive pronoun",
        "S": "Possessive pronoun",
        "P": "Personal pronoun",
    }
)

RMAC_NOUN_KINDS = _frozen(
    {
        "P": "Person",
        "L": "Location",
        "T": "Title",
        "PG": "Person Gentilic",
        "LG": "Location Gentilic",
        "LI": "Letter Indeclinable",
        "NUI": "Numerical Indiclinable",
    }
)

RMAC_INDECLINABLES = _frozen(
    {
        "ADV": "Adverb or adverb and particle combined",
        "CONJ": "Conjunction or conjunctive particle",
        "COND": "Conditional particle or conjunction",
        "PRT": "Particle, disjunctive particle",
        "PREP": "Preposition",
        "INJ": "Interjection",
        "ARAM": "Aramaic transliterated word (indeclinable)",
        "HEB": "Hebrew transliterated word (indeclinable)",
        "N-PRI": "Indeclinable Proper Noun",
        "A-NUI": "Indeclinable Numeral (Adjective)",
        "N-LI": "Indeclinable Letter (Noun)",
        "N-OI": "Indeclinable Noun of Other type",
    }
)


# ---------------------------------------------------------------------------
# WIVU (Hebrew/Aramaic) label tables
# ---------------------------------------------------------------------------

WIVU_LANGUAGES = _frozen({"H": "Hebrew", "A": "Aramaic"})

WIVU_PROPER_NAME_GENDERS = _frozen(
    {
        "m": "masculine",
        "f": "feminine",
        "l": "location",
        "t": "title",
    }
)

# Subtype meaning depends on the part-of-speech letter, so keyed by both
WIVU_SUBTYPES = _frozen(
    {
        "A": _frozen(
            {
                "a": "adjective",
                "c": "cardinal number",
                "g": "gentilic",
                "o": "ordinal number",
            }
        ),
        "N": _frozen(
            {"c": "common", "g": "gentilic", "p": "proper name", "t": "title"}
        ),
        "P": _frozen(
            {
                "d": "demonstrative",
                "f": "indefinite",
                "i": "interrogative",
                "p": "personal",
                "r": "relative",
            }
        ),
        "R": _frozen({"d": "definite article"}),
        "S": _frozen(
            {
                "d": "directional he",
                "h": "paragogic he",
                "n": "paragogic nun",
                "p": "pronominal",
            }
        ),
        "T": _frozen(
            {
                "a": "affirmation",
                "c": "conditional+logical",
                "d": "definite article",
                "e": "exhortation",
                "i": "interrogative",
                "j": "interjection",
                "m": "demonstrative",
                "n": "negative",
                "o": "direct object marker",
                "r": "relative",
            }
        ),
        "V": _frozen(
            {
                "p": "perfect (qatal)",
                "q": "sequential perfect (weqatal)",
                "i": "imperfect (yiqtol)",
                "w": "sequential imperfect (wayyiqtol)",
                "h": "cohortative",
                "j": "jussive",
                "v": "imperative",
                "r": "participle active",
                "s": "participle passive",
                "a": "infinitive absolute",
                "u": "conjunctive weyyiqtol",
                "c": "infinitive construct",
            }
        ),
    }
)

WIVU_GENDERS = _frozen(
    {
        "b": "both (noun)",
        "c": "common (verb)",
        "f": "feminine",
        "m": "masculine",
    }
)

WIVU_NUMBERS = _frozen({"d": "dual", "p": "plural", "s": "singular"})

WIVU_STATES = _frozen({"a": "absolute", "c": "construct", "d": "determined"})

# Same stem letter means different stems per language
WIVU_STEMS = _frozen(
    {
        "H": _frozen(
            {
                "q": "qal",
                "N": "niphal",
                "p": "piel",
                "P": "pual",
                "h": "hiphil",
                "H": "hophal",
                "t": "hithpael",
                "o": "polel",
                "O": "polal",
                "r": "hithpolel",
                "m": "poel",
                "M": "poal",
                "k": "palel",
                "K": "pulal",
                "Q": "qal passive",
                "l": "pilpel",
                "L": "polpal",
                "f": "hithpalpel",
                "D": "nithpael",
                "j": "pealal",
                "i": "pilel",
                "u": "hothpaal",
                "c": "tiphil",
                "v": "hishtaphel",
                "w": "nithpalel",
                "y": "nithpoel",
                "z": "hithpoel",
            }
        ),
        "A": _frozen(
            {
                "q": "peal",
                "Q": "peil",
                "u": "hithpeel",
                "p": "pael",
                "P": "ithpaal",
                "M": "hithpaal",
                "a": "aphel",
                "h": "haphel",
                "s": "saphel",
                "e": "shaphel",
                "H": "hophal",
                "i": "ithpeel",
                "t": "hishtaphel",
                "v": "ishtaphel",
                "w": "hithaphel",
                "o": "polel",
                "z": "ithpoel",
                "r": "hithpolel",
                "f": "hithpalpel",
                "b": "hephal",
                "c": "tiphel",
                "m": "poel",
                "l": "palpel",
                "L": "ithpalpel",
                "O": "ithpolel",
                "G": "ittaphal",
            }
        ),
    }
)
