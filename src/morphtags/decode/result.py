"""Decode results: a description, or the untouched code."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union


class Scheme(Enum):
    """Known morphology coding schemes."""

    RMAC = "rmac"
    WIVU = "wivu"


class UnrecognizedCodeError(Exception):
    """Raised by strict callers when a code could not be decoded."""

    def __init__(self, code: str, scheme: Scheme | None = None):
        self.code = code
        self.scheme = scheme
        if scheme is not None:
            message = f"[{scheme.value}] Unrecognized morphology code: {code!r}"
        else:
            message = f"Unrecognized morphology code: {code!r}"
        super().__init__(message)


@dataclass(frozen=True)
class Decoded:
    """A code that was fully decoded into display text."""

    code: str
    text: str
    scheme: Scheme | None = None

    recognized = True

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class Unrecognized:
    """A code that no pattern matched. Displays as the code itself."""

    code: str
    scheme: Scheme | None = None

    recognized = False

    @property
    def text(self) -> str:
        return self.code

    def __str__(self) -> str:
        return self.code


DecodeResult = Union[Decoded, Unrecognized]


def require_decoded(result: DecodeResult) -> Decoded:
    """Return the result if decoded, else raise UnrecognizedCodeError."""
    if isinstance(result, Unrecognized):
        raise UnrecognizedCodeError(result.code, result.scheme)
    return result
