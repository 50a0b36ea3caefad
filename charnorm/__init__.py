"""Top-level package for charnorm.

This package inspects how characters map across the four Unicode normalization
forms. The main entry point is `CharacterInspector`; the module-level
functions below delegate to a default inspector.
"""

from __future__ import annotations

from typing import Sequence

from .config import ConfigLoader, InspectorConfig
from .errors import InvalidInputError
from .inspector import CharacterInspector
from .models.datatypes import (
    CharacterProfile,
    CodePointEncoding,
    CompatibleForms,
    HexStyle,
    NormalizationForm,
    NormalizationRecord,
)

_DEFAULT_INSPECTOR = CharacterInspector()


def get_char_normalize_form(value: str | Sequence[str]) -> CharacterProfile:
    """Return the normalization record of every character in `value`."""

    return _DEFAULT_INSPECTOR.get_char_normalize_form(value)


def is_normalizable(value: str, safe: bool | None = None) -> bool:
    """Return whether `value` keeps its encoding under at least one form."""

    return _DEFAULT_INSPECTOR.is_normalizable(value, safe)


def get_char_normalizer_forms(
    value: str | Sequence[str],
) -> dict[str, CompatibleForms] | None:
    """Return forms keeping each character's encoding, or `None` for empty input."""

    return _DEFAULT_INSPECTOR.get_char_normalizer_forms(value)


def get_encode_info(value: str) -> CodePointEncoding:
    """Return the encoding of the first character of `value`."""

    return _DEFAULT_INSPECTOR.get_encode_info(value)


def string_normalizer(value: str) -> list[dict[NormalizationForm, CodePointEncoding]]:
    """Return per-form encodings of `value` in fixed form order."""

    return _DEFAULT_INSPECTOR.string_normalizer(value)


__all__ = [
    "CharacterInspector",
    "CharacterProfile",
    "CodePointEncoding",
    "CompatibleForms",
    "ConfigLoader",
    "HexStyle",
    "InspectorConfig",
    "InvalidInputError",
    "NormalizationForm",
    "NormalizationRecord",
    "get_char_normalize_form",
    "get_char_normalizer_forms",
    "get_encode_info",
    "is_normalizable",
    "string_normalizer",
    "__version__",
]

__version__ = "0.1.0"
