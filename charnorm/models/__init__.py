"""Shared typed data models for charnorm.

This package contains dataclasses and enums used across inspection modules to
avoid cross-module coupling and circular imports.
"""

from .datatypes import (
    NORMALIZATION_FORMS,
    CharacterInput,
    CharacterProfile,
    CharacterSequence,
    CodePointEncoding,
    CompatibleForms,
    HexStyle,
    NormalizationForm,
    NormalizationRecord,
    SingleCharacter,
    character_input,
)

__all__ = [
    "NORMALIZATION_FORMS",
    "CharacterInput",
    "CharacterProfile",
    "CharacterSequence",
    "CodePointEncoding",
    "CompatibleForms",
    "HexStyle",
    "NormalizationForm",
    "NormalizationRecord",
    "SingleCharacter",
    "character_input",
]
