"""Per-character normalization form computation.

Responsibilities:
- Normalize one character under every standard form and encode each result.
- Merge per-character records for multi-character input into one profile.
"""

from __future__ import annotations

import unicodedata
from typing import Iterator

from ..errors import InvalidInputError
from ..models.datatypes import (
    NORMALIZATION_FORMS,
    CharacterInput,
    CharacterProfile,
    CharacterSequence,
    CodePointEncoding,
    HexStyle,
    NormalizationForm,
    NormalizationRecord,
    SingleCharacter,
)
from .encoding import derive_encoding


def normalize_forms(
    value: str, hex_style: HexStyle = HexStyle.PADDED
) -> list[dict[NormalizationForm, CodePointEncoding]]:
    """Return one single-entry mapping per form, in fixed form order."""

    return [
        {form: derive_encoding(unicodedata.normalize(form.value, value), hex_style)}
        for form in NORMALIZATION_FORMS
    ]


def compute_forms(
    character: str, hex_style: HexStyle = HexStyle.PADDED
) -> NormalizationRecord:
    """Build the full normalization record for one character.

    Every form is present even when its normalized text equals the input.

    Raises:
        InvalidInputError: If `character` is not exactly one code point.
    """

    if len(character) != 1:
        raise InvalidInputError(
            value=character,
            detail=(
                "Expected exactly one character, got "
                f"{len(character)} characters."
            ),
            hint="Use `compute_profile` for multi-character input.",
        )
    forms: dict[NormalizationForm, CodePointEncoding] = {}
    for entry in normalize_forms(character, hex_style):
        forms.update(entry)
    return NormalizationRecord(
        original=derive_encoding(character, hex_style),
        forms=forms,
    )


def compute_profile(
    source: CharacterInput, hex_style: HexStyle = HexStyle.PADDED
) -> CharacterProfile:
    """Compute records for every character of `source`.

    A `SingleCharacter` longer than one code point is split, as is every
    `CharacterSequence` element. Characters are processed in input order and
    an empty entry aborts the whole batch with `InvalidInputError`.
    """

    profile: CharacterProfile = {}
    for character in _iter_characters(source):
        profile[character] = compute_forms(character, hex_style)
    return profile


def _iter_characters(source: CharacterInput) -> Iterator[str]:
    """Yield the one-character units of `source` in input order."""

    if isinstance(source, SingleCharacter):
        values: tuple[str, ...] = (source.value,)
    elif isinstance(source, CharacterSequence):
        values = source.values
    else:
        raise TypeError(
            f"expected SingleCharacter or CharacterSequence, got {type(source).__name__}"
        )

    for value in values:
        if len(value) > 1:
            yield from value
        else:
            yield value
