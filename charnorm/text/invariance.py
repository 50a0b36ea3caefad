"""Normalization invariance checks.

Responsibilities:
- Answer whether one character keeps its encoding under any normalization form.
- Report, per character, which forms keep its encoding.
"""

from __future__ import annotations

from ..errors import InvalidInputError
from ..models.datatypes import CharacterInput, CompatibleForms, HexStyle
from .encoding import derive_encoding
from .forms import compute_forms, compute_profile


def is_invariant(
    character: str, safe: bool = False, hex_style: HexStyle = HexStyle.PADDED
) -> bool:
    """Return whether at least one form keeps the character's hex form.

    With `safe` the input is truncated to its first character instead of being
    rejected, and an empty string yields `False`.

    Raises:
        InvalidInputError: If `safe` is false and `character` is not exactly one character.
    """

    if not safe and len(character) != 1:
        raise InvalidInputError(
            value=character,
            detail=(
                "Expected a single character, got an empty string or a longer string "
                f"({len(character)} characters)."
            ),
            hint="Pass `safe=True` to inspect only the first character.",
        )

    character = character[:1]
    if not character:
        return False

    record = compute_forms(character, hex_style)
    return bool(record.matching_forms(record.original.hex_form))


def compatible_forms(
    source: CharacterInput, hex_style: HexStyle = HexStyle.PADDED
) -> dict[str, CompatibleForms] | None:
    """Return the forms keeping each character's encoding, or `None` for an empty profile."""

    profile = compute_profile(source, hex_style)
    if not profile:
        return None

    report: dict[str, CompatibleForms] = {}
    for character, record in profile.items():
        encode_info = derive_encoding(character, hex_style)
        matching = record.matching_forms(encode_info.hex_form)
        report[character] = CompatibleForms(
            encode_info=encode_info,
            normalizable=tuple(record.forms[form] for form in matching),
            forms=matching,
        )
    return report
