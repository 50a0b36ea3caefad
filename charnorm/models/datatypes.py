"""Core datatypes shared across charnorm modules.

Responsibilities:
- Represent immutable records exchanged between inspection stages.
- Provide explicit typing for the single-vs-many character input union.

Key types:
- `NormalizationForm`, `HexStyle`, `CodePointEncoding`, `NormalizationRecord`,
  `CompatibleForms`, `SingleCharacter`, and `CharacterSequence`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence, Union


class NormalizationForm(str, Enum):
    """The four standard Unicode normalization forms."""

    NFC = "NFC"
    NFD = "NFD"
    NFKC = "NFKC"
    NFKD = "NFKD"


NORMALIZATION_FORMS: tuple[NormalizationForm, ...] = (
    NormalizationForm.NFC,
    NormalizationForm.NFD,
    NormalizationForm.NFKC,
    NormalizationForm.NFKD,
)


class HexStyle(str, Enum):
    """Supported renderings of a code point as hexadecimal text.

    `PADDED` is `0x` plus at least four zero-padded hex digits. `REFERENCE`
    reproduces the historical two-stage padding, which matches `PADDED`
    below code point 10000 and has no rendering from 10000 upward.
    """

    PADDED = "padded"
    REFERENCE = "reference"


@dataclass(frozen=True, slots=True)
class CodePointEncoding:
    """Numeric identity of one text value.

    Attributes:
        code_point: Unicode scalar value of the first character.
        hex_form: Hexadecimal rendering of `code_point`.
    """

    code_point: int
    hex_form: str

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping of this encoding."""

        return {"codePoint": self.code_point, "hexForm": self.hex_form}


@dataclass(frozen=True, slots=True)
class NormalizationRecord:
    """One character's full normalization profile.

    Attributes:
        original: Encoding of the unnormalized character.
        forms: Read-only mapping holding exactly one encoding per normalization form.
    """

    original: CodePointEncoding
    forms: Mapping[NormalizationForm, CodePointEncoding]

    def __post_init__(self) -> None:
        if set(self.forms) != set(NORMALIZATION_FORMS) or len(self.forms) != len(
            NORMALIZATION_FORMS
        ):
            present = ", ".join(sorted(str(getattr(key, "value", key)) for key in self.forms))
            raise ValueError(
                f"`forms` must hold exactly NFC, NFD, NFKC and NFKD; got: {present or 'none'}."
            )
        ordered = {form: self.forms[form] for form in NORMALIZATION_FORMS}
        object.__setattr__(self, "forms", MappingProxyType(ordered))

    def __hash__(self) -> int:
        return hash((self.original, tuple(self.forms.items())))

    def matching_forms(self, hex_form: str) -> tuple[NormalizationForm, ...]:
        """Return forms whose encoding renders as `hex_form`, in fixed form order."""

        return tuple(
            form for form in NORMALIZATION_FORMS if self.forms[form].hex_form == hex_form
        )

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping with `encodeInfo` and `normalizeForm` keys."""

        return {
            "encodeInfo": self.original.as_dict(),
            "normalizeForm": {
                form.value: self.forms[form].as_dict() for form in NORMALIZATION_FORMS
            },
        }


CharacterProfile = dict[str, NormalizationRecord]


@dataclass(frozen=True, slots=True)
class CompatibleForms:
    """Forms under which a character keeps its own encoding.

    Attributes:
        encode_info: Encoding of the bare character.
        normalizable: Matching form encodings in fixed form order.
        forms: Form that produced each `normalizable` entry.
    """

    encode_info: CodePointEncoding
    normalizable: tuple[CodePointEncoding, ...] = field(default_factory=tuple)
    forms: tuple[NormalizationForm, ...] = field(default_factory=tuple)

    def as_dict(self) -> dict[str, object]:
        """Return a JSON-ready mapping with `encodeInfo` and `normalizable` keys."""

        return {
            "encodeInfo": self.encode_info.as_dict(),
            "normalizable": [encoding.as_dict() for encoding in self.normalizable],
        }


@dataclass(frozen=True, slots=True)
class SingleCharacter:
    """Input holding one text value meant as a single character."""

    value: str


@dataclass(frozen=True, slots=True)
class CharacterSequence:
    """Input holding several text values, each inspected on its own."""

    values: tuple[str, ...]


CharacterInput = Union[SingleCharacter, CharacterSequence]


def character_input(value: str | Sequence[str]) -> CharacterInput:
    """Wrap a public `str` or sequence argument into the explicit input union."""

    if isinstance(value, str):
        return SingleCharacter(value)
    return CharacterSequence(tuple(value))
