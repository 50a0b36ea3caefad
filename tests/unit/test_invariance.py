"""Unit tests for normalization invariance checks."""

from __future__ import annotations

import pytest

from charnorm.errors import InvalidInputError
from charnorm.models.datatypes import (
    NORMALIZATION_FORMS,
    CharacterSequence,
    HexStyle,
    NormalizationForm,
    SingleCharacter,
)
from charnorm.text.encoding import derive_encoding
from charnorm.text.invariance import compatible_forms, is_invariant


def test_is_invariant_is_true_for_ascii() -> None:
    """ASCII characters keep their encoding under every form."""

    assert is_invariant("A") is True


def test_is_invariant_needs_only_one_matching_form() -> None:
    """A character stable under NFC alone should still count as invariant."""

    assert is_invariant("\u00e9") is True
    assert is_invariant("\ufb01") is True


def test_is_invariant_is_false_when_every_form_changes_the_character() -> None:
    """The Angstrom sign normalizes away under all four forms."""

    assert is_invariant("\u212b") is False


@pytest.mark.parametrize("value", ["", "AB", "e\u0301"])
def test_is_invariant_rejects_non_single_characters(value: str) -> None:
    """Strict mode should reject empty and multi-character input."""

    with pytest.raises(InvalidInputError, match="Expected a single character") as exc_info:
        is_invariant(value)

    assert exc_info.value.value == value
    assert "safe=True" in (exc_info.value.hint or "")


def test_is_invariant_safe_mode_truncates_to_first_character() -> None:
    """Safe mode should inspect only the first character of longer input."""

    assert is_invariant("\u212bA", safe=True) is False
    assert is_invariant("A\u212b", safe=True) is True


def test_is_invariant_safe_mode_returns_false_for_empty_input() -> None:
    """Safe mode should not fail on an empty string and reports no invariance."""

    assert is_invariant("", safe=True) is False


def test_is_invariant_compares_in_the_requested_hex_style() -> None:
    """Reference style renders low code points and rejects five-digit ones."""

    assert is_invariant("\u00e9", hex_style=HexStyle.REFERENCE) is True
    with pytest.raises(InvalidInputError, match="only code points below 10000"):
        is_invariant("\U0001F600", hex_style=HexStyle.REFERENCE)


def test_compatible_forms_lists_all_forms_for_ascii() -> None:
    """ASCII should report every form, duplicates included, in fixed order."""

    report = compatible_forms(SingleCharacter("A"))

    assert report is not None
    entry = report["A"]
    assert entry.encode_info == derive_encoding("A")
    assert entry.forms == NORMALIZATION_FORMS
    assert len(entry.normalizable) == 4
    assert all(encoding.hex_form == "0x0041" for encoding in entry.normalizable)


def test_compatible_forms_lists_only_forms_keeping_the_encoding() -> None:
    """A precomposed letter should only match its composed forms."""

    report = compatible_forms(SingleCharacter("\u00e9"))

    assert report is not None
    assert report["\u00e9"].forms == (NormalizationForm.NFC, NormalizationForm.NFKC)
    assert [encoding.hex_form for encoding in report["\u00e9"].normalizable] == [
        "0x00e9",
        "0x00e9",
    ]


def test_compatible_forms_can_be_empty_for_a_character() -> None:
    """Characters that always normalize away get an empty sequence, not a missing key."""

    report = compatible_forms(SingleCharacter("\u212b"))

    assert report is not None
    assert report["\u212b"].normalizable == ()
    assert report["\u212b"].forms == ()


def test_compatible_forms_reports_every_character_of_multi_character_input() -> None:
    """Multi-character input should produce one entry per distinct character."""

    report = compatible_forms(CharacterSequence(("A\ufb01", "\u212b")))

    assert report is not None
    assert set(report) == {"A", "\ufb01", "\u212b"}
    assert report["\ufb01"].forms == (NormalizationForm.NFC, NormalizationForm.NFD)
    for entry in report.values():
        assert set(entry.forms) <= set(NORMALIZATION_FORMS)


def test_compatible_forms_returns_none_for_empty_profile() -> None:
    """An empty sequence yields no characters and therefore no report."""

    assert compatible_forms(CharacterSequence(())) is None
