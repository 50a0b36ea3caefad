"""Code point and hexadecimal encoding derivation.

Responsibilities:
- Extract the first Unicode scalar value from a text value.
- Render code points as hexadecimal text in a selectable `HexStyle`.
"""

from __future__ import annotations

from ..errors import InvalidInputError
from ..models.datatypes import CodePointEncoding, HexStyle


_HEX_PREFIX = "0x"
_MIN_HEX_DIGITS = 4
_REFERENCE_WIDTH = 6


def padded_hex_form(code_point: int) -> str:
    """Return `0x` plus lowercase hex digits zero-padded to at least four digits."""

    return f"{_HEX_PREFIX}{code_point:0{_MIN_HEX_DIGITS}x}"


def reference_hex_form(code_point: int) -> str:
    """Return the historical two-stage padded rendering of `code_point`.

    The fill pattern is `0x` followed by `4 - len(str(code_point))` zeros, and
    that pattern is repeated to left-pad the hex digits to six characters.
    Below 10000 this renders exactly like `padded_hex_form`. From 10000
    (U+2710) upward the zero count is negative and the historical algorithm
    fails outright, so no rendering exists.

    Raises:
        InvalidInputError: If `code_point` has more than four decimal digits.
    """

    added_zeros = _MIN_HEX_DIGITS - len(str(code_point))
    if added_zeros < 0:
        raise InvalidInputError(
            value=chr(code_point),
            detail=(
                f"Reference hex style cannot render code point {code_point}; "
                "only code points below 10000 are supported."
            ),
            hint="Use the padded hex style for this character.",
        )
    digits = format(code_point, "x")
    fill_length = _REFERENCE_WIDTH - len(digits)
    pattern = _HEX_PREFIX + "0" * added_zeros
    repeats = -(-fill_length // len(pattern))
    return (pattern * repeats)[:fill_length] + digits


def render_hex_form(code_point: int, hex_style: HexStyle = HexStyle.PADDED) -> str:
    """Render `code_point` in the requested style."""

    if hex_style is HexStyle.REFERENCE:
        return reference_hex_form(code_point)
    return padded_hex_form(code_point)


def derive_encoding(
    value: str, hex_style: HexStyle = HexStyle.PADDED
) -> CodePointEncoding:
    """Derive the encoding of the first character of `value`.

    Anything after the first code point is ignored, so a decomposed sequence
    such as `e` + U+0301 reports `e`.

    Raises:
        InvalidInputError: If `value` is empty, or the reference style cannot
            render its code point.
    """

    if not value:
        raise InvalidInputError(
            value=value,
            detail="Cannot derive a code point from an empty string.",
            hint="Pass at least one character.",
        )
    code_point = ord(value[0])
    return CodePointEncoding(
        code_point=code_point,
        hex_form=render_hex_form(code_point, hex_style),
    )
