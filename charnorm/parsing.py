"""Shared parsing helpers for configuration value normalization.

Every helper treats `None` and whitespace-only text as "not provided".
"""

from __future__ import annotations

from .models.datatypes import HexStyle


_BOOLEAN_TOKENS = {
    "1": True,
    "true": True,
    "yes": True,
    "on": True,
    "0": False,
    "false": False,
    "no": False,
    "off": False,
}


def normalize_optional_string(value: object) -> str | None:
    """Return `value` as stripped text, or `None` when nothing is left."""

    if value is None:
        return None
    return str(value).strip() or None


def parse_permissive_boolean(value: object) -> bool | None:
    """Map a boolean or textual token to `bool`; unknown or blank tokens give `None`."""

    if isinstance(value, bool):
        return value
    token = normalize_optional_string(value)
    if token is None:
        return None
    return _BOOLEAN_TOKENS.get(token.lower())


def parse_required_boolean(value: str, field_name: str) -> bool:
    """Parse a boolean token that must be valid.

    Raises:
        ValueError: If `value` is not an accepted token; the message names `field_name`.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is None:
        raise ValueError(
            f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
        )
    return parsed


def parse_hex_style(value: object, field_name: str) -> HexStyle:
    """Parse a hex style token case-insensitively.

    Raises:
        ValueError: If the token does not name a known `HexStyle`.
    """

    if isinstance(value, HexStyle):
        return value

    token = normalize_optional_string(value)
    if token is not None:
        for style in HexStyle:
            if style.value == token.lower():
                return style

    supported = ", ".join(style.value for style in HexStyle)
    raise ValueError(f"`{field_name}` must be one of: {supported}.")
