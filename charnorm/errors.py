"""Domain exceptions for character inspection diagnostics."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when a single-character operation receives unusable input."""

    def __init__(
        self,
        *,
        value: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize an input error carrying the rejected value."""

        super().__init__(detail)
        self.value = value
        self.detail = detail
        self.hint = hint
