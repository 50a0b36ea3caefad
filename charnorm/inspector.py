"""Character normalization inspector entry point.

Responsibilities:
- Bind encoding, form computation, and invariance checks to one configuration.
- Emit start/complete/failure events for every public operation.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence, TypeVar

from .config import InspectorConfig
from .models.datatypes import (
    CharacterProfile,
    CodePointEncoding,
    CompatibleForms,
    NormalizationForm,
    SingleCharacter,
    character_input,
)
from .telemetry.logger import InspectionLogger
from .text.encoding import derive_encoding, padded_hex_form
from .text.forms import compute_profile, normalize_forms
from .text.invariance import compatible_forms, is_invariant

_OperationResult = TypeVar("_OperationResult")


class CharacterInspector:
    """Inspect characters across the four Unicode normalization forms."""

    def __init__(
        self,
        config: InspectorConfig | None = None,
        logger: InspectionLogger | None = None,
    ) -> None:
        """Initialize with validated config and an optional event logger."""

        self.config = config or InspectorConfig()
        self.config.validate()
        self._logger = logger or InspectionLogger(enabled=self.config.log_events)

    def get_encode_info(self, value: str) -> CodePointEncoding:
        """Return the encoding of the first character of `value`."""

        return self._run_operation(
            "encode_info",
            lambda: derive_encoding(value, self.config.hex_style),
            characters=len(value),
        )

    def string_normalizer(
        self, value: str
    ) -> list[dict[NormalizationForm, CodePointEncoding]]:
        """Return per-form encodings of `value` as single-entry mappings."""

        return self._run_operation(
            "string_normalizer",
            lambda: normalize_forms(value, self.config.hex_style),
            characters=len(value),
        )

    def get_char_normalize_form(self, value: str | Sequence[str]) -> CharacterProfile:
        """Return the normalization record of every character in `value`.

        A string longer than one character and any sequence are split into
        characters. An empty string raises `InvalidInputError`; an empty
        sequence yields an empty profile.
        """

        source = character_input(value)
        return self._run_operation(
            "normalize_form",
            lambda: compute_profile(source, self.config.hex_style),
            describe=lambda profile: {"characters": len(profile)},
            single=isinstance(source, SingleCharacter),
        )

    def is_normalizable(self, value: str, safe: bool | None = None) -> bool:
        """Return whether the character keeps its encoding under at least one form.

        `safe=None` falls back to `InspectorConfig.safe_by_default`.
        """

        resolved_safe = self.config.safe_by_default if safe is None else safe
        return self._run_operation(
            "is_normalizable",
            lambda: is_invariant(value, resolved_safe, self.config.hex_style),
            describe=lambda result: {"invariant": result},
            safe=resolved_safe,
            character=self._describe_first_character(value),
        )

    def get_char_normalizer_forms(
        self, value: str | Sequence[str]
    ) -> dict[str, CompatibleForms] | None:
        """Return forms keeping each character's encoding, or `None` for empty input."""

        source = character_input(value)
        return self._run_operation(
            "normalizer_forms",
            lambda: compatible_forms(source, self.config.hex_style),
            describe=lambda report: {"characters": 0 if report is None else len(report)},
        )

    def _describe_first_character(self, value: str) -> str:
        """Return the hex form of the first character, or `none` when empty."""

        if not value:
            return "none"
        return padded_hex_form(ord(value[0]))

    def _run_operation(
        self,
        operation: str,
        action: Callable[[], _OperationResult],
        describe: Callable[[_OperationResult], Mapping[str, object]] | None = None,
        **context: object,
    ) -> _OperationResult:
        """Run one named operation and emit start/complete/failure events."""

        self._logger.log_operation_start(operation, **context)
        try:
            result = action()
        except Exception as exc:
            self._logger.log_operation_failure(operation, type(exc).__name__)
            raise
        summary = dict(describe(result)) if describe is not None else {}
        self._logger.log_operation_complete(operation, **{**context, **summary})
        return result
