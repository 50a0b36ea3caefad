"""Structured inspection logging utilities.

Responsibilities:
- Emit concise, deterministic operation-level logs through `loguru`.
- Stay silent unless enabled, and never reconfigure handlers owned by the host.
"""

from __future__ import annotations

from itertools import count
from typing import TextIO

from loguru import logger as _loguru_logger


_LOGGER_TOKENS = count()


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character
        if (character.isascii() and character.isalnum()) or character in {"-", "_", ".", ":", "/"}
        else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class InspectionLogger:
    """Emit deterministic operation logs for inspector activity."""

    def __init__(self, sink: TextIO | None = None, enabled: bool = False) -> None:
        """Initialize the logger, optionally routing output to `sink`.

        Passing a sink adds one plain handler that only receives this logger's
        records; handlers configured elsewhere are left untouched. Without a
        sink, enabled events go to whatever handlers the host application set up.
        """

        token = next(_LOGGER_TOKENS)
        self._logger = _loguru_logger.bind(inspection_logger=token)
        self._handler_id: int | None = None
        self._enabled = enabled or sink is not None
        if sink is not None:
            self._handler_id = _loguru_logger.add(
                sink,
                format="{message}",
                level="DEBUG",
                colorize=False,
                filter=lambda record: record["extra"].get("inspection_logger") == token,
            )

    @property
    def enabled(self) -> bool:
        """Whether this logger emits events."""

        return self._enabled

    def close(self) -> None:
        """Remove the handler added for this logger's sink, if any."""

        if self._handler_id is not None:
            _loguru_logger.remove(self._handler_id)
            self._handler_id = None

    def _emit(self, level: str, event: str, operation: str, **context: object) -> None:
        """Emit one structured inspection log line."""

        if not self._enabled:
            return
        line = (
            f"[inspect] level={level} operation={operation} event={event}"
            f"{_format_context(context)}"
        )
        self._logger.log(level, line)

    def log_operation_start(self, operation: str, **context: object) -> None:
        """Emit an operation-start event."""

        self._emit("DEBUG", "start", operation, **context)

    def log_operation_complete(self, operation: str, **context: object) -> None:
        """Emit an operation-complete event."""

        self._emit("INFO", "complete", operation, **context)

    def log_operation_failure(self, operation: str, error_type: str) -> None:
        """Emit an operation-failure event without the rejected payload."""

        self._emit("ERROR", "failure", operation, error_type=error_type)
