"""Configuration model and loaders for charnorm.

Responsibilities:
- Define inspector configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `InspectorConfig`: normalized settings for a `CharacterInspector`.
- `ConfigLoader`: static construction helpers for `InspectorConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .models.datatypes import HexStyle
from .parsing import (
    normalize_optional_string,
    parse_hex_style,
    parse_permissive_boolean,
    parse_required_boolean,
)


@dataclass(frozen=True, slots=True)
class InspectorConfig:
    """Settings for one inspector instance.

    Attributes:
        hex_style: Hexadecimal rendering used for every derived encoding.
        safe_by_default: Truncation mode used when `is_normalizable` gets `safe=None`.
        log_events: Whether inspection events are emitted through loguru.
    """

    hex_style: HexStyle = HexStyle.PADDED
    safe_by_default: bool = False
    log_events: bool = False

    def validate(self) -> None:
        """Validate configuration values before use."""

        if not isinstance(self.hex_style, HexStyle):
            raise ValueError("`hex_style` must be a HexStyle value.")
        if not isinstance(self.safe_by_default, bool):
            raise ValueError("`safe_by_default` must be a boolean.")
        if not isinstance(self.log_events, bool):
            raise ValueError("`log_events` must be a boolean.")

    def as_metadata(self) -> dict[str, str]:
        """Return configuration values as plain strings."""

        return {
            "hex_style": self.hex_style.value,
            "safe_by_default": "true" if self.safe_by_default else "false",
            "log_events": "true" if self.log_events else "false",
        }


class ConfigLoader:
    """Factory methods for creating `InspectorConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"hex_style", "safe_by_default", "log_events"})
    _ENV_KEYS = {
        "hex_style": "CHARNORM_HEX_STYLE",
        "safe_by_default": "CHARNORM_SAFE_BY_DEFAULT",
        "log_events": "CHARNORM_LOG_EVENTS",
    }

    @staticmethod
    def from_yaml(path: Path) -> InspectorConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader.from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> InspectorConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        hex_style_key = ConfigLoader._ENV_KEYS["hex_style"]
        raw_hex_style = ConfigLoader._optional_env_string(env_map, hex_style_key)
        hex_style = (
            HexStyle.PADDED
            if raw_hex_style is None
            else parse_hex_style(raw_hex_style, hex_style_key)
        )
        safe_by_default = (
            ConfigLoader._optional_env_boolean(env_map, ConfigLoader._ENV_KEYS["safe_by_default"])
            or False
        )
        log_events = (
            ConfigLoader._optional_env_boolean(env_map, ConfigLoader._ENV_KEYS["log_events"])
            or False
        )

        config = InspectorConfig(
            hex_style=hex_style,
            safe_by_default=safe_by_default,
            log_events=log_events,
        )
        config.validate()
        return config

    @staticmethod
    def from_mapping(
        payload: Mapping[str, Any], source_label: str = "config mapping"
    ) -> InspectorConfig:
        """Build a validated config from a mapping payload."""

        ConfigLoader._validate_keys(payload, source_label)

        hex_style = HexStyle.PADDED
        if normalize_optional_string(payload.get("hex_style")) is not None:
            try:
                hex_style = parse_hex_style(payload["hex_style"], "hex_style")
            except ValueError as exc:
                raise ValueError(f"{source_label} field {exc}") from exc

        config = InspectorConfig(
            hex_style=hex_style,
            safe_by_default=ConfigLoader._optional_boolean(
                payload, "safe_by_default", source_label, default=False
            ),
            log_events=ConfigLoader._optional_boolean(
                payload, "log_events", source_label, default=False
            ),
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` could not be parsed: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _validate_keys(payload: Mapping[str, Any], source_label: str) -> None:
        """Reject keys the config does not support."""

        unknown = sorted(
            str(key) for key in set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS)
        )
        if unknown:
            key_list = ", ".join(unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping, ignoring blanks."""

        raw_value = ConfigLoader._optional_env_string(env, key)
        if raw_value is None:
            return None
        return parse_required_boolean(raw_value, key)
