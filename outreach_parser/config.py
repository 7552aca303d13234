"""Configuration helpers for the outreach line parser."""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping

import phonenumbers

LOGGER = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when configuration files are missing or malformed."""


_SUPPORTED_EXTENSIONS = {".json", ".yaml", ".yml"}

_POSITIVE_INT_FIELDS = {
    "national_number_length",
    "room_phone_digit_threshold",
    "max_room_digits",
    "min_name_token_length",
    "min_line_length",
}
_WEIGHT_FIELDS = {"name_weight", "phone_weight", "room_weight"}
_DIGIT_STRING_FIELDS = {"country_code", "trunk_prefix"}


@dataclass(frozen=True)
class ParserSettings:
    """Tunable heuristics used by the extractors.

    The defaults target South African numbers: a ``0`` trunk prefix followed by
    a nine digit national number, rewritten to ``+27``.
    """

    region: str = "ZA"
    country_code: str = "27"
    trunk_prefix: str = "0"
    national_number_length: int = 9
    # Room candidates with this many digits or more are treated as phone fragments.
    room_phone_digit_threshold: int = 7
    max_room_digits: int = 4
    min_name_token_length: int = 2
    min_line_length: int = 2
    name_weight: float = 0.5
    phone_weight: float = 0.3
    room_weight: float = 0.2

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParserSettings":
        """Build settings from a configuration mapping, validating every key."""

        known = {item.name for item in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(f"Unknown parser settings: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for key, value in data.items():
            if key in _POSITIVE_INT_FIELDS:
                if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                    raise ConfigurationError(f"Parser setting '{key}' must be a positive integer")
            elif key in _WEIGHT_FIELDS:
                if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
                    raise ConfigurationError(f"Parser setting '{key}' must be a non-negative number")
                value = float(value)
            elif key in _DIGIT_STRING_FIELDS:
                value = str(value)
                if not value.isdigit():
                    raise ConfigurationError(f"Parser setting '{key}' must contain digits only")
            elif key == "region":
                value = str(value).upper()
                if len(value) != 2 or not value.isalpha():
                    raise ConfigurationError("Parser setting 'region' must be a two letter region code")
            values[key] = value

        if "region" in values and "country_code" not in values:
            country_code = phonenumbers.country_code_for_region(values["region"])
            if not country_code:
                raise ConfigurationError(f"Unknown phone region '{values['region']}'")
            values["country_code"] = str(country_code)
        return cls(**values)


DEFAULT_SETTINGS = ParserSettings()


def load_configuration(path: str | Path) -> Dict[str, Any]:
    """Load configuration data from a JSON or YAML file."""

    file_path = Path(path)
    if not file_path.exists():
        raise ConfigurationError(f"Configuration file '{file_path}' was not found")

    if file_path.suffix.lower() not in _SUPPORTED_EXTENSIONS:
        raise ConfigurationError(
            f"Unsupported configuration format '{file_path.suffix}'. Supported extensions: {sorted(_SUPPORTED_EXTENSIONS)}"
        )

    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        try:
            return json.loads(text) or {}
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Configuration file '{file_path}' is not valid JSON: {exc}") from exc

    try:
        import yaml  # type: ignore
    except ImportError as exc:  # pragma: no cover - dependency optional
        raise ConfigurationError(
            "YAML configuration requires the 'pyyaml' package to be installed"
        ) from exc

    try:
        return yaml.safe_load(text) or {}  # type: ignore[no-any-return]
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Configuration file '{file_path}' is not valid YAML: {exc}") from exc


def load_settings(path: str | Path) -> ParserSettings:
    """Read the ``parser`` section of a configuration file."""

    config = load_configuration(path)
    if not isinstance(config, dict):
        raise ConfigurationError(f"Configuration file '{path}' must contain a mapping")
    section = config.get("parser", {}) or {}
    if not isinstance(section, dict):
        raise ConfigurationError("The 'parser' configuration section must be a mapping")
    if not section:
        LOGGER.debug("No parser section in %s - using default settings", path)
        return DEFAULT_SETTINGS
    return ParserSettings.from_mapping(section)
