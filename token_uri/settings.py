"""Environment-driven settings for the decoder CLI.

TOKEN_URI_STRICT  enable strict base64/UTF-8 decoding (default: false)
LOG_LEVEL         logging level name (default: WARNING)
"""
from __future__ import annotations

import os
from collections.abc import Mapping

from pydantic import BaseModel, ValidationError, field_validator

__all__ = ["ConfigError", "DecoderSettings", "load_settings"]

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when an environment value cannot be parsed."""


class DecoderSettings(BaseModel):
    strict: bool = False
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LEVELS:
            raise ValueError(f"must be one of {', '.join(_LEVELS)}")
        return level


def load_settings(environ: Mapping[str, str] | None = None) -> DecoderSettings:
    """Build settings from `environ` (defaults to os.environ).

    Unset variables fall back to the model defaults.
    """
    env = os.environ if environ is None else environ
    values: dict[str, str] = {}
    if "TOKEN_URI_STRICT" in env:
        values["strict"] = env["TOKEN_URI_STRICT"].strip()
    if "LOG_LEVEL" in env:
        values["log_level"] = env["LOG_LEVEL"]
    try:
        return DecoderSettings(**values)
    except ValidationError as e:
        raise ConfigError(f"invalid environment configuration: {e}") from e
