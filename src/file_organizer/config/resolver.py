"""Configuration resolution helpers."""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError

from .exceptions import ConfigError
from .models import OrganizerConfig


def resolve_with_precedence(
    *,
    defaults: OrganizerConfig,
    cli_overrides: Mapping[str, Any] | None = None,
) -> OrganizerConfig:
    """Layer command-line overrides on top of defaults and validate the result.

    Override keys are ``section.field`` paths such as ``"logging.level"``.
    Options whose value is ``None`` are treated as not given.
    """

    merged = defaults.model_dump(mode="python")
    for key, value in (cli_overrides or {}).items():
        if value is None:
            continue
        section, _, field = key.partition(".")
        if not field or not isinstance(merged.get(section), dict):
            raise ConfigError(f"Unknown configuration option: {key}")
        merged[section][field] = value

    try:
        return OrganizerConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid configuration values: {exc}") from exc


__all__ = ["resolve_with_precedence"]
