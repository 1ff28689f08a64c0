"""Configuration models describing file-organizer settings."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from file_organizer.organization.planner import DEFAULT_DESTINATION_DIRNAME


class OrganizerBaseModel(BaseModel):
    """Shared configuration for settings models."""

    model_config = ConfigDict(extra="forbid")


class OrganizationOptions(OrganizerBaseModel):
    """Settings that govern the organize command.

    Attributes:
        destination_dirname: Folder created inside the target that receives
            the extension folders. Entries with this name are never moved.
    """

    destination_dirname: str = DEFAULT_DESTINATION_DIRNAME

    @field_validator("destination_dirname")
    @classmethod
    def _single_component(cls, value: str) -> str:
        if not value or value in (".", "..") or "/" in value or "\\" in value:
            raise ValueError("destination_dirname must be a single folder name")
        return value


class LoggingSettings(OrganizerBaseModel):
    """Runtime logging configuration.

    Attributes:
        level: Logging verbosity level.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper(cls, value: object) -> object:
        if isinstance(value, str):
            return value.upper()
        return value


class OrganizerConfig(OrganizerBaseModel):
    """Top-level settings for a single CLI invocation."""

    organization: OrganizationOptions = Field(default_factory=OrganizationOptions)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


__all__ = [
    "LoggingSettings",
    "OrganizationOptions",
    "OrganizerBaseModel",
    "OrganizerConfig",
]
