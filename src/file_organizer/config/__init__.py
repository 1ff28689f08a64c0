"""Configuration handling for file-organizer.

Settings come only from built-in defaults and command-line flags; no
configuration file or environment variable is read.
"""

from .exceptions import ConfigError
from .models import LoggingSettings, OrganizationOptions, OrganizerConfig
from .resolver import resolve_with_precedence

__all__ = [
    "ConfigError",
    "LoggingSettings",
    "OrganizationOptions",
    "OrganizerConfig",
    "resolve_with_precedence",
]
