"""Custom exceptions for configuration handling."""

from file_organizer.errors import OrganizerError


class ConfigError(OrganizerError):
    """Raised when option values cannot be validated."""
