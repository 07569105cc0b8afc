"""Errors for the site_config module."""

from typing import Any, Optional


class SiteConfigError(Exception):
    """Base class for site configuration errors."""


class ConfigValidationError(SiteConfigError):
    """Raised when a resolved configuration fails its structural contract.

    Attributes:
        config_type: "header" or "footer"
        errors: list of (location, message) pairs, one per violation
    """

    def __init__(self, config_type: str, errors: list[tuple[str, str]]):
        self.config_type = config_type
        self.errors = errors
        details = "; ".join(f"{loc}: {msg}" for loc, msg in errors)
        super().__init__(f"Invalid {config_type} configuration: {details}")


class ConfigUpdateError(SiteConfigError):
    """Raised when a snapshot write is rejected. The snapshot is left untouched.

    Attributes:
        message: human-friendly message
        details: optional validation details
    """

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class VersionConflictError(ConfigUpdateError):
    """Raised when a write carries a stale expected version."""

    def __init__(self, expected_version: str, current_version: str):
        super().__init__(
            f"Version conflict: expected {expected_version}, current is {current_version}"
        )
        self.expected_version = expected_version
        self.current_version = current_version
