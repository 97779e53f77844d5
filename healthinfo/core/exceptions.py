from __future__ import annotations

from typing import Optional


class HealthInfoError(Exception):
    """Base exception for the healthinfo package."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(self.message)


class ConfigError(HealthInfoError):
    """Raised when settings loading or validation fails."""


class SerializationError(HealthInfoError):
    """Raised when a record cannot be encoded to JSON."""


class DecodeError(HealthInfoError):
    """Raised when a payload is not valid JSON or does not fit the model."""


class UnsupportedVersionError(DecodeError):
    """Raised when a health report carries an unknown version tag."""

    def __init__(self, version: Optional[str], message: str = "") -> None:
        self.version = version
        super().__init__(message or f"Unsupported health info version: {version!r}")
