"""Health info reports of an object-storage cluster and their JSON encoding."""

from __future__ import annotations

from healthinfo.core.constants import HEALTH_INFO_VERSION, HealthStatus
from healthinfo.core.exceptions import (
    ConfigError,
    DecodeError,
    HealthInfoError,
    SerializationError,
    UnsupportedVersionError,
)
from healthinfo.models import *  # noqa: F401,F403
from healthinfo.models import __all__ as _models_all

__version__ = "0.1.0"

__all__ = [
    "HEALTH_INFO_VERSION",
    "HealthStatus",
    "HealthInfoError",
    "ConfigError",
    "SerializationError",
    "DecodeError",
    "UnsupportedVersionError",
    *_models_all,
]
