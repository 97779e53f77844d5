from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum


class HealthStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


# Report versions
HEALTH_INFO_VERSION_0: str = ""
HEALTH_INFO_VERSION_2: str = "2"
HEALTH_INFO_VERSION: str = HEALTH_INFO_VERSION_2

# Zero value of a report timestamp (0001-01-01T00:00:00Z)
ZERO_TIMESTAMP: datetime = datetime(1, 1, 1, tzinfo=timezone.utc)

# Indented rendering
DEFAULT_JSON_PREFIX: str = " "
DEFAULT_JSON_INDENT: int = 4

# Settings
ENV_PREFIX: str = "HEALTHINFO_"
DEFAULT_LOG_LEVEL: str = "INFO"

# Logging
LOG_FILE_NAME: str = "healthinfo.log"
LOG_MAX_SIZE_BYTES: int = 10 * 1024 * 1024  # 10 MB
LOG_BACKUP_COUNT: int = 5
