from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from typing import Any, Union

from pydantic import field_validator

from healthinfo.core.constants import (
    HEALTH_INFO_VERSION_0,
    HEALTH_INFO_VERSION_2,
    ZERO_TIMESTAMP,
    HealthStatus,
)
from healthinfo.core.exceptions import DecodeError, UnsupportedVersionError
from healthinfo.core.logging import get_logger
from healthinfo.models.base import BaseModel, omitempty
from healthinfo.models.minio import MinioHealthInfo
from healthinfo.models.perf import PerfInfo
from healthinfo.models.system import SysHealthInfo
from healthinfo.models.sysinfo import SysInfo

logger = get_logger(__name__)

# datetime keeps microseconds; producers may send up to nine fractional digits
_SUB_MICRO = re.compile(r"(\.\d{6})\d+")


def _truncate_fraction(value: Any) -> Any:
    if isinstance(value, str):
        return _SUB_MICRO.sub(r"\1", value, count=1)
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _status(error: str) -> HealthStatus:
    return HealthStatus.ERROR if error else HealthStatus.SUCCESS


class HealthInfoV0(BaseModel):
    """Cluster health report, first layout (system information only)."""

    timestamp: datetime = omitempty(default=ZERO_TIMESTAMP)
    error: str = omitempty("")
    sys: SysHealthInfo = omitempty(default_factory=SysHealthInfo)

    @field_validator("timestamp", mode="before")
    @classmethod
    def timestamp_to_micros(cls, v: Any) -> Any:
        return _truncate_fraction(v)

    @field_validator("timestamp")
    @classmethod
    def timestamp_is_aware(cls, v: datetime) -> datetime:
        return _as_utc(v)

    def get_error(self) -> str:
        return self.error

    def get_status(self) -> HealthStatus:
        return _status(self.error)

    def get_timestamp(self) -> datetime:
        return self.timestamp


class HealthInfoV2(BaseModel):
    """Cluster health report, second layout.

    Carries hardware, performance and server sections. Only the top-level
    ``error`` decides the report status; errors recorded on individual nodes
    do not.
    """

    version: str = HEALTH_INFO_VERSION_2
    error: str = omitempty("")

    timestamp: datetime = omitempty(default=ZERO_TIMESTAMP)
    sys: SysInfo = omitempty(default_factory=SysInfo)
    perf: PerfInfo = omitempty(default_factory=PerfInfo)
    minio: MinioHealthInfo = omitempty(default_factory=MinioHealthInfo)

    @field_validator("timestamp", mode="before")
    @classmethod
    def timestamp_to_micros(cls, v: Any) -> Any:
        return _truncate_fraction(v)

    @field_validator("timestamp")
    @classmethod
    def timestamp_is_aware(cls, v: datetime) -> datetime:
        return _as_utc(v)

    def get_error(self) -> str:
        return self.error

    def get_status(self) -> HealthStatus:
        return _status(self.error)

    def get_timestamp(self) -> datetime:
        return self.timestamp


HealthInfo = Union[HealthInfoV0, HealthInfoV2]


class HealthInfoVersion(BaseModel):
    """Version header of a report, decoded without touching the rest."""

    version: str = HEALTH_INFO_VERSION_0
    error: str = omitempty("")


def _load(data: str | bytes | dict[str, Any]) -> dict[str, Any]:
    if isinstance(data, dict):
        return data
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.debug("Health info payload is not JSON: %s", exc)
        raise DecodeError(f"Invalid health info JSON: {exc}") from exc
    if not isinstance(raw, dict):
        raise DecodeError(f"Health info must be a JSON object, got {type(raw).__name__}")
    return raw


def parse_health_info_version(data: str | bytes | dict[str, Any]) -> HealthInfoVersion:
    """Read the ``version`` and ``error`` keys of a report payload."""
    return HealthInfoVersion.from_dict(_load(data))


def decode_health_info(data: str | bytes | dict[str, Any]) -> HealthInfo:
    """Decode a report into the type matching its version tag.

    Payloads without a version are first-layout reports. Reports are never
    converted between layouts.
    """
    raw = _load(data)
    version = parse_health_info_version(raw).version

    if version == HEALTH_INFO_VERSION_0:
        return HealthInfoV0.from_dict(raw)
    if version == HEALTH_INFO_VERSION_2:
        return HealthInfoV2.from_dict(raw)

    logger.debug("Rejected health info with version %r", version)
    raise UnsupportedVersionError(version)
