from __future__ import annotations

from pydantic import Field, JsonValue, NonNegativeInt

from healthinfo.models.base import BaseModel, omitempty, omitnil


class Buckets(BaseModel):
    count: NonNegativeInt = 0
    error: str = omitempty("")


class Objects(BaseModel):
    count: NonNegativeInt = 0
    error: str = omitempty("")


class Usage(BaseModel):
    size: NonNegativeInt = 0
    error: str = omitempty("")


class Services(BaseModel):
    """Status of the external services a deployment talks to.

    The per-service documents are passed through as opaque JSON.
    """

    kms: dict[str, JsonValue] = omitempty(default_factory=dict)
    ldap: dict[str, JsonValue] = omitempty(default_factory=dict)
    logger: list[JsonValue] = omitempty(default_factory=list)
    audit: list[JsonValue] = omitempty(default_factory=list)
    notifications: list[JsonValue] = omitempty(default_factory=list)


class MemStats(BaseModel):
    alloc: NonNegativeInt = Field(default=0, alias="Alloc")
    total_alloc: NonNegativeInt = Field(default=0, alias="TotalAlloc")
    mallocs: NonNegativeInt = Field(default=0, alias="Mallocs")
    frees: NonNegativeInt = Field(default=0, alias="Frees")
    heap_alloc: NonNegativeInt = Field(default=0, alias="HeapAlloc")


class Disk(BaseModel):
    endpoint: str = omitempty("")
    root_disk: bool = omitempty(False, alias="rootDisk")
    drive_path: str = omitempty("", alias="path")
    healing: bool = omitempty(False)
    state: str = omitempty("")
    uuid: str = omitempty("")
    model: str = omitempty("")
    total_space: NonNegativeInt = omitempty(0, alias="totalspace")
    used_space: NonNegativeInt = omitempty(0, alias="usedspace")
    available_space: NonNegativeInt = omitempty(0, alias="availspace")
    read_throughput: float = omitempty(0.0, alias="readthroughput")
    write_throughput: float = omitempty(0.0, alias="writethroughput")
    read_latency: float = omitempty(0.0, alias="readlatency")
    write_latency: float = omitempty(0.0, alias="writelatency")
    utilization: float = omitempty(0.0)


class ServerProperties(BaseModel):
    """One server of the deployment as it reports itself."""

    state: str = omitempty("")
    endpoint: str = omitempty("")
    uptime: int = omitempty(0)
    version: str = omitempty("")
    commit_id: str = omitempty("", alias="commitID")
    network: dict[str, str] = omitempty(default_factory=dict)
    disks: list[Disk] = omitempty(default_factory=list, alias="drives")
    pool_number: int = omitempty(0, alias="poolNumber")
    mem_stats: MemStats = Field(default_factory=MemStats)


class InfoMessage(BaseModel):
    """Deployment-wide server information."""

    mode: str = omitempty("")
    domain: list[str] = omitempty(default_factory=list)
    region: str = omitempty("")
    sqs_arn: list[str] = omitempty(default_factory=list, alias="sqsARN")
    deployment_id: str = omitempty("", alias="deploymentID")
    buckets: Buckets = omitempty(default_factory=Buckets)
    objects: Objects = omitempty(default_factory=Objects)
    usage: Usage = omitempty(default_factory=Usage)
    services: Services = omitempty(default_factory=Services)
    backend: JsonValue = omitnil(None)
    servers: list[ServerProperties] = omitempty(default_factory=list)


class MinioHealthInfoV0(BaseModel):
    """Server information and configuration, first report layout."""

    info: InfoMessage = omitempty(default_factory=InfoMessage)
    config: JsonValue = omitnil(None)
    error: str = omitempty("")


class MinioConfig(BaseModel):
    error: str = omitempty("")
    config: JsonValue = omitnil(None)


class MinioHealthInfo(BaseModel):
    error: str = omitempty("")
    config: MinioConfig = omitempty(default_factory=MinioConfig)
    info: InfoMessage = omitempty(default_factory=InfoMessage)
