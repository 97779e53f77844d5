from __future__ import annotations

from pydantic import Field, NonNegativeInt

from healthinfo.models.base import BaseModel, NodeCommon, omitempty


class Latency(BaseModel):
    """Write latency of a drive or peer link, in seconds."""

    avg: float = 0.0
    max: float = 0.0
    min: float = 0.0
    percentile_50: float = 0.0
    percentile_90: float = 0.0
    percentile_99: float = 0.0


class Throughput(BaseModel):
    """Write throughput of a drive or peer link, in bytes per second."""

    avg: NonNegativeInt = 0
    max: NonNegativeInt = 0
    min: NonNegativeInt = 0
    percentile_50: NonNegativeInt = 0
    percentile_90: NonNegativeInt = 0
    percentile_99: NonNegativeInt = 0


class DrivePerfInfo(BaseModel):
    error: str = omitempty("")

    path: str = ""
    latency: Latency = Field(default_factory=Latency)
    throughput: Throughput = Field(default_factory=Throughput)

    @property
    def failed(self) -> bool:
        return bool(self.error)


class DrivePerfInfos(NodeCommon):
    """Every drive measured on one node, run one at a time and all at once."""

    serial_perf: list[DrivePerfInfo] = omitempty(default_factory=list)
    parallel_perf: list[DrivePerfInfo] = omitempty(default_factory=list)


class PeerNetPerfInfo(NodeCommon):
    latency: Latency = Field(default_factory=Latency)
    throughput: Throughput = Field(default_factory=Throughput)


class NetPerfInfo(NodeCommon):
    """Network performance from one node to each of its peers."""

    remote_peers: list[PeerNetPerfInfo] = omitempty(default_factory=list)


class PerfInfo(BaseModel):
    """Drive and network performance for the whole cluster."""

    drives: list[DrivePerfInfos] = omitempty(default_factory=list)
    net: list[NetPerfInfo] = omitempty(default_factory=list)
    net_parallel: NetPerfInfo = Field(default_factory=NetPerfInfo)
