from __future__ import annotations

from healthinfo.models.base import BaseModel as HealthModel, NodeCommon
from healthinfo.models.perf import (
    Latency,
    Throughput,
    DrivePerfInfo,
    DrivePerfInfos,
    PeerNetPerfInfo,
    NetPerfInfo,
    PerfInfo,
)
from healthinfo.models.host import (
    CPUInfoStat,
    CPUTimesStat,
    DiskUsageStat,
    PartitionStat,
    IOCountersStat,
    HostInfoStat,
    TemperatureStat,
    UserStat,
    SwapMemoryStat,
    VirtualMemoryStat,
)
from healthinfo.models.system import (
    SysHealthInfo,
    ServerCPUInfo,
    ServerDiskHwInfo,
    ServerOsInfo,
    ServerMemInfo,
    ServerProcInfo,
    SysProcess,
)
from healthinfo.models.sysinfo import (
    SysInfo,
    CPU,
    CPUs,
    Partition,
    Partitions,
    OSInfo,
    MemInfo,
    ProcInfo,
    SysErrors,
    SysService,
    SysServices,
    SysConfig,
)
from healthinfo.models.minio import (
    InfoMessage,
    Buckets,
    Objects,
    Usage,
    Services,
    MemStats,
    Disk,
    ServerProperties,
    MinioHealthInfoV0,
    MinioConfig,
    MinioHealthInfo,
)
from healthinfo.models.report import (
    HealthInfo,
    HealthInfoV0,
    HealthInfoV2,
    HealthInfoVersion,
    decode_health_info,
    parse_health_info_version,
)

__all__ = [
    "HealthModel",
    "NodeCommon",
    "Latency",
    "Throughput",
    "DrivePerfInfo",
    "DrivePerfInfos",
    "PeerNetPerfInfo",
    "NetPerfInfo",
    "PerfInfo",
    "CPUInfoStat",
    "CPUTimesStat",
    "DiskUsageStat",
    "PartitionStat",
    "IOCountersStat",
    "HostInfoStat",
    "TemperatureStat",
    "UserStat",
    "SwapMemoryStat",
    "VirtualMemoryStat",
    "SysHealthInfo",
    "ServerCPUInfo",
    "ServerDiskHwInfo",
    "ServerOsInfo",
    "ServerMemInfo",
    "ServerProcInfo",
    "SysProcess",
    "SysInfo",
    "CPU",
    "CPUs",
    "Partition",
    "Partitions",
    "OSInfo",
    "MemInfo",
    "ProcInfo",
    "SysErrors",
    "SysService",
    "SysServices",
    "SysConfig",
    "InfoMessage",
    "Buckets",
    "Objects",
    "Usage",
    "Services",
    "MemStats",
    "Disk",
    "ServerProperties",
    "MinioHealthInfoV0",
    "MinioConfig",
    "MinioHealthInfo",
    "HealthInfo",
    "HealthInfoV0",
    "HealthInfoV2",
    "HealthInfoVersion",
    "decode_health_info",
    "parse_health_info_version",
]
