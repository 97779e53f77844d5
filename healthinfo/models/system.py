from __future__ import annotations

from typing import Optional

from healthinfo.models.base import BaseModel, NodeCommon, omitempty, omitnil
from healthinfo.models.host import (
    CPUInfoStat,
    CPUTimesStat,
    DiskUsageStat,
    HostInfoStat,
    IOCountersStat,
    PartitionStat,
    SwapMemoryStat,
    TemperatureStat,
    UserStat,
    VirtualMemoryStat,
)


class ServerCPUInfo(NodeCommon):
    """CPU and timer stats of one node."""

    cpu_stat: list[CPUInfoStat] = omitempty(default_factory=list, alias="cpu")
    time_stat: list[CPUTimesStat] = omitempty(default_factory=list, alias="time")


class ServerDiskHwInfo(NodeCommon):
    """Usage, partitions and IO counters of one node's drives."""

    usage: list[DiskUsageStat] = omitempty(default_factory=list, alias="usages")
    partitions: list[PartitionStat] = omitempty(default_factory=list)
    counters: dict[str, IOCountersStat] = omitempty(default_factory=dict)


class ServerOsInfo(NodeCommon):
    info: HostInfoStat = omitempty(default_factory=HostInfoStat)
    sensors: list[TemperatureStat] = omitempty(default_factory=list)
    users: list[UserStat] = omitempty(default_factory=list)


class ServerMemInfo(NodeCommon):
    """Virtual and swap memory of one node."""

    swap_mem: Optional[SwapMemoryStat] = omitnil(None, alias="swap")
    virtual_mem: Optional[VirtualMemoryStat] = omitnil(None, alias="virtualmem")


class SysProcess(BaseModel):
    """Snapshot of a single OS process."""

    pid: int = 0
    background: bool = omitempty(False)
    cpu_percent: float = omitempty(0.0, alias="cpupercent")
    children: list[int] = omitempty(default_factory=list)
    cmd_line: str = omitempty("", alias="cmd")
    connection_count: int = omitempty(0)
    create_time: int = omitempty(0, alias="createtime")
    cwd: str = omitempty("")
    exe: str = omitempty("")
    gids: list[int] = omitempty(default_factory=list)
    is_running: bool = omitempty(False, alias="isrunning")
    mem_percent: float = omitempty(0.0, alias="mempercent")
    name: str = omitempty("")
    nice: int = omitempty(0)
    num_fds: int = omitempty(0, alias="numfds")
    num_threads: int = omitempty(0, alias="numthreads")
    parent: int = omitempty(0)
    ppid: int = omitempty(0)
    status: str = omitempty("")
    tgid: int = omitempty(0)
    uids: list[int] = omitempty(default_factory=list)
    username: str = omitempty("")

    def get_owner(self) -> str:
        return self.username


class ServerProcInfo(NodeCommon):
    processes: list[SysProcess] = omitempty(default_factory=list)


class SysHealthInfo(BaseModel):
    """Hardware and system information of every node in the cluster."""

    cpu_info: list[ServerCPUInfo] = omitempty(default_factory=list, alias="cpus")
    disk_hw_info: list[ServerDiskHwInfo] = omitempty(default_factory=list, alias="drives")
    os_info: list[ServerOsInfo] = omitempty(default_factory=list, alias="osinfos")
    mem_info: list[ServerMemInfo] = omitempty(default_factory=list, alias="meminfos")
    proc_info: list[ServerProcInfo] = omitempty(default_factory=list, alias="procinfos")
    error: str = omitempty("")

    def failed_nodes(self) -> list[str]:
        """Addresses of nodes whose records carry an error, in report order."""
        seen: dict[str, None] = {}
        for records in (self.cpu_info, self.disk_hw_info, self.os_info, self.mem_info, self.proc_info):
            for record in records:
                if record.failed:
                    seen.setdefault(record.addr, None)
        return list(seen)
