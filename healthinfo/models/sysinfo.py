from __future__ import annotations

from typing import Optional

from pydantic import Field, JsonValue, NonNegativeInt

from healthinfo.models.base import BaseModel, NodeCommon, omitempty, omitnil
from healthinfo.models.host import HostInfoStat, TemperatureStat


class CPU(BaseModel):
    vendor_id: str = ""
    family: str = ""
    model: str = ""
    stepping: int = 0
    physical_id: str = ""
    model_name: str = ""
    mhz: float = 0.0
    cache_size: int = 0
    flags: list[str] = Field(default_factory=list)
    microcode: str = ""
    cores: int = 0


class CPUs(NodeCommon):
    cpus: list[CPU] = omitempty(default_factory=list)
    is_freq_gov_perf: Optional[bool] = omitnil(None)


class Partition(BaseModel):
    error: str = omitempty("")

    device: str = omitempty("")
    mountpoint: str = omitempty("")
    fs_type: str = omitempty("")
    mount_options: str = omitempty("")
    mount_fs_type: str = omitempty("")
    space_total: NonNegativeInt = omitempty(0)
    space_free: NonNegativeInt = omitempty(0)
    inode_total: NonNegativeInt = omitempty(0)
    inode_free: NonNegativeInt = omitempty(0)


class Partitions(NodeCommon):
    partitions: list[Partition] = omitempty(default_factory=list)


class OSInfo(NodeCommon):
    info: HostInfoStat = omitempty(default_factory=HostInfoStat)
    sensors: list[TemperatureStat] = omitempty(default_factory=list)


class MemInfo(NodeCommon):
    total: NonNegativeInt = omitempty(0)
    available: NonNegativeInt = omitempty(0)
    swap_space_total: NonNegativeInt = omitempty(0)
    swap_space_free: NonNegativeInt = omitempty(0)
    limit: NonNegativeInt = omitempty(0)


class ProcInfo(NodeCommon):
    """Process-level information of the server process on one node."""

    pid: int = omitempty(0)
    is_background: bool = omitempty(False)
    cpu_percent: float = omitempty(0.0)
    children_pids: list[int] = omitempty(default_factory=list)
    cmd_line: str = omitempty("")
    num_connections: int = omitempty(0)
    create_time: int = omitempty(0)
    cwd: str = omitempty("")
    exec_path: str = omitempty("")
    gids: list[int] = omitempty(default_factory=list)
    is_running: bool = omitempty(False)
    mem_percent: float = omitempty(0.0)
    name: str = omitempty("")
    nice: int = omitempty(0)
    num_fds: int = omitempty(0)
    num_threads: int = omitempty(0)
    ppid: int = omitempty(0)
    status: str = omitempty("")
    tgid: int = omitempty(0)
    uids: list[int] = omitempty(default_factory=list)
    username: str = omitempty("")

    def get_owner(self) -> str:
        return self.username


class SysErrors(NodeCommon):
    errors: list[str] = omitempty(default_factory=list)


class SysService(BaseModel):
    name: str = ""
    status: str = ""


class SysServices(NodeCommon):
    services: list[SysService] = omitempty(default_factory=list)


class SysConfig(NodeCommon):
    config: dict[str, JsonValue] = omitempty(default_factory=dict)


class SysInfo(BaseModel):
    """Hardware and system information of every node, per resource."""

    cpu_info: list[CPUs] = omitempty(default_factory=list, alias="cpus")
    partitions: list[Partitions] = omitempty(default_factory=list)
    os_info: list[OSInfo] = omitempty(default_factory=list, alias="osinfo")
    mem_info: list[MemInfo] = omitempty(default_factory=list, alias="meminfo")
    proc_info: list[ProcInfo] = omitempty(default_factory=list, alias="procinfo")
    sys_errs: list[SysErrors] = omitempty(default_factory=list, alias="errors")
    sys_services: list[SysServices] = omitempty(default_factory=list, alias="services")
    sys_config: list[SysConfig] = omitempty(default_factory=list, alias="config")

    def failed_nodes(self) -> list[str]:
        """Addresses of nodes whose records carry an error, in report order."""
        seen: dict[str, None] = {}
        for records in (
            self.cpu_info,
            self.partitions,
            self.os_info,
            self.mem_info,
            self.proc_info,
            self.sys_errs,
            self.sys_services,
            self.sys_config,
        ):
            for record in records:
                if record.failed:
                    seen.setdefault(record.addr, None)
        return list(seen)
