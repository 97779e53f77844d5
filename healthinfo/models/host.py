"""Host-level samples embedded in per-node records.

These mirror the camelCase documents emitted by the host metrics library on
each node. Every key is always written.
"""

from __future__ import annotations

from pydantic import ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_camel

from healthinfo.models.base import BaseModel


class HostStat(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel)


# -- CPU ----------------------------------------------------------------------

class CPUInfoStat(HostStat):
    cpu: int = 0
    vendor_id: str = ""
    family: str = ""
    model: str = ""
    stepping: int = 0
    physical_id: str = ""
    core_id: str = ""
    cores: int = 0
    model_name: str = ""
    mhz: float = 0.0
    cache_size: int = 0
    flags: list[str] = Field(default_factory=list)
    microcode: str = ""


class CPUTimesStat(HostStat):
    cpu: str = ""
    user: float = 0.0
    system: float = 0.0
    idle: float = 0.0
    nice: float = 0.0
    iowait: float = 0.0
    irq: float = 0.0
    softirq: float = 0.0
    steal: float = 0.0
    guest: float = 0.0
    guest_nice: float = 0.0


# -- Disk ---------------------------------------------------------------------

class DiskUsageStat(HostStat):
    path: str = ""
    fstype: str = ""
    total: NonNegativeInt = 0
    free: NonNegativeInt = 0
    used: NonNegativeInt = 0
    used_percent: float = 0.0
    inodes_total: NonNegativeInt = 0
    inodes_used: NonNegativeInt = 0
    inodes_free: NonNegativeInt = 0
    inodes_used_percent: float = 0.0


class PartitionStat(HostStat):
    device: str = ""
    mountpoint: str = ""
    fstype: str = ""
    opts: str = ""


class IOCountersStat(HostStat):
    read_count: NonNegativeInt = 0
    merged_read_count: NonNegativeInt = 0
    write_count: NonNegativeInt = 0
    merged_write_count: NonNegativeInt = 0
    read_bytes: NonNegativeInt = 0
    write_bytes: NonNegativeInt = 0
    read_time: NonNegativeInt = 0
    write_time: NonNegativeInt = 0
    iops_in_progress: NonNegativeInt = 0
    io_time: NonNegativeInt = 0
    weighted_io: NonNegativeInt = Field(default=0, alias="weightedIO")
    name: str = ""
    serial_number: str = ""
    label: str = ""


# -- OS -----------------------------------------------------------------------

class HostInfoStat(HostStat):
    hostname: str = ""
    uptime: NonNegativeInt = 0
    boot_time: NonNegativeInt = 0
    procs: NonNegativeInt = 0
    os: str = ""
    platform: str = ""
    platform_family: str = ""
    platform_version: str = ""
    kernel_version: str = ""
    kernel_arch: str = ""
    virtualization_system: str = ""
    virtualization_role: str = ""
    host_id: str = ""


class TemperatureStat(HostStat):
    sensor_key: str = ""
    temperature: float = 0.0


class UserStat(HostStat):
    user: str = ""
    terminal: str = ""
    host: str = ""
    started: int = 0


# -- Memory -------------------------------------------------------------------

class SwapMemoryStat(HostStat):
    total: NonNegativeInt = 0
    used: NonNegativeInt = 0
    free: NonNegativeInt = 0
    used_percent: float = 0.0
    sin: NonNegativeInt = 0
    sout: NonNegativeInt = 0
    pg_in: NonNegativeInt = 0
    pg_out: NonNegativeInt = 0
    pg_fault: NonNegativeInt = 0


class VirtualMemoryStat(HostStat):
    total: NonNegativeInt = 0
    available: NonNegativeInt = 0
    used: NonNegativeInt = 0
    used_percent: float = 0.0
    free: NonNegativeInt = 0
    active: NonNegativeInt = 0
    inactive: NonNegativeInt = 0
    buffers: NonNegativeInt = 0
    cached: NonNegativeInt = 0
    shared: NonNegativeInt = 0
    swap_total: NonNegativeInt = 0
    swap_free: NonNegativeInt = 0
