"""
Pytest configuration and shared fixtures.
"""

from datetime import datetime, timezone

import pytest

from healthinfo.core.config import reset_settings
from healthinfo.core.logging import reset_logging
from healthinfo.models import (
    CPU,
    CPUs,
    DrivePerfInfo,
    DrivePerfInfos,
    HealthInfoV0,
    HealthInfoV2,
    InfoMessage,
    Latency,
    MemInfo,
    MinioConfig,
    MinioHealthInfo,
    NetPerfInfo,
    PeerNetPerfInfo,
    PerfInfo,
    ProcInfo,
    ServerCPUInfo,
    ServerMemInfo,
    ServerProcInfo,
    ServerProperties,
    SwapMemoryStat,
    SysConfig,
    SysHealthInfo,
    SysInfo,
    SysProcess,
    Throughput,
)


@pytest.fixture(autouse=True)
def clean_state(monkeypatch):
    """Isolate settings and logging from the environment and from each other."""
    for name in ("HEALTHINFO_JSON_PREFIX", "HEALTHINFO_JSON_INDENT", "HEALTHINFO_LOG_LEVEL", "HEALTHINFO_LOG_DIR"):
        monkeypatch.delenv(name, raising=False)
    reset_settings()
    yield
    reset_settings()
    reset_logging()


@pytest.fixture
def timestamp():
    return datetime(2022, 3, 14, 15, 9, 26, 535000, tzinfo=timezone.utc)


@pytest.fixture
def latency():
    return Latency(
        avg=0.012,
        max=0.05,
        min=0.001,
        percentile_50=0.01,
        percentile_90=0.03,
        percentile_99=0.045,
    )


@pytest.fixture
def throughput():
    return Throughput(
        avg=1_200_000_000,
        max=1_500_000_000,
        min=900_000_000,
        percentile_50=1_100_000_000,
        percentile_90=1_400_000_000,
        percentile_99=1_490_000_000,
    )


@pytest.fixture
def perf_info(latency, throughput):
    drive = DrivePerfInfo(path="/mnt/drive1", latency=latency, throughput=throughput)
    return PerfInfo(
        drives=[
            DrivePerfInfos(
                addr="node1:9000",
                serial_perf=[drive],
                parallel_perf=[drive, DrivePerfInfo(path="/mnt/drive2", error="drive offline")],
            ),
        ],
        net=[
            NetPerfInfo(
                addr="node1:9000",
                remote_peers=[
                    PeerNetPerfInfo(addr="node2:9000", latency=latency, throughput=throughput),
                ],
            ),
        ],
        net_parallel=NetPerfInfo(addr="node1:9000"),
    )


@pytest.fixture
def v2_report(timestamp, perf_info):
    """A fully populated second-layout report with no top-level error."""
    sys_info = SysInfo(
        cpu_info=[
            CPUs(
                addr="node1:9000",
                cpus=[CPU(vendor_id="GenuineIntel", model_name="Xeon", cores=16, flags=["sse4_2", "avx2"])],
                is_freq_gov_perf=True,
            ),
            CPUs(addr="node2:9000", error="cpu info unavailable"),
        ],
        mem_info=[MemInfo(addr="node1:9000", total=64 << 30, available=32 << 30)],
        proc_info=[ProcInfo(addr="node1:9000", pid=4242, name="minio", username="minio-user", num_threads=48)],
        sys_config=[SysConfig(addr="node1:9000", config={"rlimit-max": 1048576, "governor": ["performance"]})],
    )
    minio = MinioHealthInfo(
        config=MinioConfig(config={"region": {"name": "us-east-1"}, "compression": [True, None, 2.5]}),
        info=InfoMessage(
            mode="online",
            deployment_id="6faeded5-5cf3-4133-8a37-07c5d500207c",
            servers=[ServerProperties(state="online", endpoint="node1:9000", uptime=3600, network={"node2:9000": "online"})],
        ),
    )
    return HealthInfoV2(timestamp=timestamp, sys=sys_info, perf=perf_info, minio=minio)


@pytest.fixture
def v0_report(timestamp):
    """A first-layout report with per-node records, one of them failed."""
    return HealthInfoV0(
        timestamp=timestamp,
        sys=SysHealthInfo(
            cpu_info=[ServerCPUInfo(addr="node1:9000")],
            mem_info=[
                ServerMemInfo(addr="node1:9000", swap_mem=SwapMemoryStat(total=8 << 30, used=1 << 30)),
                ServerMemInfo(addr="node2:9000", error="connection refused"),
            ],
            proc_info=[
                ServerProcInfo(
                    addr="node1:9000",
                    processes=[SysProcess(pid=1, name="init", username="root", num_threads=1, is_running=True)],
                ),
            ],
        ),
    )
