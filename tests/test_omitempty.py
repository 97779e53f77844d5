"""
Tests for wire keys and omit-empty behaviour of encoded records.
"""

import json

from healthinfo.models import (
    CPUInfoStat,
    CPUs,
    DrivePerfInfo,
    HealthInfoV0,
    HealthInfoV2,
    HostInfoStat,
    IOCountersStat,
    Latency,
    MinioHealthInfoV0,
    NetPerfInfo,
    PerfInfo,
    ServerMemInfo,
    ServerOsInfo,
    SwapMemoryStat,
    SysProcess,
    Throughput,
)

ZERO_SUMMARY = {
    "avg": 0,
    "max": 0,
    "min": 0,
    "percentile_50": 0,
    "percentile_90": 0,
    "percentile_99": 0,
}


class TestEmptyReports:
    def test_empty_v2(self):
        data = HealthInfoV2().to_dict()
        assert set(data) == {"version", "timestamp", "sys", "perf", "minio"}
        assert data["version"] == "2"
        assert data["timestamp"].startswith("0001-01-01T00:00:00")
        assert data["sys"] == {}
        assert data["perf"] == {"net_parallel": {"addr": ""}}
        assert data["minio"] == {
            "config": {},
            "info": {
                "buckets": {"count": 0},
                "objects": {"count": 0},
                "usage": {"size": 0},
                "services": {},
            },
        }

    def test_empty_v0(self):
        data = HealthInfoV0().to_dict()
        assert set(data) == {"timestamp", "sys"}
        assert data["sys"] == {}

    def test_error_is_written_when_set(self):
        assert HealthInfoV2(error="disk read timeout").to_dict()["error"] == "disk read timeout"


class TestPerfRecords:
    def test_summaries_always_written(self):
        assert Latency().to_dict() == ZERO_SUMMARY
        assert Throughput().to_dict() == ZERO_SUMMARY

    def test_drive_without_error(self):
        assert DrivePerfInfo(path="/mnt/drive1").to_dict() == {
            "path": "/mnt/drive1",
            "latency": ZERO_SUMMARY,
            "throughput": ZERO_SUMMARY,
        }

    def test_empty_lists_dropped(self):
        data = PerfInfo(net=[NetPerfInfo(addr="node1:9000")]).to_dict()
        assert "drives" not in data
        assert data["net"] == [{"addr": "node1:9000"}]


class TestSysProcess:
    def test_only_pid_for_zero_process(self):
        assert SysProcess().to_dict() == {"pid": 0}

    def test_wire_keys(self):
        proc = SysProcess(
            pid=7,
            cpu_percent=12.5,
            cmd_line="minio server /data",
            create_time=1650000000,
            is_running=True,
            mem_percent=3.5,
            num_fds=120,
            num_threads=32,
            children=[8, 9],
        )
        assert proc.to_dict() == {
            "pid": 7,
            "cpupercent": 12.5,
            "children": [8, 9],
            "cmd": "minio server /data",
            "createtime": 1650000000,
            "isrunning": True,
            "mempercent": 3.5,
            "numfds": 120,
            "numthreads": 32,
        }

    def test_populate_by_wire_key(self):
        proc = SysProcess.from_dict({"pid": 3, "numthreads": 4, "username": "minio-user"})
        assert proc.num_threads == 4
        assert proc.get_owner() == "minio-user"


class TestNullableFields:
    def test_nil_record_dropped(self):
        assert ServerMemInfo(addr="node1:9000").to_dict() == {"addr": "node1:9000"}

    def test_zero_record_written(self):
        data = ServerMemInfo(addr="node1:9000", swap_mem=SwapMemoryStat()).to_dict()
        assert data["swap"]["total"] == 0
        assert "virtualmem" not in data

    def test_false_pointer_written(self):
        assert CPUs(addr="node1:9000", is_freq_gov_perf=False).to_dict() == {
            "addr": "node1:9000",
            "is_freq_gov_perf": False,
        }

    def test_opaque_config(self):
        assert "config" not in MinioHealthInfoV0().to_dict()
        assert MinioHealthInfoV0(config={}).to_dict()["config"] == {}
        assert MinioHealthInfoV0(config=0).to_dict()["config"] == 0


class TestJsonSchema:
    def test_omit_markers_not_in_schema(self):
        for model in (SysProcess, ServerMemInfo, CPUs, HealthInfoV2):
            schema = json.dumps(model.model_json_schema(by_alias=True))
            assert "omitempty" not in schema
            assert "omitnil" not in schema

    def test_omission_unaffected(self):
        schema = SysProcess.model_json_schema(by_alias=True)
        assert "username" in schema["properties"]
        assert SysProcess(pid=7).to_dict() == {"pid": 7}


class TestHostStats:
    def test_camel_case_keys(self):
        data = HostInfoStat(hostname="node1", platform_family="debian", boot_time=1650000000).to_dict()
        assert data["platformFamily"] == "debian"
        assert data["bootTime"] == 1650000000
        assert data["hostId"] == ""

    def test_explicit_alias(self):
        assert IOCountersStat(weighted_io=5).to_dict()["weightedIO"] == 5

    def test_nested_record_never_dropped(self):
        assert ServerOsInfo(addr="node1:9000").to_dict()["info"]["hostname"] == ""

    def test_null_decodes_to_zero(self):
        assert CPUInfoStat.from_json('{"flags": null, "cores": 8}').flags == []
