import pytest

from tlib.sysquery import (
    CpuUsageMonitor,
    GlobalMemoryInfo,
    PrivateMemoryInfo,
    bytes_to_mb,
    global_mem_info,
    kb_to_mb,
    process_cpu_usage,
    process_mem_usage,
)


@pytest.mark.parametrize("megabytes", [0, 1, 7, 4096])
def test_bytes_to_mb_whole_values(megabytes):
    assert bytes_to_mb(megabytes * 1024 * 1024) == megabytes


def test_bytes_to_mb_rounds_down():
    assert bytes_to_mb(1024 * 1024 - 1) == 0
    assert bytes_to_mb(3 * 1024 * 1024 + 5) == 3


@pytest.mark.parametrize("megabytes", [0, 2, 512])
def test_kb_to_mb_whole_values(megabytes):
    assert kb_to_mb(megabytes * 1024) == megabytes


def test_kb_to_mb_rounds_down():
    assert kb_to_mb(1023) == 0


def test_negative_values_rejected():
    with pytest.raises(ValueError):
        bytes_to_mb(-1)
    with pytest.raises(ValueError):
        kb_to_mb(-1)


def test_default_records_are_unsuccessful():
    assert GlobalMemoryInfo().success is False
    assert PrivateMemoryInfo().working_set_size == 0


def test_global_mem_info_consistent():
    info = global_mem_info()
    assert info.success is True
    assert info.total_physical > 0
    assert 0 <= info.avail_physical <= info.total_physical
    assert info.total_page_file >= info.total_physical


def test_process_mem_usage_reports_memory():
    info = process_mem_usage()
    assert info.success is True
    assert info.working_set_size > 0
    assert info.peak_working_set_size >= 0


def test_cpu_monitor_first_sample_is_zero():
    monitor = CpuUsageMonitor(0)
    assert monitor.usage() == 0


def test_cpu_monitor_value_in_range():
    monitor = CpuUsageMonitor(0)
    monitor.usage()
    total = 0
    for i in range(200000):
        total += i * i
    value = monitor.usage()
    assert 0 <= value <= 100


def test_cpu_monitor_caches_within_window():
    monitor = CpuUsageMonitor(10**9)
    first = monitor.usage()
    assert monitor.usage() == first == 0


def test_cpu_monitor_rejects_negative_cache():
    with pytest.raises(ValueError):
        CpuUsageMonitor(-1)


def test_process_cpu_usage_in_range():
    assert 0 <= process_cpu_usage() <= 100