"""Memory and CPU usage queries for the whole system and the current process."""

import threading
import time
from dataclasses import dataclass

import psutil

__all__ = [
    "bytes_to_mb",
    "kb_to_mb",
    "GlobalMemoryInfo",
    "PrivateMemoryInfo",
    "global_mem_info",
    "process_mem_usage",
    "CpuUsageMonitor",
    "process_cpu_usage",
]


def bytes_to_mb(value):
    """Whole megabytes in ``value`` bytes, rounded down."""
    if value < 0:
        raise ValueError("byte count must not be negative")
    return int(value) >> 20


def kb_to_mb(value):
    """Whole megabytes in ``value`` kilobytes, rounded down."""
    if value < 0:
        raise ValueError("kilobyte count must not be negative")
    return int(value) >> 10


@dataclass
class GlobalMemoryInfo:
    """System-wide memory figures in bytes; ``success`` is False when unavailable."""

    success: bool = False
    total_physical: int = 0
    avail_physical: int = 0
    total_page_file: int = 0
    avail_page_file: int = 0
    total_virtual: int = 0
    avail_virtual: int = 0
    avail_extended_virtual: int = 0


@dataclass
class PrivateMemoryInfo:
    """Memory figures of the current process in bytes.

    ``working_set_size`` is the physical memory in use and ``private_usage``
    the virtual memory committed by the process.
    """

    success: bool = False
    page_fault_count: int = 0
    peak_working_set_size: int = 0
    working_set_size: int = 0
    quota_peak_paged_pool_usage: int = 0
    quota_paged_pool_usage: int = 0
    quota_peak_non_paged_pool_usage: int = 0
    quota_non_paged_pool_usage: int = 0
    pagefile_usage: int = 0
    peak_pagefile_usage: int = 0
    private_usage: int = 0


def global_mem_info():
    """Query system memory; returns an unsuccessful record when the query fails."""
    try:
        vm = psutil.virtual_memory()
        swap = psutil.swap_memory()
    except (psutil.Error, OSError):
        return GlobalMemoryInfo()
    commit_total = vm.total + swap.total
    commit_avail = vm.available + swap.free
    return GlobalMemoryInfo(
        success=True,
        total_physical=vm.total,
        avail_physical=vm.available,
        total_page_file=commit_total,
        avail_page_file=commit_avail,
        total_virtual=commit_total,
        avail_virtual=commit_avail,
        avail_extended_virtual=0,
    )


def process_mem_usage():
    """Query the current process's memory; unsuccessful record on failure."""
    try:
        info = psutil.Process().memory_info()
    except (psutil.Error, OSError):
        return PrivateMemoryInfo()
    working_set = getattr(info, "wset", info.rss)
    private = getattr(info, "private", info.vms)
    return PrivateMemoryInfo(
        success=True,
        page_fault_count=getattr(info, "num_page_faults", 0),
        peak_working_set_size=getattr(info, "peak_wset", working_set),
        working_set_size=working_set,
        quota_peak_paged_pool_usage=getattr(info, "peak_paged_pool", 0),
        quota_paged_pool_usage=getattr(info, "paged_pool", 0),
        quota_peak_non_paged_pool_usage=getattr(info, "peak_nonpaged_pool", 0),
        quota_non_paged_pool_usage=getattr(info, "nonpaged_pool", 0),
        pagefile_usage=getattr(info, "pagefile", private),
        peak_pagefile_usage=getattr(info, "peak_pagefile", private),
        private_usage=private,
    )


class CpuUsageMonitor:
    """Percentage of total CPU time spent by this process between samples.

    A new sample is taken at most once every ``cache_time_ms``; in between the
    last computed value is returned. The first sample only records a baseline
    and reports 0.
    """

    def __init__(self, cache_time_ms=200.0):
        if cache_time_ms < 0:
            raise ValueError("cache time must not be negative")
        self.cache_time_ms = cache_time_ms
        self._cpu_usage = 0
        self._prev_sys = None
        self._prev_proc = None
        self._last_sample = time.monotonic()
        self._lock = threading.Lock()
        self._process = psutil.Process()

    def usage(self):
        """Return the process CPU usage in percent as an integer."""
        if not self._lock.acquire(blocking=False):
            return self._cpu_usage
        try:
            elapsed_ms = (time.monotonic() - self._last_sample) * 1000.0
            if elapsed_ms < self.cache_time_ms:
                return self._cpu_usage
            try:
                sys_total = sum(psutil.cpu_times())
                proc_times = self._process.cpu_times()
            except (psutil.Error, OSError):
                return self._cpu_usage
            proc_total = proc_times.user + proc_times.system
            if self._prev_sys is not None:
                sys_diff = sys_total - self._prev_sys
                proc_diff = proc_total - self._prev_proc
                if sys_diff > 0:
                    self._cpu_usage = int(100.0 * proc_diff / sys_diff)
            self._prev_sys = sys_total
            self._prev_proc = proc_total
            self._last_sample = time.monotonic()
            return self._cpu_usage
        finally:
            self._lock.release()


_default_monitor = None
_default_lock = threading.Lock()


def process_cpu_usage():
    """CPU usage of the current process from a shared monitor."""
    global _default_monitor
    with _default_lock:
        if _default_monitor is None:
            _default_monitor = CpuUsageMonitor()
        monitor = _default_monitor
    return monitor.usage()