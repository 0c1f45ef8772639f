"""
Performance Monitoring Utilities
===============================

Timing statistics for upstream source calls and a process resource
snapshot for the health endpoint.

Classes:
    PerformanceMonitor: Main performance monitoring interface
    TimingStats: Per-call-site latency summary
    ResourceUsage: Process resource usage snapshot

Functions:
    measure_time: Decorator for measuring function execution time
    get_performance_stats: Timing table for all measured functions
    get_resource_usage: Current process resource usage

Author: India Travel Info Team
"""

import time
import logging
import functools
import threading
from typing import Dict, Optional, Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from collections import deque
import psutil

from config import config


RECENT_WINDOW = 50


@dataclass
class TimingStats:
    """
    Latency summary for one measured call site, e.g. "weather.fetch"

    Attributes:
        name (str): Call site name
        calls (int): Completed calls
        slow_calls (int): Calls slower than the monitor's threshold
        total_seconds (float): Sum of all durations
        worst_seconds (float): Longest duration seen
        recent (deque): Last RECENT_WINDOW durations
        last_seen (datetime): Completion time of the latest call (UTC)
    """
    name: str
    calls: int = 0
    slow_calls: int = 0
    total_seconds: float = 0.0
    worst_seconds: float = 0.0
    recent: deque = field(default_factory=lambda: deque(maxlen=RECENT_WINDOW))
    last_seen: Optional[datetime] = None

    def record(self, seconds: float, slow: bool) -> None:
        self.calls += 1
        self.slow_calls += int(slow)
        self.total_seconds += seconds
        self.worst_seconds = max(self.worst_seconds, seconds)
        self.recent.append(seconds)
        self.last_seen = datetime.now(timezone.utc)

    def recent_p95(self) -> float:
        """95th percentile of the recent window (nearest rank)"""
        if not self.recent:
            return 0.0
        ordered = sorted(self.recent)
        rank = max(0, int(round(0.95 * len(ordered))) - 1)
        return ordered[rank]

    def to_dict(self) -> Dict:
        mean = self.total_seconds / self.calls if self.calls else 0.0
        return {
            "calls": self.calls,
            "slow_calls": self.slow_calls,
            "mean_ms": round(mean * 1000, 1),
            "recent_p95_ms": round(self.recent_p95() * 1000, 1),
            "worst_ms": round(self.worst_seconds * 1000, 1),
            "last_seen": self.last_seen.isoformat() if self.last_seen else None
        }


@dataclass
class ResourceUsage:
    """Process resource usage snapshot"""
    cpu_percent: float = 0.0
    rss_mb: float = 0.0
    threads: int = 0
    open_files: int = 0

    def to_dict(self) -> Dict:
        return {
            "cpu_percent": round(self.cpu_percent, 1),
            "rss_mb": round(self.rss_mb, 1),
            "threads": self.threads,
            "open_files": self.open_files
        }


class PerformanceMonitor:
    """
    Collects latency statistics for upstream calls

    A call slower than the threshold is counted and logged; with the default
    threshold that means it ran into the per-source timeout.
    """

    def __init__(self, slow_threshold: float = None):
        """
        Args:
            slow_threshold (float): Seconds after which a call counts as slow
                (defaults to the per-source timeout)
        """
        self.logger = logging.getLogger(__name__)

        self._stats: Dict[str, TimingStats] = {}
        self._lock = threading.Lock()

        self.slow_threshold = slow_threshold or config.SOURCE_TIMEOUT_SECONDS
        self.process = psutil.Process()

    def record_timing(self, name: str, seconds: float) -> None:
        slow = seconds > self.slow_threshold
        with self._lock:
            stats = self._stats.setdefault(name, TimingStats(name))
            stats.record(seconds, slow)

        if slow:
            self.logger.warning(f"Slow call: {name} took {seconds:.2f}s")

    def get_timing_stats(self, name: str = None) -> Dict:
        """Stats for one call site, or all of them keyed by name"""
        with self._lock:
            if name:
                stats = self._stats.get(name)
                return stats.to_dict() if stats else {}
            return {key: stats.to_dict() for key, stats in sorted(self._stats.items())}

    def get_resource_usage(self) -> ResourceUsage:
        try:
            with self.process.oneshot():
                return ResourceUsage(
                    cpu_percent=self.process.cpu_percent(),
                    rss_mb=self.process.memory_info().rss / (1024 * 1024),
                    threads=self.process.num_threads(),
                    open_files=len(self.process.open_files())
                )
        except psutil.Error as e:
            self.logger.warning(f"Error getting resource usage: {e}")
            return ResourceUsage()

    def reset_stats(self) -> None:
        with self._lock:
            self._stats.clear()
        self.logger.info("Performance statistics reset")


# Global performance monitor instance
_performance_monitor = PerformanceMonitor()


def measure_time(func: Callable = None, *, category: str = None) -> Callable:
    """
    Decorator recording the wall-clock duration of each call

    Calls are keyed "<category>.<function>" so loaders sharing a method
    name stay apart.

    Examples:
        @measure_time(category="weather")
        def fetch(self, city_name):
            ...
    """
    def decorator(f: Callable) -> Callable:
        name = f"{category}.{f.__name__}" if category else f.__name__

        @functools.wraps(f)
        def wrapper(*args, **kwargs):
            started = time.perf_counter()
            try:
                return f(*args, **kwargs)
            finally:
                _performance_monitor.record_timing(name, time.perf_counter() - started)

        return wrapper

    # Handle both @measure_time and @measure_time() usage
    if func is None:
        return decorator
    return decorator(func)


def get_performance_stats() -> Dict:
    """Timing table for every measured call site"""
    return _performance_monitor.get_timing_stats()


def get_resource_usage() -> Dict:
    """Current process resource usage"""
    return _performance_monitor.get_resource_usage().to_dict()


def reset_performance_stats() -> None:
    _performance_monitor.reset_stats()
