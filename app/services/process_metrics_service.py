from __future__ import annotations

import os
import platform
import resource
import sys
import time
from typing import Dict, Optional

_START_TIME = time.time()

_BYTES_PER_MB = 1024 * 1024


def _bytes_to_mb(value: int) -> float:
    return round(value / _BYTES_PER_MB, 2)


def format_uptime(seconds: float) -> str:
    """Render seconds as '{d}d {h}h {m}m {s}s'."""
    seconds = int(seconds)
    days, seconds = divmod(seconds, 86400)
    hours, seconds = divmod(seconds, 3600)
    minutes, seconds = divmod(seconds, 60)
    return f"{days}d {hours}h {minutes}m {seconds}s"


class ProcessMetricsService:
    """Uptime and memory figures for the current process."""

    def __init__(self, *, started_at: Optional[float] = None):
        self._started_at = _START_TIME if started_at is None else started_at

    def uptime_seconds(self) -> float:
        return round(time.time() - self._started_at, 3)

    def memory_usage(self) -> Dict[str, int]:
        """Resident and peak resident set size in bytes."""
        peak = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
        # Linux reports kilobytes, macOS reports bytes
        if sys.platform != 'darwin':
            peak *= 1024
        return {'rss': self._current_rss() or peak, 'maxRss': peak}

    def memory_summary(self) -> Dict[str, object]:
        usage = self.memory_usage()
        return {
            'used': _bytes_to_mb(usage['rss']),
            'total': _bytes_to_mb(usage['maxRss']),
            'unit': 'MB',
        }

    def server_info(self) -> Dict[str, object]:
        uptime = self.uptime_seconds()
        return {
            'pythonVersion': platform.python_version(),
            'platform': sys.platform,
            'architecture': platform.machine(),
            'pid': os.getpid(),
            'uptime': {
                'seconds': uptime,
                'human': format_uptime(uptime),
            },
        }

    @staticmethod
    def _current_rss() -> Optional[int]:
        try:
            with open('/proc/self/statm') as statm:
                resident_pages = int(statm.read().split()[1])
        except (OSError, ValueError, IndexError):
            return None
        return resident_pages * resource.getpagesize()
