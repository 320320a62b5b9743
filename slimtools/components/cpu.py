"""CPU frequency and utilisation components."""

from __future__ import annotations

import re
from typing import List, Optional

from slimtools.util import fmt_human, read_first_line, warn

CPU_FREQ = "/sys/devices/system/cpu/cpu0/cpufreq/scaling_cur_freq"
PROC_STAT = "/proc/stat"

_UINT = re.compile(r"\s*(\d+)")


class CpuUsage:
    """Tracks /proc/stat counters between samples to compute CPU usage."""

    def __init__(self, stat_path: str = PROC_STAT) -> None:
        self.stat_path = stat_path
        self._previous: Optional[List[float]] = None

    def _read(self) -> Optional[List[float]]:
        try:
            line = read_first_line(self.stat_path)
        except OSError as err:
            warn(f"fopen '{self.stat_path}': {err.strerror}")
            return None
        fields = line.split()[1:8]
        if len(fields) != 7:
            return None
        try:
            return [float(field) for field in fields]
        except ValueError:
            return None

    def sample(self) -> Optional[str]:
        """Return usage in percent since the last sample, or None on the first."""
        current = self._read()
        if current is None:
            return None
        previous, self._previous = self._previous, current
        if previous is None or previous[0] == 0:
            return None

        total = sum(previous) - sum(current)
        if total == 0:
            return None
        busy = [0, 1, 2, 5, 6]
        used = sum(previous[i] for i in busy) - sum(current[i] for i in busy)
        return str(int(100 * used / total))


_default_usage = CpuUsage()


def cpu_freq(unused: Optional[str] = None, path: str = CPU_FREQ) -> Optional[str]:
    """Return the current frequency of the first CPU."""
    try:
        line = read_first_line(path)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None
    found = _UINT.match(line)
    if not found:
        return None
    # the kernel reports kHz
    return fmt_human(int(found.group(1)) * 1000, 1000)


def cpu_perc(unused: Optional[str] = None) -> Optional[str]:
    """Return the CPU usage in percent since the previous call."""
    return _default_usage.sample()