"""Network throughput components based on interface byte counters."""

from __future__ import annotations

import os
import re
from typing import Optional

from slimtools.util import fmt_human, read_first_line, warn

NET_CLASS = "/sys/class/net"
DEFAULT_INTERVAL = 1000  # milliseconds between status updates

_DIRECTIONS = {"rx": "rx_bytes", "tx": "tx_bytes"}
_UINT = re.compile(r"\s*(\d+)")
_COUNTER_WRAP = 2**64


class NetSpeed:
    """Computes bytes per second for one direction from successive samples."""

    def __init__(
        self,
        direction: str,
        interval: int = DEFAULT_INTERVAL,
        root: str = NET_CLASS,
    ) -> None:
        try:
            self._counter = _DIRECTIONS[direction]
        except KeyError:
            raise ValueError(f"direction must be 'rx' or 'tx', not {direction!r}") from None
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.direction = direction
        self.interval = interval
        self.root = root
        self._bytes = 0

    def _read(self, interface: str) -> Optional[int]:
        path = os.path.join(self.root, interface, "statistics", self._counter)
        try:
            line = read_first_line(path)
        except OSError as err:
            warn(f"fopen '{path}': {err.strerror}")
            return None
        found = _UINT.match(line)
        return int(found.group(1)) if found else None

    def sample(self, interface: str) -> Optional[str]:
        """Return the rate since the previous sample, or None if unknown."""
        previous = self._bytes
        current = self._read(interface)
        if current is None:
            return None
        self._bytes = current
        if previous == 0:
            return None
        delta = (current - previous) % _COUNTER_WRAP
        return fmt_human(delta * 1000 // self.interval, 1024)


_rx = NetSpeed("rx")
_tx = NetSpeed("tx")


def netspeed_rx(interface: str) -> Optional[str]:
    """Return the receive rate of *interface*."""
    return _rx.sample(interface)


def netspeed_tx(interface: str) -> Optional[str]:
    """Return the transmit rate of *interface*."""
    return _tx.sample(interface)