"""WiFi signal and ESSID components for Linux."""

from __future__ import annotations

import array
import fcntl
import os
import re
import socket
import struct
from typing import Optional

from slimtools.util import read_first_line, warn

NET_CLASS = "/sys/class/net"
PROC_WIRELESS = "/proc/net/wireless"

IFNAMSIZ = 16
IW_ESSID_MAX_SIZE = 32
SIOCGIWESSID = 0x8B1B
# link quality reported by /proc/net/wireless never exceeds this
_MAX_QUALITY = 70
_IWREQ_SIZE = 40

_QUALITY = re.compile(r"\s*[-+]?\d+\s+([-+]?\d+)")


def rssi_to_perc(rssi: int) -> int:
    """Map a signal strength in dBm to a percentage."""
    if rssi >= -50:
        return 100
    if rssi <= -100:
        return 0
    return 2 * (rssi + 100)


def parse_wireless(text: str, interface: str) -> Optional[str]:
    """Return the link quality of *interface* in percent from /proc/net/wireless text.

    Only the first data line (the third line of the file) is examined.
    """
    lines = text.splitlines()
    if len(lines) < 3:
        return None
    line = lines[2]
    index = line.find(interface)
    if index < 0:
        return None
    rest = line[index + len(interface) + 2:]
    found = _QUALITY.match(rest)
    if not found:
        return None
    quality = int(found.group(1))
    return str(int(quality / _MAX_QUALITY * 100))


def wifi_perc(interface: str, root: str = NET_CLASS) -> Optional[str]:
    """Return the link quality of a wireless interface that is up."""
    if len(interface) >= 4096:
        warn("esnprintf: Output truncated")
        return None
    path = os.path.join(root, interface, "operstate")
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            status = handle.readline(4)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None
    if status != "up\n":
        return None

    try:
        with open(PROC_WIRELESS, encoding="utf-8", errors="replace") as handle:
            text = "".join(handle.readline() for _ in range(3))
    except OSError as err:
        warn(f"fopen '{PROC_WIRELESS}': {err.strerror}")
        return None
    return parse_wireless(text, interface)


def wifi_essid(interface: str) -> Optional[str]:
    """Return the ESSID a wireless interface is associated with."""
    name = interface.encode()
    if len(name) >= IFNAMSIZ:
        warn("esnprintf: Output truncated")
        return None

    essid = array.array("B", bytes(IW_ESSID_MAX_SIZE + 1))
    address, _ = essid.buffer_info()
    request = bytearray(
        struct.pack("16sPHH", name, address, IW_ESSID_MAX_SIZE + 1, 0).ljust(
            _IWREQ_SIZE, b"\0"
        )
    )
    try:
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    except OSError as err:
        warn(f"socket 'AF_INET': {err.strerror}")
        return None
    with sock:
        try:
            fcntl.ioctl(sock.fileno(), SIOCGIWESSID, request)
        except OSError as err:
            warn(f"ioctl 'SIOCGIWESSID': {err.strerror}")
            return None

    value = essid.tobytes().split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return value or None


__all__ = ["rssi_to_perc", "parse_wireless", "wifi_perc", "wifi_essid", "read_first_line"]