"""IP address components."""

from __future__ import annotations

import socket
from typing import Optional

import psutil

from slimtools.util import warn


def _ip(interface: str, family: int) -> Optional[str]:
    try:
        addresses = psutil.net_if_addrs()
    except OSError as err:
        warn(f"getifaddrs: {err.strerror}")
        return None
    for entry in addresses.get(interface, ()):
        if entry.family == family and entry.address:
            return entry.address
    return None


def ipv4(interface: str) -> Optional[str]:
    """Return the first IPv4 address of *interface*."""
    return _ip(interface, socket.AF_INET)


def ipv6(interface: str) -> Optional[str]:
    """Return the first IPv6 address of *interface*."""
    return _ip(interface, socket.AF_INET6)