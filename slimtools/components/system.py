"""Components describing the running system and user."""

from __future__ import annotations

import os
import pwd
import socket
import time
from typing import Optional

from slimtools.util import warn

_MAX_LEN = 1024


def datetime(fmt: str) -> Optional[str]:
    """Return the local time formatted with strftime *fmt*."""
    result = time.strftime(fmt, time.localtime())
    if not result or len(result) >= _MAX_LEN:
        warn("strftime: Result string exceeds buffer size")
        return None
    return result


def hostname(unused: Optional[str] = None) -> Optional[str]:
    """Return the host name."""
    try:
        return socket.gethostname()
    except OSError as err:
        warn(f"gethostname: {err.strerror}")
        return None


def kernel_release(unused: Optional[str] = None) -> Optional[str]:
    """Return the kernel release, as ``uname -r`` prints it."""
    try:
        return os.uname().release
    except OSError as err:
        warn(f"uname: {err.strerror}")
        return None


def load_avg(unused: Optional[str] = None) -> Optional[str]:
    """Return the 1, 5 and 15 minute load averages."""
    try:
        one, five, fifteen = os.getloadavg()
    except OSError:
        warn("getloadavg: Failed to obtain load average")
        return None
    return f"{one:.2f} {five:.2f} {fifteen:.2f}"


def format_uptime(seconds: float) -> str:
    """Format a duration in seconds as ``<hours>h <minutes>m``."""
    total = int(seconds)
    return f"{total // 3600}h {total % 3600 // 60}m"


def uptime(unused: Optional[str] = None) -> Optional[str]:
    """Return the system uptime in hours and minutes."""
    clock = getattr(time, "CLOCK_BOOTTIME", None)
    if clock is None:
        clock = getattr(time, "CLOCK_UPTIME", time.CLOCK_MONOTONIC)
    try:
        seconds = time.clock_gettime(clock)
    except OSError:
        warn(f"clock_gettime {clock}")
        return None
    return format_uptime(seconds)


def gid(unused: Optional[str] = None) -> str:
    """Return the real group id of the current process."""
    return str(os.getgid())


def uid(unused: Optional[str] = None) -> str:
    """Return the effective user id of the current process."""
    return str(os.geteuid())


def username(unused: Optional[str] = None) -> Optional[str]:
    """Return the name of the effective user."""
    euid = os.geteuid()
    try:
        return pwd.getpwuid(euid).pw_name
    except KeyError:
        warn(f"getpwuid '{euid}': no such user")
        return None