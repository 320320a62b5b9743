"""Components that read files, directories or command output."""

from __future__ import annotations

import os
import re
import subprocess
from typing import Optional

from slimtools.util import read_first_line, warn

ENTROPY_AVAIL = "/proc/sys/kernel/random/entropy_avail"

_UINT = re.compile(r"\s*(\d+)")


def _scan_uint(path: str) -> Optional[int]:
    try:
        line = read_first_line(path)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None
    found = _UINT.match(line)
    return int(found.group(1)) if found else None


def cat(path: str) -> Optional[str]:
    """Return the first line of a file, or None if unreadable or empty."""
    try:
        line = read_first_line(path)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None
    return line or None


def num_files(path: str) -> Optional[str]:
    """Return the number of entries in a directory."""
    try:
        entries = os.listdir(path)
    except OSError as err:
        warn(f"opendir '{path}': {err.strerror}")
        return None
    return str(len(entries))


def run_command(cmd: str) -> Optional[str]:
    """Run a shell command and return the first line of its output."""
    try:
        result = subprocess.run(
            cmd, shell=True, stdout=subprocess.PIPE, text=True, errors="replace"
        )
    except OSError as err:
        warn(f"popen '{cmd}': {err.strerror}")
        return None
    line = result.stdout.partition("\n")[0]
    return line or None


def temp(file: str) -> Optional[str]:
    """Return the temperature in degrees Celsius from a millidegree sensor file."""
    value = _scan_uint(file)
    if value is None:
        return None
    return str(value // 1000)


def entropy(unused: Optional[str] = None, path: str = ENTROPY_AVAIL) -> Optional[str]:
    """Return the available kernel entropy."""
    value = _scan_uint(path)
    return None if value is None else str(value)