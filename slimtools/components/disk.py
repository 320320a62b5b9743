"""Disk space components built on statvfs."""

from __future__ import annotations

import os
from typing import Optional

from slimtools.util import fmt_human, warn


def _statvfs(path: str) -> Optional[os.statvfs_result]:
    try:
        return os.statvfs(path)
    except OSError as err:
        warn(f"statvfs '{path}': {err.strerror}")
        return None


def disk_free(path: str) -> Optional[str]:
    """Return the space available to unprivileged users on *path*."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_bavail, 1024)


def disk_perc(path: str) -> Optional[str]:
    """Return the used share of *path* in percent."""
    fs = _statvfs(path)
    if fs is None or fs.f_blocks == 0:
        return None
    return str(int(100 * (1 - fs.f_bavail / fs.f_blocks)))


def disk_total(path: str) -> Optional[str]:
    """Return the total size of the file system holding *path*."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * fs.f_blocks, 1024)


def disk_used(path: str) -> Optional[str]:
    """Return the used space on the file system holding *path*."""
    fs = _statvfs(path)
    if fs is None:
        return None
    return fmt_human(fs.f_frsize * (fs.f_blocks - fs.f_bfree), 1024)