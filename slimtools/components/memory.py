"""RAM and swap components reading /proc/meminfo."""

from __future__ import annotations

from typing import Dict, Optional

from slimtools.util import fmt_human, warn

MEMINFO = "/proc/meminfo"


def read_meminfo(path: str = MEMINFO) -> Dict[str, int]:
    """Parse a meminfo file into a mapping of field name to value in kB."""
    fields: Dict[str, int] = {}
    with open(path, encoding="utf-8", errors="replace") as handle:
        for line in handle:
            name, sep, rest = line.partition(":")
            if not sep:
                continue
            parts = rest.split()
            if not parts:
                continue
            try:
                fields[name.strip()] = int(parts[0])
            except ValueError:
                continue
    return fields


def _fields(path: str, *names: str) -> Optional[Dict[str, int]]:
    try:
        info = read_meminfo(path)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None
    if any(name not in info for name in names):
        return None
    return info


_RAM = ("MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached")
_SWAP = ("SwapTotal", "SwapFree", "SwapCached")


def ram_free(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the memory available for new work."""
    info = _fields(path, "MemAvailable")
    if info is None:
        return None
    return fmt_human(info["MemAvailable"] * 1024, 1024)


def ram_perc(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the memory in use, excluding buffers and cache, in percent."""
    info = _fields(path, *_RAM)
    if info is None or info["MemTotal"] == 0:
        return None
    total = info["MemTotal"]
    used = (total - info["MemFree"]) - (info["Buffers"] + info["Cached"])
    return str(100 * used // total)


def ram_total(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the total memory size."""
    info = _fields(path, "MemTotal")
    if info is None:
        return None
    return fmt_human(info["MemTotal"] * 1024, 1024)


def ram_used(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the memory in use, excluding buffers and cache."""
    info = _fields(path, *_RAM)
    if info is None:
        return None
    used = info["MemTotal"] - info["MemFree"] - info["Buffers"] - info["Cached"]
    return fmt_human(used * 1024, 1024)


def swap_free(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the free swap space."""
    info = _fields(path, "SwapFree")
    if info is None:
        return None
    return fmt_human(info["SwapFree"] * 1024, 1024)


def swap_perc(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the swap in use, excluding swap cache, in percent."""
    info = _fields(path, *_SWAP)
    if info is None or info["SwapTotal"] == 0:
        return None
    total = info["SwapTotal"]
    used = total - info["SwapFree"] - info["SwapCached"]
    return str(100 * used // total)


def swap_total(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the total swap size."""
    info = _fields(path, "SwapTotal")
    if info is None:
        return None
    return fmt_human(info["SwapTotal"] * 1024, 1024)


def swap_used(unused: Optional[str] = None, path: str = MEMINFO) -> Optional[str]:
    """Return the swap in use, excluding swap cache."""
    info = _fields(path, *_SWAP)
    if info is None:
        return None
    used = info["SwapTotal"] - info["SwapFree"] - info["SwapCached"]
    return fmt_human(used * 1024, 1024)