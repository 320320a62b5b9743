"""Battery components reading the Linux power-supply class."""

from __future__ import annotations

import os
import re
from typing import Optional

from slimtools.util import read_first_line, warn

POWER_SUPPLY = "/sys/class/power_supply"

_STATE_SYMBOLS = {
    "Charging": "+",
    "Discharging": "-",
    "Full": "o",
    "Not charging": "o",
}

_UINT = re.compile(r"\s*(\d+)")
_STATE = re.compile(r"[a-zA-Z ]{1,12}")


def _read(path: str) -> Optional[str]:
    try:
        return read_first_line(path)
    except OSError as err:
        warn(f"fopen '{path}': {err.strerror}")
        return None


def _read_uint(path: str) -> Optional[int]:
    line = _read(path)
    if line is None:
        return None
    found = _UINT.match(line)
    return int(found.group(1)) if found else None


def _read_state(bat: str, root: str) -> Optional[str]:
    line = _read(os.path.join(root, bat, "status"))
    if line is None:
        return None
    found = _STATE.match(line)
    return found.group(0) if found else None


def _pick(bat: str, root: str, *names: str) -> Optional[str]:
    for name in names:
        path = os.path.join(root, bat, name)
        if os.access(path, os.R_OK):
            return path
    return None


def battery_perc(bat: str, root: str = POWER_SUPPLY) -> Optional[str]:
    """Return the battery capacity in percent."""
    capacity = _read_uint(os.path.join(root, bat, "capacity"))
    return None if capacity is None else str(capacity)


def battery_state(bat: str, root: str = POWER_SUPPLY) -> Optional[str]:
    """Return ``+`` when charging, ``-`` when discharging, ``o`` when full."""
    state = _read_state(bat, root)
    if state is None:
        return None
    return _STATE_SYMBOLS.get(state, "?")


def battery_remaining(bat: str, root: str = POWER_SUPPLY) -> Optional[str]:
    """Return the remaining time while discharging, else an empty string."""
    state = _read_state(bat, root)
    if state is None:
        return None

    charge_path = _pick(bat, root, "charge_now", "energy_now")
    if charge_path is None:
        return None
    charge_now = _read_uint(charge_path)
    if charge_now is None:
        return None

    if state != "Discharging":
        return ""

    rate_path = _pick(bat, root, "current_now", "power_now")
    if rate_path is None:
        return None
    current_now = _read_uint(rate_path)
    if not current_now:
        return None

    timeleft = charge_now / current_now
    hours = int(timeleft)
    minutes = int((timeleft - hours) * 60)
    return f"{hours}h {minutes}m"