"""Volume component reading an OSS mixer device."""

from __future__ import annotations

import fcntl
import os
import struct
from typing import Optional

from slimtools.util import warn

_IOC_READ = 2
_INT_SIZE = struct.calcsize("i")
# index of the master "vol" channel among the OSS mixer devices
_VOL_CHANNEL = 0


def _ior(kind: str, number: int, size: int) -> int:
    return (_IOC_READ << 30) | (size << 16) | (ord(kind) << 8) | number


SOUND_MIXER_READ_DEVMASK = _ior("M", 0xFE, _INT_SIZE)


def _mixer_read(channel: int) -> int:
    return _ior("M", channel, _INT_SIZE)


def volume_from_level(level: int) -> int:
    """Return the left-channel volume encoded in an OSS mixer level."""
    return level & 0xFF


def _ioctl_int(fd: int, request: int) -> int:
    result = fcntl.ioctl(fd, request, struct.pack("i", 0))
    return struct.unpack("i", result)[0]


def vol_perc(card: str) -> Optional[str]:
    """Return the master volume of the mixer device *card* in percent."""
    try:
        fd = os.open(card, os.O_RDONLY | os.O_NONBLOCK)
    except OSError as err:
        warn(f"open '{card}': {err.strerror}")
        return None
    try:
        try:
            devmask = _ioctl_int(fd, SOUND_MIXER_READ_DEVMASK)
        except OSError as err:
            warn(f"ioctl 'SOUND_MIXER_READ_DEVMASK': {err.strerror}")
            return None
        if not devmask & (1 << _VOL_CHANNEL):
            return None
        try:
            level = _ioctl_int(fd, _mixer_read(_VOL_CHANNEL))
        except OSError as err:
            warn(f"ioctl 'MIXER_READ({_VOL_CHANNEL})': {err.strerror}")
            return None
    finally:
        os.close(fd)
    return str(volume_from_level(level))