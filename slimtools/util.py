"""Shared helpers: human-readable sizes, diagnostics and small file reads."""

from __future__ import annotations

import sys

_PREFIXES = {
    1000: ("", "k", "M", "G", "T", "P", "E", "Z", "Y"),
    1024: ("", "Ki", "Mi", "Gi", "Ti", "Pi", "Ei", "Zi", "Yi"),
}


def fmt_human(num: float, base: int) -> str:
    """Format *num* with one decimal and an SI (1000) or IEC (1024) prefix."""
    try:
        prefixes = _PREFIXES[base]
    except KeyError:
        raise ValueError(f"fmt_human: invalid base {base!r}") from None

    scaled = float(num)
    index = 0
    while index < len(prefixes) - 1 and scaled >= base:
        scaled /= base
        index += 1
    return f"{scaled:.1f} {prefixes[index]}"


def warn(message: str) -> None:
    """Write a diagnostic line to standard error."""
    print(message, file=sys.stderr)


def die(message: str) -> None:
    """Report *message* on standard error and exit with status 1."""
    warn(message)
    raise SystemExit(1)


def read_first_line(path: str) -> str:
    """Return the first line of *path* without its trailing newline.

    An empty file yields an empty string; OSError propagates.
    """
    with open(path, encoding="utf-8", errors="replace") as handle:
        line = handle.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line