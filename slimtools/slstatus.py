"""Status line generator: renders components to stdout or the X root window name."""

from __future__ import annotations

import shutil
import signal
import subprocess
import sys
import threading
import time
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, TextIO, Tuple

from slimtools.components.system import datetime
from slimtools.util import die, warn

VERSION = "1.0"
PROGRAM = "slstatus"

INTERVAL = 1000  # milliseconds between updates
UNKNOWN_STR = "n/a"
MAXLEN = 2048


@dataclass(frozen=True)
class Component:
    """One status item: a function, a printf-style format and its argument."""

    func: Callable[[Optional[str]], Optional[str]]
    fmt: str = "%s"
    arg: Optional[str] = None


@dataclass(frozen=True)
class Options:
    """Command-line options."""

    stdout: bool = False
    once: bool = False


COMPONENTS: Tuple[Component, ...] = (Component(datetime, "%s", "%F %T"),)


def _usage() -> None:
    die(f"usage: {PROGRAM} [-v] [-s] [-1]")


def parse_args(argv: Sequence[str]) -> Options:
    """Parse options (program name excluded); exits on -v or bad usage."""
    args = list(argv)
    stdout = once = False
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("-") or len(arg) < 2:
            break
        index += 1
        if arg == "--":
            break
        for flag in arg[1:]:
            if flag == "v":
                die(f"{PROGRAM}-{VERSION}")
            elif flag == "1":
                once = stdout = True
            elif flag == "s":
                stdout = True
            else:
                _usage()
    if index < len(args):
        _usage()
    return Options(stdout=stdout, once=once)


def render_status(
    components: Iterable[Component],
    unknown: str = UNKNOWN_STR,
    maxlen: int = MAXLEN,
) -> str:
    """Render all components into one line, stopping before it would overflow."""
    parts: List[str] = []
    length = 0
    for component in components:
        value = component.func(component.arg)
        if value is None:
            value = unknown
        try:
            piece = component.fmt % value
        except (TypeError, ValueError) as err:
            warn(f"vsnprintf: {err}")
            break
        if len(piece) >= maxlen - length:
            warn("vsnprintf: Output truncated")
            break
        parts.append(piece)
        length += len(piece)
    return "".join(parts)


def _set_root_name(name: str) -> None:
    try:
        subprocess.run(["xsetroot", "-name", name], check=False)
    except OSError as err:
        die(f"xsetroot: {err.strerror}")


def _emit(status: str, out: Optional[TextIO]) -> None:
    if out is None:
        _set_root_name(status)
        return
    try:
        print(status, file=out)
        out.flush()
    except OSError as err:
        die(f"puts: {err.strerror}")


def _install_signals(done: threading.Event, wake: threading.Event) -> dict:
    if threading.current_thread() is not threading.main_thread():
        return {}

    def terminate(signum, frame):
        done.set()
        wake.set()

    def refresh(signum, frame):
        wake.set()

    previous = {}
    for signum, handler in (
        (signal.SIGINT, terminate),
        (signal.SIGTERM, terminate),
        (signal.SIGUSR1, refresh),
    ):
        previous[signum] = signal.signal(signum, handler)
    return previous


def run(
    components: Sequence[Component] = COMPONENTS,
    interval: int = INTERVAL,
    once: bool = False,
    out: Optional[TextIO] = None,
) -> None:
    """Render the status every *interval* ms to *out*, or the root window if None."""
    if out is None and shutil.which("xsetroot") is None:
        die("XOpenDisplay: Failed to open display")

    done = threading.Event()
    wake = threading.Event()
    if once:
        done.set()
    previous = {} if once else _install_signals(done, wake)
    try:
        while True:
            start = time.monotonic()
            _emit(render_status(components), out)
            if done.is_set():
                break
            remaining = interval / 1000 - (time.monotonic() - start)
            if remaining >= 0:
                wake.wait(remaining)
                wake.clear()
            if done.is_set():
                break
    finally:
        for signum, handler in previous.items():
            signal.signal(signum, handler)

    if out is None:
        _set_root_name("")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    options = parse_args(sys.argv[1:] if argv is None else argv)
    run(COMPONENTS, INTERVAL, options.once, sys.stdout if options.stdout else None)
    return 0