"""Filter a list of files by properties, printing those that pass."""

from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional, Sequence, TextIO, Tuple

PROGRAM = "stest"
SIMPLE_FLAGS = "abcdefghlpqrsuvwx"
PATH_MAX = 4096
USAGE = f"usage: {PROGRAM} [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"


@dataclass(frozen=True)
class Options:
    """Selected tests; *newer*/*older* hold reference mtimes in seconds."""

    flags: FrozenSet[str] = frozenset()
    newer: Optional[int] = None
    older: Optional[int] = None


class UsageError(SystemExit):
    """Bad command line; exits with status 2 like test(1)."""

    def __init__(self) -> None:
        super().__init__(2)
        self.message = USAGE


def _usage_error() -> UsageError:
    error = UsageError()
    print(error.message, file=sys.stderr)
    return error


def _reference_mtime(path: str) -> Optional[int]:
    try:
        return int(os.stat(path).st_mtime)
    except OSError as err:
        print(f"{path}: {err.strerror}", file=sys.stderr)
        return None


def parse_args(argv: Sequence[str]) -> Tuple[Options, List[str]]:
    """Parse options (program name excluded); return them with the file operands."""
    args = list(argv)
    flags = set()
    newer = older = None
    index = 0
    while index < len(args):
        arg = args[index]
        if not arg.startswith("-") or len(arg) < 2:
            break
        if arg == "--":
            index += 1
            break
        for pos in range(1, len(arg)):
            flag = arg[pos]
            if flag in "no":
                rest = arg[pos + 1:]
                if rest:
                    value = rest
                elif index + 1 < len(args):
                    index += 1
                    value = args[index]
                else:
                    raise _usage_error()
                mtime = _reference_mtime(value)
                if flag == "n":
                    newer = mtime
                else:
                    older = mtime
                break
            if flag in SIMPLE_FLAGS:
                flags.add(flag)
            else:
                raise _usage_error()
        index += 1
    return Options(frozenset(flags), newer, older), args[index:]


def _passes(path: str, name: str, options: Options) -> bool:
    flags = options.flags
    try:
        st = os.stat(path)
    except OSError:
        return False
    mode = st.st_mode

    def is_link() -> bool:
        try:
            return stat.S_ISLNK(os.lstat(path).st_mode)
        except OSError:
            return False

    checks = (
        ("b", lambda: stat.S_ISBLK(mode)),
        ("c", lambda: stat.S_ISCHR(mode)),
        ("d", lambda: stat.S_ISDIR(mode)),
        ("e", lambda: os.access(path, os.F_OK)),
        ("f", lambda: stat.S_ISREG(mode)),
        ("g", lambda: bool(mode & stat.S_ISGID)),
        ("h", is_link),
        ("p", lambda: stat.S_ISFIFO(mode)),
        ("r", lambda: os.access(path, os.R_OK)),
        ("s", lambda: st.st_size > 0),
        ("u", lambda: bool(mode & stat.S_ISUID)),
        ("w", lambda: os.access(path, os.W_OK)),
        ("x", lambda: os.access(path, os.X_OK)),
    )
    if "a" not in flags and name.startswith("."):
        return False
    if options.newer is not None and not int(st.st_mtime) > options.newer:
        return False
    if options.older is not None and not int(st.st_mtime) < options.older:
        return False
    return all(check() for flag, check in checks if flag in flags)


def matches(path: str, name: str, options: Options) -> bool:
    """Return True when *path* passes every selected test (inverted by -v)."""
    return _passes(path, name, options) != ("v" in options.flags)


class _Quit(Exception):
    pass


def run(
    options: Options,
    paths: Sequence[str],
    stdin: Optional[Iterable[str]] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Print matching names; return 0 if anything matched, else 1."""
    out = sys.stdout if stdout is None else stdout
    found = False

    def test(path: str, name: str) -> None:
        nonlocal found
        if matches(path, name, options):
            if "q" in options.flags:
                raise _Quit
            found = True
            print(name, file=out)

    try:
        if not paths:
            for line in sys.stdin if stdin is None else stdin:
                if line.endswith("\n"):
                    line = line[:-1]
                test(line, line)
        else:
            for path in paths:
                entries = None
                if "l" in options.flags:
                    try:
                        entries = [".", ".."] + os.listdir(path)
                    except OSError:
                        entries = None
                if entries is None:
                    test(path, path)
                    continue
                for entry in entries:
                    full = f"{path}/{entry}"
                    if len(full) < PATH_MAX:
                        test(full, entry)
    except _Quit:
        return 0
    return 0 if found else 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command entry point."""
    options, paths = parse_args(sys.argv[1:] if argv is None else argv)
    return run(options, paths, sys.stdin, sys.stdout)