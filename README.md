# slimtools

A small set of desktop helpers for Linux and other POSIX systems:

- **slstatus** builds a one-line status text from components such as the
  date and time, CPU and memory usage, battery state, disk space, network
  speed and more, and writes it out once or at a fixed interval.
- **stest** filters a list of paths by file properties (directory, regular
  file, executable, hidden, newer or older than another file, and so on).
- `slimtools.menu` holds the matching and line-editing logic of an
  incremental menu: exact matches first, then prefix matches, then
  substring matches.

## Installation

```
pip install slimtools
```

## slstatus

```
slstatus         # set the X root window name every second (through xsetroot)
slstatus -s      # write the status line to standard output every second
slstatus -1      # write the status line to standard output once and exit
slstatus -v      # print the version to standard error and exit
```

Without `-s` or `-1` the status is handed to the `xsetroot` program, which
must be on the `PATH`; on exit the root window name is cleared. `SIGINT` and
`SIGTERM` stop the loop, `SIGUSR1` forces an immediate refresh.

The command shows the local date and time (`%F %T`). Components that cannot
report a value are shown as `n/a`. To build your own line, use
`slimtools.slstatus.Component` (a function, a `%`-style format and an
argument) with `render_status` and `run`:

```python
import sys
from slimtools.slstatus import Component, run
from slimtools.components.system import datetime, load_avg
from slimtools.components.memory import ram_perc

run(
    [
        Component(datetime, "%s ", "%H:%M"),
        Component(load_avg, "[%s] "),
        Component(ram_perc, "ram %s%%"),
    ],
    interval=2000,
    out=sys.stdout,
)
```

Available components, each returning a string or `None`:

| Module | Functions |
| --- | --- |
| `slimtools.components.system` | `datetime`, `hostname`, `kernel_release`, `load_avg`, `uptime`, `gid`, `uid`, `username` |
| `slimtools.components.files` | `cat`, `num_files`, `run_command`, `temp`, `entropy` |
| `slimtools.components.disk` | `disk_free`, `disk_perc`, `disk_total`, `disk_used` |
| `slimtools.components.battery` | `battery_perc`, `battery_state`, `battery_remaining` |
| `slimtools.components.cpu` | `cpu_freq`, `cpu_perc` (and the `CpuUsage` sampler) |
| `slimtools.components.memory` | `ram_free`, `ram_perc`, `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`, `swap_used` |
| `slimtools.components.netspeeds` | `netspeed_rx`, `netspeed_tx` (and the `NetSpeed` sampler) |
| `slimtools.components.network` | `ipv4`, `ipv6` |
| `slimtools.components.volume` | `vol_perc` (OSS mixer device such as `/dev/mixer`) |
| `slimtools.components.wifi` | `wifi_perc`, `wifi_essid` |

Battery, CPU, memory, network speed, entropy and WiFi readers use the Linux
`/sys` and `/proc` files. `cpu_perc`, `netspeed_rx` and `netspeed_tx` report
`None` on their first call, since they need two samples.

## stest

```
ls /usr/bin | stest -x          # names that are executable
stest -d -l /home               # directories inside /home
stest -f -n reference.txt *.log # regular files newer than reference.txt
stest -q -e somefile && echo present
```

Flags: `-a` include hidden files, `-b` block special, `-c` character
special, `-d` directory, `-e` exists, `-f` regular file, `-g` set-group-id,
`-h` symbolic link, `-l` test the contents of the named directories,
`-n file` newer than file, `-o file` older than file, `-p` named pipe,
`-q` quiet (exit on the first match without printing), `-r` readable,
`-s` not empty, `-u` set-user-id, `-v` invert, `-w` writable,
`-x` executable. With no file operands, paths are read from standard input,
one per line.

The exit status is 0 when something matched, 1 when nothing did and 2 on a
usage error.

## Menu matching

```python
from slimtools.menu import Menu, match_items

match_items(["foo", "foobar", "barfoo"], "foo")   # ['foo', 'foobar', 'barfoo']

menu = Menu(["firefox", "files", "terminal"])
menu.insert("fi")
menu.select_next()
menu.accept(False)                                  # 'files'
```

`Menu` also offers `backspace`, `delete`, `delete_to_end`, `delete_to_start`,
`delete_word`, `move_word_edge`, `move_left`, `move_right`, `select_first`,
`select_last`, `select_previous` and `complete`; `read_items` reads items
from a stream, one per line. Pass `case_insensitive=True` for matching that
ignores case.

## What is not included

There is no menu command and no menu window: `slimtools.menu` is only the
matching and editing model, with no drawing, keyboard handling or display
connection. Likewise slstatus does not talk to an X display itself; it relies
on `xsetroot` or writes to standard output.

## Running the tests

```
pip install slimtools[test]
pytest
```