# hexinfo

hexinfo is a small full-screen terminal dashboard. It shows what your machine
is doing at a glance. The dashboard is drawn on top of a backdrop of
pseudo-random hex-dump lines.

The screen is split into boxes:

- **OS**: ASCII art for the detected distribution. The distribution is the
  `ID` read from `os-release`.
- **SYSTEM**: local time, uptime, `user@host`, and the kernel name, release
  and machine type.
- **RESOURCES**: memory and CPU usage. Each figure is green up to 60%, yellow
  above 60% and red above 80%.
- **CONNECTIVITY**:
  - the network interfaces that have an address, leaving out `lo`;
  - the local IP address;
  - the default gateway;
  - the first DNS server;
  - whether a VPN-style route (`tun`, `tap`, `vpn`) is present.
- **POWER**: the battery charge and state. When there is no battery it shows
  "AC Power Only" instead.

The figures are refreshed every second. The hex backdrop is redrawn every two
seconds.

## Installation

```
pip install .
```

hexinfo is made for Linux. It reads these files:

- `/proc/meminfo`
- `/proc/stat`
- `/proc/uptime`
- `/etc/resolv.conf`
- `/etc/os-release`, or `/usr/lib/os-release` if the first is missing
- `/etc/hostname`
- `/sys/class/power_supply/BAT0`

It finds routes by running the `ip` command, and lists interfaces with psutil.
Anything it cannot find is shown as `Unknown`.

## Usage

```
hexinfo
```

The command takes no arguments. If you give it any, it prints a usage line and
exits with status 1.

Keys:

| Key        | Action                               |
|------------|--------------------------------------|
| `q`, `Esc` | quit                                 |
| `r`        | leave the dashboard and reboot       |
| `s`        | leave the dashboard and shut down    |

The reboot and shutdown command lines are `REBOOT_CMD` and `SHUTDOWN_CMD` in
`hexinfo.config`. By default they use `doas`. Edit them to suit your system,
for example to use `sudo` or `systemctl`. If a command fails, hexinfo prints
the exit code and the command line, then exits with status 1.

Other settings in `hexinfo.config`:

- `REFRESH_INTERVAL`
- `HEX_REFRESH_INTERVAL`
- `BATTERY_PATH`

## Using the pieces

You can use the collectors and formatters on their own:

```python
from hexinfo.sysinfo import parse_meminfo, format_uptime, CpuMonitor
from hexinfo.hexdump import banner_line
from hexinfo.config import ascii_art_for

print(format_uptime(90061))          # "1d 1h 1m"
print(banner_line(80))
print("\n".join(ascii_art_for("arch")))
```

More of the pieces:

- `hexinfo.sysinfo.collect(cpu)` gathers a whole `SysInfo` snapshot.
- `hexinfo.canvas.Canvas` is an in-memory grid of cells.
- `hexinfo.screen.render(canvas, info, host)` draws the whole dashboard onto a
  `Canvas`. You can look at the result with `Canvas.text_rows()`, so you can
  check a layout without a terminal.

## Running the tests

```
pip install .[test]
pytest
```