"""Collection of the system facts shown on the dashboard."""

from __future__ import annotations

import re
import socket
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

import psutil

from hexinfo import config

MAX_LEN = 256
_MAX_INTERFACES = 32
_MEMINFO_KEYS = {"MemTotal", "MemFree", "MemAvailable", "Buffers", "Cached"}
_MEMINFO_LINE = re.compile(r"^(\w+):\s*(\d+)")


@dataclass
class SysInfo:
    """One snapshot of everything the dashboard displays."""

    time: str = ""
    uptime: str = ""
    memory: str = ""
    cpu: str = ""
    network: str = ""
    battery: str = ""
    vpn: str = ""
    system: str = "linux"
    ip: str = ""
    gateway: str = ""
    dns: str = ""


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class CpuMonitor:
    """Tracks /proc/stat counters to report usage since the previous sample."""

    def __init__(self) -> None:
        self.prev_idle = 0
        self.prev_total = 0

    def update(self, stat_text: str) -> str:
        """Feed the contents of /proc/stat and return the usage as ``N%``."""
        first = stat_text.splitlines()[0] if stat_text else ""
        tokens = first.split()
        if not tokens or tokens[0] != "cpu":
            return "Unknown"
        values: list[int] = []
        for token in tokens[1:9]:
            try:
                values.append(int(token))
            except ValueError:
                break
        values.extend([0] * (8 - len(values)))
        idle = values[3]
        total = sum(values)
        diff_idle = idle - self.prev_idle
        diff_total = total - self.prev_total
        if diff_total > 0:
            result = f"{100 - _trunc_div(diff_idle * 100, diff_total)}%"
        else:
            result = "0%"
        self.prev_idle = idle
        self.prev_total = total
        return result

    def sample(self, path: str | Path = "/proc/stat") -> str:
        """Read the stat file and return the usage string."""
        try:
            text = Path(path).read_text()
        except OSError:
            return "Unknown"
        return self.update(text)


def current_time(now: datetime | None = None) -> str:
    """Format the local time as ``YYYY-MM-DD HH:MM:SS``."""
    if now is None:
        now = datetime.now()
    return now.strftime("%Y-%m-%d %H:%M:%S")


def format_uptime(seconds: int) -> str:
    """Render an uptime in seconds as ``Dd Hh Mm``."""
    seconds = int(seconds)
    days = seconds // 86400
    hours = (seconds % 86400) // 3600
    minutes = (seconds % 3600) // 60
    return f"{days}d {hours}h {minutes}m"


def uptime(path: str | Path = "/proc/uptime") -> str:
    """Read the uptime file and format it, or ``Unknown``."""
    try:
        seconds = float(Path(path).read_text().split()[0])
    except (OSError, ValueError, IndexError):
        return "Unknown"
    return format_uptime(int(seconds))


def parse_meminfo(text: str) -> str:
    """Summarise /proc/meminfo contents as ``used MB / total MB (pct%)``."""
    fields = dict.fromkeys(_MEMINFO_KEYS, 0)
    for line in text.splitlines():
        match = _MEMINFO_LINE.match(line)
        if match and match.group(1) in _MEMINFO_KEYS:
            fields[match.group(1)] = int(match.group(2))

    total_mb = fields["MemTotal"] // 1024
    if fields["MemTotal"] <= 0 or total_mb == 0:
        return "Unknown"
    if fields["MemAvailable"] > 0:
        available_mb = fields["MemAvailable"] // 1024
    else:
        available_mb = (fields["MemFree"] + fields["Buffers"] + fields["Cached"]) // 1024
    used_mb = total_mb - available_mb
    percent = _trunc_div(used_mb * 100, total_mb)
    return f"{used_mb} MB / {total_mb} MB ({percent}%)"


def memory_info(path: str | Path = "/proc/meminfo") -> str:
    """Read the meminfo file and summarise it, or ``Unknown``."""
    try:
        text = Path(path).read_text()
    except OSError:
        return "Unknown"
    return parse_meminfo(text)


def active_interfaces() -> list[str]:
    """Names of non-loopback interfaces holding an IPv4 or IPv6 address."""
    families = {socket.AF_INET, socket.AF_INET6}
    names: list[str] = []
    for name, addresses in psutil.net_if_addrs().items():
        if name == "lo" or name in names:
            continue
        if any(addr.family in families for addr in addresses):
            names.append(name)
            if len(names) >= _MAX_INTERFACES:
                break
    return names


def network_status(interfaces: Sequence[str] | None = None) -> str:
    """Describe connected interfaces; queries the system when none are given."""
    if interfaces is None:
        try:
            interfaces = active_interfaces()
        except OSError:
            return "Unknown"
    if not interfaces:
        return "No network connection"
    listing = ", ".join(interfaces)
    remaining = MAX_LEN - 12
    if len(listing) >= remaining:
        listing = listing[: remaining - 1]
    return f"Connected: {listing}"


def battery_status(battery_path: str | Path = config.BATTERY_PATH) -> str:
    """Report battery capacity and charging status, if a battery exists."""
    base = Path(battery_path)
    try:
        capacity = int((base / "capacity").read_text().split()[0])
    except (OSError, ValueError, IndexError):
        return "No battery detected"
    status = "Unknown"
    try:
        tokens = (base / "status").read_text().split()
    except OSError:
        tokens = []
    if tokens:
        status = tokens[0]
    return f"{capacity}% ({status})"


def _run(args: Sequence[str]) -> str:
    try:
        result = subprocess.run(
            list(args), capture_output=True, text=True, check=False
        )
    except OSError:
        return ""
    return result.stdout or ""


def _awk_field(text: str, pattern: str, field: int) -> Iterable[str]:
    for line in text.splitlines():
        if pattern in line:
            parts = line.split()
            yield parts[field - 1] if len(parts) >= field else ""


def vpn_status() -> str:
    """Report whether a tun/tap/vpn route is present."""
    try:
        result = subprocess.run(
            ["ip", "route", "show"], capture_output=True, text=True, check=False
        )
    except FileNotFoundError:
        return "VPN: Inactive"
    except OSError:
        return "VPN: Unknown"
    if re.search(r"tun|tap|vpn", result.stdout or ""):
        return "VPN: Active"
    return "VPN: Inactive"


def ip_address() -> str:
    """Source address used to reach the public internet over IPv4, then IPv6."""
    v4 = _run(["ip", "route", "get", "8.8.8.8"])
    for value in _awk_field(v4, "src", 7):
        return f"IP: {value[: MAX_LEN - 5]}"
    v6 = _run(["ip", "-6", "route", "get", "2001:4860:4860::8888"])
    for value in _awk_field(v6, "src", 9):
        return f"IP: {value[: MAX_LEN - 5]}"
    return "IP: Unknown"


def gateway() -> str:
    """Address of the default route's gateway."""
    for value in _awk_field(_run(["ip", "route"]), "default", 3):
        return f"Gateway: {value[: MAX_LEN - 10]}"
    return "Gateway: Unknown"


def parse_resolv_conf(text: str) -> str:
    """First ``nameserver`` entry of a resolv.conf, as ``DNS: addr``."""
    for line in text.splitlines():
        if line.startswith("nameserver"):
            server = line[len("nameserver"):].lstrip(" \t")
            return f"DNS: {server[: MAX_LEN - 6]}"
    return "DNS: Unknown"


def dns(path: str | Path = "/etc/resolv.conf") -> str:
    """Read the resolver configuration and report its first nameserver."""
    try:
        text = Path(path).read_text()
    except OSError:
        return "DNS: Unknown"
    return parse_resolv_conf(text)


def parse_os_release(text: str) -> str:
    """The ``ID`` value of an os-release file, defaulting to ``linux``."""
    for line in text.splitlines():
        if line.startswith("ID="):
            value = line[3:]
            if value.startswith('"'):
                value = value[1:].split('"', 1)[0]
            return value[: MAX_LEN - 1]
    return "linux"


def detect_system(
    paths: Sequence[str | Path] = ("/etc/os-release", "/usr/lib/os-release"),
) -> str:
    """Identify the distribution from the first readable os-release file."""
    for path in paths:
        try:
            text = Path(path).read_text(errors="replace")
        except OSError:
            continue
        return parse_os_release(text)
    return "linux"


def collect(cpu: CpuMonitor) -> SysInfo:
    """Gather a full snapshot, updating the CPU monitor's state."""
    return SysInfo(
        time=current_time(),
        uptime=uptime(),
        memory=memory_info(),
        cpu=cpu.sample(),
        network=network_status(),
        battery=battery_status(),
        vpn=vpn_status(),
        system=detect_system(),
        ip=ip_address(),
        gateway=gateway(),
        dns=dns(),
    )