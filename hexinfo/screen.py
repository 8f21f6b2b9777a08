"""Lays out the dashboard panels on a canvas."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from hexinfo import config
from hexinfo.canvas import Canvas, Color
from hexinfo.hexdump import background_lines, banner_line, bytes_per_line
from hexinfo.sysinfo import MAX_LEN, SysInfo

_MEMORY_PERCENT = re.compile(
    r"\s*[+-]?\d+\s*MB\s*/\s*[+-]?\d+\s*MB\s*\(\s*([+-]?\d+)"
)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_HOSTNAME_PATH = Path("/etc/hostname")
_HOSTNAME_LIMIT = 63


@dataclass(frozen=True)
class HostDetails:
    """Who and where the dashboard is running."""

    user: str = "Unknown"
    hostname: str = "Unknown"
    sysname: str = "Unknown"
    release: str = "Unknown"
    machine: str = "Unknown"


@dataclass(frozen=True)
class Layout:
    """Panel geometry derived from the terminal width."""

    bytes_per_line: int
    hex_width: int
    ascii_box_width: int
    system_box_width: int
    system_box_x: int

    @property
    def half_width(self) -> int:
        """Width of each of the two side-by-side lower panels."""
        return (self.hex_width - 6) // 2


def _user_name() -> str:
    try:
        import pwd
    except ImportError:
        return "Unknown"
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        return "Unknown"


def _hostname() -> str:
    try:
        text = _HOSTNAME_PATH.read_text(errors="replace")
    except OSError:
        return "Unknown"
    if not text:
        return "Unknown"
    return text.split("\n", 1)[0][:_HOSTNAME_LIMIT]


def host_details() -> HostDetails:
    """Look up the user name, host name and kernel identification."""
    try:
        uname = os.uname()
        sysname, release, machine = uname.sysname, uname.release, uname.machine
    except (AttributeError, OSError):
        sysname = release = machine = "Unknown"

    return HostDetails(
        user=_user_name(),
        hostname=_hostname(),
        sysname=sysname,
        release=release,
        machine=machine,
    )


def layout_for(width: int) -> Layout:
    """Compute panel sizes for a terminal ``width`` columns wide."""
    count = bytes_per_line(width)
    hex_width = 10 + count * 3 + 1 + count + 1
    ascii_box_width = max(20, min(40, (hex_width - 8) // 6))
    return Layout(
        bytes_per_line=count,
        hex_width=hex_width,
        ascii_box_width=ascii_box_width,
        system_box_width=hex_width - ascii_box_width - 6,
        system_box_x=2 + ascii_box_width + 2,
    )


def memory_percent(text: str) -> int:
    """Percentage from a ``used MB / total MB (pct%)`` string, else 0."""
    match = _MEMORY_PERCENT.match(text)
    return int(match.group(1)) if match else 0


def leading_percent(text: str) -> int:
    """The integer a string starts with, such as ``42`` in ``42%``, else 0."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def usage_color(percent: int) -> Color:
    """Red above 80%, yellow above 60%, green otherwise."""
    if percent > 80:
        return Color.RED
    if percent > 60:
        return Color.YELLOW
    return Color.GREEN


def battery_color(percent: int) -> Color:
    """Red below 20%, yellow below 50%, green otherwise."""
    if percent < 20:
        return Color.RED
    if percent < 50:
        return Color.YELLOW
    return Color.GREEN


def render(
    canvas: Canvas, info: SysInfo, host: HostDetails, seed: int | None = None
) -> None:
    """Draw the whole dashboard for ``info`` onto ``canvas``."""
    width, height = canvas.width, canvas.height
    lay = layout_for(width)
    black = Color.BLACK
    heading = Color.WHITE | Color.BOLD

    canvas.clear()
    for row, line in enumerate(background_lines(width, height, seed)):
        canvas.print_at(line, 0, row, Color.BLACK | Color.BRIGHT, Color.DEFAULT)
    canvas.print_at(banner_line(width), 0, 1, Color.GREEN | Color.BOLD, black)

    canvas.draw_box(2, 6, lay.ascii_box_width, 12, " OS ", Color.CYAN)
    canvas.draw_ascii_art(
        config.ascii_art_for(info.system),
        2, 6, lay.ascii_box_width, 12,
        Color.CYAN | Color.BOLD,
    )

    sx, sw = lay.system_box_x, lay.system_box_width
    canvas.draw_box(sx, 6, sw, 8, " SYSTEM ", Color.GREEN)
    canvas.print_centered(info.time, sx, 8, sw, Color.YELLOW, black)
    canvas.print_centered(info.uptime, sx, 9, sw, Color.GREEN, black)
    canvas.draw_separator(sx + 2, 10, sw - 4, Color.GREEN, black)
    host_line = f"Host: {host.user}@{host.hostname}"[: MAX_LEN - 1]
    canvas.print_centered(host_line, sx, 11, sw, Color.CYAN, black)
    system_line = f"System: {host.sysname} {host.release} {host.machine}"[: MAX_LEN - 1]
    canvas.print_centered(system_line, sx, 12, sw, Color.CYAN, black)

    half = lay.half_width
    canvas.draw_box(2, 19, half, 9, " RESOURCES ", Color.YELLOW)
    mem = memory_percent(info.memory)
    canvas.print_centered("Memory:", 2, 21, half, heading, black)
    canvas.print_centered(f"{mem}%", 2, 22, half, usage_color(mem), black)
    canvas.print_centered(info.memory, 2, 23, half, Color.BLUE, black)
    cpu = leading_percent(info.cpu)
    canvas.print_centered("CPU:", 2, 25, half, heading, black)
    canvas.print_centered(f"{cpu}%", 2, 26, half, usage_color(cpu), black)

    rx = 2 + half + 2
    canvas.draw_box(rx, 19, half, 15, " CONNECTIVITY ", Color.BLUE)
    canvas.print_centered("Network:", rx, 21, half, heading, black)
    net_color = Color.GREEN if "Connected" in info.network else Color.RED
    canvas.print_centered(info.network, rx, 22, half, net_color, black)
    canvas.print_centered(info.ip, rx, 24, half, Color.CYAN, black)
    canvas.print_centered(info.gateway, rx, 25, half, Color.CYAN, black)
    canvas.print_centered(info.dns, rx, 26, half, Color.CYAN, black)
    canvas.print_centered("Security:", rx, 28, half, heading, black)
    vpn_color = Color.GREEN if "Active" in info.vpn else Color.WHITE
    canvas.print_centered(info.vpn, rx, 29, half, vpn_color, black)

    wide = lay.hex_width - 4
    canvas.draw_box(2, 35, wide, 6, " POWER ", Color.MAGENTA)
    if "No battery" not in info.battery:
        batt = leading_percent(info.battery)
        canvas.print_centered("Battery:", 2, 37, wide, heading, black)
        canvas.print_centered(f"{batt}%", 2, 38, wide, battery_color(batt), black)
        canvas.print_centered(info.battery, 2, 39, wide, Color.MAGENTA, black)
    else:
        canvas.print_centered("AC Power Only", 2, 37, wide, Color.MAGENTA, black)
        canvas.print_centered("No battery detected", 2, 38, wide, Color.CYAN, black)

    canvas.draw_box(2, height - 4, wide, 3, "", Color.WHITE)
    footer = (
        "'q' Quit  *  'r' Reboot  *  's' Shutdown  *  "
        f"Refreshes every {config.REFRESH_INTERVAL}s"
    )
    canvas.print_centered(footer, 2, height - 2, wide, heading, black)