import os

import pytest

from hexinfo import config
from hexinfo.canvas import Canvas, Color
from hexinfo.hexdump import BANNER
from hexinfo.screen import (
    HostDetails,
    battery_color,
    host_details,
    layout_for,
    leading_percent,
    memory_percent,
    render,
    usage_color,
)
from hexinfo.sysinfo import SysInfo


def _info(**overrides):
    values = dict(
        time="2024-01-02 03:04:05",
        uptime="1d 2h 3m",
        memory="1024 MB / 2048 MB (50%)",
        cpu="42%",
        network="Connected: eth0",
        battery="No battery detected",
        vpn="VPN: Inactive",
        system="debian",
        ip="IP: 192.0.2.10",
        gateway="Gateway: 192.0.2.1",
        dns="DNS: 192.0.2.53",
    )
    values.update(overrides)
    return SysInfo(**values)


HOST = HostDetails("alice", "box", "Linux", "6.1", "x86_64")


def _find(canvas, text):
    for y, row in enumerate(canvas.text_rows()):
        x = row.find(text)
        if x >= 0:
            return x, y
    raise AssertionError(f"{text!r} not drawn")


@pytest.mark.parametrize("width", [20, 80, 120, 200, 400])
def test_layout_invariants(width):
    lay = layout_for(width)
    assert lay.hex_width == 10 + 4 * lay.bytes_per_line + 2
    assert 20 <= lay.ascii_box_width <= 40
    assert lay.system_box_x == lay.ascii_box_width + 4
    assert lay.system_box_x + lay.system_box_width == lay.hex_width - 2
    assert lay.half_width == (lay.hex_width - 6) // 2


def test_memory_percent():
    assert memory_percent("1024 MB / 2048 MB (50%)") == 50
    assert memory_percent("Unknown") == 0


def test_leading_percent():
    assert leading_percent("42%") == 42
    assert leading_percent("80% (Charging)") == 80
    assert leading_percent("Unknown") == 0


@pytest.mark.parametrize(
    "percent, color",
    [(81, Color.RED), (80, Color.YELLOW), (61, Color.YELLOW), (60, Color.GREEN), (0, Color.GREEN)],
)
def test_usage_color(percent, color):
    assert usage_color(percent) == color


@pytest.mark.parametrize(
    "percent, color",
    [(19, Color.RED), (20, Color.YELLOW), (49, Color.YELLOW), (50, Color.GREEN), (100, Color.GREEN)],
)
def test_battery_color(percent, color):
    assert battery_color(percent) == color


def test_host_details_reports_uname():
    details = host_details()
    assert details.sysname == os.uname().sysname


def test_host_details_hostname_is_single_line():
    details = host_details()
    assert isinstance(details.hostname, str)
    assert details.hostname != ""
    assert "\n" not in details.hostname


def test_render_contains_information():
    canvas = Canvas(80, 45)
    render(canvas, _info(), HOST, seed=1)
    text = "\n".join(canvas.text_rows())
    for expected in (
        "2024-01-02 03:04:05",
        "Host: alice@box",
        "System: Linux 6.1 x86_64",
        " OS ",
        " SYSTEM ",
        "Connected: eth0",
        "AC Power Only",
        f"Refreshes every {config.REFRESH_INTERVAL}s",
    ):
        assert expected in text
    assert canvas.text_rows()[1].startswith("00000000")
    assert f"|{BANNER}." in canvas.text_rows()[1]


def test_render_colours():
    canvas = Canvas(80, 45)
    render(canvas, _info(network="No network connection"), HOST, seed=1)
    x, y = _find(canvas, "2024-01-02")
    assert canvas.cells[y][x].fg == Color.YELLOW
    x, y = _find(canvas, "No network connection")
    assert canvas.cells[y][x].fg == Color.RED
    x, y = _find(canvas, "42%")
    assert canvas.cells[y][x].fg == Color.GREEN


def test_render_battery_panel():
    canvas = Canvas(80, 45)
    render(canvas, _info(battery="15% (Discharging)"), HOST, seed=1)
    x, y = _find(canvas, "15% (Discharging)")
    assert canvas.cells[y][x].fg == Color.MAGENTA
    assert "Battery:" in "".join(canvas.text_rows())
    x, y = _find(canvas, "Battery:")
    assert canvas.cells[y + 1][canvas.text_rows()[y + 1].index("15%")].fg == Color.RED


def test_render_is_repeatable_with_seed():
    first, second = Canvas(100, 45), Canvas(100, 45)
    render(first, _info(), HOST, seed=5)
    render(second, _info(), HOST, seed=5)
    assert first.cells == second.cells