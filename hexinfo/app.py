"""Interactive full-screen dashboard and its command-line entry point."""

from __future__ import annotations

import curses
import locale
import subprocess
import sys
import time
from collections.abc import Sequence

from hexinfo import config
from hexinfo.canvas import Canvas, Color
from hexinfo.screen import host_details, render
from hexinfo.sysinfo import CpuMonitor, SysInfo, collect

PROG = "hexinfo"
_ESC = 27
_POLL_MS = 100
_REBOOT = "reboot"
_SHUTDOWN = "shutdown"
_PROGRESS = {
    "Reboot": "Rebooting system...",
    "Shutdown": "Shutting down system...",
}


def power_action(command: str, message: str) -> int:
    """Run a power command such as ``Reboot``; exit with status 1 if it fails."""
    print(_PROGRESS.get(message, f"{message}..."), flush=True)
    code = subprocess.run(command, shell=True, check=False).returncode
    if code != 0:
        print(f"{message} command failed with exit code: {code}")
        print(f"Command was: {command}")
        raise SystemExit(1)
    return 0


class _Painter:
    """Copies a canvas onto a curses window, allocating colour pairs lazily."""

    def __init__(self) -> None:
        try:
            self.colors = curses.has_colors()
        except curses.error:
            self.colors = False
        self.pairs: dict[tuple[int, int], int] = {}

    def _pair(self, fg: int, bg: int) -> int:
        key = (fg, bg)
        if key not in self.pairs:
            number = len(self.pairs) + 1
            try:
                if number >= curses.COLOR_PAIRS:
                    return 0
                curses.init_pair(number, fg - 1 if fg else -1, bg - 1 if bg else -1)
            except curses.error:
                return 0
            self.pairs[key] = number
        return curses.color_pair(self.pairs[key])

    def attr(self, fg: int, bg: int) -> int:
        attr = 0
        if fg & (Color.BOLD | Color.BRIGHT):
            attr |= curses.A_BOLD
        if self.colors:
            attr |= self._pair(fg & 0xFF, bg & 0xFF)
        return attr

    def paint(self, window, canvas: Canvas) -> None:
        window.erase()
        last = (canvas.width - 1, canvas.height - 1)
        for y, row in enumerate(canvas.cells):
            for x, cell in enumerate(row):
                if (x, y) == last:
                    continue
                try:
                    window.addstr(y, x, cell.ch, self.attr(cell.fg, cell.bg))
                except curses.error:
                    pass
        window.refresh()


def _setup_terminal() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
    except curses.error:
        pass


def run(stdscr) -> str | None:
    """Drive the dashboard until a key ends it; return the power action chosen."""
    _setup_terminal()
    stdscr.keypad(True)
    stdscr.timeout(_POLL_MS)
    painter = _Painter()
    cpu = CpuMonitor()

    def draw(info: SysInfo) -> None:
        height, width = stdscr.getmaxyx()
        canvas = Canvas(width, height)
        render(canvas, info, host_details())
        painter.paint(stdscr, canvas)

    info = collect(cpu)
    draw(info)
    last_update = last_hex = time.monotonic()

    while True:
        now = time.monotonic()
        if now - last_update >= config.REFRESH_INTERVAL:
            info = collect(cpu)
            draw(info)
            last_update = last_hex = now
        elif now - last_hex >= config.HEX_REFRESH_INTERVAL:
            draw(info)
            last_hex = now

        key = stdscr.getch()
        if key in (ord("q"), _ESC):
            return None
        if key == ord("r"):
            return _REBOOT
        if key == ord("s"):
            return _SHUTDOWN
        if key == curses.KEY_RESIZE:
            draw(info)


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; takes no arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        print(f"usage: {PROG}", file=sys.stderr)
        raise SystemExit(1)

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        pass

    try:
        action = curses.wrapper(run)
    except curses.error:
        print(f"{PROG}: terminal initialization failed", file=sys.stderr)
        raise SystemExit(1)

    if action == _REBOOT:
        return power_action(config.REBOOT_CMD, "Reboot")
    if action == _SHUTDOWN:
        return power_action(config.SHUTDOWN_CMD, "Shutdown")
    return 0