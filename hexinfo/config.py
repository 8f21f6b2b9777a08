"""User-adjustable settings and per-distribution ASCII art."""

from __future__ import annotations

REFRESH_INTERVAL = 1
"""Seconds between refreshes of the collected system information."""

HEX_REFRESH_INTERVAL = 2.0
"""Seconds between redraws of the hex background (may be fractional)."""

BATTERY_PATH = "/sys/class/power_supply/BAT0"

REBOOT_CMD = "PATH=/usr/bin:/bin:/sbin:/usr/sbin doas reboot"
SHUTDOWN_CMD = "PATH=/usr/bin:/bin:/sbin:/usr/sbin doas shutdown -h now"


def _art(block: str, width: int = 0) -> tuple[str, ...]:
    """Split a drawing into its lines, padding each to ``width`` columns."""
    return tuple(line.ljust(width) for line in block.strip("\n").split("\n"))


ASCII_ART: dict[str, tuple[str, ...]] = {
    "alpine": _art(r"""
   /\ /\
  /./ \  \
 /./   \  \
/./    \  \
//      \  \
         \
"""),
    "android": _art(r"""
  ;,           ,;
   ';,.-----.,;'
  ,'           ',
 /    O     O    \
|                 |
'-----------------'
"""),
    "arch": _art(r"""
       /\
      /  \
     /\   \
    /      \
   /   ,,   \
  /   |  |  -\
 /_-''    ''-_\
"""),
    "arco": _art(r"""
      /\
     /  \
    / /\ \
   / /  \ \
  / /    \ \
 / / _____\ \
/_/  `----.\_\
"""),
    "artix": _art(r"""
      /\
     /  \
    /`'.,\
   /     ',
  /      ,`\
 /   ,.'`.  \
/.,`'     `'.\
"""),
    "centos": _art(r"""
 ____^____
 |\  |  /|
 | \ | / |
<---- ---->
 | / | \ |
 |/__| __\|
     v
"""),
    "debian": _art(r"""
  _____
 /  __ \
|  /    |
|  \___-
-_
  --_
"""),
    "endeavouros": _art(r"""
      /\
    //  \\
   //    \ \
 / //     _) )
/_/___-- __-
 /____--
"""),
    "fedora": _art(r"""
        ,'''''.
       |   ,.  |
       |  |  '_'
  ,....|  |..
.'  ,_;|   ..'
|  |   |  |
|  ',_,'  |
 '.     ,'
   '''''
""", width=19),
    "freebsd": _art(r"""
/\,-'''''-,/\
\_)       (_/
|           |
|           |
 ;         ;
  '-_____-'
"""),
    "gentoo": _art(r"""
 _-----_
(       \
\    0   \
 \        )
 /      _/
(     _-
\____-
"""),
    "linux": _art(r"""
    ___
   (.. |
   (<> |
  / __  \
 ( /  \ /|
_/\ __)/_)
\/----\/
"""),
    "linuxmint": _art(r"""
 ___________
|_          \
  | | _____ |
  | | | | | |
  | | | | | |
  | \__ ___/ |
  \_________/
"""),
    "darwin": _art(r"""
       .:'
    _ :'_
 .'`_`-'_`'.
:________.-'
:_______:
 :_______`-;
  `._.-._.'
"""),
    "manjaro": _art(r"""
||||||||| ||||
||||||||| ||||
||||      ||||
|||| |||| ||||
|||| |||| ||||
|||| |||| ||||
|||| |||| ||||
"""),
    "nixos": _art(r"""
  \\  \\ //
 ==\\__\\/ //
   //   \\//
==//     //==
 //\\___//
// /\\  \\==
  // \\  \\
"""),
    "opensuse": _art(r"""
  _______
__|   __ \
     / .\ \
     \__/ |
   _______|
   \_______
__________/
"""),
    "pop": _art(r"""
______
\   _ \        __
 \ \ \ \      / /
  \ \_\ \    / /
   \  ___\  /_/
    \ \    _
   __\_\__(_)_
  (___________)
"""),
    "slackware": _art(r"""
   ________
  /  ______|
  | |______
  \______  \
   ______| |
| |________/
|____________
"""),
    "solus": _art(r"""
     /|
    / |\
   /  | \ _
  /___|__\_\
 \         /
  `-------´
"""),
    "ubuntu": _art(r"""
         _
     ---(_)
 _/  ---  \
(_) |   |
  \  --- _/
     ---(_)
"""),
    "void": _art(r"""
    _______
 _ \______ -
| \  ___  \ |
| | /   \ | |
| | \___/ | |
| \______ \_|
 -_______\
"""),
}


def ascii_art_for(system: str | None) -> tuple[str, ...]:
    """Return the ASCII art lines for an os-release ``ID``.

    Exact IDs are matched first; IDs containing ``mint`` or ``pop`` fall back
    to the Linux Mint and Pop!_OS art, and anything else gets the generic
    Linux art.
    """
    if system is None:
        return ASCII_ART["linux"]
    art = ASCII_ART.get(system)
    if art is not None:
        return art
    if "mint" in system:
        return ASCII_ART["linuxmint"]
    if "pop" in system:
        return ASCII_ART["pop"]
    return ASCII_ART["linux"]