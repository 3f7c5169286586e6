"""Terminal colours selected by the ``%Nc`` pattern placeholder."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Colours that a pattern can switch to; the number is the placeholder width."""

    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    GREY = 7
    DARKGREY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15
    BKGD_BLACK = 16
    BKGD_BLUE = 17
    BKGD_GREEN = 18
    BKGD_CYAN = 19
    BKGD_RED = 20
    BKGD_MAGENTA = 21
    BKGD_YELLOW = 22
    BKGD_WHITE = 23


_ESCAPES = {
    Color.BLACK: "\033[22;30m",
    Color.BLUE: "\033[22;34m",
    Color.GREEN: "\033[22;32m",
    Color.CYAN: "\033[22;36m",
    Color.RED: "\033[22;31m",
    Color.MAGENTA: "\033[22;35m",
    Color.BROWN: "\033[22;33m",
    Color.GREY: "\033[22;37m",
    Color.DARKGREY: "\033[01;30m",
    Color.LIGHTBLUE: "\033[01;34m",
    Color.LIGHTGREEN: "\033[01;32m",
    Color.LIGHTCYAN: "\033[01;36m",
    Color.LIGHTRED: "\033[01;31m",
    Color.LIGHTMAGENTA: "\033[01;35m",
    Color.YELLOW: "\033[01;33m",
    Color.WHITE: "\033[01;37m",
    Color.BKGD_BLACK: "\033[40m",
    Color.BKGD_BLUE: "\033[44m",
    Color.BKGD_GREEN: "\033[42m",
    Color.BKGD_CYAN: "\033[46m",
    Color.BKGD_RED: "\033[41m",
    Color.BKGD_MAGENTA: "\033[45m",
    Color.BKGD_YELLOW: "\033[43m",
    Color.BKGD_WHITE: "\033[47m",
}


def color_escape(color: Color | int) -> str:
    """Return the ANSI sequence for ``color``, or an empty string if it is unknown."""
    try:
        return _ESCAPES[Color(color)]
    except ValueError:
        return ""