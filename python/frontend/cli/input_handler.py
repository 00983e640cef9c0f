"""Cross-platform single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, digits and special keys without requiring Enter.
Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    "p": "peek",
    "P": "peek",
    " ": "peek",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def decode(read: Callable[[], str | None]) -> str:
    """Turn the next keypress from *read* into an action string.

    *read* returns one character, or ``None`` once no more bytes are
    pending.  Arrow keys arrive as ``ESC [ A/B/C/D``; a bare Escape quits.
    """
    ch = read()
    if ch is None:
        return ""
    if ch != "\x1b":
        return resolve(ch)
    if read() != "[":
        return "quit"
    return _ARROW_MAP.get(read() or "", "")


# -- low-level readers ---------------------------------------------------------


def _read_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


def _read_unix(fd: int, timeout: float | None, peek: bool = False) -> str | None:
    """Read one byte from raw-mode *fd*, or ``None`` on timeout.

    With *peek* only wait for input and return ``""`` without consuming it.
    """
    import select

    if timeout is not None:
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
    if peek:
        return ""
    # os.read is unbuffered, so later select() calls still see the rest
    # of a multi-byte escape sequence.
    return os.read(fd, 1).decode("utf-8", errors="ignore")


def _with_raw_stdin(action: Callable[[int], str | None]) -> str | None:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        return action(fd)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r (new shuffle)
        "peek"                         — p / space (show the finished picture)
        "enter"                        — Enter / Return
        "<char>"                       — unmapped printable char, e.g. a digit
        ""                             — unrecognised key
    """
    if os.name == "nt":
        return decode(_read_windows)

    def _blocking(fd: int) -> str:
        timeouts = iter((None, 0.1, 0.1))
        return decode(lambda: _read_unix(fd, next(timeouts)))

    return _with_raw_stdin(_blocking) or ""


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress with a timeout.

    Returns the normalised action string (same as ``get_key``) or
    ``None`` if no key was pressed within *timeout* seconds.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    def _polling(fd: int) -> str | None:
        if _read_unix(fd, timeout, peek=True) is None:
            return None
        return decode(lambda: _read_unix(fd, 0.1))

    return _with_raw_stdin(_polling)
