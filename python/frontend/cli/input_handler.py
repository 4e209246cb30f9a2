"""Single-keypress input for the terminal frontends.

Keys are read without waiting for Enter (tty/termios on macOS and Linux,
msvcrt on Windows) and translated to action strings such as ``"step"``
or ``"quit"``.  Translation lives in ``decode`` so it can be tested
without a terminal.
"""

from __future__ import annotations

import os
import sys
import time

_ESC = "\x1b"

_KEY_MAP: dict[str, str] = {
    " ": "step",
    "s": "step",
    "v": "solve",
    "p": "play",
    "n": "new",
    "g": "generate",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "h": "help",
    "?": "help",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def decode(keys: str) -> str:
    """Translate the bytes of one keypress into an action string.

    Possible return values:
        "step"      space or s
        "solve"     v
        "play"      p
        "new"       n (new random start/finish)
        "generate"  g (new maze)
        "quit"      q, Ctrl-C or a bare Escape
        "help"      h or ?
        "enter"     Enter / Return
        "up", "down", "left", "right" for the arrow keys
        "<char>"    any other printable char (e.g. "1")
        ""          unrecognised input
    """
    if not keys:
        return ""
    if keys[0] == _ESC:
        if len(keys) == 1:
            return "quit"
        if keys[1] == "[" and len(keys) >= 3:
            return _ARROW_MAP.get(keys[2], "")
        return "" if keys[1] == "[" else "quit"
    ch = keys[0]
    action = _KEY_MAP.get(ch.lower()) or _KEY_MAP.get(ch)
    if action:
        return action
    return ch if ch.isprintable() else ""


# -- platform readers ----------------------------------------------------------


def _read_windows(timeout: float | None) -> str | None:
    import msvcrt  # type: ignore[import-not-found]

    if timeout is not None:
        end = time.monotonic() + timeout
        while not msvcrt.kbhit():
            if time.monotonic() >= end:
                return None
            time.sleep(0.02)
    return msvcrt.getch().decode("utf-8", errors="ignore")


def _read_unix(timeout: float | None) -> str | None:
    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None
        # os.read is unbuffered, so select() still sees the rest of an
        # escape sequence.
        keys = os.read(fd, 1).decode("utf-8", errors="ignore")
        while keys.startswith(_ESC) and len(keys) < 3:
            more, _, _ = select.select([fd], [], [], 0.1)
            if not more:
                break
            keys += os.read(fd, 1).decode("utf-8", errors="ignore")
            if keys[1:2] != "[":
                break
        return keys
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)


_read = _read_windows if os.name == "nt" else _read_unix


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Block until a key is pressed and return its action string."""
    keys = _read(None)
    return decode(keys or "")


def get_key_timeout(timeout: float) -> str | None:
    """Like ``get_key`` but return ``None`` after *timeout* seconds."""
    keys = _read(timeout)
    if keys is None:
        return None
    return decode(keys)
