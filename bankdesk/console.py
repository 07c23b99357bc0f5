"""Keyboard input and cursor-driven menus for the terminal."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import Iterable, Iterator, Optional, TextIO

UP = "<up>"
DOWN = "<down>"
ENTER = "\r"
BACKSPACE = "\b"

_INSTRUCTIONS = " Usa flechas para navegar. Enter para seleccionar.\n\n"
_PAUSE_MESSAGE = "Presione una tecla para continuar . . . "


def _windows_keys() -> Iterator[str]:
    import msvcrt

    while True:
        ch = msvcrt.getwch()
        if ch in ("\x00", "\xe0"):
            code = msvcrt.getwch()
            if code == "H":
                yield UP
            elif code == "P":
                yield DOWN
            continue
        if ch == "\x03":
            raise KeyboardInterrupt
        if ch == "\x1a":
            return
        if ch in ("\r", "\n"):
            yield ENTER
        elif ch == "\b":
            yield BACKSPACE
        else:
            yield ch


def _posix_raw_key() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    saved = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
        if ch == "\x1b":
            ch += sys.stdin.read(2)
        return ch
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


def _posix_keys() -> Iterator[str]:
    while True:
        ch = _posix_raw_key()
        if ch in ("", "\x04"):
            return
        if ch == "\x03":
            raise KeyboardInterrupt
        if ch.startswith("\x1b"):
            if ch == "\x1b[A":
                yield UP
            elif ch == "\x1b[B":
                yield DOWN
            continue
        if ch in ("\r", "\n"):
            yield ENTER
        elif ch in ("\x7f", "\b"):
            yield BACKSPACE
        else:
            yield ch


def _stream_keys() -> Iterator[str]:
    while True:
        ch = sys.stdin.read(1)
        if not ch:
            return
        yield ENTER if ch in ("\r", "\n") else ch


def read_keys() -> Iterator[str]:
    """Yield single keystrokes from standard input until it is exhausted."""
    if not sys.stdin.isatty():
        return _stream_keys()
    if os.name == "nt":
        return _windows_keys()
    return _posix_keys()


def clear_screen() -> None:
    """Clear the terminal attached to standard output."""
    if os.name == "nt" and sys.stdout.isatty():
        subprocess.run(["cmd", "/c", "cls"], check=False)
    else:
        sys.stdout.write("\x1b[2J\x1b[H")
        sys.stdout.flush()


def pause(keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None) -> None:
    """Show a prompt and wait for any single key."""
    out = sys.stdout if out is None else out
    keys = read_keys() if keys is None else iter(keys)
    out.write(_PAUSE_MESSAGE)
    out.flush()
    if next(keys, None) is None:
        raise EOFError("input ended while waiting for a key")
    out.write("\n")


class CursorMenu:
    """A circular list of options navigated with the arrow keys."""

    def __init__(
        self,
        options: Iterable[str] = (),
        keys: Optional[Iterable[str]] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.options: list[str] = []
        self.cursor = 0
        self._keys = keys
        self._out = out
        self.load_options(options)

    def load_options(self, options: Iterable[str]) -> None:
        """Append options and move the cursor back to the first one."""
        self.options.extend(options)
        self.cursor = 0

    def render(self) -> str:
        """Return the menu text with the cursor marker on the current option."""
        if not self.options:
            return "Menu vacio\n"
        return "".join(
            f"{'>> ' if position == self.cursor else '   '}{option}\n"
            for position, option in enumerate(self.options)
        )

    def run(self) -> int:
        """Let the user move through the options and return the chosen index."""
        if not self.options:
            raise ValueError("menu has no options")
        out = sys.stdout if self._out is None else self._out
        keys = read_keys() if self._keys is None else iter(self._keys)
        total = len(self.options)
        self.cursor = 0
        while True:
            if out is sys.stdout:
                clear_screen()
            out.write(_INSTRUCTIONS)
            out.write(self.render())
            out.flush()
            key = next(keys, None)
            if key is None:
                raise EOFError("input ended before an option was chosen")
            if key == UP:
                self.cursor = (self.cursor - 1) % total
            elif key == DOWN:
                self.cursor = (self.cursor + 1) % total
            elif key == ENTER:
                return self.cursor