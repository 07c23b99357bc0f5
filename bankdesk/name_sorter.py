"""Sort the letters of a name, keeping its initial capital."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence, TextIO

from bankdesk.console import BACKSPACE, ENTER, read_keys


def quick_sort_chars(text: str) -> str:
    """Return the characters of ``text`` in ascending order."""
    chars = list(text)
    _quick_sort(chars, 0, len(chars) - 1)
    return "".join(chars)


def _quick_sort(chars: list[str], left: int, right: int) -> None:
    if left >= right:
        return
    pivot = chars[(right - left) // 2 + left]
    i, j = left, right
    while i <= j:
        while chars[i] < pivot:
            i += 1
        while chars[j] > pivot:
            j -= 1
        if i <= j:
            chars[i], chars[j] = chars[j], chars[i]
            i += 1
            j -= 1
    if left < j:
        _quick_sort(chars, left, j)
    if i < right:
        _quick_sort(chars, i, right)


def to_lower(text: str) -> str:
    """Lower-case the ASCII capitals of ``text`` and leave everything else."""
    return "".join(
        chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text
    )


class Name:
    """A name kept both as typed and in lower case."""

    def __init__(self, text: str) -> None:
        self.normal = text
        self.lower = to_lower(text)

    def sort(self) -> str:
        """Sort the lower-case letters and return them."""
        self.lower = quick_sort_chars(self.lower)
        return self.lower

    def display(self) -> str:
        """Return the lower-case letters with the initial capital restored once."""
        if not self.normal:
            return self.lower
        capital = chr(ord(self.normal[0]) + 32)
        position = self.lower.find(capital)
        if position < 0:
            return self.lower
        restored = chr(ord(capital) - 32)
        return self.lower[:position] + restored + self.lower[position + 1:]


def read_name(
    prompt: str, keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None
) -> str:
    """Read a name: a capital allowed only first, then lower-case letters."""
    out = sys.stdout if out is None else out
    keys = read_keys() if keys is None else iter(keys)
    out.write(prompt)
    out.flush()
    letters: list[str] = []
    for key in keys:
        if not letters and len(key) == 1 and "A" <= key <= "Z":
            letters.append(key)
            out.write(key)
        elif len(key) == 1 and "a" <= key <= "z":
            letters.append(key)
            out.write(key)
        elif key == BACKSPACE and letters:
            letters.pop()
            out.write("\b \b")
        elif key == ENTER:
            return "".join(letters)
        out.flush()
    raise EOFError("input ended before the name was complete")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Sort the letters of a name.")
    parser.add_argument("name", nargs="?")
    args = parser.parse_args(argv)

    text = args.name if args.name is not None else read_name("Ingrese un nombre: ")
    print()
    name = Name(text)
    name.sort()
    print()
    print(name.display())
    return 0


if __name__ == "__main__":
    sys.exit(main())