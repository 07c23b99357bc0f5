"""Sum of the powers of two up to a given index, and date checks."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Optional, Sequence, TextIO

from bankdesk.console import ENTER, read_keys

_THIRTY_ONE = {1, 3, 5, 7, 8, 10, 12}
_THIRTY = {4, 6, 9, 11}


def power(exponent: int, base: int) -> int:
    """Multiply ``base`` by itself ``exponent`` times; 1 when exponent is not positive."""
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def sum_of_powers(last_index: int) -> int:
    """Return 2**0 + 2**1 + ... + 2**last_index."""
    if last_index < 0:
        raise ValueError("the last index must not be negative")
    return sum(power(index, 2) for index in range(last_index + 1))


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    if year % 4 != 0:
        return False
    if year % 100 != 0:
        return True
    return year % 400 == 0


def days_in_month(month: int, year: int) -> int:
    """Number of days in ``month`` of ``year``."""
    if month in _THIRTY_ONE:
        return 31
    if month in _THIRTY:
        return 30
    if month == 2:
        return 29 if is_leap_year(year) else 28
    raise ValueError(f"invalid month: {month}")


def is_valid_day(day: int, days: int) -> bool:
    """True when ``day`` falls within a month of ``days`` days."""
    return 1 <= day <= days


def read_number(
    prompt: str, keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None
) -> int:
    """Read digits until Enter and return them as an integer (0 when none)."""
    out = sys.stdout if out is None else out
    keys = read_keys() if keys is None else iter(keys)
    out.write(f"\n{prompt}")
    out.flush()
    digits: list[str] = []
    for key in keys:
        if key == ENTER:
            out.write("\n")
            return int("".join(digits) or "0")
        if len(key) == 1 and "0" <= key <= "9":
            digits.append(key)
            out.write(key)
            out.flush()
    raise EOFError("input ended before the number was complete")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Sum the powers of two from 2**0 up to a final index."
    )
    parser.add_argument("index", nargs="?", type=int)
    args = parser.parse_args(argv)

    index = args.index
    if index is None:
        index = read_number("Ingrese el indice final: ")
    try:
        result = sum_of_powers(index)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())