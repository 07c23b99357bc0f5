"""Keystroke-level readers for numbers, names, e-mails, identity numbers and dates."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Iterator, Optional, TextIO

from bankdesk.console import BACKSPACE, ENTER, read_keys
from bankdesk.dates import Date, is_valid_day, month_days

_INT_MAX = 2**31 - 1
_FLOAT_MAX = 3.4028234663852886e38
_MAX_INTEGER_DIGITS = 11
_MAX_DECIMALS = 2
_DNI_LENGTH = 10
_DNI_WEIGHTS = (2, 1, 2, 1, 2, 1, 2, 1, 2)
_DNI_PATTERN = re.compile(r"[0-9]{10}")
_NINE_DIGITS = re.compile(r"[0-9]{9}")
_EMAIL_CHARS = frozenset("abcdefghijklmnopqrstuvwxyz0123456789_-.")
_EXTRA_LETTERS = frozenset("Ññáéíóú ")
_MAX_AGE = 100
_ADULT_AGE = 18


def _is_digit(key: str) -> bool:
    return len(key) == 1 and "0" <= key <= "9"


def _is_letter(key: str) -> bool:
    return len(key) == 1 and (
        "A" <= key <= "Z" or "a" <= key <= "z" or key in _EXTRA_LETTERS
    )


def dni_check_digit(digits: str) -> int:
    """Return the check digit for the first nine digits of an identity number."""
    if not _NINE_DIGITS.fullmatch(digits):
        raise ValueError("expected exactly nine digits")
    total = 0
    for digit, weight in zip(digits, _DNI_WEIGHTS):
        product = int(digit) * weight
        total += product - 9 if product >= 10 else product
    remainder = total % 10
    return 0 if remainder == 0 else 10 - remainder


def is_valid_dni(dni: str) -> bool:
    """True when ``dni`` has ten digits and its last one is the right check digit."""
    if not _DNI_PATTERN.fullmatch(dni):
        return False
    return int(dni[9]) == dni_check_digit(dni[:9])


def _email_ok(text: str) -> bool:
    at = text.find("@")
    if at <= 0 or text.count("@") != 1:
        return False
    dot = text.find(".", at)
    return dot > at + 1 and dot < len(text) - 1


class InputValidator:
    """Reads validated values one keystroke at a time, echoing accepted keys."""

    def __init__(
        self,
        keys: Optional[Iterable[str]] = None,
        out: Optional[TextIO] = None,
        today: Optional[Date] = None,
    ) -> None:
        self._keys: Iterator[str] = read_keys() if keys is None else iter(keys)
        self._out = sys.stdout if out is None else out
        self._today = today

    def _key(self) -> str:
        key = next(self._keys, None)
        if key is None:
            raise EOFError("input ended before the value was complete")
        return key

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def read_integer(self, prompt: str) -> int:
        """Read up to eleven digits until a value that fits a 32-bit integer is given."""
        while True:
            self._write(prompt)
            digits: list[str] = []
            while (key := self._key()) != ENTER:
                if _is_digit(key):
                    if len(digits) < _MAX_INTEGER_DIGITS:
                        digits.append(key)
                        self._write(key)
                elif key == BACKSPACE and digits:
                    digits.pop()
                    self._write("\b \b")
            self._write("\n")
            text = "".join(digits)
            if text and int(text) <= _INT_MAX:
                return int(text)
            self._write("Invalido\n")

    def read_float(self, prompt: str) -> float:
        """Read a positive decimal with at most two decimals and no leading dot."""
        while True:
            self._write(prompt)
            chars: list[str] = []
            dot = False
            decimals = -1
            while (key := self._key()) != ENTER:
                if not (_is_digit(key) or key == "."):
                    continue
                if not chars and key == ".":
                    continue
                if key == ".":
                    if dot:
                        continue
                    dot = True
                if dot:
                    decimals += 1
                if decimals > _MAX_DECIMALS:
                    continue
                chars.append(key)
                self._write(key)
            self._write("\n")
            if chars:
                value = float("".join(chars))
                if value <= _FLOAT_MAX:
                    return value
            self._write("Valor no valido. Intente de nuevo.\n")

    def read_email(self) -> str:
        """Read a lower-case e-mail address with one '@' and a dot after it."""
        self._write("Email: ")
        text = ""
        while True:
            key = self._key()
            if key == ENTER:
                if _email_ok(text):
                    self._write("\n")
                    return text
                self._write("\nFormato invalido. Ejemplo: usuario@example.com\n")
                text = ""
                self._write("Email: ")
            elif key == BACKSPACE and text:
                text = text[:-1]
                self._write("\b \b")
            elif key in _EMAIL_CHARS:
                text += key
                self._write(key)
            elif key == "@" and text and "@" not in text:
                text += key
                self._write(key)

    def read_letters(self, prompt: str) -> str:
        """Read letters, spaces and Spanish accented letters until Enter."""
        self._write(prompt)
        chars: list[str] = []
        while True:
            key = self._key()
            if key == ENTER:
                self._write("\n")
                return "".join(chars)
            if key == BACKSPACE and chars:
                chars.pop()
                self._write("\b \b")
            elif _is_letter(key):
                chars.append(key)
                self._write(key)

    def read_dni(self) -> str:
        """Read ten digits until they form an identity number with a valid check digit."""
        while True:
            self._write("Cedula: ")
            digits: list[str] = []
            while True:
                key = self._key()
                if key == ENTER:
                    if len(digits) == _DNI_LENGTH:
                        break
                elif key == BACKSPACE and digits:
                    digits.pop()
                    self._write("\b \b")
                elif _is_digit(key) and len(digits) < _DNI_LENGTH:
                    digits.append(key)
                    self._write(key)
            self._write("\n")
            dni = "".join(digits)
            if is_valid_dni(dni):
                return dni
            self._write("cedula invalida\n")

    def read_birth_date(self) -> Date:
        """Read a real past birth date of someone aged between 18 and 100."""
        while True:
            year = self.read_integer("Anio de nacimiento (ej: 2001): ")
            month = self.read_integer("Mes de nacimiento (1-12): ")
            days = month_days(month, year)
            day = self.read_integer("Dia de nacimiento: ")
            if not is_valid_day(day, days):
                self._write("Fecha invalida. Intente de nuevo.\n")
                continue

            today = Date.today() if self._today is None else self._today
            this_year = today.year.year
            if this_year - year > _MAX_AGE:
                self._write("La edad no puede ser mayor a 100 anios. Intente de nuevo.\n")
                continue
            if (year, month, day) > (this_year, today.month, today.day):
                self._write("No puede ingresar una fecha futura. Intente de nuevo.\n")
                continue
            age = this_year - year
            if (today.month, today.day) < (month, day):
                age -= 1
            if age < _ADULT_AGE:
                self._write("Debe ser mayor de 18 anios\n")
                continue
            self._write(f"Su edad es: {age} anios.\n")
            return Date(year, month, day)