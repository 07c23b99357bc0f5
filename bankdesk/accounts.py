"""Bank accounts and the numbering scheme that identifies them."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

from bankdesk.storage import (
    load_string,
    read_float,
    read_string,
    save_string,
    write_float,
    write_string,
)

PathLike = Union[str, Path]

ACCOUNT_ID_CONFIG = "BankAccountIdConfig.dat"
BRANCH = "88"
_TYPE_DIGITS = {"s": "1", "c": "2"}


def generate_account_number(
    account_type: str, config_path: PathLike = ACCOUNT_ID_CONFIG
) -> str:
    """Build the next account number for ``account_type`` ('s' or 'c').

    The number is the branch, the type digit, the running id and a check
    digit that makes the sum of all digits a multiple of ten. The running id
    kept in ``config_path`` is advanced afterwards.
    """
    try:
        type_digit = _TYPE_DIGITS[account_type]
    except KeyError:
        raise ValueError(f"invalid account type: {account_type!r}") from None
    try:
        last_id = load_string(config_path)
    except (OSError, EOFError):
        last_id = "1"
    body = BRANCH + type_digit + last_id
    remainder = sum(ord(ch) - ord("0") for ch in body) % 10
    check = 0 if remainder == 0 else 10 - remainder
    save_string(str(int(last_id) + 1).zfill(6), config_path)
    return body + str(check)


@dataclass(eq=False)
class BankAccount:
    """A balance held under an account number; equal when the numbers match."""

    balance: float = 0.0
    account_number: str = ""
    type: str = ""

    @classmethod
    def open(
        cls, account_type: str, config_path: PathLike = ACCOUNT_ID_CONFIG
    ) -> "BankAccount":
        """A new empty account with a freshly generated number."""
        return cls(0.0, generate_account_number(account_type, config_path), account_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BankAccount):
            return NotImplemented
        return self.account_number == other.account_number

    def __hash__(self) -> int:
        return hash(self.account_number)

    def write(self, stream: BinaryIO) -> None:
        """Write balance, account number and type."""
        write_float(stream, self.balance)
        write_string(stream, self.account_number)
        write_string(stream, self.type)

    @classmethod
    def read(cls, stream: BinaryIO) -> "BankAccount":
        """Read an account written by :meth:`write`."""
        balance = read_float(stream)
        number = read_string(stream)
        account_type = read_string(stream)
        return cls(balance, number, account_type)