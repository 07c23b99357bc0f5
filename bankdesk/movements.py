"""Deposits and withdrawals recorded against a customer."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Optional, Union

from bankdesk.dates import Date
from bankdesk.storage import (
    load_int,
    read_float,
    read_string,
    save_int,
    write_float,
    write_string,
)

if TYPE_CHECKING:
    from bankdesk.users import User

PathLike = Union[str, Path]

MOVEMENT_ID_CONFIG = "BankMovementsIdConfig.dat"
ID_PREFIX = "23230-"
_RULE = "-" * 33


def next_movement_id(config_path: PathLike = MOVEMENT_ID_CONFIG) -> str:
    """Return the next movement id and advance the counter in ``config_path``."""
    try:
        last_id = load_int(config_path)
    except (OSError, EOFError):
        last_id = 1
    save_int(last_id + 1, config_path)
    return f"{ID_PREFIX}{last_id}"


def _money(value: float) -> str:
    return f"{value:g}"


class BankMovement:
    """An amount moved on a given date by a customer."""

    def __init__(
        self,
        amount: float = 0.0,
        user: Optional["User"] = None,
        date: Optional[Date] = None,
        movement_id: Optional[str] = None,
    ) -> None:
        self.id = next_movement_id() if movement_id is None else movement_id
        self.amount = amount
        self.user = user
        self.date = Date() if date is None else date
        self.user_dni = user.personal_data.dni if user is not None else ""
        self.destination_user: Optional["User"] = None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id!r}, amount={self.amount!r}, "
            f"user_dni={self.user_dni!r})"
        )

    def _owner(self) -> "User":
        if self.user is None:
            raise ValueError("movement has no user")
        return self.user

    def _balance_line(self, account_type: str) -> str:
        if account_type == "s":
            balance = self._owner().savings_account.balance
            return f'Saldo Actual "Ahorros": {_money(balance)}\n'
        if account_type == "c":
            balance = self._owner().checking_account.balance
            return f'Saldo Actual "Corriente": {_money(balance)}\n'
        return ""

    def receipt(self, account_type: str) -> str:
        """Text of the receipt for this movement."""
        return (
            ">>> IMPRIMIENDO RECIBO <<<\n"
            f"[BankMovement] Monto: {_money(self.amount)}\n"
            f"DNI: {self.user_dni}\n"
            "Fecha: "
            + self.date.describe()
            + f"ID de Movimiento: {self.id}\n"
        )

    def write(self, stream: BinaryIO) -> None:
        """Write id, amount, customer DNI and date."""
        write_string(stream, self.id)
        write_float(stream, self.amount)
        write_string(stream, self.user_dni)
        self.date.write(stream)

    @classmethod
    def read(cls, stream: BinaryIO) -> "BankMovement":
        """Read a movement written by :meth:`write`; its user is left unset."""
        movement_id = read_string(stream)
        amount = read_float(stream)
        dni = read_string(stream)
        date = Date.read(stream)
        movement = cls(amount, None, date, movement_id)
        movement.user_dni = dni
        return movement


class Deposit(BankMovement):
    """Money paid into an account."""

    def receipt(self, account_type: str) -> str:
        owner = self._owner()
        name = owner.personal_data.name
        return (
            "\n"
            f"{_RULE}\n"
            "Recibo de Deposito\n"
            f"Monto: {_money(self.amount)}\n"
            f"Usuario: {name}\n"
            f"Cuenta Destino: {name}\n"
            + self._balance_line(account_type)
            + self.date.describe()
            + f"ID de Movimiento: {self.id}\n"
            f"{_RULE}\n"
        )


class Withdrawal(BankMovement):
    """Money taken out of an account."""

    def receipt(self, account_type: str) -> str:
        return (
            "\n"
            f"{_RULE}\n"
            "Recibo de Retiro\n"
            f"Monto: {_money(self.amount)}\n"
            f"Usuario (DNI): {self.user_dni}\n"
            "Fecha: "
            + self._balance_line(account_type)
            + self.date.describe()
            + f"ID de Movimiento: {self.id}\n"
            f"{_RULE}\n"
        )