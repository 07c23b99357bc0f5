"""A bank customer with their accounts and movements."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from bankdesk.accounts import BankAccount
from bankdesk.movements import BankMovement
from bankdesk.personal import PersonalData
from bankdesk.storage import read_records, write_records


@dataclass
class User:
    """Personal data, a savings and a checking account, and movement history."""

    personal_data: PersonalData = field(default_factory=PersonalData)
    savings_account: BankAccount = field(default_factory=BankAccount)
    checking_account: BankAccount = field(default_factory=BankAccount)
    movements: list[BankMovement] = field(default_factory=list)

    def write(self, stream: BinaryIO) -> None:
        """Write personal data, both accounts and the movement list."""
        self.personal_data.write(stream)
        self.savings_account.write(stream)
        self.checking_account.write(stream)
        write_records(stream, self.movements)

    @classmethod
    def read(cls, stream: BinaryIO) -> "User":
        """Read a user written by :meth:`write`; movements point back to it."""
        personal = PersonalData.read(stream)
        savings = BankAccount.read(stream)
        checking = BankAccount.read(stream)
        movements = read_records(stream, BankMovement.read)
        user = cls(personal, savings, checking, movements)
        for movement in movements:
            movement.user = user
        return user