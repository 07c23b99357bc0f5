"""The customer register: creating, finding, editing and storing users."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Iterable, Optional, TextIO, Union

from bankdesk.accounts import ACCOUNT_ID_CONFIG, BankAccount, generate_account_number
from bankdesk.cipher import CaesarCipher
from bankdesk.console import clear_screen, pause, read_keys
from bankdesk.dates import Date
from bankdesk.input_validator import InputValidator
from bankdesk.menus import CANCEL, account_type_menu, add_account_menu, update_user_menu
from bankdesk.movements import (
    MOVEMENT_ID_CONFIG,
    BankMovement,
    Deposit,
    Withdrawal,
    next_movement_id,
)
from bankdesk.personal import PersonalData
from bankdesk.storage import load_records, save_records
from bankdesk.users import User

PathLike = Union[str, Path]

USERS_FILE = "users.dat"
MAX_BALANCE = 50000.0
MIN_SAVINGS = 10.0
MIN_CHECKING = 250.0
_RULE = "-" * 30


class InsufficientFundsError(ValueError):
    """Raised when a withdrawal exceeds the account balance."""


def _money(value: float) -> str:
    return f"{value:g}"


class UserManager:
    """Holds every customer and keeps them in an encrypted data file."""

    def __init__(
        self,
        data_dir: PathLike = ".",
        keys: Optional[Iterable[str]] = None,
        out: Optional[TextIO] = None,
        key: int = 3,
    ) -> None:
        self.data_dir = Path(data_dir)
        self.users: list[User] = []
        self._keys = read_keys() if keys is None else iter(keys)
        self._out = sys.stdout if out is None else out
        self._cipher = CaesarCipher(key)
        self._validator = InputValidator(self._keys, self._out)

    @property
    def users_path(self) -> Path:
        return self.data_dir / USERS_FILE

    @property
    def _account_config(self) -> Path:
        return self.data_dir / ACCOUNT_ID_CONFIG

    @property
    def _movement_config(self) -> Path:
        return self.data_dir / MOVEMENT_ID_CONFIG

    def _write(self, text: str) -> None:
        self._out.write(text)
        self._out.flush()

    def _clear(self) -> None:
        if self._out is sys.stdout:
            clear_screen()

    def _pause(self) -> None:
        pause(self._keys, self._out)

    def create_user(self) -> None:
        """Register a new customer, or add an account to an existing one."""
        self._clear()
        self._write("=== Registro de nuevo usuario ===\n")
        data = self.capture_personal_data()
        existing = self.find_user_by_dni(data.dni)

        if not (data.name and data.last_name and data.dni and data.email):
            self._write("\nVolveras al menu principal.\n")
            self._pause()
            return

        if existing is not None:
            choice = add_account_menu(self._keys, self._out)
            if choice == CANCEL:
                self._write("\nRegistro cancelado por el usuario.\n")
                self._pause()
                return
            self.add_bank_account(existing, choice)
            return

        choice = account_type_menu(self._keys, self._out)
        if choice == CANCEL:
            self._write("\nRegistro cancelado por el usuario.\n")
            self._pause()
            return
        self.store_user(data, choice in ("s", "a"), choice in ("c", "a"))

    def capture_personal_data(self) -> PersonalData:
        """Read a DNI; return the known customer's data or read new details."""
        dni = self._validator.read_dni()
        existing = self.find_user_by_dni(dni)
        if existing is not None:
            data = existing.personal_data
            self._write(f"Usuario encontrado: {data.name} {data.last_name}\n")
            self._write("No es necesario capturar los datos nuevamente.\n")
            self._pause()
            return data

        self._write("Usuario no encontrado. Por favor, ingrese sus datos personales.\n")
        name = self._validator.read_letters("Nombre: ")
        last_name = self._validator.read_letters("Apellido: ")
        birth_date = self._validator.read_birth_date()
        email = self._validator.read_email()
        return PersonalData(name, last_name, dni, birth_date, email)

    def find_user_by_dni(self, dni: str) -> Optional[User]:
        """The customer with this DNI, or None."""
        return next((user for user in self.users if user.personal_data.dni == dni), None)

    def store_user(
        self, personal_data: PersonalData, open_savings: bool, open_checking: bool
    ) -> User:
        """Open the requested accounts, add the customer and save everyone."""
        user = User(personal_data)
        if open_savings:
            user.savings_account = self.create_savings_account()
        if open_checking:
            user.checking_account = self.create_checking_account()
        self.users.append(user)
        self.save_users()
        self._write("\nUsuario creado exitosamente!\n")
        self._pause()
        return user

    def _create_account(
        self, account_type: str, title: str, label: str, prompt: str, minimum: float, kind: str
    ) -> BankAccount:
        self._write(f"\n--- Datos de la cuenta {title} ---\n")
        self.data_dir.mkdir(parents=True, exist_ok=True)
        number = generate_account_number(account_type, self._account_config)
        self._write(f"Numero de cuenta {label} generado: {number}\n")
        while True:
            balance = self._validator.read_float(prompt)
            if balance < minimum:
                self._write(f"El saldo inicial debe ser al menos {minimum:g}.\n")
            elif balance > MAX_BALANCE:
                self._write(f"El saldo inicial no puede exceder {MAX_BALANCE:g}.\n")
            else:
                return BankAccount(balance, number, kind)

    def create_savings_account(self) -> BankAccount:
        """Open a savings account with an initial balance read from the user."""
        return self._create_account(
            "s",
            "de AHORROS",
            "de ahorros",
            "Saldo inicial de ahorros (minimo 10, maximo 250): ",
            MIN_SAVINGS,
            "Ahorros",
        )

    def create_checking_account(self) -> BankAccount:
        """Open a checking account with an initial balance read from the user."""
        return self._create_account(
            "c",
            "CORRIENTE",
            "corriente",
            "Saldo inicial corriente (minimo 250, maximo 50000): ",
            MIN_CHECKING,
            "Corriente",
        )

    def login(self, account_number: str) -> Optional[tuple[User, str]]:
        """Find the owner of an account number and whether it is 's' or 'c'."""
        if not account_number:
            return None
        for user in self.users:
            if user.savings_account.account_number == account_number:
                return user, "s"
            if user.checking_account.account_number == account_number:
                return user, "c"
        return None

    def edit_user(self, dni: str) -> None:
        """Let the customer with ``dni`` change their personal details."""
        user = self.find_user_by_dni(dni)
        if user is None:
            raise LookupError(f"no user with DNI {dni!r}")
        while True:
            self._clear()
            data = user.personal_data
            self._write(f"=== MODIFICANDO: {data.name} {data.last_name} ===\n")
            choice = update_user_menu(self._keys, self._out)
            done = False
            if choice == 0:
                data.name = self._validator.read_letters("Nuevo nombre: ")
                data.last_name = self._validator.read_letters("Nuevo apellido: ")
                self._write("Nombre y apellido modificados.\n")
            elif choice == 1:
                data.dni = self._validator.read_dni()
                self._write("Cedula modificada.\n")
            elif choice == 2:
                data.birth_date = self._validator.read_birth_date()
                self._write("Fecha de nacimiento modificada.\n")
            elif choice == 3:
                data.email = self._validator.read_email()
                self._write("Email modificado.\n")
            else:
                done = True
            self.save_users()
            if done:
                return
            self._pause()

    def delete_user(self, dni: str) -> None:
        """Remove the customer with ``dni`` and save."""
        user = self.find_user_by_dni(dni)
        if user is None:
            raise LookupError(f"no user with DNI {dni!r}")
        self.users.remove(user)
        self.save_users()

    def save_users(self) -> None:
        """Write every customer to the data file and encrypt it."""
        self.data_dir.mkdir(parents=True, exist_ok=True)
        save_records(self.users, self.users_path)
        self._cipher.encrypt_file(self.users_path)

    def load_users(self) -> None:
        """Replace the customers with those in the data file, if there is one."""
        path = self.users_path
        if not path.exists():
            return
        self._cipher.decrypt_file(path)
        try:
            self.users = load_records(User.read, path)
        finally:
            self._cipher.encrypt_file(path)

    def describe_users(self) -> str:
        """A listing of every customer with their accounts."""
        if not self.users:
            return "No hay usuarios.\n"
        lines = ["=== Lista de usuarios ===\n"]
        for number, user in enumerate(self.users, start=1):
            data = user.personal_data
            birth = data.birth_date
            savings = user.savings_account
            checking = user.checking_account
            lines.append(
                f"Usuario #{number}:\n"
                f"  Nombre: {data.name} {data.last_name}\n"
                f"  Cedula: {data.dni}\n"
                f"  Email: {data.email}\n"
                f"  Fecha Nacimiento: {birth.day}/{birth.month}/{birth.year.year}\n"
                f"  Cuenta Ahorros: {savings.account_number}"
                f" | Saldo: ${_money(savings.balance)}\n"
                f"  Cuenta Corriente: {checking.account_number}"
                f" | Saldo: ${_money(checking.balance)}\n"
                f"{_RULE}\n"
            )
        return "".join(lines)

    def describe_all_movements(self) -> str:
        """Every customer followed by their movements."""
        if not self.users:
            return "No hay usuarios cargados.\n"
        lines = []
        for user in self.users:
            data = user.personal_data
            lines.append(f"Usuario: {data.name} DNI: {data.dni}\n")
            if not user.movements:
                lines.append("  Sin movimientos.\n")
            for number, movement in enumerate(user.movements, start=1):
                lines.append(
                    f"  Movimiento #{number}: Monto: {_money(movement.amount)}, "
                    f"DNI: {movement.user_dni}, Fecha: " + movement.date.describe()
                )
        return "".join(lines)

    @staticmethod
    def _check(user: Optional[User], amount: float) -> User:
        if user is None:
            raise ValueError("Usuario invalido.")
        if amount <= 0:
            raise ValueError("El monto debe ser mayor que cero.")
        return user

    def _account(self, user: User, account_type: str) -> BankAccount:
        if account_type == "s":
            return user.savings_account
        if account_type == "c":
            return user.checking_account
        raise ValueError("Tipo de cuenta invalido.")

    def deposit(
        self, user: Optional[User], amount: float, account_type: str, date: Date
    ) -> Deposit:
        """Pay ``amount`` into the account, record the movement and save."""
        owner = self._check(user, amount)
        account = self._account(owner, account_type)
        account.balance += amount
        self.data_dir.mkdir(parents=True, exist_ok=True)
        movement = Deposit(amount, owner, date, next_movement_id(self._movement_config))
        owner.movements.append(movement)
        self._write("Deposito exitoso.\n")
        self._write(movement.receipt(account_type))
        self.save_users()
        return movement

    def withdraw(
        self, user: Optional[User], amount: float, account_type: str, date: Date
    ) -> Withdrawal:
        """Take ``amount`` out of the account, record the movement and save."""
        owner = self._check(user, amount)
        account = self._account(owner, account_type)
        if account.balance < amount:
            raise InsufficientFundsError("Saldo insuficiente.")
        account.balance -= amount
        self.data_dir.mkdir(parents=True, exist_ok=True)
        movement = Withdrawal(amount, owner, date, next_movement_id(self._movement_config))
        owner.movements.append(movement)
        self._write("Retiro exitoso.\n")
        self._write(movement.receipt(account_type))
        self.save_users()
        return movement

    def query_movements(
        self, predicate: Callable[[BankMovement], bool]
    ) -> list[BankMovement]:
        """Every movement of every customer for which ``predicate`` holds."""
        return [
            movement
            for user in self.users
            for movement in user.movements
            if predicate(movement)
        ]

    def add_bank_account(self, user: User, account_type: str) -> bool:
        """Open a savings ('s') or checking ('c') account the user lacks."""
        if account_type == "s":
            if user.savings_account.account_number:
                self._write("Ya existe una cuenta de ahorros para este usuario.\n")
                self._pause()
                return False
            user.savings_account = self.create_savings_account()
            self._write("Cuenta de ahorros creada exitosamente.\n")
        elif account_type == "c":
            if user.checking_account.account_number:
                self._write("Ya existe una cuenta corriente para este usuario.\n")
                self._pause()
                return False
            user.checking_account = self.create_checking_account()
            self._write("Cuenta corriente creada exitosamente.\n")
        else:
            raise ValueError("Tipo de cuenta no reconocido.")
        self.save_users()
        return True