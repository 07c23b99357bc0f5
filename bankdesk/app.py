"""The interactive banking desk: main menu, operations and movement queries."""

from __future__ import annotations

import argparse
import sys
import webbrowser
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from bankdesk.backup import make_backup, restore_backup, timestamped_backup_name
from bankdesk.cipher import CaesarCipher
from bankdesk.console import BACKSPACE, ENTER, clear_screen, pause, read_keys
from bankdesk.dates import Date, is_valid_day, month_days
from bankdesk.input_validator import InputValidator
from bankdesk.menus import main_menu, operations_menu, query_menu
from bankdesk.movements import BankMovement
from bankdesk.user_manager import MAX_BALANCE, UserManager
from bankdesk.users import User

_RESULT_RULE = "-" * 30
_MIN_AMOUNT = 0.009
_HELP_PAGE = Path("Utils") / "index.html"
_CONTINUE = "Presione Enter para continuar . . ."


def _keys_of(keys: Optional[Iterable[str]]) -> Iterator[str]:
    return read_keys() if keys is None else iter(keys)


def _clear(out: TextIO) -> None:
    if out is sys.stdout:
        clear_screen()


def _write(out: TextIO, text: str) -> None:
    out.write(text)
    out.flush()


def _wait_enter(keys: Iterator[str], out: TextIO, message: str) -> None:
    _write(out, message)
    for key in keys:
        if key == ENTER:
            _write(out, "\n")
            return
    raise EOFError("input ended while waiting for Enter")


def _read_word(keys: Iterator[str], out: TextIO, prompt: str) -> str:
    """Read one whitespace-free word, echoing it, until Enter ends a non-empty word."""
    _write(out, prompt)
    chars: list[str] = []
    for key in keys:
        if key == ENTER:
            if chars:
                _write(out, "\n")
                return "".join(chars)
        elif key == BACKSPACE:
            if chars:
                chars.pop()
                _write(out, "\b \b")
        elif len(key) == 1 and not key.isspace() and key.isprintable():
            chars.append(key)
            _write(out, key)
    raise EOFError("input ended before a word was read")


def format_results(results: Sequence[BankMovement]) -> str:
    """Text listing the receipts of the movements a query found."""
    if not results:
        return "No movements found with that criteria.\n"
    parts = ["\n=== Resultados de la consulta ===\n"]
    for movement in results:
        parts.append(movement.receipt("n"))
        parts.append(f"{_RESULT_RULE}\n")
    return "".join(parts)


def _read_deposit_amount(validator: InputValidator, out: TextIO) -> float:
    while True:
        amount = validator.read_float("\nIngrese monto a depositar: ")
        if amount <= 0:
            _write(out, "El monto debe ser mayor que 0\n")
        elif amount <= _MIN_AMOUNT:
            _write(out, "El monto minimo es 0.01\n")
        elif amount > MAX_BALANCE:
            _write(out, "El monto maximo permitido es 50,000\n")
        else:
            return amount


def _read_withdrawal_amount(validator: InputValidator, out: TextIO) -> float:
    while True:
        amount = validator.read_float("\nIngrese monto a retirar: ")
        if amount <= 0:
            _write(out, "El monto debe ser mayor que 0\n")
        if amount <= _MIN_AMOUNT:
            _write(out, "El monto minimo es 0.01\n")
        else:
            return amount


def run_operations(
    manager: UserManager,
    user: User,
    account_type: str,
    keys: Optional[Iterable[str]] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Deposit, withdraw or edit details for a logged-in customer until they go back."""
    out = sys.stdout if out is None else out
    keys = _keys_of(keys)
    validator = InputValidator(keys, out)
    label = "Ahorros" if account_type == "s" else "Corriente"
    while True:
        _clear(out)
        _write(out, f"=== Operaciones Bancarias ({label}) ===\n")
        choice = operations_menu(keys, out)
        if choice == 0:
            amount = _read_deposit_amount(validator, out)
            try:
                manager.deposit(user, amount, account_type, Date.today())
            except ValueError as error:
                _write(out, f"{error}\n")
            manager.save_users()
            pause(keys, out)
        elif choice == 1:
            amount = _read_withdrawal_amount(validator, out)
            try:
                manager.withdraw(user, amount, account_type, Date.today())
            except ValueError as error:
                _write(out, f"{error}\n")
            manager.save_users()
            pause(keys, out)
        elif choice == 2:
            manager.edit_user(user.personal_data.dni)
        else:
            return


def _read_date(validator: InputValidator, out: TextIO) -> Date:
    year = validator.read_integer("Anio: ")
    month = validator.read_integer("Mes (1-12): ")
    day = validator.read_integer("Dia: ")
    while not is_valid_day(day, month_days(month, year)):
        _write(out, "Fecha invalida. Intente de nuevo.\n")
        year = validator.read_integer("Anio: ")
        month = validator.read_integer("Mes (1-12): ")
        day = validator.read_integer("Dia: ")
    return Date(year, month, day)


def show_movements_query(
    manager: UserManager,
    keys: Optional[Iterable[str]] = None,
    out: Optional[TextIO] = None,
) -> None:
    """Query movements by date range, by customer name and DNI, or by minimum amount."""
    out = sys.stdout if out is None else out
    keys = _keys_of(keys)
    validator = InputValidator(keys, out)
    while True:
        _clear(out)
        _write(out, "==== CONSULTA DE MOVIMIENTOS ====\n")
        choice = query_menu(keys, out)
        if choice == 0:
            _write(out, "Fecha de inicio:\n")
            start = _read_date(validator, out)
            _write(out, "Fecha de fin:\n")
            end = _read_date(validator, out)
            results = manager.query_movements(lambda mov: start <= mov.date <= end)
        elif choice == 1:
            name = validator.read_letters("Ingrese el nombre: ")
            dni = validator.read_dni()
            results = manager.query_movements(
                lambda mov: mov.user is not None
                and mov.user.personal_data.name == name
                and mov.user.personal_data.dni == dni
            )
        elif choice == 2:
            minimum = validator.read_float("Ingrese el monto minimo: ")
            while minimum < 0:
                _write(out, "El monto debe ser positivo.\n")
                minimum = validator.read_float("Ingrese el monto minimo: ")
            results = manager.query_movements(lambda mov: mov.amount >= minimum)
        else:
            return
        _write(out, format_results(results))
        _wait_enter(keys, out, _CONTINUE)


def _login(manager: UserManager, keys: Iterator[str], out: TextIO) -> None:
    while True:
        _clear(out)
        _write(out, "=== LOGIN ===\n")
        number = _read_word(
            keys,
            out,
            "Ingrese numero de cuenta (ahorros o corriente), o escriba 0 para salir: ",
        )
        if number == "0":
            _write(out, "Login cancelado.\n")
            pause(keys, out)
            return
        if not manager.users:
            _write(out, "No hay usuarios registrados.\n")
            pause(keys, out)
            return
        found = manager.login(number)
        if found is None:
            _write(out, "Cuenta no encontrada. Intente de nuevo o escriba 0 para salir.\n")
            pause(keys, out)
            continue
        user, account_type = found
        label = "Cuenta de Ahorros" if account_type == "s" else "Cuenta Corriente"
        _write(out, f"Login exitoso, bienvenido {user.personal_data.name} ({label})!\n")
        pause(keys, out)
        run_operations(manager, user, account_type, keys, out)
        return


def _restore(manager: UserManager, data_dir: Path, keys: Iterator[str], out: TextIO) -> None:
    name = _read_word(keys, out, "Ingrese nombre del backup a restaurar: ")
    try:
        restore_backup(data_dir / name, manager.users_path)
    except OSError:
        _write(out, "Error al restaurar backup.\n")
    else:
        _write(out, "Backup restaurado.\n")
        manager.load_users()
    pause(keys, out)


def _decrypt_copy(data_dir: Path, keys: Iterator[str], out: TextIO) -> None:
    source = _read_word(
        keys, out, "Ingrese el nombre del archivo cifrado (ej: users.dat): "
    )
    target = _read_word(
        keys,
        out,
        "Ingrese el nombre para el archivo descifrado (ej: users_descifrado.dat): ",
    )
    try:
        CaesarCipher(3).decrypt_file_to(data_dir / source, data_dir / target)
    except OSError:
        _write(out, "Ocurrio un error al descifrar el archivo.\n")
    else:
        _write(out, f"Archivo descifrado generado exitosamente: {target}\n")
    pause(keys, out)


def _exit_with_backup(
    manager: UserManager, data_dir: Path, keys: Iterator[str], out: TextIO
) -> None:
    name = timestamped_backup_name()
    try:
        make_backup(manager.users_path, data_dir / name)
    except OSError:
        _write(out, "Error al realizar el backup.\n")
    else:
        _write(out, f"Saliendo del programa y backup realizado: {name}\n")
    manager.save_users()
    pause(keys, out)


def _serve(data_dir: Path, keys: Iterator[str], out: TextIO) -> None:
    manager = UserManager(data_dir, keys, out)
    manager.load_users()
    while True:
        _clear(out)
        _write(out, "========== Menu Manager ==========\n\n")
        choice = main_menu(keys, out)
        if choice == 0:
            manager.create_user()
        elif choice == 1:
            _login(manager, keys, out)
        elif choice == 2:
            webbrowser.open(_HELP_PAGE.resolve().as_uri())
        elif choice == 3:
            _clear(out)
            _write(out, manager.describe_users())
            _write(out, manager.describe_all_movements())
            _wait_enter(keys, out, "\nPresiona Enter para volver al menu...")
        elif choice == 4:
            show_movements_query(manager, keys, out)
        elif choice == 5:
            _restore(manager, data_dir, keys, out)
        elif choice == 6:
            _decrypt_copy(data_dir, keys, out)
        else:
            _exit_with_backup(manager, data_dir, keys, out)
            return


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive banking desk.")
    parser.add_argument(
        "--data-dir", default=".", help="directory holding the user data files"
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    try:
        _serve(Path(args.data_dir), read_keys(), out)
    except EOFError:
        _write(out, "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())