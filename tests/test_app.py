import io
import sys

import pytest

from bankdesk.accounts import BankAccount
from bankdesk.app import format_results, main, run_operations, show_movements_query
from bankdesk.console import DOWN, ENTER, UP
from bankdesk.dates import Date
from bankdesk.input_validator import dni_check_digit
from bankdesk.movements import Deposit, Withdrawal
from bankdesk.personal import PersonalData
from bankdesk.user_manager import UserManager
from bankdesk.users import User

DNI_BODY = "171003406"
DNI = DNI_BODY + str(dni_check_digit(DNI_BODY))
RESULT_RULE = "-" * 30


def chars(text):
    return list(text) + [ENTER]


def make_user(balance=100.0):
    data = PersonalData("Ana", "Lopez", DNI, Date(1990, 1, 1), "ana@example.com")
    return User(data, savings_account=BankAccount(balance, "SAVINGS-TEST", "Ahorros"))


def make_manager(tmp_path, keys, out, users=()):
    manager = UserManager(tmp_path, keys, out)
    manager.users.extend(users)
    return manager


def test_format_results_empty():
    assert format_results([]) == "No movements found with that criteria.\n"


def test_format_results_lists_every_receipt():
    user = make_user()
    moves = [
        Deposit(10.0, user, Date(2024, 5, 10), "ID-A"),
        Withdrawal(5.0, user, Date(2024, 5, 11), "ID-B"),
    ]
    text = format_results(moves)
    assert text.startswith("\n=== Resultados de la consulta ===\n")
    assert "ID de Movimiento: ID-A" in text
    assert "ID de Movimiento: ID-B" in text
    assert text.splitlines().count(RESULT_RULE) == len(moves)


def test_run_operations_deposit(tmp_path):
    user = make_user()
    keys = iter([ENTER] + chars("50") + ["x", UP, ENTER])
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    run_operations(manager, user, "s", keys, out)
    assert user.savings_account.balance == 150.0
    assert len(user.movements) == 1
    assert isinstance(user.movements[0], Deposit)
    assert "Deposito exitoso." in out.getvalue()

    reloaded = UserManager(tmp_path, iter([]), io.StringIO())
    reloaded.load_users()
    assert reloaded.users[0].savings_account.balance == 150.0
    assert len(reloaded.users[0].movements) == 1


def test_run_operations_deposit_rejects_out_of_range(tmp_path):
    user = make_user()
    keys = iter([ENTER] + chars("0") + chars("60000") + chars("10") + ["x", UP, ENTER])
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    run_operations(manager, user, "s", keys, out)
    text = out.getvalue()
    assert "El monto debe ser mayor que 0" in text
    assert "El monto maximo permitido es 50,000" in text
    assert user.savings_account.balance == 110.0


def test_run_operations_withdrawal(tmp_path):
    user = make_user()
    keys = iter([DOWN, ENTER] + chars("30") + ["x", UP, ENTER])
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    run_operations(manager, user, "s", keys, out)
    assert user.savings_account.balance == 70.0
    assert isinstance(user.movements[0], Withdrawal)


def test_run_operations_insufficient_funds(tmp_path):
    user = make_user()
    keys = iter([DOWN, ENTER] + chars("500") + ["x", UP, ENTER])
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    run_operations(manager, user, "s", keys, out)
    assert user.savings_account.balance == 100.0
    assert user.movements == []
    assert "Saldo insuficiente." in out.getvalue()


def test_run_operations_eof_raises(tmp_path):
    user = make_user()
    keys = iter([ENTER] + list("5"))
    manager = make_manager(tmp_path, keys, io.StringIO(), [user])
    with pytest.raises(EOFError):
        run_operations(manager, user, "s", keys, io.StringIO())


def with_movements(user):
    user.movements.extend(
        [
            Deposit(50.0, user, Date(2024, 5, 10), "MOV-1"),
            Deposit(250.0, user, Date(2024, 5, 20), "MOV-2"),
            Withdrawal(75.0, user, Date(2024, 7, 1), "MOV-3"),
        ]
    )
    return user


def test_query_by_minimum_amount(tmp_path):
    user = with_movements(make_user())
    keys = iter([DOWN, DOWN, ENTER] + chars("200") + [ENTER, UP, ENTER])
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    show_movements_query(manager, keys, out)
    text = out.getvalue()
    assert "ID de Movimiento: MOV-2" in text
    assert "ID de Movimiento: MOV-1" not in text
    assert "ID de Movimiento: MOV-3" not in text


def test_query_by_date_range(tmp_path):
    user = with_movements(make_user())
    keys = iter(
        [ENTER]
        + chars("2024") + chars("5") + chars("1")
        + chars("2024") + chars("5") + chars("31")
        + [ENTER, UP, ENTER]
    )
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    show_movements_query(manager, keys, out)
    text = out.getvalue()
    assert "ID de Movimiento: MOV-1" in text
    assert "ID de Movimiento: MOV-2" in text
    assert "ID de Movimiento: MOV-3" not in text


def test_query_date_is_reread_when_invalid(tmp_path):
    user = with_movements(make_user())
    keys = iter(
        [ENTER]
        + chars("2023") + chars("2") + chars("30")
        + chars("2024") + chars("7") + chars("1")
        + chars("2024") + chars("7") + chars("1")
        + [ENTER, UP, ENTER]
    )
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    show_movements_query(manager, keys, out)
    text = out.getvalue()
    assert "Fecha invalida. Intente de nuevo." in text
    assert "ID de Movimiento: MOV-3" in text
    assert "ID de Movimiento: MOV-1" not in text


def test_query_by_name_and_dni(tmp_path):
    user = with_movements(make_user())
    other = make_user()
    other.personal_data.name = "Luis"
    other.movements.append(Deposit(99.0, other, Date(2024, 1, 1), "MOV-OTHER"))
    keys = iter([DOWN, ENTER] + chars("Ana") + chars(DNI) + [ENTER, UP, ENTER])
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user, other])
    show_movements_query(manager, keys, out)
    text = out.getvalue()
    assert text.count("ID de Movimiento: MOV-") == 3
    assert "MOV-OTHER" not in text


def test_query_with_no_match(tmp_path):
    user = with_movements(make_user())
    keys = iter([DOWN, DOWN, ENTER] + chars("9000") + [ENTER, UP, ENTER])
    out = io.StringIO()
    manager = make_manager(tmp_path, keys, out, [user])
    show_movements_query(manager, keys, out)
    assert "No movements found with that criteria." in out.getvalue()


def test_main_ends_cleanly_on_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--data-dir", str(tmp_path)]) == 0
    assert "========== Menu Manager ==========" in capsys.readouterr().out


def test_main_loads_existing_users(tmp_path, monkeypatch, capsys):
    writer = UserManager(tmp_path, iter([]), io.StringIO())
    writer.users.append(make_user())
    writer.save_users()
    before = writer.users_path.read_bytes()
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n"))
    assert main(["--data-dir", str(tmp_path)]) == 0
    assert "Registro de nuevo usuario" in capsys.readouterr().out
    assert writer.users_path.read_bytes() == before