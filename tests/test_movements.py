import io

import pytest

from bankdesk.accounts import BankAccount
from bankdesk.dates import Clock, Date
from bankdesk.movements import (
    BankMovement,
    Deposit,
    Withdrawal,
    next_movement_id,
)
from bankdesk.personal import PersonalData
from bankdesk.storage import load_int
from bankdesk.users import User


def _user():
    return User(
        personal_data=PersonalData(
            "Ana", "Lopez", "1710034065", Date(1990, 5, 17), "ana@example.com"
        ),
        savings_account=BankAccount(150.0, "88112", "Ahorros"),
        checking_account=BankAccount(300.0, "8820000029", "Corriente"),
    )


def test_next_movement_id_sequence(tmp_path):
    config = tmp_path / "movements.dat"
    assert next_movement_id(config) == "23230-1"
    assert next_movement_id(config) == "23230-2"
    assert load_int(config) == 3


def test_movement_takes_dni_from_user():
    movement = BankMovement(20.0, _user(), Date(2024, 3, 1), "23230-9")
    assert movement.user_dni == "1710034065"
    assert movement.id == "23230-9"


def test_round_trip():
    date = Date(2024, 3, 1, time=Clock(10, 20, 30))
    movement = Deposit(12.5, _user(), date, "23230-7")
    stream = io.BytesIO()
    movement.write(stream)
    stream.seek(0)
    loaded = BankMovement.read(stream)
    assert loaded.id == "23230-7"
    assert loaded.amount == 12.5
    assert loaded.user_dni == "1710034065"
    assert loaded.date == date
    assert loaded.date.time == Clock(10, 20, 30)
    assert loaded.user is None


def test_base_receipt():
    movement = BankMovement(20.0, _user(), Date(2024, 3, 1), "23230-4")
    text = movement.receipt("n")
    assert text.startswith(">>> IMPRIMIENDO RECIBO <<<\n")
    assert "[BankMovement] Monto: 20\n" in text
    assert "DNI: 1710034065\n" in text
    assert text.endswith("ID de Movimiento: 23230-4\n")


def test_deposit_receipt_savings():
    deposit = Deposit(50.0, _user(), Date(2024, 3, 1), "23230-5")
    text = deposit.receipt("s")
    assert "Recibo de Deposito\n" in text
    assert "Usuario: Ana\n" in text
    assert "Cuenta Destino: Ana\n" in text
    assert 'Saldo Actual "Ahorros": 150\n' in text
    assert "Corriente" not in text


def test_withdrawal_receipt_checking():
    withdrawal = Withdrawal(25.5, _user(), Date(2024, 3, 1), "23230-6")
    text = withdrawal.receipt("c")
    assert "Recibo de Retiro\n" in text
    assert "Monto: 25.5\n" in text
    assert "Usuario (DNI): 1710034065\n" in text
    assert 'Fecha: Saldo Actual "Corriente": 300\n' in text
    assert "ID de Movimiento: 23230-6\n" in text


def test_withdrawal_receipt_without_account_type():
    withdrawal = Withdrawal(1.0, _user(), Date(2024, 3, 1), "23230-8")
    assert "Saldo Actual" not in withdrawal.receipt("n")


def test_deposit_receipt_needs_user():
    deposit = Deposit(5.0, None, Date(2024, 3, 1), "23230-3")
    with pytest.raises(ValueError):
        deposit.receipt("s")