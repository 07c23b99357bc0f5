"""The option menus of the banking desk."""

from __future__ import annotations

from typing import Iterable, Optional, TextIO

from bankdesk.console import CursorMenu

MAIN_OPTIONS = (
    "Crear cuenta",
    "Login",
    "Menu de ayuda",
    "Mostrar usuarios",
    "Consultar movimientos",
    "Restaurar backup",
    "Generar archivo descifrado para demostracion",
    "Salir",
)
ADD_ACCOUNT_OPTIONS = ("Cuenta de Ahorros", "Cuenta Corriente", "Cancelar")
ACCOUNT_TYPE_OPTIONS = (
    "Cuenta de Ahorros",
    "Cuenta Corriente",
    "Ambas cuentas (Ahorros y Corriente)",
    "Cancelar",
)
UPDATE_USER_OPTIONS = (
    "Modificar nombre y apellido",
    "Modificar cedula",
    "Modificar fecha de nacimiento",
    "Modificar email",
    "Volver",
)
OPERATIONS_OPTIONS = ("Deposito", "Retiro", "Modificar mis datos", "Volver")
QUERY_OPTIONS = (
    "Consultar por rango de fechas",
    "Consultar por nombre y DNI",
    "Consultar por monto minimo",
    "Volver",
)

CANCEL = "x"


def _choose(
    options: Iterable[str], keys: Optional[Iterable[str]], out: Optional[TextIO]
) -> int:
    return CursorMenu(options, keys, out).run()


def main_menu(keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None) -> int:
    """Index of the chosen main-menu option."""
    return _choose(MAIN_OPTIONS, keys, out)


def account_type_menu(
    keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None
) -> str:
    """'s' savings, 'c' checking, 'a' both, or 'x' to cancel."""
    return ("s", "c", "a", CANCEL)[_choose(ACCOUNT_TYPE_OPTIONS, keys, out)]


def add_account_menu(
    keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None
) -> str:
    """'s' savings, 'c' checking, or 'x' to cancel."""
    return ("s", "c", CANCEL)[_choose(ADD_ACCOUNT_OPTIONS, keys, out)]


def update_user_menu(
    keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None
) -> int:
    """Index of the personal field to edit; 4 means go back."""
    return _choose(UPDATE_USER_OPTIONS, keys, out)


def operations_menu(
    keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None
) -> int:
    """Index of the banking operation; 3 means go back."""
    return _choose(OPERATIONS_OPTIONS, keys, out)


def query_menu(keys: Optional[Iterable[str]] = None, out: Optional[TextIO] = None) -> int:
    """Index of the movement query; 3 means go back."""
    return _choose(QUERY_OPTIONS, keys, out)