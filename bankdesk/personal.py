"""Personal details of a bank customer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO

from bankdesk.dates import Date
from bankdesk.storage import read_string, write_string


@dataclass
class PersonalData:
    """Name, identity number, birth date and contact of a customer."""

    name: str = ""
    last_name: str = ""
    dni: str = ""
    birth_date: Date = field(default_factory=Date)
    email: str = ""
    country: str = ""

    def write(self, stream: BinaryIO) -> None:
        """Write name, last name, DNI, birth date, e-mail and country."""
        write_string(stream, self.name)
        write_string(stream, self.last_name)
        write_string(stream, self.dni)
        self.birth_date.write(stream)
        write_string(stream, self.email)
        write_string(stream, self.country)

    @classmethod
    def read(cls, stream: BinaryIO) -> "PersonalData":
        """Read personal data written by :meth:`write`."""
        name = read_string(stream)
        last_name = read_string(stream)
        dni = read_string(stream)
        birth_date = Date.read(stream)
        email = read_string(stream)
        country = read_string(stream)
        return cls(name, last_name, dni, birth_date, email, country)

    def describe(self) -> str:
        """Lines naming every field."""
        return (
            f"Nombre: {self.name}\n"
            f"Apellido: {self.last_name}\n"
            f"DNI: {self.dni}\n"
            f"Email: {self.email}\n"
            f"Pais: {self.country}\n"
            "Fecha de nacimiento\n"
        )