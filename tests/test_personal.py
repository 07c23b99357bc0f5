import io

import pytest

from bankdesk.dates import Date
from bankdesk.personal import PersonalData


def _sample():
    return PersonalData(
        "Ana", "Pérez", "1710034065", Date(1990, 5, 17), "ana@example.com"
    )


def test_round_trip():
    data = _sample()
    stream = io.BytesIO()
    data.write(stream)
    stream.seek(0)
    loaded = PersonalData.read(stream)
    assert loaded == data
    assert loaded.birth_date.days_in_month == data.birth_date.days_in_month
    assert stream.read() == b""


def test_wire_starts_with_name_length():
    stream = io.BytesIO()
    _sample().write(stream)
    assert stream.getvalue()[:7] == b"\x03\x00\x00\x00Ana"


def test_country_defaults_empty_and_is_stored():
    data = _sample()
    assert data.country == ""
    data.country = "Ecuador"
    stream = io.BytesIO()
    data.write(stream)
    stream.seek(0)
    assert PersonalData.read(stream).country == "Ecuador"


def test_default_round_trip():
    stream = io.BytesIO()
    PersonalData().write(stream)
    stream.seek(0)
    assert PersonalData.read(stream) == PersonalData()


def test_truncated_stream_raises():
    stream = io.BytesIO()
    _sample().write(stream)
    truncated = io.BytesIO(stream.getvalue()[:10])
    with pytest.raises(EOFError):
        PersonalData.read(truncated)


def test_describe_lists_fields():
    text = _sample().describe()
    lines = text.splitlines()
    assert lines[0] == "Nombre: Ana"
    assert lines[1] == "Apellido: Pérez"
    assert lines[2] == "DNI: 1710034065"
    assert lines[3] == "Email: ana@example.com"
    assert lines[5] == "Fecha de nacimiento"