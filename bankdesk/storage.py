"""Little-endian binary records and the files that hold them."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import BinaryIO, Callable, Iterable, Protocol, TypeVar, Union

PathLike = Union[str, Path]

_INT = struct.Struct("<i")
_FLOAT = struct.Struct("<f")
_SIZE = struct.Struct("<Q")


class Record(Protocol):
    def write(self, stream: BinaryIO) -> None: ...


T = TypeVar("T")


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    data = stream.read(size)
    if len(data) != size:
        raise EOFError(f"expected {size} bytes, got {len(data)}")
    return data


def write_int(stream: BinaryIO, value: int) -> None:
    """Write a signed 32-bit integer."""
    stream.write(_INT.pack(value))


def read_int(stream: BinaryIO) -> int:
    """Read a signed 32-bit integer."""
    return _INT.unpack(_read_exact(stream, _INT.size))[0]


def write_float(stream: BinaryIO, value: float) -> None:
    """Write a single-precision float."""
    stream.write(_FLOAT.pack(value))


def read_float(stream: BinaryIO) -> float:
    """Read a single-precision float."""
    return _FLOAT.unpack(_read_exact(stream, _FLOAT.size))[0]


def write_bool(stream: BinaryIO, value: bool) -> None:
    """Write a boolean as one byte."""
    stream.write(b"\x01" if value else b"\x00")


def read_bool(stream: BinaryIO) -> bool:
    """Read a one-byte boolean."""
    return _read_exact(stream, 1) != b"\x00"


def write_string(stream: BinaryIO, text: str) -> None:
    """Write a string as a 32-bit byte length followed by its UTF-8 bytes."""
    data = text.encode("utf-8")
    write_int(stream, len(data))
    stream.write(data)


def read_string(stream: BinaryIO) -> str:
    """Read a string written by :func:`write_string`."""
    length = read_int(stream)
    if length < 0:
        raise ValueError(f"negative string length: {length}")
    return _read_exact(stream, length).decode("utf-8")


def save_int(value: int, path: PathLike) -> None:
    """Replace the file at ``path`` with a single integer."""
    with open(path, "wb") as stream:
        write_int(stream, value)


def load_int(path: PathLike) -> int:
    """Read the integer stored by :func:`save_int`."""
    with open(path, "rb") as stream:
        return read_int(stream)


def save_string(value: str, path: PathLike) -> None:
    """Replace the file at ``path`` with a string behind a 64-bit length."""
    data = value.encode("utf-8")
    with open(path, "wb") as stream:
        stream.write(_SIZE.pack(len(data)))
        stream.write(data)


def load_string(path: PathLike) -> str:
    """Read the string stored by :func:`save_string`."""
    with open(path, "rb") as stream:
        (length,) = _SIZE.unpack(_read_exact(stream, _SIZE.size))
        return _read_exact(stream, length).decode("utf-8")


def write_records(stream: BinaryIO, records: Iterable[Record]) -> None:
    """Write a record count followed by every record."""
    items = list(records)
    write_int(stream, len(items))
    for record in items:
        record.write(stream)


def read_records(stream: BinaryIO, factory: Callable[[BinaryIO], T]) -> list[T]:
    """Read records written by :func:`write_records`, building each with ``factory``."""
    count = read_int(stream)
    return [factory(stream) for _ in range(count)]


def save_records(records: Iterable[Record], path: PathLike) -> None:
    """Replace the file at ``path`` with the given records."""
    with open(path, "wb") as stream:
        write_records(stream, records)


def load_records(factory: Callable[[BinaryIO], T], path: PathLike) -> list[T]:
    """Read all records stored by :func:`save_records`."""
    with open(path, "rb") as stream:
        return read_records(stream, factory)