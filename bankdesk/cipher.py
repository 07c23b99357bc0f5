"""A byte-wise Caesar shift applied to whole files."""

from __future__ import annotations

from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


def _shift(data: bytes, amount: int) -> bytes:
    return bytes((byte + amount) % 256 for byte in data)


class CaesarCipher:
    """Shifts every byte of a file by a fixed key, wrapping around at 256."""

    def __init__(self, key: int = 3) -> None:
        self.key = key

    def encrypt_file(self, path: PathLike) -> None:
        """Encrypt the file at ``path`` in place."""
        target = Path(path)
        target.write_bytes(_shift(target.read_bytes(), self.key))

    def decrypt_file(self, path: PathLike) -> None:
        """Decrypt the file at ``path`` in place."""
        target = Path(path)
        target.write_bytes(_shift(target.read_bytes(), -self.key))

    def decrypt_file_to(self, source: PathLike, target: PathLike) -> None:
        """Write the decryption of ``source`` to ``target``, leaving ``source`` alone."""
        data = Path(source).read_bytes()
        Path(target).write_bytes(_shift(data, -self.key))