"""Encrypted backups of the user data file."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from bankdesk.cipher import CaesarCipher

PathLike = Union[str, Path]

logger = logging.getLogger(__name__)


def copy_file(source: PathLike, target: PathLike) -> None:
    """Replace ``target`` with the bytes of ``source``."""
    data = Path(source).read_bytes()
    Path(target).write_bytes(data)


def make_backup(original: PathLike, backup: PathLike, key: int = 3) -> None:
    """Copy the encrypted ``original`` to ``backup``, leaving both encrypted.

    On failure the original is put back in its encrypted form and the error
    is raised again.
    """
    cipher = CaesarCipher(key)
    cipher.decrypt_file(original)
    try:
        copy_file(original, backup)
    except OSError:
        cipher.encrypt_file(original)
        raise
    cipher.encrypt_file(backup)
    cipher.encrypt_file(original)


def restore_backup(backup: PathLike, original: PathLike, key: int = 3) -> None:
    """Overwrite ``original`` with the contents of ``backup``, both left encrypted."""
    cipher = CaesarCipher(key)
    logger.debug("decrypting backup %s", backup)
    cipher.decrypt_file(backup)
    logger.debug("backup size after decryption: %d bytes", Path(backup).stat().st_size)
    try:
        copy_file(backup, original)
    except OSError:
        cipher.encrypt_file(backup)
        raise
    logger.debug("original size after copy: %d bytes", Path(original).stat().st_size)
    cipher.encrypt_file(backup)
    cipher.encrypt_file(original)
    logger.debug("backup restored and encrypted")


def timestamped_backup_name(
    prefix: str = "users_backup_",
    ext: str = ".dat",
    now: Optional[datetime] = None,
) -> str:
    """Return ``prefix`` + YYYYMMDD_HHMMSS + ``ext`` for the given or current time."""
    moment = datetime.now() if now is None else now
    return f"{prefix}{moment:%Y%m%d_%H%M%S}{ext}"