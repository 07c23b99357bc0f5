import pytest

from bankdesk.cipher import CaesarCipher


def test_encrypt_shifts_each_byte(tmp_path):
    path = tmp_path / "plain.dat"
    path.write_bytes(b"abc")
    CaesarCipher(3).encrypt_file(path)
    assert path.read_bytes() == b"def"


def test_default_key_is_three(tmp_path):
    path = tmp_path / "plain.dat"
    path.write_bytes(b"abc")
    CaesarCipher().encrypt_file(path)
    assert path.read_bytes() == b"def"


def test_shift_wraps_around(tmp_path):
    path = tmp_path / "edge.dat"
    path.write_bytes(b"\xff\x00")
    cipher = CaesarCipher(1)
    cipher.encrypt_file(path)
    assert path.read_bytes() == b"\x00\x01"
    cipher.decrypt_file(path)
    assert path.read_bytes() == b"\xff\x00"


def test_round_trip_all_bytes(tmp_path):
    path = tmp_path / "all.dat"
    original = bytes(range(256))
    path.write_bytes(original)
    cipher = CaesarCipher(3)
    cipher.encrypt_file(path)
    assert path.read_bytes() != original
    assert len(path.read_bytes()) == len(original)
    cipher.decrypt_file(path)
    assert path.read_bytes() == original


def test_empty_file_round_trip(tmp_path):
    path = tmp_path / "empty.dat"
    path.write_bytes(b"")
    cipher = CaesarCipher(5)
    cipher.encrypt_file(path)
    cipher.decrypt_file(path)
    assert path.read_bytes() == b""


def test_decrypt_file_to_leaves_source(tmp_path):
    source = tmp_path / "users.dat"
    target = tmp_path / "users_plain.dat"
    original = b"some binary \x00\x01 data"
    source.write_bytes(original)
    cipher = CaesarCipher(3)
    cipher.encrypt_file(source)
    encrypted = source.read_bytes()
    cipher.decrypt_file_to(source, target)
    assert target.read_bytes() == original
    assert source.read_bytes() == encrypted


def test_missing_file_raises(tmp_path):
    cipher = CaesarCipher(3)
    with pytest.raises(FileNotFoundError):
        cipher.encrypt_file(tmp_path / "absent.dat")
    with pytest.raises(FileNotFoundError):
        cipher.decrypt_file_to(tmp_path / "absent.dat", tmp_path / "out.dat")
    assert not (tmp_path / "out.dat").exists()