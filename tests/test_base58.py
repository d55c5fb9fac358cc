import os

import pytest

from cipherkit import base58
from cipherkit.errors import FormatError, InvalidCharacterError


def test_alphabet_is_bijective_and_skips_ambiguous_glyphs():
    assert len(base58.ALPHABET) == 58
    assert len(set(base58.ALPHABET)) == 58
    for ch in "0OIl":
        assert ch not in base58.ALPHABET


@pytest.mark.parametrize("raw, encoded", [
    (b"Hello", "9Ajdvzr"),
    (b"Hello World", "JxF12TrwUP45BMd"),
    (b"\x00\x00\x05", "116"),
    (b"\x00", "1"),
    (b"\x00\x00\x00", "111"),
    (b"\x39", "z"),
    (b"\x3a", "21"),
])
def test_known_vectors(raw, encoded):
    assert base58.encode(raw) == encoded
    assert base58.decode(encoded) == raw


def test_empty():
    assert base58.encode(b"") == ""
    assert base58.decode("") == b""


def test_leading_zero_bytes_become_leading_ones():
    assert base58.encode(bytes([0, 0, 5])).startswith("11")
    assert not base58.encode(bytes([0, 0, 5])).startswith("111")


def test_roundtrip_random_buffers():
    for n in (1, 2, 7, 32, 33, 100):
        data = b"\x00" * (n % 3) + os.urandom(n)
        assert base58.decode(base58.encode(data)) == data


def test_string_roundtrip():
    for s in ("1", "11z", "2NEpo7TZRRrLZSi2U", "1111111111"):
        assert base58.encode(base58.decode(s)) == s


@pytest.mark.parametrize("bad, pos", [("0", 0), ("abcO", 3), ("I1", 0), ("9Ajl", 3)])
def test_invalid_character_names_offender(bad, pos):
    with pytest.raises(InvalidCharacterError) as exc:
        base58.decode(bad)
    assert exc.value.char == bad[pos]
    assert exc.value.position == pos
    assert repr(bad[pos]) in str(exc.value)
    assert isinstance(exc.value, FormatError)
