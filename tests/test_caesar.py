import string

import pytest

from cipherkit.caesar import (
    PRESETS,
    Charsets,
    as_charsets,
    brute_force,
    caesar_decode,
    caesar_encode,
    rot13,
    rotate,
)
from cipherkit.errors import InvalidArgumentError

SAMPLE = "The Quick Brown Fox, 2024! zZ 09"


def test_rot13():
    assert rot13("Hello, World!") == "Uryyb, Jbeyq!"


def test_caesar_default_shift():
    assert caesar_encode("abc xyz ABC XYZ") == "def abc DEF ABC"
    assert caesar_decode("def abc DEF ABC") == "abc xyz ABC XYZ"


def test_digits_only_when_selected():
    assert rotate("2024", 5) == "2024"
    assert rotate("2024", 5, Charsets(digits=True)) == "7579"
    assert rotate("9", 1, {"digits": True}) == "0"


def test_class_selection():
    only_upper = Charsets(upper=True, lower=False)
    assert rotate("Ab", 1, only_upper) == "Bb"
    only_lower = Charsets(upper=False, lower=True)
    assert rotate("Ab", 1, only_lower) == "Ac"
    nothing = Charsets(upper=False, lower=False, digits=False)
    assert rotate(SAMPLE, 7, nothing) == SAMPLE


def test_negative_and_large_shifts_normalise():
    assert rotate("a", -1) == "z"
    assert rotate("a", 27) == "b"
    assert rotate("a", -27) == "z"
    assert rotate("5", -16, Charsets(digits=True)) == "9"


@pytest.mark.parametrize("shift", range(-30, 31))
def test_rotate_is_inverted_by_negative_shift(shift):
    flags = Charsets(digits=True)
    assert rotate(rotate(SAMPLE, shift, flags), -shift, flags) == SAMPLE


def test_rot13_self_inverse_on_letters():
    text = string.ascii_letters * 2
    assert rot13(rot13(text)) == text


def test_non_ascii_passthrough():
    assert rotate("Ünïcödé ✓", 3) == "Üqïfögé ✓"


def test_presets():
    assert PRESETS["rot13"] == 13
    assert PRESETS["rot3"] == 3
    assert sorted(PRESETS.values()) == [1, 3, 5, 13, 18, 25]


def test_as_charsets_defaults():
    assert as_charsets(None) == Charsets(True, True, False)
    assert as_charsets({}) == Charsets(True, True, False)
    assert as_charsets({"lower": False}) == Charsets(True, False, False)


def test_brute_force_lists_all_shifts():
    ciphertext = caesar_encode("attack at dawn", 7)
    results = brute_force(ciphertext)
    assert [s for s, _ in results] == list(range(1, 26))
    assert dict(results)[7] == "attack at dawn"


def test_integral_float_shift_accepted():
    assert rotate("abc", 1.0) == "bcd"


@pytest.mark.parametrize("shift", [1.5, "3", None])
def test_non_integer_shift_rejected(shift):
    with pytest.raises(InvalidArgumentError, match="integer"):
        rotate("abc", shift)


def test_string_flags_in_mapping():
    assert as_charsets({"lower": "false", "digits": "on"}) == Charsets(True, False, True)
