# cipherkit/caesar.py
from typing import List, Mapping, NamedTuple, Tuple, Union

from cipherkit.errors import InvalidArgumentError


class Charsets(NamedTuple):
    upper: bool = True
    lower: bool = True
    digits: bool = False


CharsetFlags = Union[Charsets, Mapping[str, bool]]

DEFAULT_CHARSETS = Charsets()

TRUE_STRINGS = {"1", "true", "yes", "on"}

PRESETS = {
    "rot1": 1,
    "rot3": 3,   # classic Caesar
    "rot5": 5,
    "rot13": 13,
    "rot18": 18,
    "rot25": 25,
}


def _flag(value, default: bool) -> bool:
    # form and query values arrive as strings ("false", "0", "on", ...)
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def as_charsets(flags: CharsetFlags = None) -> Charsets:
    if flags is None:
        return DEFAULT_CHARSETS
    if isinstance(flags, Charsets):
        return flags
    return Charsets(
        upper=_flag(flags.get("upper"), True),
        lower=_flag(flags.get("lower"), True),
        digits=_flag(flags.get("digits"), False),
    )


def _as_shift(shift) -> int:
    if isinstance(shift, float) and shift.is_integer():
        return int(shift)
    if not isinstance(shift, int):
        raise InvalidArgumentError(f"Shift must be an integer, got {shift!r}")
    return shift


def _classes(charsets: Charsets) -> List[Tuple[str, str, int]]:
    # (first, last, modulus) for every selected character class
    out = []
    if charsets.upper:
        out.append(("A", "Z", 26))
    if charsets.lower:
        out.append(("a", "z", 26))
    if charsets.digits:
        out.append(("0", "9", 10))
    return out


def rotate(text: str, shift: int, charsets: CharsetFlags = None) -> str:
    """
    Shift every character of a selected class by `shift` places, wrapping
    inside its own class (26 for letters, 10 for digits). Characters outside
    the selected classes are copied through. rotate(t, -s) undoes rotate(t, s).
    """
    shift = _as_shift(shift)
    classes = _classes(as_charsets(charsets))
    if not text or not classes:
        return text

    result = []
    for ch in text:
        for first, last, modulus in classes:
            if first <= ch <= last:
                offset = shift % modulus
                ch = chr((ord(ch) - ord(first) + offset) % modulus + ord(first))
                break
        result.append(ch)
    return "".join(result)


def caesar_encode(text: str, shift: int = 3) -> str:
    return rotate(text, shift)


def caesar_decode(text: str, shift: int = 3) -> str:
    return rotate(text, -shift)


def rot13(text: str) -> str:
    return rotate(text, PRESETS["rot13"])


def brute_force(text: str, charsets: CharsetFlags = None) -> List[Tuple[int, str]]:
    """Every candidate decryption for shifts 1..25, in order."""
    return [(shift, rotate(text, -shift, charsets)) for shift in range(1, 26)]
