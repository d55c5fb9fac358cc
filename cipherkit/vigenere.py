# cipherkit/vigenere.py
import secrets
import string

from cipherkit.errors import InvalidArgumentError

ALPHABET = string.ascii_uppercase


def clean_key(key: str) -> str:
    return "".join(ch for ch in key.upper() if "A" <= ch <= "Z")


def process(text: str, key: str, encrypt: bool = True) -> str:
    """
    Polyalphabetic shift. Only ASCII letters consume a key position;
    everything else is copied and leaves the key index where it was.
    A key with no letters in it gives an empty result.
    """
    key = clean_key(key or "")
    if not key:
        return ""

    sign = 1 if encrypt else -1
    result = []
    ki = 0
    for ch in text:
        if "A" <= ch <= "Z" or "a" <= ch <= "z":
            base = "A" if ch.isupper() else "a"
            shift = sign * (ord(key[ki % len(key)]) - 65)
            result.append(chr((ord(ch) - ord(base) + shift) % 26 + ord(base)))
            ki += 1
        else:
            result.append(ch)
    return "".join(result)


def vigenere_encode(text: str, key: str) -> str:
    return process(text, key, True)


def vigenere_decode(text: str, key: str) -> str:
    return process(text, key, False)


def random_key(length: int = 8) -> str:
    if length < 1:
        raise InvalidArgumentError("Key length must be at least 1")
    return "".join(secrets.choice(ALPHABET) for _ in range(length))
