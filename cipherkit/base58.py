# cipherkit/base58.py
"""
Base58 (Bitcoin alphabet) with leading-zero preservation.

The buffer is treated as one big-endian integer, re-expressed digit by
digit in the target base. Leading 0x00 bytes map to leading '1' symbols
and back, so the mapping is a bijection.
"""
from typing import List

from cipherkit.errors import InvalidCharacterError

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE = len(ALPHABET)
ZERO_SYMBOL = ALPHABET[0]

_INDEX = {ch: i for i, ch in enumerate(ALPHABET)}


def _strip_zero_accumulator(digits: List[int]) -> List[int]:
    # the accumulator starts as [0]; a zero-valued buffer leaves it untouched
    if digits == [0]:
        return []
    return digits


def encode(data: bytes) -> str:
    if not data:
        return ""

    # little-endian base-58 digits
    digits = [0]
    for byte in data:
        carry = byte
        for j in range(len(digits)):
            carry += digits[j] << 8
            digits[j] = carry % BASE
            carry //= BASE
        while carry:
            digits.append(carry % BASE)
            carry //= BASE

    digits = _strip_zero_accumulator(digits)

    for byte in data:
        if byte:
            break
        digits.append(0)

    return "".join(ALPHABET[d] for d in reversed(digits))


def decode(text: str) -> bytes:
    if not text:
        return b""

    # little-endian base-256 digits
    out = [0]
    for pos, ch in enumerate(text):
        value = _INDEX.get(ch)
        if value is None:
            raise InvalidCharacterError(ch, pos)

        carry = value
        for j in range(len(out)):
            carry += out[j] * BASE
            out[j] = carry & 0xFF
            carry >>= 8
        while carry:
            out.append(carry & 0xFF)
            carry >>= 8

    out = _strip_zero_accumulator(out)

    for ch in text:
        if ch != ZERO_SYMBOL:
            break
        out.append(0)

    return bytes(reversed(out))
