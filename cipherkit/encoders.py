# cipherkit/encoders.py
"""
Function-level API consumed by the web shell, plus a dispatch table
keyed by tool name. Every function is pure: explicit arguments in,
explicit result out.
"""
import logging
from enum import Enum

from cipherkit import base58 as _base58
from cipherkit import caesar as _caesar
from cipherkit import md5 as _md5
from cipherkit import playfair as _playfair
from cipherkit import vigenere as _vigenere
from cipherkit.bytecodec import (
    binary_to_bytes,
    bytes_to_binary,
    bytes_to_hex,
    bytes_to_text,
    hex_to_bytes,
    text_to_bytes,
)
from cipherkit.errors import InvalidArgumentError

log = logging.getLogger(__name__)

BYTE_FORMATS = ("text", "hex", "binary")


class Direction(Enum):
    ENCODE = "encode"
    DECODE = "decode"

    @classmethod
    def parse(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise InvalidArgumentError(f"Unknown direction: {value!r}") from None


# ==============================
#  BASE58
# ==============================
def base58_encode(data: bytes) -> str:
    return _base58.encode(data)


def base58_decode(text: str) -> bytes:
    return _base58.decode(text)


def _read_bytes(text: str, fmt: str) -> bytes:
    if fmt == "text":
        return text_to_bytes(text)
    if fmt == "hex":
        return hex_to_bytes(text)
    if fmt == "binary":
        return binary_to_bytes(text)
    raise InvalidArgumentError(f"Unknown input format: {fmt!r}")


def _render_bytes(data: bytes, fmt: str) -> str:
    if fmt == "text":
        return bytes_to_text(data)
    if fmt == "hex":
        return bytes_to_hex(data)
    if fmt == "binary":
        return bytes_to_binary(data)
    raise InvalidArgumentError(f"Unknown output format: {fmt!r}")


def base58_encode_as(text: str, fmt: str = "text") -> str:
    if not text.strip():
        return ""
    return base58_encode(_read_bytes(text, fmt))


def base58_decode_as(text: str, fmt: str = "text") -> str:
    if not text.strip():
        return ""
    return _render_bytes(base58_decode(text.strip()), fmt)


# ==============================
#  HEX
# ==============================
def hex_encode(text: str, fmt: str = "plain") -> str:
    return bytes_to_hex(text_to_bytes(text), fmt)


def hex_decode(text: str) -> str:
    return bytes_to_text(hex_to_bytes(text))


# ==============================
#  ROT / CAESAR / VIGENERE / PLAYFAIR
# ==============================
def rot_cipher(text: str, shift: int, charsets=None) -> str:
    return _caesar.rotate(text, shift, charsets)


def vigenere(text: str, key: str, encrypt: bool = True) -> str:
    return _vigenere.process(text, key, encrypt)


def playfair_encrypt(text: str, keyword: str) -> str:
    return _playfair.encrypt(text, keyword)


def playfair_decrypt(text: str, keyword: str) -> str:
    return _playfair.decrypt(text, keyword)


# ==============================
#  MD5
# ==============================
def md5(text: str) -> str:
    return _md5.md5_hex(text)


# ==============================
#  Dispatch
# ==============================
def _opt_format(options, allowed, default):
    fmt = str(options.get("format") or default).strip().lower()
    if fmt not in allowed:
        raise InvalidArgumentError(
            f"Unknown format: {fmt!r} (expected one of {', '.join(allowed)})"
        )
    return fmt


def _shift(key, default):
    if key is None or str(key).strip() == "":
        return default
    try:
        return int(str(key).strip())
    except ValueError:
        raise InvalidArgumentError(f"Shift must be an integer, got {key!r}") from None


def _need_key(key):
    if not key or not str(key).strip():
        raise InvalidArgumentError("Key required for this cipher.")
    return key


def _base58_tool(direction, text, key, options):
    fmt = _opt_format(options, BYTE_FORMATS, "text")
    if direction is Direction.ENCODE:
        return base58_encode_as(text, fmt)
    return base58_decode_as(text, fmt)


def _hex_tool(direction, text, key, options):
    if direction is Direction.ENCODE:
        fmt = _opt_format(options, ("plain", "prefixed", "spaced", "c-array"), "plain")
        return hex_encode(text, fmt)
    return hex_decode(text)


def _rot_tool(default_shift):
    def run(direction, text, key, options):
        shift = _shift(key, default_shift)
        if direction is Direction.DECODE:
            shift = -shift
        return rot_cipher(text, shift, _caesar.as_charsets(options))
    return run


def _vigenere_tool(direction, text, key, options):
    return vigenere(text, _need_key(key), direction is Direction.ENCODE)


def _playfair_tool(direction, text, key, options):
    _need_key(key)
    if direction is Direction.ENCODE:
        return playfair_encrypt(text, key)
    return playfair_decrypt(text, key)


def _md5_tool(direction, text, key, options):
    if direction is Direction.DECODE:
        raise InvalidArgumentError("MD5 is a one-way hash and cannot be decoded.")
    return md5(text)


TOOLS = {
    "base58":   _base58_tool,
    "hex":      _hex_tool,
    "rot":      _rot_tool(13),
    "caesar":   _rot_tool(3),
    "vigenere": _vigenere_tool,
    "playfair": _playfair_tool,
    "md5":      _md5_tool,
}


def perform(tool: str, direction, text: str, key: str = "", options=None) -> str:
    """Run one tool in one direction. Raises CipherKitError on bad input."""
    name = (tool or "").strip().lower()
    if name not in TOOLS:
        raise InvalidArgumentError(f"Unsupported cipher: {tool}")
    direction = Direction.parse(direction)
    log.debug("perform tool=%s direction=%s len=%d", name, direction.value, len(text))
    return TOOLS[name](direction, text, key, options or {})
