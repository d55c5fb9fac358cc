# cipherkit/bytecodec.py
import re

from cipherkit.errors import DecodeError, FormatError, InvalidArgumentError

HEX_DIGITS = "0123456789abcdef"
HEX_FORMATS = ("plain", "prefixed", "spaced", "c-array")

# prefixes and separators a pasted hex dump may carry
_HEX_NOISE = re.compile(r"0[xX]|\\x|[{}\[\],\s]")
_BIN_NOISE = re.compile(r"\s")


# ==============================
#  TEXT <-> BYTES
# ==============================
def text_to_bytes(text: str) -> bytes:
    return text.encode("utf-8")


def bytes_to_text(data: bytes) -> str:
    try:
        return bytes(data).decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DecodeError(
            f"Invalid UTF-8 sequence at byte {exc.start}: {exc.reason}"
        ) from exc


# ==============================
#  HEX
# ==============================
def bytes_to_hex(data: bytes, fmt: str = "plain") -> str:
    """
    Render bytes as lowercase hex.
      plain     -> 48656c
      prefixed  -> 0x48 0x65 0x6c
      spaced    -> 48 65 6c
      c-array   -> {0x48, 0x65, 0x6c}
    """
    pairs = [HEX_DIGITS[b >> 4] + HEX_DIGITS[b & 0x0F] for b in data]

    if fmt == "plain":
        return "".join(pairs)
    if fmt == "prefixed":
        return " ".join(f"0x{p}" for p in pairs)
    if fmt == "spaced":
        return " ".join(pairs)
    if fmt == "c-array":
        return "{" + ", ".join(f"0x{p}" for p in pairs) + "}"
    raise InvalidArgumentError(
        f"Unknown hex format: {fmt!r} (expected one of {', '.join(HEX_FORMATS)})"
    )


def hex_to_bytes(text: str) -> bytes:
    clean = _HEX_NOISE.sub("", text)

    for ch in clean:
        if ch.lower() not in HEX_DIGITS:
            raise FormatError(f"Invalid hex character: {ch!r}")
    if len(clean) % 2:
        raise FormatError("Invalid hex string length")

    out = bytearray()
    for i in range(0, len(clean), 2):
        hi = HEX_DIGITS.index(clean[i].lower())
        lo = HEX_DIGITS.index(clean[i + 1].lower())
        out.append((hi << 4) | lo)
    return bytes(out)


# ==============================
#  BINARY (8-bit groups)
# ==============================
def bytes_to_binary(data: bytes, sep: str = "") -> str:
    return sep.join(format(b, "08b") for b in data)


def binary_to_bytes(text: str) -> bytes:
    bits = _BIN_NOISE.sub("", text)

    bad = next((ch for ch in bits if ch not in "01"), None)
    if bad is not None:
        raise FormatError(f"Invalid binary character: {bad!r}")
    if len(bits) % 8:
        raise FormatError("Binary string length must be multiple of 8")

    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))
