# cipherkit/errors.py
"""
Error types raised by the cipherkit transforms.
Every error is local to one call; callers catch and report.
"""


class CipherKitError(ValueError):
    pass


class FormatError(CipherKitError):
    """Malformed hex / binary / Base58 / Playfair input."""


class InvalidCharacterError(FormatError):
    def __init__(self, char: str, position: int, alphabet_name: str = "Base58"):
        self.char = char
        self.position = position
        super().__init__(f"Invalid {alphabet_name} character: {char!r}")


class DecodeError(CipherKitError):
    """Byte sequence is not valid UTF-8."""


class InvalidArgumentError(CipherKitError):
    pass
