# cipherkit/md5.py
"""
MD5 (RFC 1321) written out by hand.

Merkle-Damgard: pad the message to 448 mod 512 bits, append the 64-bit
little-endian bit length, then run each 512-bit block through 64 steps
of the four nonlinear round functions.
"""
import math
import struct

MASK32 = 0xFFFFFFFF

INIT_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# per-step left-rotation amounts
SHIFTS = (
    [7, 12, 17, 22] * 4
    + [5, 9, 14, 20] * 4
    + [4, 11, 16, 23] * 4
    + [6, 10, 15, 21] * 4
)

# K[i] = floor(|sin(i + 1)| * 2**32)
K = [int(abs(math.sin(i + 1)) * 2 ** 32) & MASK32 for i in range(64)]


def _rotl(x: int, n: int) -> int:
    x &= MASK32
    return ((x << n) | (x >> (32 - n))) & MASK32


def _f(b, c, d):
    return (b & c) | (~b & d)


def _g(b, c, d):
    return (b & d) | (c & ~d)


def _h(b, c, d):
    return b ^ c ^ d


def _i(b, c, d):
    return c ^ (b | (~d & MASK32))


# (round function, message word index for step i)
ROUNDS = (
    (_f, lambda i: i),
    (_g, lambda i: (5 * i + 1) % 16),
    (_h, lambda i: (3 * i + 5) % 16),
    (_i, lambda i: (7 * i) % 16),
)


def pad(message: bytes) -> bytes:
    bit_len = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    padded = message + b"\x80"
    padded += b"\x00" * ((56 - len(padded) % 64) % 64)
    return padded + struct.pack("<Q", bit_len)


def _compress(state, block: bytes):
    words = struct.unpack("<16I", block)
    a, b, c, d = state

    for i in range(64):
        fn, index = ROUNDS[i // 16]
        f = fn(b, c, d) & MASK32
        t = (a + f + K[i] + words[index(i)]) & MASK32
        a, d, c = d, c, b
        b = (b + _rotl(t, SHIFTS[i])) & MASK32

    return tuple((x + y) & MASK32 for x, y in zip(state, (a, b, c, d)))


def md5_bytes(data: bytes) -> str:
    state = INIT_STATE
    padded = pad(bytes(data))
    for off in range(0, len(padded), 64):
        state = _compress(state, padded[off:off + 64])
    return struct.pack("<4I", *state).hex()


def md5_hex(message: str) -> str:
    # lone surrogates have no UTF-8 form; pass them through so the digest stays total
    return md5_bytes(message.encode("utf-8", errors="surrogatepass"))
