# cipherkit/playfair.py
import re
from typing import Dict, List, Tuple

from cipherkit.errors import FormatError

AZ25 = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # J merged to I
FILLER = "X"
ALT_FILLER = "Q"  # separates/pads a literal X


def norm(s: str) -> str:
    return re.sub(r"[^A-Za-z]", "", s).upper().replace("J", "I")


def _filler_for(ch: str) -> str:
    return ALT_FILLER if ch == FILLER else FILLER


# -----------------------
# Key square
# -----------------------

def key_square(keyword: str) -> str:
    """The 25 matrix letters, row-major: keyword letters first, then the rest."""
    seen = set()
    ordered = []
    for ch in norm(keyword) + AZ25:
        if ch not in seen:
            seen.add(ch)
            ordered.append(ch)
    return "".join(ordered)


def key_matrix(keyword: str) -> List[str]:
    sq = key_square(keyword)
    return [sq[r * 5:(r + 1) * 5] for r in range(5)]


def pretty_square(matrix: List[str]) -> str:
    return "\n".join(" ".join(row) for row in matrix)


def _positions(sq: str) -> Dict[str, Tuple[int, int]]:
    return {ch: divmod(i, 5) for i, ch in enumerate(sq)}


# -----------------------
# Text preparation
# -----------------------

def prepare_text(text: str) -> str:
    """
    Split cleaned plaintext into digraphs: a doubled letter gets a filler
    between its halves, and a lone trailing letter is padded.
    """
    clean = norm(text)
    out = []
    i = 0
    while i < len(clean):
        a = clean[i]
        b = clean[i + 1] if i + 1 < len(clean) else None
        if b is None:
            out.append(a + _filler_for(a))
            i += 1
        elif a == b:
            out.append(a + _filler_for(a))
            i += 1
        else:
            out.append(a + b)
            i += 2
    return "".join(out)


# -----------------------
# Pair transform
# -----------------------

def _transform(sq: str, text: str, step: int) -> str:
    pos = _positions(sq)
    out = []
    for i in range(0, len(text), 2):
        ra, ca = pos[text[i]]
        rb, cb = pos[text[i + 1]]

        if ra == rb:  # same row -> right (encrypt) / left (decrypt)
            out.append(sq[ra * 5 + (ca + step) % 5])
            out.append(sq[rb * 5 + (cb + step) % 5])
        elif ca == cb:  # same col -> down / up
            out.append(sq[((ra + step) % 5) * 5 + ca])
            out.append(sq[((rb + step) % 5) * 5 + cb])
        else:  # rectangle
            out.append(sq[ra * 5 + cb])
            out.append(sq[rb * 5 + ca])

    return "".join(out)


def encrypt(text: str, keyword: str) -> str:
    if not text.strip() or not keyword.strip():
        return ""
    return _transform(key_square(keyword), prepare_text(text), 1)


def decrypt(text: str, keyword: str) -> str:
    """
    Decrypt already-paired ciphertext. Non-letters are dropped and J is read
    as I; no fillers are removed from the result.
    """
    if not text.strip() or not keyword.strip():
        return ""
    ct = norm(text)
    if len(ct) % 2:
        raise FormatError(
            f"Playfair ciphertext must have an even number of letters (got {len(ct)})"
        )
    return _transform(key_square(keyword), ct, -1)
