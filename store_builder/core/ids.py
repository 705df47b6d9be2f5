"""
Identifiants de section : horodatage base 36 + 48 bits aléatoires.

Pas de détection de collision : avec 48 bits par milliseconde la collision
est traitée comme impossible (hypothèse, pas invariant garanti).
"""
import secrets
import time

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(n: int) -> str:
    out = ""
    while True:
        n, r = divmod(n, 36)
        out = _ALPHABET[r] + out
        if n == 0:
            return out


def generate_section_id() -> str:
    """ex. 'm2x9k1c0-3f9a1b2c4d5e'"""
    return f"{_base36(time.time_ns() // 1_000_000)}-{secrets.token_hex(6)}"
