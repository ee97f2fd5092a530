"""Textbook RSA over small primes, one character per block."""

from __future__ import annotations

import string
from collections.abc import Iterable
from dataclasses import dataclass

from numlab.gcd import gcd, mod_inverse

__all__ = [
    "KeyPair",
    "coprime_exponent",
    "make_keys",
    "encrypt_letters",
    "decrypt_letters",
    "encrypt_ascii",
    "decrypt_ascii",
]

_LETTERS = string.ascii_uppercase + string.ascii_lowercase + " "
_LETTER_CODES = {ch: code for code, ch in enumerate(_LETTERS)}
_PRINTABLE = range(32, 127)


@dataclass(frozen=True)
class KeyPair:
    """Public modulus and exponent, the totient, and the private exponent."""

    n: int
    z: int
    e: int
    d: int


def coprime_exponent(e: int, z: int) -> int:
    """Smallest of ``e, e + 2, e + 4, ...`` that is coprime with ``z``.

    Raises ValueError when no such number exists or the inputs are not
    positive.
    """
    if e <= 0 or z <= 0:
        raise ValueError("exponent and totient must be positive")
    if e % 2 == 0 and z % 2 == 0:
        raise ValueError(f"no exponent of the form {e} + 2k is coprime with {z}")
    while gcd(e, z) != 1:
        e += 2
    return e


def make_keys(p: int, q: int, e: int) -> KeyPair:
    """Build an RSA key pair from primes ``p`` and ``q`` and a wanted exponent.

    The exponent is raised to the nearest usable value when it shares a
    factor with the totient.
    """
    if p < 2 or q < 2:
        raise ValueError("p and q must be primes")
    n = p * q
    z = (p - 1) * (q - 1)
    e = coprime_exponent(e, z)
    return KeyPair(n=n, z=z, e=e, d=mod_inverse(e, z))


def encrypt_letters(message: str, e: int, n: int) -> list[int]:
    """Encrypt ASCII letters and spaces; every other character is dropped.

    ``A``-``Z`` map to 0-25, ``a``-``z`` to 26-51 and space to 52.
    """
    return [
        pow(_LETTER_CODES[ch], e, n) for ch in message if ch in _LETTER_CODES
    ]


def decrypt_letters(ciphertext: Iterable[int], d: int, n: int) -> str:
    """Undo :func:`encrypt_letters`; values outside the alphabet are dropped."""
    plain = (pow(block, d, n) for block in ciphertext)
    return "".join(_LETTERS[m] for m in plain if 0 <= m < len(_LETTERS))


def encrypt_ascii(message: str, e: int, n: int) -> list[int]:
    """Encrypt every character of ``message`` by its code point."""
    return [pow(ord(ch), e, n) for ch in message]


def decrypt_ascii(ciphertext: Iterable[int], d: int, n: int) -> str:
    """Undo :func:`encrypt_ascii`, keeping only printable ASCII characters."""
    plain = (pow(block, d, n) for block in ciphertext)
    return "".join(chr(m) for m in plain if m in _PRINTABLE)