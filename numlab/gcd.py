"""Euclid's algorithm, its steps, and Bézout coefficients."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["EuclidStep", "euclid_steps", "gcd", "extended_gcd", "mod_inverse"]


@dataclass(frozen=True)
class EuclidStep:
    """One division of Euclid's algorithm: ``dividend = q * divisor + remainder``."""

    dividend: int
    divisor: int
    remainder: int

    @property
    def is_last(self) -> bool:
        return self.remainder == 0


def euclid_steps(a: int, b: int) -> Iterator[EuclidStep]:
    """Yield each division of Euclid's algorithm on two positive integers.

    The larger number is divided first. The last step has remainder zero and
    its divisor is the greatest common divisor.
    """
    if a <= 0 or b <= 0:
        raise ValueError("both numbers must be positive")
    if b > a:
        a, b = b, a
    while True:
        step = EuclidStep(a, b, a % b)
        yield step
        if step.is_last:
            return
        a, b = b, step.remainder


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of two positive integers."""
    *_, last = euclid_steps(a, b)
    return last.divisor


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, s, t)`` with ``g = gcd(a, b) = s*a + t*b``."""
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_s, s = s, old_s - q * s
        old_t, t = t, old_t - q * t
    return old_r, old_s, old_t


def mod_inverse(e: int, z: int) -> int:
    """Inverse of ``e`` modulo ``z`` in ``range(z)``.

    Raises ValueError when ``e`` and ``z`` are not coprime.
    """
    g, s, _ = extended_gcd(e, z)
    if g != 1:
        raise ValueError(f"{e} has no inverse modulo {z}")
    return s % z