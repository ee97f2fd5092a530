"""Integer arithmetic built from counting and subtraction alone."""

from __future__ import annotations

import math
from collections.abc import Callable

__all__ = ["int_div", "int_mod", "floor", "ceil", "primes_between"]


def _climb(fits: Callable[[int], bool]) -> int:
    """Return the largest ``n >= 0`` with ``fits(n)``.

    ``fits`` must hold for 0 and be monotone: once false, false for every
    larger argument.
    """
    step = 1
    while fits(step):
        step <<= 1
    n = 0
    while step:
        if fits(n + step):
            n += step
        step >>= 1
    return n


def int_div(dividend: int, divisor: int) -> int:
    """Quotient of ``dividend / divisor`` truncated toward zero.

    Only subtraction and comparison are used to find it.
    """
    if divisor == 0:
        raise ZeroDivisionError("divisor must not be zero")
    negative = (dividend < 0) != (divisor < 0)
    remaining = abs(dividend)
    step = abs(divisor)
    quotient = _climb(lambda k: k * step <= remaining)
    return -quotient if negative else quotient


def int_mod(dividend: int, divisor: int) -> int:
    """Remainder that goes with :func:`int_div`; it has the dividend's sign."""
    return dividend - divisor * int_div(dividend, divisor)


def _require_finite(x: float) -> None:
    if not math.isfinite(x):
        raise ValueError(f"expected a finite number, got {x!r}")


def floor(x: float) -> int:
    """Greatest integer not above ``x``, found by counting."""
    _require_finite(x)
    if x >= 0:
        return _climb(lambda k: k <= x)
    return -(_climb(lambda k: -k > x) + 1)


def ceil(x: float) -> int:
    """Least integer not below ``x``, found by counting."""
    _require_finite(x)
    if x > 0:
        return _climb(lambda k: k < x) + 1
    return -_climb(lambda k: -k >= x)


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def primes_between(low: int, high: int) -> list[int]:
    """Primes ``p`` with ``low <= p < high``, in ascending order."""
    return [n for n in range(low, high) if _is_prime(n)]