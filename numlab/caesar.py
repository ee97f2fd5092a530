"""Caesar shift of ASCII letters."""

from __future__ import annotations

__all__ = ["caesar"]


def _shift_letter(ch: str, shift: int) -> str:
    if "A" <= ch <= "Z":
        base = ord("A")
    elif "a" <= ch <= "z":
        base = ord("a")
    else:
        return ch
    return chr(base + (ord(ch) - base + shift) % 26)


def caesar(text: str, shift: int) -> str:
    """Shift each ASCII letter of ``text`` by ``shift`` places, keeping case.

    Other characters pass through unchanged. A negative shift undoes a
    positive one.
    """
    return "".join(_shift_letter(ch, shift) for ch in text)