import string

import pytest

from numlab.caesar import caesar


def test_known_shift():
    assert caesar("Hello, World!", 3) == "Khoor, Zruog!"


def test_wraps_at_end_of_alphabet():
    assert caesar("xyzXYZ", 3) == caesar("abcABC", 26)[:0] + "abcABC"


@pytest.mark.parametrize("shift", [0, 1, 5, 13, 25, 26, 40])
def test_round_trip(shift):
    text = "The quick brown fox, 123 jumps!"
    assert caesar(caesar(text, shift), -shift) == text


def test_rot13_is_involution():
    text = string.ascii_letters
    assert caesar(caesar(text, 13), 13) == text


def test_shift_of_26_is_identity():
    text = "Mixed Case text."
    assert caesar(text, 26) == text


def test_non_letters_untouched():
    text = "0123 !?-_ çé"
    assert caesar(text, 7) == text


def test_case_preserved():
    out = caesar(string.ascii_uppercase + string.ascii_lowercase, 9)
    assert out[:26].isupper()
    assert out[26:].islower()
    assert sorted(out[:26]) == list(string.ascii_uppercase)