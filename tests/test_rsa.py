import math

import pytest

from numlab.rsa import (
    KeyPair,
    coprime_exponent,
    decrypt_ascii,
    decrypt_letters,
    encrypt_ascii,
    encrypt_letters,
    make_keys,
)


@pytest.fixture
def keys() -> KeyPair:
    return make_keys(61, 53, 17)


def test_make_keys_modulus_and_totient(keys):
    assert keys.n == 61 * 53
    assert keys.z == 60 * 52


def test_make_keys_exponents_are_inverse(keys):
    assert keys.e == 17
    assert (keys.e * keys.d) % keys.z == 1
    assert 0 <= keys.d < keys.z


def test_make_keys_known_private_exponent(keys):
    assert keys.d == 2753


def test_make_keys_adjusts_exponent():
    pair = make_keys(5, 7, 3)
    assert pair.e != 3
    assert (pair.e - 3) % 2 == 0
    assert math.gcd(pair.e, pair.z) == 1
    assert (pair.e * pair.d) % pair.z == 1


@pytest.mark.parametrize("p, q", [(1, 5), (5, 0), (-3, 7)])
def test_make_keys_rejects_bad_primes(p, q):
    with pytest.raises(ValueError):
        make_keys(p, q, 3)


def test_coprime_exponent_keeps_good_value():
    assert coprime_exponent(7, 12) == 7


@pytest.mark.parametrize("e, z", [(3, 12), (9, 24), (5, 40)])
def test_coprime_exponent_invariants(e, z):
    result = coprime_exponent(e, z)
    assert result >= e
    assert (result - e) % 2 == 0
    assert math.gcd(result, z) == 1
    for candidate in range(e, result, 2):
        assert math.gcd(candidate, z) != 1


def test_coprime_exponent_even_with_even_totient_fails():
    with pytest.raises(ValueError):
        coprime_exponent(4, 12)


@pytest.mark.parametrize("e, z", [(0, 12), (3, 0)])
def test_coprime_exponent_rejects_non_positive(e, z):
    with pytest.raises(ValueError):
        coprime_exponent(e, z)


def test_letter_codes_follow_alphabet():
    assert encrypt_letters("Az ", 1, 1000) == [0, 51, 52]


def test_letter_encryption_drops_other_characters(keys):
    assert len(encrypt_letters("a1!b?", keys.e, keys.n)) == 2


def test_letter_round_trip(keys):
    message = "Hello World from RSA"
    cipher = encrypt_letters(message, keys.e, keys.n)
    assert len(cipher) == len(message)
    assert all(0 <= block < keys.n for block in cipher)
    assert decrypt_letters(cipher, keys.d, keys.n) == message


def test_letter_round_trip_strips_specials(keys):
    cipher = encrypt_letters("Hi, there 42!", keys.e, keys.n)
    assert decrypt_letters(cipher, keys.d, keys.n) == "Hi there "


def test_letter_decrypt_drops_values_outside_alphabet():
    assert decrypt_letters([53, 0, 99], 1, 1000) == "A"


def test_ascii_round_trip_keeps_specials(keys):
    message = "Hello, World! 123 #@~"
    cipher = encrypt_ascii(message, keys.e, keys.n)
    assert len(cipher) == len(message)
    assert decrypt_ascii(cipher, keys.d, keys.n) == message


def test_ascii_identity_key_uses_code_points():
    assert encrypt_ascii("A ~", 1, 1000) == [ord("A"), ord(" "), ord("~")]


def test_ascii_decrypt_drops_unprintable():
    assert decrypt_ascii([10, ord("A"), 127], 1, 1000) == "A"


def test_ascii_known_block(keys):
    assert encrypt_ascii("A", keys.e, keys.n) == [2790]
    assert decrypt_ascii([2790], keys.d, keys.n) == "A"