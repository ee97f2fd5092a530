# numlab

Small, readable implementations of the first tools of elementary number
theory, plus the classic classroom ciphers built on them.

- `numlab.arith` has `int_div` and `int_mod`, which give the integer
  quotient and remainder without using Python's division or modulo
  operators. It also has `floor` and `ceil`, which work without the
  rounding functions, and `primes_between` for the primes in a range.
- `numlab.caesar` has the Caesar cipher, `caesar(text, shift)`.
- `numlab.gcd` covers Euclid's algorithm:
  - `euclid_steps` yields each division as an `EuclidStep` with
    `dividend`, `divisor`, `remainder` and `is_last`.
  - `gcd` gives the greatest common divisor.
  - `extended_gcd` returns `(g, s, t)` with `g = s*a + t*b`.
  - `mod_inverse` finds a modular inverse.
- `numlab.rsa` is toy RSA with one character per block:
  - `make_keys` returns a `KeyPair` with `n`, `z`, `e` and `d`.
    `coprime_exponent` fixes up the public exponent.
  - `encrypt_letters` and `decrypt_letters` handle letters and spaces.
  - `encrypt_ascii` and `decrypt_ascii` handle printable ASCII text.
- `numlab.cli` is the `numlab` command.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from numlab.arith import int_div, int_mod, floor, ceil, primes_between
from numlab.caesar import caesar
from numlab.gcd import gcd, extended_gcd, mod_inverse

int_div(17, 5)             # 3
int_div(-17, 5)            # -3, the quotient is truncated toward zero
int_mod(-7, 2)             # -1, the remainder takes the dividend's sign
floor(-2.5)                # -3
ceil(2.1)                  # 3
primes_between(2, 10)      # [2, 3, 5, 7]; the upper end is excluded

caesar("Hello, World", 3)  # 'Khoor, Zruog'
caesar("Khoor, Zruog", -3) # 'Hello, World'

gcd(252, 105)              # 21
```

The functions raise an error in these cases:

| Function | Condition | Error |
| --- | --- | --- |
| `int_div`, `int_mod` | divisor of zero | `ZeroDivisionError` |
| `floor`, `ceil` | infinity or NaN | `ValueError` |
| `euclid_steps`, `gcd` | either number is not positive | `ValueError` |
| `mod_inverse` | `e` and `z` are not coprime | `ValueError` |

`caesar` shifts only the ASCII letters A–Z and a–z and keeps their case.
Every other character passes through unchanged.

### RSA

```python
from numlab.rsa import make_keys, encrypt_ascii, decrypt_ascii

keys = make_keys(61, 53, 17)   # n = 3233, z = 3120, e = 17
cipher = encrypt_ascii("Hi!", keys.e, keys.n)
decrypt_ascii(cipher, keys.d, keys.n)  # 'Hi!'
```

`make_keys` uses `coprime_exponent` to settle the exponent. If the exponent
you ask for shares a factor with the totient, it tries `e + 2`, `e + 4`, and
so on until it reaches one that does not. It raises `ValueError` in three
cases:

- `p` or `q` is below 2.
- The exponent and the totient are both even.
- The exponent or the totient is not positive.

It does not check that `p` and `q` are actually prime.

`encrypt_letters` maps `A`–`Z` to 0–25, `a`–`z` to 26–51 and space to 52. It
drops every other character. `encrypt_ascii` encrypts each character by its
code point, and `decrypt_ascii` keeps only printable ASCII (codes 32–126).
The modulus has to be larger than every character code in use, so pick
primes large enough for that.

## Command line

`numlab` takes a subcommand:

```
numlab div 17 5            # 3
numlab mod -7 2            # -1
numlab floor -2.5          # -3
numlab ceil 2.1            # 3
numlab primes 2 10         # 2 3 5 7, one per line
numlab caesar 3 Hello, World
numlab gcd 252 105         # prints every step of Euclid's algorithm
numlab bezout 240 46       # gcd, Bezout coefficients and a check
numlab rsa 61 53 17 Hello World --decrypt
numlab rsa 61 53 17 "Hi there!" --ascii --decrypt
```

`rsa` does the following:

- It prints `n`, the public key and the private exponent.
- If it had to change the exponent you gave, it says so.
- It prints the ciphertext.
- With `--decrypt`, it also prints the decrypted text.
- With `--ascii`, it encrypts every character rather than only letters and
  spaces.

If an error occurs, such as a zero divisor, the command prints a message to
standard error and exits with status 1.

## What it does not do

This is teaching code, not cryptography to rely on:

- RSA here encrypts one character at a time with tiny keys and no padding.
- Keys are never stored or loaded.
- The command takes every value as an argument and does not prompt for
  input.