"""Command line front end for the number tools."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from numlab.arith import ceil, floor, int_div, int_mod, primes_between
from numlab.caesar import caesar
from numlab.gcd import euclid_steps, extended_gcd
from numlab.rsa import (
    decrypt_ascii,
    decrypt_letters,
    encrypt_ascii,
    encrypt_letters,
    make_keys,
)

__all__ = ["main"]

_EUCLID_INTRO = (
    "Euclid's algorithm: the GCD of two numbers equals the GCD of the smaller "
    "one and the remainder of dividing the larger by the smaller, repeated "
    "until the remainder is 0."
)


def _cmd_div(args: argparse.Namespace) -> None:
    print(int_div(args.dividend, args.divisor))


def _cmd_mod(args: argparse.Namespace) -> None:
    print(int_mod(args.dividend, args.divisor))


def _cmd_floor(args: argparse.Namespace) -> None:
    print(floor(args.x))


def _cmd_ceil(args: argparse.Namespace) -> None:
    print(ceil(args.x))


def _cmd_primes(args: argparse.Namespace) -> None:
    for prime in primes_between(args.low, args.high):
        print(prime)


def _cmd_caesar(args: argparse.Namespace) -> None:
    print(caesar(" ".join(args.text), args.shift))


def _cmd_gcd(args: argparse.Namespace) -> None:
    print(_EUCLID_INTRO)
    for step in euclid_steps(args.a, args.b):
        if step.is_last:
            print(
                f"{step.dividend} divided by {step.divisor} leaves 0, "
                f"so the GCD is {step.divisor}"
            )
        else:
            print(
                f"{step.dividend} divided by {step.divisor} leaves "
                f"{step.remainder}; continuing with A = {step.divisor} "
                f"and B = {step.remainder}"
            )


def _cmd_bezout(args: argparse.Namespace) -> None:
    a, b = args.a, args.b
    g, s, t = extended_gcd(a, b)
    print(f"gcd({a}, {b}) = {g}")
    print(f"Bezout coefficients s and t: {s} and {t}")
    print(f"Check: {a}*{s} + {b}*{t} = {a * s + b * t}")


def _cmd_rsa(args: argparse.Namespace) -> None:
    keys = make_keys(args.p, args.q, args.e)
    print(f"n = {keys.n}")
    if keys.e != args.e:
        print(
            f"The exponent {args.e} shares a factor with the totient; "
            f"using {keys.e} instead"
        )
    print(f"Public key (n, e): ({keys.n}, {keys.e})")
    print(f"Private key (d): {keys.d}")
    message = " ".join(args.message)
    if args.ascii:
        cipher = encrypt_ascii(message, keys.e, keys.n)
    else:
        cipher = encrypt_letters(message, keys.e, keys.n)
    print("Ciphertext: " + " ".join(str(block) for block in cipher))
    if args.decrypt:
        if args.ascii:
            plain = decrypt_ascii(cipher, keys.d, keys.n)
        else:
            plain = decrypt_letters(cipher, keys.d, keys.n)
        print(f"Decrypted: {plain}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numlab", description="Small number theory and cipher tools."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, func, text in (
        ("div", _cmd_div, "quotient truncated toward zero"),
        ("mod", _cmd_mod, "remainder with the dividend's sign"),
    ):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("dividend", type=int)
        cmd.add_argument("divisor", type=int)
        cmd.set_defaults(func=func)

    for name, func, text in (
        ("floor", _cmd_floor, "greatest integer not above x"),
        ("ceil", _cmd_ceil, "least integer not below x"),
    ):
        cmd = sub.add_parser(name, help=text)
        cmd.add_argument("x", type=float)
        cmd.set_defaults(func=func)

    cmd = sub.add_parser("primes", help="primes in [low, high)")
    cmd.add_argument("low", type=int)
    cmd.add_argument("high", type=int)
    cmd.set_defaults(func=_cmd_primes)

    cmd = sub.add_parser("caesar", help="Caesar shift of letters")
    cmd.add_argument("shift", type=int)
    cmd.add_argument("text", nargs="+")
    cmd.set_defaults(func=_cmd_caesar)

    cmd = sub.add_parser("gcd", help="GCD with every step of Euclid's algorithm")
    cmd.add_argument("a", type=int)
    cmd.add_argument("b", type=int)
    cmd.set_defaults(func=_cmd_gcd)

    cmd = sub.add_parser("bezout", help="GCD and Bezout coefficients")
    cmd.add_argument("a", type=int)
    cmd.add_argument("b", type=int)
    cmd.set_defaults(func=_cmd_bezout)

    cmd = sub.add_parser("rsa", help="encrypt a message with textbook RSA")
    cmd.add_argument("p", type=int)
    cmd.add_argument("q", type=int)
    cmd.add_argument("e", type=int)
    cmd.add_argument("message", nargs="+")
    cmd.add_argument(
        "--decrypt", action="store_true", help="also decrypt with the private key"
    )
    cmd.add_argument(
        "--ascii",
        action="store_true",
        help="encrypt every character, not only letters and spaces",
    )
    cmd.set_defaults(func=_cmd_rsa)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in ``argv`` and return the exit status."""
    args = _build_parser().parse_args(argv)
    try:
        args.func(args)
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())