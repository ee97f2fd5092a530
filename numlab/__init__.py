"""Elementary number theory and classroom ciphers: arithmetic, Euclid, Caesar and toy RSA."""

__version__ = "0.1.0"
__all__ = ["arith", "caesar", "gcd", "rsa", "cli"]