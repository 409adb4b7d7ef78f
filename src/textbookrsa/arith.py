"""Modular arithmetic primitives: exponentiation, inverses and the Extended Euclidean Algorithm.

All functions operate on plain Python integers and therefore work for any key size. None of them hold state.

Typical usage example:

    mod_pow(5, 11, 13)  # 8
    mod_inverse(5, 11)  # 9
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

from textbookrsa.errors import BaseExceedsModulus
from textbookrsa.errors import NoInverseExists
from textbookrsa.errors import NotCoprime
from textbookrsa.errors import ZeroModulus


def eea(a: int, b: int) -> tuple[int, int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such a that a*s0 + b*t0 = r0 = gcd(a, b).

    Args:
        a: The first natural number.
        b: The second natural number.

    Returns:
        Greatest common divisor of two integers.
        As well as the Bezout coefficients.
    """
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return r0, s0, t0


def mod_inverse(a: int, m: int) -> int:
    """Find the multiplicative inverse of `a` modulo `m`.

    Args:
        a: The number to invert.
        m: The modulus. Must be positive.

    Returns:
        The unique `u` in `[1, m)` such that `a * u % m == 1`.

    Raises:
        ZeroModulus: If `m` is zero.
        ValueError: If `m` is negative.
        NoInverseExists: If `a` and `m` are not coprime. Always the case for `m == 1`.
    """
    if m == 0:
        raise ZeroModulus("Modulus must not be zero.")
    if m < 0:
        raise ValueError("Modulus must be positive.")
    g, s, _ = eea(a % m, m)
    if g != 1 or m == 1:
        raise NoInverseExists(f"{a} has no inverse modulo {m}.")
    return s % m


def mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute `base ** exponent % modulus` by right-to-left square-and-multiply.

    Args:
        base: The base. Reduced modulo `modulus` before use.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be > 0.

    Returns:
        The result in `[0, modulus)`.

    Raises:
        ZeroModulus: If `modulus` is zero.
        ValueError: If `modulus` or `exponent` is negative.
    """
    if modulus == 0:
        raise ZeroModulus("Modulus must not be zero.")
    if modulus < 0:
        raise ValueError("Modulus must be positive.")
    if exponent < 0:
        raise ValueError("Exponent must be non-negative.")
    if modulus == 1:
        return 0
    result = 1
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        exponent >>= 1
        base = base * base % modulus
    return result


def checked_mod_pow(base: int, exponent: int, modulus: int) -> int:
    """Validating variant of `mod_pow`, meant for one-off key checks rather than the encryption path.

    Args:
        base: The base. Must be in `[0, modulus)` and coprime to `modulus`.
        exponent: The exponent. Must be >= 0.
        modulus: The modulus. Must be > 0.

    Returns:
        The result in `[0, modulus)`.

    Raises:
        ZeroModulus: If `modulus` is zero.
        BaseExceedsModulus: If `base >= modulus`.
        NotCoprime: If `gcd(base, modulus) != 1`.
    """
    if modulus == 0:
        raise ZeroModulus("Modulus must not be zero.")
    if base >= modulus:
        # Such a base should have been split into blocks.
        raise BaseExceedsModulus(f"Base {base} is >= modulus {modulus}.")
    if math.gcd(base, modulus) != 1:
        raise NotCoprime(f"Base {base} and modulus {modulus} are not relatively prime.")
    return mod_pow(base, exponent, modulus)
