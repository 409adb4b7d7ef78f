# pylint: disable=missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math

import pytest
import sympy

from textbookrsa import arith
from textbookrsa import errors

M127 = 2**127 - 1
M521 = 2**521 - 1

pow_cases = [
    (5, 11, 13),
    (2, 3, 55),
    (8, 27, 55),
    (0, 0, 7),
    (0, 5, 7),
    (12, 1, 7),
    (123456789, 987654321, 1000000007),
    (3, M127 - 1, M127),
    (2**300 + 17, 65537, M521),
    (M521 - 2, 2**200, M521 - 4),
]


def id_generator(param):
    if isinstance(param, int) and param > 1000000:
        return f"LargeInt-{param.bit_length()}bits"
    return str(param)


def brute_inverse(a, m):
    for x in range(1, m):
        if (a * x) % m == 1:
            return x
    return None


def test_mod_pow_concrete():
    assert arith.mod_pow(5, 11, 13) == 8


@pytest.mark.parametrize("base,exponent,modulus", pow_cases, ids=id_generator)
def test_mod_pow_matches_builtin(base, exponent, modulus):
    assert arith.mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("base", [0, 1, 2, 54, 55, 10**40])
@pytest.mark.parametrize("modulus", [2, 13, 55, M127])
def test_mod_pow_zero_exponent(base, modulus):
    assert arith.mod_pow(base, 0, modulus) == 1


@pytest.mark.parametrize("base,exponent", [(0, 0), (5, 0), (5, 11), (10**40, 3)])
def test_mod_pow_unit_modulus(base, exponent):
    assert arith.mod_pow(base, exponent, 1) == 0


def test_mod_pow_zero_modulus():
    with pytest.raises(errors.ZeroModulus):
        arith.mod_pow(5, 11, 0)
    with pytest.raises(ZeroDivisionError):
        arith.mod_pow(5, 11, 0)


@pytest.mark.parametrize("base,exponent,modulus", [(5, -1, 13), (5, 11, -13)])
def test_mod_pow_negative(base, exponent, modulus):
    with pytest.raises(ValueError):
        arith.mod_pow(base, exponent, modulus)


def test_mod_pow_reduces_base():
    assert arith.mod_pow(18, 11, 13) == arith.mod_pow(5, 11, 13)


@pytest.mark.parametrize("a,b", [(240, 46), (46, 240), (0, 5), (5, 0), (17, 17), (M127, 2**64), (3, 40)])
def test_eea(a, b):
    g, s, t = arith.eea(a, b)
    assert g == math.gcd(a, b)
    assert a * s + b * t == g


def test_mod_inverse_concrete():
    assert arith.mod_inverse(5, 11) == 9
    assert arith.mod_inverse(3, 40) == 27


def test_mod_inverse_matches_scan():
    for m in range(1, 60):
        for a in range(0, 60):
            expected = brute_inverse(a, m)
            if expected is None:
                with pytest.raises(errors.NoInverseExists):
                    arith.mod_inverse(a, m)
            else:
                assert arith.mod_inverse(a, m) == expected


@pytest.mark.parametrize("a,m", [(65537, M521 - 1), (3, M127 * 4), (2**89 - 1, M127)], ids=id_generator)
def test_mod_inverse_large(a, m):
    u = arith.mod_inverse(a, m)
    assert 1 <= u < m
    assert u == sympy.mod_inverse(a, m)


def test_mod_inverse_negative_input():
    assert arith.mod_inverse(-6, 11) == 9


@pytest.mark.parametrize("a,m", [(2, 40), (0, 11), (5, 1), (22, 11)])
def test_mod_inverse_not_coprime(a, m):
    with pytest.raises(errors.NoInverseExists):
        arith.mod_inverse(a, m)


def test_mod_inverse_bad_modulus():
    with pytest.raises(errors.ZeroModulus):
        arith.mod_inverse(5, 0)
    with pytest.raises(ValueError):
        arith.mod_inverse(5, -11)


@pytest.mark.parametrize("base,exponent,modulus", [(5, 11, 13), (2, 3, 55), (8, 27, 55), (1, 0, 2)])
def test_checked_mod_pow(base, exponent, modulus):
    assert arith.checked_mod_pow(base, exponent, modulus) == pow(base, exponent, modulus)


@pytest.mark.parametrize("base,modulus,exc", [
    (5, 0, errors.ZeroModulus),
    (13, 13, errors.BaseExceedsModulus),
    (56, 55, errors.BaseExceedsModulus),
    (5, 55, errors.NotCoprime),
    (0, 7, errors.NotCoprime),
])
def test_checked_mod_pow_rejects(base, modulus, exc):
    with pytest.raises(exc):
        arith.checked_mod_pow(base, 3, modulus)
