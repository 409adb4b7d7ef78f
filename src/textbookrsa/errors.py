"""Exceptions raised by the arithmetic engine.

Every error derives from `RSAError` as well as the builtin exception that best describes it, so callers can either
catch the whole family or keep catching `ValueError` and friends as usual.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class RSAError(Exception):
    """Base class of all textbook RSA failures."""


class NoPrimeFound(RSAError, RuntimeError):
    """The prime search bound holds no prime, or the draw gave up."""


class NoInverseExists(RSAError, ValueError):
    """The operands are not coprime, so no modular inverse exists."""


class NoCoprimeExponent(RSAError, ValueError):
    """No public exponent in (1, totient) is coprime to the totient."""


class ZeroModulus(RSAError, ZeroDivisionError):
    """A modular operation was attempted with a modulus of zero."""


class BaseExceedsModulus(RSAError, ValueError):
    """The base is not reduced below the modulus."""


class NotCoprime(RSAError, ValueError):
    """The base shares a factor with the modulus."""


class MessageOutOfRange(RSAError, ValueError):
    """The message representative is outside [0, n-1]."""


class DegeneratePrimes(RSAError, ValueError):
    """The primes handed to key derivation cannot form a key."""


class KeyValidationFailed(RSAError, RuntimeError):
    """A freshly derived key pair did not round-trip its check message."""
