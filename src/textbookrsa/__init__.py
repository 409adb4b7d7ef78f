"""Textbook RSA in an Academic Sense.

Provides the arithmetic engine of the textbook RSA cryptosystem: random prime selection, key derivation from two
primes, modular inverses and square-and-multiply exponentiation. Nothing here pads, chunks or protects anything, it is
meant for reading and experimenting.

Typical usage example:

    p, q = generate_primes(1200000)
    pair = derive(p, q)
    c = pair.public.encrypt(2)
    r = pair.private.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from textbookrsa.arith import checked_mod_pow
from textbookrsa.arith import mod_inverse
from textbookrsa.arith import mod_pow
from textbookrsa.cryptogram import decrypt
from textbookrsa.cryptogram import encrypt
from textbookrsa.errors import BaseExceedsModulus
from textbookrsa.errors import DegeneratePrimes
from textbookrsa.errors import KeyValidationFailed
from textbookrsa.errors import MessageOutOfRange
from textbookrsa.errors import NoCoprimeExponent
from textbookrsa.errors import NoInverseExists
from textbookrsa.errors import NoPrimeFound
from textbookrsa.errors import NotCoprime
from textbookrsa.errors import RSAError
from textbookrsa.errors import ZeroModulus
from textbookrsa.keys import derive
from textbookrsa.keys import KeyPair
from textbookrsa.keys import RSAPrivKey
from textbookrsa.keys import RSAPubKey
from textbookrsa.primes import check_prime
from textbookrsa.primes import generate_primes
from textbookrsa.primes import PrimeSource
from textbookrsa.primes import ProbablePrimeSource
from textbookrsa.primes import SievePrimeSource

__version__ = "0.1.0"
__all__ = [
    "BaseExceedsModulus",
    "DegeneratePrimes",
    "KeyPair",
    "KeyValidationFailed",
    "MessageOutOfRange",
    "NoCoprimeExponent",
    "NoInverseExists",
    "NoPrimeFound",
    "NotCoprime",
    "PrimeSource",
    "ProbablePrimeSource",
    "RSAError",
    "RSAPrivKey",
    "RSAPubKey",
    "SievePrimeSource",
    "ZeroModulus",
    "check_prime",
    "checked_mod_pow",
    "decrypt",
    "derive",
    "encrypt",
    "generate_primes",
    "mod_inverse",
    "mod_pow",
]
