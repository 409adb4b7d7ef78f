"""Key derivation and the public/private key types.

Turns two primes into a validated key pair. The public exponent is the smallest integer coprime to the totient, as
in the classroom construction, and the private exponent is its inverse computed with the Extended Euclidean
Algorithm. Public and private halves are separate types so the private exponent only travels where it is asked for.

Typical usage example:

    pair = derive(11, 5)
    c = pair.public.encrypt(2)
    r = pair.private.decrypt(c)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import math
import typing

from textbookrsa import cryptogram
from textbookrsa.arith import checked_mod_pow
from textbookrsa.arith import mod_inverse
from textbookrsa.arith import mod_pow
from textbookrsa.errors import DegeneratePrimes
from textbookrsa.errors import KeyValidationFailed
from textbookrsa.errors import MessageOutOfRange
from textbookrsa.errors import NoCoprimeExponent
from textbookrsa.primes import check_prime


class RSAKey:
    """The parts shared by both halves of a key pair.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
    """

    def __init__(self, mod: int, expo: int) -> None:
        self.mod = mod
        self.expo = expo

    def _check_range(self, message: int) -> None:
        if not 0 <= message < self.mod:
            raise MessageOutOfRange(f"Message representative must be in range [0, {self.mod - 1}]")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.mod, self.expo) == (other.mod, other.expo)

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.mod, self.expo))


class RSAPubKey(RSAKey):
    """Public half of the key pair, the modulus and public exponent."""

    def encrypt(self, message: int) -> int:
        """Encrypt the int-marshalled message.

        Raises:
            MessageOutOfRange: If the message is out of range for the current key.
        """
        self._check_range(message)
        return cryptogram.encrypt(message, self.expo, self.mod)

    def __repr__(self) -> str:
        return f"RSAPubKey(n={self.mod}, e={self.expo})"


class RSAPrivKey(RSAKey):
    """Private half of the key pair.

    The representation never includes the exponent or the primes. Use `expo` explicitly when it has to be shown.

    Attributes:
        mod: The modulus of the keypair.
        expo: The private exponent of the key.
        p: Private Prime 1.
        q: Private Prime 2.
    """

    def __init__(self, mod: int, priv_exp: int, p: int | None = None, q: int | None = None) -> None:
        super().__init__(mod, priv_exp)
        self.p: int | None = None
        self.q: int | None = None
        self.exp1: int | None = None
        self.exp2: int | None = None
        self.coeff: int | None = None
        if p and q:
            self.p = p
            self.q = q
            # A zero exponent only arises for the prime 2 and would map an even ciphertext to 1.
            self.exp1 = priv_exp % (p - 1) or p - 1
            self.exp2 = priv_exp % (q - 1) or q - 1
            self.coeff = mod_inverse(q, p)

    def decrypt(self, ciphertext: int) -> int:
        """Decrypt the ciphertext, accelerated with CRT when the primes are known.

        Raises:
            MessageOutOfRange: If the ciphertext is out of range for the current key.
        """
        self._check_range(ciphertext)
        if not self.p or not self.q:
            return cryptogram.decrypt(ciphertext, self.expo, self.mod)
        m_1 = mod_pow(ciphertext, self.exp1, self.p)
        m_2 = mod_pow(ciphertext, self.exp2, self.q)
        h = ((m_1 - m_2) * self.coeff) % self.p
        return m_2 + self.q * h

    def __repr__(self) -> str:
        return f"RSAPrivKey(n={self.mod}, d=<hidden>)"


class KeyPair(typing.NamedTuple):
    """A derived key pair together with the totient it was derived from."""
    public: RSAPubKey
    private: RSAPrivKey
    totient: int

    @property
    def n(self) -> int:
        return self.public.mod

    @property
    def e(self) -> int:
        return self.public.expo

    @property
    def d(self) -> int:
        return self.private.expo


def totient(p: int, q: int) -> int:
    """Euler's totient of `p * q` for distinct primes."""
    return (p - 1) * (q - 1)


def smallest_coprime(value: int, start: int = 2) -> int:
    """Linear search for the smallest integer >= `start` coprime to `value`.

    Deterministic on purpose, which keeps the public exponent small and predictable.
    """
    candidate = start
    while math.gcd(candidate, value) != 1:
        candidate += 1
    return candidate


def _validate(pair: KeyPair) -> None:
    """Round-trip the smallest message coprime to `n` through the checked exponentiation once."""
    check = smallest_coprime(pair.n)
    ciphertext = checked_mod_pow(check, pair.e, pair.n)
    if checked_mod_pow(ciphertext, pair.d, pair.n) != check:
        raise KeyValidationFailed("Derived key pair failed its round-trip check.")


def derive(p: int, q: int, validate: bool = True) -> KeyPair:
    """Derive the RSA key pair from two primes.

    Args:
        p: The first prime.
        q: The second prime. Must differ from `p`.
        validate: Whether to round-trip a check message with the checked exponentiation. Defaults to True.

    Returns:
        The key pair, with `e` the smallest exponent coprime to the totient and `d` its inverse.

    Raises:
        DegeneratePrimes: If `p == q` or either is not prime.
        NoCoprimeExponent: If no exponent in (1, totient) is coprime to the totient.
        NoInverseExists: If `e` has no inverse modulo the totient.
        KeyValidationFailed: If `validate` is set and the pair does not round-trip.
    """
    if p == q:
        raise DegeneratePrimes(f"p and q must be distinct, got {p} twice.")
    if not check_prime(p) or not check_prime(q):
        raise DegeneratePrimes(f"Both {p} and {q} must be prime.")
    phi = totient(p, q)
    e = smallest_coprime(phi)
    if e >= phi:
        raise NoCoprimeExponent(f"No public exponent in (1, {phi}) is coprime to {phi}.")
    n = p * q
    d = mod_inverse(e, phi)
    pair = KeyPair(RSAPubKey(n, e), RSAPrivKey(n, d, p, q), phi)
    if validate:
        _validate(pair)
    return pair
