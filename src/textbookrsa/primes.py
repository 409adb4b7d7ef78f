"""Prime sources for key derivation, from a cached sieve up to trial division and Miller-Rabin.

A `PrimeSource` hands out one random prime per call. The sieve-backed source mirrors the classroom approach of
indexing into a table of primes, while the probable-prime source scales to bounds far too large to sieve. Both take
an optional `random.Random` compatible generator so draws can be reproduced.

Typical usage example:

    get_pre_primes(12000)
    src = SievePrimeSource()
    p, q = generate_primes(1200000, src)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import abc
import bisect
import random
import secrets

from textbookrsa.errors import NoPrimeFound

_SMALL_PRIMES: list[int] = []
_SMALL_PRIMES_CAP: int = 0
DEFAULT_BOUND: int = 1200000


def _sieve(n: int = 10000) -> list[int]:
    """Odd-only Sieve of Eratosthenes, returning every prime <= `n` in ascending order."""
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(n**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    result = [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]
    return result


def get_pre_primes(n: int = 10000, change: bool = False) -> list[int]:
    """Return the cached prime table, re-sieving only when it does not reach `n`.

    The sieve source and trial division share this table, so one large draw speeds up every later primality check.

    Args:
        n: Smallest value the table must reach. Must be >= 0.
        change: Re-sieve up to exactly `n` even if the cache already covers it, which may shrink the table.

    Returns:
        Primes in ascending order, covering at least `[2, n]` unless `change` shrank the table.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    global _SMALL_PRIMES
    global _SMALL_PRIMES_CAP
    if n > _SMALL_PRIMES_CAP or change or not _SMALL_PRIMES:
        _SMALL_PRIMES = _sieve(n)
        _SMALL_PRIMES_CAP = n
    return _SMALL_PRIMES


def _trial_division(no: int, n: int = 10000) -> bool:
    """Divide `no` by the cached primes up to its root; False means a factor was found."""
    if no < 2:
        return False
    for prime in get_pre_primes(n):
        if prime**2 > no:
            return True
        if no % prime == 0:
            return False
    return True


def _miller_rabin(w: int, iters: int) -> bool:
    """Miller-Rabin with `iters` random witnesses. A False result is certain, a True one is probable."""
    if w <= 3:
        return w == 2 or w == 3
    tw = w - 1
    a = (tw & -tw).bit_length() - 1
    m = tw // (2**a)
    for _ in range(iters):
        b = secrets.randbelow(w - 3) + 2
        z = pow(b, m, w)
        if z == 1 or z == w - 1:
            continue
        for _ in range(1, a):
            z = pow(z, 2, w)
            if z == w - 1:
                break
            if z == 1:
                return False
        else:
            return False
    return True


def check_prime(candidate: int, iters: None | int = None, n: int = 10000) -> bool:
    """Primality test used by key derivation and both prime sources.

    Candidates below `n**2` are settled exactly by trial division, which covers every prime the sieve hands out
    at the demo bound. Larger ones fall through to Miller-Rabin.

    Args:
        candidate: The number to test.
        iters: Miller-Rabin witnesses. Defaults to the FIPS 186-5 Appendix C.1 count for the candidate's bit length.
        n: Reach of the trial-division table.

    Returns:
        True if `candidate` is prime (probably, above `n**2`), False otherwise.
    """
    if candidate < 2:
        return False
    if not _trial_division(candidate, n):
        return False
    if candidate < n * n:
        # Trial division covered every factor up to the root.
        return True
    if iters is None:
        if candidate.bit_length() <= 512:
            iters = 40
        elif candidate.bit_length() <= 1024:
            iters = 56
        elif candidate.bit_length() <= 1536:
            iters = 64
        elif candidate.bit_length() <= 2048:
            iters = 70
        else:
            iters = 74
    return _miller_rabin(candidate, iters)


class PrimeSource(abc.ABC):
    """Capability producing a random prime below a bound.

    Attributes:
        rng: The `random.Random` compatible generator candidates are drawn from.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def _draw(self, bound: int) -> int:
        """Draw the uniform starting candidate in `[0, bound)`."""
        if bound <= 2:
            raise NoPrimeFound(f"No prime exists below {bound}.")
        return self.rng.randrange(bound)

    @abc.abstractmethod
    def next_prime(self, bound: int) -> int:
        """Return the first prime at or after a random candidate drawn from `[0, bound)`.

        Args:
            bound: Exclusive upper bound of the candidate draw.

        Returns:
            A prime. It may exceed `bound` when the candidate lies past the last prime below it.

        Raises:
            NoPrimeFound: If `bound` contains no prime.
        """


class SievePrimeSource(PrimeSource):
    """Looks up the random candidate in the cached Sieve of Eratosthenes table."""

    def next_prime(self, bound: int) -> int:
        candidate = self._draw(bound)
        table = get_pre_primes(bound - 1)
        idx = bisect.bisect_left(table, candidate)
        if idx < len(table):
            return table[idx]
        # Candidate sits in the gap after the last tabled prime.
        candidate = (table[-1] + 1) | 1
        while not check_prime(candidate):
            candidate += 2
        return candidate


class ProbablePrimeSource(PrimeSource):
    """Walks upward from the random candidate using `check_prime`, for bounds too large to sieve.

    Attributes:
        attempts: Maximum number of candidates tested per call. Defaults to 100 per bit of `bound`.
    """

    def __init__(self, rng: random.Random | None = None, attempts: int | None = None) -> None:
        super().__init__(rng)
        self.attempts = attempts

    def next_prime(self, bound: int) -> int:
        candidate = self._draw(bound)
        if candidate <= 2:
            return 2
        candidate |= 1
        cap = self.attempts if self.attempts is not None else bound.bit_length() * 100
        for _ in range(cap):
            if check_prime(candidate):
                return candidate
            candidate += 2
        raise NoPrimeFound(f"Tested {cap} candidates with no prime found. Check the random number generator.")


def generate_primes(bound: int = DEFAULT_BOUND,
                    source: PrimeSource | None = None,
                    attempts: int = 100) -> tuple[int, int]:
    """Draws a pair of distinct primes.

    Args:
        bound: Exclusive upper bound for each candidate draw. Defaults to `DEFAULT_BOUND`.
        source: The prime source to draw from. Defaults to a fresh `SievePrimeSource`.
        attempts: How many times `q` is redrawn while it equals `p`.

    Returns:
        A pair `(p, q)` with `p != q`.

    Raises:
        NoPrimeFound: If `bound` contains no prime, or no distinct `q` came up within `attempts` redraws.
    """
    if source is None:
        source = SievePrimeSource()
    p = source.next_prime(bound)
    q = source.next_prime(bound)
    for _ in range(attempts):
        if p != q:
            return p, q
        q = source.next_prime(bound)
    raise NoPrimeFound(f"Could not draw two distinct primes below {bound} in {attempts} attempts.")
