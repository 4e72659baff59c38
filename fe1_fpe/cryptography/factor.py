# fe1_fpe/cryptography/factor.py
"""
FE1-FPE Domain Factorizer

Splits a modulus n into a >= b with a * b = n, keeping b as close to sqrt(n)
as the bounded search allows. The pair sets the sizes of the two Feistel
halves: X = a * R + W with R in [0, b) and W in [0, a).

Search:
  1. Trial division by the primes below PRIME_BOUND (numpy sieve).
     Whatever is left above 1 is kept as one atomic factor.
  2. Few divisors: enumerate them all and take the largest b <= isqrt(n).
  3. Many divisors: greedy balance, multiplying each prime into the
     smaller accumulator (largest primes first).
  4. Nothing found (n prime, or its smallest prime factor exceeds the
     sieve and it has no second one): (n, 1), logged as a warning.

Results are memoized; factoring is a pure function of n.
"""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from typing import List, Tuple

import numpy as np

from .common import MAX_DIVISORS, PRIME_BOUND
from ..errors import ConfigurationError

logger = logging.getLogger("fe1-fpe")


# =============================================================================
# Prime Table
# =============================================================================

def _sieve(bound: int) -> np.ndarray:
    """Primes strictly below bound (Eratosthenes)."""
    is_prime = np.ones(bound, dtype=bool)
    is_prime[:2] = False
    for i in range(2, math.isqrt(bound - 1) + 1):
        if is_prime[i]:
            is_prime[i * i::i] = False
    return np.flatnonzero(is_prime)


_PRIMES: Tuple[int, ...] = tuple(int(p) for p in _sieve(PRIME_BOUND))


# =============================================================================
# Factorization
# =============================================================================

def _trial_factor(n: int) -> List[Tuple[int, int]]:
    """(prime, exponent) pairs; the last entry may be an unsplit cofactor."""
    factors = []
    for p in _PRIMES:
        if p * p > n:
            break
        e = 0
        while n % p == 0:
            n //= p
            e += 1
        if e:
            factors.append((p, e))
    if n > 1:
        factors.append((n, 1))
    return factors


def _divisors(factors: List[Tuple[int, int]]) -> List[int]:
    divs = [1]
    for p, e in factors:
        divs = [d * p ** k for d in divs for k in range(e + 1)]
    return divs


def _greedy_split(factors: List[Tuple[int, int]]) -> Tuple[int, int]:
    a, b = 1, 1
    primes = sorted((p for p, e in factors for _ in range(e)), reverse=True)
    for p in primes:
        a *= p
        if a > b:
            a, b = b, a
    return b, a


@lru_cache(maxsize=1024)
def factor(n: int) -> Tuple[int, int]:
    """
    Factor the modulus for the Feistel halves.

    Args:
        n: Domain size, n >= 1

    Returns:
        (a, b) with a >= b >= 1 and a * b == n

    Raises:
        ConfigurationError: If n is not a positive integer
    """
    if not isinstance(n, int) or n < 1:
        raise ConfigurationError(f"Modulus must be a positive integer, got {n!r}")

    if n == 1:
        return 1, 1

    factors = _trial_factor(n)

    n_divisors = 1
    for _, e in factors:
        n_divisors *= e + 1

    if n_divisors <= MAX_DIVISORS:
        root = math.isqrt(n)
        b = max(d for d in _divisors(factors) if d <= root)
        a = n // b
    else:
        a, b = _greedy_split(factors)

    if b == 1:
        logger.warning(
            f"No usable factorization for modulus of {n.bit_length()} bits; "
            f"Feistel rounds degenerate to a keyed rotation"
        )

    logger.debug(f"factor: n={n} -> a={a}, b={b}")
    return a, b
