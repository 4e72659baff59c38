# fe1_fpe/cryptography/core.py
"""
FE1-FPE Core Components

Generic Z_n format-preserving encryption, scheme FE1 from
"Format-Preserving Encryption" by Bellare, Ristenpart, Rogaway and Stegers
(http://eprint.iacr.org/2009/251), following the Botan 1.10 construction.

Encrypt maps [0, n) onto itself as a keyed pseudorandom permutation;
decrypt inverts it exactly under the same key, tweak and modulus.
"""

from __future__ import annotations

import secrets

from .common import FE1_ROUNDS, BytesLike, _as_bytes, _mod
from .factor import factor
from .prf import RoundFunction
from ..errors import ConfigurationError, RangeError


# =============================================================================
# Preconditions
# =============================================================================

def rounds(a: int, b: int) -> int:
    """
    Round count for factor pair (a, b).

    The minimum safe number of rounds is 2 + log_a(b). With a >= b,
    log_a(b) <= 1, so 3 rounds suffice; the factorizer guarantees a >= b,
    this only confirms it.
    """
    if a < b:
        raise ConfigurationError(f"FPE rounds: a < b ({a} < {b})")
    return FE1_ROUNDS


def _check_modulus(modulus: int) -> None:
    if not isinstance(modulus, int) or modulus < 1:
        raise ConfigurationError(f"Modulus must be a positive integer, got {modulus!r}")


def _check_value(value: int, modulus: int) -> None:
    if not isinstance(value, int):
        raise TypeError(f"Value must be an integer, got {type(value).__name__}")
    if not 0 <= value < modulus:
        raise RangeError(f"Value must be in [0, {modulus}), got {value}", value=value)


def _setup(modulus: int, value: int, key: BytesLike, tweak: BytesLike):
    _check_modulus(modulus)
    _check_value(value, modulus)
    a, b = factor(modulus)
    r = rounds(a, b)
    F = RoundFunction(key, modulus, tweak)
    return F, a, b, r


# =============================================================================
# Feistel Rounds
# =============================================================================

def _encrypt_rounds(F: RoundFunction, a: int, b: int, r: int, X: int) -> int:
    for i in range(r):
        L, R = divmod(X, b)
        W = _mod(L + F(i, R), a)
        X = a * R + W
    return X


def _decrypt_rounds(F: RoundFunction, a: int, b: int, r: int, X: int) -> int:
    for i in range(r):
        R, W = divmod(X, a)
        L = _mod(W - F(r - i - 1, R), a)
        X = b * L + R
    return X


# =============================================================================
# Public API
# =============================================================================

def encrypt(modulus: int, plaintext: int, key: BytesLike, tweak: BytesLike) -> int:
    """
    Generic Z_n FPE encryption, FE1 scheme.

    Args:
        modulus: Domain size. For numbers 0..999 use 1000.
        plaintext: The number to encrypt, in [0, modulus)
        key: Secret key
        tweak: Non-secret parameter, think of it as an IV

    Returns:
        Ciphertext in [0, modulus)

    Raises:
        ConfigurationError: Modulus non-positive or longer than 128 bits
        RangeError: plaintext outside [0, modulus)
    """
    F, a, b, r = _setup(modulus, plaintext, key, tweak)
    return _encrypt_rounds(F, a, b, r, plaintext)


def decrypt(modulus: int, ciphertext: int, key: BytesLike, tweak: BytesLike) -> int:
    """
    Generic Z_n FPE decryption, FE1 scheme.

    Use the same key and tweak that produced the ciphertext.
    """
    F, a, b, r = _setup(modulus, ciphertext, key, tweak)
    return _decrypt_rounds(F, a, b, r, ciphertext)


class FE1:
    """
    FE1 cipher bound to one key/tweak pair.

    Only the key and tweak are stored; every call derives its own round
    function, so one instance may be shared between threads.
    """

    def __init__(self, key: BytesLike, tweak: BytesLike = b""):
        self.key = _as_bytes(key, "key")
        self.tweak = _as_bytes(tweak, "tweak")

    def encrypt(self, modulus: int, plaintext: int) -> int:
        return encrypt(modulus, plaintext, self.key, self.tweak)

    def decrypt(self, modulus: int, ciphertext: int) -> int:
        return decrypt(modulus, ciphertext, self.key, self.tweak)

    def with_tweak(self, tweak: BytesLike) -> "FE1":
        """Same key, different tweak."""
        return FE1(self.key, tweak)


# =============================================================================
# Self Test
# =============================================================================

def run_tests() -> bool:
    """Execute self-test suite."""
    print("=" * 70)
    print("FE1-FPE Core Self Test")
    print("=" * 70)

    results = {}
    key = secrets.token_bytes(32)
    tweak = secrets.token_bytes(16)

    # Test 1: Round trip across moduli
    print("\n[Test 1] Round Trip")
    print("-" * 40)

    rt_ok = True
    for n in [1, 2, 97, 1000, 10**6, 2**32 - 1, 2**64 - 1, 2**128 - 1]:
        x = secrets.randbelow(n)
        c = encrypt(n, x, key, tweak)
        ok = (0 <= c < n) and decrypt(n, c, key, tweak) == x
        rt_ok = rt_ok and ok
        print(f"  n={n}: {'PASS' if ok else 'FAIL'}")

    results["roundtrip"] = rt_ok

    # Test 2: Full permutation of a small domain
    print("\n[Test 2] Permutation (n=1000)")
    print("-" * 40)

    image = {encrypt(1000, x, key, tweak) for x in range(1000)}
    perm_ok = image == set(range(1000))
    results["permutation"] = perm_ok
    print(f"  Bijective: {'PASS' if perm_ok else 'FAIL'}")

    # Test 3: Oversized modulus
    print("\n[Test 3] Modulus Bound")
    print("-" * 40)

    try:
        encrypt(2**128, 0, key, tweak)
        bound_ok = False
    except ConfigurationError:
        bound_ok = True
    results["bound"] = bound_ok
    print(f"  129-bit modulus rejected: {'PASS' if bound_ok else 'FAIL'}")

    # Summary
    print("\n" + "=" * 70)
    all_pass = all(results.values())
    print(f"Result: {'ALL TESTS PASSED' if all_pass else 'SOME TESTS FAILED'}")
    print("=" * 70)

    return all_pass


if __name__ == "__main__":
    run_tests()
