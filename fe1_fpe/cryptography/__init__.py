# fe1_fpe/cryptography/__init__.py
"""
FE1-FPE Cryptography Module

Numeric core:
  - RoundFunction: HMAC-SHA-256 round function, one per call
  - factor: modulus -> (a, b), a >= b
  - encrypt / decrypt: 3-round FE1 Feistel permutation of [0, n)

Wire Format:
  - Length prefixes and round numbers: big-endian uint32
  - Integers: minimal unsigned big-endian
"""

# Common utilities and constants
from .common import (
    MAX_N_BYTES,
    FE1_ROUNDS,
    PRIME_BOUND,
    MAX_DIVISORS,
)

# Round function
from .prf import RoundFunction

# Factorizer
from .factor import factor

# Core cipher
from .core import (
    FE1,
    encrypt,
    decrypt,
    rounds,
)

# Batch
from .batch import encrypt_batch, decrypt_batch

__all__ = [
    # CORE
    "FE1",
    "encrypt",
    "decrypt",
    "rounds",
    "factor",
    "RoundFunction",
    # Batch
    "encrypt_batch",
    "decrypt_batch",
    # Constants
    "MAX_N_BYTES",
    "FE1_ROUNDS",
    "PRIME_BOUND",
    "MAX_DIVISORS",
]
