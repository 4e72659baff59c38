# fe1_fpe/cryptography/common.py
"""
FE1-FPE Common Components

Shared constants and byte/integer helpers for the FE1 cipher.

Wire Format Specification:
  - Length prefixes and round numbers: 4-byte big-endian (">I")
  - Integers fed to the keyed hash: minimal unsigned big-endian,
    empty for zero
"""

from __future__ import annotations

import struct
from typing import Union

from ..errors import RangeError


# =============================================================================
# Constants
# =============================================================================

# Normally FPE is for SSNs, card numbers and the like, nothing too big
MAX_N_BYTES: int = 128 // 8

# 2 + log_a(b) rounds are needed; a >= b keeps log_a(b) <= 1
FE1_ROUNDS: int = 3

# Factorizer search bounds
PRIME_BOUND: int = 1 << 16
MAX_DIVISORS: int = 1 << 16

BytesLike = Union[bytes, bytearray, memoryview]


# =============================================================================
# Utility Functions
# =============================================================================

def _encode_int(n: int) -> bytes:
    """Minimal unsigned big-endian encoding; b"" for zero."""
    if n < 0:
        raise RangeError(f"Cannot encode negative integer {n}", value=n)
    return n.to_bytes((n.bit_length() + 7) // 8, "big")


def _int_from_bytes(b: bytes) -> int:
    """Convert bytes to integer (big-endian, unsigned)."""
    return int.from_bytes(b, "big", signed=False)


def _be32(n: int) -> bytes:
    """4-byte big-endian length/counter prefix."""
    return struct.pack(">I", n)


def _length_prefixed(data: bytes) -> bytes:
    return _be32(len(data)) + data


def _mod(n: int, m: int) -> int:
    """
    Mathematically correct modulus with a result in [0, m).

    Python's % already floors for a positive divisor; the explicit guard
    keeps the contract independent of the divisor's sign.
    """
    if m <= 0:
        raise ValueError(f"Modulus must be positive, got {m}")
    return n % m


def _as_bytes(value: BytesLike, name: str) -> bytes:
    """Accept bytes-like key material, reject text and everything else."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(f"{name} must be bytes-like, got {type(value).__name__}")
