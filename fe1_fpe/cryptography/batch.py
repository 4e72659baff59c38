# fe1_fpe/cryptography/batch.py
"""
FE1-FPE Batch Encryption

Encrypt or decrypt a whole column of integers under one modulus, key and
tweak. Factoring and round-function setup happen once per batch call; the
values are range-checked with numpy before any keyed hashing runs.

Output dtype:
  - modulus <= 2^64: uint64
  - larger moduli:   object (Python ints)
"""

from __future__ import annotations

import logging
from typing import Iterable, Union

import numpy as np

from .common import BytesLike
from .core import _check_modulus, _decrypt_rounds, _encrypt_rounds, rounds
from .factor import factor
from .prf import RoundFunction
from ..errors import RangeError

logger = logging.getLogger("fe1-fpe")

ArrayLike = Union[np.ndarray, Iterable[int]]

_UINT64_LIMIT = 1 << 64


def _as_values(values: ArrayLike, modulus: int) -> np.ndarray:
    """Coerce to a 1-D array and check every element lies in [0, modulus)."""
    arr = np.asarray(values if isinstance(values, np.ndarray) else list(values))

    if arr.ndim != 1:
        raise ValueError(f"Batch values must be 1-D, got shape {arr.shape}")

    if arr.size == 0:
        return arr.astype(np.uint64)

    if arr.dtype.kind in "iu":
        lo, hi = int(arr.min()), int(arr.max())
    elif arr.dtype == object:
        if not all(isinstance(v, (int, np.integer)) for v in arr):
            raise TypeError("Batch values must be integers")
        lo, hi = int(min(arr)), int(max(arr))
    else:
        raise TypeError(f"Batch values must be integers, got dtype {arr.dtype}")

    if lo < 0 or hi >= modulus:
        bad = lo if lo < 0 else hi
        raise RangeError(f"Batch value must be in [0, {modulus}), got {bad}", value=bad)

    return arr


def _run(modulus: int, values: ArrayLike, key: BytesLike, tweak: BytesLike, inverse: bool) -> np.ndarray:
    _check_modulus(modulus)
    arr = _as_values(values, modulus)

    a, b = factor(modulus)
    r = rounds(a, b)
    F = RoundFunction(key, modulus, tweak)

    step = _decrypt_rounds if inverse else _encrypt_rounds
    out = [step(F, a, b, r, int(x)) for x in arr]

    logger.debug(f"batch {'decrypt' if inverse else 'encrypt'}: {len(out)} values")

    if modulus <= _UINT64_LIMIT:
        return np.array(out, dtype=np.uint64)
    return np.array(out, dtype=object)


def encrypt_batch(modulus: int, values: ArrayLike, key: BytesLike, tweak: BytesLike) -> np.ndarray:
    """
    Encrypt every value in [0, modulus).

    Args:
        modulus: Domain size
        values: 1-D integer array or iterable of ints
        key: Secret key
        tweak: Non-secret tweak

    Returns:
        Array of ciphertexts, same length and order as values
    """
    return _run(modulus, values, key, tweak, inverse=False)


def decrypt_batch(modulus: int, values: ArrayLike, key: BytesLike, tweak: BytesLike) -> np.ndarray:
    """Inverse of encrypt_batch under the same key, tweak and modulus."""
    return _run(modulus, values, key, tweak, inverse=True)
