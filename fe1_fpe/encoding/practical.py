# fe1_fpe/encoding/practical.py
"""
FE1-FPE Practical Encryption

High-level API for encrypting typed fields without changing their format:
  - Unsigned 32/64-bit integers (optional explicit range)
  - Signed 32/64-bit integers (ranked; ciphertext is unsigned)
  - "Safe" int: a symmetric int32 sub-range whose ciphertext is a
    non-negative int32
  - Fixed-point decimals (5 places)
  - Datetimes (microsecond ticks below 2999-12-31)
  - Strings (one code point at a time, length preserved)

Every function takes (key, tweak, source). Decrypt with the same key and
tweak used to encrypt.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..cryptography.common import BytesLike, _as_bytes
from ..cryptography.core import _decrypt_rounds, _encrypt_rounds, decrypt, encrypt, rounds
from ..cryptography.factor import factor
from ..cryptography.prf import RoundFunction
from ..domains import (
    CHAR_RANGE,
    INT32,
    INT64,
    MAX_POSSIBLE_DATE,
    SAFE_INT_RANGE,
    UINT32,
    UINT64,
    IntegerDomain,
)
from ..errors import RangeError
from .ranking import (
    DecimalLike,
    _check_int,
    _to_decimal,
    descale_decimal,
    from_ticks,
    rank_safe_int,
    rank_signed,
    scale_decimal,
    to_ticks,
    unrank_safe_int,
    unrank_signed,
)

_MAX_TICKS = to_ticks(MAX_POSSIBLE_DATE)


# =============================================================================
# Unsigned Integers
# =============================================================================

def _check_unsigned(domain: IntegerDomain, source: int, value_range: Optional[int]) -> int:
    _check_int(source)
    if value_range is None:
        value_range = domain.max_value
    _check_int(value_range, "value_range")

    if not 1 <= value_range <= domain.max_value:
        raise RangeError(
            f"value_range should be in [1, {domain.max_value}]", value=value_range
        )
    if source < 0:
        raise RangeError("source should not be negative", value=source)
    if source >= domain.max_value:
        raise RangeError(f"source should be less than {domain.max_value}", value=source)
    if source >= value_range:
        raise RangeError(f"source should be less than range {value_range}", value=source)
    return value_range


def _encrypt_unsigned(domain, key, tweak, source, value_range):
    value_range = _check_unsigned(domain, source, value_range)
    return encrypt(value_range, source, key, tweak)


def _decrypt_unsigned(domain, key, tweak, source, value_range):
    value_range = _check_unsigned(domain, source, value_range)
    return decrypt(value_range, source, key, tweak)


def encrypt_uint32(key: BytesLike, tweak: BytesLike, source: int, value_range: Optional[int] = None) -> int:
    """
    Encrypt an unsigned 32-bit integer.

    Args:
        key: Secret key
        tweak: Non-secret tweak
        source: Value in [0, value_range)
        value_range: Domain size, defaults to 2^32 - 1

    Returns:
        Ciphertext in [0, value_range)
    """
    return _encrypt_unsigned(UINT32, key, tweak, source, value_range)


def decrypt_uint32(key: BytesLike, tweak: BytesLike, source: int, value_range: Optional[int] = None) -> int:
    return _decrypt_unsigned(UINT32, key, tweak, source, value_range)


def encrypt_uint64(key: BytesLike, tweak: BytesLike, source: int, value_range: Optional[int] = None) -> int:
    """Encrypt an unsigned 64-bit integer; value_range defaults to 2^64 - 1."""
    return _encrypt_unsigned(UINT64, key, tweak, source, value_range)


def decrypt_uint64(key: BytesLike, tweak: BytesLike, source: int, value_range: Optional[int] = None) -> int:
    return _decrypt_unsigned(UINT64, key, tweak, source, value_range)


# =============================================================================
# Signed Integers
# =============================================================================

def _encrypt_signed(domain: IntegerDomain, key, tweak, source: int) -> int:
    ranked = rank_signed(domain, source)
    return _encrypt_unsigned(domain.unsigned, key, tweak, ranked, None)


def _decrypt_signed(domain: IntegerDomain, key, tweak, source: int) -> int:
    ranked = _decrypt_unsigned(domain.unsigned, key, tweak, source, None)
    return unrank_signed(domain, ranked)


def encrypt_int32(key: BytesLike, tweak: BytesLike, source: int) -> int:
    """
    Encrypt a signed 32-bit integer.

    The four extremes (MIN, MIN + 1, MAX - 1, MAX) are rejected. The
    ciphertext is an unsigned 32-bit value; pass it to decrypt_int32.
    """
    return _encrypt_signed(INT32, key, tweak, source)


def decrypt_int32(key: BytesLike, tweak: BytesLike, source: int) -> int:
    return _decrypt_signed(INT32, key, tweak, source)


def encrypt_int64(key: BytesLike, tweak: BytesLike, source: int) -> int:
    """Encrypt a signed 64-bit integer; ciphertext is an unsigned 64-bit value."""
    return _encrypt_signed(INT64, key, tweak, source)


def decrypt_int64(key: BytesLike, tweak: BytesLike, source: int) -> int:
    return _decrypt_signed(INT64, key, tweak, source)


def encrypt_safe_int(key: BytesLike, tweak: BytesLike, source: int) -> int:
    """
    Encrypt an int32 strictly inside (MIN_ALLOWED_SAFE_INT, MAX_ALLOWED_SAFE_INT).

    The ciphertext is a non-negative int32 below INT32 MAX - 1.
    """
    ranked = rank_safe_int(source)
    return encrypt_uint32(key, tweak, ranked, SAFE_INT_RANGE)


def decrypt_safe_int(key: BytesLike, tweak: BytesLike, source: int) -> int:
    ranked = decrypt_uint32(key, tweak, source, SAFE_INT_RANGE)
    return unrank_safe_int(ranked)


# =============================================================================
# Decimal
# =============================================================================

def encrypt_decimal(key: BytesLike, tweak: BytesLike, source: DecimalLike) -> Decimal:
    """
    Encrypt a fixed-point decimal.

    The source is rounded to 5 places first; any further digits are lost.
    The ciphertext is an integral Decimal.
    """
    scaled = scale_decimal(source)
    return Decimal(encrypt_int64(key, tweak, scaled))


def decrypt_decimal(key: BytesLike, tweak: BytesLike, source: DecimalLike) -> Decimal:
    d = _to_decimal(source)
    if not d.is_finite() or d != d.to_integral_value() or d < 0:
        raise RangeError(f"Decimal ciphertext must be a non-negative integer, got {d}", value=source)
    plain = decrypt_int64(key, tweak, int(d))
    return descale_decimal(plain)


# =============================================================================
# Datetime
# =============================================================================

def encrypt_datetime(key: BytesLike, tweak: BytesLike, source: datetime) -> datetime:
    """
    Encrypt a datetime before MAX_POSSIBLE_DATE.

    The wall-clock value is encrypted; tzinfo is carried over unchanged.
    """
    ticks = to_ticks(source)
    if ticks >= _MAX_TICKS:
        raise RangeError(f"source should be less than {MAX_POSSIBLE_DATE}", value=source)
    result = encrypt_uint64(key, tweak, ticks, _MAX_TICKS)
    return from_ticks(result, source.tzinfo)


def decrypt_datetime(key: BytesLike, tweak: BytesLike, source: datetime) -> datetime:
    ticks = to_ticks(source)
    result = decrypt_uint64(key, tweak, ticks, _MAX_TICKS)
    return from_ticks(result, source.tzinfo)


# =============================================================================
# String
# =============================================================================

def _transform_string(key, tweak, source: str, inverse: bool) -> str:
    if not isinstance(source, str):
        raise TypeError(f"source must be a str, got {type(source).__name__}")

    codes = [ord(ch) for ch in source]

    a, b = factor(CHAR_RANGE)
    r = rounds(a, b)
    # one round function for the whole string, each character its own block
    F = RoundFunction(key, CHAR_RANGE, tweak)
    step = _decrypt_rounds if inverse else _encrypt_rounds
    return "".join(chr(step(F, a, b, r, code)) for code in codes)


def encrypt_string(key: BytesLike, tweak: BytesLike, source: str) -> str:
    """
    Encrypt a string character by character.

    Each code point is permuted independently over all code points,
    so the length is preserved and equal characters encrypt equally. The
    output may contain lone surrogates.
    """
    return _transform_string(key, tweak, source, inverse=False)


def decrypt_string(key: BytesLike, tweak: BytesLike, source: str) -> str:
    return _transform_string(key, tweak, source, inverse=True)


# =============================================================================
# Bound Cipher
# =============================================================================

class FPECipher:
    """
    Typed format-preserving cipher bound to one key/tweak pair.

    Example:
        >>> cipher = FPECipher(key, tweak)
        >>> ct = cipher.encrypt_string("hello world")
        >>> cipher.decrypt_string(ct)
        'hello world'
    """

    def __init__(self, key: BytesLike, tweak: BytesLike = b""):
        self.key = _as_bytes(key, "key")
        self.tweak = _as_bytes(tweak, "tweak")

    def encrypt_uint32(self, source: int, value_range: Optional[int] = None) -> int:
        return encrypt_uint32(self.key, self.tweak, source, value_range)

    def decrypt_uint32(self, source: int, value_range: Optional[int] = None) -> int:
        return decrypt_uint32(self.key, self.tweak, source, value_range)

    def encrypt_uint64(self, source: int, value_range: Optional[int] = None) -> int:
        return encrypt_uint64(self.key, self.tweak, source, value_range)

    def decrypt_uint64(self, source: int, value_range: Optional[int] = None) -> int:
        return decrypt_uint64(self.key, self.tweak, source, value_range)

    def encrypt_int32(self, source: int) -> int:
        return encrypt_int32(self.key, self.tweak, source)

    def decrypt_int32(self, source: int) -> int:
        return decrypt_int32(self.key, self.tweak, source)

    def encrypt_int64(self, source: int) -> int:
        return encrypt_int64(self.key, self.tweak, source)

    def decrypt_int64(self, source: int) -> int:
        return decrypt_int64(self.key, self.tweak, source)

    def encrypt_safe_int(self, source: int) -> int:
        return encrypt_safe_int(self.key, self.tweak, source)

    def decrypt_safe_int(self, source: int) -> int:
        return decrypt_safe_int(self.key, self.tweak, source)

    def encrypt_decimal(self, source: DecimalLike) -> Decimal:
        return encrypt_decimal(self.key, self.tweak, source)

    def decrypt_decimal(self, source: DecimalLike) -> Decimal:
        return decrypt_decimal(self.key, self.tweak, source)

    def encrypt_datetime(self, source: datetime) -> datetime:
        return encrypt_datetime(self.key, self.tweak, source)

    def decrypt_datetime(self, source: datetime) -> datetime:
        return decrypt_datetime(self.key, self.tweak, source)

    def encrypt_string(self, source: str) -> str:
        return encrypt_string(self.key, self.tweak, source)

    def decrypt_string(self, source: str) -> str:
        return decrypt_string(self.key, self.tweak, source)
