# fe1_fpe/encoding/ranking.py
"""
FE1-FPE Ranking

Bijections between typed values and non-negative integers, so one numeric
cipher can serve every type.

Signed integers:
    rank(s)   = s - (MIN + 1)
    unrank(r) = r + (MIN + 1)
  MIN, MIN + 1, MAX - 1 and MAX are reserved sentinels and cannot be ranked.

Safe int:
    rank(s) = s + MAX_ALLOWED_SAFE_INT, for |s| < MAX_ALLOWED_SAFE_INT

Decimal:
    rank(d) = round(d, 5) * 10^5 as int64 (digits past the fifth are lost)

Datetime:
    rank(t) = microseconds since datetime.min
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation, localcontext
from typing import Union

from ..domains import (
    DECIMAL_PLACES,
    DECIMAL_SCALE,
    INT32,
    INT64,
    MAX_ALLOWED_SAFE_INT,
    MIN_ALLOWED_SAFE_INT,
    SAFE_INT_RANGE,
    IntegerDomain,
)
from ..errors import RangeError

_QUANTUM = Decimal(1).scaleb(-DECIMAL_PLACES)
_TICK = timedelta(microseconds=1)

# Scaling runs under this context, not the caller's thread-local one; 28
# digits hold every int64-range value at 5 places exactly
_DECIMAL_CONTEXT = Context(prec=28, rounding=ROUND_HALF_EVEN, traps=[InvalidOperation])

DecimalLike = Union[Decimal, int, float, str]


def _check_int(value: int, name: str = "source") -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")


# =============================================================================
# Signed Integers
# =============================================================================

def rank_signed(domain: IntegerDomain, source: int) -> int:
    """Rank a signed value into the unsigned domain of the same width."""
    _check_int(source)
    if source >= domain.max_value - 1:
        raise RangeError(
            f"source should be less than {domain.max_value - 1}", value=source
        )
    if source <= domain.min_value + 1:
        raise RangeError(
            f"source should be greater than {domain.min_value + 1}", value=source
        )
    return source - (domain.min_value + 1)


def unrank_signed(domain: IntegerDomain, source: int) -> int:
    """Inverse of rank_signed over [0, UINT MAX), the ciphertext domain."""
    _check_int(source)
    if not 0 <= source < domain.unsigned.max_value:
        raise RangeError(
            f"ranked value should be in [0, {domain.unsigned.max_value})", value=source
        )
    return source + (domain.min_value + 1)


def rank_int32(source: int) -> int:
    return rank_signed(INT32, source)


def unrank_int32(source: int) -> int:
    return unrank_signed(INT32, source)


def rank_int64(source: int) -> int:
    return rank_signed(INT64, source)


def unrank_int64(source: int) -> int:
    return unrank_signed(INT64, source)


# =============================================================================
# Safe Int
# =============================================================================

def rank_safe_int(source: int) -> int:
    """Shift (MIN_ALLOWED_SAFE_INT, MAX_ALLOWED_SAFE_INT) onto positive int32."""
    _check_int(source)
    if source >= MAX_ALLOWED_SAFE_INT:
        raise RangeError(f"source should be less than {MAX_ALLOWED_SAFE_INT}", value=source)
    if source <= MIN_ALLOWED_SAFE_INT:
        raise RangeError(f"source should be greater than {MIN_ALLOWED_SAFE_INT}", value=source)
    return source + MAX_ALLOWED_SAFE_INT


def unrank_safe_int(source: int) -> int:
    _check_int(source)
    if not 0 <= source < SAFE_INT_RANGE:
        raise RangeError(f"ranked value should be in [0, {SAFE_INT_RANGE})", value=source)
    return source - MAX_ALLOWED_SAFE_INT


# =============================================================================
# Decimal
# =============================================================================

def _to_decimal(value: DecimalLike) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise TypeError(f"Cannot interpret {value!r} as a decimal") from e


def scale_decimal(value: DecimalLike) -> int:
    """
    Round to 5 places (banker's rounding) and scale to an int64.

    Raises:
        RangeError: If the value is not finite or the scaled value
            overflows int64
    """
    d = _to_decimal(value)
    if not d.is_finite():
        raise RangeError(f"Decimal must be finite, got {d}", value=value)

    try:
        with localcontext(_DECIMAL_CONTEXT):
            scaled = d.quantize(_QUANTUM, rounding=ROUND_HALF_EVEN).scaleb(DECIMAL_PLACES)
    except InvalidOperation as e:
        raise RangeError(f"Decimal {d} is outside the int64 scaled range", value=value) from e
    as_long = int(scaled)

    if not INT64.contains(as_long):
        raise RangeError(f"Decimal {d} is outside the int64 scaled range", value=value)
    return as_long


def descale_decimal(source: int) -> Decimal:
    _check_int(source)
    with localcontext(_DECIMAL_CONTEXT):
        return (Decimal(source) / DECIMAL_SCALE).quantize(_QUANTUM, rounding=ROUND_HALF_EVEN)


# =============================================================================
# Datetime
# =============================================================================

def to_ticks(value: datetime) -> int:
    """Microseconds since datetime.min, ignoring tzinfo."""
    if not isinstance(value, datetime):
        raise TypeError(f"source must be a datetime, got {type(value).__name__}")
    return (value.replace(tzinfo=None) - datetime.min) // _TICK


def from_ticks(ticks: int, tzinfo=None) -> datetime:
    _check_int(ticks, "ticks")
    try:
        return (datetime.min + ticks * _TICK).replace(tzinfo=tzinfo)
    except OverflowError as e:
        raise RangeError(f"ticks {ticks} are outside the datetime range", value=ticks) from e
