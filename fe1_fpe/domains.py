# fe1_fpe/domains.py
"""
FE1-FPE Value Domains

Defines the integer domains and fixed bounds used by the typed encoders.
Each integer domain records its width, signedness and extreme values.

Domain Selection:
    - "uint32": [0, 2^32 - 1]
    - "uint64": [0, 2^64 - 1]
    - "int32":  [-2^31, 2^31 - 1]
    - "int64":  [-2^63, 2^63 - 1]

Usage:
    from fe1_fpe.domains import DOMAINS, get_domain

    dom = get_domain("int32")
    print(dom.max_value)  # 2147483647
"""

import sys
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Dict


# =============================================================================
# Integer Domains
# =============================================================================

@dataclass(frozen=True)
class IntegerDomain:
    """Fixed-width integer domain."""
    name: str
    bits: int
    signed: bool
    min_value: int
    max_value: int

    @property
    def unsigned(self) -> "IntegerDomain":
        """Unsigned domain of the same width (ranked values live here)."""
        return get_domain(f"uint{self.bits}")

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


def _unsigned(bits: int) -> IntegerDomain:
    return IntegerDomain(
        name=f"uint{bits}",
        bits=bits,
        signed=False,
        min_value=0,
        max_value=(1 << bits) - 1,
    )


def _signed(bits: int) -> IntegerDomain:
    return IntegerDomain(
        name=f"int{bits}",
        bits=bits,
        signed=True,
        min_value=-(1 << (bits - 1)),
        max_value=(1 << (bits - 1)) - 1,
    )


DOMAINS: Dict[str, IntegerDomain] = {
    "uint32": _unsigned(32),
    "uint64": _unsigned(64),
    "int32": _signed(32),
    "int64": _signed(64),
}

UINT32 = DOMAINS["uint32"]
UINT64 = DOMAINS["uint64"]
INT32 = DOMAINS["int32"]
INT64 = DOMAINS["int64"]


def get_domain(name: str) -> IntegerDomain:
    """
    Get integer domain by name.

    Raises:
        ValueError: If name is unknown
    """
    if name not in DOMAINS:
        raise ValueError(f"Unknown domain: {name!r}. Valid: {list(DOMAINS.keys())}")
    return DOMAINS[name]


# =============================================================================
# Fixed Bounds
# =============================================================================

# Symmetric sub-range of int32 whose ranked values stay below INT32.max - 1
MAX_ALLOWED_SAFE_INT: int = 1073741823
MIN_ALLOWED_SAFE_INT: int = -1073741823
SAFE_INT_RANGE: int = INT32.max_value - 1

# Fixed-point decimals are scaled by 10^5 into int64
DECIMAL_PLACES: int = 5
DECIMAL_SCALE: int = 10 ** DECIMAL_PLACES
MAX_ALLOWED_DECIMAL: Decimal = Decimal("92233720368547.75807")
MIN_ALLOWED_DECIMAL: Decimal = Decimal("-92233720368547.75808")

# Dates are encoded as microsecond ticks since datetime.min
MAX_POSSIBLE_DATE: datetime = datetime(2999, 12, 31)

# Characters are encrypted one code point at a time. The domain is every
# code point, 0x110000 = 2^16 * 17; sys.maxunicode alone is prime and
# would leave the Feistel rounds a plain rotation
MAX_CHAR: int = sys.maxunicode
CHAR_RANGE: int = MAX_CHAR + 1
