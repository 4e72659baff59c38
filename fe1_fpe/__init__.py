# fe1_fpe/__init__.py
"""
FE1-FPE: Format-Preserving Encryption

Encrypts a value into another value of the same domain:
- FE1 Feistel permutation over any [0, n) with n up to 128 bits
- HMAC-SHA-256 round function, keyed per call, with a public tweak
- Typed encoders: uint32/uint64, int32/int64, safe int, decimal,
  datetime, string
- Batch encryption of numpy integer columns

Not authenticated encryption: ciphertexts carry no integrity check.

Architecture:
    ┌─────────────────────────────────────────────────────────┐
    │  fe1_fpe                                                │
    │  ├── cryptography/     # Numeric core                   │
    │  │   ├── common.py     # Constants, byte helpers        │
    │  │   ├── prf.py        # RoundFunction (HMAC-SHA-256)   │
    │  │   ├── factor.py     # Modulus factorizer             │
    │  │   ├── core.py       # FE1 encrypt/decrypt            │
    │  │   └── batch.py      # numpy column encryption        │
    │  │                                                      │
    │  ├── encoding/         # Typed values                   │
    │  │   ├── ranking.py    # rank/unrank                    │
    │  │   └── practical.py  # Typed API, FPECipher           │
    │  │                                                      │
    │  ├── domains.py        # Integer domains, bounds        │
    │  └── errors.py         # FPEError hierarchy             │
    └─────────────────────────────────────────────────────────┘
"""

__version__ = "1.0.0"

# =============================================================================
# Errors
# =============================================================================

from .errors import FPEError, ConfigurationError, RangeError

# =============================================================================
# Core Cryptography
# =============================================================================

from .cryptography.common import MAX_N_BYTES, FE1_ROUNDS

from .cryptography.core import (
    FE1,
    encrypt,
    decrypt,
    rounds,
)

from .cryptography.factor import factor
from .cryptography.prf import RoundFunction
from .cryptography.batch import encrypt_batch, decrypt_batch

# =============================================================================
# Domains
# =============================================================================

from .domains import (
    DOMAINS,
    IntegerDomain,
    get_domain,
    MAX_ALLOWED_SAFE_INT,
    MIN_ALLOWED_SAFE_INT,
    MAX_ALLOWED_DECIMAL,
    MIN_ALLOWED_DECIMAL,
    MAX_POSSIBLE_DATE,
    MAX_CHAR,
    CHAR_RANGE,
)

# =============================================================================
# Typed Encoding
# =============================================================================

from .encoding import (
    FPECipher,
    encrypt_uint32,
    decrypt_uint32,
    encrypt_uint64,
    decrypt_uint64,
    encrypt_int32,
    decrypt_int32,
    encrypt_int64,
    decrypt_int64,
    encrypt_safe_int,
    decrypt_safe_int,
    encrypt_decimal,
    decrypt_decimal,
    encrypt_datetime,
    decrypt_datetime,
    encrypt_string,
    decrypt_string,
    rank_int32,
    unrank_int32,
    rank_int64,
    unrank_int64,
    rank_safe_int,
    unrank_safe_int,
)

# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Version
    "__version__",

    # -------------------------------------------------------------------------
    # Errors
    # -------------------------------------------------------------------------
    "FPEError",
    "ConfigurationError",
    "RangeError",

    # -------------------------------------------------------------------------
    # Core Cryptography
    # -------------------------------------------------------------------------
    "FE1",
    "encrypt",
    "decrypt",
    "rounds",
    "factor",
    "RoundFunction",
    "encrypt_batch",
    "decrypt_batch",

    # -------------------------------------------------------------------------
    # Typed Encoding
    # -------------------------------------------------------------------------
    "FPECipher",
    "encrypt_uint32",
    "decrypt_uint32",
    "encrypt_uint64",
    "decrypt_uint64",
    "encrypt_int32",
    "decrypt_int32",
    "encrypt_int64",
    "decrypt_int64",
    "encrypt_safe_int",
    "decrypt_safe_int",
    "encrypt_decimal",
    "decrypt_decimal",
    "encrypt_datetime",
    "decrypt_datetime",
    "encrypt_string",
    "decrypt_string",
    "rank_int32",
    "unrank_int32",
    "rank_int64",
    "unrank_int64",
    "rank_safe_int",
    "unrank_safe_int",

    # -------------------------------------------------------------------------
    # Domains & Constants
    # -------------------------------------------------------------------------
    "DOMAINS",
    "IntegerDomain",
    "get_domain",
    "MAX_ALLOWED_SAFE_INT",
    "MIN_ALLOWED_SAFE_INT",
    "MAX_ALLOWED_DECIMAL",
    "MIN_ALLOWED_DECIMAL",
    "MAX_POSSIBLE_DATE",
    "MAX_CHAR",
    "CHAR_RANGE",
    "MAX_N_BYTES",
    "FE1_ROUNDS",
]


# =============================================================================
# Quick Status Check
# =============================================================================

def status() -> dict:
    """
    Get cipher parameters.

    Example:
        >>> import fe1_fpe
        >>> fe1_fpe.status()
        {'version': '1.0.0', 'scheme': 'FE1', 'prf': 'HMAC-SHA-256', ...}
    """
    return {
        'version': __version__,
        'scheme': 'FE1',
        'prf': 'HMAC-SHA-256',
        'rounds': FE1_ROUNDS,
        'max_modulus_bits': MAX_N_BYTES * 8,
        'domains': sorted(DOMAINS),
    }
