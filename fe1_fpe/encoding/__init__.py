# fe1_fpe/encoding/__init__.py
"""
FE1-FPE Encoding Module

Rank/unrank typed values onto [0, n) and encrypt them with the FE1 core.
"""

from .ranking import (
    rank_int32,
    unrank_int32,
    rank_int64,
    unrank_int64,
    rank_safe_int,
    unrank_safe_int,
    scale_decimal,
    descale_decimal,
    to_ticks,
    from_ticks,
)

from .practical import (
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
)

__all__ = [
    # Cipher
    "FPECipher",
    # Unsigned
    "encrypt_uint32",
    "decrypt_uint32",
    "encrypt_uint64",
    "decrypt_uint64",
    # Signed
    "encrypt_int32",
    "decrypt_int32",
    "encrypt_int64",
    "decrypt_int64",
    "encrypt_safe_int",
    "decrypt_safe_int",
    # Other types
    "encrypt_decimal",
    "decrypt_decimal",
    "encrypt_datetime",
    "decrypt_datetime",
    "encrypt_string",
    "decrypt_string",
    # Ranking
    "rank_int32",
    "unrank_int32",
    "rank_int64",
    "unrank_int64",
    "rank_safe_int",
    "unrank_safe_int",
    "scale_decimal",
    "descale_decimal",
    "to_ticks",
    "from_ticks",
]
