# fe1_fpe/cryptography/prf.py
"""
FE1-FPE Round Function

HMAC(SHA-256) based pseudorandom function driving the Feistel rounds.

Construction:
    H0      = HMAC(key, BE32(|n|) || n || BE32(|tweak|) || tweak)
    F(i, R) = uint_be(HMAC(key, H0 || BE32(i) || BE32(|R|) || R))

A RoundFunction is built once per encrypt/decrypt call and thrown away when
the call returns. The keyed HMAC object is copied for every digest, so the
base context is never mutated and nothing carries over between calls.
"""

from __future__ import annotations

import hashlib
import hmac

from .common import (
    MAX_N_BYTES,
    BytesLike,
    _as_bytes,
    _be32,
    _encode_int,
    _int_from_bytes,
    _length_prefixed,
)
from ..errors import ConfigurationError


class RoundFunction:
    """
    Call-scoped FE1 round function.

    Args:
        key: Secret key
        modulus: Domain size n
        tweak: Public tweak
        max_n_bytes: Upper bound on the encoded modulus length
    """

    def __init__(
        self,
        key: BytesLike,
        modulus: int,
        tweak: BytesLike,
        max_n_bytes: int = MAX_N_BYTES,
    ):
        key = _as_bytes(key, "key")
        tweak = _as_bytes(tweak, "tweak")

        n_bin = _encode_int(modulus)
        if len(n_bin) > max_n_bytes:
            raise ConfigurationError(
                f"Modulus is too large for FPE encryption: "
                f"{len(n_bin)} > {max_n_bytes} bytes"
            )

        self._mac = hmac.new(key, digestmod=hashlib.sha256)
        self._mac_n_t = self._digest(
            _length_prefixed(n_bin) + _length_prefixed(tweak)
        )

    def _digest(self, message: bytes) -> bytes:
        mac = self._mac.copy()
        mac.update(message)
        return mac.digest()

    def __call__(self, round_no: int, R: int) -> int:
        """Evaluate F(round_no, R); the caller reduces modulo a."""
        r_bin = _encode_int(R)
        digest = self._digest(
            self._mac_n_t + _be32(round_no) + _length_prefixed(r_bin)
        )
        # reversed digest plus a zero sign byte, read little-endian, is the
        # digest read as unsigned big-endian
        return _int_from_bytes(digest)
