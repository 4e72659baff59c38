"""
Benchmark: Scalar vs Batch FE1 Encryption

Compare one encrypt() call per value with encrypt_batch() over a numpy
column. The batch path factors the modulus and keys the round function
once, so the difference is the per-call setup cost.
"""

import secrets
import time

import numpy as np

from fe1_fpe import decrypt_batch, encrypt, encrypt_batch


def compare_methods(modulus=10**9, batch_size=20000):
    """
    Direct comparison of scalar and batch encryption
    """
    print("=" * 70)
    print("FE1-FPE: Scalar vs Batch Comparison")
    print("=" * 70)

    key = secrets.token_bytes(32)
    tweak = b"benchmark"
    values = np.random.default_rng().integers(0, modulus, size=batch_size, dtype=np.int64)

    # Scalar
    print("\n[1] Scalar encrypt()")
    start = time.time()
    scalar = [encrypt(modulus, int(v), key, tweak) for v in values]
    time_scalar = time.time() - start
    print(f"  Time:       {time_scalar*1000:.2f}ms")
    print(f"  Throughput: {batch_size / time_scalar:,.0f} values/s")

    # Batch
    print("\n[2] Batch encrypt_batch()")
    start = time.time()
    batch = encrypt_batch(modulus, values, key, tweak)
    time_batch = time.time() - start
    print(f"  Time:       {time_batch*1000:.2f}ms")
    print(f"  Throughput: {batch_size / time_batch:,.0f} values/s")

    same = batch.tolist() == scalar
    restored = np.array_equal(decrypt_batch(modulus, batch, key, tweak), values)

    print("\n" + "=" * 70)
    print(f"Speedup:   {time_scalar / time_batch:.2f}x")
    print(f"Identical: {'✅' if same else '❌'}")
    print(f"Restored:  {'✅' if restored else '❌'}")
    print("=" * 70)


if __name__ == "__main__":
    compare_methods()
