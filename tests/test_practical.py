# tests/test_practical.py
"""
FE1-FPE Typed Encryption Test Suite

Tests for: encrypt_/decrypt_ uint32, uint64, int32, int64, safe int,
decimal, datetime, string and FPECipher.
Categories:
  P1. Unsigned integers
  P2. Signed integers and safe int
  P3. Decimal
  P4. Datetime
  P5. String
  P6. Bound cipher
"""

import random
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal, localcontext
from typing import Dict

import pytest

import fe1_fpe.encoding.practical as practical_module
from fe1_fpe import (
    ConfigurationError,
    MAX_ALLOWED_DECIMAL,
    MAX_ALLOWED_SAFE_INT,
    MAX_POSSIBLE_DATE,
    MIN_ALLOWED_DECIMAL,
    MIN_ALLOWED_SAFE_INT,
    FPECipher,
    RangeError,
    decrypt_datetime,
    decrypt_decimal,
    decrypt_int32,
    decrypt_int64,
    decrypt_safe_int,
    decrypt_string,
    decrypt_uint32,
    decrypt_uint64,
    encrypt_datetime,
    encrypt_decimal,
    encrypt_int32,
    encrypt_int64,
    encrypt_safe_int,
    encrypt_string,
    encrypt_uint32,
    encrypt_uint64,
)

KEY = "Here's my secret key!".encode("utf-16-le")
TWEAK = "Here's my tweak".encode("utf-16-le")

UINT32_MAX = 2**32 - 1
UINT64_MAX = 2**64 - 1
INT32_MIN, INT32_MAX = -2**31, 2**31 - 1
INT64_MIN, INT64_MAX = -2**63, 2**63 - 1


# =============================================================================
# P1. Unsigned Integers
# =============================================================================

@pytest.mark.parametrize("plain", [0, 1, UINT64_MAX - 1, 2**63])
def test_p1_1_uint64_roundtrip(plain):
    enc = encrypt_uint64(KEY, TWEAK, plain)
    assert 0 <= enc < UINT64_MAX
    assert decrypt_uint64(KEY, TWEAK, enc) == plain


@pytest.mark.parametrize("plain", [0, 1, UINT32_MAX - 1])
def test_p1_2_uint32_roundtrip(plain):
    enc = encrypt_uint32(KEY, TWEAK, plain)
    assert 0 <= enc < UINT32_MAX
    assert decrypt_uint32(KEY, TWEAK, enc) == plain


def test_p1_3_unsigned_random(iterations: int = 1000):
    """
    P1.3: Random unsigned values round-trip
    """
    print("\n[P1.3] Unsigned Random Round Trip")
    print("-" * 50)

    rng = random.Random(2024)
    fail = 0
    for _ in range(iterations):
        plain = rng.randrange(0, INT32_MAX)
        if decrypt_uint64(KEY, TWEAK, encrypt_uint64(KEY, TWEAK, plain)) != plain:
            fail += 1
        if decrypt_uint32(KEY, TWEAK, encrypt_uint32(KEY, TWEAK, plain)) != plain:
            fail += 1

    print(f"  Failures: {fail}")
    assert fail == 0


def test_p1_4_unsigned_sentinels():
    """
    P1.4: The type MAX, negatives and oversized values are rejected
    """
    with pytest.raises(RangeError):
        encrypt_uint64(KEY, TWEAK, UINT64_MAX)
    with pytest.raises(RangeError):
        encrypt_uint32(KEY, TWEAK, UINT32_MAX)
    with pytest.raises(RangeError):
        encrypt_uint32(KEY, TWEAK, -1)
    with pytest.raises(RangeError):
        decrypt_uint32(KEY, TWEAK, UINT32_MAX + 10)


def test_p1_5_explicit_range():
    """
    P1.5: Explicit range bounds both plaintext and ciphertext
    """
    value_range = 10**6
    rng = random.Random(5)
    for _ in range(200):
        plain = rng.randrange(value_range)
        enc = encrypt_uint64(KEY, TWEAK, plain, value_range)
        assert 0 <= enc < value_range
        assert decrypt_uint64(KEY, TWEAK, enc, value_range) == plain

    with pytest.raises(RangeError):
        encrypt_uint64(KEY, TWEAK, value_range + 1, value_range)
    with pytest.raises(RangeError):
        encrypt_uint64(KEY, TWEAK, value_range, value_range)
    with pytest.raises(RangeError):
        encrypt_uint32(KEY, TWEAK, 5, UINT32_MAX + 1)
    with pytest.raises(RangeError):
        encrypt_uint32(KEY, TWEAK, 0, 0)


# =============================================================================
# P2. Signed Integers
# =============================================================================

@pytest.mark.parametrize("plain", [INT32_MIN, INT32_MIN + 1, INT32_MAX - 1, INT32_MAX])
def test_p2_1_int32_sentinels_rejected(plain):
    with pytest.raises(RangeError):
        encrypt_int32(KEY, TWEAK, plain)


@pytest.mark.parametrize("plain", [INT32_MIN + 2, INT32_MAX - 2, 0, -1, 1, 123456])
def test_p2_2_int32_roundtrip(plain):
    enc = encrypt_int32(KEY, TWEAK, plain)
    assert 0 <= enc < UINT32_MAX
    assert decrypt_int32(KEY, TWEAK, enc) == plain


@pytest.mark.parametrize("plain", [INT64_MIN, INT64_MIN + 1, INT64_MAX - 1, INT64_MAX])
def test_p2_3_int64_sentinels_rejected(plain):
    with pytest.raises(RangeError):
        encrypt_int64(KEY, TWEAK, plain)


@pytest.mark.parametrize("plain", [INT64_MIN + 2, INT64_MAX - 2, 0, -987654321012])
def test_p2_4_int64_roundtrip(plain):
    enc = encrypt_int64(KEY, TWEAK, plain)
    assert 0 <= enc < UINT64_MAX
    assert decrypt_int64(KEY, TWEAK, enc) == plain


def test_p2_5_safe_int():
    """
    P2.5: Safe int bounds, round trip and non-negative int32 ciphertext
    """
    print("\n[P2.5] Safe Int")
    print("-" * 50)

    for bad in (MAX_ALLOWED_SAFE_INT, MIN_ALLOWED_SAFE_INT, INT32_MAX, INT32_MIN):
        with pytest.raises(RangeError):
            encrypt_safe_int(KEY, TWEAK, bad)

    results = {'pass': 0, 'fail': 0}
    rng = random.Random(11)
    samples = [0, MAX_ALLOWED_SAFE_INT - 1, MIN_ALLOWED_SAFE_INT + 1]
    samples += [rng.randrange(MIN_ALLOWED_SAFE_INT + 1, MAX_ALLOWED_SAFE_INT) for _ in range(200)]

    for plain in samples:
        enc = encrypt_safe_int(KEY, TWEAK, plain)
        ok = 0 <= enc < INT32_MAX - 1 and decrypt_safe_int(KEY, TWEAK, enc) == plain
        results['pass' if ok else 'fail'] += 1

    print(f"  Pass: {results['pass']}, Fail: {results['fail']}")
    assert results['fail'] == 0


# =============================================================================
# P3. Decimal
# =============================================================================

@pytest.mark.parametrize("plain", [
    Decimal("0.00001"),
    Decimal("0"),
    Decimal("-0.00001"),
    Decimal("1234.5"),
    Decimal("-98765.43210"),
    Decimal("92233720368547.75805"),
    Decimal("-92233720368547.75806"),
])
def test_p3_1_decimal_roundtrip(plain):
    enc = encrypt_decimal(KEY, TWEAK, plain)
    assert enc == enc.to_integral_value()
    assert decrypt_decimal(KEY, TWEAK, enc) == plain


def test_p3_2_decimal_boundaries():
    """
    P3.2: The scaled int64 extremes and values past them are rejected
    """
    with pytest.raises(RangeError):
        encrypt_decimal(KEY, TWEAK, MAX_ALLOWED_DECIMAL)
    with pytest.raises(RangeError):
        encrypt_decimal(KEY, TWEAK, MIN_ALLOWED_DECIMAL)
    with pytest.raises(RangeError):
        encrypt_decimal(KEY, TWEAK, Decimal("1e20"))
    with pytest.raises(RangeError):
        encrypt_decimal(KEY, TWEAK, Decimal("1e40"))
    with pytest.raises(RangeError):
        encrypt_decimal(KEY, TWEAK, Decimal("NaN"))


def test_p3_3_decimal_precision_loss():
    """
    P3.3: Digits past the fifth place are rounded away, not rejected
    """
    enc = encrypt_decimal(KEY, TWEAK, Decimal("123.456789"))
    assert decrypt_decimal(KEY, TWEAK, enc) == Decimal("123.45679")

    # banker's rounding at the midpoint
    enc = encrypt_decimal(KEY, TWEAK, Decimal("0.000005"))
    assert decrypt_decimal(KEY, TWEAK, enc) == Decimal("0")

    enc = encrypt_decimal(KEY, TWEAK, 2.5)
    assert decrypt_decimal(KEY, TWEAK, enc) == Decimal("2.5")


def test_p3_4_decimal_ciphertext_must_be_integral():
    with pytest.raises(RangeError):
        decrypt_decimal(KEY, TWEAK, Decimal("1.5"))
    with pytest.raises(RangeError):
        decrypt_decimal(KEY, TWEAK, Decimal("-3"))


def test_p3_5_decimal_roundtrip_under_low_precision():
    """
    P3.5: A caller's 16-digit decimal context does not change the result
    """
    plain = Decimal("92233720368547.75805")
    expected = encrypt_decimal(KEY, TWEAK, plain)

    with localcontext() as ctx:
        ctx.prec = 16
        enc = encrypt_decimal(KEY, TWEAK, plain)
        assert enc == expected
        assert decrypt_decimal(KEY, TWEAK, enc) == plain

        enc = encrypt_decimal(KEY, TWEAK, "-12345.67891")
        assert decrypt_decimal(KEY, TWEAK, enc) == Decimal("-12345.67891")


# =============================================================================
# P4. Datetime
# =============================================================================

@pytest.mark.parametrize("plain", [
    datetime(2024, 5, 17, 13, 45, 30, 123456),
    datetime.min,
    datetime(1970, 1, 1),
    MAX_POSSIBLE_DATE - timedelta(microseconds=1),
])
def test_p4_1_datetime_roundtrip(plain):
    enc = encrypt_datetime(KEY, TWEAK, plain)
    assert enc < MAX_POSSIBLE_DATE
    assert decrypt_datetime(KEY, TWEAK, enc) == plain


def test_p4_2_datetime_bound():
    with pytest.raises(RangeError):
        encrypt_datetime(KEY, TWEAK, MAX_POSSIBLE_DATE)
    with pytest.raises(RangeError):
        encrypt_datetime(KEY, TWEAK, datetime(3500, 1, 1))
    with pytest.raises(TypeError):
        encrypt_datetime(KEY, TWEAK, "2024-01-01")


def test_p4_3_datetime_keeps_tzinfo():
    tz = timezone(timedelta(hours=9))
    plain = datetime(2025, 1, 20, 8, 30, tzinfo=tz)

    enc = encrypt_datetime(KEY, TWEAK, plain)
    assert enc.tzinfo is tz

    dec = decrypt_datetime(KEY, TWEAK, enc)
    assert dec == plain
    assert dec.tzinfo is tz


# =============================================================================
# P5. String
# =============================================================================

def test_p5_1_hello_world():
    """
    P5.1: "hello world" round-trips with its length preserved
    """
    print("\n[P5.1] String Round Trip")
    print("-" * 50)

    original = "hello world"
    enc = encrypt_string(KEY, TWEAK, original)
    dec = decrypt_string(KEY, TWEAK, enc)

    print(f"  Length: {len(original)} -> {len(enc)} -> {len(dec)}")
    assert len(enc) == len(original)
    assert len(dec) == len(original)
    assert dec == original


@pytest.mark.parametrize("original", [
    "",
    "a",
    "こんにちは、世界！",
    "量子耐性暗号🔐",
    "tab\tnewline\n",
])
def test_p5_2_unicode_roundtrip(original):
    enc = encrypt_string(KEY, TWEAK, original)
    assert len(enc) == len(original)
    assert decrypt_string(KEY, TWEAK, enc) == original


def test_p5_3_characters_independent():
    """
    P5.3: Each character is its own permutation block
    """
    enc = encrypt_string(KEY, TWEAK, "aaaa")
    assert len(set(enc)) == 1
    assert encrypt_string(KEY, TWEAK, "ab")[0] == encrypt_string(KEY, TWEAK, "a")


def test_p5_4_string_extremes_and_errors():
    # every code point, including U+0000 and sys.maxunicode, is in the domain
    original = "ok" + chr(0) + chr(sys.maxunicode)
    enc = encrypt_string(KEY, TWEAK, original)
    assert len(enc) == len(original)
    assert decrypt_string(KEY, TWEAK, enc) == original

    with pytest.raises(TypeError):
        encrypt_string(KEY, TWEAK, b"bytes")


def test_p5_5_string_tweak_sensitivity():
    text = "The quick brown fox jumps over the lazy dog"
    assert encrypt_string(KEY, TWEAK, text) != encrypt_string(KEY, b"other tweak", text)


def test_p5_6_string_checks_before_keyed_hashing(monkeypatch):
    calls = []
    monkeypatch.setattr(practical_module, "RoundFunction", lambda *args: calls.append(args))
    monkeypatch.setattr(practical_module, "factor", lambda n: (2, 5))

    with pytest.raises(ConfigurationError):
        encrypt_string(KEY, TWEAK, "abc")
    assert calls == []


# =============================================================================
# P6. Bound Cipher
# =============================================================================

def test_p6_1_cipher_matches_functions():
    """
    P6.1: FPECipher methods agree with the module-level functions
    """
    cipher = FPECipher(KEY, TWEAK)

    assert cipher.encrypt_uint32(42) == encrypt_uint32(KEY, TWEAK, 42)
    assert cipher.decrypt_uint32(cipher.encrypt_uint32(42, 1000), 1000) == 42
    assert cipher.encrypt_uint64(42) == encrypt_uint64(KEY, TWEAK, 42)
    assert cipher.decrypt_uint64(cipher.encrypt_uint64(42)) == 42
    assert cipher.decrypt_int32(cipher.encrypt_int32(-42)) == -42
    assert cipher.decrypt_int64(cipher.encrypt_int64(-42)) == -42
    assert cipher.decrypt_safe_int(cipher.encrypt_safe_int(-42)) == -42
    assert cipher.decrypt_decimal(cipher.encrypt_decimal(Decimal("4.2"))) == Decimal("4.2")

    when = datetime(2020, 2, 29, 12)
    assert cipher.decrypt_datetime(cipher.encrypt_datetime(when)) == when

    enc = cipher.encrypt_string("hello world")
    assert enc == encrypt_string(KEY, TWEAK, "hello world")
    assert cipher.decrypt_string(enc) == "hello world"


def test_p6_2_cipher_rejects_text_key():
    with pytest.raises(TypeError):
        FPECipher("not bytes", TWEAK)


# =============================================================================
# Main
# =============================================================================

def run_all_tests() -> Dict:
    """Run the non-parametrized tests in this module and print a summary."""
    print("=" * 70)
    print("FE1-FPE TYPED ENCRYPTION TEST SUITE")
    print("=" * 70)

    tests = [
        test_p1_3_unsigned_random,
        test_p1_4_unsigned_sentinels,
        test_p1_5_explicit_range,
        test_p2_5_safe_int,
        test_p3_2_decimal_boundaries,
        test_p3_3_decimal_precision_loss,
        test_p3_4_decimal_ciphertext_must_be_integral,
        test_p3_5_decimal_roundtrip_under_low_precision,
        test_p4_2_datetime_bound,
        test_p4_3_datetime_keeps_tzinfo,
        test_p5_1_hello_world,
        test_p5_3_characters_independent,
        test_p5_4_string_extremes_and_errors,
        test_p5_5_string_tweak_sensitivity,
        test_p6_1_cipher_matches_functions,
        test_p6_2_cipher_rejects_text_key,
    ]

    all_results = {}
    for test in tests:
        try:
            test()
            all_results[test.__name__] = True
        except AssertionError as e:
            print(f"  FAILED: {e}")
            all_results[test.__name__] = False

    passed = sum(all_results.values())
    print(f"\nTotal: {passed} passed, {len(all_results) - passed} failed")
    return all_results


if __name__ == "__main__":
    run_all_tests()
