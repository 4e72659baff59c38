# fe1_fpe/errors.py
"""
FE1-FPE Exceptions

Raised synchronously, before any keyed hashing runs, so a failed call never
produces partial output.
"""


class FPEError(Exception):
    """Base exception for FE1-FPE errors."""
    pass


class ConfigurationError(FPEError):
    """Raised when the modulus or its factor pair cannot drive the cipher."""
    pass


class RangeError(FPEError, ValueError):
    """Raised when a value lies outside the domain of its type."""

    def __init__(self, message: str, value=None):
        self.value = value
        super().__init__(message)
