"""
Error types raised by splitsecret.

All errors share the SSSError base so callers can catch the whole family
at once. The concrete classes also derive from the builtin exception a
caller would expect for that kind of failure:

    ValidationError        -> ValueError       (bad parameters or share layout)
    DegenerateSharesError  -> ArithmeticError  (no modular inverse exists)
    RandomSourceError                          (OS CSPRNG failure)
    EncodingError          -> ValueError       (malformed hex / base64 text)
"""


class SSSError(Exception):
    """Base class for all secret sharing errors."""


class ValidationError(SSSError, ValueError):
    """Input parameters or share structure are invalid."""


class DegenerateSharesError(SSSError, ArithmeticError):
    """A Lagrange denominator is congruent to zero modulo the prime."""


class RandomSourceError(SSSError):
    """The secure random source failed to produce a value."""


class EncodingError(SSSError, ValueError):
    """Text could not be decoded with the requested encoding."""
