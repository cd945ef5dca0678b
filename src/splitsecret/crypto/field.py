"""
Arithmetic in the prime field GF(p) used by the sharing scheme.

Every value handled by the engine is an integer in [0, PRIME). Python
integers are arbitrary precision, so intermediate products never
overflow; the only thing to get right is reduction. Python's % operator
already returns a non-negative result for a positive modulus, which
normalises the negative values produced by subtraction into [0, PRIME).
"""

import secrets

from ..errors import DegenerateSharesError, RandomSourceError


# 256-bit prime for the finite field (2**256 - 189), the largest prime
# below 2**256. Any 32-byte chunk value below it is a valid field element.
PRIME = 2**256 - 189


def add(a: int, b: int, prime: int = PRIME) -> int:
    """Return (a + b) mod prime."""
    return (a + b) % prime


def sub(a: int, b: int, prime: int = PRIME) -> int:
    """Return (a - b) mod prime, always in [0, prime)."""
    return (a - b) % prime


def mul(a: int, b: int, prime: int = PRIME) -> int:
    """Return (a * b) mod prime."""
    return (a * b) % prime


def mod_inverse(a: int, prime: int = PRIME) -> int:
    """
    Compute modular multiplicative inverse using Fermat's little theorem.

    For prime p: a^(-1) = a^(p-2) mod p

    This works because a^(p-1) = 1 mod p (Fermat's little theorem),
    so a * a^(p-2) = a^(p-1) = 1 mod p, meaning a^(p-2) is the inverse.

    Args:
        a: Value to invert (must be non-zero mod prime)
        prime: Prime modulus

    Returns:
        Modular inverse of a

    Raises:
        DegenerateSharesError: If a is congruent to zero (no inverse exists)
    """
    if a % prime == 0:
        raise DegenerateSharesError("Cannot compute inverse of zero")

    return pow(a, prime - 2, prime)


def uniform_random(upper: int = PRIME) -> int:
    """
    Draw a uniformly distributed integer from [0, upper).

    secrets.randbelow reads from the OS CSPRNG and rejects draws that
    fall outside the range instead of reducing them, so there is no
    modulo bias.

    Raises:
        RandomSourceError: If the OS random source is unavailable
    """
    try:
        return secrets.randbelow(upper)
    except (OSError, NotImplementedError) as e:
        raise RandomSourceError(f"Secure random source failed: {e}") from e
