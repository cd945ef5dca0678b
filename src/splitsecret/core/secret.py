"""
Public entry points for splitting and combining byte secrets.

    create   Validate the secret length and produce shares
    combine  Reconstruct the secret from shares

Secrets must be a positive multiple of CHUNK_SIZE (32) bytes; pad them
before calling create if needed.
"""

from ..crypto.chunks import CHUNK_SIZE, bytes_to_elements
from ..crypto.shamir import combine_shares, create_shares
from ..errors import ValidationError


def is_proper_size(data: bytes) -> bool:
    """True if data is a positive multiple of CHUNK_SIZE bytes."""
    return len(data) > 0 and len(data) % CHUNK_SIZE == 0


def create(min_shares: int, total_shares: int, secret: bytes) -> list[bytes]:
    """
    Split secret into total_shares shares, any min_shares of which recover it.

    Args:
        min_shares: Minimum shares needed for reconstruction
        total_shares: Total number of shares to generate
        secret: Secret bytes, length a positive multiple of 32

    Returns:
        List of share byte strings, each 2x the secret length

    Raises:
        ValidationError: If the secret size or share counts are invalid
        RandomSourceError: If the secure random source fails
    """
    if not is_proper_size(secret):
        raise ValidationError(
            f"Secret size should be a positive multiple of {CHUNK_SIZE}, "
            f"got {len(secret)}"
        )
    return create_shares(min_shares, total_shares, bytes_to_elements(secret))


def combine(shares: list[bytes]) -> bytes:
    """
    Reconstruct a secret from shares produced by create.

    Passing fewer shares than the threshold used at creation returns a
    wrong secret rather than an error.

    Raises:
        ValidationError: If share lengths are unequal or malformed
        DegenerateSharesError: If two shares collide on an x-coordinate
    """
    return combine_shares(shares)
