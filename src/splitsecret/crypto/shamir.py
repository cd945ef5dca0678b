"""
Shamir Secret Sharing (SSS) over chunked byte secrets.

This module implements (t, n) threshold secret sharing where:
- A secret is a sequence of field elements, one per 32-byte chunk
- Each chunk is split independently into n points
- Any t shares can reconstruct every chunk
- Fewer than t shares reveal no information about the secret

Mathematical Basis:
    1. Each chunk value S_c becomes the constant term (a_0) of its own
       random polynomial f_c(x) = a_0 + a_1*x + ... + a_{t-1}*x^{t-1}
    2. Every share holds one point (x, f_c(x)) per chunk, where x is a
       fresh uniformly random field element
    3. Reconstruction uses Lagrange interpolation at x = 0 per chunk

Share wire format:
    chunk_count * (32 bytes x || 32 bytes y), both big-endian, zero-padded.
    A share carries no index, so any t of the n shares combine in any order.

The scheme cannot tell how many shares were required at creation time.
Combining fewer than t shares completes normally and returns a wrong
secret; that is inherent to polynomial sharing and is not reported.

Reference:
    Shamir, A. (1979). "How to share a secret". Communications of the ACM.
"""

import logging

from ..errors import DegenerateSharesError, ValidationError
from .chunks import POINT_SIZE, SharePoint, elements_to_bytes
from .field import PRIME, add, mod_inverse, mul, uniform_random


logger = logging.getLogger(__name__)


def _generate_polynomial(secret: int, threshold: int, prime: int) -> list[int]:
    """
    Generate a random polynomial with the secret as constant term.

    The polynomial has degree (threshold - 1), meaning threshold points
    are needed to uniquely determine it (and recover the secret).

    Args:
        secret: The chunk value to hide (becomes coefficient a_0)
        threshold: Number of shares needed for reconstruction
        prime: The prime defining the finite field

    Returns:
        List of coefficients [a_0, a_1, ..., a_{t-1}] where a_0 = secret
    """
    coefficients = [secret]

    # (threshold - 1) uniformly random coefficients in [0, prime-1].
    for _ in range(threshold - 1):
        coefficients.append(uniform_random(prime))

    return coefficients


def _evaluate_polynomial(coefficients: list[int], x: int, prime: int) -> int:
    """
    Evaluate polynomial at point x using Horner's method.

    Horner's method computes f(x) = a_0 + x*(a_1 + x*(a_2 + ...)) with
    O(n) multiplications instead of O(n^2) for naive evaluation.

    Args:
        coefficients: Polynomial coefficients [a_0, a_1, ..., a_{t-1}]
        x: Point at which to evaluate
        prime: Modulus for finite field arithmetic

    Returns:
        f(x) mod prime
    """
    result = 0

    # Highest degree first
    for coeff in reversed(coefficients):
        result = add(mul(result, x, prime), coeff, prime)

    return result


def _interpolate_at_zero(points: list[SharePoint], prime: int) -> int:
    """
    Recover f(0) from points using Lagrange interpolation.

    The formula is:
        f(0) = sum_{i} y_i * L_i(0)

    Where L_i(0) is the Lagrange basis polynomial evaluated at 0:
        L_i(0) = product_{k != i} (0 - x_k) / (x_i - x_k)
               = product_{k != i} (-x_k) / (x_i - x_k)

    Raises:
        DegenerateSharesError: If two points share an x-coordinate
    """
    result = 0

    for i, point_i in enumerate(points):
        numerator = 1
        denominator = 1

        for k, point_k in enumerate(points):
            if i == k:
                continue

            numerator = mul(numerator, -point_k.x, prime)
            denominator = mul(denominator, point_i.x - point_k.x, prime)

        lagrange_coeff = mul(numerator, mod_inverse(denominator, prime), prime)
        result = add(result, mul(point_i.y, lagrange_coeff, prime), prime)

    return result


def _split_share(share: bytes) -> list[SharePoint]:
    """Decode a share into its per-chunk points."""
    return [
        SharePoint.from_bytes(share[start : start + POINT_SIZE])
        for start in range(0, len(share), POINT_SIZE)
    ]


def _validate_shares(shares: list[bytes]) -> int:
    """
    Check the structure of a share set before any arithmetic.

    Returns:
        Number of chunks carried by each share

    Raises:
        ValidationError: If the list is empty, a share is empty, a share
            length is not a multiple of POINT_SIZE, or lengths differ
    """
    if not shares:
        raise ValidationError("At least one share required")

    expected = None
    for index, share in enumerate(shares):
        if len(share) == 0:
            raise ValidationError(f"Share {index} is empty")
        if len(share) % POINT_SIZE != 0:
            raise ValidationError(
                f"Share {index} size {len(share)} is not divisible by {POINT_SIZE}"
            )
        if expected is None:
            expected = len(share)
        elif len(share) != expected:
            raise ValidationError(
                f"All shares shall have the same size of {expected} bytes, "
                f"share {index} has {len(share)}"
            )

    return expected // POINT_SIZE


def create_shares(
    min_shares: int, total_shares: int, secret: list[int], prime: int = PRIME
) -> list[bytes]:
    """
    Split a chunked secret into total_shares shares with threshold min_shares.

    Args:
        min_shares: Minimum shares needed for reconstruction
        total_shares: Total number of shares to generate
        secret: Field elements, one per chunk (see chunks.bytes_to_elements)
        prime: Prime for finite field (default: 256-bit prime)

    Returns:
        total_shares byte strings, each len(secret) * 64 bytes long

    Raises:
        ValidationError: If parameters are invalid
        RandomSourceError: If the secure random source fails

    Example:
        >>> shares = create_shares(2, 3, [12345])
        >>> len(shares), len(shares[0])
        (3, 64)
    """
    if min_shares < 1:
        raise ValidationError("Minimum shares must be at least 1")
    if min_shares > total_shares:
        raise ValidationError("Minimum shares cannot be bigger than total shares")
    if not secret:
        raise ValidationError("Secret must contain at least one chunk")
    for index, value in enumerate(secret):
        if not 0 <= value < prime:
            raise ValidationError(
                f"Secret chunk {index} must be in range [0, {prime - 1}]"
            )

    logger.debug(
        "Creating %d shares (threshold %d) for %d chunks",
        total_shares,
        min_shares,
        len(secret),
    )

    polynomials = [
        _generate_polynomial(value, min_shares, prime) for value in secret
    ]

    shares = []
    for _ in range(total_shares):
        share = bytearray()
        for coefficients in polynomials:
            # Fresh abscissa per (share, chunk); collisions are not checked
            # here and surface as DegenerateSharesError on combine.
            x = uniform_random(prime)
            y = _evaluate_polynomial(coefficients, x, prime)
            share.extend(SharePoint(x=x, y=y).to_bytes())
        shares.append(bytes(share))

    return shares


def combine_shares(shares: list[bytes], prime: int = PRIME) -> bytes:
    """
    Reconstruct the secret bytes from shares.

    Args:
        shares: Share byte strings produced by create_shares (at least
            threshold of them for a correct result)
        prime: Prime for finite field

    Returns:
        Secret bytes, 32 bytes per chunk

    Raises:
        ValidationError: If the share structure is invalid
        DegenerateSharesError: If two shares carry the same x-coordinate
            for one chunk
    """
    chunk_count = _validate_shares(shares)

    logger.debug(
        "Combining %d shares of %d chunks", len(shares), chunk_count
    )

    decoded = [_split_share(share) for share in shares]

    secret = []
    for j in range(chunk_count):
        points = [share_points[j] for share_points in decoded]
        try:
            secret.append(_interpolate_at_zero(points, prime))
        except DegenerateSharesError as e:
            raise DegenerateSharesError(
                f"Duplicate x-coordinate among shares for chunk {j}"
            ) from e

    return elements_to_bytes(secret)
