"""Tests for prime field arithmetic."""

import secrets

import pytest

from splitsecret.crypto.field import (
    PRIME,
    add,
    sub,
    mul,
    mod_inverse,
    uniform_random,
)
from splitsecret.errors import DegenerateSharesError, RandomSourceError, SSSError


class TestPrime:
    """Tests for the field modulus."""

    def test_prime_value(self):
        """Modulus should be the fixed 256-bit prime."""
        assert PRIME == int(
            "115792089237316195423570985008687907853269984665640564039457584007913129639747"
        )
        assert PRIME.bit_length() == 256


class TestArithmetic:
    """Tests for modular add/sub/mul."""

    def test_add_wraps(self):
        """Sum at or above the prime should wrap around."""
        assert add(PRIME - 1, 1) == 0
        assert add(PRIME - 1, 5) == 4

    def test_sub_normalises_negative(self):
        """Negative differences should land in [0, prime)."""
        assert sub(0, 1) == PRIME - 1
        assert sub(3, 10) == PRIME - 7
        assert sub(10, 3) == 7

    def test_mul_reduces(self):
        """Products should be reduced modulo the prime."""
        assert mul(PRIME - 1, PRIME - 1) == 1  # (-1) * (-1)
        assert mul(2, 3) == 6

    def test_small_prime(self):
        """Explicit prime argument should be honoured."""
        assert add(15, 5, prime=17) == 3
        assert sub(2, 5, prime=17) == 14
        assert mul(4, 5, prime=17) == 3


class TestModInverse:
    """Tests for modular inverse."""

    def test_inverse_property(self):
        """a * a^-1 should equal 1 mod p."""
        for a in [1, 2, 12345, PRIME - 1, 2**200 + 7]:
            assert mul(a, mod_inverse(a)) == 1

    def test_inverse_of_negative(self):
        """Negative inputs should be inverted as their residue."""
        assert mul(-3 % PRIME, mod_inverse(-3)) == 1

    def test_inverse_of_zero(self):
        """Zero has no inverse."""
        with pytest.raises(DegenerateSharesError, match="inverse of zero"):
            mod_inverse(0)

    def test_inverse_of_multiple_of_prime(self):
        """Values congruent to zero have no inverse."""
        with pytest.raises(ArithmeticError):
            mod_inverse(PRIME * 3)


class TestUniformRandom:
    """Tests for secure random sampling."""

    def test_range(self):
        """Samples should lie in [0, upper)."""
        for _ in range(200):
            assert 0 <= uniform_random() < PRIME
        for _ in range(200):
            assert 0 <= uniform_random(17) < 17

    def test_unique_values(self):
        """256-bit samples should not repeat."""
        values = {uniform_random() for _ in range(1000)}
        assert len(values) == 1000

    def test_covers_small_range(self):
        """All residues of a small modulus should eventually appear."""
        values = {uniform_random(5) for _ in range(500)}
        assert values == {0, 1, 2, 3, 4}

    def test_random_source_failure_propagates(self, monkeypatch):
        """CSPRNG failure should raise RandomSourceError, not fall back."""

        def broken(upper):
            raise OSError("entropy unavailable")

        monkeypatch.setattr(secrets, "randbelow", broken)

        with pytest.raises(RandomSourceError, match="entropy unavailable") as info:
            uniform_random()

        assert isinstance(info.value, SSSError)
        assert isinstance(info.value.__cause__, OSError)
