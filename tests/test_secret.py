"""Tests for the public create/combine entry points."""

import os
import random
import secrets

import pytest

from splitsecret.core.secret import create, combine, is_proper_size
from splitsecret.errors import RandomSourceError, SSSError, ValidationError


class TestProperSize:
    """Tests for secret length checks."""

    def test_multiples_of_32(self):
        """Positive multiples of 32 are accepted."""
        assert is_proper_size(b"x" * 32)
        assert is_proper_size(b"x" * 256)

    def test_other_lengths(self):
        """Empty and unaligned secrets are rejected."""
        assert not is_proper_size(b"")
        assert not is_proper_size(b"x" * 31)
        assert not is_proper_size(b"x" * 33)


class TestCreateCombine:
    """End-to-end tests through the public API."""

    def test_four_of_five(self):
        """Any 4 of 5 shares recover a 128-byte secret, 3 do not."""
        secret = os.urandom(128)
        shares = create(4, 5, secret)

        assert len(shares) == 5
        assert all(len(share) == 256 for share in shares)

        random.shuffle(shares)
        assert combine(shares[:4]) == secret
        assert combine(shares) == secret
        assert combine(shares[:3]) != secret

    def test_doubling_secret_sizes(self):
        """Round trip should hold as the secret grows."""
        size = 32
        for _ in range(5):
            secret = os.urandom(size)
            assert combine(create(50, 100, secret)) == secret
            size *= 2

    def test_unaligned_secret(self):
        """Secret length must be a multiple of 32."""
        with pytest.raises(ValidationError, match="multiple of 32"):
            create(2, 3, b"x" * 40)

    def test_empty_secret(self):
        """Empty secrets are rejected before reaching the engine."""
        with pytest.raises(ValidationError, match="multiple of 32, got 0"):
            create(2, 3, b"")

    def test_min_bigger_than_total(self):
        """Share counts are validated by the engine."""
        with pytest.raises(SSSError, match="bigger than total"):
            create(4, 3, b"x" * 32)

    def test_combine_unequal_shares(self):
        """Mixing shares of different secrets sizes is rejected."""
        small = create(2, 2, os.urandom(32))
        large = create(2, 2, os.urandom(64))

        with pytest.raises(ValueError, match="same size"):
            combine([small[0], large[0]])


class TestRandomSourceFailure:
    """Tests for CSPRNG failure during share creation."""

    def test_failure_propagates_from_create(self, monkeypatch):
        """A failing random source aborts create with RandomSourceError."""
        results = []

        def broken(upper):
            raise OSError("entropy unavailable")

        monkeypatch.setattr(secrets, "randbelow", broken)

        with pytest.raises(RandomSourceError, match="entropy unavailable"):
            results.append(create(2, 3, os.urandom(64)))

        assert results == []
