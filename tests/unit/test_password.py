"""Unit tests for password hashing."""

import pytest

from movie_api.kernel.identity.password import (
    BCRYPT_ROUNDS,
    PasswordHasher,
    _dummy_hash,
    burn_verification,
    hash_password,
    verify_password,
    warm_up,
)


class TestPasswordHasher:
    """Tests for PasswordHasher."""

    def test_hash_creates_different_hashes(self):
        """Same password should create different hashes (due to salt)."""
        password = "longpass1"
        hash1 = PasswordHasher.hash(password)
        hash2 = PasswordHasher.hash(password)

        assert hash1 != hash2
        assert hash1.startswith("$2b$")  # bcrypt prefix

    def test_hash_encodes_cost_factor(self):
        hashed = PasswordHasher.hash("longpass1")
        assert hashed.split("$")[2] == f"{BCRYPT_ROUNDS:02d}"
        assert "longpass1" not in hashed

    @pytest.mark.parametrize("password", ["eightchr", "twentycharacters1234", "pässwörd!"])
    def test_verify_correct_password(self, password):
        """Correct password should verify successfully."""
        hashed = PasswordHasher.hash(password, rounds=4)

        assert PasswordHasher.verify(password, hashed) is True

    @pytest.mark.parametrize("wrong", ["longpass2", "LONGPASS1", "longpass", "longpass1 ", ""])
    def test_verify_wrong_password(self, wrong):
        """Any other password should fail verification."""
        hashed = PasswordHasher.hash("longpass1", rounds=4)

        assert PasswordHasher.verify(wrong, hashed) is False

    @pytest.mark.parametrize("digest", ["", "not-a-hash", "$2b$12$tooshort", None])
    def test_verify_malformed_hash_returns_false(self, digest):
        assert PasswordHasher.verify("longpass1", digest) is False

    def test_only_first_72_bytes_are_significant(self):
        base = "x" * 72
        hashed = PasswordHasher.hash(base + "tail-one", rounds=4)

        assert PasswordHasher.verify(base + "tail-two", hashed) is True

    def test_convenience_functions(self):
        """Test hash_password and verify_password functions."""
        hashed = hash_password("longpass1")

        assert verify_password("longpass1", hashed) is True
        assert verify_password("wrong", hashed) is False

    def test_burn_verification_returns_nothing(self):
        assert burn_verification("whatever") is None

    def test_warm_up_precomputes_dummy_hash(self):
        """After warm-up the first failed login does no extra hashing."""
        _dummy_hash.cache_clear()

        warm_up()
        burn_verification("whatever")

        info = _dummy_hash.cache_info()
        assert info.currsize == 1
        assert info.misses == 1
        assert info.hits == 1
