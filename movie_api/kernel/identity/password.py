"""
Password hashing utilities using bcrypt.
"""

from functools import lru_cache

import bcrypt

# Number of rounds for bcrypt hashing (12 is secure default)
BCRYPT_ROUNDS = 12


class PasswordHasher:
    """Password hashing service."""

    @staticmethod
    def _truncate_password(password: str) -> bytes:
        """
        Truncate password to 72 bytes (bcrypt limit) and encode.

        bcrypt only uses the first 72 bytes of a password.
        """
        return password.encode("utf-8")[:72]

    @staticmethod
    def hash(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
        """
        Hash a password using bcrypt.

        The result is a crypt-style string ($2b$<cost>$<salt><digest>),
        so verification needs nothing but the string itself.

        Args:
            password: Plain text password
            rounds: bcrypt cost factor

        Returns:
            Hashed password string
        """
        pwd_bytes = PasswordHasher._truncate_password(password)
        salt = bcrypt.gensalt(rounds=rounds)
        hashed = bcrypt.hashpw(pwd_bytes, salt)
        return hashed.decode("utf-8")

    @staticmethod
    def verify(plain_password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Stored hashed password

        Returns:
            True if password matches, False otherwise (including when the
            stored hash is malformed)
        """
        try:
            pwd_bytes = PasswordHasher._truncate_password(plain_password)
            hash_bytes = hashed_password.encode("utf-8")
            return bcrypt.checkpw(pwd_bytes, hash_bytes)
        except (ValueError, TypeError, AttributeError):
            return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return PasswordHasher.hash("dummy-password-for-timing")


# Convenience functions
def hash_password(password: str) -> str:
    """Hash a password."""
    return PasswordHasher.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password."""
    return PasswordHasher.verify(plain_password, hashed_password)


def burn_verification(plain_password: str) -> None:
    """Spend one bcrypt verification so a missing user costs the same as a wrong password."""
    PasswordHasher.verify(plain_password, _dummy_hash())


def warm_up() -> None:
    """Compute the dummy hash ahead of the first failed login."""
    _dummy_hash()
