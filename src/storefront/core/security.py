"""Password hashing."""

import bcrypt

from src.storefront.runtime.context import get_config

MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """One-way password hashing backed by bcrypt."""

    def __init__(self, rounds: int | None = None) -> None:
        self._rounds = rounds or get_config().security.bcrypt_rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash ``password`` with a fresh salt.

        Returns:
            The bcrypt hash as text, suitable for storage.

        Raises:
            ValueError: The password exceeds bcrypt's 72-byte input limit.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password exceeds {MAX_PASSWORD_BYTES} bytes")
        hashed = bcrypt.hashpw(encoded, bcrypt.gensalt(self._rounds))
        return hashed.decode("utf-8")

    def verify(self, password: str, hashed: str) -> bool:
        """Check ``password`` against a stored hash.

        A malformed stored hash counts as a mismatch.
        """
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            return False
