"""bcrypt password hashing for admin accounts."""

import bcrypt

from folio_identity.exceptions import WeakPasswordError

DEFAULT_BCRYPT_ROUNDS = 12


class PasswordHashingService:
    """
    Hash and check admin passwords with bcrypt.

    Passwords are 6 to 128 characters. bcrypt ignores everything after the
    first 72 bytes (and bcrypt>=4.1 refuses such input outright), so longer
    UTF-8 encodings are rejected up front instead of being silently cut.
    """

    MIN_LENGTH = 6
    MAX_LENGTH = 128
    MAX_BCRYPT_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_BCRYPT_ROUNDS):
        self._rounds = rounds

    def hash(self, password: str) -> str:
        self.validate_strength(password)
        hashed = bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=self._rounds))
        return hashed.decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """Return True if ``password`` matches; malformed hashes never match."""
        if not password or not password_hash:
            return False
        encoded = _encode(password)
        if len(encoded) > self.MAX_BCRYPT_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("ascii"))
        except (ValueError, UnicodeEncodeError):
            return False

    def validate_strength(self, password: str) -> None:
        """
        Enforce the password length policy.

        Raises
        ------
        WeakPasswordError
            If the password is empty, too short or too long
        """
        if not password:
            msg = "Password is required"
            raise WeakPasswordError(msg)
        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)
        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)
        if len(_encode(password)) > self.MAX_BCRYPT_BYTES:
            msg = f"Password cannot exceed {self.MAX_BCRYPT_BYTES} bytes"
            raise WeakPasswordError(msg)


def _encode(password: str) -> bytes:
    return password.encode("utf-8")
