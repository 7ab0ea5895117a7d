from __future__ import annotations

import secrets

import bcrypt

from errors import ValidationError

DEFAULT_ROUNDS = 10

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted bcrypt hashing with a tunable cost factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        if not 4 <= rounds <= 31:
            raise ValueError("bcrypt rounds must be between 4 and 31")
        self._rounds = rounds
        self._dummy_digest: str | None = None

    @property
    def rounds(self) -> int:
        return self._rounds

    def dummy_digest(self) -> str:
        """
        A hash at this hasher's cost that matches no real password, made once.

        Verifying against it costs the same as verifying a stored hash.
        """
        if self._dummy_digest is None:
            self._dummy_digest = self.hash(secrets.token_urlsafe(32))
        return self._dummy_digest

    def hash(self, plaintext: str) -> str:
        """Hash with a fresh random salt; the same input never hashes the same twice."""
        raw = plaintext.encode("utf-8")
        if len(raw) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(raw, bcrypt.gensalt(rounds=self._rounds)).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """Check a password against a stored hash (constant-time compare inside bcrypt)."""
        if not isinstance(plaintext, str) or not isinstance(digest, str):
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), digest.encode("utf-8"))
        except ValueError:
            # Malformed hash, or a password bcrypt refuses to process.
            return False
