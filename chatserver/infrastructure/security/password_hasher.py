"""
PasswordHasher - Argon2id hashing via passlib.

hash() produces a PHC string ($argon2id$v=19$m=...,t=...,p=...$salt$digest)
with a fresh random salt, so verification needs nothing but the string.
"""

import logging
import secrets

from passlib.context import CryptContext

from chatserver.domain.exceptions import MalformedCredential

logger = logging.getLogger(__name__)


class PasswordHasher:
    def __init__(self, context: CryptContext | None = None):
        self._context = context or CryptContext(
            schemes=["argon2"], argon2__type="id", deprecated="auto"
        )
        # signin runs one verification against this when the email is unknown
        self._dummy_hash = self._context.hash(secrets.token_urlsafe(16))

    def hash(self, password: str) -> str:
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check password against a stored hash.

        Returns False on mismatch. Raises MalformedCredential only when the
        stored hash itself cannot be parsed.
        """
        try:
            return self._context.verify(password, password_hash)
        except (ValueError, TypeError) as e:
            logger.error(f"Stored password hash is malformed: {e}")
            raise MalformedCredential(str(e)) from e

    def verify_dummy(self, password: str) -> bool:
        """Spend one verification's worth of work; always False."""
        self._context.verify(password, self._dummy_hash)
        return False
