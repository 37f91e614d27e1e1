"""
TokenService - Issues and verifies EdDSA-signed JWTs.

Claims:
- sub: user id (string, as RFC 7519 requires)
- ws_id, fullname, email: the user snapshot
- iat, exp, iss, aud: standard registered claims
"""

import logging
from datetime import datetime, timedelta, timezone

import jwt

from chatserver.domain.entities.user import User
from chatserver.domain.exceptions import (
    ExpiredToken,
    InvalidToken,
    MalformedToken,
    SigningError,
)
from chatserver.domain.value_objects.user_email import UserEmail
from chatserver.infrastructure.security.keys import TokenKeys

logger = logging.getLogger(__name__)

ALGORITHM = "EdDSA"
REQUIRED_CLAIMS = ["sub", "exp", "iat", "iss", "aud"]


class TokenService:
    def __init__(
        self,
        keys: TokenKeys,
        issuer: str,
        audience: str,
        ttl: timedelta = timedelta(days=7),
    ):
        self._keys = keys
        self._issuer = issuer
        self._audience = audience
        self._ttl = ttl

    def issue(self, user: User) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user.id),
            "ws_id": user.ws_id,
            "fullname": user.fullname,
            "email": str(user.email),
            "iat": now,
            "exp": now + self._ttl,
            "iss": self._issuer,
            "aud": self._audience,
        }
        try:
            return jwt.encode(payload, self._keys.signing_key, algorithm=ALGORITHM)
        except (jwt.PyJWTError, TypeError, ValueError) as e:
            raise SigningError(f"Can not sign token: {e}") from e

    def verify(self, token: str) -> User:
        try:
            claims = jwt.decode(
                token,
                self._keys.verifying_key,
                algorithms=[ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise ExpiredToken() from e
        except jwt.InvalidSignatureError as e:
            raise InvalidToken("Invalid token signature") from e
        except jwt.DecodeError as e:
            raise MalformedToken(f"Malformed token: {e}") from e
        except jwt.InvalidTokenError as e:
            raise InvalidToken(f"Invalid token: {e}") from e

        try:
            return User(
                id=int(claims["sub"]),
                ws_id=int(claims["ws_id"]),
                fullname=claims["fullname"],
                email=UserEmail(claims["email"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Token with unusable claims rejected: {e}")
            raise InvalidToken("Missing required claims in token") from e
