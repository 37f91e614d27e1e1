"""
Authentication Dependency for FastAPI (the Auth Gate).

- Extracts the bearer token from the Authorization header
- Verifies it with the app-scoped TokenService from the DI container
- Returns the User snapshot carried by the token; nothing is read from or
  written to the database
- Raises HTTPException 401 if the token is missing, expired or invalid

The verified user id is bound to the logging context for the rest of the
request.
"""

import logging
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from chatserver.config.logging_config import user_id_var
from chatserver.domain.entities.user import User
from chatserver.domain.exceptions import AuthenticationError
from chatserver.infrastructure.security import TokenService

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> User:
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Missing bearer token")

    token_service = await request.state.dishka_container.get(TokenService)
    try:
        user = token_service.verify(credentials.credentials)
    except AuthenticationError as e:
        logger.info(f"Rejected token: {e}")
        raise _unauthorized(str(e)) from e

    user_id_var.set(str(user.id))
    return user
