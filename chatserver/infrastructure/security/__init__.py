"""
Security - Credential store and token service.

Both are synchronous leaves with no I/O of their own.
"""

from chatserver.infrastructure.security.keys import (
    TokenKeys,
    generate_token_keys,
    load_token_keys,
    load_token_keys_from_config,
)
from chatserver.infrastructure.security.password_hasher import PasswordHasher
from chatserver.infrastructure.security.token_service import TokenService

__all__ = [
    "TokenKeys",
    "generate_token_keys",
    "load_token_keys",
    "load_token_keys_from_config",
    "PasswordHasher",
    "TokenService",
]
