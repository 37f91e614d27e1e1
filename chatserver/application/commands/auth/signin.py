"""
Signin Command.

Returns a token, or None. Unknown email and wrong password are
indistinguishable to the caller: both run exactly one Argon2 verification
and both return None.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Optional

from chatserver.application.common.interfaces import Command, CommandHandler
from chatserver.domain.ports.repositories import UserRepository
from chatserver.domain.value_objects.user_email import UserEmail
from chatserver.infrastructure.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SigninCommand(Command[Optional[str]]):
    email: str
    password: str


class SigninHandler(CommandHandler[Optional[str]]):
    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, command: SigninCommand) -> Optional[str]:
        try:
            email = UserEmail(command.email)
        except ValueError:
            email = None

        record = await self._user_repository.get_by_email(email) if email else None
        if record is None:
            await asyncio.to_thread(self._password_hasher.verify_dummy, command.password)
            logger.info("Signin rejected")
            return None

        valid = await asyncio.to_thread(
            self._password_hasher.verify, command.password, record.password_hash
        )
        if not valid:
            logger.info("Signin rejected")
            return None

        return self._token_service.issue(record.to_user())
