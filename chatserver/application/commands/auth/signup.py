"""
Signup Command.

Creates a user, joining (or creating) the named workspace. The first user
into an unowned workspace becomes its owner.

Everything up to the ownership claim runs in the request's unit of work,
so a failure anywhere leaves neither a new workspace nor a new user behind.
The claim itself is a compare-and-set (owner must still be 0 and the user
must belong to the workspace): of two concurrent signups into a fresh
workspace only one can win it.
"""

import asyncio
import logging
from dataclasses import dataclass

from chatserver.application.common.interfaces import Command, CommandHandler
from chatserver.domain.entities.user import User
from chatserver.domain.entities.workspace import Workspace
from chatserver.domain.exceptions import (
    DuplicateWorkspace,
    EmailAlreadyExists,
    OwnershipAssignmentFailed,
)
from chatserver.domain.ports.repositories import UserRepository, WorkspaceRepository
from chatserver.domain.ports.unit_of_work import UnitOfWork
from chatserver.domain.value_objects.user_email import UserEmail
from chatserver.infrastructure.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignupResult:
    user: User
    token: str


@dataclass(frozen=True)
class SignupCommand(Command[SignupResult]):
    workspace: str
    fullname: str
    email: UserEmail
    password: str


class SignupHandler(CommandHandler[SignupResult]):
    def __init__(
        self,
        user_repository: UserRepository,
        workspace_repository: WorkspaceRepository,
        unit_of_work: UnitOfWork,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._user_repository = user_repository
        self._workspace_repository = workspace_repository
        self._unit_of_work = unit_of_work
        self._password_hasher = password_hasher
        self._token_service = token_service

    async def execute(self, command: SignupCommand) -> SignupResult:
        if await self._user_repository.get_by_email(command.email) is not None:
            raise EmailAlreadyExists(command.email.value)

        password_hash = await asyncio.to_thread(
            self._password_hasher.hash, command.password
        )

        try:
            workspace = await self._resolve_workspace(command.workspace)
            user = await self._user_repository.create(
                ws_id=workspace.id,
                fullname=command.fullname,
                email=command.email,
                password_hash=password_hash,
            )
            if not workspace.is_owned:
                await self._claim_ownership(workspace, user)

            token = self._token_service.issue(user)
            await self._unit_of_work.commit()
        except Exception:
            await self._unit_of_work.rollback()
            raise

        logger.info(f"User {user.id} signed up into workspace {workspace.id}")
        return SignupResult(user=user, token=token)

    async def _resolve_workspace(self, name: str) -> Workspace:
        workspace = await self._workspace_repository.get_by_name(name)
        if workspace is not None:
            return workspace
        try:
            return await self._workspace_repository.create(name)
        except DuplicateWorkspace:
            # lost the race to a concurrent signup; join the winner's workspace
            workspace = await self._workspace_repository.get_by_name(name)
            if workspace is None:
                raise
            return workspace

    async def _claim_ownership(self, workspace: Workspace, user: User) -> None:
        try:
            await self._workspace_repository.claim_ownership(workspace, user.id)
        except OwnershipAssignmentFailed as e:
            logger.warning(f"Signup continues without ownership: {e}")
