"""
Create Chat Command.

The chat is created in the acting user's workspace. Membership rules are
checked in order (count, name for large groups, members exist); only then is
the type computed and the row written.
"""

from dataclasses import dataclass

from chatserver.application.common.interfaces import Command, CommandHandler
from chatserver.domain.entities.chat import Chat, ChatSpec
from chatserver.domain.entities.user import User
from chatserver.domain.ports.repositories import ChatRepository, UserRepository
from chatserver.domain.ports.unit_of_work import UnitOfWork


async def validate_spec(spec: ChatSpec, user_repository: UserRepository) -> None:
    spec.check_shape()
    spec.check_members_exist(await user_repository.existing_ids(spec.members))


@dataclass(frozen=True)
class CreateChatCommand(Command[Chat]):
    actor: User
    spec: ChatSpec


class CreateChatHandler(CommandHandler[Chat]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
    ):
        self._chat_repository = chat_repository
        self._user_repository = user_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: CreateChatCommand) -> Chat:
        await validate_spec(command.spec, self._user_repository)
        chat = await self._chat_repository.create(command.actor.ws_id, command.spec)
        await self._unit_of_work.commit()
        return chat
