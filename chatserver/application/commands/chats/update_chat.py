"""Update Chat Command."""

from dataclasses import dataclass

from chatserver.application.commands.chats.create_chat import validate_spec
from chatserver.application.common.interfaces import Command, CommandHandler
from chatserver.domain.entities.chat import Chat, ChatSpec
from chatserver.domain.entities.user import User
from chatserver.domain.exceptions import EntityNotFoundError
from chatserver.domain.policies import authorize_update
from chatserver.domain.ports.repositories import ChatRepository, UserRepository
from chatserver.domain.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class UpdateChatCommand(Command[Chat]):
    chat_id: int
    actor: User
    spec: ChatSpec


class UpdateChatHandler(CommandHandler[Chat]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        user_repository: UserRepository,
        unit_of_work: UnitOfWork,
    ):
        self._chat_repository = chat_repository
        self._user_repository = user_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: UpdateChatCommand) -> Chat:
        chat = await self._chat_repository.get_by_id(command.chat_id)
        if not chat:
            raise EntityNotFoundError(f"Chat {command.chat_id} not found")

        authorize_update(command.actor, chat)
        await validate_spec(command.spec, self._user_repository)

        updated = await self._chat_repository.update(command.chat_id, command.spec)
        if not updated:
            raise EntityNotFoundError(f"Chat {command.chat_id} not found")

        await self._unit_of_work.commit()
        return updated
