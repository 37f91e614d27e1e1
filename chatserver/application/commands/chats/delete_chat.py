"""Delete Chat Command."""

import logging
from dataclasses import dataclass

from chatserver.application.common.interfaces import Command, CommandHandler
from chatserver.domain.entities.user import User
from chatserver.domain.exceptions import EntityNotFoundError, InvalidArgument
from chatserver.domain.policies import authorize_delete
from chatserver.domain.ports.repositories import ChatRepository, WorkspaceRepository
from chatserver.domain.ports.unit_of_work import UnitOfWork

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteChatCommand(Command[bool]):
    chat_id: int
    actor: User


class DeleteChatHandler(CommandHandler[bool]):
    def __init__(
        self,
        chat_repository: ChatRepository,
        workspace_repository: WorkspaceRepository,
        unit_of_work: UnitOfWork,
    ):
        self._chat_repository = chat_repository
        self._workspace_repository = workspace_repository
        self._unit_of_work = unit_of_work

    async def execute(self, command: DeleteChatCommand) -> bool:
        if command.chat_id == 0:
            raise InvalidArgument("Chat with id=0 can not be deleted")

        chat = await self._chat_repository.get_by_id(command.chat_id)
        if not chat:
            raise EntityNotFoundError(f"Chat {command.chat_id} not found")

        workspace = await self._workspace_repository.get_by_id(chat.ws_id)
        authorize_delete(command.actor, chat, workspace)

        if not await self._chat_repository.delete(command.chat_id):
            raise EntityNotFoundError(f"Chat {command.chat_id} not found")

        await self._unit_of_work.commit()
        logger.info(f"Chat {command.chat_id} deleted by user {command.actor.id}")
        return True
