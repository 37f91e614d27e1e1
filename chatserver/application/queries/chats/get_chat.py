"""Get Chat Query."""

from dataclasses import dataclass

from chatserver.application.common.interfaces import Query, QueryHandler
from chatserver.domain.entities.chat import Chat
from chatserver.domain.exceptions import EntityNotFoundError
from chatserver.domain.ports.repositories import ChatRepository


@dataclass(frozen=True)
class GetChatQuery(Query[Chat]):
    chat_id: int


class GetChatHandler(QueryHandler[Chat]):
    def __init__(self, chat_repository: ChatRepository):
        self._chat_repository = chat_repository

    async def execute(self, query: GetChatQuery) -> Chat:
        chat = await self._chat_repository.get_by_id(query.chat_id)
        if not chat:
            raise EntityNotFoundError(f"Chat {query.chat_id} not found")
        return chat
