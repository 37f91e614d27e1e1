"""List Chats Query - all chats of one workspace, oldest first."""

from dataclasses import dataclass

from chatserver.application.common.interfaces import Query, QueryHandler
from chatserver.domain.entities.chat import Chat
from chatserver.domain.ports.repositories import ChatRepository


@dataclass(frozen=True)
class ListChatsQuery(Query[list[Chat]]):
    ws_id: int


class ListChatsHandler(QueryHandler[list[Chat]]):
    def __init__(self, chat_repository: ChatRepository):
        self._chat_repository = chat_repository

    async def execute(self, query: ListChatsQuery) -> list[Chat]:
        return await self._chat_repository.list_by_workspace(query.ws_id)
