"""
Base interfaces for CQRS pattern.

Commands change state and are committed through the request's unit of work;
queries only read. Handlers are resolved per request from the container.

Usage:
    @dataclass(frozen=True)
    class GetChatQuery(Query[Chat]):
        chat_id: int

    class GetChatHandler(QueryHandler[Chat]):
        def __init__(self, chat_repository: ChatRepository):
            self._chat_repository = chat_repository

        async def execute(self, query: GetChatQuery) -> Chat:
            ...
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

R = TypeVar("R")


class Command(ABC, Generic[R]):
    """Parameters of a write operation; R is what its handler returns."""


class CommandHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, command: Command[R]) -> R: ...


class Query(ABC, Generic[R]):
    """Parameters of a read operation."""


class QueryHandler(ABC, Generic[R]):
    @abstractmethod
    async def execute(self, query: Query[R]) -> R: ...
