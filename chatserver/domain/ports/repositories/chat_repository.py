"""
Chat Repository Port - Interface for chat persistence.
Implementation: chatserver/infrastructure/persistence/sqlalchemy_chat_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatserver.domain.entities.chat import Chat, ChatSpec


class ChatRepository(ABC):
    @abstractmethod
    async def get_by_id(self, chat_id: int) -> Optional[Chat]: ...

    @abstractmethod
    async def list_by_workspace(self, ws_id: int) -> list[Chat]: ...

    @abstractmethod
    async def create(self, ws_id: int, spec: ChatSpec) -> Chat: ...

    @abstractmethod
    async def update(self, chat_id: int, spec: ChatSpec) -> Optional[Chat]:
        """Replace name, members and type. Returns None if the row is gone."""
        ...

    @abstractmethod
    async def delete(self, chat_id: int) -> bool:
        """Returns True if a row was deleted."""
        ...
