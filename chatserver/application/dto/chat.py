"""Chat DTOs for API request/response."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional

from chatserver.domain.entities.chat import Chat
from chatserver.domain.value_objects.chat_type import ChatType


class ChatDTO(BaseModel):
    """DTO for chat data returned to frontend."""

    id: int
    ws_id: int
    name: Optional[str] = None
    type: ChatType
    members: list[int]
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, chat: Chat) -> "ChatDTO":
        return cls(
            id=chat.id,
            ws_id=chat.ws_id,
            name=chat.name,
            type=chat.type,
            members=list(chat.members),
            created_at=chat.created_at,
        )
