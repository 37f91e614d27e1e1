"""User DTO - public identity, no password hash."""

from datetime import datetime
from pydantic import BaseModel
from typing import Optional

from chatserver.domain.entities.user import User


class UserDTO(BaseModel):
    id: int
    ws_id: int
    fullname: str
    email: str
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            ws_id=user.ws_id,
            fullname=user.fullname,
            email=str(user.email),
            created_at=user.created_at,
        )
