"""
User Entities - A workspace member.

Two shapes of the same person:
- UserRecord: persistence-side row, carries the password hash.
- User: public identity (token snapshot / API output), never carries it.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from chatserver.domain.value_objects.user_email import UserEmail


@dataclass(frozen=True)
class User:
    id: int
    ws_id: int
    fullname: str
    email: UserEmail
    created_at: Optional[datetime] = None


@dataclass
class UserRecord:
    id: int
    ws_id: int
    fullname: str
    email: UserEmail
    password_hash: str
    created_at: datetime

    def to_user(self) -> User:
        return User(
            id=self.id,
            ws_id=self.ws_id,
            fullname=self.fullname,
            email=self.email,
            created_at=self.created_at,
        )
