"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chatserver.domain.entities.chat import Chat, ChatSpec
from chatserver.domain.entities.user import User, UserRecord
from chatserver.domain.entities.workspace import Workspace

__all__ = [
    "Chat",
    "ChatSpec",
    "User",
    "UserRecord",
    "Workspace",
]
