"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (SQLAlchemy, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from chatserver.domain.ports.repositories.chat_repository import ChatRepository
from chatserver.domain.ports.repositories.user_repository import UserRepository
from chatserver.domain.ports.repositories.workspace_repository import (
    WorkspaceRepository,
)

__all__ = [
    "ChatRepository",
    "UserRepository",
    "WorkspaceRepository",
]
