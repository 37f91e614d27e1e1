"""DTOs for API responses."""

from chatserver.application.dto.chat import ChatDTO
from chatserver.application.dto.user import UserDTO
from chatserver.application.dto.workspace import WorkspaceDTO

__all__ = [
    "ChatDTO",
    "UserDTO",
    "WorkspaceDTO",
]
