"""
API Routers - FastAPI endpoint definitions.
"""

from chatserver.presentation.api.auth import router as auth_router
from chatserver.presentation.api.chats import router as chats_router
from chatserver.presentation.api.workspaces import router as workspaces_router

__all__ = [
    "auth_router",
    "chats_router",
    "workspaces_router",
]
