"""
COMMANDS - Write operations (CQRS)

Subfolders:
- auth/  → signup, signin
- chats/ → create_chat, update_chat, delete_chat
"""

from chatserver.application.commands.auth import (
    SigninCommand,
    SigninHandler,
    SignupCommand,
    SignupHandler,
    SignupResult,
)
from chatserver.application.commands.chats import (
    CreateChatCommand,
    CreateChatHandler,
    DeleteChatCommand,
    DeleteChatHandler,
    UpdateChatCommand,
    UpdateChatHandler,
)

__all__ = [
    # auth
    "SigninCommand",
    "SigninHandler",
    "SignupCommand",
    "SignupHandler",
    "SignupResult",
    # chats
    "CreateChatCommand",
    "CreateChatHandler",
    "DeleteChatCommand",
    "DeleteChatHandler",
    "UpdateChatCommand",
    "UpdateChatHandler",
]
