"""Chat commands."""

from .create_chat import CreateChatCommand, CreateChatHandler
from .delete_chat import DeleteChatCommand, DeleteChatHandler
from .update_chat import UpdateChatCommand, UpdateChatHandler

__all__ = [
    "CreateChatCommand",
    "CreateChatHandler",
    "DeleteChatCommand",
    "DeleteChatHandler",
    "UpdateChatCommand",
    "UpdateChatHandler",
]
