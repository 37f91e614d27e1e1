"""
QUERIES - Read operations (CQRS)

Queries retrieve data without modifying state. Each query has:
- Query class: Parameters for the read
- Handler class: Executes the read

Subfolders:
- chats/      → list_chats, get_chat
- workspaces/ → get_workspace, list_workspace_users
"""

from chatserver.application.queries.chats import (
    GetChatHandler,
    GetChatQuery,
    ListChatsHandler,
    ListChatsQuery,
)
from chatserver.application.queries.workspaces import (
    GetWorkspaceHandler,
    GetWorkspaceQuery,
    ListWorkspaceUsersHandler,
    ListWorkspaceUsersQuery,
)

__all__ = [
    # chats
    "GetChatHandler",
    "GetChatQuery",
    "ListChatsHandler",
    "ListChatsQuery",
    # workspaces
    "GetWorkspaceHandler",
    "GetWorkspaceQuery",
    "ListWorkspaceUsersHandler",
    "ListWorkspaceUsersQuery",
]
