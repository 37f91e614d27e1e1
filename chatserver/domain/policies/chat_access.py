"""
Chat access policy.

- update: the acting user must belong to the chat's workspace
- delete: the acting user must own the chat's workspace
"""

from typing import Optional

from chatserver.domain.entities.chat import Chat
from chatserver.domain.entities.user import User
from chatserver.domain.entities.workspace import Workspace
from chatserver.domain.exceptions import (
    CrossWorkspaceDenied,
    NotWorkspaceOwner,
    WorkspaceMissing,
)


def authorize_update(actor: User, chat: Chat) -> None:
    if actor.ws_id != chat.ws_id:
        raise CrossWorkspaceDenied()


def authorize_delete(actor: User, chat: Chat, workspace: Optional[Workspace]) -> None:
    if workspace is None or workspace.id != chat.ws_id:
        raise WorkspaceMissing()
    if not workspace.is_owned_by(actor.id):
        raise NotWorkspaceOwner()
