"""
Workspace Repository Port - Interface for workspace persistence.
Implementation: chatserver/infrastructure/persistence/sqlalchemy_workspace_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatserver.domain.entities.user import User
from chatserver.domain.entities.workspace import UNOWNED, Workspace


class WorkspaceRepository(ABC):
    @abstractmethod
    async def get_by_id(self, workspace_id: int) -> Optional[Workspace]: ...

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Workspace]: ...

    @abstractmethod
    async def create(self, name: str, owner_id: int = UNOWNED) -> Workspace:
        """Raises DuplicateWorkspace if the name is taken."""
        ...

    @abstractmethod
    async def update_owner(self, workspace: Workspace, owner_id: int) -> Workspace:
        """
        Set the owner, only if the user's workspace is this workspace.
        Raises OwnershipAssignmentFailed when no row was updated.
        """
        ...

    @abstractmethod
    async def claim_ownership(self, workspace: Workspace, user_id: int) -> Workspace:
        """
        Compare-and-set variant of update_owner: additionally requires the
        workspace to still be unowned. Raises OwnershipAssignmentFailed.
        """
        ...

    @abstractmethod
    async def list_members(self, workspace_id: int) -> list[User]: ...
