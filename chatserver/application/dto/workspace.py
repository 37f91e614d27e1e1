"""Workspace DTO."""

from datetime import datetime
from pydantic import BaseModel

from chatserver.domain.entities.workspace import Workspace


class WorkspaceDTO(BaseModel):
    id: int
    name: str
    owner_id: int
    created_at: datetime

    @classmethod
    def from_entity(cls, workspace: Workspace) -> "WorkspaceDTO":
        return cls(
            id=workspace.id,
            name=workspace.name,
            owner_id=workspace.owner_id,
            created_at=workspace.created_at,
        )
