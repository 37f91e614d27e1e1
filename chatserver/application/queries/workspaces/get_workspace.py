"""Get Workspace Query."""

from dataclasses import dataclass

from chatserver.application.common.interfaces import Query, QueryHandler
from chatserver.domain.entities.workspace import Workspace
from chatserver.domain.exceptions import WorkspaceMissing
from chatserver.domain.ports.repositories import WorkspaceRepository


@dataclass(frozen=True)
class GetWorkspaceQuery(Query[Workspace]):
    workspace_id: int


class GetWorkspaceHandler(QueryHandler[Workspace]):
    def __init__(self, workspace_repository: WorkspaceRepository):
        self._workspace_repository = workspace_repository

    async def execute(self, query: GetWorkspaceQuery) -> Workspace:
        workspace = await self._workspace_repository.get_by_id(query.workspace_id)
        if not workspace:
            raise WorkspaceMissing(f"Workspace {query.workspace_id} not found")
        return workspace
