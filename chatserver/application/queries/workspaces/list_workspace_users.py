"""
List Workspace Users Query.

Lists every member of the caller's workspace. Password hashes never leave the
repository: members come back as plain User entities.
"""

from dataclasses import dataclass

from chatserver.application.common.interfaces import Query, QueryHandler
from chatserver.domain.entities.user import User
from chatserver.domain.ports.repositories import WorkspaceRepository


@dataclass(frozen=True)
class ListWorkspaceUsersQuery(Query[list[User]]):
    ws_id: int


class ListWorkspaceUsersHandler(QueryHandler[list[User]]):
    def __init__(self, workspace_repository: WorkspaceRepository):
        self._workspace_repository = workspace_repository

    async def execute(self, query: ListWorkspaceUsersQuery) -> list[User]:
        return await self._workspace_repository.list_members(query.ws_id)
